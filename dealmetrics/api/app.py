"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dealmetrics.config import settings
from dealmetrics.api.routes import deal, comparables

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Deal Metrics",
    description="Rental Property Deal Analysis",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(deal.router)
app.include_router(comparables.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
