"""Comparable-properties summary route."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from dealmetrics.api.deps import get_summarizer
from dealmetrics.api.schemas import ComparablesRequest, ComparablesResponse
from dealmetrics.data.comparables import ComparablesSummarizer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/comparables", tags=["comparables"])

SUMMARY_FAILED = "An error occurred while generating the summary. Please try again."


@router.post("/summary", response_model=ComparablesResponse)
async def comparables_summary(
    req: ComparablesRequest,
    summarizer: ComparablesSummarizer = Depends(get_summarizer),
):
    summary = await summarizer.summarize(req.to_criteria())
    if summary is None:
        logger.error("No comparables summary for %s", req.location)
        raise HTTPException(status_code=502, detail=SUMMARY_FAILED)
    return ComparablesResponse(summary=summary)
