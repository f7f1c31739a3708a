"""Deal routes: down-payment reconciliation and metrics."""

from fastapi import APIRouter

from dealmetrics.api.schemas import DealForm, DealResponse, MetricsResponse
from dealmetrics.engine.metrics import compute_metrics
from dealmetrics.engine.reconcile import reconcile

router = APIRouter(prefix="/api/v1/deal", tags=["deal"])


@router.get("/defaults", response_model=DealForm)
async def defaults():
    """Default deal used to seed new forms."""
    return DealForm()


@router.post("/reconcile", response_model=DealResponse)
async def reconcile_deal(form: DealForm):
    """Re-derive the non-authoritative down-payment field."""
    return DealResponse.from_deal_input(reconcile(form.to_deal_input()))


@router.post("/metrics", response_model=MetricsResponse)
async def deal_metrics(form: DealForm):
    """Reconcile, then compute the full metric set.

    Reconciliation always runs first so metrics never see a stale down payment.
    """
    deal = reconcile(form.to_deal_input())
    return MetricsResponse.build(deal, compute_metrics(deal))
