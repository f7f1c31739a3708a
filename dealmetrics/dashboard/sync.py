"""Form-state helpers for the analyze page, kept free of Dash so they can be tested."""

from pydantic import ValidationError

from dealmetrics.api.schemas import DealForm
from dealmetrics.engine.reconcile import reconcile
from dealmetrics.models.deal import LoanType


def form_from_values(values: dict) -> DealForm | None:
    """Validate raw input values; None while the form is incomplete or invalid.

    Empty inputs fall back to the form defaults.
    """
    cleaned = {k: v for k, v in values.items() if v is not None and v != ""}
    try:
        return DealForm(**cleaned)
    except ValidationError:
        return None


def input_bounds(field: str) -> tuple[float | None, float | None]:
    """(min, max) for a number input, read from the DealForm field constraints."""
    minimum = maximum = None
    for constraint in DealForm.model_fields[field].metadata:
        if getattr(constraint, "ge", None) is not None:
            minimum = float(constraint.ge)
        if getattr(constraint, "le", None) is not None:
            maximum = float(constraint.le)
    return minimum, maximum


def down_payment_updates(values: dict) -> tuple[float | None, float | None]:
    """New (percent, amount) input values; None where the input should not change.

    Only the derived field is ever written, and only when its value would
    change, so the input that triggered the update is never echoed back.
    Derived values keep full float precision: after a loan-type toggle they
    become authoritative, and a rounded figure would shift the user's number.
    """
    form = form_from_values(values)
    if form is None:
        return None, None

    deal = reconcile(form.to_deal_input())
    if deal.loan_type is LoanType.PERCENTAGE:
        amount = float(deal.down_payment_amount)
        if values.get("down_payment_amount") is not None and float(values["down_payment_amount"]) == amount:
            return None, None
        return None, amount

    percent = float(deal.down_payment_percent)
    if values.get("down_payment_percent") is not None and float(values["down_payment_percent"]) == percent:
        return None, None
    return percent, None
