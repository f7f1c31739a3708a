"""Down-payment reconciliation.

Exactly one of the percentage / dollar representations is authoritative
(selected by loan_type); the other is re-derived from it here.

Pure function: DealInput in, DealInput out. No rounding, no I/O.
"""

from dataclasses import replace
from decimal import Decimal

from dealmetrics.models.deal import DealInput, DownPayment, LoanType


def derived_down_payment(authoritative: DownPayment, total_project_cost: Decimal) -> Decimal:
    """Value of the non-authoritative representation.

    Percent -> dollars of total project cost, dollars -> percent of it.
    A non-positive project cost has no meaningful percentage and yields 0.
    """
    if authoritative.kind is LoanType.PERCENTAGE:
        return total_project_cost * authoritative.value / 100
    if total_project_cost > 0:
        return 100 * authoritative.value / total_project_cost
    return Decimal("0")


def reconcile(deal: DealInput) -> DealInput:
    """Return a deal whose derived down-payment field matches the authoritative one.

    Only the derived field is replaced, and only when its value changes; an
    already-consistent deal is returned as-is.
    """
    authoritative = deal.authoritative_down_payment
    derived = derived_down_payment(authoritative, deal.total_project_cost)

    if authoritative.kind is LoanType.PERCENTAGE:
        if derived != deal.down_payment_amount:
            return replace(deal, down_payment_amount=derived)
        return deal

    if derived != deal.down_payment_percent:
        return replace(deal, down_payment_percent=derived)
    return deal
