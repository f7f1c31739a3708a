"""Canonical deals used across engine and API tests.

Scenario A: $300K purchase + $9K closing + $10K rehab, 20% down on total
project cost, 6.5% 30yr, $3,000/mo rent.
"""

from dataclasses import replace
from decimal import Decimal

import pytest

from dealmetrics.models.deal import DealInput, LoanType


@pytest.fixture
def canonical_deal() -> DealInput:
    """Scenario A, percentage down payment already reconciled."""
    return DealInput(
        purchase_price=Decimal("300000"),
        closing_costs=Decimal("9000"),
        rehab_costs=Decimal("10000"),
        loan_type=LoanType.PERCENTAGE,
        down_payment_percent=Decimal("20"),
        down_payment_amount=Decimal("63800"),
        interest_rate=Decimal("6.5"),
        loan_term=30,
        gross_monthly_rent=Decimal("3000"),
        other_monthly_income=Decimal("0"),
        property_taxes=Decimal("300"),
        insurance=Decimal("100"),
        utilities=Decimal("0"),
        other_expenses=Decimal("0"),
        vacancy=Decimal("5"),
        repairs=Decimal("5"),
        capex=Decimal("5"),
        management=Decimal("8"),
    )


@pytest.fixture
def all_cash_deal(canonical_deal) -> DealInput:
    """Scenario A paid in full: fixed down payment equal to total project cost."""
    return replace(
        canonical_deal,
        loan_type=LoanType.AMOUNT,
        down_payment_amount=Decimal("319000"),
    )


@pytest.fixture
def zero_cost_deal() -> DealInput:
    """No acquisition cost at all, with a stale percentage left over."""
    return DealInput(
        purchase_price=Decimal("0"),
        closing_costs=Decimal("0"),
        rehab_costs=Decimal("0"),
        loan_type=LoanType.AMOUNT,
        down_payment_percent=Decimal("20"),
        down_payment_amount=Decimal("0"),
        interest_rate=Decimal("6.5"),
        loan_term=30,
        gross_monthly_rent=Decimal("1000"),
    )
