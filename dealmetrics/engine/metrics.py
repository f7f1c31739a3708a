"""Deal metrics orchestrator: composes the engine sub-modules into one DealMetrics.

Pure computation. No I/O. DealInput in, DealMetrics out.
Callers are expected to pass a reconciled deal (see engine.reconcile).
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext

from dealmetrics.models.deal import DealInput
from dealmetrics.models.results import DealMetrics

from dealmetrics.engine.debt import monthly_payment, annual_debt_service
from dealmetrics.engine.cashflow import (
    potential_gross_income,
    gross_operating_income,
    operating_expenses,
    cap_rate,
    cash_on_cash,
    dscr,
)

TWO_PLACES = Decimal("0.01")

# Enough digits to quantize any form-accepted amount to cents
ENGINE_PRECISION = 60


def _money(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def compute_metrics(deal: DealInput) -> DealMetrics:
    """Derive the full metric set for a deal.

    Total over any input: degenerate divisions map to 0 (cap rate, CoC) or
    Infinity (DSCR without debt). Loan amount is not floored at zero.
    """
    with localcontext() as ctx:
        ctx.prec = ENGINE_PRECISION
        return _compute(deal)


def _compute(deal: DealInput) -> DealMetrics:
    # Capital
    total_project_cost = deal.total_project_cost
    down_payment = deal.down_payment
    loan_amount = total_project_cost - down_payment
    total_investment = down_payment + deal.closing_costs + deal.rehab_costs

    # Operations
    pgi = potential_gross_income(deal)
    goi = gross_operating_income(deal)
    expenses = operating_expenses(deal)
    year_noi = goi - expenses.total

    # Debt
    payment = monthly_payment(
        principal=loan_amount,
        annual_rate=deal.interest_rate / 100,
        term_years=deal.loan_term,
    )
    debt_service = annual_debt_service(payment)

    # Cash flow
    annual_cf = year_noi - debt_service

    return DealMetrics(
        total_project_cost=_money(total_project_cost),
        down_payment=_money(down_payment),
        total_investment=_money(total_investment),
        loan_amount=_money(loan_amount),
        potential_gross_income=pgi,
        gross_operating_income=goi,
        expenses=expenses,
        total_operating_expenses=expenses.total,
        net_operating_income=year_noi,
        monthly_mortgage_payment=payment,
        annual_debt_service=debt_service,
        monthly_cash_flow=_money(annual_cf / 12),
        annual_cash_flow=annual_cf,
        cap_rate=cap_rate(year_noi, deal.purchase_price),
        cash_on_cash_return=cash_on_cash(annual_cf, total_investment),
        dscr=dscr(year_noi, debt_service),
    )
