"""Cash flow analysis: GOI, operating expenses, NOI, cap rate, CoC return, DSCR.

Pure functions: Decimal in, Decimal out. No I/O.
Percent inputs are in percent units (5 means 5%); ratio outputs are percents
except DSCR.
"""

from decimal import Decimal, ROUND_HALF_UP

from dealmetrics.models.deal import DealInput
from dealmetrics.models.results import ExpenseBreakdown

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")
UNBOUNDED = Decimal("Infinity")


def potential_gross_income(deal: DealInput) -> Decimal:
    """Annual rent plus other income, before vacancy."""
    return ((deal.gross_monthly_rent + deal.other_monthly_income) * 12).quantize(
        TWO_PLACES, ROUND_HALF_UP
    )


def gross_operating_income(deal: DealInput) -> Decimal:
    """GOI = potential gross income - vacancy loss."""
    pgi = potential_gross_income(deal)
    vacancy_loss = (pgi * deal.vacancy / 100).quantize(TWO_PLACES, ROUND_HALF_UP)
    return pgi - vacancy_loss


def operating_expenses(deal: DealInput) -> ExpenseBreakdown:
    """Itemized annual operating expenses."""
    goi = gross_operating_income(deal)

    def annual(monthly: Decimal) -> Decimal:
        return (monthly * 12).quantize(TWO_PLACES, ROUND_HALF_UP)

    def of_goi(pct: Decimal) -> Decimal:
        return (goi * pct / 100).quantize(TWO_PLACES, ROUND_HALF_UP)

    taxes = annual(deal.property_taxes)
    insurance = annual(deal.insurance)
    utilities = annual(deal.utilities)
    other = annual(deal.other_expenses)

    # Variable expenses scale with GOI, not gross rent
    repairs = of_goi(deal.repairs)
    capex = of_goi(deal.capex)
    management = of_goi(deal.management)

    return ExpenseBreakdown(
        property_taxes=taxes,
        insurance=insurance,
        utilities=utilities,
        other_expenses=other,
        repairs=repairs,
        capex=capex,
        management=management,
        total=taxes + insurance + utilities + other + repairs + capex + management,
    )


def noi(deal: DealInput) -> Decimal:
    """Net Operating Income = GOI - operating expenses."""
    return gross_operating_income(deal) - operating_expenses(deal).total


def cap_rate(noi_amount: Decimal, purchase_price: Decimal) -> Decimal:
    """Cap rate (%) = NOI / purchase price."""
    if purchase_price <= 0:
        return Decimal("0")
    return (100 * noi_amount / purchase_price).quantize(FOUR_PLACES, ROUND_HALF_UP)


def cash_on_cash(cash_flow: Decimal, total_investment: Decimal) -> Decimal:
    """Cash-on-cash return (%) = annual cash flow / total cash invested."""
    if total_investment <= 0:
        return Decimal("0")
    return (100 * cash_flow / total_investment).quantize(FOUR_PLACES, ROUND_HALF_UP)


def dscr(noi_amount: Decimal, annual_debt_service: Decimal) -> Decimal:
    """Debt Service Coverage Ratio = NOI / annual debt service.

    An all-cash deal has nothing to cover: Decimal("Infinity").
    """
    if annual_debt_service <= 0:
        return UNBOUNDED
    return (noi_amount / annual_debt_service).quantize(FOUR_PLACES, ROUND_HALF_UP)
