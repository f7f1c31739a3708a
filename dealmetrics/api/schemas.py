"""Pydantic schemas for API request/response models.

DealForm doubles as the input normalizer for every front end: it coerces raw
values, enforces ranges and supplies defaults before anything reaches the
engine.
"""

from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from dealmetrics.models.comparables import ComparablesCriteria
from dealmetrics.models.deal import DealInput, LoanType
from dealmetrics.models.results import DealMetrics

# Upper bounds keep every figure inside the engine's decimal context
MAX_AMOUNT = Decimal("1000000000000")
MAX_TERM_YEARS = Decimal("100")


# ---- Request schemas ----

class DealForm(BaseModel):
    # Property
    purchase_price: Decimal = Field(Decimal("300000"), ge=0, le=MAX_AMOUNT)
    closing_costs: Decimal = Field(Decimal("9000"), ge=0, le=MAX_AMOUNT)
    rehab_costs: Decimal = Field(Decimal("10000"), ge=0, le=MAX_AMOUNT)

    # Financing
    loan_type: LoanType = Field(LoanType.PERCENTAGE, description="Which down-payment field is authoritative")
    down_payment_percent: Decimal = Field(Decimal("20"), ge=0, le=MAX_AMOUNT)  # <= 100 while authoritative
    down_payment_amount: Decimal = Field(Decimal("63800"), ge=0, le=MAX_AMOUNT)
    interest_rate: Decimal = Field(Decimal("6.5"), ge=0, le=100, description="Annual, percent")
    loan_term: Decimal = Field(Decimal("30"), ge=1, le=MAX_TERM_YEARS, description="Years, fractions allowed")

    # Income
    gross_monthly_rent: Decimal = Field(Decimal("3000"), ge=0, le=MAX_AMOUNT)
    other_monthly_income: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT)

    # Expenses
    property_taxes: Decimal = Field(Decimal("300"), ge=0, le=MAX_AMOUNT, description="Monthly")
    insurance: Decimal = Field(Decimal("100"), ge=0, le=MAX_AMOUNT, description="Monthly")
    vacancy: Decimal = Field(Decimal("5"), ge=0, le=100)
    repairs: Decimal = Field(Decimal("5"), ge=0, le=100)
    capex: Decimal = Field(Decimal("5"), ge=0, le=100)
    management: Decimal = Field(Decimal("8"), ge=0, le=100)
    utilities: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT, description="Monthly")
    other_expenses: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT, description="Monthly")

    @model_validator(mode="after")
    def _authoritative_percent_in_range(self) -> "DealForm":
        # A derived percent may exceed 100 when the dollar amount exceeds project cost
        if self.loan_type is LoanType.PERCENTAGE and self.down_payment_percent > 100:
            raise ValueError("down_payment_percent must be at most 100")
        return self

    def to_deal_input(self) -> DealInput:
        return DealInput(**dict(self))


class ComparablesRequest(BaseModel):
    location: str = Field(..., min_length=1, description="e.g. Austin, TX")
    radius: Decimal = Field(..., ge=1, description="Search radius in miles")
    square_footage_range: str = Field(..., min_length=1, description="e.g. 1500-2000")
    property_types: str = Field(..., min_length=1, description="e.g. single family, duplex")
    property_listings_csv: str = Field(..., min_length=1, description="CSV of listings with headers")

    def to_criteria(self) -> ComparablesCriteria:
        return ComparablesCriteria(
            location=self.location,
            radius_miles=self.radius,
            square_footage_range=self.square_footage_range,
            property_types=self.property_types,
            listings_csv=self.property_listings_csv,
        )


# ---- Response schemas ----

class DealResponse(BaseModel):
    """Reconciled deal. Unconstrained: derived fields may leave the form's ranges."""
    purchase_price: Decimal
    closing_costs: Decimal
    rehab_costs: Decimal
    loan_type: LoanType
    down_payment_percent: Decimal
    down_payment_amount: Decimal
    interest_rate: Decimal
    loan_term: Decimal
    gross_monthly_rent: Decimal
    other_monthly_income: Decimal
    property_taxes: Decimal
    insurance: Decimal
    vacancy: Decimal
    repairs: Decimal
    capex: Decimal
    management: Decimal
    utilities: Decimal
    other_expenses: Decimal
    total_project_cost: Decimal

    @classmethod
    def from_deal_input(cls, deal: DealInput) -> "DealResponse":
        return cls(
            purchase_price=deal.purchase_price,
            closing_costs=deal.closing_costs,
            rehab_costs=deal.rehab_costs,
            loan_type=deal.loan_type,
            down_payment_percent=deal.down_payment_percent,
            down_payment_amount=deal.down_payment_amount,
            interest_rate=deal.interest_rate,
            loan_term=deal.loan_term,
            gross_monthly_rent=deal.gross_monthly_rent,
            other_monthly_income=deal.other_monthly_income,
            property_taxes=deal.property_taxes,
            insurance=deal.insurance,
            vacancy=deal.vacancy,
            repairs=deal.repairs,
            capex=deal.capex,
            management=deal.management,
            utilities=deal.utilities,
            other_expenses=deal.other_expenses,
            total_project_cost=deal.total_project_cost,
        )


class ExpenseBreakdownResponse(BaseModel):
    property_taxes: Decimal
    insurance: Decimal
    utilities: Decimal
    other_expenses: Decimal
    repairs: Decimal
    capex: Decimal
    management: Decimal
    total: Decimal


class MetricsResponse(BaseModel):
    deal: DealResponse

    total_project_cost: Decimal
    down_payment: Decimal
    total_investment: Decimal
    loan_amount: Decimal

    potential_gross_income: Decimal
    gross_operating_income: Decimal
    expenses: ExpenseBreakdownResponse
    total_operating_expenses: Decimal
    net_operating_income: Decimal

    monthly_mortgage_payment: Decimal
    annual_debt_service: Decimal
    monthly_cash_flow: Decimal
    annual_cash_flow: Decimal

    cap_rate: Decimal
    cash_on_cash_return: Decimal
    dscr: Decimal | None = Field(None, description="Null when the deal carries no debt")
    dscr_unbounded: bool = False

    @classmethod
    def build(cls, deal: DealInput, metrics: DealMetrics) -> "MetricsResponse":
        e = metrics.expenses
        return cls(
            deal=DealResponse.from_deal_input(deal),
            total_project_cost=metrics.total_project_cost,
            down_payment=metrics.down_payment,
            total_investment=metrics.total_investment,
            loan_amount=metrics.loan_amount,
            potential_gross_income=metrics.potential_gross_income,
            gross_operating_income=metrics.gross_operating_income,
            expenses=ExpenseBreakdownResponse(
                property_taxes=e.property_taxes,
                insurance=e.insurance,
                utilities=e.utilities,
                other_expenses=e.other_expenses,
                repairs=e.repairs,
                capex=e.capex,
                management=e.management,
                total=e.total,
            ),
            total_operating_expenses=metrics.total_operating_expenses,
            net_operating_income=metrics.net_operating_income,
            monthly_mortgage_payment=metrics.monthly_mortgage_payment,
            annual_debt_service=metrics.annual_debt_service,
            monthly_cash_flow=metrics.monthly_cash_flow,
            annual_cash_flow=metrics.annual_cash_flow,
            cap_rate=metrics.cap_rate,
            cash_on_cash_return=metrics.cash_on_cash_return,
            dscr=metrics.dscr if metrics.has_debt else None,
            dscr_unbounded=not metrics.has_debt,
        )


class ComparablesResponse(BaseModel):
    summary: str
