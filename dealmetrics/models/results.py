from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class ExpenseBreakdown:
    """Annual operating expenses by line item."""
    property_taxes: Decimal = Decimal("0")
    insurance: Decimal = Decimal("0")
    utilities: Decimal = Decimal("0")
    other_expenses: Decimal = Decimal("0")

    # Percent of GOI
    repairs: Decimal = Decimal("0")
    capex: Decimal = Decimal("0")
    management: Decimal = Decimal("0")

    total: Decimal = Decimal("0")


@dataclass(frozen=True)
class DealMetrics:
    # Capital
    total_project_cost: Decimal = Decimal("0")
    down_payment: Decimal = Decimal("0")
    total_investment: Decimal = Decimal("0")  # Cash required to close
    loan_amount: Decimal = Decimal("0")  # Negative when down payment exceeds cost

    # Operations (annual)
    potential_gross_income: Decimal = Decimal("0")
    gross_operating_income: Decimal = Decimal("0")
    expenses: ExpenseBreakdown = field(default_factory=ExpenseBreakdown)
    total_operating_expenses: Decimal = Decimal("0")
    net_operating_income: Decimal = Decimal("0")

    # Debt
    monthly_mortgage_payment: Decimal = Decimal("0")
    annual_debt_service: Decimal = Decimal("0")

    # Cash flow
    monthly_cash_flow: Decimal = Decimal("0")
    annual_cash_flow: Decimal = Decimal("0")

    # Ratios
    cap_rate: Decimal = Decimal("0")  # Percent
    cash_on_cash_return: Decimal = Decimal("0")  # Percent
    dscr: Decimal = Decimal("Infinity")  # Unbounded when there is no debt

    @property
    def has_debt(self) -> bool:
        return self.annual_debt_service > 0
