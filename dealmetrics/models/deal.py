from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class LoanType(Enum):
    PERCENTAGE = "percentage"
    AMOUNT = "amount"


@dataclass(frozen=True)
class DownPayment:
    """The down-payment representation the user is currently editing."""
    kind: LoanType
    value: Decimal  # Percent (0-100) or dollars, depending on kind


@dataclass(frozen=True)
class DealInput:
    # Acquisition
    purchase_price: Decimal
    closing_costs: Decimal = Decimal("0")
    rehab_costs: Decimal = Decimal("0")

    # Financing
    loan_type: LoanType = LoanType.PERCENTAGE  # Selects the authoritative down-payment field
    down_payment_percent: Decimal = Decimal("0")  # Of total project cost
    down_payment_amount: Decimal = Decimal("0")
    interest_rate: Decimal = Decimal("0")  # Annual, percent
    loan_term: Decimal = Decimal("30")  # Years, may be fractional

    # Income (monthly)
    gross_monthly_rent: Decimal = Decimal("0")
    other_monthly_income: Decimal = Decimal("0")  # Laundry, parking, etc.

    # Fixed expenses (monthly)
    property_taxes: Decimal = Decimal("0")
    insurance: Decimal = Decimal("0")
    utilities: Decimal = Decimal("0")
    other_expenses: Decimal = Decimal("0")

    # Variable expenses (percent of gross operating income)
    vacancy: Decimal = Decimal("0")  # Percent of potential gross income
    repairs: Decimal = Decimal("0")
    capex: Decimal = Decimal("0")
    management: Decimal = Decimal("0")

    @property
    def total_project_cost(self) -> Decimal:
        return self.purchase_price + self.closing_costs + self.rehab_costs

    @property
    def authoritative_down_payment(self) -> DownPayment:
        if self.loan_type is LoanType.PERCENTAGE:
            return DownPayment(LoanType.PERCENTAGE, self.down_payment_percent)
        return DownPayment(LoanType.AMOUNT, self.down_payment_amount)

    @property
    def down_payment(self) -> Decimal:
        """Down payment in dollars, taken from the authoritative field."""
        dp = self.authoritative_down_payment
        if dp.kind is LoanType.PERCENTAGE:
            return self.total_project_cost * dp.value / 100
        return dp.value
