from dataclasses import replace
from decimal import Decimal

import pytest

from dealmetrics.engine.metrics import compute_metrics
from dealmetrics.engine.reconcile import reconcile
from dealmetrics.models.deal import DealInput, LoanType


class TestCanonicalDeal:
    def test_capital(self, canonical_deal):
        m = compute_metrics(canonical_deal)
        assert m.total_project_cost == Decimal("319000")
        assert m.down_payment == Decimal("63800")
        assert m.loan_amount == Decimal("255200")
        assert m.total_investment == Decimal("82800")  # 63.8K down + 9K closing + 10K rehab

    def test_operations(self, canonical_deal):
        m = compute_metrics(canonical_deal)
        assert m.gross_operating_income == Decimal("34200")
        assert m.total_operating_expenses == Decimal("10956")
        assert m.net_operating_income == Decimal("23244")
        assert m.expenses.total == m.total_operating_expenses

    def test_debt(self, canonical_deal):
        m = compute_metrics(canonical_deal)
        assert abs(m.monthly_mortgage_payment - Decimal("1613.04")) <= Decimal("0.02")
        assert m.annual_debt_service == m.monthly_mortgage_payment * 12

    def test_cash_flow(self, canonical_deal):
        m = compute_metrics(canonical_deal)
        assert m.annual_cash_flow == m.net_operating_income - m.annual_debt_service
        assert abs(m.monthly_cash_flow - m.annual_cash_flow / 12) <= Decimal("0.005")
        assert abs(m.annual_cash_flow - Decimal("3887.52")) < Decimal("1")

    def test_ratios(self, canonical_deal):
        m = compute_metrics(canonical_deal)
        assert m.cap_rate == Decimal("7.7480")
        assert abs(m.dscr - Decimal("1.20")) < Decimal("0.005")
        expected_coc = 100 * m.annual_cash_flow / m.total_investment
        assert abs(m.cash_on_cash_return - expected_coc) < Decimal("0.0001")

    def test_down_payment_follows_percent_not_stale_amount(self, canonical_deal):
        stale = replace(canonical_deal, down_payment_amount=Decimal("1"))
        assert compute_metrics(stale).loan_amount == Decimal("255200")


class TestAllCash:
    def test_no_debt(self, all_cash_deal):
        m = compute_metrics(all_cash_deal)
        assert m.loan_amount == Decimal("0")
        assert m.monthly_mortgage_payment == Decimal("0")
        assert m.annual_debt_service == Decimal("0")
        assert m.dscr == Decimal("Infinity")
        assert not m.has_debt

    def test_cash_flow_equals_noi(self, all_cash_deal):
        m = compute_metrics(all_cash_deal)
        assert m.annual_cash_flow == m.net_operating_income


class TestZeroCost:
    def test_ratios_zero(self, zero_cost_deal):
        m = compute_metrics(reconcile(zero_cost_deal))
        assert m.cap_rate == Decimal("0")
        assert m.cash_on_cash_return == Decimal("0")
        assert m.loan_amount == Decimal("0")
        assert m.dscr == Decimal("Infinity")


class TestDegenerateFinancing:
    def test_down_payment_above_cost_gives_negative_loan(self, canonical_deal):
        deal = replace(canonical_deal, loan_type=LoanType.AMOUNT, down_payment_amount=Decimal("400000"))
        m = compute_metrics(reconcile(deal))
        assert m.loan_amount == Decimal("-81000")
        assert m.monthly_mortgage_payment == Decimal("0")
        assert m.dscr == Decimal("Infinity")

    def test_zero_interest_has_no_payment(self, canonical_deal):
        m = compute_metrics(replace(canonical_deal, interest_rate=Decimal("0")))
        assert m.loan_amount == Decimal("255200")
        assert m.monthly_mortgage_payment == Decimal("0")
        assert m.annual_cash_flow == m.net_operating_income

    def test_zero_term_has_no_payment(self, canonical_deal):
        m = compute_metrics(replace(canonical_deal, loan_term=0))
        assert m.monthly_mortgage_payment == Decimal("0")

    def test_negative_costs_do_not_raise(self):
        deal = DealInput(
            purchase_price=Decimal("-1000"),
            closing_costs=Decimal("-50"),
            loan_type=LoanType.AMOUNT,
            down_payment_amount=Decimal("100"),
            interest_rate=Decimal("5"),
        )
        m = compute_metrics(reconcile(deal))
        assert m.cap_rate == Decimal("0")
        assert m.cash_on_cash_return == Decimal("0")
        assert m.dscr == Decimal("Infinity")

    def test_tiny_rate_does_not_raise(self, canonical_deal):
        m = compute_metrics(replace(canonical_deal, interest_rate=Decimal("1e-27")))
        assert m.monthly_mortgage_payment >= 0
        assert m.monthly_mortgage_payment <= m.loan_amount
        assert m.dscr.is_finite() == (m.annual_debt_service > 0)

    def test_huge_price_quantizes_to_cents(self, canonical_deal):
        m = compute_metrics(reconcile(replace(canonical_deal, purchase_price=Decimal("1e27"))))
        assert m.total_project_cost == Decimal("1000000000000000000000019000.00")
        assert m.loan_amount == m.total_project_cost - m.down_payment
        assert m.monthly_mortgage_payment > 0

    def test_huge_term_pays_interest_only(self, canonical_deal):
        m = compute_metrics(replace(canonical_deal, loan_term=10**9))
        interest_only = (m.loan_amount * Decimal("0.065") / 12).quantize(Decimal("0.01"))
        assert m.monthly_mortgage_payment == interest_only

    def test_fractional_term(self, canonical_deal):
        m15 = compute_metrics(replace(canonical_deal, loan_term=Decimal("15")))
        m15_5 = compute_metrics(replace(canonical_deal, loan_term=Decimal("15.5")))
        assert m15_5.monthly_mortgage_payment < m15.monthly_mortgage_payment


DEALS = [
    DealInput(purchase_price=Decimal("250000"), closing_costs=Decimal("7500"),
              loan_type=LoanType.PERCENTAGE, down_payment_percent=Decimal("25"),
              interest_rate=Decimal("7.125"), loan_term=30, gross_monthly_rent=Decimal("2200"),
              property_taxes=Decimal("250"), insurance=Decimal("90"), vacancy=Decimal("6"),
              repairs=Decimal("4"), capex=Decimal("5"), management=Decimal("10")),
    DealInput(purchase_price=Decimal("180000"), rehab_costs=Decimal("45000"),
              loan_type=LoanType.AMOUNT, down_payment_amount=Decimal("41234.56"),
              down_payment_percent=Decimal("80"), interest_rate=Decimal("6.99"), loan_term=15,
              gross_monthly_rent=Decimal("1850"), other_monthly_income=Decimal("75"),
              utilities=Decimal("120"), other_expenses=Decimal("35"), vacancy=Decimal("8")),
    DealInput(purchase_price=Decimal("0"), loan_type=LoanType.AMOUNT,
              down_payment_amount=Decimal("0"), down_payment_percent=Decimal("33")),
]


class TestProperties:
    @pytest.mark.parametrize("deal", DEALS)
    def test_idempotent(self, deal):
        assert compute_metrics(reconcile(reconcile(deal))) == compute_metrics(reconcile(deal))

    @pytest.mark.parametrize("deal", DEALS)
    def test_unbounded_dscr_iff_no_debt_service(self, deal):
        m = compute_metrics(reconcile(deal))
        assert (m.dscr == Decimal("Infinity")) == (m.annual_debt_service == 0)

    @pytest.mark.parametrize("deal", DEALS)
    def test_never_nan(self, deal):
        m = compute_metrics(reconcile(deal))
        for value in (m.cap_rate, m.cash_on_cash_return, m.dscr, m.monthly_cash_flow):
            assert not value.is_nan()

    def test_pure(self, canonical_deal):
        assert compute_metrics(canonical_deal) == compute_metrics(canonical_deal)
