"""Terminal deal report.

Usage:
    python -m dealmetrics.cli --purchase-price 300000 --rent 3000 --down-payment-percent 20
    python -m dealmetrics.cli --loan-type amount --down-payment-amount 319000
"""

import argparse
import sys

from pydantic import ValidationError

from dealmetrics.api.schemas import DealForm
from dealmetrics.display import format_currency, format_percent, format_ratio
from dealmetrics.engine.metrics import compute_metrics
from dealmetrics.engine.reconcile import reconcile
from dealmetrics.models.deal import DealInput
from dealmetrics.models.results import DealMetrics

# flag -> DealForm field
FLAGS = {
    "--purchase-price": "purchase_price",
    "--closing-costs": "closing_costs",
    "--rehab-costs": "rehab_costs",
    "--down-payment-percent": "down_payment_percent",
    "--down-payment-amount": "down_payment_amount",
    "--interest-rate": "interest_rate",
    "--loan-term": "loan_term",
    "--rent": "gross_monthly_rent",
    "--other-income": "other_monthly_income",
    "--taxes": "property_taxes",
    "--insurance": "insurance",
    "--utilities": "utilities",
    "--other-expenses": "other_expenses",
    "--vacancy": "vacancy",
    "--repairs": "repairs",
    "--capex": "capex",
    "--management": "management",
}


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def print_financing(deal: DealInput, metrics: DealMetrics) -> None:
    _header("Financing")
    print(f"  Total Project Cost:   {format_currency(metrics.total_project_cost)}")
    print(f"  Down Payment:         {format_currency(deal.down_payment_amount)} ({format_percent(deal.down_payment_percent)}, {deal.loan_type.value})")
    print(f"  Loan Amount:          {format_currency(metrics.loan_amount)}")
    print(f"  Rate / Term:          {format_percent(deal.interest_rate)} / {deal.loan_term} yr")
    print(f"  Monthly Payment:      {format_currency(metrics.monthly_mortgage_payment)}")


def print_operations(metrics: DealMetrics) -> None:
    _header("Operations (Annual)")
    e = metrics.expenses
    print(f"  Potential Gross:      {format_currency(metrics.potential_gross_income)}")
    print(f"  Gross Operating:      {format_currency(metrics.gross_operating_income)}")
    print(f"    Taxes:              {format_currency(e.property_taxes)}")
    print(f"    Insurance:          {format_currency(e.insurance)}")
    print(f"    Utilities:          {format_currency(e.utilities)}")
    print(f"    Other:              {format_currency(e.other_expenses)}")
    print(f"    Repairs:            {format_currency(e.repairs)}")
    print(f"    CapEx:              {format_currency(e.capex)}")
    print(f"    Management:         {format_currency(e.management)}")
    print(f"  Operating Expenses:   {format_currency(metrics.total_operating_expenses)}")
    print(f"  NOI:                  {format_currency(metrics.net_operating_income)}")


def print_deal_metrics(metrics: DealMetrics) -> None:
    _header("Deal Metrics")
    print(f"  Total Investment:     {format_currency(metrics.total_investment)}")
    print(f"  Annual Cash Flow:     {format_currency(metrics.annual_cash_flow)}")
    print(f"  Monthly Cash Flow:    {format_currency(metrics.monthly_cash_flow)}")
    print(f"  Cap Rate:             {format_percent(metrics.cap_rate)}")
    print(f"  Cash-on-Cash:         {format_percent(metrics.cash_on_cash_return)}")
    print(f"  DSCR:                 {format_ratio(metrics.dscr)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rental property deal metrics")
    for flag in FLAGS:
        parser.add_argument(flag, type=str, default=None)
    parser.add_argument("--loan-type", choices=["percentage", "amount"], default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    values = {field: getattr(args, flag.lstrip("-").replace("-", "_")) for flag, field in FLAGS.items()}
    values["loan_type"] = args.loan_type

    try:
        form = DealForm(**{k: v for k, v in values.items() if v is not None})
    except ValidationError as e:
        print(f"Invalid deal inputs:\n{e}", file=sys.stderr)
        return 1

    deal = reconcile(form.to_deal_input())
    metrics = compute_metrics(deal)

    print_financing(deal, metrics)
    print_operations(metrics)
    print_deal_metrics(metrics)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
