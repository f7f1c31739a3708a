"""Formatting and chart-series helpers shared by the dashboard and the CLI."""

from decimal import Decimal

from dealmetrics.models.results import DealMetrics

NOT_APPLICABLE = "N/A"


def format_currency(v) -> str:
    """Whole dollars with thousands separators, e.g. $23,244 or -$1,200."""
    amount = float(v)
    if amount < 0:
        return f"-${-amount:,.0f}"
    return f"${amount:,.0f}"


def format_percent(v) -> str:
    """Percent-unit value (7.748 -> '7.75%')."""
    return f"{float(v):,.2f}%"


def format_ratio(v) -> str:
    """Dimensionless ratio; an unbounded ratio has no numeric display."""
    if not Decimal(v).is_finite():
        return NOT_APPLICABLE
    return f"{float(v):,.2f}"


def expense_chart_items(metrics: DealMetrics) -> list[dict]:
    """Annual expense slices for the breakdown chart, zero items dropped."""
    e = metrics.expenses
    items = [
        {"name": "Taxes", "value": e.property_taxes},
        {"name": "Insurance", "value": e.insurance},
        {"name": "Utilities", "value": e.utilities},
        {"name": "Other", "value": e.other_expenses},
        {"name": "Management", "value": e.management},
        {"name": "Repairs", "value": e.repairs},
        {"name": "CapEx", "value": e.capex},
    ]
    return [item for item in items if item["value"] > 0]


def cash_flow_chart_items(metrics: DealMetrics) -> list[dict]:
    return [
        {"name": "Income", "value": metrics.gross_operating_income},
        {"name": "Expenses", "value": metrics.total_operating_expenses},
        {"name": "Cash Flow", "value": metrics.annual_cash_flow},
    ]
