"""Main analysis page: deal inputs on the left, live metrics on the right.

Features:
  - Percentage / fixed-amount down payment with automatic reconciliation
  - Metrics recomputed on every edit
  - Cash flow and expense breakdown charts, each section toggleable
"""

import dash
from dash import html, dcc, callback, Input, Output, no_update
import plotly.graph_objects as go

from dealmetrics.api.schemas import DealForm
from dealmetrics.dashboard.sync import form_from_values, down_payment_updates, input_bounds
from dealmetrics.display import (
    format_currency,
    format_percent,
    format_ratio,
    expense_chart_items,
    cash_flow_chart_items,
)
from dealmetrics.engine.metrics import compute_metrics
from dealmetrics.engine.reconcile import reconcile

dash.register_page(__name__, path="/", name="Analyze")

DEFAULTS = DealForm()

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}
ROW_STYLE = {"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"}

CHART_COLORS = ["#1a1a2e", "#16213e", "#0f3460", "#e94560", "#f39c12", "#2ecc71", "#8e44ad"]

# Input id -> DealForm field, in the order the callbacks receive them
DEAL_FIELDS = {
    "purchase-price": "purchase_price",
    "closing-costs": "closing_costs",
    "rehab-costs": "rehab_costs",
    "loan-type": "loan_type",
    "down-payment-percent": "down_payment_percent",
    "down-payment-amount": "down_payment_amount",
    "interest-rate": "interest_rate",
    "loan-term": "loan_term",
    "gross-monthly-rent": "gross_monthly_rent",
    "other-monthly-income": "other_monthly_income",
    "property-taxes": "property_taxes",
    "insurance": "insurance",
    "utilities": "utilities",
    "other-expenses": "other_expenses",
    "vacancy": "vacancy",
    "repairs": "repairs",
    "capex": "capex",
    "management": "management",
}

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def _field(label, component, **style):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"flex": "1", "minWidth": "140px", **style})


def _number(input_id, step=1):
    minimum, maximum = input_bounds(DEAL_FIELDS[input_id])
    value = getattr(DEFAULTS, DEAL_FIELDS[input_id])
    return dcc.Input(
        id=input_id,
        type="number",
        value=float(value),
        min=minimum,
        max=maximum,
        step=step,
        debounce=True,
        style=FIELD_STYLE,
    )


property_tab = html.Div([
    html.Div([
        _field("Purchase Price ($)", _number("purchase-price")),
        _field("Closing Costs ($)", _number("closing-costs")),
        _field("Rehab Costs ($)", _number("rehab-costs")),
    ], style=ROW_STYLE),
], style={"paddingTop": "1rem"})

financing_tab = html.Div([
    _field("Down Payment Type", dcc.RadioItems(
        id="loan-type",
        options=[
            {"label": " Percentage", "value": "percentage"},
            {"label": " Fixed Amount", "value": "amount"},
        ],
        value=DEFAULTS.loan_type.value,
        inline=True,
    ), marginBottom="0.75rem"),
    html.Div([
        html.Div(_field("Down Payment (%)", _number("down-payment-percent", step=0.01)),
                 id="down-payment-percent-wrapper", style={"flex": "1"}),
        html.Div(_field("Down Payment ($)", _number("down-payment-amount", step=0.01)),
                 id="down-payment-amount-wrapper", style={"display": "none"}),
    ], style=ROW_STYLE),
    html.Div([
        _field("Interest Rate (%)", _number("interest-rate", step=0.01)),
        _field("Loan Term (years)", _number("loan-term", step=0.5)),
    ], style=ROW_STYLE),
], style={"paddingTop": "1rem"})

income_tab = html.Div([
    html.Div([
        _field("Gross Monthly Rent ($)", _number("gross-monthly-rent")),
        _field("Other Monthly Income ($)", _number("other-monthly-income")),
    ], style=ROW_STYLE),
], style={"paddingTop": "1rem"})

expenses_tab = html.Div([
    html.Div([
        _field("Property Taxes ($/mo)", _number("property-taxes")),
        _field("Insurance ($/mo)", _number("insurance")),
        _field("Utilities ($/mo)", _number("utilities")),
        _field("Other ($/mo)", _number("other-expenses")),
    ], style=ROW_STYLE),
    html.Div([
        _field("Vacancy (%)", _number("vacancy", step=0.5)),
        _field("Repairs (% of GOI)", _number("repairs", step=0.5)),
        _field("CapEx (% of GOI)", _number("capex", step=0.5)),
        _field("Management (% of GOI)", _number("management", step=0.5)),
    ], style=ROW_STYLE),
], style={"paddingTop": "1rem"})

layout = html.Div([
    html.H2("Property Analysis"),
    html.P("Enter the details of your potential investment property."),

    html.Div([
        # Inputs
        html.Div([
            dcc.Tabs([
                dcc.Tab(label="Property", children=property_tab),
                dcc.Tab(label="Financing", children=financing_tab),
                dcc.Tab(label="Income", children=income_tab),
                dcc.Tab(label="Expenses", children=expenses_tab),
            ]),
        ], style={"flex": "1"}),

        # Results
        html.Div([
            dcc.Checklist(
                id="visible-sections",
                options=[
                    {"label": " Key Metrics", "value": "key_metrics"},
                    {"label": " Cash Flow", "value": "cash_flow"},
                    {"label": " Expense Breakdown", "value": "expense_breakdown"},
                ],
                value=["key_metrics", "cash_flow", "expense_breakdown"],
                inline=True,
                style={"marginBottom": "1rem"},
            ),
            html.Div(id="metrics-container"),
        ], style={"flex": "1"}),
    ], style={"display": "flex", "gap": "2rem", "alignItems": "start"}),
])


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


def _values(args) -> dict:
    return dict(zip(DEAL_FIELDS.values(), args))


@callback(
    [Output("down-payment-percent-wrapper", "style"), Output("down-payment-amount-wrapper", "style")],
    Input("loan-type", "value"),
)
def toggle_down_payment_input(loan_type):
    if loan_type == "amount":
        return {"display": "none"}, {"flex": "1"}
    return {"flex": "1"}, {"display": "none"}


@callback(
    [Output("down-payment-percent", "value"), Output("down-payment-amount", "value")],
    [
        Input("purchase-price", "value"),
        Input("closing-costs", "value"),
        Input("rehab-costs", "value"),
        Input("loan-type", "value"),
        Input("down-payment-percent", "value"),
        Input("down-payment-amount", "value"),
    ],
)
def sync_down_payment(purchase_price, closing_costs, rehab_costs, loan_type, percent, amount):
    new_percent, new_amount = down_payment_updates({
        "purchase_price": purchase_price,
        "closing_costs": closing_costs,
        "rehab_costs": rehab_costs,
        "loan_type": loan_type,
        "down_payment_percent": percent,
        "down_payment_amount": amount,
    })
    return (
        no_update if new_percent is None else new_percent,
        no_update if new_amount is None else new_amount,
    )


@callback(
    Output("metrics-container", "children"),
    [Input(input_id, "value") for input_id in DEAL_FIELDS] + [Input("visible-sections", "value")],
)
def update_metrics(*args):
    *deal_args, sections = args
    form = form_from_values(_values(deal_args))
    if form is None:
        # Keep the last valid result on screen
        return no_update

    metrics = compute_metrics(reconcile(form.to_deal_input()))
    return _build_results(metrics, set(sections or []))


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


def _build_results(metrics, sections):
    children = []

    if "key_metrics" in sections:
        children.append(html.Div([
            _metric_card("Total Investment", format_currency(metrics.total_investment), "Cash required to close"),
            _metric_card("Annual Cash Flow", format_currency(metrics.annual_cash_flow), "NOI minus debt service"),
            _metric_card("Cash on Cash Return", format_percent(metrics.cash_on_cash_return), "Annual cash flow / total investment"),
            _metric_card("Cap Rate", format_percent(metrics.cap_rate), "NOI / purchase price"),
            _metric_card("NOI", format_currency(metrics.net_operating_income), "Annual Net Operating Income"),
            _metric_card("DSCR", format_ratio(metrics.dscr), "Debt Service Coverage Ratio"),
        ], style={"display": "flex", "gap": "1rem", "marginBottom": "2rem", "flexWrap": "wrap"}))

        children.append(html.Div([
            html.P(f"Loan Amount: {format_currency(metrics.loan_amount)}"),
            html.P(f"Monthly Mortgage Payment: {format_currency(metrics.monthly_mortgage_payment)}"),
            html.P(f"Monthly Cash Flow: {format_currency(metrics.monthly_cash_flow)}", style={"fontWeight": "bold"}),
        ], style={"backgroundColor": "#f5f5f5", "padding": "1rem", "borderRadius": "8px", "marginBottom": "2rem"}))

    if "cash_flow" in sections:
        items = cash_flow_chart_items(metrics)
        cf_fig = go.Figure()
        cf_fig.add_trace(go.Bar(
            x=[i["name"] for i in items],
            y=[float(i["value"]) for i in items],
            marker_color=["#2ecc71", "#e94560", "#1a1a2e"],
        ))
        cf_fig.update_layout(title="Annual Cash Flow", yaxis_title="$")
        children.append(dcc.Graph(figure=cf_fig))

    if "expense_breakdown" in sections:
        items = expense_chart_items(metrics)
        if items:
            exp_fig = go.Figure(go.Pie(
                labels=[i["name"] for i in items],
                values=[float(i["value"]) for i in items],
                hole=0.4,
                marker=dict(colors=CHART_COLORS[:len(items)]),
            ))
            exp_fig.update_layout(title="Annual Expense Breakdown")
            children.append(dcc.Graph(figure=exp_fig))
        else:
            children.append(html.P("No operating expenses entered."))

    return html.Div(children)


def _metric_card(label, value, tooltip):
    return html.Div([
        html.Div(label, style={"fontSize": "0.85rem", "color": "#666"}),
        html.Div(value, style={"fontSize": "1.5rem", "fontWeight": "bold"}),
        html.Div(tooltip, style={"fontSize": "0.75rem", "color": "#999"}),
    ], style={
        "backgroundColor": "white",
        "border": "1px solid #ddd",
        "borderRadius": "8px",
        "padding": "1rem 1.5rem",
        "minWidth": "150px",
        "textAlign": "center",
    })
