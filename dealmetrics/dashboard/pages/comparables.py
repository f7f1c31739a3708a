"""Comparable properties page: AI summary of uploaded market listings."""

import base64

import dash
from dash import html, dcc, callback, Input, Output, State, no_update
import httpx

from dealmetrics.config import settings

dash.register_page(__name__, path="/comparables", name="Comparables")

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

BTN_STYLE = {
    "padding": "0.75rem 2rem",
    "fontSize": "1rem",
    "backgroundColor": "#1a1a2e",
    "color": "white",
    "border": "none",
    "cursor": "pointer",
}


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"flex": "1", "minWidth": "140px"})


layout = html.Div([
    html.H2("Comparable Property Tool"),
    html.P("Use AI to generate a summary of comparable properties from a CSV list."),

    html.Div([
        _field("Location", dcc.Input(id="comp-location", type="text", placeholder="e.g., Austin, TX", style=FIELD_STYLE)),
        _field("Search Radius (miles)", dcc.Input(id="comp-radius", type="number", min=1, placeholder="5", style=FIELD_STYLE)),
    ], style={"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"}),
    html.Div([
        _field("Square Footage Range", dcc.Input(id="comp-sqft-range", type="text", placeholder="e.g., 1500-2000", style=FIELD_STYLE)),
        _field("Property Types", dcc.Input(id="comp-property-types", type="text", placeholder="e.g., Single Family, Condo", style=FIELD_STYLE)),
    ], style={"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"}),

    dcc.Upload(
        id="comp-csv-upload",
        children=html.Div(id="comp-csv-label", children="Drag and drop or click to upload a listings CSV"),
        accept=".csv,text/csv",
        style={
            "border": "1px dashed #999",
            "borderRadius": "8px",
            "padding": "1.5rem",
            "textAlign": "center",
            "marginBottom": "1rem",
            "cursor": "pointer",
        },
    ),

    html.Button("Generate Summary", id="comp-generate-btn", n_clicks=0, style=BTN_STYLE),

    dcc.Loading(
        html.Div(id="comp-summary", style={"marginTop": "1.5rem"}),
        type="circle",
    ),
])


def decode_upload(contents: str) -> str:
    """Decode a dcc.Upload data URL into text."""
    _, encoded = contents.split(",", 1)
    return base64.b64decode(encoded).decode("utf-8")


@callback(
    Output("comp-csv-label", "children"),
    Input("comp-csv-upload", "filename"),
    prevent_initial_call=True,
)
def show_filename(filename):
    return filename or no_update


@callback(
    Output("comp-summary", "children"),
    Input("comp-generate-btn", "n_clicks"),
    [
        State("comp-location", "value"),
        State("comp-radius", "value"),
        State("comp-sqft-range", "value"),
        State("comp-property-types", "value"),
        State("comp-csv-upload", "contents"),
    ],
    prevent_initial_call=True,
)
def generate_summary(n_clicks, location, radius, sqft_range, property_types, contents):
    if not contents:
        return html.Div("Property listings CSV file is required.", style={"color": "red"})

    payload = {
        "location": location or "",
        "radius": radius,
        "square_footage_range": sqft_range or "",
        "property_types": property_types or "",
        "property_listings_csv": decode_upload(contents),
    }
    try:
        resp = httpx.post(f"{settings.api_base_url}/api/v1/comparables/summary", json=payload, timeout=120.0)
    except httpx.HTTPError as e:
        return html.Div(f"Error: {e}", style={"color": "red"})

    if resp.status_code == 422:
        errors = [f"{'.'.join(str(p) for p in err['loc'][1:])}: {err['msg']}" for err in resp.json()["detail"]]
        return html.Div([html.P("Invalid form data. Please check your inputs.")] + [html.P(e) for e in errors],
                        style={"color": "red"})
    if resp.status_code != 200:
        return html.Div(f"Error: {resp.json().get('detail', resp.text)}", style={"color": "red"})

    return html.Div([
        html.H4("AI-Generated Summary"),
        dcc.Markdown(resp.json()["summary"]),
    ], style={"backgroundColor": "#f5f5f5", "padding": "1rem", "borderRadius": "8px"})
