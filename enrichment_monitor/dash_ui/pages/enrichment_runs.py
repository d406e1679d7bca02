"""
Enrichment Runs -- job monitoring overview.

Main landing page: status summary cards, the filter form, a per-status
breakdown chart and the expandable grid of jobs and their dependent jobs.
"""
from __future__ import annotations

import dash
import dash_bootstrap_components as dbc
from dash import ALL, Input, Output, State, callback, ctx, dcc, html
from dash.exceptions import PreventUpdate

from enrichment_monitor.config import DATASET_TYPES, EXPAND_DEPTH
from enrichment_monitor.dash_ui.components.chart_utils import status_breakdown_chart
from enrichment_monitor.dash_ui.components.filter_panel import filter_panel
from enrichment_monitor.dash_ui.components.job_grid import TOGGLE_TYPE, job_grid
from enrichment_monitor.dash_ui.components.job_status_cards import job_status_cards
from enrichment_monitor.dash_ui.components.page_header import create_page_header
from enrichment_monitor.dash_ui.data.loaders import load_jobs
from enrichment_monitor.dash_ui.state import (
    expanded_from_store,
    filter_from_form,
    filtered_jobs,
    toggle_in_store,
)
from enrichment_monitor.dash_ui.theme import BG_SECONDARY, BORDER, PRIMARY, TEXT_TERTIARY
from enrichment_monitor.jobs.filters import FilterSpec
from enrichment_monitor.jobs.projection import project_rows
from enrichment_monitor.jobs.summary import summarize

dash.register_page(__name__, path="/", name="Enrichment Runs", order=0)


# ── Helpers ───────────────────────────────────────────────────────────────

def _card_panel(title: str, children, extra=None):
    """Wrap children inside a titled card panel."""
    header = [html.Span(title, style={"fontWeight": "600", "color": PRIMARY})]
    if extra is not None:
        header.append(extra)
    return html.Div(
        [
            html.Div(
                header,
                style={"display": "flex", "justifyContent": "space-between",
                       "alignItems": "baseline", "marginBottom": "12px"},
            ),
            html.Div(children),
        ],
        className="card-panel",
        style={"backgroundColor": BG_SECONDARY, "border": f"1px solid {BORDER}",
               "borderRadius": "6px", "padding": "16px"},
    )


# ── Layout ────────────────────────────────────────────────────────────────

layout = html.Div(
    [
        # Per-session page state
        dcc.Store(id="runs-filter-store"),
        dcc.Store(id="runs-expanded-store", data=[]),

        create_page_header("Enrichment Runs", subtitle="Monitor your dataset enrichment jobs."),

        html.Div(id="runs-status-cards", className="mb-4"),

        html.Div(filter_panel(DATASET_TYPES), className="mb-4"),

        dbc.Row(
            [
                dbc.Col(
                    _card_panel(
                        "Enrichment Runs",
                        html.Div(id="runs-grid"),
                        extra=html.Span(
                            id="runs-result-count",
                            style={"fontSize": "12px", "color": TEXT_TERTIARY},
                        ),
                    ),
                    lg=9,
                ),
                dbc.Col(
                    _card_panel(
                        "Status Breakdown",
                        dcc.Graph(id="runs-status-chart", config={"displayModeBar": False}),
                    ),
                    lg=3,
                ),
            ],
            className="g-3",
        ),
    ],
)


# ── Callbacks ─────────────────────────────────────────────────────────────

@callback(
    Output("runs-filter-store", "data"),
    Input("filter-apply-btn", "n_clicks"),
    State("filter-dataset-type", "value"),
    State("filter-status", "value"),
    State("filter-date-range", "start_date"),
    State("filter-date-range", "end_date"),
    prevent_initial_call=True,
)
def submit_filters(n_clicks, dataset_type, status, start_date, end_date):
    """Store the submitted filter form as a ``FilterSpec`` payload."""
    return filter_from_form(dataset_type, status, start_date, end_date)


@callback(
    Output("runs-expanded-store", "data"),
    Input({"type": TOGGLE_TYPE, "job": ALL}, "n_clicks"),
    State("runs-expanded-store", "data"),
    prevent_initial_call=True,
)
def toggle_row(n_clicks, expanded):
    """Flip the expansion state of the clicked row."""
    # Re-rendered toggles report n_clicks=0; only real clicks count
    if not ctx.triggered or not ctx.triggered[0].get("value"):
        raise PreventUpdate
    job_id = ctx.triggered_id["job"]
    return toggle_in_store(expanded, job_id, load_jobs())


@callback(
    Output("runs-status-cards", "children"),
    Input("url", "pathname"),
)
def update_status_cards(pathname):
    """Summary cards count the full collection, so they only render on page load."""
    return job_status_cards(summarize(load_jobs()))


@callback(
    Output("runs-grid", "children"),
    Output("runs-result-count", "children"),
    Output("runs-status-chart", "figure"),
    Input("runs-filter-store", "data"),
    Input("runs-expanded-store", "data"),
)
def render_grid(filter_data, expanded_data):
    """Filter, project and render the job grid plus the breakdown chart."""
    visible = filtered_jobs(load_jobs(), filter_data)
    expanded = expanded_from_store(expanded_data)
    rows = project_rows(visible, expanded, EXPAND_DEPTH)
    spec = FilterSpec.from_store(filter_data)

    noun = "job" if len(visible) == 1 else "jobs"
    count_text = f"Showing {len(visible)} {noun} ({spec.describe()})"

    grid = job_grid(rows, expanded, EXPAND_DEPTH)
    return grid, count_text, status_breakdown_chart(summarize(visible))
