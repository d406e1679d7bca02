"""
Filter form for the enrichment job grid.

Dataset type and status dropdowns (each with an "All" option), a start/end
date range picker and an "Apply Filters" button.  The form only collects
raw values; ``FilterSpec.from_form`` turns them into criteria on submit.
"""
from typing import Sequence

import dash_bootstrap_components as dbc
from dash import dcc, html

from ...jobs.filters import ALL_VALUE
from ...jobs.models import JobStatus
from ..theme import ACCENT, PRIMARY_FOREGROUND, SECONDARY, TEXT_SECONDARY

_LABEL_STYLE = {"fontSize": "12px", "fontWeight": "500", "color": TEXT_SECONDARY,
                "marginBottom": "4px"}


def dataset_type_options(dataset_types: Sequence[str]) -> list:
    return [{"label": "All Types", "value": ALL_VALUE}] + [
        {"label": name, "value": name} for name in dataset_types
    ]


def status_options() -> list:
    return [{"label": "All Statuses", "value": ALL_VALUE}] + [
        {"label": status.label, "value": status.value} for status in JobStatus
    ]


def _field(label: str, control, width: dict) -> dbc.Col:
    return dbc.Col([html.Label(label, style=_LABEL_STYLE), control], **width)


def filter_panel(dataset_types: Sequence[str]) -> html.Div:
    """Build the filter form.

    Component ids: ``filter-dataset-type``, ``filter-status``,
    ``filter-date-range`` (start_date / end_date) and ``filter-apply-btn``.
    """
    return html.Div(
        dbc.Row(
            [
                _field(
                    "Dataset Type",
                    dcc.Dropdown(
                        id="filter-dataset-type",
                        options=dataset_type_options(dataset_types),
                        value=ALL_VALUE,
                        clearable=False,
                        style={"fontSize": "13px"},
                    ),
                    {"md": 3},
                ),
                _field(
                    "Status",
                    dcc.Dropdown(
                        id="filter-status",
                        options=status_options(),
                        value=ALL_VALUE,
                        clearable=False,
                        style={"fontSize": "13px"},
                    ),
                    {"md": 3},
                ),
                _field(
                    "Date Range",
                    dcc.DatePickerRange(
                        id="filter-date-range",
                        display_format="MMM D, YYYY",
                        start_date_placeholder_text="Start date",
                        end_date_placeholder_text="End date",
                        clearable=True,
                    ),
                    {"md": 4},
                ),
                dbc.Col(
                    dbc.Button(
                        [html.I(className="fa-solid fa-filter", style={"marginRight": "6px"}),
                         "Apply Filters"],
                        id="filter-apply-btn",
                        n_clicks=0,
                        style={"backgroundColor": ACCENT, "borderColor": ACCENT,
                               "color": PRIMARY_FOREGROUND, "width": "100%"},
                    ),
                    md=2,
                ),
            ],
            className="g-3 align-items-end",
        ),
        className="filter-panel",
        style={"backgroundColor": SECONDARY, "padding": "16px", "borderRadius": "6px"},
    )


__all__ = ["dataset_type_options", "filter_panel", "status_options"]
