"""
Hierarchical job grid component.

Renders projected rows (see ``jobs.projection.project_rows``) as a table:
  - One row per ``ProjectedRow``, indented by depth
  - Chevron toggle button on expandable rows, spacer on the rest
  - Status badge, dataset type, start and end time columns
  - Muted background on dependent-job rows
  - Explicit "no results" message when the filtered set is empty
"""
from typing import AbstractSet, Optional, Sequence

import dash_bootstrap_components as dbc
from dash import html

from ...jobs.models import EnrichmentJob, JobStatus, ProjectedRow
from ...jobs.projection import DEFAULT_EXPAND_DEPTH, is_expandable
from ..theme import BG_MUTED, BG_SECONDARY, BORDER, TEXT_SECONDARY, TEXT_TERTIARY, format_timestamp
from .alert_banner import alert_banner
from .status_badge import status_badge

GRID_COLUMNS = ["Job Name", "Status", "Dataset Type", "Start Time", "End Time"]

# Pattern-matching id type for the expand/collapse buttons
TOGGLE_TYPE = "job-toggle"

NO_RESULTS_MESSAGE = "No enrichment jobs found matching the criteria."

_OPEN_STATUSES = (JobStatus.running, JobStatus.pending)


def end_time_label(job: EnrichmentJob) -> str:
    """End time text; running and pending jobs always show "-"."""
    if job.status in _OPEN_STATUSES:
        return "-"
    return format_timestamp(job.end_time)


def row_indent(depth: int) -> str:
    """Left padding for a row at ``depth``: 1rem base plus 1.5rem per level."""
    return f"{depth * 1.5 + 1}rem"


def _toggle(job: EnrichmentJob, is_open: bool) -> html.Button:
    chevron = "fa-solid fa-chevron-down" if is_open else "fa-solid fa-chevron-right"
    return html.Button(
        html.I(className=chevron),
        id={"type": TOGGLE_TYPE, "job": job.id},
        n_clicks=0,
        title="Collapse" if is_open else "Expand",
        className="grid-toggle",
        style={
            "width": "24px",
            "height": "24px",
            "padding": "0",
            "border": "none",
            "background": "transparent",
            "color": TEXT_SECONDARY,
            "cursor": "pointer",
        },
    )


def _name_cell(row: ProjectedRow, expanded: AbstractSet[str], max_expand_depth: Optional[int]):
    job = row.job
    if is_expandable(job, row.depth, max_expand_depth):
        lead = _toggle(job, job.id in expanded)
    else:
        # Keep names aligned with the toggled rows
        lead = html.Span(style={"display": "inline-block", "width": "24px"})
    return html.Td(
        html.Div(
            [lead, html.Span(job.name, style={"fontWeight": "500"})],
            style={"display": "flex", "alignItems": "center", "gap": "8px"},
        ),
        style={"paddingLeft": row_indent(row.depth)},
    )


def job_row(
    row: ProjectedRow,
    expanded: AbstractSet[str] = frozenset(),
    max_expand_depth: Optional[int] = DEFAULT_EXPAND_DEPTH,
) -> html.Tr:
    """Render a single projected row."""
    job = row.job
    return html.Tr(
        [
            _name_cell(row, expanded, max_expand_depth),
            html.Td(status_badge(job.status)),
            html.Td(job.dataset_type),
            html.Td(format_timestamp(job.start_time)),
            html.Td(end_time_label(job)),
        ],
        id={"type": "job-row", "job": job.id},
        className="job-row child-row" if row.depth > 0 else "job-row",
        style={"backgroundColor": BG_MUTED if row.depth > 0 else BG_SECONDARY},
    )


def job_grid(
    rows: Sequence[ProjectedRow],
    expanded: AbstractSet[str] = frozenset(),
    max_expand_depth: Optional[int] = DEFAULT_EXPAND_DEPTH,
):
    """
    Build the grid for already-projected rows.

    Args:
        rows: Output of ``project_rows`` for the filtered jobs.
        expanded: Current expansion set, used to pick the chevron direction.
        max_expand_depth: Same cap that was used for the projection.

    Returns:
        dbc.Table, or a centred message when ``rows`` is empty.
    """
    if not rows:
        return html.Div(
            alert_banner(NO_RESULTS_MESSAGE, severity="info"),
            id="job-grid-empty",
            style={"padding": "24px 0", "color": TEXT_TERTIARY},
        )

    header = html.Thead(html.Tr([html.Th(name) for name in GRID_COLUMNS]))
    body = html.Tbody([job_row(row, expanded, max_expand_depth) for row in rows])
    return dbc.Table(
        [header, body],
        id="job-grid-table",
        hover=True,
        responsive=True,
        className="job-grid mb-0",
        style={"fontSize": "13px", "borderColor": BORDER},
    )


__all__ = [
    "GRID_COLUMNS",
    "NO_RESULTS_MESSAGE",
    "TOGGLE_TYPE",
    "end_time_label",
    "job_grid",
    "job_row",
    "row_indent",
]
