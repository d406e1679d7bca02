"""
Job status badge component.

Small pill showing the status icon and capitalized label with the
status colour scheme (completed green, running blue, failed red,
pending grey).
"""
from dash import html

from ...jobs.models import JobStatus
from ..theme import STATUS_STYLES


def status_badge(status: JobStatus) -> html.Span:
    """
    Create a coloured badge for a job status.

    Example:
        status_badge(JobStatus.failed)  # red "Failed" badge with a cross icon
    """
    status = JobStatus(status)
    style = STATUS_STYLES[status.value]

    return html.Span(
        [
            html.I(className=style["icon"], style={"marginRight": "6px", "fontSize": "12px"}),
            html.Span(status.label),
        ],
        className="status-badge",
        style={
            "display": "inline-flex",
            "alignItems": "center",
            "padding": "2px 10px",
            "fontSize": "12px",
            "fontWeight": "500",
            "color": style["color"],
            "backgroundColor": style["background"],
            "border": f"1px solid {style['border']}",
            "borderRadius": "9999px",
            "whiteSpace": "nowrap",
        },
    )


__all__ = ["status_badge"]
