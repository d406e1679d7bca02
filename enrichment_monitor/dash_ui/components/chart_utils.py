"""
Plotly chart factory functions for the enrichment dashboard.

All functions return go.Figure instances with the dashboard template
pre-applied and consistent margins.

Functions provided:
  - bar_chart: Horizontal/vertical bar chart
  - status_breakdown_chart: Job counts per status
"""
from typing import List, Optional

import plotly.graph_objects as go

from ...jobs.models import JobStatus
from ...jobs.summary import JobStats
from ..theme import CHART_COLORS, STATUS_COLORS, create_figure, empty_figure


def bar_chart(
    labels: List[str],
    values: List[float],
    title: str = "",
    colors: Optional[List[str]] = None,
    horizontal: bool = False,
    **kwargs
) -> go.Figure:
    """
    Create a bar chart (vertical or horizontal).

    Args:
        labels: Category labels.
        values: Bar values.
        title: Chart title.
        colors: Optional list of colors for each bar.
        horizontal: If True, create horizontal bar chart.
        **kwargs: Additional arguments passed to create_figure.

    Returns:
        go.Figure: Bar chart.
    """
    if colors is None:
        colors = [CHART_COLORS[i % len(CHART_COLORS)] for i in range(len(labels))]

    fig = create_figure(title=title, **kwargs)

    if horizontal:
        fig.add_trace(go.Bar(
            y=labels,
            x=values,
            orientation="h",
            marker=dict(color=colors),
            hovertemplate="<b>%{y}</b><br>%{x}<extra></extra>",
        ))
    else:
        fig.add_trace(go.Bar(
            x=labels,
            y=values,
            marker=dict(color=colors),
            hovertemplate="<b>%{x}</b><br>%{y}<extra></extra>",
        ))

    return fig


def status_breakdown_chart(stats: JobStats) -> go.Figure:
    """Horizontal bars of job counts per status, in status order."""
    if stats.total == 0:
        return empty_figure("No jobs to chart")

    counts = stats.by_status()
    statuses = list(JobStatus)
    fig = bar_chart(
        labels=[status.label for status in statuses],
        values=[counts[status] for status in statuses],
        colors=[STATUS_COLORS[status.value] for status in statuses],
        horizontal=True,
        height=220,
    )
    fig.update_yaxes(autorange="reversed")
    fig.update_xaxes(dtick=1, rangemode="tozero")
    return fig


__all__ = ["bar_chart", "status_breakdown_chart"]
