"""
Enrichment Insights theme for the Dash dashboard.

Dark-blue primary, light-grey secondary and teal accent palette, plus a
custom Plotly template applied globally to all charts.
"""
from datetime import datetime
from typing import Optional

import plotly.graph_objects as go
import plotly.io as pio

# ── Color Palette ─────────────────────────────────────────────────────
PRIMARY = "#1a237e"
PRIMARY_FOREGROUND = "#fafafa"
SECONDARY = "#eeeeee"
ACCENT = "#00acc1"

BG_PRIMARY = "#fafafa"
BG_SECONDARY = "#ffffff"
BG_MUTED = "#f4f4f5"

BORDER = "#e0e0e0"
BORDER_LIGHT = "#eeeeee"

TEXT_PRIMARY = "#0a0a0a"
TEXT_SECONDARY = "#3f3f46"
TEXT_TERTIARY = "#71717a"

ACCENT_BLUE = "#1e40af"
ACCENT_GREEN = "#166534"
ACCENT_RED = "#991b1b"
ACCENT_GREY = "#4b5563"
ACCENT_AMBER = "#b45309"

CHART_COLORS = [ACCENT, PRIMARY, "#3fb950", "#f85149", "#d29922", "#bc8cff"]

# Badge styling per job status value
STATUS_STYLES = {
    "completed": {
        "color": ACCENT_GREEN,
        "background": "#dcfce7",
        "border": "#86efac",
        "icon": "fa-solid fa-circle-check",
    },
    "running": {
        "color": ACCENT_BLUE,
        "background": "#dbeafe",
        "border": "#93c5fd",
        "icon": "fa-solid fa-spinner fa-spin",
    },
    "failed": {
        "color": ACCENT_RED,
        "background": "#fee2e2",
        "border": "#fca5a5",
        "icon": "fa-solid fa-circle-xmark",
    },
    "pending": {
        "color": ACCENT_GREY,
        "background": "#f3f4f6",
        "border": "#d1d5db",
        "icon": "fa-regular fa-circle",
    },
}

# Chart bar colours follow the badge text colours
STATUS_COLORS = {status: style["color"] for status, style in STATUS_STYLES.items()}

TEMPLATE_NAME = "enrichment_light"


def apply_plotly_template():
    """Register and activate the Enrichment Insights Plotly template."""
    template = go.layout.Template(
        layout=go.Layout(
            paper_bgcolor=BG_SECONDARY,
            plot_bgcolor=BG_SECONDARY,
            font=dict(family="Inter, Helvetica, Arial, sans-serif", color=TEXT_PRIMARY, size=12),
            title=dict(font=dict(size=14, color=TEXT_PRIMARY)),
            xaxis=dict(
                gridcolor=BORDER_LIGHT,
                zerolinecolor=BORDER,
                linecolor=BORDER,
                tickfont=dict(color=TEXT_SECONDARY, size=11),
            ),
            yaxis=dict(
                gridcolor=BORDER_LIGHT,
                zerolinecolor=BORDER,
                linecolor=BORDER,
                tickfont=dict(color=TEXT_SECONDARY, size=11),
            ),
            colorway=CHART_COLORS,
            hoverlabel=dict(
                bgcolor=BG_SECONDARY,
                font_color=TEXT_PRIMARY,
                bordercolor=BORDER,
            ),
            margin=dict(l=40, r=20, t=40, b=30),
        )
    )
    pio.templates[TEMPLATE_NAME] = template
    pio.templates.default = TEMPLATE_NAME


def create_figure(**kwargs) -> go.Figure:
    """
    Create a Plotly figure with the dashboard template applied.

    Accepts any kwargs to update_layout.

    Returns:
        go.Figure: Figure with template applied and tight margins.
    """
    fig = go.Figure()
    margins = kwargs.pop("margin", dict(l=40, r=20, t=30, b=30))
    fig.update_layout(
        template=TEMPLATE_NAME,
        margin=margins,
        **kwargs
    )
    return fig


def empty_figure(message: str = "No data available") -> go.Figure:
    """
    Return an empty Plotly figure with a centered message.

    Args:
        message: Text message to display in center of figure.

    Returns:
        go.Figure: Empty figure with centered message annotation.
    """
    fig = go.Figure()
    fig.update_layout(
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        annotations=[dict(
            text=message,
            xref="paper", yref="paper",
            x=0.5, y=0.5,
            showarrow=False,
            font=dict(size=14, color=TEXT_TERTIARY),
        )],
        height=240,
    )
    return fig


def format_timestamp(value: Optional[datetime]) -> str:
    """
    Format a timestamp as ``MMM d, yyyy HH:mm:ss``.

    Args:
        value: Timestamp to format, or None.

    Returns:
        str: e.g. "Apr 25, 2024 08:00:00", or "-" when value is None.
    """
    if value is None:
        return "-"
    return f"{value:%b} {value.day}, {value:%Y %H:%M:%S}"
