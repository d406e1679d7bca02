"""Reusable KPI metric card component."""
from dash import html

from ..theme import ACCENT, TEXT_TERTIARY


def metric_card(label, value, color=ACCENT, subtitle=None, icon=None):
    """Create a styled KPI metric card.

    Args:
        label: Card title text.
        value: Main metric value.
        color: Accent color for the value text and icon.
        subtitle: Optional smaller text below the value.
        icon: Optional Font Awesome class string shown beside the label.
    """
    header_items = [
        html.Span(
            label,
            style={"fontSize": "13px", "fontWeight": "500", "color": TEXT_TERTIARY},
        ),
    ]
    if icon:
        header_items.append(html.I(className=icon, style={"color": color, "fontSize": "18px"}))

    children = [
        html.Div(
            header_items,
            style={"display": "flex", "justifyContent": "space-between",
                   "alignItems": "center", "marginBottom": "8px"},
        ),
        html.Div(
            str(value),
            style={"fontSize": "26px", "fontWeight": "bold", "color": color,
                   "lineHeight": "1.2"},
        ),
    ]

    if subtitle:
        children.append(html.Div(
            subtitle,
            style={"fontSize": "11px", "color": TEXT_TERTIARY, "marginTop": "4px"},
        ))

    return html.Div(children, className="metric-card")
