"""
Alert banner component for inline dashboard messages.

Severity levels:
  - "success": green
  - "info": blue, used for the empty-result message
  - "warning": amber, used for configuration warnings
  - "danger": red
"""
from typing import Literal, Optional

import dash_bootstrap_components as dbc
from dash import html

from ..theme import ACCENT_AMBER, ACCENT_BLUE, ACCENT_GREEN, ACCENT_RED, TEXT_PRIMARY

SEVERITY_CONFIG = {
    "success": {"color": "success", "accent": ACCENT_GREEN, "icon": "fa-solid fa-circle-check"},
    "info": {"color": "info", "accent": ACCENT_BLUE, "icon": "fa-solid fa-circle-info"},
    "warning": {"color": "warning", "accent": ACCENT_AMBER, "icon": "fa-solid fa-triangle-exclamation"},
    "danger": {"color": "danger", "accent": ACCENT_RED, "icon": "fa-solid fa-circle-xmark"},
}
SEVERITY_CONFIG["error"] = SEVERITY_CONFIG["danger"]


def alert_banner(
    message: str,
    severity: Literal["success", "info", "warning", "danger", "error"] = "info",
    icon: Optional[str] = None,
    dismissable: bool = False,
) -> dbc.Alert:
    """
    Create a styled alert banner message.

    Args:
        message: Alert message text.
        severity: One of "success", "info", "warning", "danger"/"error".
            Unknown values fall back to "info".
        icon: Font Awesome class; defaults to the severity's icon.
        dismissable: If True, alert can be dismissed by user.

    Example:
        alert_banner("No enrichment jobs found matching the criteria.")
        alert_banner("DEBUG=True", severity="warning", dismissable=True)
    """
    config = SEVERITY_CONFIG.get(severity, SEVERITY_CONFIG["info"])
    accent = config["accent"]

    return dbc.Alert(
        html.Div(
            [
                html.I(
                    className=icon or config["icon"],
                    style={"marginRight": "8px", "color": accent},
                ),
                html.Span(
                    message,
                    style={"fontSize": "13px", "color": TEXT_PRIMARY, "lineHeight": "1.4"},
                ),
            ],
            style={"display": "flex", "alignItems": "center", "justifyContent": "center"},
        ),
        color=config["color"],
        style={
            "borderLeft": f"4px solid {accent}",
            "borderRadius": "3px",
            "padding": "10px 12px",
            "marginBottom": "12px",
        },
        dismissable=dismissable,
        is_open=True,
    )


__all__ = ["alert_banner"]
