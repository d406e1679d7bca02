"""Bottom status bar with a live clock."""
import sys
from datetime import datetime

from dash import Input, Output, callback, dcc, html

from ..theme import BORDER, SECONDARY, TEXT_TERTIARY

_TEXT_STYLE = {"fontSize": "11px", "color": TEXT_TERTIARY}


def create_status_bar(app_title: str):
    """Create the bottom status bar."""
    return html.Div(
        [
            html.Span(f"{app_title.upper()}  |  Python {sys.version.split()[0]}", style=_TEXT_STYLE),
            html.Span(id="live-time", children="--:--:--", style=_TEXT_STYLE),
            dcc.Interval(id="live-time-interval", interval=1000, n_intervals=0),
        ],
        style={
            "padding": "6px 16px",
            "borderTop": f"1px solid {BORDER}",
            "backgroundColor": SECONDARY,
            "display": "flex",
            "justifyContent": "space-between",
            "alignItems": "center",
            "flexShrink": "0",
        },
    )


@callback(
    Output("live-time", "children"),
    Input("live-time-interval", "n_intervals"),
)
def update_live_time(n_intervals: int) -> str:
    """Update the live time display in the status bar every second."""
    return datetime.now().strftime("%H:%M:%S")
