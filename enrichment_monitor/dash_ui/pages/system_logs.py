"""System Logs -- recent log records from the enrichment monitor."""
import dash
import dash_bootstrap_components as dbc
from dash import Input, Output, callback, ctx, dash_table, dcc, html

from enrichment_monitor.dash_ui.components.page_header import create_page_header
from enrichment_monitor.dash_ui.data.log_buffer import (
    BUFFER_SIZE,
    LEVEL_ORDER,
    LOG_BUFFER,
    filter_entries,
    install_log_handler,
)
from enrichment_monitor.dash_ui.theme import (
    ACCENT_AMBER,
    ACCENT_BLUE,
    ACCENT_RED,
    BG_MUTED,
    BORDER_LIGHT,
    TEXT_TERTIARY,
)

dash.register_page(__name__, path="/system-logs", name="System Logs", order=1)

install_log_handler()

LEVEL_COLORS = {"CRITICAL": ACCENT_RED, "ERROR": ACCENT_RED, "WARNING": ACCENT_AMBER,
                "INFO": ACCENT_BLUE, "DEBUG": TEXT_TERTIARY}


def count_text(shown: int) -> str:
    return f"{shown} entries  |  Buffer: {len(LOG_BUFFER)}/{BUFFER_SIZE}"


layout = html.Div(
    [
        dcc.Interval(id="logs-interval", interval=3000, n_intervals=0),
        create_page_header(
            "System Logs",
            subtitle="Recent dashboard log records",
            actions=dbc.Button("Clear Logs", id="logs-clear-btn", color="secondary", size="sm"),
        ),
        dbc.Row(
            [
                dbc.Col(
                    dcc.Dropdown(
                        id="logs-level-filter",
                        options=[{"label": "All", "value": "ALL"}]
                        + [{"label": level, "value": level} for level in LEVEL_ORDER],
                        value="ALL",
                        clearable=False,
                    ),
                    md=2,
                ),
                dbc.Col(html.Div(id="logs-count-badge", style={"color": TEXT_TERTIARY}), md=4),
            ],
            className="mb-3 align-items-center",
        ),
        dash_table.DataTable(
            id="logs-table",
            columns=[{"name": name.title(), "id": name}
                     for name in ("timestamp", "level", "module", "message")],
            data=[],
            page_size=50,
            style_header={"backgroundColor": BG_MUTED, "fontWeight": "600"},
            style_cell={"fontSize": "12px", "textAlign": "left",
                        "border": f"1px solid {BORDER_LIGHT}"},
            style_data_conditional=[
                {"if": {"filter_query": f'{{level}} = "{level}"'}, "color": color}
                for level, color in LEVEL_COLORS.items()
            ],
        ),
    ]
)


@callback(
    Output("logs-table", "data"),
    Output("logs-count-badge", "children"),
    Input("logs-interval", "n_intervals"),
    Input("logs-clear-btn", "n_clicks"),
    Input("logs-level-filter", "value"),
)
def update_logs(n_intervals, clear_clicks, level_filter):
    """Refresh the log table from the circular buffer."""
    if ctx.triggered_id == "logs-clear-btn":
        LOG_BUFFER.clear()

    entries = filter_entries(list(LOG_BUFFER), level_filter)
    return entries, count_text(len(entries))
