"""Sidebar navigation component with active-state highlighting."""
from dash import ALL, Input, Output, callback, dcc, html

from ..theme import ACCENT, PRIMARY_FOREGROUND

NAV_ITEMS = [
    {"key": "runs", "label": "Enrichment Runs", "icon": "fa-solid fa-diagram-project", "path": "/"},
    {"key": "logs", "label": "System Logs",     "icon": "fa-solid fa-terminal",        "path": "/system-logs"},
]


def _nav_item(item):
    """Render a single navigation item."""
    return dcc.Link(
        html.Div(
            [
                html.I(
                    className=item["icon"],
                    style={"fontSize": "13px", "marginRight": "10px", "width": "18px",
                           "display": "inline-block", "textAlign": "center"},
                ),
                html.Span(item["label"], style={"fontSize": "13px"}),
            ],
            id={"type": "nav-item", "key": item["key"]},
            className="nav-item",
        ),
        href=item["path"],
        style={"textDecoration": "none"},
    )


def create_sidebar(app_title: str, version: str):
    """Create the full sidebar layout."""
    return html.Div(
        [
            html.Div(
                [
                    html.I(className="fa-solid fa-brain",
                           style={"color": ACCENT, "marginRight": "8px", "fontSize": "20px"}),
                    html.Span(
                        app_title,
                        style={"fontSize": "17px", "fontWeight": "600", "color": PRIMARY_FOREGROUND},
                    ),
                ],
                style={"display": "flex", "alignItems": "center", "padding": "20px 16px 8px"},
            ),
            html.Hr(style={"borderColor": PRIMARY_FOREGROUND, "opacity": "0.3", "margin": "12px 16px"}),
            html.Div([_nav_item(item) for item in NAV_ITEMS]),
            html.Div(
                f"v{version}",
                style={"position": "absolute", "bottom": "16px", "left": "16px",
                       "fontSize": "10px", "color": PRIMARY_FOREGROUND, "opacity": "0.6"},
            ),
        ],
        className="sidebar",
    )


def active_nav_classes(pathname):
    """Class name for each of ``NAV_ITEMS`` given the current URL path."""
    if pathname is None:
        pathname = "/"
    classes = []
    for item in NAV_ITEMS:
        if pathname == item["path"]:
            classes.append("nav-item active")
        elif item["path"] != "/" and pathname.startswith(item["path"]):
            classes.append("nav-item active")
        else:
            classes.append("nav-item")
    return classes


@callback(
    Output({"type": "nav-item", "key": ALL}, "className"),
    Input("url", "pathname"),
)
def update_active_nav(pathname):
    """Highlight the active navigation item based on URL."""
    return active_nav_classes(pathname)
