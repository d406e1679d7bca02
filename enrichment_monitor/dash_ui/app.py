"""
Enrichment Insights Dashboard -- Dash Application Factory.

This module:
  - Configures the Plotly template for consistent styling
  - Creates the Dash app with multi-page support
  - Defines the sidebar navigation and footer status bar layout
  - Binds the Flask-Caching backend to the app's server
  - Applies Bootstrap theming (FLATLY) for consistent component styling
"""
import logging

import dash
import dash_bootstrap_components as dbc
from dash import dcc, html

from .. import __version__
from ..config import APP_TITLE
from .components.sidebar import create_sidebar
from .components.status_bar import create_status_bar
from .data.cache import init_cache
from .theme import BG_PRIMARY, PRIMARY, apply_plotly_template

logger = logging.getLogger(__name__)

FONT_AWESOME = "https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.5.1/css/all.min.css"


def create_app() -> dash.Dash:
    """
    Create and configure the Dash application with multi-page support.

    Returns:
        dash.Dash: Configured Dash application instance ready to run.
    """
    apply_plotly_template()

    app = dash.Dash(
        __name__,
        use_pages=True,
        pages_folder="pages",
        external_stylesheets=[dbc.themes.FLATLY, FONT_AWESOME],
        suppress_callback_exceptions=True,
        title=APP_TITLE,
        update_title=None,
        meta_tags=[
            {"name": "viewport", "content": "width=device-width, initial-scale=1"},
            {"name": "theme-color", "content": PRIMARY},
            {"name": "description", "content": "Monitor your dataset enrichment jobs."},
        ],
    )

    # Main layout: sidebar + page container + status bar
    app.layout = html.Div(
        [
            dcc.Location(id="url", refresh="callback-nav"),
            create_sidebar(APP_TITLE, __version__),
            html.Div(
                [
                    html.Div(
                        dash.page_container,
                        style={"flex": "1 1 auto", "padding": "24px"},
                    ),
                    create_status_bar(APP_TITLE),
                ],
                className="main-content",
                style={
                    "marginLeft": "240px",
                    "display": "flex",
                    "flexDirection": "column",
                    "minHeight": "100vh",
                },
            ),
        ],
        style={"backgroundColor": BG_PRIMARY, "minHeight": "100vh"},
    )

    init_cache(app)
    logger.info("Dash application created (%d pages)", len(dash.page_registry))
    return app
