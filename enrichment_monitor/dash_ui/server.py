"""
WSGI entry point for the Enrichment Insights dashboard.

Usage:
    # Development
    $ python -m enrichment_monitor.dash_ui.server

    # Production with Gunicorn
    $ gunicorn -w 4 -b 0.0.0.0:8050 enrichment_monitor.dash_ui.server:server
"""
from ..config import DEBUG, HOST, LOG_LEVEL, PORT
from ..utils.logging import configure_logging
from .app import create_app

configure_logging(LOG_LEVEL)

# Create the Dash application
app = create_app()

# Extract Flask server instance for WSGI deployments (Gunicorn, etc.)
server = app.server


if __name__ == "__main__":
    app.run(
        debug=DEBUG,
        host=HOST,
        port=PORT,
        dev_tools_hot_reload=True,
    )
