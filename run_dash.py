#!/usr/bin/env python3
"""
Enrichment Insights -- Dash Dashboard Launcher.

Usage:
    python run_dash.py [--port PORT] [--host HOST] [--no-debug]

Defaults come from ``ENRICHMENT_*`` environment variables (see
``enrichment_monitor/config_structured.py``).
"""
import argparse
import sys

REQUIRED_PACKAGES = [
    ("dash", "dash"),
    ("dash_bootstrap_components", "dash-bootstrap-components"),
    ("plotly", "plotly"),
    ("flask_caching", "flask-caching"),
    ("pydantic", "pydantic"),
    ("pydantic_settings", "pydantic-settings"),
]


def _check_dependencies() -> list:
    """Return list of missing package install names."""
    missing = []
    for module_name, pip_name in REQUIRED_PACKAGES:
        try:
            __import__(module_name)
        except ImportError:
            missing.append(pip_name)
    return missing


def main():
    """Launch the Enrichment Insights dashboard."""
    missing = _check_dependencies()
    if missing:
        print(f"  [ERROR] Missing packages: {', '.join(missing)}")
        print(f"  Install with: pip install {' '.join(missing)}")
        sys.exit(1)

    from enrichment_monitor import config
    from enrichment_monitor.utils.logging import configure_logging

    parser = argparse.ArgumentParser(description="Enrichment Insights Dashboard")
    parser.add_argument("--port", type=int, default=config.PORT, help=f"Server port (default: {config.PORT})")
    parser.add_argument("--host", type=str, default=config.HOST, help=f"Server host (default: {config.HOST})")
    parser.add_argument("--no-debug", action="store_true", help="Disable debug mode")
    args = parser.parse_args()

    logger = configure_logging(config.LOG_LEVEL)

    issues = config.validate_config()
    for issue in issues:
        log = logger.error if issue["level"] == "ERROR" else logger.warning
        log("Config: %s", issue["message"])
    if any(issue["level"] == "ERROR" for issue in issues):
        print("  [ERROR] Invalid configuration, see log output above.")
        sys.exit(1)

    from enrichment_monitor.dash_ui.app import create_app

    app = create_app()

    debug = config.DEBUG and not args.no_debug
    mode = "DEBUG" if debug else "PRODUCTION"
    print(f"  [OK] {config.APP_TITLE} created ({mode} mode)")
    print(f"  [OK] Dashboard running at: http://{args.host}:{args.port}")
    print("  Press Ctrl+C to stop.")

    app.run(debug=debug, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
