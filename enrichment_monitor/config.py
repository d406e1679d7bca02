"""
Central configuration for the enrichment monitor.

Flat-constant interface.  Every value is derived from the structured
settings singleton in ``config_structured.py`` so there is a single source
of truth; override through ``ENRICHMENT_*`` environment variables.
"""
from pathlib import Path

from .config_structured import get_config as _get_config

_cfg = _get_config()

# ── Paths ──────────────────────────────────────────────────────────────
ROOT_DIR = Path(__file__).parent
CACHE_DIR = Path(_cfg.cache_dir)

# ── Server ────────────────────────────────────────────────────────────
APP_TITLE = _cfg.app_title
HOST = _cfg.host
PORT = _cfg.port
DEBUG = _cfg.debug
LOG_LEVEL = _cfg.log_level.upper()

# ── Caching (Flask-Caching filesystem backend) ────────────────────────
CACHE_TIMEOUT = _cfg.cache_timeout
CACHE_THRESHOLD = _cfg.cache_threshold

# ── Grid behaviour ────────────────────────────────────────────────────
EXPAND_DEPTH = _cfg.expand_depth        # 1 = only top-level rows expand
DATASET_TYPES = list(_cfg.dataset_types)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_config() -> list:
    """Check config for common misconfigurations.

    Returns a list of dicts: [{"level": "WARNING"|"ERROR", "message": str}].
    Called by the launcher before the server starts.
    """
    issues = []

    if not 1 <= PORT <= 65535:
        issues.append({
            "level": "ERROR",
            "message": f"PORT={PORT} is outside the valid range 1-65535.",
        })

    if CACHE_TIMEOUT < 0:
        issues.append({
            "level": "ERROR",
            "message": f"CACHE_TIMEOUT={CACHE_TIMEOUT} must be >= 0 seconds (0 disables expiry).",
        })

    if EXPAND_DEPTH < 0:
        issues.append({
            "level": "ERROR",
            "message": f"EXPAND_DEPTH={EXPAND_DEPTH} must be >= 0.",
        })
    elif EXPAND_DEPTH == 0:
        issues.append({
            "level": "WARNING",
            "message": "EXPAND_DEPTH=0 disables row expansion; dependent jobs will never be shown.",
        })

    if LOG_LEVEL not in _LOG_LEVELS:
        issues.append({
            "level": "WARNING",
            "message": f"LOG_LEVEL={LOG_LEVEL!r} is not a standard level; falling back to INFO.",
        })

    if not DATASET_TYPES:
        issues.append({
            "level": "WARNING",
            "message": "DATASET_TYPES is empty; the dataset type filter offers only 'All Types'.",
        })

    if DEBUG:
        issues.append({
            "level": "WARNING",
            "message": "DEBUG=True; disable with ENRICHMENT_DEBUG=false for production.",
        })

    return issues
