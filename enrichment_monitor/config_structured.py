"""
Structured configuration for the enrichment monitor dashboard.

This is the AUTHORITATIVE source of truth for all configuration values.
``config.py`` derives its flat constants from here.

Values are read from the environment with the ``ENRICHMENT_`` prefix, e.g.::

    ENRICHMENT_PORT=8060 ENRICHMENT_DEBUG=false python run_dash.py

Usage:
    from enrichment_monitor.config_structured import get_config
    cfg = get_config()
    cfg.port
    cfg.expand_depth
"""
from __future__ import annotations

import tempfile
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DashboardSettings(BaseSettings):
    """Settings loaded from environment / .env file."""

    app_title: str = "Enrichment Insights"
    host: str = "127.0.0.1"
    port: int = 8050
    debug: bool = True
    log_level: str = "INFO"

    cache_dir: Path = Path(tempfile.gettempdir()) / "enrichment_dash_cache"
    cache_timeout: int = 60  # seconds
    cache_threshold: int = 500

    # Rows at this depth or deeper are never expandable (1 = top level only)
    expand_depth: int = 1

    dataset_types: List[str] = Field(
        default_factory=lambda: ["Customer", "Product", "Sales", "Inventory", "Logs"]
    )

    model_config = SettingsConfigDict(env_prefix="ENRICHMENT_", env_file=".env", extra="ignore")


_CONFIG: Optional[DashboardSettings] = None


def get_config() -> DashboardSettings:
    """Return the singleton settings instance.

    On first call, reads the environment. Subsequent calls return the same
    instance so all callers share one source of truth.
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = DashboardSettings()
    return _CONFIG


def reset_config() -> None:
    """Drop the cached settings so the next ``get_config`` re-reads the environment."""
    global _CONFIG
    _CONFIG = None


__all__ = ["DashboardSettings", "get_config", "reset_config"]
