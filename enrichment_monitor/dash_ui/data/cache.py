"""
Caching layer for Dash UI data loading operations.

Provides a cache instance and decorator for memoizing data loading across
callbacks.  The cache is bound to the Dash app's Flask server by
``init_cache`` (called from ``create_app``) with the Flask-Caching
FileSystemCache backend configured in ``config.py``.

Usage:
    from enrichment_monitor.dash_ui.data.cache import cached

    @cached(timeout=300)  # Cache for 5 minutes
    def load_jobs():
        return build_jobs()
"""
from functools import wraps
from typing import Callable

from flask_caching import Cache

from ... import __version__
from ...config import CACHE_DIR, CACHE_THRESHOLD, CACHE_TIMEOUT

# Global cache instance - bound to a server via init_cache()
cache = Cache()

# Pickled entries are only valid for the code version that wrote them
VERSIONED_CACHE_DIR = CACHE_DIR / f"v{__version__}"


def cache_config() -> dict:
    """Flask-Caching settings derived from ``config.py``."""
    return {
        "CACHE_TYPE": "FileSystemCache",
        "CACHE_DIR": str(VERSIONED_CACHE_DIR),
        "CACHE_DEFAULT_TIMEOUT": CACHE_TIMEOUT,
        "CACHE_THRESHOLD": CACHE_THRESHOLD,
    }


def init_cache(app) -> None:
    """
    Initialize the Flask cache instance with a Dash application.

    Must be called once after creating the Dash app.

    Args:
        app: A Dash application instance (has .server attribute).
    """
    VERSIONED_CACHE_DIR.mkdir(parents=True, exist_ok=True)
    cache.init_app(app.server, config=cache_config())


def cached(timeout: int = CACHE_TIMEOUT) -> Callable:
    """
    Decorator to cache function results for a specified duration.

    Wraps Flask-Caching's memoize decorator; the cache key is derived from
    the function name and arguments.  Must be called within the Flask
    application context (i.e. from a Dash callback).

    Args:
        timeout: Cache duration in seconds.
    """
    def decorator(func: Callable) -> Callable:
        # Create the memoized version once at decoration time
        memoized = cache.memoize(timeout=timeout)(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            return memoized(*args, **kwargs)
        return wrapper
    return decorator


__all__ = [
    "VERSIONED_CACHE_DIR",
    "cache",
    "cache_config",
    "init_cache",
    "cached",
]
