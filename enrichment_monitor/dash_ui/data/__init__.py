"""Data loading and caching for the dashboard."""
