"""
Dash page modules for the enrichment dashboard.

Each module registers itself with ``dash.register_page`` when the app is
created with ``use_pages=True``:
  - enrichment_runs.py: summary cards, filters and job grid (/)
  - system_logs.py: recent log records (/system-logs)
"""

__all__ = []
