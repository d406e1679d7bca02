"""
Enrichment Insights - Dash UI Package

Web interface for the enrichment job monitor:
  - Job status summary cards and per-status breakdown chart
  - Filter form over dataset type, status and start date range
  - Expandable grid of jobs and their dependent jobs
  - Recent log viewer
"""

from .. import __version__

__description__ = "Dash dashboard for monitoring dataset enrichment jobs"

__all__ = [
    "__version__",
    "__description__",
]
