"""
Enrichment Monitor

Dashboard for monitoring dataset enrichment jobs:
  - Status summary cards and a per-status breakdown chart
  - Filter form over dataset type, status and start date range
  - Expandable grid of jobs and their dependent sub-jobs
"""

__version__ = "0.1.0"
