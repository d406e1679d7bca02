"""
Reusable Dash components for the enrichment dashboard.

Components:
  - metric_card: KPI metric card
  - job_status_cards: Total / completed / running / failed summary row
  - status_badge: Coloured job status pill
  - job_grid: Hierarchical job table with expand/collapse toggles
  - filter_panel: Dataset type, status and date range filter form
  - alert_banner: Styled alert messages
  - chart_utils: Plotly chart factory functions
  - sidebar: Navigation sidebar with active state highlighting
  - page_header: Page header with title, subtitle, and actions
  - status_bar: Footer with live clock
"""

from .metric_card import metric_card
from .job_status_cards import job_status_cards
from .status_badge import status_badge
from .job_grid import job_grid
from .filter_panel import filter_panel
from .alert_banner import alert_banner
from .sidebar import create_sidebar, NAV_ITEMS
from .page_header import create_page_header
from .status_bar import create_status_bar
from . import chart_utils

__all__ = [
    "metric_card",
    "job_status_cards",
    "status_badge",
    "job_grid",
    "filter_panel",
    "alert_banner",
    "create_sidebar",
    "NAV_ITEMS",
    "chart_utils",
    "create_page_header",
    "create_status_bar",
]
