"""Enrichment job model, filtering and row projection."""
from .models import DateRange, EnrichmentJob, JobStatus, ProjectedRow
from .filters import ALL_VALUE, FilterSpec, apply_filters, end_of_day
from .projection import find_job, is_expandable, project_rows, toggle_expanded
from .summary import JobStats, summarize

__all__ = [
    "ALL_VALUE",
    "DateRange",
    "EnrichmentJob",
    "FilterSpec",
    "JobStats",
    "JobStatus",
    "ProjectedRow",
    "apply_filters",
    "end_of_day",
    "find_job",
    "is_expandable",
    "project_rows",
    "summarize",
    "toggle_expanded",
]
