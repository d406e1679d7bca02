"""
Browser-store payloads for the Enrichment Runs page.

Page state lives in two ``dcc.Store`` components, both JSON-safe:
  - ``runs-filter-store``: ``FilterSpec.to_store()`` dict, or None
  - ``runs-expanded-store``: sorted list of expanded job ids, or None

The helpers here convert between those payloads and the core types so the
page callbacks stay thin.
"""
import logging
from typing import FrozenSet, List, Optional, Sequence

from ..jobs.filters import FilterSpec, apply_filters
from ..jobs.models import EnrichmentJob
from ..jobs.projection import find_job, toggle_expanded

logger = logging.getLogger(__name__)


def expanded_from_store(data: Optional[Sequence[str]]) -> FrozenSet[str]:
    return frozenset(data or ())


def expanded_to_store(expanded: FrozenSet[str]) -> List[str]:
    return sorted(expanded)


def toggle_in_store(
    data: Optional[Sequence[str]],
    job_id: str,
    jobs: Sequence[EnrichmentJob],
) -> List[str]:
    """Flip ``job_id`` in the stored expansion set.

    Unknown ids and leaf jobs leave the set unchanged.
    """
    expanded = expanded_from_store(data)
    job = find_job(jobs, job_id)
    if job is None:
        logger.warning("Toggle for unknown job id %r ignored", job_id)
        return expanded_to_store(expanded)
    return expanded_to_store(toggle_expanded(expanded, job))


def filter_from_form(dataset_type, status, start_date, end_date) -> dict:
    """Build the filter-store payload from the submitted form values."""
    spec = FilterSpec.from_form(dataset_type, status, start_date, end_date)
    logger.info("Applying filters: %s", spec.describe())
    return spec.to_store()


def filtered_jobs(jobs: Sequence[EnrichmentJob], filter_data: Optional[dict]) -> List[EnrichmentJob]:
    spec = FilterSpec.from_store(filter_data)
    result = apply_filters(jobs, spec)
    logger.info("Filter %s kept %d of %d jobs", spec.describe(), len(result), len(jobs))
    return result


__all__ = [
    "expanded_from_store",
    "expanded_to_store",
    "filter_from_form",
    "filtered_jobs",
    "toggle_in_store",
]
