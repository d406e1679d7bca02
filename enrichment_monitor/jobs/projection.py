"""
Hierarchical row projection for the enrichment job grid.

Flattens a job forest into an ordered sequence of ``ProjectedRow(job, depth)``
pairs.  A job's dependents are emitted directly after it, one level deeper,
only when the job's id is in the expansion set and the job sits above the
expansion depth cap.  With the default cap of 1 only top-level rows can be
expanded: dependent rows are always rendered collapsed, however deeply the
data nests.

Expansion state is an explicit set of job ids owned by the caller, which
keeps ``project_rows`` a pure function of its arguments.
"""
from __future__ import annotations

import logging
from typing import AbstractSet, Iterable, Iterator, List, Optional, Sequence

from .models import EnrichmentJob, ProjectedRow

logger = logging.getLogger(__name__)

DEFAULT_EXPAND_DEPTH = 1


def is_expandable(
    job: EnrichmentJob,
    depth: int = 0,
    max_expand_depth: Optional[int] = DEFAULT_EXPAND_DEPTH,
) -> bool:
    """Whether a row at ``depth`` gets an expand/collapse toggle.

    Leaves are never expandable.  ``max_expand_depth=None`` lifts the cap.
    """
    if not job.has_dependents:
        return False
    return max_expand_depth is None or depth < max_expand_depth


def _walk(
    jobs: Iterable[EnrichmentJob],
    expanded: AbstractSet[str],
    depth: int,
    max_expand_depth: Optional[int],
) -> Iterator[ProjectedRow]:
    for job in jobs:
        yield ProjectedRow(job, depth)
        if job.id in expanded and is_expandable(job, depth, max_expand_depth):
            yield from _walk(job.dependent_jobs, expanded, depth + 1, max_expand_depth)


def project_rows(
    jobs: Sequence[EnrichmentJob],
    expanded: AbstractSet[str] = frozenset(),
    max_expand_depth: Optional[int] = DEFAULT_EXPAND_DEPTH,
) -> List[ProjectedRow]:
    """Depth-first flattening of ``jobs`` honouring the expansion set.

    Args:
        jobs: Top-level jobs in display order.
        expanded: Ids of jobs whose dependents are visible.
        max_expand_depth: Rows at this depth or deeper never expand.

    Returns:
        List of ``ProjectedRow`` in display order.

    Example:
        project_rows([job_001], {"job-001"})
        # [(job-001, 0), (dep-001a, 1), (dep-001b, 1)]
    """
    return list(_walk(jobs, expanded, 0, max_expand_depth))


def toggle_expanded(expanded: AbstractSet[str], job: EnrichmentJob) -> frozenset:
    """Return a new expansion set with ``job`` flipped.

    Toggling a leaf returns the set unchanged.
    """
    current = frozenset(expanded)
    if not job.has_dependents:
        logger.debug("Ignoring toggle on leaf job %s", job.id)
        return current
    if job.id in current:
        logger.debug("Collapsing job %s", job.id)
        return current - {job.id}
    logger.debug("Expanding job %s", job.id)
    return current | {job.id}


def find_job(jobs: Iterable[EnrichmentJob], job_id: str) -> Optional[EnrichmentJob]:
    """Depth-first lookup of a job by id anywhere in the forest."""
    for job in jobs:
        if job.id == job_id:
            return job
        found = find_job(job.dependent_jobs, job_id)
        if found is not None:
            return found
    return None


__all__ = [
    "DEFAULT_EXPAND_DEPTH",
    "find_job",
    "is_expandable",
    "project_rows",
    "toggle_expanded",
]
