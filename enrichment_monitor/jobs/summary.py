"""Per-status job counts for the summary cards and breakdown chart."""
from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass
from typing import Dict, Sequence

from .models import EnrichmentJob, JobStatus


@dataclass(frozen=True)
class JobStats:
    """Counts over top-level jobs; dependent jobs are not counted."""

    total: int = 0
    completed: int = 0
    running: int = 0
    failed: int = 0
    pending: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)

    def by_status(self) -> Dict[JobStatus, int]:
        return {status: getattr(self, status.value) for status in JobStatus}


def summarize(jobs: Sequence[EnrichmentJob]) -> JobStats:
    counts = Counter(job.status for job in jobs)
    return JobStats(
        total=len(jobs),
        completed=counts[JobStatus.completed],
        running=counts[JobStatus.running],
        failed=counts[JobStatus.failed],
        pending=counts[JobStatus.pending],
    )


__all__ = ["JobStats", "summarize"]
