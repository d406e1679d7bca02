"""Job collection loaders used by the dashboard pages."""
import logging
from typing import List

from ...jobs.models import EnrichmentJob
from ...jobs.sample_data import build_sample_jobs
from .cache import cached

logger = logging.getLogger(__name__)


@cached()
def load_jobs() -> List[EnrichmentJob]:
    """Return the full top-level job collection."""
    jobs = build_sample_jobs()
    logger.info("Loaded %d enrichment jobs", len(jobs))
    return jobs


__all__ = ["load_jobs"]
