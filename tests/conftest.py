"""Shared test fixtures for the enrichment_monitor test suite."""
from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from enrichment_monitor.jobs.models import EnrichmentJob
from enrichment_monitor.jobs.sample_data import BASE_TIME, build_sample_jobs


# ── Job fixtures ─────────────────────────────────────────────────────


@pytest.fixture
def sample_jobs():
    """The six top-level placeholder jobs shown on the dashboard."""
    return build_sample_jobs()


@pytest.fixture
def make_job():
    """Factory for ad-hoc jobs; ``children`` become dependent jobs."""

    def _make(
        job_id: str,
        *,
        status: str = "completed",
        dataset_type: str = "Customer",
        start_time: datetime = BASE_TIME,
        end_time: datetime | None = None,
        children: list | None = None,
    ) -> EnrichmentJob:
        return EnrichmentJob(
            id=job_id,
            name=f"Job {job_id}",
            status=status,
            start_time=start_time,
            end_time=end_time,
            dataset_type=dataset_type,
            dependent_jobs=children or [],
        )

    return _make


@pytest.fixture
def deep_job(make_job):
    """Three levels: root -> mid -> leaf."""
    leaf = make_job("leaf", start_time=BASE_TIME + timedelta(minutes=2))
    mid = make_job("mid", start_time=BASE_TIME + timedelta(minutes=1), children=[leaf])
    return make_job("root", children=[mid])
