"""Enrichment job data models."""
from __future__ import annotations

import enum
from datetime import datetime
from typing import List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class JobStatus(str, enum.Enum):
    completed = "completed"
    running = "running"
    failed = "failed"
    pending = "pending"

    @property
    def label(self) -> str:
        """Capitalized display label, e.g. ``"Completed"``."""
        return self.value.capitalize()


class EnrichmentJob(BaseModel):
    """One enrichment run, possibly with nested dependent jobs.

    Accepts the camelCase keys of the dashboard's data literals
    (``startTime``, ``datasetType``, ``dependentJobs``) as well as the
    snake_case field names.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str
    name: str
    status: JobStatus
    start_time: datetime
    end_time: Optional[datetime] = None
    dataset_type: str
    dependent_jobs: List[EnrichmentJob] = Field(default_factory=list)

    @field_validator("dependent_jobs", mode="before")
    @classmethod
    def _none_means_no_dependents(cls, value):
        return [] if value is None else value

    @property
    def has_dependents(self) -> bool:
        return len(self.dependent_jobs) > 0

    def to_record(self) -> dict:
        """JSON-safe dict using the camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class DateRange(BaseModel):
    """Inclusive start-time window.  ``start`` is compared as-is, ``end``
    covers the whole calendar day it falls on."""

    start: Optional[datetime] = Field(default=None, alias="from")
    end: Optional[datetime] = Field(default=None, alias="to")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def is_empty(self) -> bool:
        return self.start is None and self.end is None


class ProjectedRow(NamedTuple):
    """A job paired with its display depth in the flattened grid."""

    job: EnrichmentJob
    depth: int


EnrichmentJob.model_rebuild()


__all__ = [
    "DateRange",
    "EnrichmentJob",
    "JobStatus",
    "ProjectedRow",
]
