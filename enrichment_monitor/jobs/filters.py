"""
Filter evaluation for the enrichment job grid.

A ``FilterSpec`` holds the narrowing criteria collected by the filter form:
dataset type, status and a start-time window.  Every field is optional and
an absent field places no constraint on the result.  ``apply_filters``
combines the present criteria with logical AND over the top-level jobs only;
dependent jobs of a surviving job are carried along untouched.

Usage:
    from enrichment_monitor.jobs.filters import FilterSpec, apply_filters

    spec = FilterSpec.from_form("Customer", "all", "2024-04-25", None)
    visible = apply_filters(jobs, spec)
"""
from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from .models import DateRange, EnrichmentJob, JobStatus

logger = logging.getLogger(__name__)

ALL_VALUE = "all"  # form sentinel for "no constraint"
FORM_DATE_FORMAT = "%Y-%m-%d"

_LAST_INSTANT = time(23, 59, 59, 999000)


def end_of_day(value: Union[date, datetime]) -> datetime:
    """Return the last instant (23:59:59.999) of the calendar day of ``value``."""
    if isinstance(value, datetime):
        return value.replace(hour=23, minute=59, second=59, microsecond=999000)
    return datetime.combine(value, _LAST_INSTANT)


def _start_of_day(value: Union[date, datetime]) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def parse_form_date(raw: Optional[str]) -> Optional[datetime]:
    """Parse a ``YYYY-MM-DD`` form value into midnight of that day.

    Date pickers may append a time component (``2024-04-25T00:00:00``); only
    the date part is read.  Blank or unparseable values return None.
    """
    if not raw:
        return None
    text = str(raw).strip()[:10]
    try:
        return datetime.strptime(text, FORM_DATE_FORMAT)
    except ValueError:
        logger.warning("Ignoring unparseable filter date %r", raw)
        return None


def _form_choice(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    text = str(raw).strip()
    if not text or text == ALL_VALUE:
        return None
    return text


class FilterSpec(BaseModel):
    """User-selected narrowing criteria.  ``None`` means unconstrained."""

    dataset_type: Optional[str] = None
    status: Optional[JobStatus] = None
    date_range: DateRange = Field(default_factory=DateRange)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_form(
        cls,
        dataset_type: Optional[str] = None,
        status: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> FilterSpec:
        """Build a spec from raw filter-form values.

        The ``"all"`` option and blank values mean no constraint.  Unknown
        statuses and unparseable dates are dropped rather than rejected.
        """
        status_choice = _form_choice(status)
        parsed_status: Optional[JobStatus] = None
        if status_choice is not None:
            try:
                parsed_status = JobStatus(status_choice)
            except ValueError:
                logger.warning("Ignoring unknown status filter %r", status)

        return cls(
            dataset_type=_form_choice(dataset_type),
            status=parsed_status,
            date_range=DateRange(
                start=parse_form_date(start_date),
                end=parse_form_date(end_date),
            ),
        )

    @property
    def is_empty(self) -> bool:
        return self.dataset_type is None and self.status is None and self.date_range.is_empty

    def to_store(self) -> Dict[str, Any]:
        """JSON-safe payload for a ``dcc.Store``."""
        return self.model_dump(mode="json")

    @classmethod
    def from_store(cls, data: Optional[Dict[str, Any]]) -> FilterSpec:
        """Inverse of ``to_store``; a missing payload yields the empty spec."""
        if not data:
            return cls()
        return cls.model_validate(data)

    def describe(self) -> str:
        """Short human-readable summary for logs and the results header."""
        parts = []
        if self.dataset_type is not None:
            parts.append(f"type={self.dataset_type}")
        if self.status is not None:
            parts.append(f"status={self.status.value}")
        if self.date_range.start is not None:
            parts.append(f"from={self.date_range.start:%Y-%m-%d}")
        if self.date_range.end is not None:
            parts.append(f"to={self.date_range.end:%Y-%m-%d}")
        return ", ".join(parts) if parts else "no filters"


def apply_filters(jobs: Sequence[EnrichmentJob], spec: FilterSpec) -> List[EnrichmentJob]:
    """Return the top-level jobs matching every criterion present in ``spec``.

    Each present criterion is a separate narrowing pass over the surviving
    candidates.  The passes commute, so their order does not change the
    result.  Input order is preserved and dependent jobs are not filtered.
    """
    result = list(jobs)

    if spec.dataset_type is not None:
        result = [job for job in result if job.dataset_type == spec.dataset_type]

    if spec.status is not None:
        result = [job for job in result if job.status == spec.status]

    if spec.date_range.start is not None:
        lower = _start_of_day(spec.date_range.start)
        result = [job for job in result if job.start_time >= lower]

    if spec.date_range.end is not None:
        upper = end_of_day(spec.date_range.end)
        result = [job for job in result if job.start_time <= upper]

    return result


__all__ = [
    "ALL_VALUE",
    "FilterSpec",
    "apply_filters",
    "end_of_day",
    "parse_form_date",
]
