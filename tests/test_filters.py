"""Tests for the filter evaluator and the filter-form adapter."""
from datetime import date, datetime, timedelta

import pytest

from enrichment_monitor.jobs.filters import (
    ALL_VALUE,
    FilterSpec,
    apply_filters,
    end_of_day,
    parse_form_date,
)
from enrichment_monitor.jobs.models import DateRange, JobStatus


def _ids(jobs):
    return [job.id for job in jobs]


class TestApplyFilters:

    def test_empty_spec_is_identity(self, sample_jobs):
        assert apply_filters(sample_jobs, FilterSpec()) == sample_jobs

    def test_empty_input_yields_empty_result(self):
        spec = FilterSpec(dataset_type="Customer", status=JobStatus.running)
        assert apply_filters([], spec) == []

    def test_status_failed_selects_only_job_003(self, sample_jobs):
        result = apply_filters(sample_jobs, FilterSpec(status="failed"))
        assert _ids(result) == ["job-003"]

    @pytest.mark.parametrize("dataset_type", ["Customer", "Product", "Sales", "Inventory", "Logs", "Unknown"])
    def test_dataset_type_has_no_false_positives_or_negatives(self, sample_jobs, dataset_type):
        result = apply_filters(sample_jobs, FilterSpec(dataset_type=dataset_type))
        assert all(job.dataset_type == dataset_type for job in result)
        expected = [job.id for job in sample_jobs if job.dataset_type == dataset_type]
        assert _ids(result) == expected

    def test_criteria_combine_with_and(self, sample_jobs):
        spec = FilterSpec(dataset_type="Customer", status=JobStatus.running)
        assert _ids(apply_filters(sample_jobs, spec)) == ["job-006"]

    def test_input_order_preserved(self, sample_jobs):
        result = apply_filters(sample_jobs, FilterSpec(status=JobStatus.completed))
        assert _ids(result) == ["job-001", "job-005"]

    def test_children_are_not_filtered(self, sample_jobs):
        # job-002 is running, but its child dep-002b is pending
        result = apply_filters(sample_jobs, FilterSpec(status=JobStatus.running, dataset_type="Product"))
        assert _ids(result) == ["job-002"]
        assert [child.id for child in result[0].dependent_jobs] == ["dep-002a", "dep-002b"]

    def test_children_do_not_match_on_their_own(self, sample_jobs):
        # Only a child (dep-002b) is pending under Product; no top-level job is
        result = apply_filters(sample_jobs, FilterSpec(status=JobStatus.pending, dataset_type="Product"))
        assert result == []

    def test_input_not_mutated(self, sample_jobs):
        before = list(sample_jobs)
        apply_filters(sample_jobs, FilterSpec(status=JobStatus.failed))
        assert sample_jobs == before


class TestDateRange:

    def test_from_is_inclusive(self, sample_jobs):
        spec = FilterSpec(date_range=DateRange(start=datetime(2024, 4, 25, 9, 55)))
        assert _ids(apply_filters(sample_jobs, spec)) == ["job-004", "job-006"]

    def test_from_day_excludes_previous_day(self, sample_jobs):
        spec = FilterSpec(date_range=DateRange(start=datetime(2024, 4, 25)))
        assert "job-003" not in _ids(apply_filters(sample_jobs, spec))
        assert len(apply_filters(sample_jobs, spec)) == 5

    def test_to_covers_whole_day(self, sample_jobs):
        spec = FilterSpec(date_range=DateRange(end=datetime(2024, 4, 24)))
        assert _ids(apply_filters(sample_jobs, spec)) == ["job-003"]

    def test_last_second_of_day_included(self, make_job):
        day = datetime(2024, 4, 25)
        late = make_job("late", start_time=day.replace(hour=23, minute=59, second=59))
        spec = FilterSpec(date_range=DateRange(end=day))
        assert _ids(apply_filters([late], spec)) == ["late"]

    def test_next_day_first_millisecond_excluded(self, make_job):
        day = datetime(2024, 4, 25)
        early = make_job("early", start_time=day + timedelta(days=1, milliseconds=1))
        spec = FilterSpec(date_range=DateRange(end=day))
        assert apply_filters([early], spec) == []

    def test_from_and_to_same_day(self, sample_jobs):
        spec = FilterSpec.from_form(start_date="2024-04-25", end_date="2024-04-25")
        assert _ids(apply_filters(sample_jobs, spec)) == [
            "job-001", "job-002", "job-004", "job-005", "job-006",
        ]


class TestEndOfDay:

    def test_datetime(self):
        assert end_of_day(datetime(2024, 4, 25, 8, 30)) == datetime(2024, 4, 25, 23, 59, 59, 999000)

    def test_date(self):
        assert end_of_day(date(2024, 4, 25)) == datetime(2024, 4, 25, 23, 59, 59, 999000)


class TestFromForm:

    def test_all_sentinel_means_no_constraint(self):
        spec = FilterSpec.from_form(ALL_VALUE, ALL_VALUE, None, None)
        assert spec.is_empty
        assert spec.to_store() == FilterSpec().to_store()

    def test_blank_values_mean_no_constraint(self):
        assert FilterSpec.from_form("", "", "", "").is_empty

    def test_values_are_parsed(self):
        spec = FilterSpec.from_form("Sales", "failed", "2024-04-24", "2024-04-25")
        assert spec.dataset_type == "Sales"
        assert spec.status is JobStatus.failed
        assert spec.date_range.start == datetime(2024, 4, 24)
        assert spec.date_range.end == datetime(2024, 4, 25)

    def test_unknown_status_dropped(self):
        assert FilterSpec.from_form(status="exploded").status is None

    def test_unparseable_date_dropped(self):
        spec = FilterSpec.from_form(start_date="25/04/2024", end_date="not a date")
        assert spec.date_range.is_empty

    def test_picker_time_suffix_tolerated(self):
        assert parse_form_date("2024-04-25T00:00:00") == datetime(2024, 4, 25)

    def test_store_round_trip(self):
        spec = FilterSpec.from_form("Customer", "running", "2024-04-25", None)
        assert FilterSpec.from_store(spec.to_store()) == spec

    def test_missing_store_payload_is_empty_spec(self):
        assert FilterSpec.from_store(None) == FilterSpec()

    def test_describe(self):
        assert FilterSpec().describe() == "no filters"
        spec = FilterSpec.from_form("Sales", "failed", "2024-04-24", None)
        assert spec.describe() == "type=Sales, status=failed, from=2024-04-24"
