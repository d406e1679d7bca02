"""Tests for per-status job counts."""
from enrichment_monitor.jobs.filters import FilterSpec, apply_filters
from enrichment_monitor.jobs.models import JobStatus
from enrichment_monitor.jobs.summary import JobStats, summarize


class TestSummarize:

    def test_sample_counts(self, sample_jobs):
        stats = summarize(sample_jobs)
        assert stats == JobStats(total=6, completed=2, running=2, failed=1, pending=1)

    def test_dependents_not_counted(self, sample_jobs):
        # dep-002b is pending but only job-004 counts
        assert summarize(sample_jobs).pending == 1

    def test_empty(self):
        assert summarize([]) == JobStats()

    def test_filtered_subset(self, sample_jobs):
        visible = apply_filters(sample_jobs, FilterSpec(dataset_type="Customer"))
        stats = summarize(visible)
        assert stats.total == 2
        assert stats.completed == 1
        assert stats.running == 1

    def test_as_dict(self, sample_jobs):
        assert summarize(sample_jobs).as_dict() == {
            "total": 6, "completed": 2, "running": 2, "failed": 1, "pending": 1,
        }

    def test_by_status_in_status_order(self, sample_jobs):
        by_status = summarize(sample_jobs).by_status()
        assert list(by_status) == list(JobStatus)
        assert by_status[JobStatus.failed] == 1
