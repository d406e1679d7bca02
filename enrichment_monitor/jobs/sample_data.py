"""
Static placeholder job collection.

All timestamps are fixed offsets from ``BASE_TIME`` so every render of the
dashboard shows the same data.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import List

from .models import EnrichmentJob

BASE_TIME = datetime(2024, 4, 25, 10, 0, 0)


def _at(minutes: int) -> datetime:
    return BASE_TIME + timedelta(minutes=minutes)


def _records() -> List[dict]:
    return [
        {
            "id": "job-001",
            "name": "Customer Data Cleansing",
            "status": "completed",
            "startTime": _at(-120),  # 08:00
            "endTime": _at(-30),     # 09:30
            "datasetType": "Customer",
            "dependentJobs": [
                {"id": "dep-001a", "name": "Address Validation", "status": "completed",
                 "startTime": _at(-120), "endTime": _at(-50), "datasetType": "Customer"},
                {"id": "dep-001b", "name": "Duplicate Check", "status": "completed",
                 "startTime": _at(-45), "endTime": _at(-30), "datasetType": "Customer"},
            ],
        },
        {
            "id": "job-002",
            "name": "Product Feature Extraction",
            "status": "running",
            "startTime": _at(-15),  # 09:45
            "datasetType": "Product",
            "dependentJobs": [
                {"id": "dep-002a", "name": "Image Analysis", "status": "running",
                 "startTime": _at(-15), "datasetType": "Product"},
                {"id": "dep-002b", "name": "Text Description NLP", "status": "pending",
                 "startTime": _at(-5), "datasetType": "Product"},
            ],
        },
        {
            "id": "job-003",
            "name": "Sales Data Aggregation",
            "status": "failed",
            "startTime": _at(-24 * 60),  # previous day 10:00
            "endTime": _at(-23 * 60),    # previous day 11:00
            "datasetType": "Sales",
        },
        {
            "id": "job-004",
            "name": "Inventory Stock Update",
            "status": "pending",
            "startTime": _at(30),  # scheduled 10:30
            "datasetType": "Inventory",
        },
        {
            "id": "job-005",
            "name": "Log Parsing",
            "status": "completed",
            "startTime": _at(-5 * 60),  # 05:00
            "endTime": _at(-4 * 60),    # 06:00
            "datasetType": "Logs",
        },
        {
            "id": "job-006",
            "name": "Customer Segmentation",
            "status": "running",
            "startTime": _at(-5),  # 09:55
            "datasetType": "Customer",
        },
    ]


def build_sample_jobs() -> List[EnrichmentJob]:
    """Construct the six top-level placeholder jobs."""
    return [EnrichmentJob.model_validate(record) for record in _records()]


__all__ = ["BASE_TIME", "build_sample_jobs"]
