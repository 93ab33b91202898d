"""Pytest fixtures for interview tests."""

from typing import Any

import pytest


def make_interview(
    interview_id: str, user_id: str, created_at: str, finalized: bool = True, **extra: Any
) -> dict[str, Any]:
    return {
        "id": interview_id,
        "user_id": user_id,
        "created_at": created_at,
        "finalized": finalized,
        "role": "Backend Engineer",
        **extra,
    }


@pytest.fixture
def recent_interviews() -> list[dict[str, Any]]:
    """Interviews newest first, as the store returns them for created_at desc."""
    return [
        make_interview("int-10", "user-a", "2026-03-10T00:00:00+00:00"),
        make_interview("int-9", "user-b", "2026-03-09T00:00:00+00:00", finalized=False),
        make_interview("int-8", "user-a", "2026-03-08T00:00:00+00:00"),
        make_interview("int-7", "user-c", "2026-03-07T00:00:00+00:00"),
        make_interview("int-6", "user-b", "2026-03-06T00:00:00+00:00"),
        make_interview("int-5", "user-c", "2026-03-05T00:00:00+00:00", finalized=False),
        make_interview("int-4", "user-b", "2026-03-04T00:00:00+00:00"),
        make_interview("int-3", "user-a", "2026-03-03T00:00:00+00:00"),
        make_interview("int-2", "user-c", "2026-03-02T00:00:00+00:00"),
        make_interview("int-1", "user-b", "2026-03-01T00:00:00+00:00"),
    ]


@pytest.fixture
def paged_db(mock_db, recent_interviews):
    """Query builder mock that serves recent_interviews by offset/limit."""

    def list_records(table, filters=None, exclude=None, order_by=None, order_desc=True, limit=None, offset=0, **kwargs):
        records = list(recent_interviews)
        if limit is not None:
            records = records[offset : offset + limit]
        return records

    mock_db.list_records.side_effect = list_records
    return mock_db
