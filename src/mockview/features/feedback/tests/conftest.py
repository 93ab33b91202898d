"""Pytest fixtures for feedback tests."""

import json
from itertools import count
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.mockview.services.llm.base import LLMResponse


class InMemoryQueryBuilder:
    """Dict-backed stand-in for SupabaseQueryBuilder with last-write-wins semantics."""

    def __init__(self) -> None:
        self.tables: dict[str, dict[str, dict[str, Any]]] = {}
        self.writes: list[tuple[str, str]] = []
        self._ids = count(1)

    def _table(self, table: str) -> dict[str, dict[str, Any]]:
        return self.tables.setdefault(table, {})

    def get_by_id(self, table: str, record_id: str, columns: str = "*") -> dict[str, Any] | None:
        return self._table(table).get(str(record_id))

    def insert_record(self, table: str, data: dict[str, Any]) -> dict[str, Any]:
        record_id = f"generated-{next(self._ids)}"
        self._table(table)[record_id] = {**data, "id": record_id}
        self.writes.append((table, record_id))
        return self._table(table)[record_id]

    def set_record(self, table: str, record_id: str, data: dict[str, Any]) -> dict[str, Any]:
        self._table(table)[str(record_id)] = {**data, "id": str(record_id)}
        self.writes.append((table, str(record_id)))
        return self._table(table)[str(record_id)]

    def list_records(
        self,
        table: str,
        columns: str = "*",
        filters: dict[str, Any] | None = None,
        exclude: dict[str, Any] | None = None,
        order_by: str | None = None,
        order_desc: bool = True,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict[str, Any]]:
        records = [
            r
            for r in self._table(table).values()
            if all(r.get(k) == v for k, v in (filters or {}).items())
            and all(r.get(k) != v for k, v in (exclude or {}).items())
        ]
        if order_by:
            records.sort(key=lambda r: r.get(order_by) or "", reverse=order_desc)
        if limit is not None:
            records = records[offset : offset + limit]
        return records


@pytest.fixture
def store() -> InMemoryQueryBuilder:
    """Empty in-memory document store."""
    return InMemoryQueryBuilder()


@pytest.fixture
def sample_transcript() -> list[dict[str, str]]:
    """Sample interview transcript for testing."""
    return [
        {"role": "assistant", "content": "Tell me about yourself"},
        {"role": "user", "content": "I am a backend engineer with 5 years experience"},
    ]


@pytest.fixture
def sample_score_dict() -> dict[str, Any]:
    """Evaluation output that conforms to FeedbackScore."""
    return {
        "total_score": 82,
        "category_scores": [
            {"name": "Communication Skills", "score": 85, "comment": "Clear and structured."},
            {"name": "Technical Knowledge", "score": 80, "comment": "Solid backend grounding."},
            {"name": "Problem-Solving", "score": 78, "comment": "Reasonable approach."},
            {"name": "Cultural & Role Fit", "score": 84, "comment": "Good fit for the team."},
            {"name": "Confidence & Clarity", "score": 83, "comment": "Calm and confident."},
        ],
        "strengths": ["Clear communication"],
        "areas_for_improvement": ["More examples"],
        "final_assessment": "Solid candidate.",
    }


@pytest.fixture
def make_provider():
    """Build a scoring provider mock whose generate() returns the given content or raises."""

    def _make(content: str | dict | None = None, error: Exception | None = None) -> AsyncMock:
        provider = AsyncMock()
        if error is not None:
            provider.generate = AsyncMock(side_effect=error)
        else:
            text = content if isinstance(content, str) else json.dumps(content)
            provider.generate = AsyncMock(
                return_value=LLMResponse(content=text, metadata={"model": "gemini-test"})
            )
        return provider

    return _make


@pytest.fixture
def llm_factory() -> MagicMock:
    """Factory mock standing in for get_scoring_provider; set return_value per test."""
    return MagicMock()
