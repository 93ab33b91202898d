"""Pydantic models for interview listing."""

from pydantic import BaseModel

from src.mockview.services.database.models import Interview


class InterviewListResult(BaseModel):
    """Listing outcome that keeps "no interviews" apart from "query failed"."""

    ok: bool
    data: list[Interview] = []
    error: str | None = None
