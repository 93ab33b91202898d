"""Pydantic models for interview feedback structured output and storage."""

import re
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class CategoryName(str, Enum):
    """The fixed set of scored categories."""

    COMMUNICATION_SKILLS = "Communication Skills"
    TECHNICAL_KNOWLEDGE = "Technical Knowledge"
    PROBLEM_SOLVING = "Problem-Solving"
    CULTURAL_ROLE_FIT = "Cultural & Role Fit"
    CONFIDENCE_CLARITY = "Confidence & Clarity"


def _category_key(value: str) -> str:
    return re.sub(r"[^a-z]", "", value.lower())


_CATEGORY_LOOKUP = {_category_key(category.value): category for category in CategoryName}


class FeedbackSource(str, Enum):
    """Where a persisted feedback record came from."""

    MODEL = "model"
    FALLBACK = "fallback"


class FeedbackErrorCode(str, Enum):
    """Reasons a feedback generation call can report failure."""

    EMPTY_TRANSCRIPT = "empty_transcript"
    INVALID_TRANSCRIPT = "invalid_transcript"
    PERSISTENCE_FAILED = "persistence_failed"


class TranscriptEntry(BaseModel):
    """One speaker-tagged utterance from an interview session."""

    role: str
    content: str


class CategoryScore(BaseModel):
    """Score and comment for one category."""

    name: CategoryName
    score: int = Field(ge=0, le=100)
    comment: str

    @field_validator("name", mode="before")
    @classmethod
    def _match_category_name(cls, value):
        # "Problem Solving", "problem-solving" and friends all map to the same category
        if isinstance(value, str):
            return _CATEGORY_LOOKUP.get(_category_key(value), value)
        return value


class FeedbackScore(BaseModel):
    """Evaluation output the scoring model must conform to."""

    total_score: int = Field(ge=0, le=100, description="Overall score from 0 to 100")
    category_scores: list[CategoryScore] = Field(
        min_length=len(CategoryName),
        max_length=len(CategoryName),
        description="Exactly one score per category",
    )
    strengths: list[str]
    areas_for_improvement: list[str]
    final_assessment: str = Field(description="Narrative assessment of the candidate")

    @field_validator("category_scores")
    @classmethod
    def _one_score_per_category(cls, value: list[CategoryScore]) -> list[CategoryScore]:
        names = [category.name for category in value]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate categories in {[name.value for name in names]}")
        return value


class Feedback(FeedbackScore):
    """Persisted feedback record for an (interview, user) pair."""

    id: str | None = None
    interview_id: str
    user_id: str
    created_at: str
    source: FeedbackSource | None = None


class FeedbackResult(BaseModel):
    """Outcome of a feedback generation call."""

    success: bool
    feedback_id: str | None = None
    error: FeedbackErrorCode | None = None
    detail: str | None = None


class GenerateFeedbackRequest(BaseModel):
    """Request body for generating interview feedback."""

    user_id: str = Field(min_length=1)
    transcript: list[TranscriptEntry]
    feedback_id: str | None = Field(
        default=None,
        min_length=1,
        description="Fixed record ID; reusing it overwrites the previous feedback",
    )
