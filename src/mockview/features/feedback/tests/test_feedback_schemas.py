"""Tests for feedback Pydantic schemas."""

import pytest
from pydantic import ValidationError

from src.mockview.features.feedback.fallback import build_fallback_score
from src.mockview.features.feedback.prompts import build_feedback_prompt, format_transcript
from src.mockview.features.feedback.schemas import (
    CategoryName,
    CategoryScore,
    Feedback,
    FeedbackScore,
    GenerateFeedbackRequest,
    TranscriptEntry,
)


def test_feedback_score_valid(sample_score_dict):
    """Test FeedbackScore with valid complete data."""
    score = FeedbackScore.model_validate(sample_score_dict)

    assert score.total_score == 82
    assert [c.name for c in score.category_scores] == list(CategoryName)
    assert score.strengths == ["Clear communication"]


@pytest.mark.parametrize("value", [-1, 101])
def test_category_score_rejects_out_of_range(value):
    """Test CategoryScore scores are bounded to 0-100."""
    with pytest.raises(ValidationError):
        CategoryScore(name="Technical Knowledge", score=value, comment="x")


def test_category_score_rejects_unknown_category():
    """Test categories outside the fixed set are rejected."""
    with pytest.raises(ValidationError) as exc_info:
        CategoryScore(name="Leadership", score=80, comment="x")

    assert "name" in str(exc_info.value)


@pytest.mark.parametrize(
    "alias",
    ["Problem Solving", "problem-solving", "PROBLEM SOLVING", "Problem-Solving"],
)
def test_category_score_matches_name_variants(alias):
    """Test spelling variants resolve to the canonical category."""
    category = CategoryScore(name=alias, score=70, comment="x")

    assert category.name is CategoryName.PROBLEM_SOLVING


def test_feedback_score_requires_five_categories(sample_score_dict):
    """Test that fewer than five categories is a schema violation."""
    sample_score_dict["category_scores"].pop()

    with pytest.raises(ValidationError):
        FeedbackScore.model_validate(sample_score_dict)


def test_feedback_score_rejects_duplicate_categories(sample_score_dict):
    """Test that five entries must cover five different categories."""
    sample_score_dict["category_scores"][4]["name"] = "Communication Skills"

    with pytest.raises(ValidationError, match="Duplicate categories"):
        FeedbackScore.model_validate(sample_score_dict)


def test_fallback_score_profile():
    """Test the fallback evaluation is the fixed neutral-positive profile."""
    score = build_fallback_score()

    assert score.total_score == 75
    assert len(score.category_scores) == 5
    assert all(c.score == 75 for c in score.category_scores)
    assert len(score.strengths) == 3
    assert len(score.areas_for_improvement) == 2
    assert build_fallback_score() == score


def test_feedback_model_dump_uses_enum_values(sample_score_dict):
    """Test that a stored record serializes categories and source as plain strings."""
    feedback = Feedback(
        **sample_score_dict,
        interview_id="int-1",
        user_id="user-1",
        created_at="2026-01-01T00:00:00+00:00",
        source="model",
    )

    dumped = feedback.model_dump(mode="json")
    assert dumped["source"] == "model"
    assert dumped["category_scores"][0]["name"] == "Communication Skills"


def test_format_transcript_preserves_order():
    """Test transcript rendering keeps conversation order, one line per entry."""
    transcript = [
        TranscriptEntry(role="assistant", content="Tell me about yourself"),
        TranscriptEntry(role="user", content="I build APIs {mostly}"),
        TranscriptEntry(role="assistant", content="Why?"),
    ]

    rendered = format_transcript(transcript)

    assert rendered == (
        "- assistant: Tell me about yourself\n"
        "- user: I build APIs {mostly}\n"
        "- assistant: Why?\n"
    )
    assert rendered in build_feedback_prompt(rendered)


def test_generate_request_rejects_blank_feedback_id():
    """Test that an empty fixed ID is rejected rather than treated as absent."""
    with pytest.raises(ValidationError):
        GenerateFeedbackRequest(
            user_id="user-1",
            transcript=[{"role": "user", "content": "Hi"}],
            feedback_id="",
        )

    request = GenerateFeedbackRequest(
        user_id="user-1", transcript=[{"role": "user", "content": "Hi"}]
    )
    assert request.feedback_id is None
