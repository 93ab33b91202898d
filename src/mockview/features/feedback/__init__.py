"""Interview feedback generation and lookup."""

from src.mockview.features.feedback.handlers import router
from src.mockview.features.feedback.schemas import (
    CategoryName,
    CategoryScore,
    Feedback,
    FeedbackErrorCode,
    FeedbackResult,
    FeedbackScore,
    FeedbackSource,
    TranscriptEntry,
)
from src.mockview.features.feedback.service import FeedbackService, get_feedback_service

__all__ = [
    "router",
    "FeedbackService",
    "get_feedback_service",
    "CategoryName",
    "CategoryScore",
    "Feedback",
    "FeedbackErrorCode",
    "FeedbackResult",
    "FeedbackScore",
    "FeedbackSource",
    "TranscriptEntry",
]
