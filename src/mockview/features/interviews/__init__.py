"""Interview lookups and listings."""

from src.mockview.features.interviews.handlers import router
from src.mockview.features.interviews.schemas import InterviewListResult
from src.mockview.features.interviews.service import InterviewService, get_interview_service

__all__ = [
    "router",
    "InterviewService",
    "InterviewListResult",
    "get_interview_service",
]
