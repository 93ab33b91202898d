"""API handlers for interview feedback endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from src.mockview.features.feedback.schemas import (
    Feedback,
    FeedbackErrorCode,
    FeedbackResult,
    GenerateFeedbackRequest,
)
from src.mockview.features.feedback.service import FeedbackService, get_feedback_service
from src.mockview.responses import SingleResponse

logger = logging.getLogger(__name__)

router = APIRouter()

_CLIENT_ERRORS = {FeedbackErrorCode.EMPTY_TRANSCRIPT, FeedbackErrorCode.INVALID_TRANSCRIPT}


@router.post(
    "/interviews/{interview_id}/feedback",
    response_model=SingleResponse[FeedbackResult],
    status_code=201,
)
async def create_interview_feedback(
    interview_id: str,
    payload: GenerateFeedbackRequest,
    service: FeedbackService = Depends(get_feedback_service),
) -> SingleResponse[FeedbackResult]:
    """
    Generate and store feedback for a finished interview.

    Scoring failures don't fail the request: fallback feedback is stored instead.

    Raises:
        HTTPException: 422 if the transcript is empty or malformed
        HTTPException: 503 if the feedback record could not be written
    """
    result = await service.generate_feedback(
        interview_id=interview_id,
        user_id=payload.user_id,
        transcript=payload.transcript,
        feedback_id=payload.feedback_id,
    )

    if not result.success:
        status_code = 422 if result.error in _CLIENT_ERRORS else 503
        raise HTTPException(
            status_code=status_code,
            detail={"code": result.error.value, "message": result.detail or ""},
        )

    return SingleResponse(data=result)


@router.get("/interviews/{interview_id}/feedback", response_model=SingleResponse[Feedback])
async def get_interview_feedback(
    interview_id: str,
    user_id: str = Query(..., min_length=1, description="Candidate user ID"),
    service: FeedbackService = Depends(get_feedback_service),
) -> SingleResponse[Feedback]:
    """
    Get the feedback stored for an interview and user.

    Raises:
        HTTPException: 404 if no feedback exists
        HTTPException: 500 if database error
    """
    try:
        feedback = service.get_feedback(interview_id, user_id)
    except Exception as e:
        logger.error(f"Failed to fetch feedback for interview {interview_id}: {e}")
        raise HTTPException(status_code=500, detail="Unable to fetch feedback") from e

    if feedback is None:
        raise HTTPException(status_code=404, detail="Feedback not found")

    return SingleResponse(data=feedback)
