"""API handlers for interview endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from src.mockview.features.interviews.exceptions import InterviewQueryError
from src.mockview.features.interviews.service import InterviewService, get_interview_service
from src.mockview.responses import ListResponse, SingleResponse
from src.mockview.services.database.models import Interview

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/interviews/latest", response_model=ListResponse[Interview])
async def get_latest_interviews(
    exclude_user_id: str | None = Query(None, description="Leave out this user's interviews"),
    limit: int | None = Query(None, ge=1, le=100, description="Maximum results to return"),
    service: InterviewService = Depends(get_interview_service),
) -> ListResponse[Interview]:
    """
    Browse the latest finalized interviews from other users.

    Store errors show up as an empty list.
    """
    interviews = service.list_latest(excluding_user_id=exclude_user_id, limit=limit)
    return ListResponse(data=interviews, count=len(interviews))


@router.get("/users/{user_id}/interviews", response_model=ListResponse[Interview])
async def get_user_interviews(
    user_id: str,
    service: InterviewService = Depends(get_interview_service),
) -> ListResponse[Interview]:
    """List a user's own interviews, newest first."""
    interviews = service.list_mine(user_id)
    return ListResponse(data=interviews, count=len(interviews))


@router.get("/interviews/{interview_id}", response_model=SingleResponse[Interview])
async def get_interview(
    interview_id: str,
    service: InterviewService = Depends(get_interview_service),
) -> SingleResponse[Interview]:
    """
    Get interview by ID.

    Raises:
        HTTPException: 404 if interview not found
        HTTPException: 500 if database error
    """
    try:
        interview = service.get_interview(interview_id)
    except InterviewQueryError as e:
        logger.error(f"Failed to fetch interview {interview_id}: {e}")
        raise HTTPException(status_code=500, detail="Unable to fetch interview") from e

    if interview is None:
        raise HTTPException(status_code=404, detail="Interview not found")

    return SingleResponse(data=interview)
