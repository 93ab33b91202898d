"""Read-only access to interview documents."""

import logging
from typing import Any

from pydantic import ValidationError

from src.mockview.config import settings
from src.mockview.features.interviews.exceptions import InterviewQueryError
from src.mockview.features.interviews.schemas import InterviewListResult
from src.mockview.services.database import SupabaseQueryBuilder, get_query_builder
from src.mockview.services.database.models import Interview

logger = logging.getLogger(__name__)


class InterviewService:
    """
    Lookups and listings over the interviews table.

    Listings are best-effort: list_latest() and list_mine() return an empty list
    when the store fails. fetch_latest() and fetch_mine() report the failure
    instead, for callers that need to tell the two apart.
    """

    def __init__(self, db: SupabaseQueryBuilder) -> None:
        self.db = db

    def get_interview(self, interview_id: str) -> Interview | None:
        """
        Get interview by ID.

        Args:
            interview_id: Interview ID

        Returns:
            Interview, or None if it doesn't exist

        Raises:
            InterviewQueryError: If the store cannot be reached or the record is malformed
        """
        if not interview_id:
            return None

        try:
            record = self.db.get_by_id(settings.interviews_table, interview_id)
        except Exception as e:
            raise InterviewQueryError(f"Failed to fetch interview {interview_id}: {e}") from e

        if not record:
            return None

        try:
            return Interview.from_record(record)
        except (KeyError, ValidationError) as e:
            raise InterviewQueryError(f"Malformed interview {interview_id}: {e}") from e

    def list_latest(
        self, excluding_user_id: str | None = None, limit: int | None = None
    ) -> list[Interview]:
        """Latest finalized interviews for discovery, or [] if the store fails."""
        return self.fetch_latest(excluding_user_id, limit).data

    def list_mine(self, user_id: str | None) -> list[Interview]:
        """A user's own interviews, newest first, or [] if the store fails."""
        return self.fetch_mine(user_id).data

    def fetch_latest(
        self, excluding_user_id: str | None = None, limit: int | None = None
    ) -> InterviewListResult:
        """
        Fetch the most recent finalized interviews, skipping one user's own.

        Without composite filter support in the store, a page of
        limit * latest_overfetch_factor recent interviews is fetched and filtered
        here. Up to latest_max_fetch_rounds pages are read while the result is
        short. When most recent interviews are unfinalized or belong to the
        excluded user, fewer than `limit` interviews can come back even though
        older eligible ones exist.

        Args:
            excluding_user_id: User whose interviews are left out (optional)
            limit: Maximum interviews to return (default: latest_default_limit)

        Returns:
            InterviewListResult with at most `limit` interviews

        Raises:
            ValueError: If limit is less than 1
        """
        limit = settings.latest_default_limit if limit is None else limit
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        try:
            if settings.store_supports_composite_filter:
                records = self._query_latest_filtered(excluding_user_id, limit)
            else:
                records = self._query_latest_overfetch(excluding_user_id, limit)
            interviews = _to_interviews(records)
        except InterviewQueryError as e:
            logger.error(f"Error fetching latest interviews: {e}")
            return InterviewListResult(ok=False, error=str(e))

        return InterviewListResult(ok=True, data=interviews)

    def fetch_mine(self, user_id: str | None) -> InterviewListResult:
        """
        Fetch all interviews owned by a user, newest first.

        An empty user_id returns an empty result without querying the store.
        """
        if not user_id:
            return InterviewListResult(ok=True)

        try:
            records = self._list_interviews(
                filters={"user_id": user_id}, order_by="created_at", order_desc=True
            )
            interviews = _to_interviews(records)
        except InterviewQueryError as e:
            logger.error(f"Error fetching interviews for user {user_id}: {e}")
            return InterviewListResult(ok=False, error=str(e))

        return InterviewListResult(ok=True, data=interviews)

    def _query_latest_filtered(
        self, excluding_user_id: str | None, limit: int
    ) -> list[dict[str, Any]]:
        records = self._list_interviews(
            filters={"finalized": True},
            exclude={"user_id": excluding_user_id} if excluding_user_id else None,
            order_by="created_at",
            order_desc=True,
            limit=limit,
        )
        return [r for r in records if _is_discoverable(r, excluding_user_id)][:limit]

    def _query_latest_overfetch(
        self, excluding_user_id: str | None, limit: int
    ) -> list[dict[str, Any]]:
        page_size = limit * max(1, settings.latest_overfetch_factor)
        eligible: list[dict[str, Any]] = []

        for page in range(max(1, settings.latest_max_fetch_rounds)):
            records = self._list_interviews(
                order_by="created_at",
                order_desc=True,
                limit=page_size,
                offset=page * page_size,
            )
            eligible.extend(r for r in records if _is_discoverable(r, excluding_user_id))
            if len(eligible) >= limit or len(records) < page_size:
                break

        return eligible[:limit]

    def _list_interviews(self, **query: Any) -> list[dict[str, Any]]:
        try:
            return self.db.list_records(settings.interviews_table, **query)
        except Exception as e:
            raise InterviewQueryError(str(e)) from e


def _to_interviews(records: list[dict[str, Any]]) -> list[Interview]:
    try:
        return [Interview.from_record(r) for r in records]
    except (KeyError, ValidationError) as e:
        raise InterviewQueryError(f"Malformed interview record: {e}") from e


def _is_discoverable(record: dict[str, Any], excluding_user_id: str | None) -> bool:
    if record.get("finalized") is not True:
        return False
    return not excluding_user_id or record.get("user_id") != excluding_user_id


def get_interview_service() -> InterviewService:
    """Build an InterviewService on the admin Supabase client."""
    return InterviewService(get_query_builder())
