"""Interview feedback generation service."""

import logging
import re
from collections.abc import Callable, Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError

from src.mockview.config import settings
from src.mockview.features.feedback.exceptions import (
    EmptyTranscriptError,
    FeedbackPersistenceError,
    InvalidTranscriptError,
)
from src.mockview.features.feedback.fallback import build_fallback_score
from src.mockview.features.feedback.prompts import (
    SYSTEM_PROMPT,
    build_feedback_prompt,
    format_transcript,
)
from src.mockview.features.feedback.schemas import (
    Feedback,
    FeedbackErrorCode,
    FeedbackResult,
    FeedbackScore,
    FeedbackSource,
    TranscriptEntry,
)
from src.mockview.integrations.opik import opik_track
from src.mockview.services.database import SupabaseQueryBuilder, get_query_builder
from src.mockview.services.llm import BaseLLMProvider, get_scoring_provider

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)

TranscriptInput = Sequence[TranscriptEntry | Mapping[str, Any]]


class FeedbackService:
    """
    Service that scores interview transcripts and stores the results.

    Owns the write path for the feedback table. A generation call does one
    model request and exactly one write:
    - model output that fits FeedbackScore is stored as-is
    - any model failure is replaced by the fixed fallback evaluation
    - only an empty transcript or a failed write is reported back as failure
    """

    def __init__(
        self,
        db: SupabaseQueryBuilder,
        llm_factory: Callable[..., BaseLLMProvider] = get_scoring_provider,
    ) -> None:
        """
        Initialize feedback service.

        Args:
            db: Database query builder used for the feedback table
            llm_factory: Builds the scoring provider (same signature as get_scoring_provider)
        """
        self.db = db
        self._llm_factory = llm_factory

    @opik_track(
        name="generate_interview_feedback",
        tags=["feedback", "interview-completion"],
    )
    async def generate_feedback(
        self,
        interview_id: str,
        user_id: str,
        transcript: TranscriptInput,
        feedback_id: str | None = None,
    ) -> FeedbackResult:
        """
        Score a transcript and persist one feedback record.

        Args:
            interview_id: Interview the transcript belongs to
            user_id: Candidate user ID
            transcript: Ordered {role, content} entries
            feedback_id: Fixed record ID; when given the record is overwritten

        Returns:
            FeedbackResult with the stored record ID, or the error code when the
            transcript was rejected or the write failed
        """
        logger.info(
            f"Creating feedback for interview {interview_id}, user {user_id} "
            f"({len(transcript or [])} transcript entries)"
        )

        try:
            entries = self._validate_transcript(transcript)
        except EmptyTranscriptError as e:
            logger.warning(f"Rejected feedback request for interview {interview_id}: {e}")
            return FeedbackResult(
                success=False, error=FeedbackErrorCode.EMPTY_TRANSCRIPT, detail=str(e)
            )
        except InvalidTranscriptError as e:
            logger.warning(f"Rejected feedback request for interview {interview_id}: {e}")
            return FeedbackResult(
                success=False, error=FeedbackErrorCode.INVALID_TRANSCRIPT, detail=str(e)
            )

        try:
            score = await self._evaluate_transcript(format_transcript(entries))
            source = FeedbackSource.MODEL
        except Exception as e:
            logger.error(
                f"Feedback evaluation failed for interview {interview_id}, using fallback: {e}",
                exc_info=True,
            )
            score = build_fallback_score()
            source = FeedbackSource.FALLBACK

        feedback = Feedback(
            **score.model_dump(),
            interview_id=interview_id,
            user_id=user_id,
            created_at=datetime.now(UTC).isoformat(),
            source=source,
        )

        try:
            stored_id = self._save_feedback(feedback, feedback_id)
        except FeedbackPersistenceError as e:
            logger.error(f"Failed to save feedback for interview {interview_id}: {e}", exc_info=True)
            return FeedbackResult(
                success=False, error=FeedbackErrorCode.PERSISTENCE_FAILED, detail=str(e)
            )

        logger.info(f"Saved {source.value} feedback {stored_id} for interview {interview_id}")
        return FeedbackResult(success=True, feedback_id=stored_id)

    def get_feedback(self, interview_id: str, user_id: str) -> Feedback | None:
        """
        Fetch the feedback stored for an (interview, user) pair.

        The store doesn't enforce one record per pair. If records were created
        without a fixed feedback_id there can be several; the newest wins.

        Args:
            interview_id: Interview ID
            user_id: Candidate user ID

        Returns:
            Feedback with its record ID, or None if none exists
        """
        records = self.db.list_records(
            settings.feedback_table,
            filters={"interview_id": interview_id, "user_id": user_id},
            order_by="created_at",
            order_desc=True,
            limit=1,
        )
        if not records:
            return None

        record = records[0]
        return Feedback.model_validate({**record, "id": str(record["id"])})

    @staticmethod
    def _validate_transcript(transcript: TranscriptInput | None) -> list[TranscriptEntry]:
        if not transcript:
            raise EmptyTranscriptError("Empty transcript")

        try:
            return [
                entry if isinstance(entry, TranscriptEntry) else TranscriptEntry.model_validate(entry)
                for entry in transcript
            ]
        except ValidationError as e:
            raise InvalidTranscriptError(f"Invalid transcript entry: {e}") from e

    @opik_track(
        name="evaluate_transcript",
        tags=["llm", "feedback", "gemini"],
    )
    async def _evaluate_transcript(self, formatted_transcript: str) -> FeedbackScore:
        """
        Ask the scoring model for a FeedbackScore.

        Raises:
            Exception: Anything from provider setup, the request, or validation
        """
        llm = self._llm_factory(
            system_prompt=SYSTEM_PROMPT,
            response_format=FeedbackScore.model_json_schema(),
        )

        response = await llm.generate(build_feedback_prompt(formatted_transcript))
        return FeedbackScore.model_validate_json(self._strip_code_fence(response.content))

    @staticmethod
    def _strip_code_fence(raw: str) -> str:
        text = raw.strip()
        match = _CODE_FENCE.match(text)
        return match.group(1) if match else text

    def _save_feedback(self, feedback: Feedback, feedback_id: str | None) -> str:
        exclude = {"id"}
        if not settings.feedback_record_source:
            exclude.add("source")
        record = feedback.model_dump(mode="json", exclude=exclude)

        try:
            if feedback_id:
                self.db.set_record(settings.feedback_table, feedback_id, record)
                return feedback_id
            stored = self.db.insert_record(settings.feedback_table, record)
        except Exception as e:
            raise FeedbackPersistenceError(f"Failed to write feedback: {e}") from e

        if not stored or not stored.get("id"):
            raise FeedbackPersistenceError("Store returned no ID for new feedback")
        return str(stored["id"])


def get_feedback_service() -> FeedbackService:
    """Build a FeedbackService on the admin Supabase client."""
    return FeedbackService(get_query_builder())
