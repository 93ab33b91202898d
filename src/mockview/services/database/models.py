"""Pydantic models for database entities."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Interview(BaseModel):
    """Interview document.

    Created by the interview session flow; this service only reads it.
    Fields other than the ones below (role, level, questions, ...) are kept
    as-is and never interpreted.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    user_id: str | None = None
    created_at: str | None = None
    finalized: bool = Field(default=False, description="Eligible for cross-user discovery")

    @field_validator("finalized", mode="before")
    @classmethod
    def null_finalized_is_false(cls, value: Any) -> Any:
        # Rows written before the column existed carry NULL
        return False if value is None else value

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Interview":
        """Build an Interview from a raw store record."""
        return cls.model_validate({**record, "id": str(record["id"])})
