"""Standard response wrappers shared by the API handlers."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class SingleResponse(BaseModel, Generic[T]):
    """Standard single item response wrapper."""

    data: T


class ListResponse(BaseModel, Generic[T]):
    """Standard list response wrapper."""

    data: list[T]
    count: int
