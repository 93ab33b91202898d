"""Custom exceptions for interview lookups."""


class InterviewQueryError(Exception):
    """Raised when the interviews table cannot be queried."""

    pass
