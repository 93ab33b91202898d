"""Custom exceptions for feedback service."""


class FeedbackError(Exception):
    """Base exception for all feedback-related errors."""

    pass


class EmptyTranscriptError(FeedbackError):
    """Raised when feedback is requested for a transcript with no entries."""

    pass


class InvalidTranscriptError(FeedbackError):
    """Raised when a transcript entry is not a {role, content} pair."""

    pass


class FeedbackPersistenceError(FeedbackError):
    """Raised when the feedback record cannot be written."""

    pass
