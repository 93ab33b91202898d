"""Optional Opik tracing for feedback scoring."""

from collections.abc import Callable

from src.mockview.config import settings


def opik_track(name: str | None = None, tags: list[str] | None = None) -> Callable:
    """
    Trace calls to the decorated function in Opik when OPIK_ENABLED is set.

    The Opik SDK reads OPIK_API_KEY and OPIK_WORKSPACE on first use, so
    decorating a function never talks to Opik.

    Example:
        @opik_track(name="generate_interview_feedback", tags=["feedback"])
        async def generate_feedback(...) -> FeedbackResult:
            ...
    """

    def decorator(func: Callable) -> Callable:
        if not settings.opik_enabled:
            return func

        from opik import track

        return track(
            name=name or func.__name__,
            tags=tags or [],
            project_name=settings.opik_project_name,
        )(func)

    return decorator


__all__ = ["opik_track"]
