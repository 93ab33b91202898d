"""Prompt text for transcript scoring."""

from collections.abc import Sequence

from src.mockview.features.feedback.schemas import TranscriptEntry

SYSTEM_PROMPT = (
    "You are an impartial evaluator of a mock interview. "
    "Your task is to evaluate the candidate based on structured categories."
)

FEEDBACK_PROMPT_TEMPLATE = """You are evaluating a mock interview. Be thorough and detailed in your analysis. \
Don't be lenient with the candidate. If there are mistakes or areas for improvement, point them out.

Transcript:
{transcript}
Score the candidate from 0 to 100 in the following areas. Do not add categories other than the ones provided:
- **Communication Skills**: Clarity, articulation, structured responses.
- **Technical Knowledge**: Understanding of key concepts for the role.
- **Problem-Solving**: Ability to analyze problems and propose solutions.
- **Cultural & Role Fit**: Alignment with company values and job role.
- **Confidence & Clarity**: Confidence in responses, engagement, and clarity.

Also give an overall total score from 0 to 100, the candidate's strengths, \
the areas they should improve, and a short final assessment.
"""


def format_transcript(transcript: Sequence[TranscriptEntry]) -> str:
    """Render transcript entries as "- role: content" lines, in conversation order."""
    return "".join(f"- {entry.role}: {entry.content}\n" for entry in transcript)


def build_feedback_prompt(formatted_transcript: str) -> str:
    """Embed a rendered transcript into the scoring prompt."""
    return FEEDBACK_PROMPT_TEMPLATE.format(transcript=formatted_transcript)
