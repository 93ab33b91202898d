"""Deterministic feedback used when the scoring model can't produce a valid result."""

from src.mockview.features.feedback.schemas import CategoryName, CategoryScore, FeedbackScore

FALLBACK_SCORE = 75

FALLBACK_COMMENTS = {
    CategoryName.COMMUNICATION_SKILLS: (
        "Good communication skills overall. The candidate expressed ideas clearly."
    ),
    CategoryName.TECHNICAL_KNOWLEDGE: (
        "Demonstrated solid technical knowledge in the relevant areas."
    ),
    CategoryName.PROBLEM_SOLVING: "Showed good problem-solving abilities and analytical thinking.",
    CategoryName.CULTURAL_ROLE_FIT: "Appears to be a good fit for the role based on responses.",
    CategoryName.CONFIDENCE_CLARITY: (
        "Presented ideas with confidence and clarity throughout the interview."
    ),
}

FALLBACK_STRENGTHS = [
    "Clear communication",
    "Technical knowledge",
    "Problem-solving approach",
]

FALLBACK_AREAS_FOR_IMPROVEMENT = [
    "Could provide more specific examples",
    "Further depth in technical explanations would be beneficial",
]

FALLBACK_ASSESSMENT = (
    "The candidate performed well in the interview overall. They demonstrated good "
    "communication skills and technical knowledge. Some areas for improvement include "
    "providing more specific examples and deepening technical explanations."
)


def build_fallback_score() -> FeedbackScore:
    """Return the fixed neutral-positive evaluation."""
    return FeedbackScore(
        total_score=FALLBACK_SCORE,
        category_scores=[
            CategoryScore(name=category, score=FALLBACK_SCORE, comment=FALLBACK_COMMENTS[category])
            for category in CategoryName
        ],
        strengths=list(FALLBACK_STRENGTHS),
        areas_for_improvement=list(FALLBACK_AREAS_FOR_IMPROVEMENT),
        final_assessment=FALLBACK_ASSESSMENT,
    )
