# questionnaire/scoring.py
from __future__ import annotations
from typing import Dict, Any, Optional
import math

from operation.logging import get_logger
from .config import (
    get_questions,
    MAX_OPTION_VALUE,
    CONSERVATIVE_UPPER,
    BALANCED_UPPER,
    VALIDATION_THRESHOLD,
)

logger = get_logger(__name__)


def round_half_up(x: float) -> int:
    # half-up, not banker's rounding
    return int(math.floor(x + 0.5))


def answer_value(answer: Any) -> Optional[float]:
    """Numeric value of an answer entry, None when missing or not a number."""
    if not isinstance(answer, dict):
        return None
    value = answer.get("value")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def calculate_risk_score(answers: Optional[Dict[str, Dict[str, Any]]]) -> int:
    """
    Compute the 0-100 risk score from questionnaire answers.

    Each answered question contributes value / 4; the score is the mean
    contribution as a percentage, rounded half up. Partial records are
    scored on what has been answered so far.

    Args:
        answers: Dict mapping question IDs to {"optionId", "value"} entries

    Returns:
        Integer score, or 0 when no question has been answered
    """
    if not answers:
        return 0

    total = 0.0
    answered = 0
    for question_id, answer in answers.items():
        value = answer_value(answer)
        if value is None:
            logger.debug(f"Ignoring answer without numeric value for '{question_id}'")
            continue
        total += value
        answered += 1

    if answered == 0:
        return 0

    return round_half_up(total * 100 / (answered * MAX_OPTION_VALUE))


def get_profile_type(score: int) -> str:
    """Map a score to its profile band label."""
    if score < CONSERVATIVE_UPPER:
        return "conservative"
    if score < BALANCED_UPPER:
        return "balanced"
    return "growth"


def has_completed_questionnaire(answers: Optional[Dict[str, Dict[str, Any]]]) -> bool:
    """Check whether every catalog question has an answer."""
    answers = answers or {}
    return all(q.id in answers for q in get_questions())


def has_passed_validation_threshold(score: int) -> bool:
    return score >= VALIDATION_THRESHOLD
