# portfolio/recommender.py
from __future__ import annotations
from typing import Dict, Any, Iterable, Optional, Set

from operation.logging import get_logger
from questionnaire.config import get_questions, CONSERVATIVE_UPPER, BALANCED_UPPER
from questionnaire.scoring import answer_value
from .config import (
    SOVEREIGNTY_QUESTION_ID,
    SOVEREIGNTY_PORTFOLIO_ID,
    SOVEREIGNTY_STRONG_VALUE,
    SOVEREIGNTY_MODERATE_VALUE,
    SOVEREIGNTY_MODERATE_MIN_SCORE,
    SOVEREIGNTY_KEYWORDS,
    BROAD_SOVEREIGNTY_KEYWORDS,
)

logger = get_logger(__name__)


def _strong_sovereignty_option_ids() -> Set[str]:
    """IDs of the two highest-value options of the sovereignty question."""
    for q in get_questions():
        if q.id == SOVEREIGNTY_QUESTION_ID:
            ranked = sorted(q.options, key=lambda o: o.value, reverse=True)
            return {o.id for o in ranked[:2]}
    return set()


STRONG_SOVEREIGNTY_OPTION_IDS = _strong_sovereignty_option_ids()


def _contains_keyword(text: Any, keywords: Iterable[str]) -> bool:
    if not isinstance(text, str) or not text:
        return False
    lowered = text.lower()
    return any(k in lowered for k in keywords)


def _score_based_portfolio(score: int) -> str:
    if score < CONSERVATIVE_UPPER:
        return "conservative"
    if score < BALANCED_UPPER:
        return "balanced"
    return "growth"


def has_sovereignty_preference(score: int, answers: Optional[Dict[str, Dict[str, Any]]]) -> bool:
    """
    Check whether the answers signal a French/European sovereignty preference.

    Rules, first match wins:
      1. the sovereignty answer is one of the two strongest options, or its value >= 3
      2. the sovereignty answer is moderate (value 2) and the score is >= 50
      3. the sovereignty answer text mentions a sovereignty keyword
      4. any other answer text mentions a broader sovereignty keyword
    """
    if not answers:
        return False

    sovereignty = answers.get(SOVEREIGNTY_QUESTION_ID)
    if isinstance(sovereignty, dict):
        value = answer_value(sovereignty)
        if sovereignty.get("optionId") in STRONG_SOVEREIGNTY_OPTION_IDS:
            logger.debug("Sovereignty preference: strong option selected")
            return True
        if value is not None and value >= SOVEREIGNTY_STRONG_VALUE:
            logger.debug("Sovereignty preference: strong value")
            return True
        if value == SOVEREIGNTY_MODERATE_VALUE and score >= SOVEREIGNTY_MODERATE_MIN_SCORE:
            logger.debug(f"Sovereignty preference: moderate value with score {score}")
            return True
        if _contains_keyword(sovereignty.get("text"), SOVEREIGNTY_KEYWORDS):
            logger.debug("Sovereignty preference: keyword in sovereignty answer")
            return True

    for question_id, answer in answers.items():
        if question_id == SOVEREIGNTY_QUESTION_ID or not isinstance(answer, dict):
            continue
        if _contains_keyword(answer.get("text"), BROAD_SOVEREIGNTY_KEYWORDS):
            logger.debug(f"Sovereignty preference: keyword in answer to '{question_id}'")
            return True

    return False


def get_recommended_portfolio(score: int, answers: Optional[Dict[str, Dict[str, Any]]] = None) -> str:
    """
    Recommend a portfolio ID for a risk score and its answers.

    A sovereignty preference overrides the score and selects the
    wareconomy portfolio. Otherwise the score band decides:
    < 40 conservative, 40-69 balanced, >= 70 growth.

    Args:
        score: Risk score (0-100)
        answers: Questionnaire answers; None is treated as no answers

    Returns:
        Portfolio ID
    """
    if has_sovereignty_preference(score, answers):
        return SOVEREIGNTY_PORTFOLIO_ID
    return _score_based_portfolio(score)
