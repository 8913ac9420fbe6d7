"""
Questionnaire session: the last known answers of one user and their
navigation state, optionally mirrored to a key/value storage so a run can
be resumed.

The pure scoring and recommendation functions never read this state
themselves; the session passes its answers to them explicitly.
"""

from __future__ import annotations
from typing import Dict, Any, Optional, MutableMapping
import json

from operation.logging import get_logger, set_session_id
from portfolio.recommender import get_recommended_portfolio
from state import QuestionnaireState
from .config import TEMP_ANSWERS_KEY, TEMP_SCORE_KEY, TEMP_COMPLETE_KEY
from .questionnaire_manager import QuestionnaireManager
from .scoring import calculate_risk_score, has_completed_questionnaire

logger = get_logger(__name__)


class QuestionnaireSession:
    """One user's run through the questionnaire."""

    def __init__(
        self,
        storage: Optional[MutableMapping[str, str]] = None,
        session_id: Optional[str] = None,
        manager: Optional[QuestionnaireManager] = None,
    ):
        """
        Initialize the session, restoring saved answers when storage holds any.

        Args:
            storage: String key/value storage used to persist answers between runs
            session_id: Session ID for log tracking (generated if None)
            manager: Questionnaire manager (a new one if None)
        """
        self.session_id = set_session_id(session_id)
        self.storage = storage
        self.manager = manager or QuestionnaireManager()
        self.answers: Dict[str, Dict[str, Any]] = {}
        self.current_question_index = 0
        self.previous_score = 0
        self.is_complete = False

        saved = self.load_answers()
        if saved:
            self.answers = saved
            self.is_complete = bool(self.load_complete_status())
            self.current_question_index = min(len(saved), self.manager.get_total_questions() - 1)

    # ------------------------------------------------------------------
    # Answers
    # ------------------------------------------------------------------

    @property
    def score(self) -> int:
        return calculate_risk_score(self.answers)

    def answer(self, question_id: str, option_id: str) -> Dict[str, Any]:
        """
        Record (or overwrite) the answer to a question and move forward.

        Raises:
            ValueError: if the question or option is unknown
        """
        entry = self.manager.build_answer(question_id, option_id)
        self.previous_score = self.score
        self.answers[question_id] = entry
        logger.info(f"Answer recorded for '{question_id}': {option_id}")

        if self.current_question_index < self.manager.get_total_questions() - 1:
            self.current_question_index += 1
        if has_completed_questionnaire(self.answers):
            self.is_complete = True

        self.save()
        return entry

    def recommended_portfolio(self) -> str:
        return get_recommended_portfolio(self.score, self.answers)

    def to_state(self) -> QuestionnaireState:
        return QuestionnaireState(
            session_id=self.session_id,
            answers=dict(self.answers),
            current_question_index=self.current_question_index,
            previous_score=self.previous_score,
            score=self.score,
            is_complete=self.is_complete,
            recommended_portfolio=self.recommended_portfolio() if self.answers else None,
        )

    def reset(self) -> None:
        """Start the questionnaire over and forget saved data."""
        self.answers = {}
        self.current_question_index = 0
        self.previous_score = 0
        self.is_complete = False
        self.clear_storage()

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    def save(self) -> None:
        """Mirror answers, score and completion to storage."""
        if self.storage is None:
            return
        if not self.answers:
            logger.warning("Ignoring attempt to save empty answers")
            return
        try:
            self.storage[TEMP_ANSWERS_KEY] = json.dumps(self.answers, ensure_ascii=False)
            self.storage[TEMP_SCORE_KEY] = str(self.score)
            self.storage[TEMP_COMPLETE_KEY] = "true" if self.is_complete else "false"
        except (TypeError, ValueError, OSError) as e:
            logger.error(f"Failed to save questionnaire data: {e}")

    def load_answers(self) -> Optional[Dict[str, Dict[str, Any]]]:
        if self.storage is None:
            return None
        raw = self.storage.get(TEMP_ANSWERS_KEY)
        if not raw:
            return None
        try:
            answers = json.loads(raw)
        except ValueError as e:
            logger.error(f"Failed to load saved answers: {e}")
            return None
        if not isinstance(answers, dict):
            logger.error("Saved answers are not an object, ignoring them")
            return None
        logger.info(f"Loaded {len(answers)} saved answers")
        return answers

    def load_score(self) -> Optional[int]:
        if self.storage is None:
            return None
        raw = self.storage.get(TEMP_SCORE_KEY)
        if not raw:
            return None
        try:
            return int(float(raw))
        except ValueError as e:
            logger.error(f"Failed to load saved score: {e}")
            return None

    def load_complete_status(self) -> Optional[bool]:
        if self.storage is None:
            return None
        raw = self.storage.get(TEMP_COMPLETE_KEY)
        if raw is None:
            return None
        return raw == "true"

    def clear_storage(self) -> None:
        if self.storage is None:
            return
        for key in (TEMP_ANSWERS_KEY, TEMP_SCORE_KEY, TEMP_COMPLETE_KEY):
            self.storage.pop(key, None)
        logger.info("Questionnaire storage cleared")
