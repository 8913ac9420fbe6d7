"""
Profile persistence boundary: one investor profile record per user.
"""

from __future__ import annotations
from typing import Dict, Any, List, Optional, Union
from abc import ABC, abstractmethod
import copy
import threading

from operation.logging import get_logger, log_function_call
from questionnaire.scoring import get_profile_type, round_half_up
from .models import InvestorProfileAnalysis, InvestorProfileRecord

logger = get_logger(__name__)


class ProfileStore(ABC):
    """Base class for investor profile document stores"""

    @abstractmethod
    def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get the stored record of a user, None if absent"""
        pass

    @abstractmethod
    def upsert(self, user_id: str, record: Dict[str, Any]) -> bool:
        """Create or replace the record of a user; True if it was created"""
        pass

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        """Delete the record of a user; True if one existed"""
        pass


class InMemoryProfileStore(ProfileStore):
    """Dict-backed profile store"""

    def __init__(self):
        self._records: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            record = self._records.get(user_id)
            return copy.deepcopy(record) if record is not None else None

    def upsert(self, user_id: str, record: Dict[str, Any]) -> bool:
        with self._lock:
            created = user_id not in self._records
            self._records[user_id] = copy.deepcopy(record)
            return created

    def delete(self, user_id: str) -> bool:
        with self._lock:
            return self._records.pop(user_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


@log_function_call
def save_investment_profile(
    store: ProfileStore,
    user_id: Optional[str],
    analysis: Optional[Union[InvestorProfileAnalysis, Dict[str, Any]]],
    insights: List[str],
    answers: Dict[str, Dict[str, Any]],
    score: float,
    session=None,
) -> Dict[str, Any]:
    """
    Persist a user's investor profile snapshot.

    Args:
        store: Profile store
        user_id: Authenticated user ID
        analysis: Profile analysis shown to the user
        insights: Investment style insights
        answers: Questionnaire answers
        score: Risk score
        session: Optional QuestionnaireSession whose storage is cleared on success

    Returns:
        The stored record (camelCase keys)

    Raises:
        PermissionError: if no user is signed in
        ValueError: if the analysis or the answers are missing
    """
    if not user_id:
        raise PermissionError("You must be signed in to save your investor profile.")
    if analysis is None:
        raise ValueError("Cannot save profile: analysis not available.")
    if not answers:
        raise ValueError("Questionnaire answers are empty or undefined.")

    rounded = round_half_up(score)
    record = InvestorProfileRecord(
        score=rounded,
        profile_type=get_profile_type(rounded),
        analysis=analysis,
        investment_style_insights=list(insights),
        answers=answers,
    )
    data = record.model_dump(by_alias=True)

    created = store.upsert(user_id, data)
    if created:
        logger.info(f"Created investor profile for user {user_id}")
    else:
        logger.info(f"Updated investor profile for user {user_id}")

    if session is not None:
        session.clear_storage()
    return data
