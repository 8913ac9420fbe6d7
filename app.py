# app.py
from __future__ import annotations
from typing import Dict, Any, Optional, MutableMapping

import settings
from operation.logging import setup_logging, get_logger
from questionnaire.session import QuestionnaireSession
from questionnaire.profiles import get_investor_profile_analysis
from questionnaire.insights import analyze_investment_style
from portfolio.portfolio_manager import PortfolioSelection
from investor_profile import ProfileStore, InMemoryProfileStore, save_investment_profile

logger = get_logger(__name__)

# ---------------------------
# Main application logic
# ---------------------------

class AdvisorApp:
    """
    Wires one user's flow: questionnaire session, profile analysis,
    portfolio selection and profile persistence.
    """

    def __init__(
        self,
        store: Optional[ProfileStore] = None,
        storage: Optional[MutableMapping[str, str]] = None,
        user_id: Optional[str] = None,
    ):
        self.store = store or InMemoryProfileStore()
        self.user_id = user_id
        self.session = QuestionnaireSession(storage=storage)
        self._selection: Optional[PortfolioSelection] = None

    def answer(self, question_id: str, option_id: str) -> Dict[str, Any]:
        self._selection = None
        return self.session.answer(question_id, option_id)

    def analysis(self) -> Dict[str, Any]:
        """Score, profile analysis and insights for the current answers."""
        score = self.session.score
        return {
            "score": score,
            "analysis": get_investor_profile_analysis(score, self.session.answers),
            "insights": analyze_investment_style(self.session.answers),
        }

    @property
    def selection(self) -> PortfolioSelection:
        if self._selection is None:
            self._selection = PortfolioSelection(self.session.score, self.session.answers)
        return self._selection

    def save_profile(self) -> Dict[str, Any]:
        result = self.analysis()
        return save_investment_profile(
            self.store,
            self.user_id,
            result["analysis"],
            result["insights"],
            self.session.answers,
            result["score"],
            session=self.session,
        )


def build_app(user_id: Optional[str] = None, storage: Optional[MutableMapping[str, str]] = None) -> AdvisorApp:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    return AdvisorApp(storage=storage, user_id=user_id)


if __name__ == "__main__":
    app = build_app(user_id="demo-user")
    manager = app.session.manager
    for i in range(manager.get_total_questions()):
        q = manager.get_question(i)
        # Middle-of-the-road answers for the demo run
        app.answer(q.id, q.options[1].id)
    result = app.analysis()
    print(f"Score: {result['score']}")
    print(f"Profile: {result['analysis'].title}")
    print(app.selection.recommendation_message())
    for line in result["insights"]:
        print(f"- {line}")
