# questionnaire/questionnaire_manager.py
from typing import List, Dict, Any

from langchain_core.tools import tool

from portfolio.recommender import get_recommended_portfolio
from .config import get_questions, Question
from .scoring import calculate_risk_score, get_profile_type, has_completed_questionnaire
from .profiles import get_investor_profile_analysis
from .insights import analyze_investment_style


class QuestionnaireManager:
    """
    Questionnaire access and evaluation: question lookup, answer building
    and the full score/profile/recommendation evaluation.
    """

    def __init__(self):
        """Initialize the QuestionnaireManager with the question catalog."""
        self.questions = self._load_questions()

    def _load_questions(self) -> List[Question]:
        return get_questions()

    def get_question(self, index: int) -> Question:
        """Get a question by index."""
        if 0 <= index < len(self.questions):
            return self.questions[index]
        raise IndexError(f"Question index {index} out of range")

    def get_question_by_id(self, question_id: str) -> Question:
        """Get a question by ID."""
        for q in self.questions:
            if q.id == question_id:
                return q
        raise ValueError(f"Question with ID '{question_id}' not found")

    def get_total_questions(self) -> int:
        return len(self.questions)

    def build_answer(self, question_id: str, option_id: str) -> Dict[str, Any]:
        """
        Build the answer entry for a selected option.

        The option text is stored alongside the value so the recommendation
        engine can inspect it.

        Raises:
            ValueError: if the question or option is unknown
        """
        question = self.get_question_by_id(question_id)
        option = question.get_option(option_id)
        if option is None:
            raise ValueError(f"Option '{option_id}' is not an option of question '{question_id}'")
        return {"optionId": option.id, "value": option.value, "text": option.text}

    def evaluate(self, answers: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
        """
        Evaluate a set of answers.

        Args:
            answers: Dict mapping question IDs to answer entries

        Returns:
            Dict with score, profile type, analysis, insights and the
            recommended portfolio ID
        """
        score = calculate_risk_score(answers)
        analysis = get_investor_profile_analysis(score, answers)
        return {
            "score": score,
            "profile_type": get_profile_type(score),
            "complete": has_completed_questionnaire(answers),
            "analysis": analysis.model_dump(by_alias=True),
            "insights": analyze_investment_style(answers),
            "recommended_portfolio": get_recommended_portfolio(score, answers),
        }


@tool("investor_risk_profile")
def investor_risk_profile_tool(answers: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
    """Compute the investor's risk score, profile analysis, style insights and recommended portfolio from questionnaire answers keyed by question ID, each with 'optionId' and 'value'."""
    manager = QuestionnaireManager()
    return manager.evaluate(answers)
