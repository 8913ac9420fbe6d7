# questionnaire/insights.py
from __future__ import annotations
from typing import Dict, Any, List, Optional

from .scoring import answer_value


def _value(answers: Dict[str, Dict[str, Any]], question_id: str) -> Optional[float]:
    return answer_value(answers.get(question_id))


def analyze_investment_style(answers: Optional[Dict[str, Dict[str, Any]]]) -> List[str]:
    """
    Derive investment-style insights from specific answers.

    Args:
        answers: Dict mapping question IDs to answer entries

    Returns:
        Ordered list of insight sentences
    """
    answers = answers or {}
    insights: List[str] = []

    risk = _value(answers, "risk")
    if risk is not None:
        if risk >= 3:
            insights.append("Vous êtes à l'aise avec la volatilité du marché et la recherche d'opportunités.")
        else:
            insights.append("Vous privilégiez la sécurité et la préservation du capital.")

    # A missing horizon counts as short to medium term
    horizon = _value(answers, "horizon")
    if horizon is not None and horizon >= 3:
        insights.append("Votre horizon d'investissement à long terme favorise la croissance du capital.")
    else:
        insights.append("Votre horizon d'investissement court à moyen terme suggère une approche plus prudente.")

    crypto = _value(answers, "crypto")
    if crypto is not None and crypto >= 3:
        insights.append("Vous êtes ouvert aux actifs numériques et aux nouvelles technologies financières.")

    emergency = _value(answers, "emergency")
    if emergency is not None and emergency <= 2:
        insights.append("La constitution d'un fonds d'urgence devrait être une priorité avant d'investir davantage.")

    sovereignty = _value(answers, "sovereignty")
    if sovereignty is not None and sovereignty >= 3:
        insights.append(
            "Le soutien à la souveraineté économique française et européenne est une priorité dans vos investissements."
        )

    return insights
