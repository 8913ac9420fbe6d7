"""
Questionnaire Module Configuration

This file contains the profiling questions, the score bands and the
storage keys used by the questionnaire module. All questionnaire data is
centralized here so scoring, insights and the session share one catalog.

Author: DADVISOR
Date: 2024
"""

from typing import List, Optional
from dataclasses import dataclass

# =============================================================================
# QUESTION MODEL
# =============================================================================

@dataclass(frozen=True)
class Option:
    id: str
    text: str
    value: int


@dataclass(frozen=True)
class Question:
    id: str
    text: str
    category: str
    options: List[Option]

    def get_option(self, option_id: str) -> Optional[Option]:
        for option in self.options:
            if option.id == option_id:
                return option
        return None


# =============================================================================
# PROFILING QUESTIONS
# =============================================================================

QUESTIONS = [
    # Investment basics
    Question(
        id="horizon",
        text="Quel est votre horizon d'investissement ?",
        category="investment_basics",
        options=[
            Option("horizon-1", "Moins de 2 ans", 1),
            Option("horizon-2", "2 à 5 ans", 2),
            Option("horizon-3", "5 à 10 ans", 3),
            Option("horizon-4", "Plus de 10 ans", 4),
        ],
    ),
    Question(
        id="goal",
        text="Quel est votre principal objectif d'investissement ?",
        category="investment_basics",
        options=[
            Option("goal-1", "Préserver mon capital avec un risque minimal", 1),
            Option("goal-2", "Générer un revenu régulier", 2),
            Option("goal-3", "Croissance équilibrée entre revenu et appréciation du capital", 3),
            Option("goal-4", "Croissance maximale du capital, prêt à accepter des fluctuations importantes", 4),
        ],
    ),
    # Personal finance
    Question(
        id="income",
        text="Quelle part de vos revenus mensuels pouvez-vous consacrer à l'investissement ?",
        category="personal_finance",
        options=[
            Option("income-1", "Moins de 5%", 1),
            Option("income-2", "Entre 5% et 15%", 2),
            Option("income-3", "Entre 15% et 30%", 3),
            Option("income-4", "Plus de 30%", 4),
        ],
    ),
    Question(
        id="knowledge",
        text="Comment évalueriez-vous vos connaissances en matière d'investissement ?",
        category="personal_finance",
        options=[
            Option("knowledge-1", "Novice - Je connais très peu les marchés financiers", 1),
            Option("knowledge-2", "Débutant - Je comprends les bases", 2),
            Option("knowledge-3", "Intermédiaire - J'ai déjà investi et je comprends les risques", 3),
            Option("knowledge-4", "Expert - Je suis très familier avec les différents types d'investissements", 4),
        ],
    ),
    # Risk profile
    Question(
        id="risk",
        text="Comment réagiriez-vous si vos investissements perdaient 20% de leur valeur en un mois ?",
        category="risk_profile",
        options=[
            Option("risk-1", "Je vendrais tout immédiatement pour éviter d'autres pertes", 1),
            Option("risk-2", "Je vendrais une partie de mes investissements", 2),
            Option("risk-3", "Je ne ferais rien et attendrais que le marché se redresse", 3),
            Option("risk-4", "J'achèterais davantage pour profiter des prix bas", 4),
        ],
    ),
    Question(
        id="emergency",
        text="Disposez-vous d'une épargne de précaution (fonds d'urgence) ?",
        category="risk_profile",
        options=[
            Option("emergency-1", "Non, je n'ai pas d'épargne de précaution", 1),
            Option("emergency-2", "J'ai moins d'un mois de dépenses en épargne de précaution", 2),
            Option("emergency-3", "J'ai entre 1 et 3 mois de dépenses en épargne de précaution", 3),
            Option("emergency-4", "J'ai plus de 3 mois de dépenses en épargne de précaution", 4),
        ],
    ),
    # Specialized investments
    Question(
        id="sovereignty",
        text=(
            "Votre priorité est-elle d'investir exclusivement en France et en Europe "
            "pour soutenir la souveraineté économique ?"
        ),
        category="specialized_investments",
        options=[
            Option("sovereignty-1", "Non, je préfère une allocation mondiale diversifiée", 1),
            Option("sovereignty-2", "Je privilégie l'Europe mais sans exclusivité", 2),
            Option("sovereignty-3", "Oui, je veux favoriser les entreprises françaises et européennes", 3),
            Option(
                "sovereignty-4",
                "Je souhaite investir exclusivement dans des entreprises contribuant à la souveraineté européenne",
                4,
            ),
        ],
    ),
    Question(
        id="crypto",
        text="Quelle est votre expérience avec les cryptomonnaies ?",
        category="specialized_investments",
        options=[
            Option("crypto-1", "Je n'ai jamais investi en cryptomonnaies et je suis réticent", 1),
            Option("crypto-2", "Je suis curieux mais n'ai jamais investi en cryptomonnaies", 2),
            Option("crypto-3", "J'ai déjà investi en Bitcoin/Ethereum", 3),
            Option("crypto-4", "J'investis régulièrement dans plusieurs cryptomonnaies", 4),
        ],
    ),
]

# =============================================================================
# SCORING PARAMETERS
# =============================================================================

# Highest option value; a question's weight is value / MAX_OPTION_VALUE
MAX_OPTION_VALUE = 4

# Score bands: score < CONSERVATIVE_UPPER -> conservative,
# score < BALANCED_UPPER -> balanced, otherwise growth
CONSERVATIVE_UPPER = 40
BALANCED_UPPER = 70

VALIDATION_THRESHOLD = 50

# =============================================================================
# SESSION STORAGE KEYS
# =============================================================================

TEMP_ANSWERS_KEY = "dadvisor_temp_answers"
TEMP_SCORE_KEY = "dadvisor_temp_score"
TEMP_COMPLETE_KEY = "dadvisor_temp_complete"

# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def get_questions() -> List[Question]:
    """Get the list of profiling questions."""
    return QUESTIONS
