# questionnaire/profiles.py
from __future__ import annotations
from typing import Dict, Any, Optional

from investor_profile.models import InvestorProfileAnalysis, AllocationSlice
from .config import CONSERVATIVE_UPPER, BALANCED_UPPER


CONSERVATIVE_PROFILE = InvestorProfileAnalysis(
    title="Profil Conservateur",
    description=(
        "Vous êtes un investisseur prudent qui valorise la préservation du capital et la stabilité. "
        "Vous préférez limiter les risques, même si cela signifie des rendements potentiellement plus faibles. "
        "DADVISOR vous aide à comprendre ce profil, mais vous gardez le contrôle total de vos investissements."
    ),
    traits=[
        "Prudent et méthodique dans vos décisions financières",
        "Préfère la stabilité et la sécurité plutôt que des gains potentiellement élevés",
        "Sensible aux fluctuations à court terme de vos investissements",
        "Privilégie la préservation du capital sur la croissance",
    ],
    suitable_investments=[
        "Obligations d'État et d'entreprises de haute qualité",
        "Fonds d'épargne et certificats de dépôt",
        "Stablecoins et crypto-actifs à faible volatilité",
        "ETFs d'obligations et de dividendes",
    ],
    risks_to_consider=[
        "Risque d'inflation érodant le pouvoir d'achat",
        "Rendements potentiellement insuffisants pour atteindre vos objectifs à long terme",
        "Opportunités manquées pendant les marchés haussiers",
    ],
    time_horizon="Court à moyen terme (1-5 ans)",
    allocation=[
        AllocationSlice(label="Crypto-actifs conservateurs", value=15),
        AllocationSlice(label="Stablecoins", value=25),
        AllocationSlice(label="Obligations", value=40),
        AllocationSlice(label="Actions à dividendes", value=15),
        AllocationSlice(label="Liquidités", value=5),
    ],
)

BALANCED_PROFILE = InvestorProfileAnalysis(
    title="Profil Équilibré",
    description=(
        "Vous cherchez un équilibre entre croissance et stabilité. Vous êtes prêt à accepter une volatilité "
        "modérée pour obtenir des rendements plus élevés à long terme. DADVISOR vous aide à comprendre ce "
        "profil, mais vous gardez toujours le contrôle total de vos actifs."
    ),
    traits=[
        "Capable de tolérer des fluctuations modérées du marché",
        "Recherche un équilibre entre croissance et sécurité",
        "Ouvert à diversifier entre différentes classes d'actifs",
        "Patient et orienté vers le moyen à long terme",
    ],
    suitable_investments=[
        "Portefeuille diversifié d'actions et d'obligations",
        "ETFs indiciels et sectoriels",
        "Cryptomonnaies établies comme Bitcoin et Ethereum",
        "Actifs tokenisés et immobilier digital",
    ],
    risks_to_consider=[
        "Exposition aux cycles économiques et aux fluctuations du marché",
        "Périodes potentielles de rendements négatifs à court terme",
        "Nécessité de rééquilibrer périodiquement le portefeuille",
    ],
    time_horizon="Moyen à long terme (5-10 ans)",
    allocation=[
        AllocationSlice(label="Cryptomonnaies établies", value=25),
        AllocationSlice(label="Actions", value=35),
        AllocationSlice(label="Obligations", value=20),
        AllocationSlice(label="Stablecoins", value=15),
        AllocationSlice(label="Actifs alternatifs", value=5),
    ],
)

GROWTH_PROFILE = InvestorProfileAnalysis(
    title="Profil Croissance",
    description=(
        "Vous êtes un investisseur orienté vers la croissance à long terme et prêt à accepter une volatilité "
        "significative pour maximiser vos rendements potentiels. DADVISOR vous aide à comprendre ce profil, "
        "mais vous gardez le contrôle total de vos investissements."
    ),
    traits=[
        "Forte tolérance au risque et à la volatilité",
        "Perspective d'investissement à long terme",
        "Capacité émotionnelle à résister aux baisses de marché",
        "Intérêt pour l'innovation et les nouveaux marchés",
    ],
    suitable_investments=[
        "Actions de croissance et technologies émergentes",
        "Cryptomonnaies diversifiées incluant des projets innovants",
        "Actifs à haut rendement potentiel",
        "Investissements dans l'innovation et les tendances émergentes",
    ],
    risks_to_consider=[
        "Forte volatilité à court et moyen terme",
        "Risque de concentration dans certains secteurs",
        "Nécessité d'une surveillance plus active du portefeuille",
    ],
    time_horizon="Long terme (10+ ans)",
    allocation=[
        AllocationSlice(label="Cryptomonnaies diversifiées", value=40),
        AllocationSlice(label="Actions de croissance", value=35),
        AllocationSlice(label="Actifs tokenisés", value=15),
        AllocationSlice(label="Obligations", value=5),
        AllocationSlice(label="Stablecoins", value=5),
    ],
)


def get_investor_profile_analysis(
    score: int,
    answers: Optional[Dict[str, Dict[str, Any]]] = None,
) -> InvestorProfileAnalysis:
    """
    Get the profile analysis for a risk score.

    Args:
        score: Risk score (0-100)
        answers: Questionnaire answers; accepted for callers that pass the
            full context, the band only depends on the score

    Returns:
        The static analysis of the matching band
    """
    if score < CONSERVATIVE_UPPER:
        return CONSERVATIVE_PROFILE
    if score < BALANCED_UPPER:
        return BALANCED_PROFILE
    return GROWTH_PROFILE
