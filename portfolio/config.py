"""
Portfolio Module Configuration

This file contains the portfolio templates, their risk ranks and the
sovereignty-detection parameters used by the recommendation engine.

Author: DADVISOR
Date: 2024
"""

import pandas as pd
from typing import Dict, Any, List

# =============================================================================
# PORTFOLIO TEMPLATES
# =============================================================================

PORTFOLIO_IDS = ["conservative", "balanced", "growth", "wareconomy"]

PORTFOLIOS: List[Dict[str, Any]] = [
    {
        "id": "conservative",
        "name": "Portefeuille Prudent",
        "risk_level": "Faible",
        "description": "Une approche conservatrice axée sur la préservation du capital avec une volatilité minimale.",
        "expected_return": "3% - 5% par an",
        "assets": [
            {"name": "Obligations", "percentage": 60},
            {"name": "Actions", "percentage": 20},
            {"name": "Immobilier", "percentage": 10},
            {"name": "Liquidités", "percentage": 10},
        ],
        "suitable_for": [
            "Investisseurs avec un horizon à court terme",
            "Personnes proches de la retraite",
            "Investisseurs avec une faible tolérance au risque",
            "Préservation du capital comme objectif principal",
        ],
    },
    {
        "id": "balanced",
        "name": "Portefeuille Équilibré",
        "risk_level": "Modéré",
        "description": "Un équilibre entre croissance et stabilité, offrant un compromis risque-rendement attractif.",
        "expected_return": "5% - 8% par an",
        "assets": [
            {"name": "Actions", "percentage": 50},
            {"name": "Obligations", "percentage": 30},
            {"name": "Immobilier", "percentage": 15},
            {"name": "Liquidités", "percentage": 5},
        ],
        "suitable_for": [
            "Investisseurs avec un horizon à moyen terme",
            "Personnes cherchant un équilibre risque-rendement",
            "Investisseurs avec une tolérance modérée au risque",
            "Diversification et croissance comme objectifs",
        ],
    },
    {
        "id": "growth",
        "name": "Portefeuille Croissance",
        "risk_level": "Élevé",
        "description": "Une approche dynamique visant une croissance significative du capital sur le long terme.",
        "expected_return": "8% - 12% par an",
        "assets": [
            {"name": "Actions", "percentage": 75},
            {"name": "Obligations", "percentage": 10},
            {"name": "Cryptomonnaies", "percentage": 10},
            {"name": "Liquidités", "percentage": 5},
        ],
        "suitable_for": [
            "Investisseurs avec un horizon à long terme",
            "Personnes jeunes loin de la retraite",
            "Investisseurs avec une forte tolérance au risque",
            "Croissance maximale du capital comme objectif",
        ],
    },
    {
        "id": "wareconomy",
        "name": "Portefeuille Économie de Guerre",
        "risk_level": "Modéré",
        "description": (
            "Un portefeuille concentré sur les entreprises françaises et européennes qui contribuent "
            "à la souveraineté économique, industrielle et de défense du continent."
        ),
        "expected_return": "5% - 9% par an",
        "assets": [
            {"name": "Actions défense et aéronautique européennes", "percentage": 35},
            {"name": "Actions industrielles et énergie européennes", "percentage": 25},
            {"name": "Obligations souveraines européennes", "percentage": 25},
            {"name": "Immobilier", "percentage": 10},
            {"name": "Liquidités", "percentage": 5},
        ],
        "suitable_for": [
            "Investisseurs souhaitant soutenir la souveraineté française et européenne",
            "Investisseurs avec un horizon à moyen ou long terme",
            "Investisseurs avec une tolérance modérée au risque",
            "Concentration géographique assumée comme objectif",
        ],
    },
]

# =============================================================================
# RISK RANKS
# =============================================================================

# balanced and wareconomy share the same rank
RISK_RANKS: Dict[str, int] = {
    "conservative": 1,
    "balanced": 2,
    "wareconomy": 2,
    "growth": 3,
}

# =============================================================================
# SOVEREIGNTY PREFERENCE DETECTION
# =============================================================================

SOVEREIGNTY_QUESTION_ID = "sovereignty"
SOVEREIGNTY_PORTFOLIO_ID = "wareconomy"

# Sovereignty answers at or above this value are a strong preference
SOVEREIGNTY_STRONG_VALUE = 3
# A moderate preference only counts once the score reaches this value
SOVEREIGNTY_MODERATE_VALUE = 2
SOVEREIGNTY_MODERATE_MIN_SCORE = 50

# Matched case-insensitively against the sovereignty answer text
SOVEREIGNTY_KEYWORDS = ["france", "europe", "français", "européen", "souveraineté"]
# Matched case-insensitively against every other answer text
BROAD_SOVEREIGNTY_KEYWORDS = SOVEREIGNTY_KEYWORDS + ["national", "local", "patriot"]

# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def create_portfolio_allocation_dataframe() -> pd.DataFrame:
    """
    Create a DataFrame of asset percentages, one column per portfolio.

    Assets a portfolio does not hold are 0.
    """
    rows = []
    for portfolio in PORTFOLIOS:
        for asset in portfolio["assets"]:
            rows.append({
                "Asset": asset["name"],
                "Portfolio": portfolio["id"],
                "Percentage": asset["percentage"],
            })
    df = pd.DataFrame(rows).pivot_table(
        index="Asset", columns="Portfolio", values="Percentage", aggfunc="sum", fill_value=0
    )
    return df.reindex(columns=PORTFOLIO_IDS, fill_value=0)
