from __future__ import annotations
from typing import Dict, List, Any, Optional
import pandas as pd

from operation.logging import get_logger
from .config import PORTFOLIOS, create_portfolio_allocation_dataframe
from .recommender import get_recommended_portfolio
from .risk_comparator import is_portfolio_more_risky

logger = get_logger(__name__)


def get_portfolios() -> List[Dict[str, Any]]:
    """Return every available portfolio template."""
    return PORTFOLIOS


def get_portfolio_by_id(portfolio_id: str) -> Optional[Dict[str, Any]]:
    """Find a portfolio template by ID, None when unknown."""
    for portfolio in PORTFOLIOS:
        if portfolio["id"] == portfolio_id:
            return portfolio
    return None


def get_allocation_table() -> pd.DataFrame:
    """Asset percentages side by side for every portfolio."""
    return create_portfolio_allocation_dataframe()


class PortfolioSelection:
    """
    Portfolio choice for one investor.

    Starts on the recommended portfolio; the investor may switch to another
    template. Proceeding with a riskier template than recommended needs an
    explicit confirmation.
    """

    RISKIER_WARNING = (
        "Vous avez sélectionné un portefeuille plus risqué que celui recommandé pour votre profil."
    )

    def __init__(self, score: int, answers: Optional[Dict[str, Dict[str, Any]]] = None):
        """
        Initialize the selection.

        Args:
            score: Risk score (0-100)
            answers: Questionnaire answers used for the recommendation
        """
        self.score = score
        self.answers = dict(answers or {})
        self.recommended_portfolio_id = get_recommended_portfolio(score, self.answers)
        self.selected_portfolio_id = self.recommended_portfolio_id
        logger.info(f"Recommended portfolio: {self.recommended_portfolio_id} (score {score})")

    @property
    def recommended_portfolio(self) -> Dict[str, Any]:
        return get_portfolio_by_id(self.recommended_portfolio_id)

    @property
    def selected_portfolio(self) -> Dict[str, Any]:
        return get_portfolio_by_id(self.selected_portfolio_id)

    @property
    def is_sovereignty_recommendation(self) -> bool:
        return self.recommended_portfolio_id == "wareconomy"

    def recommendation_message(self) -> str:
        """Explain why the recommended portfolio was picked."""
        name = self.recommended_portfolio["name"]
        if self.is_sovereignty_recommendation:
            return (
                "Basé sur votre préférence pour les investissements en France/Europe, "
                f"nous vous recommandons le portefeuille {name}"
            )
        return f"Basé sur votre profil de risque ({self.score}), nous vous recommandons le portefeuille {name}"

    def select(self, portfolio_id: str) -> Dict[str, Any]:
        """
        Switch the selection to another portfolio.

        Raises:
            ValueError: if the portfolio ID is unknown
        """
        portfolio = get_portfolio_by_id(portfolio_id)
        if portfolio is None:
            raise ValueError(f"Portfolio with ID '{portfolio_id}' not found")
        self.selected_portfolio_id = portfolio_id
        logger.info(f"Portfolio selected: {portfolio_id}")
        return portfolio

    def is_riskier_than_recommended(self) -> bool:
        return is_portfolio_more_risky(self.selected_portfolio_id, self.recommended_portfolio_id)

    def proceed(self, confirm_riskier: bool = False) -> Dict[str, Any]:
        """
        Validate the selection before wallet creation.

        Args:
            confirm_riskier: The investor accepted a riskier portfolio

        Returns:
            Dict with "ok", "portfolio_id" and "warning"
        """
        if self.is_riskier_than_recommended():
            if not confirm_riskier:
                logger.warning(
                    f"Riskier portfolio selected: {self.selected_portfolio_id} "
                    f"(recommended {self.recommended_portfolio_id})"
                )
                return {"ok": False, "portfolio_id": self.selected_portfolio_id, "warning": self.RISKIER_WARNING}
            return {"ok": True, "portfolio_id": self.selected_portfolio_id, "warning": self.RISKIER_WARNING}
        return {"ok": True, "portfolio_id": self.selected_portfolio_id, "warning": None}
