# portfolio/risk_comparator.py
from __future__ import annotations

from operation.logging import get_logger
from .config import RISK_RANKS

logger = get_logger(__name__)


def is_portfolio_more_risky(selected_id: str, recommended_id: str) -> bool:
    """
    Check whether the selected portfolio is riskier than the recommended one.

    Unknown IDs cannot be compared; they log a warning and count as not riskier.
    """
    selected_rank = RISK_RANKS.get(selected_id)
    recommended_rank = RISK_RANKS.get(recommended_id)
    if selected_rank is None or recommended_rank is None:
        logger.warning(
            f"Cannot compare portfolio risk, unknown portfolio ID: "
            f"selected={selected_id!r}, recommended={recommended_id!r}"
        )
        return False
    return selected_rank > recommended_rank
