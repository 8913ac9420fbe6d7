"""
Portfolio templates, recommendation and risk comparison.
"""

from .recommender import get_recommended_portfolio
from .risk_comparator import is_portfolio_more_risky

__all__ = [
    'get_recommended_portfolio',
    'is_portfolio_more_risky',
]
