"""
Unit tests for portfolio/risk_comparator.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import unittest
from portfolio.risk_comparator import is_portfolio_more_risky


class TestRiskComparator(unittest.TestCase):
    """Test cases for is_portfolio_more_risky."""

    def test_riskier_selection(self):
        self.assertTrue(is_portfolio_more_risky("growth", "conservative"))
        self.assertTrue(is_portfolio_more_risky("balanced", "conservative"))
        self.assertTrue(is_portfolio_more_risky("growth", "wareconomy"))

    def test_safer_selection(self):
        self.assertFalse(is_portfolio_more_risky("conservative", "growth"))
        self.assertFalse(is_portfolio_more_risky("wareconomy", "growth"))

    def test_equal_rank_is_not_riskier(self):
        self.assertFalse(is_portfolio_more_risky("wareconomy", "balanced"))
        self.assertFalse(is_portfolio_more_risky("balanced", "wareconomy"))
        self.assertFalse(is_portfolio_more_risky("growth", "growth"))

    def test_unknown_id_returns_false_and_warns(self):
        """Unknown IDs never raise."""
        with self.assertLogs("portfolio.risk_comparator", level="WARNING") as logs:
            self.assertFalse(is_portfolio_more_risky("unknown", "balanced"))
        self.assertIn("unknown", logs.output[0])

        with self.assertLogs("portfolio.risk_comparator", level="WARNING"):
            self.assertFalse(is_portfolio_more_risky("growth", ""))


if __name__ == '__main__':
    unittest.main()
