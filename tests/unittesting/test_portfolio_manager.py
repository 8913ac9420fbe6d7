"""
Unit tests for portfolio/portfolio_manager.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import unittest
from portfolio.config import RISK_RANKS, PORTFOLIO_IDS
from portfolio.portfolio_manager import (
    get_portfolios,
    get_portfolio_by_id,
    get_allocation_table,
    PortfolioSelection,
)


class TestPortfolioCatalog(unittest.TestCase):
    """Test cases for portfolio accessors."""

    def test_catalog_ids(self):
        self.assertEqual([p["id"] for p in get_portfolios()], PORTFOLIO_IDS)
        self.assertEqual(set(RISK_RANKS), set(PORTFOLIO_IDS))

    def test_assets_sum_to_100(self):
        for portfolio in get_portfolios():
            total = sum(a["percentage"] for a in portfolio["assets"])
            self.assertEqual(total, 100, portfolio["id"])

    def test_get_portfolio_by_id(self):
        self.assertEqual(get_portfolio_by_id("growth")["name"], "Portefeuille Croissance")
        self.assertIsNone(get_portfolio_by_id("nonexistent"))

    def test_allocation_table(self):
        table = get_allocation_table()
        self.assertEqual(list(table.columns), PORTFOLIO_IDS)
        for portfolio_id in PORTFOLIO_IDS:
            self.assertEqual(int(table[portfolio_id].sum()), 100)
        self.assertEqual(int(table.loc["Obligations", "conservative"]), 60)
        self.assertEqual(int(table.loc["Cryptomonnaies", "conservative"]), 0)


class TestPortfolioSelection(unittest.TestCase):
    """Test cases for PortfolioSelection."""

    def test_starts_on_recommendation(self):
        selection = PortfolioSelection(30, {})
        self.assertEqual(selection.recommended_portfolio_id, "conservative")
        self.assertEqual(selection.selected_portfolio_id, "conservative")
        self.assertIn("(30)", selection.recommendation_message())

    def test_sovereignty_message(self):
        selection = PortfolioSelection(30, {"sovereignty": {"optionId": "sovereignty-4", "value": 4}})
        self.assertTrue(selection.is_sovereignty_recommendation)
        self.assertIn("France/Europe", selection.recommendation_message())

    def test_select_unknown_raises(self):
        selection = PortfolioSelection(50, {})
        with self.assertRaises(ValueError):
            selection.select("nonexistent")
        self.assertEqual(selection.selected_portfolio_id, "balanced")

    def test_proceed_with_recommendation(self):
        result = PortfolioSelection(80, {}).proceed()
        self.assertEqual(result, {"ok": True, "portfolio_id": "growth", "warning": None})

    def test_proceed_with_safer_choice(self):
        selection = PortfolioSelection(80, {})
        selection.select("conservative")
        result = selection.proceed()
        self.assertTrue(result["ok"])
        self.assertIsNone(result["warning"])

    def test_riskier_choice_needs_confirmation(self):
        selection = PortfolioSelection(20, {})
        selection.select("growth")
        self.assertTrue(selection.is_riskier_than_recommended())

        result = selection.proceed()
        self.assertFalse(result["ok"])
        self.assertEqual(result["warning"], PortfolioSelection.RISKIER_WARNING)

        confirmed = selection.proceed(confirm_riskier=True)
        self.assertTrue(confirmed["ok"])
        self.assertEqual(confirmed["portfolio_id"], "growth")

    def test_equal_rank_switch_is_not_riskier(self):
        selection = PortfolioSelection(50, {})
        selection.select("wareconomy")
        self.assertTrue(selection.proceed()["ok"])


if __name__ == '__main__':
    unittest.main()
