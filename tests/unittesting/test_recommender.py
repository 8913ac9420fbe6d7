"""
Unit tests for portfolio/recommender.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import unittest
from portfolio.recommender import (
    get_recommended_portfolio,
    has_sovereignty_preference,
    STRONG_SOVEREIGNTY_OPTION_IDS,
)


class TestScoreThresholds(unittest.TestCase):
    """Score-based recommendation without a sovereignty preference."""

    def test_threshold_boundaries(self):
        self.assertEqual(get_recommended_portfolio(39, {}), "conservative")
        self.assertEqual(get_recommended_portfolio(40, {}), "balanced")
        self.assertEqual(get_recommended_portfolio(69, {}), "balanced")
        self.assertEqual(get_recommended_portfolio(70, {}), "growth")

    def test_missing_answers_use_score(self):
        self.assertEqual(get_recommended_portfolio(0), "conservative")
        self.assertEqual(get_recommended_portfolio(100, None), "growth")

    def test_unrelated_answers_use_score(self):
        answers = {
            "horizon": {"optionId": "horizon-4", "value": 4, "text": "Plus de 10 ans"},
            "risk": {"optionId": "risk-4", "value": 4},
        }
        self.assertEqual(get_recommended_portfolio(85, answers), "growth")


class TestSovereigntyOverride(unittest.TestCase):
    """Sovereignty preference rules, in precedence order."""

    def test_strong_option_ids_are_top_two(self):
        self.assertEqual(STRONG_SOVEREIGNTY_OPTION_IDS, {"sovereignty-3", "sovereignty-4"})

    def test_strong_value_overrides_low_score(self):
        answers = {"sovereignty": {"optionId": "sovereignty-4", "value": 4}}
        self.assertEqual(get_recommended_portfolio(10, answers), "wareconomy")

    def test_strong_option_id_alone_is_enough(self):
        answers = {"sovereignty": {"optionId": "sovereignty-3", "value": 0}}
        self.assertEqual(get_recommended_portfolio(90, answers), "wareconomy")

    def test_value_three_alone_is_enough(self):
        answers = {"sovereignty": {"optionId": "custom", "value": 3}}
        self.assertEqual(get_recommended_portfolio(20, answers), "wareconomy")

    def test_moderate_preference_needs_score_50(self):
        answers = {"sovereignty": {"optionId": "sovereignty-2", "value": 2}}
        self.assertEqual(get_recommended_portfolio(50, answers), "wareconomy")
        self.assertEqual(get_recommended_portfolio(49, answers), "balanced")

    def test_keyword_in_sovereignty_text(self):
        answers = {"sovereignty": {"optionId": "x", "value": 1, "text": "Plutôt des entreprises EUROPÉENNES"}}
        self.assertEqual(get_recommended_portfolio(20, answers), "wareconomy")

    def test_moderate_catalog_text_mentions_europe(self):
        """The catalog text of the moderate option matches the keyword rule at any score."""
        answers = {
            "sovereignty": {
                "optionId": "sovereignty-2",
                "value": 2,
                "text": "Je privilégie l'Europe mais sans exclusivité",
            }
        }
        self.assertEqual(get_recommended_portfolio(30, answers), "wareconomy")

    def test_weak_sovereignty_falls_through(self):
        answers = {
            "sovereignty": {
                "optionId": "sovereignty-1",
                "value": 1,
                "text": "Non, je préfère une allocation mondiale diversifiée",
            }
        }
        self.assertEqual(get_recommended_portfolio(80, answers), "growth")

    def test_broad_set_not_used_on_sovereignty_text(self):
        answers = {"sovereignty": {"optionId": "x", "value": 1, "text": "marché local"}}
        self.assertEqual(get_recommended_portfolio(80, answers), "growth")

    def test_keyword_in_other_answer(self):
        answers = {"other": {"optionId": "x", "value": 1, "text": "Je préfère la France"}}
        self.assertEqual(get_recommended_portfolio(80, answers), "wareconomy")

    def test_broad_keyword_in_other_answer(self):
        answers = {"goal": {"optionId": "x", "value": 3, "text": "Soutenir l'économie LOCALE"}}
        self.assertEqual(get_recommended_portfolio(55, answers), "wareconomy")

    def test_non_numeric_sovereignty_value_falls_through(self):
        answers = {"sovereignty": {"optionId": "x", "value": "4"}}
        self.assertEqual(get_recommended_portfolio(80, answers), "growth")

    def test_has_sovereignty_preference(self):
        self.assertFalse(has_sovereignty_preference(80, {}))
        self.assertFalse(has_sovereignty_preference(80, None))
        self.assertTrue(has_sovereignty_preference(10, {"sovereignty": {"optionId": "sovereignty-4", "value": 4}}))


if __name__ == '__main__':
    unittest.main()
