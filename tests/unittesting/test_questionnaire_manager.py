"""
Unit tests for questionnaire/questionnaire_manager.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import unittest
from questionnaire.questionnaire_manager import QuestionnaireManager, investor_risk_profile_tool


class TestQuestionnaireManager(unittest.TestCase):
    """Test cases for QuestionnaireManager class."""

    def setUp(self):
        """Set up test fixtures."""
        self.manager = QuestionnaireManager()

    def test_get_total_questions(self):
        self.assertEqual(self.manager.get_total_questions(), 8)

    def test_get_question_by_index(self):
        question = self.manager.get_question(0)
        self.assertEqual(question.id, "horizon")
        self.assertEqual(len(question.options), 4)

    def test_get_question_by_index_out_of_range(self):
        with self.assertRaises(IndexError):
            self.manager.get_question(100)
        with self.assertRaises(IndexError):
            self.manager.get_question(-1)

    def test_get_question_by_id(self):
        question = self.manager.get_question_by_id("sovereignty")
        self.assertEqual(question.category, "specialized_investments")

    def test_get_question_by_id_not_found(self):
        with self.assertRaises(ValueError):
            self.manager.get_question_by_id("nonexistent_id")

    def test_option_values_in_range(self):
        for question in self.manager.questions:
            self.assertEqual([o.value for o in question.options], [1, 2, 3, 4], question.id)

    def test_build_answer_includes_text(self):
        answer = self.manager.build_answer("risk", "risk-3")
        self.assertEqual(answer["optionId"], "risk-3")
        self.assertEqual(answer["value"], 3)
        self.assertEqual(answer["text"], "Je ne ferais rien et attendrais que le marché se redresse")

    def test_build_answer_unknown_option(self):
        with self.assertRaises(ValueError):
            self.manager.build_answer("risk", "horizon-1")

    def test_evaluate(self):
        answers = {
            q.id: self.manager.build_answer(q.id, q.options[3].id)
            for q in self.manager.questions
            if q.id != "sovereignty"
        }
        answers["sovereignty"] = self.manager.build_answer("sovereignty", "sovereignty-1")
        result = self.manager.evaluate(answers)

        self.assertEqual(result["score"], 91)
        self.assertEqual(result["profile_type"], "growth")
        self.assertTrue(result["complete"])
        self.assertEqual(result["analysis"]["title"], "Profil Croissance")
        self.assertEqual(result["recommended_portfolio"], "growth")
        self.assertTrue(result["insights"])

    def test_tool_invocation(self):
        answers = {"sovereignty": {"optionId": "sovereignty-4", "value": 4}}
        result = investor_risk_profile_tool.invoke({"answers": answers})
        self.assertEqual(result["score"], 100)
        self.assertEqual(result["recommended_portfolio"], "wareconomy")
        self.assertFalse(result["complete"])


if __name__ == '__main__':
    unittest.main()
