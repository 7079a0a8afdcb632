# Area: Game Tests
"""Tests for question shape, guess detection and verdict classification."""

import pytest

from twentyq._game.question_rules import classify_verdict, contains_guess, is_yes_no_question
from twentyq._services.oracle import OracleOutcome


class TestIsYesNoQuestion:
    """Tests for the auxiliary-verb shape check."""

    @pytest.mark.parametrize("question", [
        "Is it blue?",
        "does it swim",
        "  Can you eat it?  ",
        "WOULD it fit in a car?",
        "Has it got legs?",
        "Must it be plugged in?",
    ])
    def test_accepts(self, question):
        assert is_yes_no_question(question) is True

    @pytest.mark.parametrize("question", [
        "What color is it?",
        "Tell me about it",
        "Island?",
        "is",
        "Doesit swim?",
        "",
        "   ",
        None,
    ])
    def test_rejects(self, question):
        assert is_yes_no_question(question) is False


class TestContainsGuess:
    """Tests for whole-word guess detection."""

    def test_case_insensitive_whole_word(self):
        assert contains_guess("Is it an APPLE?", "apple") is True

    def test_substring_is_not_a_guess(self):
        assert contains_guess("Is it a pineapple?", "apple") is False
        assert contains_guess("Is it applesauce?", "apple") is False

    def test_multi_word_answer(self):
        assert contains_guess("Is it New York?", "new york") is True
        assert contains_guess("Is it in York?", "new york") is False

    def test_regex_characters_are_literal(self):
        assert contains_guess("Is it c.d?", "c.d") is True
        assert contains_guess("Is it cad?", "c.d") is False

    def test_empty_secret_never_matches(self):
        assert contains_guess("Is it anything?", "") is False


class TestClassifyVerdict:
    @pytest.mark.parametrize("text", ["Yes", "yes.", "  YES  ", "Yes, it is"])
    def test_yes(self, text):
        assert classify_verdict(text) is OracleOutcome.YES

    @pytest.mark.parametrize("text", ["No", "no.", "Maybe", "I think yes", "", None])
    def test_everything_else_is_no(self, text):
        assert classify_verdict(text) is OracleOutcome.NO
