# Area: Game Tests
"""Tests for oracle prompt construction."""

from twentyq._game.prompt import build_oracle_prompt


class TestBuildOraclePrompt:
    def test_contains_inputs(self):
        prompt = build_oracle_prompt("apple", "A fruit.", "Is it red?")
        assert 'The secret answer is: "apple"' in prompt
        assert "Here is some context about the secret answer: A fruit." in prompt
        assert "User Question: Is it red?" in prompt

    def test_ends_with_answer_cue(self):
        prompt = build_oracle_prompt("apple", "A fruit.", "Is it red?")
        assert prompt.endswith("Your Answer (Yes or No):")
        assert prompt.startswith("You are an AI assistant for a 20 Questions game.")

    def test_question_is_trimmed(self):
        prompt = build_oracle_prompt("apple", "ctx", "   Is it red?   ")
        assert "User Question: Is it red?\n" in prompt

    def test_deterministic(self):
        args = ("violin", "A string instrument.", "Does it make sound?")
        assert build_oracle_prompt(*args) == build_oracle_prompt(*args)
