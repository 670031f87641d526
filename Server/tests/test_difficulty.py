"""Tests for the difficulty validator."""

import pytest

from scordle.models.game import Difficulty
from scordle.services.clue import clue
from scordle.services.difficulty import first_violation, ordinal, violation


class TestViolation:
    """Constraints derived from a single earlier guess."""

    def test_hard_requires_correct_letter_in_place(self):
        """CEASE against CRANE fixes C in the first position; ZEBRA drops it."""
        feedback = violation(Difficulty.HARD, clue("cease", "crane"), "zebra")
        assert feedback == "1st letter must be C"

    def test_hard_requires_elsewhere_letters(self):
        feedback = violation(Difficulty.HARD, clue("react", "crane"), "spare")
        assert feedback == "Guess must contain C"

    def test_position_checked_before_presence(self):
        feedback = violation(Difficulty.HARD, clue("react", "crane"), "about")
        assert feedback == "3rd letter must be A"

    def test_elsewhere_letters_reported_in_order_of_appearance(self):
        # A stays put, R is present, both E and C are missing: E comes first
        feedback = violation(Difficulty.HARD, clue("react", "crane"), "brand")
        assert feedback == "Guess must contain E"
        feedback = violation(Difficulty.HARD, clue("react", "crane"), "llama")
        assert feedback == "Guess must contain R"

    def test_hard_accepts_consistent_guess(self):
        assert violation(Difficulty.HARD, clue("react", "crane"), "trace") is None

    def test_elsewhere_letter_may_move_anywhere(self):
        assert violation(Difficulty.HARD, clue("react", "crane"), "crane") is None

    @pytest.mark.parametrize("difficulty", [Difficulty.NORMAL, Difficulty.EASY])
    def test_other_difficulties_never_object(self, difficulty):
        assert violation(difficulty, clue("cease", "crane"), "zebra") is None
        assert violation(difficulty, clue("react", "crane"), "pious") is None

    def test_absent_letters_are_not_constraints(self):
        assert violation(Difficulty.HARD, clue("pious", "crane"), "pious") is None


class TestFirstViolation:
    """Checking a guess against the whole history."""

    def test_first_failing_guess_wins(self):
        guesses = ["react", "trace"]
        assert first_violation(Difficulty.HARD, guesses, "crane", "about") == "3rd letter must be A"
        assert first_violation(Difficulty.HARD, guesses, "crane", "scare") == "2nd letter must be R"

    def test_no_history(self):
        assert first_violation(Difficulty.HARD, [], "crane", "zebra") is None


class TestDifficultyParsing:
    """Difficulty names from requests."""

    def test_parse(self):
        assert Difficulty.parse("HARD") is Difficulty.HARD
        assert Difficulty.parse(" easy ") is Difficulty.EASY
        assert Difficulty.parse(None) is Difficulty.NORMAL
        assert Difficulty.parse("", Difficulty.HARD) is Difficulty.HARD

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValueError):
            Difficulty.parse("ultra")


@pytest.mark.parametrize("n, expected", [
    (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"), (21, "21st"), (22, "22nd")
])
def test_ordinal(n, expected):
    assert ordinal(n) == expected
