"""
Scoring Function

A locked-in guess scores the information it revealed: absent letters earn
their full point value, elsewhere letters half, correct letters nothing.
A row still being typed shows the raw point sum instead.
"""

from typing import Iterable, Mapping, Sequence

from ..config.game_settings import LETTER_POINTS
from ..models.game import Clue, CluedLetter
from .clue import clue


def clued_word_score(clued_letters: Sequence[CluedLetter],
                     letter_points: Mapping[str, int] = LETTER_POINTS) -> float:
    """Score of a locked-in guess."""
    word_score = 0.0
    for cl in clued_letters:
        if cl.clue == Clue.ABSENT:
            word_score += letter_points[cl.letter]
        elif cl.clue == Clue.ELSEWHERE:
            word_score += letter_points[cl.letter] / 2
    return word_score


def word_score(word: str, letter_points: Mapping[str, int] = LETTER_POINTS) -> float:
    """Preview estimate for an unconfirmed guess: raw point sum, no clue discount."""
    return float(sum(letter_points.get(letter, 0) for letter in word))


def total_score(guesses: Iterable[str], target: str,
                letter_points: Mapping[str, int] = LETTER_POINTS) -> float:
    """Game score: sum over locked-in guesses."""
    return sum((clued_word_score(clue(guess, target), letter_points) for guess in guesses), 0.0)


def format_score(score: float) -> str:
    """Render 12.0 as "12" and 3.5 as "3.5"."""
    return str(int(score)) if float(score).is_integer() else str(score)
