"""
Difficulty Validator

Rejects guesses that ignore information revealed by earlier guesses.
A violation is returned as a message, never raised.
"""

from typing import Iterable, Optional, Sequence

from ..models.game import Clue, CluedLetter, Difficulty
from .clue import clue


def ordinal(n: int) -> str:
    """1 -> "1st", 2 -> "2nd", 11 -> "11th"."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def violation(difficulty: Difficulty, prior_clue: Sequence[CluedLetter], new_guess: str) -> Optional[str]:
    """
    Check a new guess against the clues of one earlier guess.

    Only HARD applies a constraint: every CORRECT letter must stay in its
    position, then every ELSEWHERE letter must appear somewhere. Positions
    are checked first, then letters in order of first appearance.

    Returns:
        Message describing the first unmet constraint, or None
    """
    if difficulty is not Difficulty.HARD:
        return None

    for i, cl in enumerate(prior_clue):
        if cl.clue == Clue.CORRECT and (i >= len(new_guess) or new_guess[i] != cl.letter):
            return f"{ordinal(i + 1)} letter must be {cl.letter.upper()}"

    required = []
    for cl in prior_clue:
        if cl.clue == Clue.ELSEWHERE and cl.letter not in required:
            required.append(cl.letter)

    for letter in required:
        if letter not in new_guess:
            return f"Guess must contain {letter.upper()}"

    return None


def first_violation(difficulty: Difficulty, guesses: Iterable[str], target: str, new_guess: str) -> Optional[str]:
    """Check a new guess against every prior guess in submission order."""
    for guess in guesses:
        feedback = violation(difficulty, clue(guess, target), new_guess)
        if feedback:
            return feedback
    return None
