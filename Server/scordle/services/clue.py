"""
Clue Engine

Compares a guess with the target and classifies every letter. Results are
derived values: callers recompute them from (guess, target) whenever needed
instead of storing them.
"""

from typing import Dict, Iterable, Sequence, Tuple

from ..models.game import Clue, CluedLetter

CLUE_WORDS: Dict[Clue, str] = {
    Clue.ABSENT: "no",
    Clue.ELSEWHERE: "elsewhere",
    Clue.CORRECT: "correct",
}

EMOJI = ("⬛", "🟨", "🟩")
COLOR_BLIND_EMOJI = ("⬛", "🟦", "🟧")


def clue(guess: str, target: str) -> Tuple[CluedLetter, ...]:
    """
    Implements the two-pass Wordle letter evaluation.

    Exact matches are claimed first; the remaining target letters are then
    handed out left to right, so a repeated guess letter is never marked
    more often than it occurs in the target.

    Args:
        guess: Guessed word, same length as target
        target: Hidden word

    Returns:
        One CluedLetter per position of the guess
    """
    remaining: Dict[str, int] = {}
    clues = [None] * len(guess)

    # First pass: exact position matches
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            clues[i] = Clue.CORRECT
        else:
            remaining[t] = remaining.get(t, 0) + 1

    # Second pass: leftmost unmatched letters claim what is left
    for i, g in enumerate(guess):
        if clues[i] is not None:
            continue
        if remaining.get(g, 0) > 0:
            clues[i] = Clue.ELSEWHERE
            remaining[g] -= 1
        else:
            clues[i] = Clue.ABSENT

    return tuple(CluedLetter(letter, c) for letter, c in zip(guess, clues))


def describe_clue(clued_letters: Sequence[CluedLetter]) -> str:
    """Accessible description, e.g. "C correct, R no, A elsewhere"."""
    return ", ".join(f"{cl.letter.upper()} {CLUE_WORDS[cl.clue]}" for cl in clued_letters)


def clue_emoji(clued_letters: Sequence[CluedLetter], color_blind: bool = False) -> str:
    palette = COLOR_BLIND_EMOJI if color_blind else EMOJI
    return "".join(palette[cl.clue] for cl in clued_letters)


def letter_info(guesses: Iterable[str], target: str) -> Dict[str, Clue]:
    """
    Best clue ever revealed for each letter across locked-in guesses.

    Used for keyboard colouring; a letter seen as CORRECT anywhere stays
    CORRECT even if a later guess places it wrongly.
    """
    info: Dict[str, Clue] = {}
    for guess in guesses:
        for cl in clue(guess, target):
            old = info.get(cl.letter)
            if old is None or cl.clue > old:
                info[cl.letter] = cl.clue
    return info
