"""
Game Configuration Constants Module

This module defines all game configuration constants and the static game
data: the guess dictionary, the frequency-ranked target list and the
letter-value table used for scoring. All game parameters are centralized
here to enable easy modification.
"""

import json
import os
from typing import Dict, FrozenSet, List, Final

from .app_config import Config


class ConfigurationError(ValueError):
    """Raised when the static game data cannot support a game."""


GAME_NAME: Final[str] = "scordle"

WORD_LENGTH: Final[int] = Config.WORD_LENGTH
"""
Number of letters in every guess and target.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_GUESSES: Final[int] = Config.MAX_GUESSES
"""Maximum number of guess attempts allowed per game."""

RARITY_CUTOFF: Final[str] = Config.RARITY_CUTOFF
"""Targets are drawn from words no rarer than this one (inclusive)."""

MIN_GAME_NUMBER: Final[int] = 1
MAX_GAME_NUMBER: Final[int] = 1000

PLACEHOLDER_MARKER: Final[str] = "*"
"""Target list entries containing this character are never drawn."""

# Scrabble tile values
LETTER_POINTS: Final[Dict[str, int]] = {
    "a": 1, "b": 3, "c": 3, "d": 2, "e": 1, "f": 4, "g": 2, "h": 4, "i": 1,
    "j": 8, "k": 5, "l": 1, "m": 3, "n": 1, "o": 1, "p": 3, "q": 10, "r": 1,
    "s": 1, "t": 1, "u": 1, "v": 4, "w": 4, "x": 8, "y": 4, "z": 10,
}


def _load_json_list(file_name: str) -> List[str]:
    """
    Load a list of lowercase words from a JSON file next to this module.

    Raises:
        FileNotFoundError: If the file is not found
        ConfigurationError: If the file does not hold a non-empty array of strings
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, file_name)

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {file_name}: {e}") from e

    if not isinstance(word_list, list) or not all(isinstance(w, str) for w in word_list):
        raise ConfigurationError(f"{file_name} must contain an array of words")

    if not word_list:
        raise ConfigurationError(f"{file_name} cannot be empty")

    return [word.lower() for word in word_list]


def _truncate_at_cutoff(targets: List[str], cutoff: str) -> List[str]:
    """Keep the frequency-ranked targets up to and including the cutoff word."""
    if cutoff not in targets:
        raise ConfigurationError(f"Rarity cutoff '{cutoff}' is not in the target list")
    return targets[:targets.index(cutoff) + 1]


# Dictionary used for guess validity (holds several word lengths)
DICTIONARY: Final[FrozenSet[str]] = frozenset(_load_json_list('dictionary.json'))

# Frequency-ranked targets, no rarer than the cutoff
TARGET_LIST: Final[List[str]] = _truncate_at_cutoff(_load_json_list('targets.json'), RARITY_CUTOFF)


def eligible_targets(targets: List[str], word_length: int = WORD_LENGTH) -> List[str]:
    """Targets of the game word length, placeholder entries included."""
    return [word for word in targets if len(word) == word_length]


def validate_word_list_integrity(targets: List[str] = TARGET_LIST,
                                 word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of the game data.

    This function performs validation to ensure:
    1. Eligibility: at least one target of the game length has no placeholder
    2. Character validation: targets hold only letters and the placeholder
    3. Uniqueness validation: no duplicate targets
    4. Membership: every drawable target is a dictionary word
    5. Scoring: every letter has a point value

    Returns:
        bool: True if the data passes all validation checks

    Raises:
        ConfigurationError: If any validation check fails with detailed error message
    """
    drawable = [w for w in eligible_targets(targets, word_length) if PLACEHOLDER_MARKER not in w]
    if not drawable:
        raise ConfigurationError(f"No eligible targets of length {word_length}")

    for index, word in enumerate(targets):
        if not word.replace(PLACEHOLDER_MARKER, "").isalpha():
            raise ConfigurationError(f"Target at index {index} '{word}' contains non-alphabetic characters")

    if len(targets) != len(set(targets)):
        duplicates = sorted({word for word in targets if targets.count(word) > 1})
        raise ConfigurationError(f"Duplicate words found in target list: {duplicates}")

    missing = [word for word in drawable if word not in DICTIONARY]
    if missing:
        raise ConfigurationError(f"Targets missing from dictionary: {missing}")

    unscored = sorted({c for word in DICTIONARY for c in word if c not in LETTER_POINTS})
    if unscored:
        raise ConfigurationError(f"Letters without a point value: {unscored}")

    return True


def get_word_statistics() -> dict:
    """
    Summarizes the loaded game data for monitoring.

    Returns:
        dict: dictionary_size, target_count, eligible_targets and the most
            common letters among the eligible targets
    """
    drawable = [w for w in eligible_targets(TARGET_LIST) if PLACEHOLDER_MARKER not in w]

    letter_frequency: Dict[str, int] = {}
    for word in drawable:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "dictionary_size": len(DICTIONARY),
        "target_count": len(TARGET_LIST),
        "eligible_targets": len(drawable),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")
    except ConfigurationError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
