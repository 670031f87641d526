"""
Deterministic Target Selector

Draws target words from the frequency-ranked target list. With a seed the
sequence of targets is reproducible, so two players sharing (seed, game
number) play the same word.
"""

import datetime
import random
import threading
from typing import Optional, Sequence, TypeVar, Union

from ..config.game_settings import (
    ConfigurationError, MAX_GAME_NUMBER, MIN_GAME_NUMBER, PLACEHOLDER_MARKER,
    TARGET_LIST, WORD_LENGTH, eligible_targets
)

T = TypeVar("T")


class SeededRandom:
    """
    Pseudo-random generator with explicit reset semantics.

    Resetting with a seed string discards all prior state and restarts the
    same sequence on every platform; without a seed the generator is drawn
    from system entropy.
    """

    def __init__(self, seed: Optional[str] = None):
        self._lock = threading.Lock()
        self.seed: Optional[str] = None
        self._random = random.Random()
        self.reset(seed)

    def reset(self, seed: Optional[str] = None) -> None:
        with self._lock:
            self.seed = seed or None
            if self.seed is None:
                self._random = random.Random()
            else:
                self._random = random.Random(self.seed)

    def next(self) -> float:
        """Uniform float in [0, 1)."""
        with self._lock:
            return self._random.random()

    def pick(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("Cannot pick from an empty sequence")
        return items[int(len(items) * self.next())]


class TargetSelector:
    """
    Picks targets of the game word length from a target list.

    Entries containing the placeholder marker are rejected and redrawn.
    """

    def __init__(self, rng: SeededRandom, targets: Sequence[str] = TARGET_LIST,
                 word_length: int = WORD_LENGTH):
        self.rng = rng
        self.word_length = word_length
        self.eligible = eligible_targets(list(targets), word_length)
        if not any(PLACEHOLDER_MARKER not in word for word in self.eligible):
            raise ConfigurationError(f"No eligible targets of length {word_length}")

    def random_target(self) -> str:
        candidate = self.rng.pick(self.eligible)
        while PLACEHOLDER_MARKER in candidate:
            candidate = self.rng.pick(self.eligible)
        return candidate

    def target_for_game(self, game_number: int) -> str:
        """
        Reset the generator and return the target of the given game.

        Game N is reached by discarding N-1 draws, so the result depends only
        on (seed, N).
        """
        self.rng.reset(self.rng.seed)
        for _ in range(1, game_number):
            self.random_target()
        return self.random_target()


def game_target(seed: str, game_number: int, targets: Sequence[str] = TARGET_LIST,
                word_length: int = WORD_LENGTH) -> str:
    """Target of game N under a seed."""
    return TargetSelector(SeededRandom(seed), targets, word_length).target_for_game(game_number)


def parse_game_number(value: Union[str, int, None]) -> int:
    """Game number from a query value; anything missing, non-numeric or out of range is game 1."""
    if value is None or isinstance(value, bool):
        return MIN_GAME_NUMBER
    try:
        game_number = int(str(value).strip())
    except ValueError:
        return MIN_GAME_NUMBER
    if MIN_GAME_NUMBER <= game_number <= MAX_GAME_NUMBER:
        return game_number
    return MIN_GAME_NUMBER


def describe_seed(seed: str) -> str:
    """A YYYYMMDD seed is shown as its date, anything else as "seed <seed>"."""
    if len(seed) == 8 and seed.isdigit():
        year, month, day = int(seed[:4]), int(seed[4:6]), int(seed[6:])
        if 2000 <= year <= 2100:
            try:
                date = datetime.date(year, month, day)
            except ValueError:
                date = None
            if date is not None:
                return f"{date:%A}, {date:%B} {date.day}, {date.year}"
    return f"seed {seed}"


def today_seed(today: Optional[datetime.date] = None) -> str:
    """Seed of the daily puzzle."""
    today = today or datetime.date.today()
    return today.strftime("%Y%m%d")
