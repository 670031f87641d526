"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Optional, Tuple


class Clue(IntEnum):
    """Letter evaluation; ordered so the best clue seen for a letter wins."""
    ABSENT = 0
    ELSEWHERE = 1
    CORRECT = 2

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class CluedLetter:
    """One guessed letter and its clue at a given position."""
    letter: str
    clue: Clue


class Difficulty(Enum):
    """Difficulty tiers; only HARD constrains guesses across rows."""
    NORMAL = "normal"
    EASY = "easy"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Optional[str], default: "Difficulty" = None) -> "Difficulty":
        """Parse a difficulty name, case-insensitively."""
        if value is None or value == "":
            return default or cls.NORMAL
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Invalid difficulty '{value}'. Must be one of: "
                             f"{', '.join(d.value for d in cls)}")


class GameStatus(Enum):
    """Lifecycle of a single game."""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass
class GuessRow:
    """A locked-in guess as shown to the client."""
    word: str
    letters: List[Tuple[str, str]]  # (letter, clue label) for JSON serialization
    score: float


@dataclass
class GameState:
    """Server-side game state representation."""
    game_id: str
    game_number: int
    status: str
    difficulty: str
    word_length: int
    max_guesses: int
    rows: List[GuessRow]
    total_score: float
    letter_info: Dict[str, str]
    hint: str
    description: str
    seed: Optional[str] = None
    is_challenge: bool = False
    answer: Optional[str] = None  # Only included when game is over
    guesses: List[str] = field(default_factory=list)
    announcement: str = ""  # Spoken description of the latest row

    @property
    def game_over(self) -> bool:
        return self.status != GameStatus.PLAYING.value
