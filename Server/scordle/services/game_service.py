"""
Game Service

Sequences the core game rules for each session: target selection or
challenge decoding, guess validation, clue evaluation, scoring and the
end-of-game bookkeeping.
"""

import uuid
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..config.app_config import Config
from ..config.game_settings import DICTIONARY, GAME_NAME, MAX_GUESSES, TARGET_LIST, WORD_LENGTH
from ..models.game import Difficulty, GameState, GameStatus, GuessRow
from ..utils.game_logger import game_logger
from .challenge_codec import DecodeError, decode, encode
from .clue import clue, clue_emoji, describe_clue, letter_info
from .difficulty import first_violation
from .scoring import clued_word_score, format_score, total_score, word_score
from .score_history_service import ScoreHistoryService
from .target_selector import SeededRandom, TargetSelector, describe_seed, parse_game_number

DEFAULT_PLAYER = "anonymous"
INVALID_CHALLENGE_HINT = "Invalid challenge string, playing random game."
FIRST_GUESS_HINT = "Make your first guess!"


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Seeded or random target selection, and challenge games
    - Guess validation including difficulty rules
    - Game state views that never expose a running game's answer
    """

    def __init__(self,
                 score_history: Optional[ScoreHistoryService] = None,
                 targets: Sequence[str] = TARGET_LIST,
                 dictionary: Iterable[str] = DICTIONARY,
                 word_length: int = WORD_LENGTH,
                 max_guesses: int = MAX_GUESSES,
                 default_difficulty: str = Config.DEFAULT_DIFFICULTY):
        self.games: Dict[str, Dict] = {}  # Store active games by game_id
        self.score_history = score_history
        self.targets = list(targets)
        self.dictionary = frozenset(dictionary)
        self.word_length = word_length
        self.max_guesses = max_guesses
        self.default_difficulty = Difficulty.parse(default_difficulty)

    def _decode_challenge(self, challenge: Optional[str]) -> Tuple[str, bool]:
        """Returns (target word or "", whether the challenge was rejected)."""
        if not challenge:
            return "", False
        try:
            word = decode(challenge)
        except DecodeError as e:
            game_logger.logger.warning(f"Rejected challenge {challenge!r}: {e}")
            return "", True
        if len(word) != self.word_length or word not in self.dictionary:
            game_logger.logger.warning(f"Rejected challenge {challenge!r}: '{word}' is not a valid word")
            return "", True
        return word, False

    def create_new_game(self,
                        seed: Optional[str] = None,
                        game_number=None,
                        challenge: Optional[str] = None,
                        difficulty: Optional[str] = None,
                        player_id: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Args:
            seed: Reproducibility key; games are random when omitted
            game_number: Game to start at under the seed (1-1000, else 1)
            challenge: Encoded target shared by another player
            difficulty: "normal", "easy" or "hard"
            player_id: Owner of the score history the final score goes to

        Returns:
            str: Unique game ID for this session

        Raises:
            ValueError: If the difficulty name is unknown
        """
        game_id = str(uuid.uuid4())
        game_difficulty = Difficulty.parse(difficulty, self.default_difficulty)
        number = parse_game_number(game_number)

        selector = TargetSelector(SeededRandom(seed), self.targets, self.word_length)
        target = selector.target_for_game(number)

        challenge_word, challenge_error = self._decode_challenge(challenge)
        if challenge_word:
            target = challenge_word

        self.games[game_id] = {
            "target": target,
            "selector": selector,
            "seed": selector.rng.seed,
            "game_number": number,
            "challenge": bool(challenge_word),
            "difficulty": game_difficulty,
            "guesses": [],
            "status": GameStatus.PLAYING,
            "hint": INVALID_CHALLENGE_HINT if challenge_error else FIRST_GUESS_HINT,
            "player_id": player_id or DEFAULT_PLAYER,
            "final_score": None
        }
        if challenge_error:
            game_logger.log_game_event(game_id, 'challenge_rejected', challenge=challenge)
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Clues and scores are recomputed from the guesses on every call.
        """
        if game_id not in self.games:
            return None

        game = self.games[game_id]
        target = game["target"]
        guesses = game["guesses"]

        rows = []
        for guess in guesses:
            clued = clue(guess, target)
            rows.append(GuessRow(
                word=guess,
                letters=[(cl.letter, cl.clue.label) for cl in clued],
                score=clued_word_score(clued)
            ))

        game_over = game["status"] != GameStatus.PLAYING
        return GameState(
            game_id=game_id,
            game_number=game["game_number"],
            status=game["status"].value,
            difficulty=game["difficulty"].value,
            word_length=self.word_length,
            max_guesses=self.max_guesses,
            rows=rows,
            total_score=sum((row.score for row in rows), 0.0),
            letter_info={letter: c.label for letter, c in letter_info(guesses, target).items()},
            hint=game["hint"],
            description=self._describe_game(game),
            seed=game["seed"],
            is_challenge=game["challenge"],
            answer=target if game_over else None,
            guesses=list(guesses),
            announcement=describe_clue(clue(guesses[-1], target)) if guesses else ""
        )

    def _describe_game(self, game: Dict) -> str:
        if game["challenge"]:
            return "playing a challenge game"
        if game["seed"]:
            return f"{describe_seed(game['seed'])} - length {self.word_length}, game {game['game_number']}"
        return "playing a random game"

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess for a specific game session.

        Args:
            game_id: Unique game identifier
            guess: The word to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if game_id not in self.games:
            return False, "Game not found"

        game = self.games[game_id]

        if game["status"] != GameStatus.PLAYING:
            return False, "Game is already over"

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string"

        normalized_guess = guess.strip().lower()

        if len(normalized_guess) < self.word_length:
            return False, "Too short"

        if len(normalized_guess) > self.word_length:
            return False, "Too long"

        if not normalized_guess.isalpha():
            return False, "Guess must contain only letters"

        if normalized_guess not in self.dictionary:
            return False, "Not a valid word"

        feedback = first_violation(game["difficulty"], game["guesses"], game["target"], normalized_guess)
        if feedback:
            return False, feedback

        return True, ""

    def make_guess(self, game_id: str, guess: str) -> Optional[GameState]:
        """
        Processes a guess and updates game state.

        Args:
            game_id: Unique game identifier
            guess: The guessed word

        Returns:
            Updated GameState or None if the guess was rejected
        """
        is_valid, error = self.is_valid_guess(game_id, guess)
        if not is_valid:
            return None

        game = self.games[game_id]
        normalized_guess = guess.strip().lower()
        game["guesses"].append(normalized_guess)
        game["hint"] = ""

        if normalized_guess == game["target"]:
            self._finish_game(game_id, GameStatus.WON)
        elif len(game["guesses"]) >= self.max_guesses:
            self._finish_game(game_id, GameStatus.LOST)

        return self.get_game_state(game_id)

    def _finish_game(self, game_id: str, status: GameStatus) -> None:
        """Lock the game, record the final score and set the closing message."""
        game = self.games[game_id]
        score = total_score(game["guesses"], game["target"])
        verbed = "won" if status == GameStatus.WON else "lost"
        next_action = "play a random game" if game["challenge"] else "play again"

        game["status"] = status
        game["final_score"] = score
        game["hint"] = (f"You {verbed}! The answer was {game['target'].upper()}. "
                        f"Your score was {format_score(score)}. (Enter to {next_action})")

        if self.score_history is not None:
            self.score_history.add_score(game["player_id"], score)

        game_logger.log_game_event(
            game_id, f"game_{verbed}",
            player_id=game["player_id"], target_word=game["target"],
            rounds_used=len(game["guesses"]), score=score
        )

    def preview_score(self, game_id: str, partial_guess: str) -> Optional[float]:
        """Raw point value of the row being typed; not the locked-in score."""
        if game_id not in self.games:
            return None
        letters = "".join(c for c in (partial_guess or "").lower() if c.isalpha())
        return word_score(letters[:self.word_length])

    def start_next_game(self, game_id: str) -> Optional[GameState]:
        """
        Moves a finished session on to the next game.

        The seeded sequence continues from where it stopped, so the next
        target is the one for game number + 1. Challenge games continue as
        ordinary games.
        """
        if game_id not in self.games:
            return None

        game = self.games[game_id]
        if game["status"] == GameStatus.PLAYING:
            return None

        game["challenge"] = False
        game["target"] = game["selector"].random_target()
        game["guesses"] = []
        game["status"] = GameStatus.PLAYING
        game["hint"] = ""
        game["final_score"] = None
        game["game_number"] += 1

        return self.get_game_state(game_id)

    def share(self, game_id: str, base_url: str = "", color_blind: bool = False) -> Optional[Dict[str, str]]:
        """
        Builds a link to this game and, once it is over, the emoji result.

        Seeded games link to their seed and game number; all others link to
        a challenge for the current target.
        """
        if game_id not in self.games:
            return None

        game = self.games[game_id]
        if game["seed"]:
            url = f"{base_url}?seed={game['seed']}&length={self.word_length}&game={game['game_number']}"
        else:
            url = f"{base_url}?challenge={encode(game['target'])}"

        text = ""
        if game["status"] != GameStatus.PLAYING:
            result = len(game["guesses"]) if game["status"] == GameStatus.WON else "X"
            emoji_rows: List[str] = [
                clue_emoji(clue(guess, game["target"]), color_blind) for guess in game["guesses"]
            ]
            text = f"{GAME_NAME} {result}/{self.max_guesses}\n" + "\n".join(emoji_rows)

        body = url + ("\n\n" + text if text else "")
        return {"url": url, "text": text, "body": body}

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(score_history: Optional[ScoreHistoryService] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(score_history)
    return _game_service
