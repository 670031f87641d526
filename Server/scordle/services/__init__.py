"""
Services Package

Contains the game rules and the session/business logic built on them.
"""

from .challenge_codec import DecodeError, decode, encode
from .clue import clue, describe_clue, letter_info
from .difficulty import first_violation, violation
from .game_service import GameService, get_game_service
from .score_history_service import ScoreHistoryService, get_score_history_service
from .scoring import clued_word_score, total_score, word_score
from .target_selector import SeededRandom, TargetSelector, game_target, parse_game_number

__all__ = [
    'DecodeError', 'decode', 'encode',
    'clue', 'describe_clue', 'letter_info',
    'first_violation', 'violation',
    'clued_word_score', 'total_score', 'word_score',
    'SeededRandom', 'TargetSelector', 'game_target', 'parse_game_number',
    'GameService', 'get_game_service',
    'ScoreHistoryService', 'get_score_history_service'
]
