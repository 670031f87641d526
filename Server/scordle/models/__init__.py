"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import Clue, CluedLetter, Difficulty, GameState, GameStatus, GuessRow
from .stats import HistogramBucket, ScoreStatistics

__all__ = [
    'Clue', 'CluedLetter', 'Difficulty', 'GameState', 'GameStatus', 'GuessRow',
    'HistogramBucket', 'ScoreStatistics'
]
