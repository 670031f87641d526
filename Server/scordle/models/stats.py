"""
Player Data Models

Contains score-history related data structures.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class HistogramBucket:
    """One bar of the score histogram."""
    label: str
    count: int


@dataclass
class ScoreStatistics:
    """Summary of a player's recorded final scores."""
    player_id: str
    total_attempts: int = 0
    average: Optional[float] = None
    scores: List[float] = field(default_factory=list)
    histogram: List[HistogramBucket] = field(default_factory=list)
