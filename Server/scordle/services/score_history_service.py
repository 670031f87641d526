"""
Score History Service

Keeps the ordered list of final game scores per player and derives the
statistics shown in the statistics popup. Scores are stored in MongoDB when
a connection string is configured, otherwise in process memory.
"""

import math
import threading
from typing import Dict, List, Optional

from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..models.stats import HistogramBucket, ScoreStatistics
from ..utils.game_logger import game_logger

BUCKET_SIZE = 10
MAX_RANGE = 100


def histogram_buckets(scores: List[float]) -> List[HistogramBucket]:
    """
    Group scores into buckets of BUCKET_SIZE over [0, MAX_RANGE).

    Scores of MAX_RANGE and above share one final overflow bucket.
    """
    bucket_count = MAX_RANGE // BUCKET_SIZE
    counts = [0] * (bucket_count + 1)

    for score in scores:
        bucket_index = max(0, math.floor(score / BUCKET_SIZE))
        counts[min(bucket_index, bucket_count)] += 1

    buckets = []
    for i, count in enumerate(counts):
        if i == bucket_count:
            label = f"{i * BUCKET_SIZE}+"
        else:
            label = f"{i * BUCKET_SIZE}-{(i + 1) * BUCKET_SIZE - 1}"
        buckets.append(HistogramBucket(label=label, count=count))
    return buckets


class ScoreHistoryService:
    """
    Score history store.

    Args:
        mongo_uri: MongoDB connection string; in-memory storage when omitted
        collection: Pre-built collection object (takes precedence over mongo_uri)
    """

    def __init__(self, mongo_uri: Optional[str] = None, collection=None):
        self.collection = collection
        self._scores: Dict[str, List[float]] = {}
        self._lock = threading.Lock()

        if self.collection is None and mongo_uri:
            self.client = MongoClient(mongo_uri, server_api=ServerApi('1'))
            try:
                self.client.admin.command('ping')
                game_logger.logger.info("Score history connected to MongoDB")
            except Exception as e:
                game_logger.logger.error(f"MongoDB connection error: {e}")
                raise
            self.collection = self.client.scordle.score_history
            self.collection.create_index("player_id", unique=True)

    @property
    def persistent(self) -> bool:
        return self.collection is not None

    def add_score(self, player_id: str, score: float) -> None:
        """Append a final game score to the player's history."""
        if self.collection is not None:
            self.collection.update_one(
                {"player_id": player_id},
                {"$push": {"scores": score}},
                upsert=True
            )
            return
        with self._lock:
            self._scores.setdefault(player_id, []).append(score)

    def get_scores(self, player_id: str) -> List[float]:
        if self.collection is not None:
            document = self.collection.find_one({"player_id": player_id})
            if not document or not isinstance(document.get("scores"), list):
                return []
            return list(document["scores"])
        with self._lock:
            return list(self._scores.get(player_id, []))

    def reset(self, player_id: str) -> bool:
        """Clear a player's history. Returns True if anything was removed."""
        if self.collection is not None:
            result = self.collection.delete_one({"player_id": player_id})
            return result.deleted_count > 0
        with self._lock:
            return self._scores.pop(player_id, None) is not None

    def get_statistics(self, player_id: str) -> ScoreStatistics:
        scores = self.get_scores(player_id)
        average = round(sum(scores) / len(scores), 2) if scores else None
        return ScoreStatistics(
            player_id=player_id,
            total_attempts=len(scores),
            average=average,
            scores=scores,
            histogram=histogram_buckets(scores)
        )


# Global service instance
_score_history_service = None


def get_score_history_service() -> Optional[ScoreHistoryService]:
    """Get the global score history service instance."""
    return _score_history_service


def initialize_score_history_service(mongo_uri: Optional[str] = None) -> ScoreHistoryService:
    """Initialize the global score history service instance."""
    global _score_history_service
    _score_history_service = ScoreHistoryService(mongo_uri)
    return _score_history_service
