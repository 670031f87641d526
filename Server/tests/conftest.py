"""Shared fixtures for the game server tests."""

import os
import tempfile

# Keep test logs out of the working tree; must happen before scordle is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='scordle-logs-'))

import pytest

from scordle import create_app
from scordle.config import TestingConfig
from scordle.services.challenge_codec import encode
from scordle.services.game_service import initialize_game_service
from scordle.services.score_history_service import ScoreHistoryService, initialize_score_history_service


@pytest.fixture
def score_history():
    """In-memory score history."""
    return ScoreHistoryService()


@pytest.fixture
def services():
    """Fresh global services, as main() would set them up."""
    score_history = initialize_score_history_service()
    game_service = initialize_game_service(score_history)
    return game_service, score_history


@pytest.fixture
def app(services):
    app, _ = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    return app.socketio.test_client(app)


@pytest.fixture
def crane_challenge():
    """Challenge string for a game whose target is CRANE."""
    return encode("crane")
