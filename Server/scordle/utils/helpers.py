"""
Helper Functions

Contains utility functions used throughout the application.
"""

from flask import request

DEFAULT_PLAYER_ID = 'anonymous'
MAX_PLAYER_ID_LENGTH = 64


def get_player_id(request_obj=None) -> str:
    """Player identity from the X-Player-Id header."""
    if request_obj is None:
        request_obj = request

    player_id = (request_obj.headers.get('X-Player-Id') or '').strip()
    if not player_id:
        return DEFAULT_PLAYER_ID
    return player_id[:MAX_PLAYER_ID_LENGTH]
