"""
Service Decorators

Contains decorators for HTTP and WebSocket handlers that need the game service.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_game_service(f):
    """
    Decorator that passes the game service to an HTTP endpoint, or answers
    500 when the service has not been initialized.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket events that carry a game_id."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = args[0] if args and isinstance(args[0], dict) else {}
        game_id = data.get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        if game_id not in game_service.games:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return

        kwargs['game_service'] = game_service
        kwargs['game_id'] = game_id
        return f(data, **kwargs)

    return decorated_function
