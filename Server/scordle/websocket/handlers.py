"""
WebSocket Event Handlers

Real-time play: clients join a game room, submit guesses and stream the
score preview of the row being typed. Every client in the room receives
the resulting state.
"""

from dataclasses import asdict
from flask_socketio import emit, join_room, leave_room
from ..services.game_service import get_game_service
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger


def game_room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None, game_id=None):
        """Join a game room for real-time updates."""
        join_room(game_room(game_id))
        state = game_service.get_game_state(game_id)
        emit('game_state_update', {'success': True, 'state': asdict(state)})

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game_service=None, game_id=None):
        """Leave a game room."""
        leave_room(game_room(game_id))
        emit('left_game', {'game_id': game_id})

    @socketio.on('submit_guess')
    @websocket_game_required
    def handle_submit_guess(data, game_service=None, game_id=None):
        """Submit a guess over the socket."""
        guess = data.get('guess')
        if not guess:
            emit('error', {'error': 'Guess is required'})
            return

        try:
            is_valid, error = game_service.is_valid_guess(game_id, guess)
            if not is_valid:
                emit('guess_rejected', {'game_id': game_id, 'guess': guess, 'error': error})
                return

            game_service.make_guess(game_id, guess)
            broadcast_game_state_update(game_id, socketio)
        except Exception as e:
            game_logger.logger.error(f"Error processing socket guess for {game_id}: {e}")
            emit('error', {'error': str(e)})

    @socketio.on('preview_guess')
    @websocket_game_required
    def handle_preview_guess(data, game_service=None, game_id=None):
        """Share the raw score of the row being typed."""
        guess = data.get('guess', '')
        if not isinstance(guess, str):
            emit('error', {'error': 'Guess must be a string'})
            return

        score = game_service.preview_score(game_id, guess)
        socketio.emit('preview_update', {
            'game_id': game_id,
            'guess': guess,
            'score': score
        }, room=game_room(game_id))


def broadcast_game_state_update(game_id, socketio):
    """Broadcast game state update to everyone in the game room."""
    game_service = get_game_service()
    if not game_service:
        return

    state = game_service.get_game_state(game_id)
    if state is None:
        return

    socketio.emit('game_state_update', {
        'success': True,
        'state': asdict(state)
    }, room=game_room(game_id))
