"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import get_word_statistics
from ..models.game import Difficulty
from ..services.score_history_service import get_score_history_service
from ..services.target_selector import today_seed
from ..utils.decorators import require_game_service
from ..utils.helpers import get_player_id
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _error(action, message, status, game_id=None, **kwargs):
    """Log and build a failed JSON response."""
    error_response = {
        'success': False,
        'error': message
    }
    game_logger.log_server_response(request, action, False, error_response, game_id, **kwargs)
    return jsonify(error_response), status


def _not_found(action, game_id):
    return _error(action, 'Game not found', 404, game_id)


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session (random, seeded or challenge)."""
    try:
        data = request.get_json(silent=True) or {}
        seed = data.get('seed')
        game_number = data.get('game')
        challenge = data.get('challenge')
        difficulty = data.get('difficulty')

        if seed is not None and not isinstance(seed, (str, int)):
            return _error('new_game', 'Seed must be a string', 400)

        if data.get('daily'):
            seed = today_seed()

        game_logger.log_user_action(
            request, 'new_game',
            seed=seed, game_number=game_number, has_challenge=bool(challenge), difficulty=difficulty
        )

        try:
            game_difficulty = Difficulty.parse(difficulty, game_service.default_difficulty)
        except ValueError as e:
            return _error('new_game', str(e), 400)

        game_id = game_service.create_new_game(
            seed=str(seed) if seed is not None else None,
            game_number=game_number,
            challenge=challenge,
            difficulty=game_difficulty,
            player_id=get_player_id()
        )

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            game_number=state.game_number, difficulty=state.difficulty
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        return _error('new_game', str(e), 500)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            status=state.status
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        return _error('get_state', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game_service
def make_guess(game_id, game_service):
    """Submit a guess for validation and evaluation."""
    try:
        data = request.get_json(silent=True)
        if not data or 'guess' not in data:
            return _error('submit_guess', 'Guess is required', 400, game_id)

        guess = data['guess']

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        if game_id not in game_service.games:
            return _not_found('submit_guess', game_id)

        # Rejected guesses are not consumed
        is_valid, error = game_service.is_valid_guess(game_id, guess)
        if not is_valid:
            return _error('submit_guess', error, 400, game_id,
                          validation_error=error, attempted_guess=guess)

        state = game_service.make_guess(game_id, guess)
        if state is None:
            return _error('submit_guess', 'Failed to process guess', 500, game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, status=state.status
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        return _error('submit_guess', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/preview', methods=['POST'])
@require_game_service
def preview_guess(game_id, game_service):
    """Raw point value of a guess that is still being typed."""
    try:
        data = request.get_json(silent=True) or {}
        guess = data.get('guess', '')
        if not isinstance(guess, str):
            return _error('preview_guess', 'Guess must be a string', 400, game_id)

        score = game_service.preview_score(game_id, guess)
        if score is None:
            return _not_found('preview_guess', game_id)

        return jsonify({'success': True, 'score': score})

    except Exception as e:
        game_logger.log_error(request, e, 'preview_guess', game_id)
        return _error('preview_guess', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/next', methods=['POST'])
@require_game_service
def next_game(game_id, game_service):
    """Start the next game in a finished session."""
    try:
        game_logger.log_user_action(request, 'next_game', game_id)

        if game_id not in game_service.games:
            return _not_found('next_game', game_id)

        state = game_service.start_next_game(game_id)
        if state is None:
            return _error('next_game', 'Current game is not over', 409, game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(
            request, 'next_game', True, response_data, game_id,
            game_number=state.game_number
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'next_game', game_id)
        return _error('next_game', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/share', methods=['GET'])
@require_game_service
def share_game(game_id, game_service):
    """Link to this game plus the emoji result once it is over."""
    try:
        base_url = request.args.get('base_url', request.host_url.rstrip('/') + '/')
        color_blind = request.args.get('color_blind', 'false').lower() == 'true'

        shared = game_service.share(game_id, base_url, color_blind)
        if shared is None:
            return _not_found('share', game_id)

        game_logger.log_user_action(request, 'share', game_id, url=shared['url'])
        return jsonify({'success': True, **shared})

    except Exception as e:
        game_logger.log_error(request, e, 'share', game_id)
        return _error('share', str(e), 500, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data), (200 if success else 404)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        return _error('delete_game', str(e), 500, game_id)


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service):
    """Health check endpoint."""
    try:
        score_history = get_score_history_service()

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games),
            'word_statistics': get_word_statistics(),
            'score_history_persistent': score_history.persistent if score_history else False,
            'log_stats': game_logger.get_log_stats()
        }

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        return jsonify({'status': 'error', 'error': str(e)}), 500
