"""
Statistics Controller

Handles the score history and statistics HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify
from ..services.score_history_service import get_score_history_service
from ..utils.helpers import get_player_id
from ..utils.game_logger import game_logger

stats_bp = Blueprint('stats', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Score history service unavailable'
    }), 500


@stats_bp.route('/stats', methods=['GET'])
def get_statistics():
    """Get score statistics for the requesting player."""
    try:
        score_history = get_score_history_service()
        if not score_history:
            return _service_unavailable()

        player_id = get_player_id()
        game_logger.log_user_action(request, 'get_statistics')

        statistics = score_history.get_statistics(player_id)
        return jsonify({
            'success': True,
            'statistics': asdict(statistics)
        })
    except Exception as e:
        game_logger.log_error(request, e, 'get_statistics')
        return jsonify({'success': False, 'error': str(e)}), 500


@stats_bp.route('/stats', methods=['DELETE'])
def reset_statistics():
    """Clear the requesting player's score history."""
    try:
        score_history = get_score_history_service()
        if not score_history:
            return _service_unavailable()

        player_id = get_player_id()
        game_logger.log_user_action(request, 'reset_statistics')

        removed = score_history.reset(player_id)
        response_data = {'success': True, 'removed': removed}
        game_logger.log_server_response(request, 'reset_statistics', True, response_data)
        return jsonify(response_data)
    except Exception as e:
        game_logger.log_error(request, e, 'reset_statistics')
        return jsonify({'success': False, 'error': str(e)}), 500
