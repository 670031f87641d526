"""Tests for the Socket.IO events."""

from scordle.services.challenge_codec import encode


def events(socket_client, name):
    return [message['args'][0] for message in socket_client.get_received() if message['name'] == name]


class TestSocketPlay:
    """Joining a game and guessing in real time."""

    def test_join_game_sends_state(self, socket_client, services):
        game_service, _ = services
        game_id = game_service.create_new_game(challenge=encode("crane"))
        socket_client.emit('join_game', {'game_id': game_id})
        updates = events(socket_client, 'game_state_update')
        assert updates and updates[0]['state']['game_id'] == game_id

    def test_unknown_game(self, socket_client):
        socket_client.emit('join_game', {'game_id': 'missing'})
        errors = events(socket_client, 'error')
        assert errors[0]['error'] == 'Game not found'

    def test_submit_guess_broadcasts_state(self, socket_client, services):
        game_service, _ = services
        game_id = game_service.create_new_game(challenge=encode("crane"))
        socket_client.emit('join_game', {'game_id': game_id})
        socket_client.get_received()

        socket_client.emit('submit_guess', {'game_id': game_id, 'guess': 'react'})
        updates = events(socket_client, 'game_state_update')
        assert updates[-1]['state']['guesses'] == ['react']

    def test_rejected_guess(self, socket_client, services):
        game_service, _ = services
        game_id = game_service.create_new_game(challenge=encode("crane"))
        socket_client.emit('submit_guess', {'game_id': game_id, 'guess': 'zzzzz'})
        rejected = events(socket_client, 'guess_rejected')
        assert rejected[0]['error'] == 'Not a valid word'

    def test_preview(self, socket_client, services):
        game_service, _ = services
        game_id = game_service.create_new_game(challenge=encode("crane"))
        socket_client.emit('join_game', {'game_id': game_id})
        socket_client.get_received()

        socket_client.emit('preview_guess', {'game_id': game_id, 'guess': 'qu'})
        previews = events(socket_client, 'preview_update')
        assert previews[0]['score'] == 11
