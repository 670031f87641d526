"""Tests for the HTTP endpoints."""

from scordle.services.target_selector import game_target, today_seed


def start_game(client, **payload):
    response = client.post('/api/new_game', json=payload, headers={'X-Player-Id': 'alice'})
    assert response.status_code == 200
    return response.get_json()


class TestNewGame:
    """POST /api/new_game"""

    def test_random_game(self, client):
        data = start_game(client)
        assert data['success']
        assert data['state']['status'] == 'playing'
        assert data['state']['answer'] is None
        assert data['state']['hint'] == 'Make your first guess!'

    def test_invalid_challenge_notice(self, client):
        data = start_game(client, challenge='not-a-valid-encoding')
        assert data['state']['hint'] == 'Invalid challenge string, playing random game.'

    def test_non_ascii_challenge_falls_back(self, client):
        data = start_game(client, challenge='ééé')
        assert data['state']['hint'] == 'Invalid challenge string, playing random game.'
        assert not data['state']['is_challenge']

    def test_bad_difficulty(self, client):
        response = client.post('/api/new_game', json={'difficulty': 'ultra'})
        assert response.status_code == 400
        assert not response.get_json()['success']

    def test_internal_value_error_is_server_error(self, client, services, monkeypatch):
        """Only a bad difficulty is the client's fault."""
        game_service, _ = services

        def broken_create(**kwargs):
            raise ValueError('word list exhausted')

        monkeypatch.setattr(game_service, 'create_new_game', broken_create)
        response = client.post('/api/new_game', json={'difficulty': 'hard'})
        assert response.status_code == 500
        assert response.get_json()['error'] == 'word list exhausted'

    def test_seeded_game(self, client):
        data = start_game(client, seed='20220103', game='abc')
        assert data['state']['game_number'] == 1
        assert data['state']['description'].startswith('Monday, January 3, 2022')

    def test_daily_game(self, client):
        data = start_game(client, daily=True)
        assert data['state']['seed'] == today_seed()


class TestGuess:
    """POST /api/game/<id>/guess"""

    def test_accepted_guess(self, client, crane_challenge):
        game_id = start_game(client, challenge=crane_challenge)['game_id']
        response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'react'})
        assert response.status_code == 200
        state = response.get_json()['state']
        assert state['rows'][0]['score'] == 3.5
        assert state['rows'][0]['letters'][2] == ['a', 'correct']

    def test_rejected_guess(self, client, crane_challenge):
        game_id = start_game(client, challenge=crane_challenge, difficulty='hard')['game_id']
        client.post(f'/api/game/{game_id}/guess', json={'guess': 'cease'})
        response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'zebra'})
        assert response.status_code == 400
        assert response.get_json()['error'] == '1st letter must be C'

        state = client.get(f'/api/game/{game_id}/state').get_json()['state']
        assert state['guesses'] == ['cease']

    def test_missing_guess(self, client, crane_challenge):
        game_id = start_game(client, challenge=crane_challenge)['game_id']
        response = client.post(f'/api/game/{game_id}/guess', json={})
        assert response.status_code == 400

    def test_unknown_game(self, client):
        response = client.post('/api/game/nope/guess', json={'guess': 'crane'})
        assert response.status_code == 404

    def test_win_records_score(self, client, crane_challenge):
        game_id = start_game(client, challenge=crane_challenge)['game_id']
        client.post(f'/api/game/{game_id}/guess', json={'guess': 'react'})
        state = client.post(f'/api/game/{game_id}/guess', json={'guess': 'crane'}).get_json()['state']
        assert state['status'] == 'won'
        assert state['answer'] == 'crane'

        stats = client.get('/api/stats', headers={'X-Player-Id': 'alice'}).get_json()['statistics']
        assert stats['scores'] == [3.5]
        assert stats['total_attempts'] == 1


class TestOtherEndpoints:
    """Preview, next game, share, delete and health."""

    def test_preview(self, client, crane_challenge):
        game_id = start_game(client, challenge=crane_challenge)['game_id']
        response = client.post(f'/api/game/{game_id}/preview', json={'guess': 'cra'})
        assert response.get_json() == {'success': True, 'score': 5.0}

    def test_next_game(self, client):
        game_id = start_game(client, seed='abc', game=2)['game_id']
        assert client.post(f'/api/game/{game_id}/next').status_code == 409

        client.post(f'/api/game/{game_id}/guess', json={'guess': game_target('abc', 2)})
        response = client.post(f'/api/game/{game_id}/next')
        assert response.status_code == 200
        assert response.get_json()['state']['game_number'] == 3

    def test_share(self, client, crane_challenge):
        game_id = start_game(client, challenge=crane_challenge)['game_id']
        data = client.get(f'/api/game/{game_id}/share?base_url=https://example.org/').get_json()
        assert data['url'] == 'https://example.org/?challenge=Y3JhbmU'

    def test_delete(self, client):
        game_id = start_game(client)['game_id']
        assert client.delete(f'/api/game/{game_id}').status_code == 200
        assert client.get(f'/api/game/{game_id}/state').status_code == 404
        assert client.delete(f'/api/game/{game_id}').status_code == 404

    def test_health(self, client):
        data = client.get('/api/health').get_json()
        assert data['status'] == 'healthy'
        assert data['word_statistics']['eligible_targets'] > 0

    def test_reset_stats(self, client):
        client.delete('/api/stats', headers={'X-Player-Id': 'alice'})
        stats = client.get('/api/stats', headers={'X-Player-Id': 'alice'}).get_json()['statistics']
        assert stats['total_attempts'] == 0
        assert stats['average'] is None
