"""
Integration Tests for the application shell: health, error handlers, headers
"""

from datetime import datetime
from unittest.mock import patch

from app import create_app
from app.config import MVOLA_BASE_URLS


class TestHealth:

    def test_health(self, client):
        response = client.get('/health')

        assert response.status_code == 200
        data = response.get_json()
        assert data['status'] == 'healthy'
        assert data['version'] == '1.0.0'
        assert data['environment'] == 'test'
        assert data['timestamp'].endswith('Z')
        datetime.fromisoformat(data['timestamp'].replace('Z', '+00:00'))


class TestErrorHandlers:

    def test_unknown_route_returns_404_envelope(self, client):
        response = client.get('/nonexistent')

        assert response.status_code == 404
        assert response.get_json() == {'success': False, 'message': 'Endpoint non trouvé'}

    def test_wrong_method_returns_404_envelope(self, client):
        response = client.get('/mvola/auth')

        assert response.status_code == 404
        assert response.get_json() == {'success': False, 'message': 'Endpoint non trouvé'}

    def test_unhandled_error_returns_500_envelope(self, client):
        with patch('app.api.auth.PaymentService.authenticate', side_effect=RuntimeError('kaboom')):
            response = client.post('/mvola/auth')

        assert response.status_code == 500
        assert response.get_json() == {'success': False, 'message': 'Erreur interne du serveur'}

    def test_oversized_body_returns_413_envelope(self, app, client):
        assert app.config['MAX_CONTENT_LENGTH'] == 10 * 1024 * 1024

        with patch('requests.post') as mock_token:
            response = client.post(
                '/mvola/transaction/initiate',
                data=b'x' * (10 * 1024 * 1024 + 1),
                headers={'Content-Type': 'application/json'}
            )

        assert response.status_code == 413
        assert response.get_json() == {
            'success': False,
            'message': 'Requête trop volumineuse (maximum 10 Mo)',
        }
        mock_token.assert_not_called()

    def test_process_keeps_serving_after_error(self, client):
        with patch('app.api.auth.PaymentService.authenticate', side_effect=RuntimeError('kaboom')):
            client.post('/mvola/auth')

        assert client.get('/health').status_code == 200


class TestSecurityAndCors:

    def test_security_headers(self, client):
        response = client.get('/health')

        assert response.headers['X-Content-Type-Options'] == 'nosniff'
        assert response.headers['X-Frame-Options'] == 'SAMEORIGIN'
        assert "default-src 'self'" in response.headers['Content-Security-Policy']

    def test_allowed_origin(self, client):
        response = client.get('/health', headers={'Origin': 'http://localhost:3000'})

        assert response.headers['Access-Control-Allow-Origin'] == 'http://localhost:3000'
        assert response.headers['Access-Control-Allow-Credentials'] == 'true'

    def test_disallowed_origin(self, client):
        response = client.get('/health', headers={'Origin': 'https://evil.example'})

        assert 'Access-Control-Allow-Origin' not in response.headers


class TestConfiguration:

    def test_testing_config_uses_sandbox(self, app):
        assert app.config['MVOLA_BASE_URL'] == MVOLA_BASE_URLS['sandbox']
        assert app.extensions['mvola'].base_url == 'https://devapi.mvola.mg'

    def test_each_app_gets_its_own_provider(self):
        first = create_app('testing')
        second = create_app('testing')

        assert first.extensions['mvola'] is not second.extensions['mvola']
