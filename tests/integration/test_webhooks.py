"""
Integration Tests for MVola callbacks
"""

import json
from unittest.mock import patch


class TestCallbackIntegration:
    """Integration tests for PUT /mvola/callback"""

    callback_payload = {
        'transactionStatus': 'completed',
        'serverCorrelationId': '421a22a2-ef1d-42bc-9452-f4939a3d5cdf',
        'transactionReference': '641235',
        'requestDate': '2024-01-01T10:00:00.000Z',
        'debitParty': [{'key': 'msisdn', 'value': '0341234567'}],
        'creditParty': [{'key': 'msisdn', 'value': '0343500003'}],
        'fees': [{'feeAmount': '0'}],
    }

    def test_callback_with_correlation_id(self, client):
        with patch('app.services.webhook_service.logger') as mock_logger:
            response = client.put(
                '/mvola/callback/421a22a2-ef1d-42bc-9452-f4939a3d5cdf',
                headers={'Content-Type': 'application/json'},
                data=json.dumps(self.callback_payload)
            )

        assert response.status_code == 200
        assert response.get_json() == {
            'success': True,
            'message': 'Callback traité avec succès',
        }

        args = mock_logger.info.call_args[0]
        assert args[1] == '421a22a2-ef1d-42bc-9452-f4939a3d5cdf'
        assert args[2] == 'completed'
        assert args[3] == self.callback_payload

    def test_callback_without_correlation_id(self, client):
        with patch('app.services.webhook_service.logger') as mock_logger:
            response = client.put('/mvola/callback', json=self.callback_payload)

        assert response.status_code == 200
        assert response.get_json() == {
            'success': True,
            'message': 'Callback traité avec succès',
        }
        assert mock_logger.info.call_args[0][1] == 'unknown'

    def test_callback_does_not_authenticate(self, client):
        with patch('requests.post') as mock_token:
            client.put('/mvola/callback/abc', json={'transactionStatus': 'failed'})

        mock_token.assert_not_called()

    def test_callback_accepts_any_shape(self, client):
        for body in ([1, 2, 3], 'completed', {}):
            response = client.put('/mvola/callback/abc', json=body)
            assert response.status_code == 200
            assert response.get_json()['success'] is True

    def test_callback_without_body(self, client):
        response = client.put('/mvola/callback')

        assert response.status_code == 200
        assert response.get_json()['success'] is True

    def test_callback_processing_error(self, client):
        with patch('app.api.webhooks.WebhookService.receive_callback', side_effect=RuntimeError('boom')):
            response = client.put('/mvola/callback/abc', json=self.callback_payload)

        assert response.status_code == 500
        assert response.get_json() == {
            'success': False,
            'message': 'Erreur lors du traitement du callback',
        }

    def test_malformed_callback_body_goes_to_global_handler(self, client):
        response = client.put(
            '/mvola/callback/abc',
            headers={'Content-Type': 'application/json'},
            data='{not json'
        )

        assert response.status_code == 500
        assert response.get_json() == {
            'success': False,
            'message': 'Erreur interne du serveur',
        }

    def test_callback_only_accepts_put(self, client):
        response = client.post('/mvola/callback/abc', json=self.callback_payload)

        assert response.status_code == 404
        assert response.get_json() == {'success': False, 'message': 'Endpoint non trouvé'}
