"""
Webhook API Endpoints
Handles incoming callbacks from MVola
"""

from flask import Blueprint, request, jsonify

from app.services.webhook_service import WebhookService
from app.utils.logger import get_logger

webhooks_bp = Blueprint('webhooks', __name__)
logger = get_logger(__name__)


@webhooks_bp.route('', methods=['PUT'], defaults={'correlation_id': None})
@webhooks_bp.route('/<correlation_id>', methods=['PUT'])
def receive_callback(correlation_id):
    """
    Receive a transaction callback from MVola

    Path Parameters:
        correlation_id: Server correlation id (optional)

    Body:
        MVola callback payload, e.g.
        {
            "transactionStatus": "completed",
            "serverCorrelationId": "421a22a2-ef1d-42bc-9452-f4939a3d5cdf",
            "transactionReference": "641235",
            ...
        }
    """
    # Malformed JSON is left to the global error handler
    payload = request.get_json() if request.is_json and request.get_data() else None

    try:
        ack = WebhookService.receive_callback(correlation_id, payload if payload is not None else {})
        return jsonify(ack), 200

    except Exception as e:
        logger.error(f'Callback processing failed: {str(e)}')
        return jsonify({
            'success': False,
            'message': 'Erreur lors du traitement du callback'
        }), 500
