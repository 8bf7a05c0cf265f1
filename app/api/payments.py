from flask import Blueprint, request, jsonify

from app.errors.exceptions import AppError, ValidationError
from app.services.payment_service import PaymentService
from app.utils.logger import get_logger

payments_bp = Blueprint('payments', __name__)
logger = get_logger(__name__)


def _error_details(error):
    """Provider body when MVola sent one, otherwise the error message"""
    if isinstance(error, AppError):
        return getattr(error, 'details', error.message)
    return str(error)


def _failure(message, error):
    return jsonify({
        'success': False,
        'message': message,
        'error': _error_details(error)
    }), 500


@payments_bp.route('/initiate', methods=['POST'])
def initiate_transaction():
    """
    Initiate a merchant pay transaction

    Body:
        {
            "amount": 5000,
            "customerMSISDN": "0341234567",
            "descriptionText": "Commande 42",     // Optional
            "correlationId": "ORDER-42"           // Optional, generated if absent
        }
    """
    # Malformed JSON is left to the global error handler
    payload = request.get_json() if request.is_json and request.get_data() else None

    try:
        data = PaymentService.initiate_transaction(payload)

        return jsonify({
            'success': True,
            'message': 'Transaction initiée avec succès',
            'data': data
        }), 200

    except ValidationError as e:
        return jsonify({
            'success': False,
            'message': e.message
        }), 400

    except Exception as e:
        logger.error(f'Transaction initiation failed: {e} - response: {_error_details(e)}')
        return _failure("Erreur lors de l'initiation", e)


@payments_bp.route('/status/<correlation_id>', methods=['GET'])
def get_transaction_status(correlation_id):
    """
    Check a transaction's status

    Path Parameters:
        - correlation_id: serverCorrelationId returned at initiation
    """
    try:
        data = PaymentService.get_status(correlation_id)

        return jsonify({
            'success': True,
            'data': data
        }), 200

    except Exception as e:
        logger.error(f'Status check failed: {e}')
        return _failure('Erreur lors de la vérification', e)


@payments_bp.route('/details/<transaction_id>', methods=['GET'])
def get_transaction_details(transaction_id):
    """
    Get transaction details

    Path Parameters:
        - transaction_id: MVola transaction id
    """
    try:
        data = PaymentService.get_details(transaction_id)

        return jsonify({
            'success': True,
            'data': data
        }), 200

    except Exception as e:
        logger.error(f'Details fetch failed: {e}')
        return _failure('Erreur lors de la récupération', e)
