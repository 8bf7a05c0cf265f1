
from flask import Blueprint, jsonify
from app.errors.exceptions import AuthError
from app.services.payment_service import PaymentService
from app.utils.logger import get_logger

auth_bp = Blueprint("auth", __name__)
logger = get_logger(__name__)


@auth_bp.route("/auth", methods=["POST"])
def authenticate():
    """
    Force or test the MVola client-credentials exchange
    :return: whether a token is now available
    """
    try:
        token = PaymentService.authenticate()

        return jsonify({
            "success": True,
            "message": "Authentification MVola réussie",
            "hasToken": bool(token)
        })

    except AuthError as e:
        logger.error(f'Auth test failed: {e.message}')
        return jsonify({
            "success": False,
            "message": "Erreur d'authentification",
            "error": e.message
        }), 500
