"""
Health Check Endpoint
"""

from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health_check():
    """
    Liveness probe

    Returns:
        200 while the process is serving requests
    """
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
        'version': current_app.config.get('VERSION', '1.0.0'),
        'environment': current_app.config.get('ENVIRONMENT') or 'development'
    }), 200
