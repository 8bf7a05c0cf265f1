"""
API Blueprints Package
Registers all API blueprints
"""

from app.api.auth import auth_bp
from app.api.payments import payments_bp
from app.api.webhooks import webhooks_bp
from app.api.health import health_bp

# Export blueprints
__all__ = [
    'auth_bp',
    'payments_bp',
    'webhooks_bp',
    'health_bp',
    'register_blueprints'
]


def register_blueprints(app):
    """
    Register all blueprints with the Flask app

    Args:
        app: Flask application instance
    """

    url_base : str = '/mvola'

    app.register_blueprint(health_bp)
    app.register_blueprint(auth_bp, url_prefix=url_base)
    app.register_blueprint(payments_bp, url_prefix=f'{url_base}/transaction')
    app.register_blueprint(webhooks_bp, url_prefix=f'{url_base}/callback')
