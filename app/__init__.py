import os

from flask import Flask
from app.extensions import cors, mvola_client
from app.config import config

CONTENT_SECURITY_POLICY = (
    "default-src 'self'; "
    "script-src 'self' 'unsafe-inline'; "
    "style-src 'self' 'unsafe-inline'"
)


def create_app(config_name=None):
    """Application factory pattern"""
    if config_name is None:
        config_name = os.getenv('FLASK_ENV') or os.getenv('NODE_ENV') or 'development'

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config.get(config_name, config['default']))

    # Logging
    from app.utils.logger import configure_app_logging, RequestLogger
    configure_app_logging(app)
    RequestLogger(app)

    # Initialize extensions
    cors.init_app(
        app,
        origins=app.config['ALLOWED_ORIGINS'],
        supports_credentials=True
    )
    mvola_client.init_app(app)

    # Register blueprints
    from app.api import register_blueprints
    register_blueprints(app)

    register_security_headers(app)

    # Error handlers
    register_error_handlers(app)

    return app


def register_security_headers(app):
    """Add browser hardening headers to every response"""

    @app.after_request
    def set_security_headers(response):
        response.headers.setdefault('Content-Security-Policy', CONTENT_SECURITY_POLICY)
        response.headers.setdefault('X-Content-Type-Options', 'nosniff')
        response.headers.setdefault('X-Frame-Options', 'SAMEORIGIN')
        response.headers.setdefault('Referrer-Policy', 'no-referrer')
        return response


def register_error_handlers(app):
    """Register error handlers"""
    from flask import jsonify
    from app.errors.exceptions import AppError
    from app.utils.logger import get_logger

    logger = get_logger('app.errors')

    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(error):
        return jsonify({'success': False, 'message': 'Endpoint non trouvé'}), 404

    @app.errorhandler(413)
    def payload_too_large(error):
        return jsonify({'success': False, 'message': 'Requête trop volumineuse (maximum 10 Mo)'}), 413

    @app.errorhandler(AppError)
    def app_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(Exception)
    def internal_error(error):
        logger.error(f'Unhandled error: {error}', exc_info=error)
        return jsonify({'success': False, 'message': 'Erreur interne du serveur'}), 500
