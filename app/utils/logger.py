"""
Logging Configuration
Centralized logging setup for the MVola middleware
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
import os

LOG_DIR = 'logs'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_level = logging.INFO
_configured = set()


def _ensure_log_dir() -> bool:
    if not os.path.exists(LOG_DIR):
        try:
            os.makedirs(LOG_DIR)
        except OSError:
            return False
    return True


def set_log_level(level) -> None:
    """Set the level of every logger handed out by get_logger"""
    global _level
    _level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(_level, int):
        _level = logging.INFO
    for name in _configured:
        logging.getLogger(name).setLevel(_level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        logger.setLevel(_level)

        # Console handler
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter('%(levelname)s - %(name)s - %(message)s'))
        logger.addHandler(console_handler)

        if _ensure_log_dir():
            file_handler = RotatingFileHandler(
                os.path.join(LOG_DIR, 'mvola-middleware.log'),
                maxBytes=10485760,  # 10MB
                backupCount=10
            )
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            logger.addHandler(file_handler)

        logger.propagate = False
        _configured.add(name)

    return logger


def configure_app_logging(app):
    """
    Configure logging for the Flask application

    Args:
        app: Flask application instance
    """
    set_log_level(app.config.get('LOG_LEVEL', 'INFO'))
    app.logger.setLevel(_level)

    if app.testing or not _ensure_log_dir():
        return

    # Error log
    error_handler = RotatingFileHandler(
        os.path.join(LOG_DIR, 'error.log'),
        maxBytes=10485760,
        backupCount=10
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(logging.Formatter(
        LOG_FORMAT + '\n%(pathname)s:%(lineno)d',
        datefmt=DATE_FORMAT
    ))
    app.logger.addHandler(error_handler)


class RequestLogger:
    """Middleware to log all requests"""

    def __init__(self, app=None):
        self.app = app
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Initialize request logging"""
        logger = get_logger('request')

        @app.after_request
        def log_response(response):
            from flask import request
            logger.info(
                f'{request.remote_addr} - "{request.method} {request.full_path.rstrip("?")}" '
                f'{response.status_code} {response.content_length or "-"} - '
                f'"{request.headers.get("User-Agent", "Unknown")}"'
            )
            return response
