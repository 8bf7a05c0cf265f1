"""
Utils Package
Utility functions and helpers
"""

from app.utils.logger import get_logger, configure_app_logging, RequestLogger
from app.utils.validators import (
    validate_phone_number,
    validate_amount,
)

__all__ = [
    'get_logger',
    'configure_app_logging',
    'RequestLogger',
    'validate_phone_number',
    'validate_amount',
]
