"""
Schemas Package
Marshmallow schemas for request validation
"""

from app.schemas.payment_schema import InitiateTransactionSchema

__all__ = [
    'InitiateTransactionSchema',
]
