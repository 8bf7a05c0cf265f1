"""
Payment Service
Validates merchant pay requests and forwards them to MVola
"""

from typing import Any, Dict

from marshmallow import ValidationError as SchemaValidationError

from app.errors.exceptions import ValidationError
from app.extensions import mvola_client
from app.schemas.payment_schema import InitiateTransactionSchema
from app.utils.logger import get_logger
from app.utils.validators import INVALID_AMOUNT_MESSAGE, INVALID_PHONE_MESSAGE, INVALID_REQUEST_MESSAGE

logger = get_logger(__name__)

initiate_schema = InitiateTransactionSchema()

# Checked in this order; the first failing field is reported
_FIELD_ERRORS = (
    ('amount', ValidationError.INVALID_AMOUNT, INVALID_AMOUNT_MESSAGE),
    ('customerMSISDN', ValidationError.INVALID_PHONE, INVALID_PHONE_MESSAGE),
)


def _provider():
    return mvola_client.provider


class PaymentService:
    """Service for handling MVola payment operations"""

    @staticmethod
    def validate_initiation(payload: Any) -> Dict[str, Any]:
        """
        Validate an initiation request before any network call

        Raises:
            ValidationError: INVALID_AMOUNT, INVALID_PHONE or INVALID_REQUEST
        """
        try:
            return initiate_schema.load(payload if payload is not None else {})
        except SchemaValidationError as e:
            messages = e.messages if isinstance(e.messages, dict) else {'_schema': e.messages}
            field, code, message = next(
                (entry for entry in _FIELD_ERRORS if entry[0] in messages),
                (None, ValidationError.INVALID_REQUEST, INVALID_REQUEST_MESSAGE),
            )
            # Body that is not an object at all is reported as a bad amount
            if field is None and '_schema' in messages:
                field, code, message = _FIELD_ERRORS[0]
            logger.warning(f'Initiation rejected ({code}): {messages}')
            raise ValidationError(message, code=code, field=field) from e

    @staticmethod
    def authenticate() -> str:
        return _provider().authenticate()

    @staticmethod
    def initiate_transaction(payload: Any) -> Dict[str, Any]:
        """
        Validate and initiate a merchant pay transaction

        Args:
            payload: {amount, customerMSISDN, descriptionText?, correlationId?}

        Returns:
            MVola acknowledgment body
        """
        data = PaymentService.validate_initiation(payload)

        return _provider().initialize_payment(
            amount=data['amount'],
            customer_msisdn=data['customerMSISDN'],
            description=data.get('descriptionText'),
            correlation_id=data.get('correlationId'),
        )

    @staticmethod
    def get_status(correlation_id: str) -> Dict[str, Any]:
        return _provider().verify_payment(correlation_id)

    @staticmethod
    def get_details(transaction_id: str) -> Dict[str, Any]:
        return _provider().get_transaction_details(transaction_id)
