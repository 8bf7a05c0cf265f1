"""
Webhook Service
Receives MVola transaction callbacks
"""

from typing import Any, Dict, Optional

from app.utils.logger import get_logger

logger = get_logger(__name__)

CALLBACK_ACK_MESSAGE = 'Callback traité avec succès'


class WebhookService:
    """Service for handling MVola callbacks"""

    @staticmethod
    def receive_callback(correlation_id: Optional[str], payload: Any) -> Dict[str, Any]:
        """
        Record an MVola callback and build the acknowledgment

        Callbacks are not signed by MVola, so the payload is only logged.
        Callers that need the final state should confirm it with a status lookup.

        Args:
            correlation_id: Server correlation id from the callback URL, if any
            payload: Callback body, any JSON shape

        Returns:
            Acknowledgment body
        """
        correlation_id = correlation_id or 'unknown'
        status = payload.get('transactionStatus') if isinstance(payload, dict) else None

        logger.info(
            'MVola callback received: correlationId=%s status=%s data=%s',
            correlation_id,
            status,
            payload,
        )

        return {
            'success': True,
            'message': CALLBACK_ACK_MESSAGE
        }
