from abc import ABC, abstractmethod
from typing import Dict, Any, Optional


class PaymentProvider(ABC):
    """Abstract base class for payment providers"""

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize provider with configuration

        Args:
            config: Provider-specific configuration
        """
        self.config = config
        self.provider_name = self.__class__.__name__.replace('Provider', '').lower()

    @abstractmethod
    def authenticate(self) -> str:
        """
        Return a valid access token, refreshing it if needed

        Raises:
            AuthError: If the credential exchange fails
        """
        pass

    @abstractmethod
    def initialize_payment(
            self,
            amount: int,
            customer_msisdn: str,
            description: Optional[str] = None,
            correlation_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Initialize a payment transaction

        Args:
            amount: Payment amount in the currency's minimal unit
            customer_msisdn: Customer phone number (debit party)
            description: Text shown to the customer
            correlation_id: Caller reference, generated if absent

        Returns:
            The provider's acknowledgment body
        """
        pass

    @abstractmethod
    def verify_payment(self, correlation_id: str) -> Dict[str, Any]:
        """
        Look up a transaction's status by correlation identifier

        Returns:
            The provider's status body
        """
        pass

    @abstractmethod
    def get_transaction_details(self, transaction_id: str) -> Dict[str, Any]:
        """
        Fetch a transaction by the provider's transaction identifier

        Returns:
            The provider's transaction body
        """
        pass

    def get_provider_name(self) -> str:
        """Get provider name"""
        return self.provider_name
