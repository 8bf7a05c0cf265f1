"""
MVola Payment Provider
Based on the MVola merchant pay API (v1.0.0).

Supported flows
---------------
Merchant pay (customer debited, partner credited)
    POST /mvola/mm/transactions/type/merchantpay/1.0.0/
    GET  /mvola/mm/transactions/type/merchantpay/1.0.0/status/{serverCorrelationId}
    GET  /mvola/mm/transactions/type/merchantpay/1.0.0/{transactionId}

Authentication
    POST /token  grant_type=client_credentials, scope=EXT_INT_MVOLA_SCOPE (Basic auth)
    Tokens are cached in-memory and refreshed automatically on expiry.

Callback
    MVola PUTs the final transaction state to the X-Callback-URL given at
    initiation time. Callbacks are not signed.

Required config keys
--------------------
    consumer_key        – From the MVola developer portal app
    consumer_secret     – From the MVola developer portal app
    partner_msisdn      – Merchant MVola number (credit party)
    partner_name        – Merchant name sent in headers and metadata

Optional config keys
--------------------
    environment         – "sandbox" (default) | "production"
    base_url            – Overrides the environment's base URL
    callback_url        – Sent as X-Callback-URL when initiating
    timeout             – Outbound HTTP timeout in seconds (default 30)
    description         – Default descriptionText
    reference_prefix    – Prefix of generated correlation ids (default "SOLAR")
"""

import base64
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from app.errors.exceptions import AuthError, ProviderError
from app.providers.base import PaymentProvider
from app.providers.token_cache import TokenCache
from app.utils.logger import get_logger

logger = get_logger(__name__)

# MVola base URLs
_BASE_URLS = {
    "sandbox":    "https://devapi.mvola.mg",
    "production": "https://api.mvola.mg",
}

AUTH_FAILED_MESSAGE = "Échec de l'authentification MVola"

_TOKEN_SCOPE = "EXT_INT_MVOLA_SCOPE"
_API_VERSION = "1.0"
_USER_LANGUAGE = "fr"
_CURRENCY = "Ar"


def _epoch_ms() -> int:
    return int(time.time() * 1000)


def _request_date() -> str:
    """ISO-8601 UTC timestamp with milliseconds, e.g. 2024-01-01T10:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# Provider

class MVolaProvider(PaymentProvider):
    """MVola (merchant pay API) payment provider adapter."""

    # MVola endpoint paths
    _EP_TOKEN       = "/token"
    _EP_MERCHANTPAY = "/mvola/mm/transactions/type/merchantpay/1.0.0/"
    _EP_STATUS      = "/mvola/mm/transactions/type/merchantpay/1.0.0/status/"

    def __init__(self, config: Dict[str, Any], token_cache: Optional[TokenCache] = None):
        super().__init__(config)

        self.consumer_key     = config.get("consumer_key") or ""
        self.consumer_secret  = config.get("consumer_secret") or ""
        self.partner_msisdn   = config.get("partner_msisdn") or ""
        self.partner_name     = config.get("partner_name") or ""
        self.environment      = (config.get("environment") or "sandbox").lower()

        self.callback_url     = config.get("callback_url") or ""
        self.timeout          = float(config.get("timeout") or 30)
        self.description      = config.get("description") or "Paiement Solarmakers"
        self.reference_prefix = config.get("reference_prefix") or "SOLAR"

        if self.environment not in _BASE_URLS:
            raise ValueError(f"MVolaProvider: environment must be 'sandbox' or 'production', got '{self.environment}'")

        self.base_url = (config.get("base_url") or _BASE_URLS[self.environment]).rstrip("/")

        # Token cache, one per provider instance
        self.token_cache = token_cache or TokenCache()

        self._session = requests.Session()

    # PaymentProvider ABC

    def authenticate(self) -> str:
        """Return a valid OAuth access token, refreshing if expired."""
        token = self.token_cache.get_valid_token()
        if token:
            return token

        credentials = base64.b64encode(
            f"{self.consumer_key}:{self.consumer_secret}".encode("utf-8")
        ).decode("utf-8")

        url = f"{self.base_url}{self._EP_TOKEN}"
        try:
            resp = requests.post(
                url,
                data=f"grant_type=client_credentials&scope={_TOKEN_SCOPE}",
                headers={
                    "Authorization": f"Basic {credentials}",
                    "Content-Type":  "application/x-www-form-urlencoded",
                    "Cache-Control": "no-cache",
                },
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
            token = data["access_token"]
            expires_in = int(data["expires_in"])
            if not token:
                raise ValueError("empty access_token")
        except (requests.RequestException, ValueError, KeyError, TypeError) as exc:
            logger.error("MVola authentication failed: %s", exc)
            raise AuthError(AUTH_FAILED_MESSAGE) from exc

        self.token_cache.store(token, expires_in)
        logger.info("MVola authentication successful (expires in %ds)", expires_in)
        return token

    def initialize_payment(
        self,
        amount: int,
        customer_msisdn: str,
        description: Optional[str] = None,
        correlation_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Initiate a merchant pay transaction.

        The customer receives a prompt on their phone; the final state arrives
        later on the callback URL or through verify_payment().

        Returns the raw MVola acknowledgment body, typically:
            status               – "pending"
            serverCorrelationId  – Id to use with verify_payment()
            notificationMethod   – "callback" | "polling"
        """
        reference = correlation_id or self.generate_reference()
        token = self.authenticate()

        payload = self.build_payment_payload(amount, customer_msisdn, description, reference)
        headers = self._build_headers(token, reference)
        headers["Content-Type"] = "application/json"
        if self.callback_url:
            headers["X-Callback-URL"] = self.callback_url

        data = self._request("POST", self._EP_MERCHANTPAY, headers, payload, context="initialize_payment")

        logger.info(
            "Transaction initiated: serverCorrelationId=%s amount=%s customerMSISDN=%s",
            data.get("serverCorrelationId") if isinstance(data, dict) else None,
            amount,
            customer_msisdn,
        )
        return data

    def verify_payment(self, correlation_id: str) -> Dict[str, Any]:
        """Query a transaction's status by its server correlation id."""
        token = self.authenticate()
        headers = self._build_headers(token, correlation_id)
        return self._request(
            "GET", f"{self._EP_STATUS}{quote(str(correlation_id), safe='')}", headers, context="verify_payment"
        )

    def get_transaction_details(self, transaction_id: str) -> Dict[str, Any]:
        """Fetch a completed transaction by its MVola transaction id."""
        token = self.authenticate()
        headers = self._build_headers(token, f"DETAIL-{_epoch_ms()}")
        return self._request(
            "GET", f"{self._EP_MERCHANTPAY}{quote(str(transaction_id), safe='')}", headers, context="get_transaction_details"
        )

    # Payload helpers

    def generate_reference(self) -> str:
        return f"{self.reference_prefix}-{_epoch_ms()}"

    def build_payment_payload(
        self,
        amount: int,
        customer_msisdn: str,
        description: Optional[str],
        reference: str,
    ) -> Dict[str, Any]:
        return {
            "amount":          str(amount),
            "currency":        _CURRENCY,
            "descriptionText": description or self.description,
            "requestDate":     _request_date(),
            "debitParty":      [{"key": "msisdn", "value": customer_msisdn}],
            "creditParty":     [{"key": "msisdn", "value": self.partner_msisdn}],
            "metadata": [
                {"key": "partnerName", "value": self.partner_name},
                {"key": "fc",          "value": "USD"},
                {"key": "amountFc",    "value": "1"},
            ],
            "requestingOrganisationTransactionReference": reference,
        }

    # Private – HTTP helpers

    def _build_headers(self, token: str, correlation_id: str) -> Dict[str, str]:
        return {
            "Authorization":         f"Bearer {token}",
            "Version":               _API_VERSION,
            "X-CorrelationID":       correlation_id,
            "UserLanguage":          _USER_LANGUAGE,
            "UserAccountIdentifier": f"msisdn;{self.partner_msisdn}",
            "partnerName":           self.partner_name,
            "Cache-Control":         "no-cache",
        }

    def _request(
        self,
        method: str,
        endpoint: str,
        headers: Dict[str, str],
        payload: Optional[Dict[str, Any]] = None,
        context: str = "",
    ) -> Dict[str, Any]:
        """Execute an authenticated call to an MVola endpoint."""
        url = f"{self.base_url}{endpoint}"
        try:
            resp = self._session.request(
                method, url, json=payload, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            logger.error("MVola [%s]: network error – %s", context, exc)
            raise ProviderError(
                f"MVolaProvider [{context}]: network error – {exc}", details=str(exc)
            ) from exc

        return self._handle_response(resp, context)

    def _handle_response(
        self, resp: requests.Response, context: str
    ) -> Dict[str, Any]:
        """Parse an MVola response, raising on non-2xx status codes."""
        try:
            data = resp.json()
        except ValueError:
            data = {"raw": resp.text}

        logger.debug("MVola [%s] HTTP %s: %s", context, resp.status_code, data)

        if not resp.ok:
            error_msg = self._error_message(data) or resp.text[:300]
            logger.error("MVola [%s] HTTP %s: %s", context, resp.status_code, error_msg)
            raise ProviderError(
                f"MVolaProvider [{context}] HTTP {resp.status_code}: {error_msg}",
                details=data,
                upstream_status=resp.status_code,
            )

        return data

    @staticmethod
    def _error_message(data: Any) -> Optional[str]:
        """Best-effort extraction of MVola's error description."""
        if not isinstance(data, dict):
            return None
        if data.get("errorDescription"):
            return str(data["errorDescription"])
        if data.get("fault"):
            fault = data["fault"]
            if isinstance(fault, dict):
                return fault.get("description") or fault.get("message")
        for key in ("errorMessage", "message", "error_description", "error"):
            if data.get(key):
                return str(data[key])
        return None
