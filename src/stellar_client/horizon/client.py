"""
Horizon API Client.

Minimal client for the two Horizon endpoints a transaction builder needs:
account state (for sequence numbers) and transaction submission.

Reference: https://developers.stellar.org/api/horizon
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union
import logging
import requests

from ..network import PUBLIC_NETWORK_PASSPHRASE, TESTNET_NETWORK_PASSPHRASE
from ..runtime.errors import (
    AccountNotFoundError,
    HorizonApiError,
    HorizonNetworkError,
    error_from_response,
)
from ..runtime.strkey import decode_account_id
from ..tx.collaborators import ApiClient
from ..tx.envelope import TransactionEnvelope
from .models import AccountResponse, SubmitTransactionResponse

logger = logging.getLogger(__name__)

# Well-known endpoints and the networks they serve
WELL_KNOWN_ENDPOINTS: Dict[str, tuple] = {
    "public": ("https://horizon.stellar.org", PUBLIC_NETWORK_PASSPHRASE),
    "testnet": ("https://horizon-testnet.stellar.org", TESTNET_NETWORK_PASSPHRASE),
}


@dataclass
class ClientConfig:
    """Configuration for the Horizon client."""

    endpoint: str
    timeout: float = 30.0
    network_passphrase: Optional[str] = None
    debug: bool = False
    verify_ssl: bool = True
    user_agent: str = "stellar-client-python/0.1.0"

    def __post_init__(self):
        known = WELL_KNOWN_ENDPOINTS.get(self.endpoint.lower())
        if known is not None:
            self.endpoint, passphrase = known
            if self.network_passphrase is None:
                self.network_passphrase = passphrase
        self.endpoint = self.endpoint.rstrip("/")
        if self.network_passphrase is None:
            self.network_passphrase = TESTNET_NETWORK_PASSPHRASE


class HorizonClient(ApiClient):
    """
    Horizon client usable as a TransactionBuilder collaborator.

    Example:
        ```python
        with HorizonClient("testnet") as horizon:
            builder = TransactionBuilder("GA...", api_client=horizon)
            builder.add_payment_op("GB...", "10")
            result = builder.submit("SA...")
        ```
    """

    def __init__(self, config: Union[str, ClientConfig], session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            config: Endpoint URL, well-known name ("public", "testnet") or ClientConfig
            session: Optional requests.Session for connection pooling
        """
        if isinstance(config, str):
            config = ClientConfig(endpoint=config)
        self.config = config

        self.logger = logger
        if self.config.debug:
            self.logger.setLevel(logging.DEBUG)

        self._session = session or requests.Session()
        self._owns_session = session is None
        self._session.headers.update({
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        })

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    @property
    def network_passphrase(self) -> str:
        return self.config.network_passphrase

    def close(self) -> None:
        """Close the HTTP session if owned by this client."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> HorizonClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # =========================================================================
    # Low-level HTTP
    # =========================================================================

    def _request(self, method: str, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        """
        Perform one HTTP request. No retries.

        Raises:
            HorizonNetworkError: On transport failures or undecodable bodies
            HorizonApiError: On non-2xx responses
        """
        url = f"{self.config.endpoint}{path}"
        if self.config.debug:
            self.logger.debug(f"Request: {method} {url}")

        try:
            response = self._session.request(
                method,
                url,
                data=data,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        except requests.exceptions.RequestException as e:
            raise HorizonNetworkError(f"HTTP request failed: {e}", cause=e)

        try:
            body = response.json()
        except ValueError:
            body = response.text

        if self.config.debug:
            self.logger.debug(f"Response: {response.status_code} {body}")

        if not 200 <= response.status_code < 300:
            raise error_from_response(response.status_code, body)
        if not isinstance(body, dict):
            raise HorizonNetworkError(f"Invalid JSON response from {url}")
        return body

    # =========================================================================
    # Accounts
    # =========================================================================

    def get_account(self, account_id: str) -> AccountResponse:
        """
        Load an account.

        Raises:
            InvalidAccountIdError: If the address is malformed
            AccountNotFoundError: If the account does not exist
        """
        decode_account_id(account_id)
        body = self._request("GET", f"/accounts/{account_id}")
        try:
            return AccountResponse.model_validate(body)
        except ValueError as e:
            raise HorizonApiError(f"Unexpected account response: {e}", cause=e)

    def get_account_sequence(self, account_id: str) -> int:
        """Current on-chain sequence number of an account."""
        return self.get_account(account_id).sequence

    def account_exists(self, account_id: str) -> bool:
        try:
            self.get_account(account_id)
        except AccountNotFoundError:
            return False
        return True

    # =========================================================================
    # Transactions
    # =========================================================================

    def submit_transaction(self, envelope: Union[TransactionEnvelope, str]) -> SubmitTransactionResponse:
        """
        Submit a signed envelope.

        Args:
            envelope: TransactionEnvelope or base64 envelope XDR

        Raises:
            TransactionFailedError: If the network rejected the transaction
        """
        if isinstance(envelope, TransactionEnvelope):
            envelope = envelope.to_base64()
        body = self._request("POST", "/transactions", data={"tx": envelope})
        try:
            return SubmitTransactionResponse.model_validate(body)
        except ValueError as e:
            raise HorizonApiError(f"Unexpected submission response: {e}", cause=e)


def public_client(**kwargs) -> HorizonClient:
    """Client for the public network."""
    return HorizonClient(ClientConfig(endpoint="public", **kwargs))


def testnet_client(**kwargs) -> HorizonClient:
    """Client for the SDF test network."""
    return HorizonClient(ClientConfig(endpoint="testnet", **kwargs))
