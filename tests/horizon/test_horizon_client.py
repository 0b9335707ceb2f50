"""
Tests for the Horizon client with a mocked HTTP session.
"""

from unittest.mock import MagicMock

import pytest
import requests

from helpers import mk_account_id, mk_keypair

from stellar_client import horizon
from stellar_client.horizon import ClientConfig, HorizonClient
from stellar_client.horizon.models import AccountResponse
from stellar_client.network import PUBLIC_NETWORK_PASSPHRASE, TESTNET_NETWORK_PASSPHRASE
from stellar_client.runtime.errors import (
    AccountNotFoundError,
    HorizonApiError,
    HorizonNetworkError,
    InvalidAccountIdError,
    TransactionFailedError,
)
from stellar_client.tx import TransactionBuilder, TransactionEnvelope

ENDPOINT = "https://horizon.example.org"


def _response(status_code, body):
    response = MagicMock()
    response.status_code = status_code
    if isinstance(body, Exception):
        response.json.side_effect = body
        response.text = "<html>"
    else:
        response.json.return_value = body
    return response


def _account_body(account_id, sequence="41"):
    return {
        "id": account_id,
        "account_id": account_id,
        "sequence": sequence,
        "subentry_count": 0,
        "balances": [{"balance": "100.0000000", "asset_type": "native"}],
    }


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    return HorizonClient(ClientConfig(endpoint=ENDPOINT + "/"), session=session)


class TestClientConfig:
    """Endpoint and network resolution"""

    def test_well_known_public(self):
        config = ClientConfig(endpoint="public")
        assert config.endpoint == "https://horizon.stellar.org"
        assert config.network_passphrase == PUBLIC_NETWORK_PASSPHRASE

    def test_well_known_testnet(self):
        config = ClientConfig(endpoint="TESTNET")
        assert config.endpoint == "https://horizon-testnet.stellar.org"
        assert config.network_passphrase == TESTNET_NETWORK_PASSPHRASE

    def test_custom_endpoint(self):
        config = ClientConfig(endpoint=ENDPOINT + "/")
        assert config.endpoint == ENDPOINT
        assert config.network_passphrase == TESTNET_NETWORK_PASSPHRASE

    def test_factories(self):
        assert horizon.public_client().network_passphrase == PUBLIC_NETWORK_PASSPHRASE
        assert horizon.testnet_client(timeout=5.0).config.timeout == 5.0


class TestAccounts:
    """GET /accounts/{id}"""

    def test_get_account(self, client, session):
        account_id = mk_account_id(1)
        session.request.return_value = _response(200, _account_body(account_id))

        account = client.get_account(account_id)

        assert isinstance(account, AccountResponse)
        assert account.id == account_id
        assert account.sequence == 41
        assert account.native_balance() == "100.0000000"
        session.request.assert_called_once_with(
            "GET", f"{ENDPOINT}/accounts/{account_id}",
            data=None, timeout=30.0, verify=True,
        )

    def test_get_account_sequence(self, client, session):
        account_id = mk_account_id(1)
        session.request.return_value = _response(200, _account_body(account_id, "103420918407103888"))
        assert client.get_account_sequence(account_id) == 103420918407103888

    def test_invalid_account_id_is_not_requested(self, client, session):
        with pytest.raises(InvalidAccountIdError):
            client.get_account("GBAD")
        session.request.assert_not_called()

    def test_not_found(self, client, session):
        session.request.return_value = _response(404, {"title": "Resource Missing", "status": 404})
        with pytest.raises(AccountNotFoundError):
            client.get_account(mk_account_id(1))

    def test_account_exists(self, client, session):
        session.request.return_value = _response(404, {"title": "Resource Missing"})
        assert client.account_exists(mk_account_id(1)) is False

        session.request.return_value = _response(200, _account_body(mk_account_id(1)))
        assert client.account_exists(mk_account_id(1)) is True

    def test_unexpected_body(self, client, session):
        session.request.return_value = _response(200, {"id": mk_account_id(1)})
        with pytest.raises(HorizonApiError):
            client.get_account(mk_account_id(1))

    def test_transport_failure(self, client, session):
        session.request.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(HorizonNetworkError):
            client.get_account_sequence(mk_account_id(1))

    def test_non_json_success(self, client, session):
        session.request.return_value = _response(200, ValueError("no json"))
        with pytest.raises(HorizonNetworkError):
            client.get_account(mk_account_id(1))


class TestSubmission:
    """POST /transactions"""

    def _envelope(self):
        return TransactionEnvelope(b"\x00" * 4, TESTNET_NETWORK_PASSPHRASE)

    def test_submit_envelope(self, client, session):
        session.request.return_value = _response(200, {"hash": "ab" * 32, "ledger": 7, "successful": True})
        envelope = self._envelope()

        result = client.submit_transaction(envelope)

        assert result.hash == "ab" * 32
        assert result.ledger == 7
        session.request.assert_called_once_with(
            "POST", f"{ENDPOINT}/transactions",
            data={"tx": envelope.to_base64()}, timeout=30.0, verify=True,
        )

    def test_submit_base64(self, client, session):
        session.request.return_value = _response(200, {"hash": "cd" * 32})
        client.submit_transaction("AAAA")
        assert session.request.call_args.kwargs["data"] == {"tx": "AAAA"}

    def test_transaction_failed(self, client, session):
        session.request.return_value = _response(400, {
            "title": "Transaction Failed",
            "extras": {"result_codes": {"transaction": "tx_bad_seq"}},
        })
        with pytest.raises(TransactionFailedError) as exc_info:
            client.submit_transaction(self._envelope())
        assert exc_info.value.result_codes == {"transaction": "tx_bad_seq"}


class TestBuilderIntegration:
    """HorizonClient as the builder's collaborator"""

    def test_build_and_submit(self, client, session):
        source = mk_keypair(1)
        session.request.side_effect = [
            _response(200, _account_body(source.account_id, "41")),
            _response(200, {"hash": "ef" * 32}),
        ]

        builder = TransactionBuilder(source.account_id, api_client=client)
        builder.add_payment_op(mk_account_id(2), "10")
        result = builder.submit(source)

        assert result.hash == "ef" * 32
        submitted = session.request.call_args_list[1].kwargs["data"]["tx"]
        envelope = TransactionEnvelope.from_base64(submitted, TESTNET_NETWORK_PASSPHRASE)
        assert int.from_bytes(envelope.tx_xdr[40:48], "big") == 42
        assert len(envelope.signatures) == 1

    def test_network_failure_reaches_caller(self, client, session):
        session.request.side_effect = requests.exceptions.Timeout("slow")
        builder = TransactionBuilder(mk_keypair(1).account_id, api_client=client)
        with pytest.raises(HorizonNetworkError):
            builder.encode()


class TestLifecycle:
    def test_close_owned_session_only(self, session):
        client = HorizonClient(ENDPOINT, session=session)
        client.close()
        session.close.assert_not_called()

    def test_context_manager(self):
        with HorizonClient(ENDPOINT) as client:
            assert client.endpoint == ENDPOINT
