# tests/test_payment_domain/test_infrastructure/test_wallet_api_client.py
"""Tests for the WalletApiClient."""

import json
from unittest.mock import Mock

import pytest
import requests

from src.common.config.settings import settings
from src.common.dtos.payment_dtos import WalletBalanceDTO
from src.common.exceptions.custom_exceptions import InsufficientFundsError, PaymentError
from src.payment_domain.infrastructure.api_clients.wallet_api_client import WalletApiClient


@pytest.fixture(autouse=True)
def mock_wallet_settings(mocker) -> None:
    """Mocks the wallet service settings for consistent testing."""
    mocker.patch.object(settings, "WALLET_API_BASE_URL", "https://wallet.example.com/api")
    mocker.patch.object(settings, "WALLET_API_TOKEN", "test_token")
    mocker.patch.object(settings, "WALLET_API_TIMEOUT", 5)


@pytest.fixture
def client() -> WalletApiClient:
    return WalletApiClient("W-42")


def _http_error(status_code: int, body: dict | None = None) -> requests.exceptions.HTTPError:
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.json.return_value = body or {}
    return requests.exceptions.HTTPError(f"{status_code} error", response=response)


def test_get_balance_success(client, mocker) -> None:
    mock_response = Mock()
    mock_response.status_code = 200
    mock_response.json.return_value = {"walletId": "W-42", "balance": "12.50", "currency": "EUR"}
    mock_session_get = mocker.patch.object(client.session, "get", return_value=mock_response)

    result = client.get_balance()

    assert result == WalletBalanceDTO(wallet_id="W-42", balance=12.50, currency="EUR")
    mock_response.raise_for_status.assert_called_once()
    mock_session_get.assert_called_once()
    assert mock_session_get.call_args[0][0] == "https://wallet.example.com/api/wallets/W-42/balance"
    assert mock_session_get.call_args[1]["params"].get("token") == "test_token"
    assert mock_session_get.call_args[1]["timeout"] == 5


def test_current_balance_returns_amount(client, mocker) -> None:
    mock_response = Mock()
    mock_response.json.return_value = {"balance": 3}
    mocker.patch.object(client.session, "get", return_value=mock_response)

    assert client.current_balance() == 3.0


def test_get_balance_timeout(client, mocker) -> None:
    mocker.patch.object(client.session, "get", side_effect=requests.exceptions.Timeout("Read timed out."))

    with pytest.raises(PaymentError, match="timed out"):
        client.current_balance()


def test_get_balance_http_error(client, mocker) -> None:
    mock_response = Mock()
    mock_response.raise_for_status.side_effect = _http_error(404)
    mocker.patch.object(client.session, "get", return_value=mock_response)

    with pytest.raises(PaymentError) as exc_info:
        client.current_balance()
    assert exc_info.value.status_code == 404


@pytest.mark.parametrize(
    "json_effect",
    [json.JSONDecodeError("Expecting value", "", 0), {"currency": "EUR"}, {"balance": "lots"}],
)
def test_get_balance_bad_body(client, mocker, json_effect) -> None:
    mock_response = Mock()
    if isinstance(json_effect, Exception):
        mock_response.json.side_effect = json_effect
    else:
        mock_response.json.return_value = json_effect
    mocker.patch.object(client.session, "get", return_value=mock_response)

    with pytest.raises(PaymentError, match="decode"):
        client.current_balance()


def test_missing_token(client, mocker) -> None:
    client.token = None
    mock_session_get = mocker.patch.object(client.session, "get")
    mock_session_post = mocker.patch.object(client.session, "post")

    with pytest.raises(PaymentError, match="WALLET_API_TOKEN"):
        client.current_balance()
    with pytest.raises(PaymentError, match="WALLET_API_TOKEN"):
        client.debit("cred", 1.0)

    mock_session_get.assert_not_called()
    mock_session_post.assert_not_called()


def test_debit_success(client, mocker) -> None:
    mock_response = Mock()
    mock_response.status_code = 201
    mock_session_post = mocker.patch.object(client.session, "post", return_value=mock_response)

    client.debit("cred", 0.6000000000000001)

    mock_response.raise_for_status.assert_called_once()
    assert mock_session_post.call_args[0][0] == "https://wallet.example.com/api/wallets/W-42/debits"
    assert mock_session_post.call_args[1]["json"] == {"credential": "cred", "amount": 0.6}
    assert mock_session_post.call_args[1]["params"] == {"token": "test_token"}


def test_debit_refused_credential(client, mocker) -> None:
    mock_response = Mock()
    mock_response.raise_for_status.side_effect = _http_error(401)
    mocker.patch.object(client.session, "post", return_value=mock_response)

    with pytest.raises(PaymentError) as exc_info:
        client.debit("wrong", 1.50)
    assert exc_info.value.status_code == 401


def test_debit_payment_required(client, mocker) -> None:
    mock_response = Mock()
    mock_response.raise_for_status.side_effect = _http_error(402, {"balance": 0.25})
    mocker.patch.object(client.session, "post", return_value=mock_response)

    with pytest.raises(InsufficientFundsError) as exc_info:
        client.debit("cred", 1.50)
    assert exc_info.value.balance == 0.25
    assert exc_info.value.amount == 1.50


def test_debit_connection_error(client, mocker) -> None:
    mocker.patch.object(client.session, "post", side_effect=requests.exceptions.ConnectionError("refused"))

    with pytest.raises(PaymentError) as exc_info:
        client.debit("cred", 1.50)
    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.original_exception, requests.exceptions.ConnectionError)


def test_debit_timeout(client, mocker) -> None:
    mocker.patch.object(client.session, "post", side_effect=requests.exceptions.Timeout("slow"))

    with pytest.raises(PaymentError, match="timed out"):
        client.debit("cred", 1.50)


def test_wallet_client_drives_a_machine_purchase(client, mocker, machine, soda) -> None:
    balance_response = Mock()
    balance_response.json.return_value = {"balance": 5.00}
    mocker.patch.object(client.session, "get", return_value=balance_response)
    mock_session_post = mocker.patch.object(client.session, "post", return_value=Mock())
    machine.restock("A0", soda)

    machine.purchase("A0", client, "cred")

    assert mock_session_post.call_args[1]["json"] == {"credential": "cred", "amount": 1.5}
    assert machine.is_slot_empty("A0")
