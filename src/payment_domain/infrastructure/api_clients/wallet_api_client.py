"""Client for the remote wallet service, used as a payment handle."""

import json
import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from src.common.config.settings import settings
from src.common.dtos.payment_dtos import DebitRequestDTO, WalletBalanceDTO
from src.common.exceptions.custom_exceptions import InsufficientFundsError, PaymentError
from src.common.utils.validators import require_positive_price, require_text
from src.payment_domain.domain.interfaces.payment_handle import IPaymentHandle

logger = logging.getLogger(__name__)

PAYMENT_REQUIRED = 402


class WalletApiClient(IPaymentHandle):
    def __init__(self, wallet_id: str) -> None:
        self.wallet_id = require_text(wallet_id, "Wallet id")
        self.base_url = settings.WALLET_API_BASE_URL
        self.token = settings.WALLET_API_TOKEN
        self.timeout = settings.WALLET_API_TIMEOUT

        # Debits are not idempotent, so only reads are retried
        self.session = requests.Session()
        retry_strategy = Retry(
            total=3,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["HEAD", "GET", "OPTIONS"],
            backoff_factor=1,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def get_balance(self) -> WalletBalanceDTO:
        """Fetches the wallet balance from the wallet service."""
        self._require_token()
        url = f"{self.base_url}/wallets/{self.wallet_id}/balance"

        try:
            response = self.session.get(url, params={"token": self.token}, timeout=self.timeout)
            response.raise_for_status()
            return WalletBalanceDTO.from_api_response(response.json(), self.wallet_id)
        except requests.exceptions.Timeout as e:
            raise PaymentError(f"Balance request for wallet {self.wallet_id} timed out", original_exception=e)
        except requests.exceptions.RequestException as e:
            status_code = e.response.status_code if e.response is not None else None
            raise PaymentError(
                f"Error fetching balance for wallet {self.wallet_id}", original_exception=e, status_code=status_code
            )
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise PaymentError(
                f"Failed to decode balance response for wallet {self.wallet_id}", original_exception=e
            )

    def current_balance(self) -> float:
        return self.get_balance().balance

    def debit(self, credential: str, amount: float) -> None:
        require_text(credential, "Credential")
        request_dto = DebitRequestDTO(credential=credential, amount=require_positive_price(amount, "Debit amount"))
        self._require_token()
        url = f"{self.base_url}/wallets/{self.wallet_id}/debits"
        logger.info(f"Debiting {request_dto.amount} from wallet {self.wallet_id}")

        try:
            response = self.session.post(
                url, params={"token": self.token}, json=request_dto.to_payload(), timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            logger.error(f"Debit on wallet {self.wallet_id} timed out: {e}")
            raise PaymentError(f"Debit request for wallet {self.wallet_id} timed out", original_exception=e)
        except requests.exceptions.RequestException as e:
            status_code = e.response.status_code if e.response is not None else None
            logger.error(f"Debit on wallet {self.wallet_id} failed: {e}")
            if status_code == PAYMENT_REQUIRED:
                raise InsufficientFundsError(self._balance_from_error(e.response), request_dto.amount)
            raise PaymentError(
                f"Debit refused for wallet {self.wallet_id}", original_exception=e, status_code=status_code
            )

    def _require_token(self) -> None:
        if not self.token:
            raise PaymentError("WALLET_API_TOKEN is not set in environment variables.")

    @staticmethod
    def _balance_from_error(response: requests.Response) -> float:
        try:
            return float(response.json().get("balance", 0.0))
        except (json.JSONDecodeError, AttributeError, TypeError, ValueError):
            return 0.0
