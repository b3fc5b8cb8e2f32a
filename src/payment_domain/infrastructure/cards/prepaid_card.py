"""In-memory prepaid card usable as a payment handle."""

import hmac
import logging

from src.common.exceptions.custom_exceptions import InsufficientFundsError, PaymentError
from src.common.utils.validators import require_non_negative_amount, require_positive_price, require_text
from src.payment_domain.domain.interfaces.payment_handle import IPaymentHandle

logger = logging.getLogger(__name__)


class PrepaidCard(IPaymentHandle):
    """A stored-value card whose debits are gated by a credential."""

    def __init__(self, card_id: str, credential: str, balance: float = 0.0) -> None:
        self.card_id = require_text(card_id, "Card id")
        self._credential = require_text(credential, "Credential")
        self._balance = require_non_negative_amount(balance, "Initial balance")

    def current_balance(self) -> float:
        return self._balance

    def debit(self, credential: str, amount: float) -> None:
        require_text(credential, "Credential")
        amount = require_positive_price(amount, "Debit amount")
        if not hmac.compare_digest(credential, self._credential):
            logger.warning(f"Card {self.card_id}: debit of {amount} refused, wrong credential")
            raise PaymentError(f"Invalid credential for card {self.card_id}.")
        if amount > self._balance:
            raise InsufficientFundsError(self._balance, amount)
        self._balance -= amount
        logger.debug(f"Card {self.card_id}: debited {amount}, balance now {self._balance}")

    def top_up(self, amount: float) -> None:
        amount = require_positive_price(amount, "Top-up amount")
        self._balance += amount
