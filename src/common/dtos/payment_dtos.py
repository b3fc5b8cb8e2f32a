"""Data Transfer Objects for payment instruments."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class WalletBalanceDTO:
    """DTO for the balance of a remote wallet."""

    wallet_id: str
    balance: float
    currency: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], wallet_id: str) -> "WalletBalanceDTO":
        """Creates WalletBalanceDTO from the wallet service JSON body."""
        if "balance" not in data:
            raise KeyError("balance")
        return cls(
            wallet_id=str(data.get("walletId") or wallet_id),
            balance=float(data["balance"]),
            currency=data.get("currency"),
        )


@dataclass
class DebitRequestDTO:
    """DTO for the body of a wallet debit request."""

    credential: str
    amount: float

    def to_payload(self) -> dict[str, Any]:
        return {"credential": self.credential, "amount": round(self.amount, 2)}
