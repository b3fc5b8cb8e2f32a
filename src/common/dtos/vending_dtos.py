"""Data Transfer Objects for vending operations."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PurchaseReceiptDTO:
    """DTO describing one completed purchase from a machine slot."""

    machine_id: str
    slot_id: str
    identifier: str
    name: str
    price: float
    purchased_at: datetime
