"""Item entity: a single product with an expiry date and a UPC."""

import copy
from datetime import date, datetime

from src.common.exceptions.custom_exceptions import InvalidArgumentError, InvariantViolationError
from src.common.utils.date_utils import today_local, truncate_to_date
from src.common.utils.validators import require_positive_price
from src.vending_domain.domain.entities.sellable import Sellable, SellableKind
from src.vending_domain.domain.services.upc_validator import validate_upc


class Item(Sellable):
    """Represents one sellable product, identified by a checksum-validated UPC-A code."""

    def __init__(self, name: str, upc: str, price: float, expiry_date: date | datetime) -> None:
        super().__init__(name, upc)
        if expiry_date is None:
            raise InvalidArgumentError("Expiry date cannot be None.")
        try:
            expiry = truncate_to_date(expiry_date)
        except TypeError as e:
            raise InvalidArgumentError(f"Expiry date must be a date: {e}", original_exception=e)
        if expiry < today_local():
            raise InvariantViolationError(f"Expiry date {expiry.isoformat()} is already in the past.")
        validate_upc(upc)

        self.price = price  # the setter rejects zero and negative prices
        self._expiry_date = expiry

    @property
    def kind(self) -> SellableKind:
        return SellableKind.ITEM

    @property
    def upc(self) -> str:
        return self.identifier

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, new_price: float) -> None:
        self._price = require_positive_price(new_price)

    @property
    def expiry_date(self) -> date:
        return self._expiry_date

    def duplicate(self) -> "Item":
        # Plain copy: every field is immutable, and the expiry check only applies at construction
        return copy.copy(self)

    def __repr__(self) -> str:
        return (
            f"Item(name={self.name!r}, upc={self.upc!r}, price={self._price!r}, "
            f"expiry_date={self._expiry_date.isoformat()!r})"
        )
