"""Slot entity: one storage cell of a vending machine."""

import logging

from src.common.exceptions.custom_exceptions import (
    EmptySlotError,
    InvalidArgumentError,
    InvariantViolationError,
)
from src.common.utils.validators import require_positive_price, require_text
from src.vending_domain.domain.entities.bundle import Bundle
from src.vending_domain.domain.entities.item import Item
from src.vending_domain.domain.entities.sellable import Sellable, SellableKind

logger = logging.getLogger(__name__)


class Slot:
    """
    Holds zero or more units of a single sellable identity.

    Every stored unit is a copy made on insertion, so the caller's instance
    can change afterwards without touching the stock.
    """

    def __init__(self, slot_id: str) -> None:
        self._slot_id = require_text(slot_id, "Slot id")
        self._units: list[Sellable] = []

    @property
    def slot_id(self) -> str:
        return self._slot_id

    @property
    def unit_count(self) -> int:
        return len(self._units)

    def is_empty(self) -> bool:
        return not self._units

    def add_unit(self, sellable: Sellable) -> None:
        if sellable is None:
            raise InvalidArgumentError("The sellable to add cannot be None.")
        if not isinstance(sellable, Sellable):
            raise InvalidArgumentError(f"Only sellables can be stocked, got {type(sellable).__name__}.")
        if self._units and sellable.identifier != self._units[0].identifier:
            raise InvariantViolationError(
                f"Slot {self._slot_id} holds {self._units[0].identifier}, cannot add {sellable.identifier}."
            )
        self._units.append(sellable.duplicate())

    def remove_unit(self) -> Sellable:
        """Removes and returns the oldest unit."""
        self._require_units()
        return self._units.pop(0)

    def price(self) -> float:
        self._require_units()
        return self._units[0].price

    def identifier(self) -> str:
        self._require_units()
        return self._units[0].identifier

    def name(self) -> str:
        self._require_units()
        return self._units[0].name

    def contains_item(self, identifier: str) -> bool:
        """True if the stocked unit is, or is a bundle containing, the item ``identifier``."""
        require_text(identifier, "Item identifier")
        self._require_units()
        resident = self._units[0]
        if resident.kind is SellableKind.BUNDLE:
            # A bundle emptied before stocking holds nothing, and Bundle.contains refuses to scan it
            if resident.size == 0:
                return False
            return resident.contains(identifier)
        if resident.kind is SellableKind.ITEM:
            return resident.identifier == identifier
        raise TypeError(f"Unsupported sellable kind: {resident.kind}")

    def change_price(self, identifier: str, new_price: float) -> None:
        require_text(identifier, "Item identifier")
        require_positive_price(new_price, "New price")
        self._require_units()
        for unit in self._units:
            if unit.kind is SellableKind.BUNDLE:
                self._change_bundle_price(unit, identifier, new_price)
            elif unit.kind is SellableKind.ITEM:
                self._change_item_price(unit, identifier, new_price)
            else:
                raise TypeError(f"Unsupported sellable kind: {unit.kind}")
        logger.debug(f"Slot {self._slot_id}: price of {identifier} set to {new_price}")

    @staticmethod
    def _change_bundle_price(bundle: Bundle, identifier: str, new_price: float) -> None:
        bundle.change_member_price(identifier, new_price)

    @staticmethod
    def _change_item_price(item: Item, identifier: str, new_price: float) -> None:
        if item.identifier == identifier:
            item.price = new_price

    def _require_units(self) -> None:
        if not self._units:
            raise EmptySlotError(self._slot_id)

    def __repr__(self) -> str:
        return f"Slot(slot_id={self._slot_id!r}, units={len(self._units)})"
