"""Bundle entity: several distinct items sold together."""

import copy
from collections.abc import Iterable

from src.common.exceptions.custom_exceptions import (
    EmptyBundleError,
    InvalidArgumentError,
    InvariantViolationError,
    NotFoundError,
)
from src.common.utils.validators import require_text
from src.vending_domain.domain.entities.item import Item
from src.vending_domain.domain.entities.sellable import Sellable, SellableKind

BUNDLE_PRICE_FACTOR = 0.2
MIN_BUNDLE_SIZE = 2
EMPTY_BUNDLE_DESCRIPTION = "This bundle contains no items."


class Bundle(Sellable):
    """
    A pack of at least two distinct items.

    The price is never stored: it is recomputed from the current members on
    every read, so a member price change is visible immediately. The two-item
    minimum only applies at construction; ``remove`` may shrink the bundle
    below it.
    """

    def __init__(self, name: str, identifier: str, items: Iterable[Item]) -> None:
        super().__init__(name, identifier)
        if items is None:
            raise InvalidArgumentError("The item list cannot be None.")
        members = list(items)  # copy of the collection, the items themselves are shared
        if len(members) < MIN_BUNDLE_SIZE:
            raise InvalidArgumentError(f"A bundle needs at least {MIN_BUNDLE_SIZE} items, got {len(members)}.")
        for member in members:
            self._require_item(member)
        repeated = self._find_repeated_identifiers(members)
        if repeated:
            raise InvariantViolationError(f"A bundle cannot contain repeated items: {', '.join(sorted(repeated))}.")
        self._members: list[Item] = members

    @property
    def kind(self) -> SellableKind:
        return SellableKind.BUNDLE

    @property
    def price(self) -> float:
        return sum(member.price for member in self._members) * BUNDLE_PRICE_FACTOR

    @property
    def members(self) -> tuple[Item, ...]:
        return tuple(self._members)

    @property
    def size(self) -> int:
        return len(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def duplicate(self) -> "Bundle":
        # Bypasses the constructor: a bundle that shrank below two items can still be copied
        clone = copy.copy(self)
        clone._members = [member.duplicate() for member in self._members]
        return clone

    def add(self, item: Item) -> None:
        self._require_item(item)
        if any(member.identifier == item.identifier for member in self._members):
            raise InvariantViolationError(f"Item {item.identifier} is already part of bundle {self.identifier}.")
        self._members.append(item)

    def remove(self, identifier: str) -> Item:
        """Removes and returns the member with ``identifier``."""
        require_text(identifier, "Item identifier")
        self._require_members()
        for index, member in enumerate(self._members):
            if member.identifier == identifier:
                return self._members.pop(index)
        raise NotFoundError(f"Item {identifier} is not part of bundle {self.identifier}.")

    def contains(self, identifier: str) -> bool:
        require_text(identifier, "Item identifier")
        self._require_members()
        return any(member.identifier == identifier for member in self._members)

    def change_member_price(self, identifier: str, new_price: float) -> None:
        """
        Sets the price of the member with ``identifier``.

        The new price is validated by the item itself. An identifier that is
        not in the bundle leaves everything untouched and raises nothing.
        """
        require_text(identifier, "Item identifier")
        self._require_members()
        for member in self._members:
            if member.identifier == identifier:
                member.price = new_price

    def describe_members(self) -> str:
        if not self._members:
            return EMPTY_BUNDLE_DESCRIPTION
        return f"This bundle contains: {', '.join(member.name for member in self._members)}."

    def _require_members(self) -> None:
        if not self._members:
            raise EmptyBundleError(self.identifier)

    @staticmethod
    def _require_item(item: Item) -> None:
        if item is None:
            raise InvalidArgumentError("A bundle item cannot be None.")
        if not isinstance(item, Item):
            raise InvalidArgumentError(f"Only items can be bundled, got {type(item).__name__}.")

    @staticmethod
    def _find_repeated_identifiers(members: list[Item]) -> set[str]:
        # All-pairs comparison: a repeat anywhere in the list counts, not only neighbours
        repeated = set()
        for i, first in enumerate(members):
            for second in members[i + 1 :]:
                if first.identifier == second.identifier:
                    repeated.add(first.identifier)
        return repeated
