"""Sellable abstraction shared by items and bundles."""

from abc import ABC, abstractmethod
from enum import Enum

from src.common.utils.validators import require_text


class SellableKind(Enum):
    """Closed set of things a slot can hold."""

    ITEM = "item"
    BUNDLE = "bundle"


class Sellable(ABC):
    """Anything with a name, an identifier and a price that can occupy a slot."""

    def __init__(self, name: str, identifier: str) -> None:
        self._name = require_text(name, "Name")
        self._identifier = require_text(identifier, "Identifier")

    @property
    def name(self) -> str:
        return self._name

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    @abstractmethod
    def kind(self) -> SellableKind:
        """Discriminator used wherever behaviour differs between items and bundles."""
        pass

    @property
    @abstractmethod
    def price(self) -> float:
        pass

    @abstractmethod
    def duplicate(self) -> "Sellable":
        """Returns an independent copy that shares no mutable state with this one."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, identifier={self._identifier!r})"
