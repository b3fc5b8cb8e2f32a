"""Machine entity: a lettered grid of slots."""

import logging
import string
from collections.abc import Iterable, Iterator

from src.common.dtos.vending_dtos import PurchaseReceiptDTO
from src.common.exceptions.custom_exceptions import (
    InsufficientFundsError,
    InvalidArgumentError,
    InvariantViolationError,
    SlotNotFoundError,
)
from src.common.utils.date_utils import now_local
from src.common.utils.validators import require_positive_int, require_positive_price, require_text
from src.payment_domain.domain.interfaces.payment_handle import IPaymentHandle
from src.vending_domain.domain.entities.sellable import Sellable
from src.vending_domain.domain.entities.slot import Slot

logger = logging.getLogger(__name__)

COLUMN_LABELS = string.ascii_uppercase


class Machine:
    """
    A vending machine with ``columns`` x ``rows`` slots.

    Slot ids are the column letter followed by the row index, starting at
    zero: a 2 x 2 machine has A0, A1, B0 and B1. The grid is built once and
    never reshaped; only slot contents change.
    """

    def __init__(self, machine_id: str, columns: int, rows: int) -> None:
        self._machine_id = require_text(machine_id, "Machine id")
        require_positive_int(columns, "Number of columns")
        require_positive_int(rows, "Number of rows")
        if columns > len(COLUMN_LABELS):
            raise InvalidArgumentError(
                f"Number of columns cannot exceed the {len(COLUMN_LABELS)} available column letters, got {columns}."
            )
        self._operative = True
        self._grid: list[list[Slot]] = [
            [Slot(f"{COLUMN_LABELS[column]}{row}") for row in range(rows)] for column in range(columns)
        ]
        self._slots_by_id: dict[str, Slot] = {slot.slot_id: slot for slot in self._iter_slots()}

    @property
    def machine_id(self) -> str:
        return self._machine_id

    @property
    def columns(self) -> int:
        return len(self._grid)

    @property
    def rows(self) -> int:
        return len(self._grid[0])

    @property
    def slot_ids(self) -> list[str]:
        """Slot ids column by column: A0, A1, ..., B0, ..."""
        return [slot.slot_id for slot in self._iter_slots()]

    def is_operative(self) -> bool:
        return self._operative

    def switch_operative(self) -> None:
        # Informational only, no operation checks it
        self._operative = not self._operative

    def restock(self, slot_id: str, sellable: Sellable) -> None:
        if sellable is None:
            raise InvalidArgumentError("The sellable to restock cannot be None.")
        slot = self._find_slot(slot_id)
        slot.add_unit(sellable)
        logger.debug(f"Machine {self._machine_id}: restocked {slot_id} with {sellable.identifier}")

    def restock_many(self, slot_id: str, sellables: Iterable[Sellable]) -> None:
        """Adds every unit of a batch that shares one identifier to the same slot."""
        if sellables is None:
            raise InvalidArgumentError("The sellable list cannot be None.")
        batch = list(sellables)
        if not batch:
            raise InvalidArgumentError("The sellable list cannot be empty.")
        slot = self._find_slot(slot_id)
        if not all(isinstance(sellable, Sellable) for sellable in batch):
            raise InvalidArgumentError("The sellable list can only contain sellables.")
        identifiers = {sellable.identifier for sellable in batch}
        if len(identifiers) > 1:
            raise InvariantViolationError(
                f"All sellables in a batch must share one identifier, got {', '.join(sorted(identifiers))}."
            )
        for sellable in batch:
            slot.add_unit(sellable)
        logger.debug(f"Machine {self._machine_id}: restocked {slot_id} with {len(batch)} x {batch[0].identifier}")

    def price_at(self, slot_id: str) -> float:
        return self._find_slot(slot_id).price()

    def units_at(self, slot_id: str) -> int:
        return self._find_slot(slot_id).unit_count

    def change_price_by_identifier(self, identifier: str, new_price: float) -> None:
        """
        Reprices item ``identifier`` everywhere in the grid, including inside bundles.

        Slots that do not hold the item are left alone; if none holds it the
        call does nothing.
        """
        require_text(identifier, "Item identifier")
        require_positive_price(new_price, "New price")
        updated = 0
        for slot in self._iter_slots():
            if not slot.is_empty() and slot.contains_item(identifier):
                slot.change_price(identifier, new_price)
                updated += 1
        logger.info(f"Machine {self._machine_id}: price of {identifier} set to {new_price} in {updated} slot(s)")

    def purchase(self, slot_id: str, payment_handle: IPaymentHandle, credential: str) -> PurchaseReceiptDTO:
        """
        Sells one unit from ``slot_id``, paid with ``payment_handle``.

        The balance is checked and the debit made before the slot is touched:
        a refused payment leaves the stock as it was, and the stock only drops
        once the debit has gone through.
        """
        require_text(slot_id, "Slot id")
        if payment_handle is None:
            raise InvalidArgumentError("A payment handle is required.")
        require_text(credential, "Credential")
        slot = self._find_slot(slot_id)

        price = slot.price()  # raises EmptySlotError before any payment is attempted
        balance = payment_handle.current_balance()
        if balance < price:
            logger.warning(
                f"Machine {self._machine_id}: purchase at {slot_id} rejected, balance {balance} below price {price}"
            )
            raise InsufficientFundsError(balance, price)

        payment_handle.debit(credential, price)
        sold = slot.remove_unit()
        logger.info(f"Machine {self._machine_id}: sold {sold.identifier} from {slot_id} for {price}")
        return PurchaseReceiptDTO(
            machine_id=self._machine_id,
            slot_id=slot_id,
            identifier=sold.identifier,
            name=sold.name,
            price=price,
            purchased_at=now_local(),
        )

    def has_empty_slot(self) -> bool:
        return any(slot.is_empty() for slot in self._iter_slots())

    def is_slot_empty(self, slot_id: str) -> bool:
        return self._find_slot(slot_id).is_empty()

    def _find_slot(self, slot_id: str) -> Slot:
        require_text(slot_id, "Slot id")
        slot = self._slots_by_id.get(slot_id)
        if slot is None:
            raise SlotNotFoundError(slot_id, self._machine_id)
        return slot

    def _iter_slots(self) -> Iterator[Slot]:
        for column in self._grid:
            yield from column

    def __repr__(self) -> str:
        return f"Machine(machine_id={self._machine_id!r}, columns={self.columns}, rows={self.rows})"
