"""Vending city entity: the machines deployed in one province."""

from collections.abc import Iterable
from typing import Optional

from src.common.exceptions.custom_exceptions import (
    InvalidArgumentError,
    InvariantViolationError,
    NotFoundError,
)
from src.common.utils.validators import require_text
from src.vending_domain.domain.entities.machine import Machine


class VendingCity:
    """Groups machines by id; each machine id appears at most once."""

    def __init__(self, city_id: str, province: str, machines: Optional[Iterable[Machine]] = None) -> None:
        self._city_id = require_text(city_id, "City id")
        self._province = require_text(province, "Province")
        self._machines: list[Machine] = []
        if machines is not None:
            initial = list(machines)
            if not initial:
                raise InvalidArgumentError("The initial machine list cannot be empty.")
            for machine in initial:
                self.add_machine(machine)

    @property
    def city_id(self) -> str:
        return self._city_id

    @property
    def province(self) -> str:
        return self._province

    @property
    def machines(self) -> list[Machine]:
        return list(self._machines)

    @property
    def machine_count(self) -> int:
        return len(self._machines)

    def add_machine(self, machine: Machine) -> None:
        if machine is None:
            raise InvalidArgumentError("The machine cannot be None.")
        if self._index_of(machine.machine_id) is not None:
            raise InvariantViolationError(f"Machine {machine.machine_id} is already registered in {self._city_id}.")
        self._machines.append(machine)

    def remove_machine(self, machine_id: str) -> None:
        require_text(machine_id, "Machine id")
        index = self._index_of(machine_id)
        if index is None:
            raise NotFoundError(f"Machine {machine_id} is not registered in {self._city_id}.")
        del self._machines[index]

    def count_operative(self) -> int:
        return sum(1 for machine in self._machines if machine.is_operative())

    def machines_with_empty_slots(self) -> list[Machine]:
        """Machines that have at least one slot to restock."""
        return [machine for machine in self._machines if machine.has_empty_slot()]

    def _index_of(self, machine_id: str) -> Optional[int]:
        for index, machine in enumerate(self._machines):
            if machine.machine_id == machine_id:
                return index
        return None

    def __repr__(self) -> str:
        return f"VendingCity(city_id={self._city_id!r}, province={self._province!r}, machines={len(self._machines)})"
