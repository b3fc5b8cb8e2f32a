"""Vending system entity: every city the fleet operates in."""

from collections.abc import Iterable
from typing import Optional

from src.common.exceptions.custom_exceptions import (
    EmptyContainerError,
    InvalidArgumentError,
    InvariantViolationError,
    NotFoundError,
)
from src.common.utils.validators import require_text
from src.fleet_domain.domain.entities.vending_city import VendingCity
from src.vending_domain.domain.entities.machine import Machine


class VendingSystem:
    def __init__(self, cities: Optional[Iterable[VendingCity]] = None) -> None:
        self._cities: list[VendingCity] = []
        if cities is not None:
            initial = list(cities)
            if not initial:
                raise InvalidArgumentError("The initial city list cannot be empty.")
            for city in initial:
                self.add_city(city)

    @property
    def cities(self) -> list[VendingCity]:
        return list(self._cities)

    @property
    def city_count(self) -> int:
        return len(self._cities)

    def add_city(self, city: VendingCity) -> None:
        if city is None:
            raise InvalidArgumentError("The city cannot be None.")
        if self._find_city(city.city_id) is not None:
            raise InvariantViolationError(f"City {city.city_id} is already registered.")
        self._cities.append(city)

    def remove_city(self, city_id: str) -> None:
        self._cities.remove(self._get_city(city_id))

    def machine_count_for(self, city_id: str) -> int:
        return self._get_city(city_id).machine_count

    def machines_for(self, city_id: str) -> list[Machine]:
        return self._get_city(city_id).machines

    def province_names(self) -> list[str]:
        if not self._cities:
            raise EmptyContainerError("The system does not manage any city.")
        return [city.province for city in self._cities]

    def machines_per_city(self) -> list[tuple[str, int]]:
        """(province, machine count) pairs in registration order."""
        return [(city.province, city.machine_count) for city in self._cities]

    def _find_city(self, city_id: str) -> Optional[VendingCity]:
        return next((city for city in self._cities if city.city_id == city_id), None)

    def _get_city(self, city_id: str) -> VendingCity:
        require_text(city_id, "City id")
        city = self._find_city(city_id)
        if city is None:
            raise NotFoundError(f"City {city_id} is not registered.")
        return city
