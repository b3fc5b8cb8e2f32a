"""Tests for the VendingSystem entity."""

import pytest

from src.common.exceptions.custom_exceptions import (
    EmptyContainerError,
    InvalidArgumentError,
    InvariantViolationError,
    NotFoundError,
)
from src.fleet_domain.domain.entities.vending_city import VendingCity
from src.fleet_domain.domain.entities.vending_system import VendingSystem
from src.vending_domain.domain.entities.machine import Machine


@pytest.fixture
def system(sample_city) -> VendingSystem:
    other = VendingCity("LE", "León", [Machine("VM-LE-1", 1, 1)])
    return VendingSystem([sample_city, other])


def test_empty_system() -> None:
    system = VendingSystem()
    assert system.city_count == 0
    assert system.machines_per_city() == []
    with pytest.raises(EmptyContainerError):
        system.province_names()


def test_system_rejects_empty_or_repeated_initial_cities() -> None:
    with pytest.raises(InvalidArgumentError):
        VendingSystem([])
    with pytest.raises(InvariantViolationError):
        VendingSystem([VendingCity("VA", "Valladolid"), VendingCity("VA", "Valladolid")])


def test_add_city_rejects_none(system) -> None:
    with pytest.raises(InvalidArgumentError):
        system.add_city(None)


def test_queries(system) -> None:
    assert system.city_count == 2
    assert system.province_names() == ["Valladolid", "León"]
    assert system.machines_per_city() == [("Valladolid", 2), ("León", 1)]
    assert system.machine_count_for("LE") == 1
    assert [machine.machine_id for machine in system.machines_for("VA")] == ["VM-EMPTY", "VM-FULL"]


def test_unknown_city(system) -> None:
    with pytest.raises(NotFoundError):
        system.machine_count_for("MA")
    with pytest.raises(NotFoundError):
        system.machines_for("MA")
    with pytest.raises(InvalidArgumentError):
        system.machines_for("")


def test_remove_city(system) -> None:
    system.remove_city("VA")
    assert [city.city_id for city in system.cities] == ["LE"]
    with pytest.raises(NotFoundError):
        system.remove_city("VA")
