# tests/conftest.py
from datetime import date, timedelta

import pytest

from src.common.utils.date_utils import today_local
from src.fleet_domain.domain.entities.vending_city import VendingCity
from src.payment_domain.infrastructure.cards.prepaid_card import PrepaidCard
from src.vending_domain.domain.entities.bundle import Bundle
from src.vending_domain.domain.entities.item import Item
from src.vending_domain.domain.entities.machine import Machine

SODA_UPC = "036000291452"
CHIPS_UPC = "042100005264"
CANDY_UPC = "012345678905"
WATER_UPC = "073854001035"


@pytest.fixture
def next_year() -> date:
    """An expiry date one year from today."""
    return today_local() + timedelta(days=365)


@pytest.fixture
def soda(next_year) -> Item:
    return Item(name="Soda", upc=SODA_UPC, price=1.50, expiry_date=next_year)


@pytest.fixture
def chips(next_year) -> Item:
    return Item(name="Chips", upc=CHIPS_UPC, price=1.00, expiry_date=next_year)


@pytest.fixture
def candy(next_year) -> Item:
    return Item(name="Candy", upc=CANDY_UPC, price=2.00, expiry_date=next_year)


@pytest.fixture
def water(next_year) -> Item:
    return Item(name="Water", upc=WATER_UPC, price=0.80, expiry_date=next_year)


@pytest.fixture
def snack_bundle(chips, candy) -> Bundle:
    """Bundle of chips (1.00) and candy (2.00)."""
    return Bundle(name="Snack Pack", identifier="PACK-SNACK", items=[chips, candy])


@pytest.fixture
def machine() -> Machine:
    """A 2 x 2 machine: slots A0, A1, B0, B1."""
    return Machine(machine_id="VM-001", columns=2, rows=2)


@pytest.fixture
def prepaid_card() -> PrepaidCard:
    return PrepaidCard(card_id="CARD-1", credential="cred", balance=2.00)


@pytest.fixture
def sample_city() -> VendingCity:
    """City with one fully empty machine and one fully stocked, switched-off machine."""
    city = VendingCity(city_id="VA", province="Valladolid")
    city.add_machine(Machine(machine_id="VM-EMPTY", columns=1, rows=1))
    stocked = Machine(machine_id="VM-FULL", columns=1, rows=1)
    stocked.restock("A0", Item(name="Soda", upc=SODA_UPC, price=1.50, expiry_date=today_local() + timedelta(days=30)))
    stocked.switch_operative()
    city.add_machine(stocked)
    return city
