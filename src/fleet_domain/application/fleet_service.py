# src/fleet_domain/application/fleet_service.py
"""Application service reporting on the state of the vending fleet."""

import logging

from src.fleet_domain.domain.entities.vending_system import VendingSystem
from src.vending_domain.domain.entities.machine import Machine

logger = logging.getLogger(__name__)


class FleetApplicationService:
    """Read-only queries across every city and machine of a vending system."""

    def __init__(self, system: VendingSystem) -> None:
        self.system = system

    def get_all_machines(self) -> list[Machine]:
        return [machine for city in self.system.cities for machine in city.machines]

    def get_machines_needing_restock(self) -> list[Machine]:
        """Returns every machine with at least one empty slot, across all cities."""
        return [machine for city in self.system.cities for machine in city.machines_with_empty_slots()]

    def get_fleet_statistics(self) -> dict:
        """Returns statistics about the fleet."""
        total_cities = self.system.city_count
        total_machines = len(self.get_all_machines())
        operative_machines = sum(city.count_operative() for city in self.system.cities)
        needing_restock = len(self.get_machines_needing_restock())

        statistics = {
            "total_cities": total_cities,
            "total_machines": total_machines,
            "operative_machines": operative_machines,
            "machines_needing_restock": needing_restock,
            "average_machines_per_city": round(total_machines / total_cities, 2) if total_cities > 0 else 0,
        }
        logger.info(
            f"Fleet: {total_machines} machines in {total_cities} cities, "
            f"{operative_machines} operative, {needing_restock} needing restock"
        )
        return statistics
