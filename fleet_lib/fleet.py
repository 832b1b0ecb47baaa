"""
Fleet Module - Aggregates the vehicles owned by an organisation
"""

from typing import Iterator, List

from .loggers import FleetLogger
from .vehicles import Vehicle

FLEET_BANNER = "=== Fleet Overview ==="


class Fleet:
    """Owns a collection of vehicles and reports on it.

    The logger is borrowed: the fleet calls it but never closes it.
    """

    def __init__(self, logger: FleetLogger):
        self._vehicles: List[Vehicle] = []
        self._logger = logger

    def add_vehicle(self, vehicle: Vehicle) -> None:
        """Add a vehicle to the fleet; duplicates are allowed"""
        self._vehicles.append(vehicle)
        self._logger.log(f"Vehicle added: {vehicle.get_vehicle_type()}")

    def display_fleet(self) -> str:
        """Render every vehicle, in insertion order, under the overview banner"""
        self._logger.log("Displaying fleet")
        lines = [FLEET_BANNER]
        lines.extend(vehicle.display_info() for vehicle in self._vehicles)
        return "\n".join(lines)

    def calculate_total_value(self) -> float:
        """Sum of the prices of all vehicles; 0 for an empty fleet"""
        total = 0.0
        for vehicle in self._vehicles:
            total += vehicle.get_price()
        self._logger.log("Calculating total fleet value")
        return total

    def get_all_vehicles(self) -> List[Vehicle]:
        """Return all vehicles"""
        return self._vehicles.copy()

    def count(self) -> int:
        """Return total number of vehicles"""
        return len(self._vehicles)

    def clear(self) -> None:
        """Release every vehicle the fleet owns"""
        self._vehicles.clear()

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(self._vehicles)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.clear()

    def __repr__(self):
        return f"Fleet({self.count()} vehicles)"
