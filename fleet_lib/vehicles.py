"""
Vehicles Module - Vehicle taxonomy for the fleet library

The set of variants is closed: Car, Sedan, SUV, SportsCar and ElectricCar.
Every variant answers the same three questions (type, description, price),
which is all the Fleet needs to handle them polymorphically.
"""

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from typing import ClassVar, Dict, List


ELECTRIC_FUEL = "Electric"


def format_number(value: float) -> str:
    """Render a number the short way: 25000, 2.5, 3.7"""
    return f"{value:g}"


@dataclass(frozen=True)
class Vehicle(ABC):
    """Abstract base for every vehicle in a fleet"""

    VEHICLE_TYPE: ClassVar[str] = ""

    manufacturer: str
    model: str
    year: int
    price: float

    def get_vehicle_type(self) -> str:
        return self.VEHICLE_TYPE

    @abstractmethod
    def display_info(self) -> str:
        """Return a human readable, possibly multi-line, summary"""

    def get_price(self) -> float:
        return self.price

    def to_dict(self) -> Dict:
        data = asdict(self)
        data['vehicle_type'] = self.get_vehicle_type()
        return data


@dataclass(frozen=True)
class Car(Vehicle):
    """Plain car; also the common rendering for its subtypes"""

    VEHICLE_TYPE: ClassVar[str] = "Car"

    doors: int
    engine_size: float
    fuel_type: str

    def display_info(self) -> str:
        return (
            f"{self.get_vehicle_type()} - {self.manufacturer} {self.model} ({self.year}), "
            f"Price: ${format_number(self.price)}, Doors: {self.doors}, "
            f"Engine: {format_number(self.engine_size)}L, Fuel: {self.fuel_type}"
        )


@dataclass(frozen=True)
class Sedan(Car):
    VEHICLE_TYPE: ClassVar[str] = "Sedan"

    trunk_capacity: float  # liters

    def display_info(self) -> str:
        return "\n".join([
            super().display_info(),
            f"  Trunk capacity: {format_number(self.trunk_capacity)} liters",
        ])


@dataclass(frozen=True)
class SUV(Car):
    VEHICLE_TYPE: ClassVar[str] = "SUV"

    four_wheel_drive: bool
    clearance: float  # mm

    def display_info(self) -> str:
        return "\n".join([
            super().display_info(),
            f"  4WD: {'Yes' if self.four_wheel_drive else 'No'}, "
            f"Clearance: {format_number(self.clearance)}mm",
        ])


@dataclass(frozen=True)
class SportsCar(Car):
    VEHICLE_TYPE: ClassVar[str] = "Sports Car"

    zero_to_hundred: float  # seconds
    top_speed: int  # km/h

    def display_info(self) -> str:
        return "\n".join([
            super().display_info(),
            f"  0-100 km/h: {format_number(self.zero_to_hundred)}s, "
            f"Top speed: {self.top_speed}km/h",
        ])


class ElectricVehicle(ABC):
    """Capability of anything that runs on a battery"""

    @abstractmethod
    def get_battery_capacity(self) -> float:
        """Battery capacity in kWh"""

    @abstractmethod
    def get_range(self) -> float:
        """Range on a single charge in km"""


@dataclass(frozen=True)
class ElectricCar(Car, ElectricVehicle):
    """Car with a battery instead of an engine.

    Carries the Car identity fields but renders its own summary line: the
    Car line (with its engine and fuel fields) is never part of the output.
    """

    VEHICLE_TYPE: ClassVar[str] = "Electric Car"

    engine_size: float = field(default=0.0, init=False)
    fuel_type: str = field(default=ELECTRIC_FUEL, init=False)
    battery_capacity: float  # kWh
    range_km: float

    def display_info(self) -> str:
        return (
            f"{self.get_vehicle_type()} - {self.manufacturer} {self.model} ({self.year}), "
            f"Price: ${format_number(self.price)}, Doors: {self.doors}, "
            f"Battery: {format_number(self.battery_capacity)} kWh, "
            f"Range: {format_number(self.range_km)} km"
        )

    def get_battery_capacity(self) -> float:
        return self.battery_capacity

    def get_range(self) -> float:
        return self.range_km


VEHICLE_KINDS = {
    'car': Car,
    'sedan': Sedan,
    'suv': SUV,
    'sports_car': SportsCar,
    'electric_car': ElectricCar,
}


def demo_vehicles() -> List[Vehicle]:
    """The sample company fleet used by the demo and the web app"""
    return [
        Sedan("Toyota", "Camry", 2022, 25000, 4, 2.5, "Gasoline", 500),
        SUV("Ford", "Explorer", 2021, 35000, 5, 3.0, "Gasoline", True, 210),
        SportsCar("Porsche", "911", 2023, 120000, 2, 3.0, "Gasoline", 3.7, 320),
        ElectricCar("Tesla", "Model 3", 2023, 45000, 4, 75, 450),
    ]
