"""
Fleet Library - Vehicle taxonomy and fleet aggregation
"""

from .vehicles import (
    Vehicle, Car, Sedan, SUV, SportsCar, ElectricVehicle, ElectricCar, VEHICLE_KINDS, demo_vehicles
)
from .fleet import Fleet
from .loggers import (
    FleetLogger, ConsoleLogger, FileLogger, CloudWatchLogger, LoggerType, LoggerFactory
)
from .line_counter import CodeLineCounter, LineCounts

__version__ = "1.0.0"
__all__ = [
    'Vehicle', 'Car', 'Sedan', 'SUV', 'SportsCar', 'ElectricVehicle', 'ElectricCar', 'VEHICLE_KINDS',
    'demo_vehicles',
    'Fleet',
    'FleetLogger', 'ConsoleLogger', 'FileLogger', 'CloudWatchLogger', 'LoggerType', 'LoggerFactory',
    'CodeLineCounter', 'LineCounts',
]
