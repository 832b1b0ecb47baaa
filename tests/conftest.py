"""Pytest configuration and shared fixtures."""

import pytest

from fleet_lib import ElectricCar, Fleet, FleetLogger, Sedan, SportsCar, SUV


class RecordingLogger(FleetLogger):
    """Keeps every message in memory."""

    def __init__(self):
        self.messages = []

    def log(self, message):
        self.messages.append(message)


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def fleet(recording_logger):
    return Fleet(recording_logger)


@pytest.fixture
def sedan():
    return Sedan("Toyota", "Camry", 2022, 25000, 4, 2.5, "Gasoline", 500)


@pytest.fixture
def suv():
    return SUV("Ford", "Explorer", 2021, 35000, 5, 3.0, "Gasoline", True, 210)


@pytest.fixture
def sports_car():
    return SportsCar("Porsche", "911", 2023, 120000, 2, 3.0, "Gasoline", 3.7, 320)


@pytest.fixture
def electric_car():
    return ElectricCar("Tesla", "Model 3", 2023, 45000, 4, 75, 450)


@pytest.fixture
def sample_vehicles(sedan, suv, sports_car, electric_car):
    return [sedan, suv, sports_car, electric_car]
