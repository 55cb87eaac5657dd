"""Sensor ID enumeration for type-safe sensor references."""
from enum import Enum


class SensorId(Enum):
    """Enumeration of all available sensor sources."""
    ACCELEROMETER = 0
    MAGNETOMETER = 1
    GPS = 2
    PRESSURE = 3
    TEMPERATURE = 4
    WIFI = 5
