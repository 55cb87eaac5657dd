"""
Snapshot and validation issue models.
"""
from typing import List, Optional

from pydantic import Field

from core.models.sensor_data import (
    AccelerometerData,
    GpsData,
    MagnetometerData,
    PressureData,
    SensorReading,
    TemperatureData,
    WifiNetwork,
)
from core.models.sensor_enum import SensorId
from core.models.sensor_error import SensorError, SensorErrorKind


class SensorSnapshot(SensorReading):
    """
    One reading per sensor source taken at the same step.
    Sources that are disabled or unavailable are None (WiFi: empty list).
    """
    timestamp: int
    accelerometer: Optional[AccelerometerData] = None
    magnetometer: Optional[MagnetometerData] = None
    gps: Optional[GpsData] = None
    pressure: Optional[PressureData] = None
    temperature: Optional[TemperatureData] = None
    wifi: List[WifiNetwork] = Field(default_factory=list)


class ValidationIssue(SensorReading):
    sensor_id: SensorId
    kind: SensorErrorKind
    message: str

    @classmethod
    def from_error(cls, sensor_id: SensorId, error: SensorError) -> "ValidationIssue":
        return cls(sensor_id=sensor_id, kind=error.kind, message=error.message)
