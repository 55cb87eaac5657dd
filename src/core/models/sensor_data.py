"""
Sensor reading models.

Readings are immutable value records. Construction only coerces types; range
checks happen on demand in the sensor service so that out-of-range values stay
representable.
"""
from typing import Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from core.models.sensor_error import DataError

R = TypeVar("R", bound="SensorReading")


class SensorReading(BaseModel):
    """
    Base class for all sensor records.
    Provides field-for-field JSON interchange.
    """
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    def to_json(self) -> str:
        """Encode the reading as a compact JSON string."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls: Type[R], text: str) -> R:
        """
        Decode a reading previously produced by to_json.
        Raises DataError if the text is not a valid record of this type.
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise DataError(f"Cannot decode {cls.__name__}: {e.error_count()} invalid field(s)") from e


class AccelerometerData(SensorReading):
    """Acceleration force in m/s² along X, Y and Z."""
    x: float
    y: float
    z: float
    timestamp: int  # Unix epoch, milliseconds
    accuracy: int  # 0-3, 3 is highest


class MagnetometerData(SensorReading):
    """Magnetic field strength in μT with the derived compass heading."""
    x: float
    y: float
    z: float
    heading: float  # degrees from magnetic north
    timestamp: int
    accuracy: int


class GpsData(SensorReading):
    latitude: float
    longitude: float
    altitude: Optional[float] = None  # meters above sea level
    accuracy: float  # horizontal estimate, meters
    speed: Optional[float] = None  # m/s
    timestamp: int


class PressureData(SensorReading):
    pressure: float  # hPa
    timestamp: int


class TemperatureData(SensorReading):
    temperature: float  # °C
    timestamp: int


class WifiNetwork(SensorReading):
    """A detected WiFi access point."""
    ssid: str
    bssid: str
    signal_strength: int  # dBm, typically -100 to 0
    frequency: int  # MHz
    security: str
