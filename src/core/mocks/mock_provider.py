"""
Mock sensor data providers.

Each generator returns a fully populated reading stamped with the current
wall-clock time, so tests and demos can run without sensor hardware.
"""
import math
import time
from typing import Callable, Dict, List

from core.models.sensor_data import (
    AccelerometerData,
    GpsData,
    MagnetometerData,
    PressureData,
    TemperatureData,
    WifiNetwork,
)
from core.models.sensor_enum import SensorId
from core.processing.compass import normalize_heading


def current_timestamp() -> int:
    """Get the current Unix timestamp in milliseconds."""
    return time.time_ns() // 1_000_000


def mock_accelerometer_at_rest() -> AccelerometerData:
    """Device lying still, gravity along Y."""
    return AccelerometerData(x=0.0, y=9.81, z=0.0, timestamp=current_timestamp(), accuracy=3)


def mock_accelerometer_shaking() -> AccelerometerData:
    return AccelerometerData(x=2.5, y=8.3, z=-1.2, timestamp=current_timestamp(), accuracy=3)


def mock_magnetometer_north() -> MagnetometerData:
    return MagnetometerData(x=0.0, y=50.0, z=20.0, heading=0.0, timestamp=current_timestamp(), accuracy=3)


def mock_magnetometer_southwest() -> MagnetometerData:
    return MagnetometerData(x=-35.0, y=-35.0, z=20.0, heading=225.0, timestamp=current_timestamp(), accuracy=3)


def mock_magnetometer_at_heading(heading: float, strength: float = 50.0) -> MagnetometerData:
    """
    Magnetometer reading whose horizontal field points at the given heading.
    The X/Y components agree with calculate_heading.
    """
    heading = normalize_heading(heading)
    radians = math.radians(heading)
    return MagnetometerData(
        x=math.sin(radians) * strength,
        y=math.cos(radians) * strength,
        z=20.0,
        heading=heading,
        timestamp=current_timestamp(),
        accuracy=3,
    )


def mock_gps_san_francisco() -> GpsData:
    return GpsData(
        latitude=37.7749,
        longitude=-122.4194,
        altitude=16.0,
        accuracy=5.0,
        speed=0.0,
        timestamp=current_timestamp(),
    )


def mock_gps_moving() -> GpsData:
    """Walking pace near the San Francisco fix (~20 km/h)."""
    return GpsData(
        latitude=37.7750,
        longitude=-122.4195,
        altitude=18.0,
        accuracy=8.0,
        speed=5.5,
        timestamp=current_timestamp(),
    )


def mock_pressure_sea_level() -> PressureData:
    return PressureData(pressure=1013.25, timestamp=current_timestamp())


def mock_pressure_altitude() -> PressureData:
    """Roughly 500 m above sea level."""
    return PressureData(pressure=950.0, timestamp=current_timestamp())


def mock_temperature_comfortable() -> TemperatureData:
    return TemperatureData(temperature=22.5, timestamp=current_timestamp())


def mock_temperature_hot() -> TemperatureData:
    return TemperatureData(temperature=35.0, timestamp=current_timestamp())


def mock_wifi_networks() -> List[WifiNetwork]:
    """Three networks with distinct signal strengths, unsorted."""
    return [
        WifiNetwork(
            ssid="MyHomeWiFi",
            bssid="00:11:22:33:44:55",
            signal_strength=-45,
            frequency=2412,
            security="WPA2",
        ),
        WifiNetwork(
            ssid="Neighbor_5G",
            bssid="AA:BB:CC:DD:EE:FF",
            signal_strength=-68,
            frequency=5180,
            security="WPA3",
        ),
        WifiNetwork(
            ssid="CoffeeShop-Guest",
            bssid="11:22:33:44:55:66",
            signal_strength=-52,
            frequency=2437,
            security="Open",
        ),
    ]


MockGenerator = Callable[[], object]

# Named scenarios per sensor source, selectable from configuration
MOCK_SCENARIOS: Dict[SensorId, Dict[str, MockGenerator]] = {
    SensorId.ACCELEROMETER: {
        "at_rest": mock_accelerometer_at_rest,
        "shaking": mock_accelerometer_shaking,
    },
    SensorId.MAGNETOMETER: {
        "north": mock_magnetometer_north,
        "southwest": mock_magnetometer_southwest,
    },
    SensorId.GPS: {
        "san_francisco": mock_gps_san_francisco,
        "moving": mock_gps_moving,
    },
    SensorId.PRESSURE: {
        "sea_level": mock_pressure_sea_level,
        "altitude": mock_pressure_altitude,
    },
    SensorId.TEMPERATURE: {
        "comfortable": mock_temperature_comfortable,
        "hot": mock_temperature_hot,
    },
    SensorId.WIFI: {
        "home": mock_wifi_networks,
    },
}

DEFAULT_SCENARIOS: Dict[SensorId, str] = {
    sensor_id: next(iter(scenarios)) for sensor_id, scenarios in MOCK_SCENARIOS.items()
}


def get_mock_reading(sensor_id: SensorId, scenario: str):
    """
    Generate the reading for a named scenario.
    Returns a SensorReading, or a list of WifiNetwork for SensorId.WIFI.
    Raises ValueError for an unknown scenario.
    """
    scenarios = MOCK_SCENARIOS[sensor_id]
    try:
        generator = scenarios[scenario]
    except KeyError:
        raise ValueError(
            f"Invalid scenario for {sensor_id.name}: {scenario}. Valid values are: {', '.join(scenarios)}"
        )
    return generator()

