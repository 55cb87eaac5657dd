import datetime
import logging
import math
from typing import Callable, List, MutableSequence, Optional, Tuple

from core.config_loader import config_loader
from core.mocks.mock_provider import current_timestamp
from core.models.sensor_data import (
    AccelerometerData,
    GpsData,
    MagnetometerData,
    PressureData,
    TemperatureData,
    WifiNetwork,
)
from core.models.sensor_enum import SensorId
from core.models.sensor_error import DataError
from core.models.snapshot import SensorSnapshot, ValidationIssue
from core.processing.compass import get_cardinal_direction

logger = logging.getLogger(__name__)

# Typical range for mobile devices: -20 to +20 m/s² per axis
MAX_ACCELERATION = 20.0
LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)
# 870 hPa (top of Mt. Everest) to 1084 hPa (record high), with margin
PRESSURE_RANGE = (800.0, 1100.0)
LOW_PRESSURE = 1000.0
HIGH_PRESSURE = 1020.0
# Electronic sensors are typically rated -40°C to +85°C
TEMPERATURE_RANGE = (-50.0, 100.0)

# (minimum dBm, description, bars), checked strongest first
SIGNAL_LEVELS: Tuple[Tuple[int, str, str], ...] = (
    (-50, "Excellent", "▂▃▅▆█"),
    (-60, "Good", "▂▃▅▆_"),
    (-70, "Fair", "▂▃▅__"),
)
WEAK_SIGNAL = ("Weak", "▂▃___")


def _in_range(value: float, bounds: Tuple[float, float]) -> bool:
    low, high = bounds
    return low <= value <= high


class SensorService:
    """
    Stateless validation and formatting of sensor readings.
    Validators return None on success and raise DataError otherwise.
    """

    def validate_accelerometer(self, data: AccelerometerData) -> None:
        """Check every axis is within ±MAX_ACCELERATION m/s²."""
        if abs(data.x) > MAX_ACCELERATION or abs(data.y) > MAX_ACCELERATION or abs(data.z) > MAX_ACCELERATION:
            logger.debug(f"Rejected accelerometer reading: {data}")
            raise DataError("Acceleration value out of range")

    def calculate_acceleration_magnitude(self, data: AccelerometerData) -> float:
        """Euclidean norm of the acceleration vector."""
        return math.sqrt(data.x * data.x + data.y * data.y + data.z * data.z)

    def format_accelerometer(self, data: AccelerometerData) -> str:
        return f"X: {data.x:.2f} m/s², Y: {data.y:.2f} m/s², Z: {data.z:.2f} m/s²"

    def validate_gps(self, data: GpsData) -> None:
        """Check latitude is within [-90, 90] and longitude within [-180, 180]."""
        if not _in_range(data.latitude, LATITUDE_RANGE):
            logger.debug(f"Rejected GPS latitude: {data.latitude}")
            raise DataError("Invalid latitude")
        if not _in_range(data.longitude, LONGITUDE_RANGE):
            logger.debug(f"Rejected GPS longitude: {data.longitude}")
            raise DataError("Invalid longitude")

    def format_gps(self, data: GpsData) -> str:
        lat_dir = "N" if data.latitude >= 0.0 else "S"
        lon_dir = "E" if data.longitude >= 0.0 else "W"
        return f"{abs(data.latitude):.4f}° {lat_dir}, {abs(data.longitude):.4f}° {lon_dir}"

    def format_gps_details(self, data: GpsData) -> str:
        """Altitude, accuracy and speed line; missing altitude shows N/A."""
        altitude = f"{data.altitude:.1f} m" if data.altitude is not None else "N/A"
        speed = data.speed if data.speed is not None else 0.0
        return f"Altitude: {altitude}, Accuracy: ±{data.accuracy:.1f} m, Speed: {speed:.1f} m/s"

    def format_heading(self, data: MagnetometerData) -> str:
        direction = get_cardinal_direction(data.heading)
        return f"{data.heading:.1f}° ({direction})"

    def validate_pressure(self, data: PressureData) -> None:
        if not _in_range(data.pressure, PRESSURE_RANGE):
            logger.debug(f"Rejected pressure reading: {data.pressure} hPa")
            raise DataError("Pressure out of range")

    def format_pressure(self, data: PressureData) -> str:
        if data.pressure < LOW_PRESSURE:
            description = "(Low)"
        elif data.pressure > HIGH_PRESSURE:
            description = "(High)"
        else:
            description = "(Normal)"
        return f"{data.pressure:.2f} hPa {description}"

    def validate_temperature(self, data: TemperatureData) -> None:
        if not _in_range(data.temperature, TEMPERATURE_RANGE):
            logger.debug(f"Rejected temperature reading: {data.temperature} °C")
            raise DataError("Temperature out of range")

    def format_temperature(self, data: TemperatureData) -> str:
        """Celsius with the Fahrenheit equivalent, one decimal each."""
        fahrenheit = data.temperature * 9.0 / 5.0 + 32.0
        return f"{data.temperature:.1f}°C ({fahrenheit:.1f}°F)"

    def sort_wifi_by_signal(self, networks: MutableSequence[WifiNetwork]) -> None:
        """Sort networks in place, strongest signal first. Ties keep their order."""
        networks[:] = sorted(networks, key=lambda n: n.signal_strength, reverse=True)

    def get_signal_description(self, rssi: int) -> str:
        for threshold, description, _ in SIGNAL_LEVELS:
            if rssi >= threshold:
                return description
        return WEAK_SIGNAL[0]

    def get_signal_bars(self, rssi: int) -> str:
        for threshold, _, bars in SIGNAL_LEVELS:
            if rssi >= threshold:
                return bars
        return WEAK_SIGNAL[1]

    def format_wifi_network(self, network: WifiNetwork) -> str:
        signal = self.get_signal_description(network.signal_strength)
        return f"{network.ssid} - {signal} ({network.signal_strength} dBm) - {network.security}"

    def format_wifi_details(self, network: WifiNetwork) -> str:
        return f"{network.security} • {network.frequency / 1000:.1f} GHz"

    def format_timestamp(self, timestamp: int, now: Optional[int] = None) -> str:
        """
        Describe how long ago a reading was taken.
        Under a minute: "12s ago"; under an hour: "5m ago"; otherwise local HH:MM:SS.
        """
        if now is None:
            now = current_timestamp()
        diff = max(0, (now - timestamp) // 1000)
        if diff < 60:
            return f"{diff}s ago"
        if diff < 3600:
            return f"{diff // 60}m ago"
        return datetime.datetime.fromtimestamp(timestamp / 1000).strftime("%H:%M:%S")

    def validate_snapshot(self, snapshot: SensorSnapshot) -> List[ValidationIssue]:
        """
        Run every validator on the readings present in the snapshot.
        Failures are collected and returned instead of raised.
        """
        checks: List[Tuple[SensorId, object, Callable]] = [
            (SensorId.ACCELEROMETER, snapshot.accelerometer, self.validate_accelerometer),
            (SensorId.GPS, snapshot.gps, self.validate_gps),
            (SensorId.PRESSURE, snapshot.pressure, self.validate_pressure),
            (SensorId.TEMPERATURE, snapshot.temperature, self.validate_temperature),
        ]
        issues: List[ValidationIssue] = []
        for sensor_id, reading, validator in checks:
            if reading is None:
                continue
            try:
                validator(reading)
            except DataError as e:
                logger.warning(f"Sensor {sensor_id.name} failed validation: {e}")
                issues.append(ValidationIssue.from_error(sensor_id, e))
        return issues

    def format_snapshot(self, snapshot: SensorSnapshot) -> List[str]:
        """Render one display line per sensor present, using configured display names."""
        lines: List[str] = []
        if snapshot.accelerometer is not None:
            accel = snapshot.accelerometer
            magnitude = self.calculate_acceleration_magnitude(accel)
            lines.append(
                f"{config_loader.get_display_name(SensorId.ACCELEROMETER)}: "
                f"{self.format_accelerometer(accel)} | {magnitude:.2f} m/s²"
            )
        if snapshot.magnetometer is not None:
            lines.append(
                f"{config_loader.get_display_name(SensorId.MAGNETOMETER)}: "
                f"{self.format_heading(snapshot.magnetometer)}"
            )
        if snapshot.gps is not None:
            lines.append(
                f"{config_loader.get_display_name(SensorId.GPS)}: "
                f"{self.format_gps(snapshot.gps)} | {self.format_gps_details(snapshot.gps)}"
            )
        if snapshot.pressure is not None:
            lines.append(
                f"{config_loader.get_display_name(SensorId.PRESSURE)}: "
                f"{self.format_pressure(snapshot.pressure)}"
            )
        if snapshot.temperature is not None:
            lines.append(
                f"{config_loader.get_display_name(SensorId.TEMPERATURE)}: "
                f"{self.format_temperature(snapshot.temperature)}"
            )
        if snapshot.wifi:
            networks = list(snapshot.wifi)
            self.sort_wifi_by_signal(networks)
            wifi_name = config_loader.get_display_name(SensorId.WIFI)
            for network in networks:
                lines.append(
                    f"{wifi_name}: {self.get_signal_bars(network.signal_strength)} "
                    f"{self.format_wifi_network(network)} ({self.format_wifi_details(network)})"
                )
        return lines


# Global instance
sensor_service = SensorService()
