import logging
import random
from typing import Optional

from core.config_loader import config_loader
from core.mocks.mock_provider import (
    current_timestamp,
    get_mock_reading,
    mock_accelerometer_at_rest,
    mock_accelerometer_shaking,
    mock_magnetometer_at_heading,
)
from core.models.sensor_enum import SensorId
from core.models.snapshot import SensorSnapshot

logger = logging.getLogger(__name__)

GPS_DRIFT = 0.00005  # degrees, each way
MAX_GPS_SPEED = 2.0  # m/s
PRESSURE_JITTER = 1.0  # hPa, each way
WIFI_JITTER = 5  # dBm, each way


class SensorEmulator:
    """
    Produces a SensorSnapshot per step from the mock scenarios, adding motion
    and noise so consecutive snapshots look like a live device.
    Synchronous: nothing happens between calls to step().
    """

    def __init__(self, rng: Optional[random.Random] = None):
        emulator_cfg = config_loader.get_emulator_config()
        self.heading_step = emulator_cfg.heading_step
        self.rng = rng if rng is not None else random.Random(emulator_cfg.seed)
        self.step_count = 0
        self.heading = 0.0
        self._gps = None
        logger.info(f"SensorEmulator started (heading step: {self.heading_step}°)")

    def step(self) -> SensorSnapshot:
        """Advance the emulation by one step and return the readings."""
        snapshot = SensorSnapshot(
            timestamp=current_timestamp(),
            accelerometer=self._emulate_accelerometer(),
            magnetometer=self._emulate_magnetometer(),
            gps=self._emulate_gps(),
            pressure=self._emulate_pressure(),
            temperature=self._emulate_temperature(),
            wifi=self._emulate_wifi(),
        )
        self.step_count += 1
        return snapshot

    def _emulate_accelerometer(self):
        if not config_loader.is_sensor_enabled(SensorId.ACCELEROMETER):
            return None
        # Alternates at rest / shaking
        if self.step_count % 2 == 0:
            return mock_accelerometer_at_rest()
        return mock_accelerometer_shaking()

    def _emulate_magnetometer(self):
        if not config_loader.is_sensor_enabled(SensorId.MAGNETOMETER):
            return None
        # Rotating compass
        reading = mock_magnetometer_at_heading(self.heading)
        self.heading = (self.heading + self.heading_step) % 360.0
        return reading

    def _emulate_gps(self):
        if not config_loader.is_sensor_enabled(SensorId.GPS):
            return None
        if self._gps is None:
            self._gps = get_mock_reading(SensorId.GPS, config_loader.get_scenario(SensorId.GPS))
        self._gps = self._gps.model_copy(update={
            "latitude": self._gps.latitude + self.rng.uniform(-GPS_DRIFT, GPS_DRIFT),
            "longitude": self._gps.longitude + self.rng.uniform(-GPS_DRIFT, GPS_DRIFT),
            "speed": self.rng.uniform(0.0, MAX_GPS_SPEED),
            "timestamp": current_timestamp(),
        })
        return self._gps

    def _emulate_pressure(self):
        if not config_loader.is_sensor_enabled(SensorId.PRESSURE):
            return None
        reading = get_mock_reading(SensorId.PRESSURE, config_loader.get_scenario(SensorId.PRESSURE))
        return reading.model_copy(update={
            "pressure": reading.pressure + self.rng.uniform(-PRESSURE_JITTER, PRESSURE_JITTER),
        })

    def _emulate_temperature(self):
        if not config_loader.is_sensor_enabled(SensorId.TEMPERATURE):
            return None
        return get_mock_reading(SensorId.TEMPERATURE, config_loader.get_scenario(SensorId.TEMPERATURE))

    def _emulate_wifi(self):
        if not config_loader.is_sensor_enabled(SensorId.WIFI):
            return []
        return [
            network.model_copy(update={
                "signal_strength": network.signal_strength + self.rng.randint(-WIFI_JITTER, WIFI_JITTER),
            })
            for network in get_mock_reading(SensorId.WIFI, config_loader.get_scenario(SensorId.WIFI))
        ]
