import json
import logging
from pathlib import Path
from typing import Dict, Optional

from core.models.sensor_enum import SensorId
from core.models.config_data import configData, configEmulatorData, configSensorData
from core.mocks.mock_provider import DEFAULT_SCENARIOS, MOCK_SCENARIOS

logger = logging.getLogger(__name__)

DISPLAY_NAMES = {
    SensorId.ACCELEROMETER: "Accelerometer",
    SensorId.MAGNETOMETER: "Magnetometer",
    SensorId.GPS: "GPS",
    SensorId.PRESSURE: "Pressure",
    SensorId.TEMPERATURE: "Temperature",
    SensorId.WIFI: "WiFi",
}


class ConfigLoader:
    """Loads and manages sensor configuration from JSON file."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            cls._instance._config = configData(sensors={})
            cls._instance._config_path = None
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config = self._get_default_config()
            self.load_config()
            self._initialized = True

    @staticmethod
    def get_config_path() -> Path:
        """Get the path to the sensors_config.json file."""
        # Config file lives in the project root/config directory
        config_path = Path(__file__).parent.parent.parent / "config" / "sensors_config.json"
        return config_path

    def load_config(self, config_path: Optional[Path] = None):
        """Load configuration from JSON file. Falls back to defaults on any error."""
        if config_path is not None:
            self._config_path = Path(config_path)
        config_path = self._config_path or self.get_config_path()

        # Start from defaults so sensors missing from the file stay usable
        self._config = self._get_default_config()

        if not config_path.exists():
            logger.error(f"Configuration file not found: {config_path}")
            return

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                json_data = json.load(f)

            for sensor_key, sensor_cfg in json_data.get("sensors", {}).items():
                sensor_id = SensorId[sensor_key]
                scenario = sensor_cfg.get("scenario", DEFAULT_SCENARIOS[sensor_id])
                if scenario not in MOCK_SCENARIOS[sensor_id]:
                    raise ValueError(f"Unknown scenario '{scenario}' for {sensor_key}")
                enabled = sensor_cfg.get("enabled", True)
                if not isinstance(enabled, bool):
                    raise ValueError(f"'enabled' must be true or false for {sensor_key}, got {enabled!r}")
                self._config.sensors[sensor_id] = configSensorData(
                    sensor_id,
                    description=sensor_cfg.get("description", ""),
                    displayName=sensor_cfg.get("display_name", DISPLAY_NAMES[sensor_id]),
                    enabled=enabled,
                    scenario=scenario,
                )

            emulator_cfg = json_data.get("emulator", {})
            seed = emulator_cfg.get("seed")
            self._config.emulator = configEmulatorData(
                heading_step=float(emulator_cfg.get("heading_step", 5.0)),
                seed=int(seed) if seed is not None else None,
            )
            logger.info(f"Configuration loaded from {config_path}")

        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse configuration file: {e}")
            self._config = self._get_default_config()

        except (KeyError, ValueError, TypeError, AttributeError) as e:
            logger.error(f"Invalid configuration in {config_path}: {e}")
            self._config = self._get_default_config()

    @staticmethod
    def _get_default_config() -> configData:
        """Return default configuration: every sensor enabled on its first scenario."""
        return configData(
            sensors={
                sensor_id: configSensorData(
                    sensor_id,
                    description="",
                    displayName=DISPLAY_NAMES[sensor_id],
                    enabled=True,
                    scenario=DEFAULT_SCENARIOS[sensor_id],
                )
                for sensor_id in SensorId
            },
            emulator=configEmulatorData(),
        )

    def get_sensor_config(self, sensor_id: SensorId) -> configSensorData:
        """Get configuration for a specific sensor."""
        return self._config.sensors[sensor_id]

    def is_sensor_enabled(self, sensor_id: SensorId) -> bool:
        """Check if a sensor is enabled in configuration."""
        cfg = self._config.sensors.get(sensor_id)
        return cfg is not None and cfg.enabled is True

    def get_scenario(self, sensor_id: SensorId) -> str:
        """Get the mock scenario name selected for a sensor."""
        return self.get_sensor_config(sensor_id).scenario

    def get_display_name(self, sensor_id: SensorId) -> str:
        return self.get_sensor_config(sensor_id).displayName

    def get_emulator_config(self) -> configEmulatorData:
        return self._config.emulator

    def get_all_sensors(self) -> Dict[SensorId, configSensorData]:
        """Get all sensor configurations."""
        return self._config.sensors

    def get_enabled_sensors(self) -> Dict[SensorId, configSensorData]:
        """Get only the enabled sensors, leaving the loaded config untouched."""
        return {
            sensor_id: cfg
            for sensor_id, cfg in self._config.sensors.items()
            if self.is_sensor_enabled(sensor_id)
        }

    def reload_config(self):
        """Reload configuration from file."""
        self.load_config()
        logger.info("Configuration reloaded")


# Global singleton instance
config_loader = ConfigLoader()
