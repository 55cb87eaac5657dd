import logging
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from core.config_loader import config_loader
from core.mocks.emulator import SensorEmulator
from core.services.sensor_service import sensor_service

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MOBILE_SENSOR_")

    app_name: str = "Mobile Sensor Dashboard"
    log_level: str = "INFO"
    # Overrides config/sensors_config.json when set
    config_path: Optional[Path] = None


def configure_logging(level: str) -> None:
    """Configure root logging once; later calls only change the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(level.upper())


def render_dashboard(emulator: SensorEmulator) -> List[str]:
    """Take one emulator step and return the dashboard lines, validation issues last."""
    snapshot = emulator.step()
    lines = sensor_service.format_snapshot(snapshot)
    for issue in sensor_service.validate_snapshot(snapshot):
        lines.append(f"! {issue.sensor_id.name}: {issue.message}")
    return lines


def main(settings: Optional[Settings] = None) -> List[str]:
    settings = settings or Settings()
    configure_logging(settings.log_level)
    if settings.config_path is not None:
        config_loader.load_config(settings.config_path)

    logger.info("Starting %s", settings.app_name)
    lines = render_dashboard(SensorEmulator())
    for line in lines:
        logger.info(line)
    return lines


if __name__ == "__main__":
    main()
