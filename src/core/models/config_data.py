from dataclasses import dataclass, field
from typing import Dict, Optional

from core.models.sensor_enum import SensorId


@dataclass
class configSensorData:
    id: SensorId
    description : str = "No description"
    displayName : str = "Unnamed Sensor"
    enabled: bool = True
    scenario: str = ""

@dataclass
class configEmulatorData:
    heading_step: float = 5.0
    seed: Optional[int] = None

@dataclass
class configData:
    sensors : Dict[SensorId, configSensorData]
    emulator : configEmulatorData = field(default_factory=configEmulatorData)
