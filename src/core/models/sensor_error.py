"""
Sensor error taxonomy.

Every error carries a kind and a human-readable message. Only DATA_ERROR is
raised by the validation logic; the remaining kinds describe failures of a
hardware-backed provider.
"""
from enum import Enum
from typing import Any, Dict


class SensorErrorKind(Enum):
    """Enumeration of all sensor error kinds."""
    NOT_AVAILABLE = "NotAvailable"
    PERMISSION_DENIED = "PermissionDenied"
    HARDWARE_ERROR = "HardwareError"
    PLUGIN_ERROR = "PluginError"
    DATA_ERROR = "DataError"


_PREFIXES = {
    SensorErrorKind.NOT_AVAILABLE: "Sensor not available",
    SensorErrorKind.PERMISSION_DENIED: "Permission denied",
    SensorErrorKind.HARDWARE_ERROR: "Hardware error",
    SensorErrorKind.PLUGIN_ERROR: "Plugin error",
    SensorErrorKind.DATA_ERROR: "Data error",
}


class SensorError(Exception):
    """Base class for all sensor errors."""

    kind: SensorErrorKind

    def __init__(self, kind: SensorErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{_PREFIXES[self.kind]}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SensorError):
            return NotImplemented
        return self.kind == other.kind and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    @staticmethod
    def from_kind(kind: SensorErrorKind, message: str) -> "SensorError":
        """Build the subclass matching the given kind."""
        return _ERROR_CLASSES[kind](message)

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind.value, "message": self.message}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SensorError":
        try:
            kind = SensorErrorKind(data["kind"])
        except (KeyError, ValueError) as e:
            raise ValueError(f"Invalid sensor error payload: {data}") from e
        return SensorError.from_kind(kind, str(data.get("message", "")))


class NotAvailableError(SensorError):
    """Sensor is not available on this device."""

    def __init__(self, message: str):
        super().__init__(SensorErrorKind.NOT_AVAILABLE, message)


class PermissionDeniedError(SensorError):
    """Permission to access the sensor was denied."""

    def __init__(self, message: str):
        super().__init__(SensorErrorKind.PERMISSION_DENIED, message)


class HardwareError(SensorError):
    def __init__(self, message: str):
        super().__init__(SensorErrorKind.HARDWARE_ERROR, message)


class PluginError(SensorError):
    def __init__(self, message: str):
        super().__init__(SensorErrorKind.PLUGIN_ERROR, message)


class DataError(SensorError):
    """Invalid data received from a sensor."""

    def __init__(self, message: str):
        super().__init__(SensorErrorKind.DATA_ERROR, message)


_ERROR_CLASSES = {
    SensorErrorKind.NOT_AVAILABLE: NotAvailableError,
    SensorErrorKind.PERMISSION_DENIED: PermissionDeniedError,
    SensorErrorKind.HARDWARE_ERROR: HardwareError,
    SensorErrorKind.PLUGIN_ERROR: PluginError,
    SensorErrorKind.DATA_ERROR: DataError,
}
