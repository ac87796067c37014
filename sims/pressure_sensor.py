"""
Title: Pressure Sensor Event Models
Date Created: 2026-10-13
Last Modified: 2026-10-13
Version: 1.0

Purpose:
Defines the data models delivered by a (real or simulated) sensor callback to
the altimeter core. An event carries the reporting sensor's type, its raw value
vector and a timestamp; only PRESSURE events are consumed by the controller,
which reads the pressure in hPa from values[0].

Scope and Limitations:
- Models only logical sensor outputs, not physical sensor dynamics.
- Values are stored as supplied; no range checking is performed.
- Accuracy reporting is not modeled.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- enum (standard library)
"""

from dataclasses import dataclass
from enum import Enum, auto

class SensorType(Enum):
    PRESSURE = auto()
    TEMPERATURE = auto()
    ACCELEROMETER = auto()

@dataclass(frozen=True)
class PressureSensorEvent:
    sensor_type: SensorType
    values: tuple[float, ...]
    timestamp_s: float = 0.0  # clock time at which the sample was taken

    @classmethod
    def pressure(cls, pressure_hpa: float, timestamp_s: float = 0.0) -> "PressureSensorEvent":
        return cls(SensorType.PRESSURE, (float(pressure_hpa),), float(timestamp_s))
