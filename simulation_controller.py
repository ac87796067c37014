"""
Title: Altimeter Simulation / Live Mode Controller (SimulationController)
Date Created: 2026-10-12
Last Modified: 2026-10-18
Version: 1.4

Purpose:
Owns the altimeter's mutable state (pressure, altitude and operating mode) and
arbitrates which input path may change it. In SIMULATION mode only bounded
simulated deltas are applied; in LIVE mode only pressure sensor samples are.
Altitude is recomputed from pressure on every accepted change so the two values
are never observed out of step. Registered listeners are notified with an
immutable snapshot after each accepted change, decoupling the presentation layer
from the controller.

Scope and Limitations:
- Simulated pressure is clamped to the configured window before altitude is
  derived; live sensor readings are applied unclamped.
- Switching into SIMULATION clamps a carried-over live pressure into the
  simulated window.
- Calls on the inactive input path are ignored, not rejected with an error.
- No history, filtering or smoothing of sensor noise is performed.
- Sensor subscription lifecycle is owned by the host, not by this controller.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not a certified altimeter and must not be used for navigation.
"""

# Change Log:
#
# 1.4 (2026-10-18)
#   - Entering SIMULATION clamps a carried-over live pressure into the simulated
#     window and recomputes altitude.
#   - Altitude is computed before any state is assigned, so a sample outside the
#     formula domain leaves pressure and altitude untouched.
#
# 1.3 (2026-10-16)
#   - Added subscribe/unsubscribe change notification with AltimeterReading
#     snapshots; listeners are invoked outside the state lock.
#
# 1.2 (2026-10-14)
#   - Serialised all writes to (pressure, altitude, mode) behind a single lock
#     so a sensor thread and the command loop can share one controller.
#   - Added on_sensor_event() so raw sensor callbacks are filtered by type here.
#
# 1.1 (2026-10-13)
#   - Added set_mode() and explicit ignore behaviour for simulated deltas while LIVE.
#
# 1.0 (2026-10-12)
#   - Initial simulated delta / sensor reading arbitration.


import logging
import threading
from dataclasses import dataclass
from typing import Callable

from altimeter_configuration import AltimeterConfiguration
from altimeter_states import AltimeterMode
from altitude_calculator import compute_altitude
from color_mapper import RGB, map_altitude_to_color
from sims.pressure_sensor import PressureSensorEvent, SensorType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AltimeterReading:
    pressure_hpa: float
    altitude_m: float
    mode: AltimeterMode


Listener = Callable[[AltimeterReading], None]


class SimulationController:
    def __init__(self, config: AltimeterConfiguration | None = None):
        self._config = config or AltimeterConfiguration()
        self._config.validate()

        self._lock = threading.Lock()
        self._mode = self._config.initial_mode
        self._pressure_hpa = float(self._config.initial_pressure_hpa)
        self._altitude_m = self._compute(self._pressure_hpa)

        self._listeners: list[Listener] = []

    # -------------------------
    # Properties / small helpers
    # -------------------------

    @property
    def config(self) -> AltimeterConfiguration:
        return self._config

    @property
    def pressure(self) -> float:
        return self._pressure_hpa

    @property
    def altitude(self) -> float:
        return self._altitude_m

    @property
    def mode(self) -> AltimeterMode:
        return self._mode

    def snapshot(self) -> AltimeterReading:
        with self._lock:
            return self._snapshot_locked()

    def color(self) -> RGB:
        return map_altitude_to_color(
            self.snapshot().altitude_m,
            self._config.color_min_altitude_m,
            self._config.color_max_altitude_m,
        )

    def _compute(self, pressure_hpa: float) -> float:
        return compute_altitude(pressure_hpa, self._config.sea_level_pressure_hpa)

    def _snapshot_locked(self) -> AltimeterReading:
        return AltimeterReading(
            pressure_hpa=self._pressure_hpa,
            altitude_m=self._altitude_m,
            mode=self._mode,
        )

    # -------------------------
    # Change notification
    # -------------------------

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, reading: AltimeterReading) -> None:
        for listener in list(self._listeners):
            listener(reading)

    # -------------------------
    # Mode
    # -------------------------

    def set_mode(self, mode: AltimeterMode) -> None:
        if not isinstance(mode, AltimeterMode):
            raise TypeError(f"mode must be an AltimeterMode, got {mode!r}")

        with self._lock:
            if mode is self._mode:
                return
            self._mode = mode
            if mode is AltimeterMode.SIMULATION:
                # Simulated pressure stays inside the simulated window.
                pressure = self._config.clamp_simulated_pressure(self._pressure_hpa)
                if pressure != self._pressure_hpa:
                    self._altitude_m = self._compute(pressure)
                    self._pressure_hpa = pressure
            reading = self._snapshot_locked()

        logger.info("Mode changed to %s", mode.name)
        self._notify(reading)

    # -------------------------
    # Input paths
    # -------------------------

    def apply_simulated_delta(self, delta_hpa: float) -> bool:
        with self._lock:
            if self._mode is not AltimeterMode.SIMULATION:
                logger.debug("Simulated delta ignored: mode=%s", self._mode.name)
                return False

            # Clamp first; altitude is never derived from an unclamped value.
            pressure = self._config.clamp_simulated_pressure(self._pressure_hpa + delta_hpa)
            altitude = self._compute(pressure)
            self._pressure_hpa = pressure
            self._altitude_m = altitude
            reading = self._snapshot_locked()

        self._notify(reading)
        return True

    def apply_sensor_reading(self, pressure_hpa: float) -> bool:
        with self._lock:
            if self._mode is not AltimeterMode.LIVE:
                logger.debug("Sensor reading ignored: mode=%s", self._mode.name)
                return False

            pressure = float(pressure_hpa)
            altitude = self._compute(pressure)
            self._pressure_hpa = pressure
            self._altitude_m = altitude
            reading = self._snapshot_locked()

        self._notify(reading)
        return True

    def on_sensor_event(self, event: PressureSensorEvent | None) -> bool:
        # Sensor callbacks keep arriving regardless of mode.
        if event is None or event.sensor_type is not SensorType.PRESSURE:
            return False
        if not event.values:
            return False
        return self.apply_sensor_reading(event.values[0])

    # -------------------------
    # User commands
    # -------------------------

    def increase_altitude(self) -> bool:
        # Lower pressure means higher altitude.
        return self.apply_simulated_delta(-self._config.sim_step_hpa)

    def decrease_altitude(self) -> bool:
        return self.apply_simulated_delta(self._config.sim_step_hpa)
