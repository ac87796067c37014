"""
Title: Simulated Barometric Pressure Sensor
Date Created: 2026-10-13
Last Modified: 2026-10-18
Version: 1.1

Purpose:
Stands in for pressure sensor hardware. The simulator flies a simple altitude
profile (climb or descend toward a randomly chosen target altitude at a bounded
vertical speed, then pick a new target) and publishes the static pressure that
a barometer would read at that altitude, using the inverse barometric formula.

Scope and Limitations:
- Standard atmosphere only; no temperature or weather effects.
- No sensor noise, latency or quantisation is simulated.
- Forcing a pressure sets the equivalent altitude; the published value is
  recovered through the inverse formula and may differ in the last bits.

Dependencies:
- Python 3.10+
- random (standard library)
- altitude_calculator.py
- sims/pressure_sensor.py
"""

import random

from altitude_calculator import SEA_LEVEL_PRESSURE_HPA, compute_altitude, compute_pressure
from sims.pressure_sensor import PressureSensorEvent


class PressureSimulator:
    def __init__(
        self,
        min_alt_m=-300.0,        # ~1050 hPa
        max_alt_m=2000.0,        # ~795 hPa
        start_alt_m=0.0,
        max_climb_mps=5.0,       # vertical speed limit
        sea_level_hpa=SEA_LEVEL_PRESSURE_HPA,
        rng: random.Random | None = None,
        clock=None,
    ):
        self.min_alt_m = float(min_alt_m)
        self.max_alt_m = float(max_alt_m)
        self.max_climb_mps = float(max_climb_mps)
        self.sea_level_hpa = float(sea_level_hpa)

        self.rng = rng or random.Random()
        self.clock = clock

        self.altitude_m = self._bound(start_alt_m)
        self.target_alt_m = self._pick_target()

        self._last_time = self.clock() if self.clock else None

    def _bound(self, altitude_m: float) -> float:
        return max(self.min_alt_m, min(float(altitude_m), self.max_alt_m))

    def _pick_target(self) -> float:
        return self.rng.uniform(self.min_alt_m, self.max_alt_m)

    def step(self, dt: float) -> float:
        # Fly toward the target for dt seconds and return the published pressure.
        if dt > 0.0:
            remaining = self.target_alt_m - self.altitude_m
            max_move = self.max_climb_mps * dt

            if abs(remaining) <= max_move:
                self.altitude_m = self.target_alt_m
                self.target_alt_m = self._pick_target()
            else:
                self.altitude_m += max_move if remaining > 0 else -max_move

        return self.read_pressure_hpa()

    def update(self) -> float:
        if not self.clock:
            raise RuntimeError(
                "PressureSimulator.update() requires a clock; use step(dt) instead."
            )

        now = self.clock()
        dt = now - (self._last_time if self._last_time is not None else now)
        self._last_time = now
        return self.step(dt)

    def read_altitude_m(self) -> float:
        return self.altitude_m

    def read_pressure_hpa(self) -> float:
        # Static pressure at the current altitude; does not advance the simulation.
        return compute_pressure(self.altitude_m, self.sea_level_hpa)

    def set_pressure_hpa(self, pressure_hpa: float) -> None:
        # Jump to the altitude at which the barometer would read pressure_hpa.
        self.altitude_m = compute_altitude(float(pressure_hpa), self.sea_level_hpa)

    def read_event(self) -> PressureSensorEvent:
        if self.clock:
            self.update()
            ts = float(self.clock())
        else:
            ts = 0.0
        return PressureSensorEvent.pressure(self.read_pressure_hpa(), ts)
