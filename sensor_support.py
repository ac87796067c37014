"""
Title: Sensor Subscription and Display Support Utilities
Date Created: 2026-10-13
Last Modified: 2026-10-18
Version: 1.3

Purpose:
Provides the host-side collaborators around the altimeter core: a sensor
subscription that pushes samples from a sensor source into a callback either
step-wise or on a background thread (start/stop mirrors a host becoming active
and inactive), text formatting for the display values, and an annunciator that
prints the display line only when the reading changes.

Scope and Limitations:
- Intended for CLI-driven simulation and test support only.
- Sample timing is approximate and not real-time deterministic.
- The subscription does not know about modes; the controller discards
  samples it should not apply.
- start/stop may be called from any host thread; they are serialised.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not a certified altimeter and must not be used for navigation.

Dependencies:
- Python 3.10+
- logging (standard library)
- threading (standard library)
- typing (standard library)
- color_mapper.py
- simulation_controller.py
- sims/pressure_sensor.py
"""

import logging
import threading
from typing import Callable, Optional

from color_mapper import map_altitude_to_color, to_hex
from simulation_controller import AltimeterReading, SimulationController
from sims.pressure_sensor import PressureSensorEvent

logger = logging.getLogger(__name__)

SEA_LEVEL_REFERENCE_TEXT = "Sea Level Reference: 1013.25 hPa"
THREAD_NAME = "sensor-subscription"

SensorSource = Callable[[], PressureSensorEvent]
SensorCallback = Callable[[PressureSensorEvent], object]


def format_altitude(altitude_m: float) -> str:
    return f"{altitude_m:.2f} m"


def format_pressure(pressure_hpa: float) -> str:
    return f"{pressure_hpa:.2f} hPa"


def format_reading(reading: AltimeterReading) -> str:
    color = to_hex(map_altitude_to_color(reading.altitude_m))
    return (
        f"ALT: {format_altitude(reading.altitude_m)}  "
        f"P: {format_pressure(reading.pressure_hpa)}  "
        f"MODE: {reading.mode.name}  COLOR: {color}"
    )


class SensorSubscription:
    def __init__(self,
                 source: Optional[SensorSource],
                 callback: SensorCallback,
                 period_s: float = 0.2,):
        self._source = source
        self._callback = callback
        self._period_s = float(period_s)
        self._running = False
        self._stop_evt = threading.Event()
        self._thread: threading.Thread | None = None
        # Serialises start/stop from host threads.
        self._lifecycle_lock = threading.Lock()

    @property
    def period_s(self) -> float:
        return self._period_s

    @property
    def running(self) -> bool:
        return self._running

    @property
    def available(self) -> bool:
        return self._source is not None

    def set_period(self, period_s: float) -> None:
        self._period_s = max(0.01, float(period_s))

    def start(self) -> None:
        with self._lifecycle_lock:
            if self._running:
                return
            if self._source is None:
                logger.warning("Pressure sensor unavailable; no samples will be delivered")
                return
            self._running = True
            self._stop_evt.clear()
            self._thread = threading.Thread(target=self._run, name=THREAD_NAME, daemon=True)
            self._thread.start()
        logger.info("Sensor subscription started (period=%.3fs)", self._period_s)

    def stop(self) -> None:
        with self._lifecycle_lock:
            if not self._running:
                return
            self._stop_evt.set()
            if self._thread is not None:
                self._thread.join(timeout=1.0)
            self._running = False
            self._thread = None
        logger.info("Sensor subscription stopped")

    def step(self, n: int = 1) -> int:
        # Deliver n samples synchronously; returns how many were delivered.
        if self._source is None:
            return 0
        count = max(1, int(n))
        for _ in range(count):
            self._callback(self._source())
        return count

    def _run(self) -> None:
        while not self._stop_evt.is_set():
            try:
                self._callback(self._source())
            except Exception:
                logger.exception("Unhandled exception in sensor subscription")
            self._stop_evt.wait(self._period_s)


class ReadingAnnunciator:
    # Prints the display line whenever the reading differs from the last one shown.
    def __init__(self):
        self._last: AltimeterReading | None = None

    def __call__(self, source: SimulationController | AltimeterReading) -> bool:
        if isinstance(source, SimulationController):
            reading = source.snapshot()
        else:
            reading = source

        if reading == self._last:
            return False

        self._last = reading
        print(format_reading(reading))
        return True

