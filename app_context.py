"""
Title: Application Context Container for the Altimeter
Date Created: 2026-10-13
Last Modified: 2026-10-13
Version: 1.0

Purpose:
Defines a central application context object for the altimeter simulation.
The AppContext aggregates the core controller, shared configuration, the
simulated pressure source, the sensor subscription and lifecycle control
primitives into a single, explicit container to simplify wiring and
controlled shutdown across the application.

Scope and Limitations:
- Intended for simulation and CLI-driven execution only.
- Acts purely as a dependency container; contains no altitude logic.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- threading (standard library)
- typing (standard library)
- altimeter_configuration.py
- simulation_controller.py
- sensor_support.py
- sims/pressure_simulator.py
"""

from dataclasses import dataclass
from threading import Event
from typing import Callable

from altimeter_configuration import AltimeterConfiguration
from simulation_controller import SimulationController
from sensor_support import SensorSubscription
from sims.pressure_simulator import PressureSimulator


@dataclass
class AppContext:
    controller: SimulationController
    config: AltimeterConfiguration
    clock: Callable[[], float]
    shutdown_event: Event

    sensor: PressureSimulator | None
    subscription: SensorSubscription

    def activate(self) -> None:
        # Host became active: subscribe to sensor samples.
        self.subscription.start()

    def deactivate(self) -> None:
        self.subscription.stop()

    def shutdown(self) -> None:
        self.shutdown_event.set()
