#!/usr/bin/env python3

import logging
import random
import threading
import time

from altimeter_configuration import AltimeterConfiguration
from altimeter_states import AltimeterMode
from app_context import AppContext
from color_mapper import to_hex
from sensor_support import (
    SEA_LEVEL_REFERENCE_TEXT,
    SensorSubscription,
    format_altitude,
    format_pressure,
)
from simulation_controller import SimulationController
from sims.pressure_sensor import PressureSensorEvent
from sims.pressure_simulator import PressureSimulator

_MODES = {
    "sim": AltimeterMode.SIMULATION,
    "simulation": AltimeterMode.SIMULATION,
    "live": AltimeterMode.LIVE,
}


def _print_status(ctx: AppContext) -> None:
    reading = ctx.controller.snapshot()
    print("\n=== STATUS ===")
    print(f"Mode: {reading.mode.name}")
    print(f"Altitude: {format_altitude(reading.altitude_m)}")
    print(f"Pressure: {format_pressure(reading.pressure_hpa)}")
    print(f"Color: {to_hex(ctx.controller.color())} {ctx.controller.color()}")
    print(f"SensorAvailable: {ctx.subscription.available}")
    print(f"SensorRunning: {ctx.subscription.running}")
    if ctx.sensor is not None:
        print(f"SensorPressure: {format_pressure(ctx.sensor.read_pressure_hpa())}")
    print(SEA_LEVEL_REFERENCE_TEXT)
    print("=============\n")


def _print_help() -> None:
    print(
        """
Commands
  help                         Print help
  q                            Quit

Sensor lifecycle
  run [period_s]               Start sensor subscription (default period unchanged)
  stop                         Stop sensor subscription
  step [n]                     Deliver n sensor samples (default 1)
  period <seconds>             Set sample period (min 0.01)

Simulation controls
  +                            +100m (pressure -10 hPa)
  -                            -100m (pressure +10 hPa)
  delta <hPa>                  Apply an arbitrary simulated pressure delta

Sensor input
  sens <hPa>                   Deliver one pressure sensor event
  sensor <hPa>                 Force the simulated sensor's pressure

Mode / display
  mode sim|live                Set operating mode
  state                        Print mode name
  status                       Print full status block
"""
    )


def build_context(clock=time.monotonic, rng: random.Random | None = None) -> AppContext:
    config = AltimeterConfiguration(name="ALT-CLI")
    controller = SimulationController(config=config)
    sensor = PressureSimulator(clock=clock, rng=rng)
    subscription = SensorSubscription(sensor.read_event, controller.on_sensor_event, period_s=0.2)

    return AppContext(
        controller=controller,
        config=config,
        clock=clock,
        shutdown_event=threading.Event(),
        sensor=sensor,
        subscription=subscription,
    )


def execute(ctx: AppContext, cmd: str) -> bool:
    # Run one command line; returns False when the shell should exit.
    parts = cmd.split()
    if not parts:
        return True

    op = parts[0].lower()
    controller = ctx.controller

    if op in ("q", "quit", "exit"):
        return False

    if op in ("help", "?"):
        _print_help()
        return True

    if op == "run":
        if len(parts) >= 2:
            ctx.subscription.set_period(float(parts[1]))
        ctx.activate()
        print(f"Sensor running: {ctx.subscription.running}")
        return True

    if op == "stop":
        ctx.deactivate()
        print("Sensor stopped")
        return True

    if op == "period":
        if len(parts) != 2:
            print("Usage: period <seconds>")
            return True
        ctx.subscription.set_period(float(parts[1]))
        print(f"Sample period set to {ctx.subscription.period_s:.3f}s")
        return True

    if op == "step":
        n = int(parts[1]) if len(parts) >= 2 else 1
        delivered = ctx.subscription.step(n)
        print(f"Delivered {delivered} samples")
        return True

    if op == "+":
        print(f"+100m accepted: {controller.increase_altitude()}")
        return True

    if op == "-":
        print(f"-100m accepted: {controller.decrease_altitude()}")
        return True

    if op == "delta":
        if len(parts) != 2:
            print("Usage: delta <hPa>")
            return True
        print(f"Delta accepted: {controller.apply_simulated_delta(float(parts[1]))}")
        return True

    if op == "sens":
        if len(parts) != 2:
            print("Usage: sens <hPa>")
            return True
        event = PressureSensorEvent.pressure(float(parts[1]), ctx.clock())
        print(f"Reading accepted: {controller.on_sensor_event(event)}")
        return True

    if op == "sensor":
        if len(parts) != 2 or ctx.sensor is None:
            print("Usage: sensor <hPa>")
            return True
        ctx.sensor.set_pressure_hpa(float(parts[1]))
        print(f"Sensor pressure set to {format_pressure(ctx.sensor.read_pressure_hpa())}")
        return True

    if op == "mode":
        if len(parts) != 2 or parts[1].lower() not in _MODES:
            print("Usage: mode sim|live")
            return True
        controller.set_mode(_MODES[parts[1].lower()])
        print(f"Mode set to {controller.mode.name}")
        return True

    if op == "state":
        print(controller.mode.name)
        return True

    if op == "status":
        _print_status(ctx)
        return True

    print("Unknown command. Type 'help'.")
    return True


def main() -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    ctx = build_context()

    _print_help()
    while True:
        try:
            cmd = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        try:
            if not execute(ctx, cmd):
                break
        except ValueError as e:
            print(f"Invalid input: {e}")

    ctx.deactivate()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
