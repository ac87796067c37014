#!/usr/bin/env python3
import argparse
import logging
import random
import signal
import threading
import time

from altimeter_configuration import AltimeterConfiguration
from altimeter_states import AltimeterMode
from app_context import AppContext
from sensor_support import (
    ReadingAnnunciator,
    SEA_LEVEL_REFERENCE_TEXT,
    SensorSubscription,
)
from simulation_controller import SimulationController
from sims.pressure_simulator import PressureSimulator


def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def setup_signal_handlers(ctx: AppContext):
    def _handle_shutdown(signum, frame):
        logging.info("Shutdown signal received (%s)", signum)
        ctx.shutdown()

    signal.signal(signal.SIGINT, _handle_shutdown)
    signal.signal(signal.SIGTERM, _handle_shutdown)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Barometric altimeter simulation")
    parser.add_argument("--live", action="store_true",
                        help="start in LIVE mode, driven by the simulated pressure sensor")
    parser.add_argument("--period", type=float, default=0.2,
                        help="sensor sample period in seconds (default 0.2)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the simulated pressure sensor")
    parser.add_argument("--no-sensor", action="store_true",
                        help="run as if no pressure sensor were present")
    return parser.parse_args(argv)


def initialize(
    live: bool = False,
    period_s: float = 0.2,
    seed: int | None = None,
    with_sensor: bool = True,
    clock=time.monotonic,
) -> AppContext:
    logging.info("Initializing application")

    config = AltimeterConfiguration(
        name="ALT-1",
        initial_mode=AltimeterMode.LIVE if live else AltimeterMode.SIMULATION,
    )
    config.validate()

    controller = SimulationController(config=config)

    sensor = None
    source = None
    if with_sensor:
        sensor = PressureSimulator(clock=clock, rng=random.Random(seed))
        source = sensor.read_event

    subscription = SensorSubscription(source, controller.on_sensor_event, period_s=period_s)

    ctx = AppContext(
        controller=controller,
        config=config,
        clock=clock,
        shutdown_event=threading.Event(),
        sensor=sensor,
        subscription=subscription,
    )
    return ctx


def display_loop(ctx: AppContext, loop_sleep: float = 0.5):
    logging.info("Starting display loop (tick=%.3fs)", loop_sleep)
    annunciator = ReadingAnnunciator()

    while not ctx.shutdown_event.is_set():
        try:
            annunciator(ctx.controller)
        except Exception:
            logging.exception("Unhandled exception in display loop")

        ctx.shutdown_event.wait(loop_sleep)

    logging.info("Display loop terminated")


def command_loop(ctx: AppContext):
    prompt = "[+]=+100m [-]=-100m [state]=print reading [q]=quit > "

    while not ctx.shutdown_event.is_set():
        try:
            cmd = input(prompt).strip().lower()
        except (EOFError, KeyboardInterrupt):
            ctx.shutdown()
            break

        if cmd == "+":
            if not ctx.controller.increase_altitude():
                print("Simulation controls unavailable in LIVE mode.")

        elif cmd == "-":
            if not ctx.controller.decrease_altitude():
                print("Simulation controls unavailable in LIVE mode.")

        elif cmd == "state":
            print(ctx.controller.snapshot())

        elif cmd == "q":
            ctx.shutdown()
            break

        elif cmd == "":
            continue

        else:
            print("Unknown command.")

    logging.info("Command loop terminated")


def main(argv=None):
    args = parse_args(argv)
    setup_logging()
    ctx = initialize(
        live=args.live,
        period_s=args.period,
        seed=args.seed,
        with_sensor=not args.no_sensor,
    )
    setup_signal_handlers(ctx)

    print(SEA_LEVEL_REFERENCE_TEXT)
    ctx.activate()

    t = threading.Thread(target=display_loop, args=(ctx,), kwargs={"loop_sleep": 0.5}, daemon=True)
    t.start()

    command_loop(ctx)

    ctx.deactivate()
    logging.info("Main loop terminated")


if __name__ == "__main__":
    main()
