import signal
import threading

import pytest

from altimeter_states import AltimeterMode
import main
from main import command_loop, display_loop, initialize, parse_args, setup_signal_handlers


class FakeClock:
    def __init__(self, start: float = 0.0):
        self._t = start

    def __call__(self) -> float:
        return self._t

    def advance(self, dt: float) -> None:
        self._t += dt


def test_parse_args_defaults():
    args = parse_args([])

    assert args.live is False
    assert args.period == 0.2
    assert args.seed is None
    assert args.no_sensor is False


def test_parse_args_flags():
    args = parse_args(["--live", "--period", "0.05", "--seed", "7", "--no-sensor"])

    assert args.live is True
    assert args.period == 0.05
    assert args.seed == 7
    assert args.no_sensor is True


def test_initialize_defaults_to_simulation_mode():
    ctx = initialize(clock=FakeClock(), seed=1)

    assert ctx.controller.mode is AltimeterMode.SIMULATION
    assert ctx.controller.pressure == 1013.25
    assert ctx.subscription.available is True
    assert ctx.shutdown_event.is_set() is False


def test_initialize_live_mode_consumes_sensor_samples():
    clock = FakeClock()
    ctx = initialize(live=True, seed=1, clock=clock)

    ctx.sensor.set_pressure_hpa(1000.0)
    ctx.subscription.step()

    assert ctx.controller.mode is AltimeterMode.LIVE
    assert ctx.controller.pressure == pytest.approx(1000.0)


def test_initialize_without_sensor():
    ctx = initialize(with_sensor=False, clock=FakeClock())

    assert ctx.sensor is None
    assert ctx.subscription.available is False

    ctx.activate()
    assert ctx.subscription.running is False


def test_display_loop_prints_and_exits_on_shutdown(capsys):
    ctx = initialize(clock=FakeClock(), seed=1)

    timer = threading.Timer(0.05, ctx.shutdown)
    timer.start()
    display_loop(ctx, loop_sleep=0.01)
    timer.join()

    assert ctx.shutdown_event.is_set() is True
    out = capsys.readouterr().out
    assert "ALT: 0.00 m  P: 1013.25 hPa  MODE: SIMULATION" in out


def feed_input(monkeypatch, lines):
    pending = list(lines)

    def fake_input(prompt=""):
        if not pending:
            raise EOFError
        return pending.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)


def test_command_loop_maps_plus_and_minus_to_pressure_steps(monkeypatch):
    ctx = initialize(clock=FakeClock(), seed=1)
    feed_input(monkeypatch, ["+", "+", "-", "q"])

    command_loop(ctx)

    assert ctx.controller.pressure == pytest.approx(1003.25)
    assert ctx.controller.altitude > 0.0
    assert ctx.shutdown_event.is_set() is True


def test_command_loop_rejects_simulation_controls_in_live_mode(monkeypatch, capsys):
    ctx = initialize(live=True, clock=FakeClock(), seed=1)
    feed_input(monkeypatch, ["+", "-", "q"])

    command_loop(ctx)

    out = capsys.readouterr().out.strip().splitlines()
    assert out == ["Simulation controls unavailable in LIVE mode."] * 2
    assert ctx.controller.pressure == 1013.25


def test_command_loop_state_unknown_and_eof(monkeypatch, capsys):
    ctx = initialize(clock=FakeClock(), seed=1)
    feed_input(monkeypatch, ["", "state", "bogus"])

    command_loop(ctx)

    out = capsys.readouterr().out.strip().splitlines()
    assert out[0].startswith("AltimeterReading(pressure_hpa=1013.25")
    assert out[1] == "Unknown command."
    assert ctx.shutdown_event.is_set() is True


def test_signal_handlers_request_shutdown(monkeypatch):
    installed = {}
    monkeypatch.setattr(main.signal, "signal", lambda signum, handler: installed.__setitem__(signum, handler))
    ctx = initialize(clock=FakeClock(), seed=1)

    setup_signal_handlers(ctx)

    assert set(installed) == {signal.SIGINT, signal.SIGTERM}
    installed[signal.SIGTERM](signal.SIGTERM, None)
    assert ctx.shutdown_event.is_set() is True
