import dataclasses

import pytest

from altimeter_configuration import AltimeterConfiguration
from altimeter_states import AltimeterMode


def test_defaults():
    config = AltimeterConfiguration()

    assert config.sea_level_pressure_hpa == 1013.25
    assert config.sim_min_pressure_hpa == 800.0
    assert config.sim_max_pressure_hpa == 1100.0
    assert config.sim_step_hpa == 10.0
    assert config.color_min_altitude_m == -500.0
    assert config.color_max_altitude_m == 3000.0
    assert config.initial_mode is AltimeterMode.SIMULATION
    assert config.initial_pressure_hpa == 1013.25
    assert config.is_valid() is True


def test_is_frozen_dataclass():
    config = AltimeterConfiguration()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.sim_step_hpa = 5.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "pressure, expected",
    [
        (700.0, 800.0),
        (800.0, 800.0),
        (950.5, 950.5),
        (1100.0, 1100.0),
        (1200.0, 1100.0),
    ],
)
def test_clamp_simulated_pressure(pressure, expected):
    assert AltimeterConfiguration().clamp_simulated_pressure(pressure) == expected


@pytest.mark.parametrize(
    "overrides",
    [
        {"sea_level_pressure_hpa": 0.0},
        {"sea_level_pressure_hpa": -1013.25},
        {"sim_min_pressure_hpa": 1100.0, "sim_max_pressure_hpa": 800.0},
        {"sim_min_pressure_hpa": 900.0, "sim_max_pressure_hpa": 900.0},
        {"sim_step_hpa": 0.0},
        {"color_min_altitude_m": 3000.0, "color_max_altitude_m": -500.0},
        {"initial_pressure_hpa": 700.0},
        {"initial_mode": "LIVE"},
    ],
)
def test_invalid_configuration_is_rejected(overrides):
    config = AltimeterConfiguration(**overrides)

    with pytest.raises(ValueError):
        config.validate()
    assert config.is_valid() is False


def test_live_start_may_use_pressure_outside_simulated_window():
    config = AltimeterConfiguration(initial_mode=AltimeterMode.LIVE, initial_pressure_hpa=700.0)
    config.validate()


def test_modes_are_distinct():
    assert AltimeterMode.SIMULATION != AltimeterMode.LIVE
    assert len(list(AltimeterMode)) == 2
