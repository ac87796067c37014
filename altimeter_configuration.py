"""
Title: Altimeter Configuration Model (AltimeterConfiguration)
Date Created: 2026-10-12
Last Modified: 2026-10-14
Version: 1.1

Purpose:
Defines an immutable data model holding the reference constants and bounds
used by the altimeter core: the sea-level reference pressure, the pressure
window enforced while simulating, the simulated step size and the altitude
window used for the depth colour cue.

Scope and Limitations:
- Values are static and immutable once instantiated.
- Units are hPa for pressure and meters for altitude; no conversion is done.
- Live sensor readings are intentionally not bounded by this configuration.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not a certified altimeter and must not be used for navigation.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- altimeter_states.py
"""

from dataclasses import dataclass

from altimeter_states import AltimeterMode

@dataclass(frozen=True)
class AltimeterConfiguration:
    # Immutable altimeter reference configuration.
    name: str = "ALT-1"
    sea_level_pressure_hpa: float = 1013.25
    sim_min_pressure_hpa: float = 800.0
    sim_max_pressure_hpa: float = 1100.0
    sim_step_hpa: float = 10.0
    color_min_altitude_m: float = -500.0
    color_max_altitude_m: float = 3000.0
    initial_mode: AltimeterMode = AltimeterMode.SIMULATION
    initial_pressure_hpa: float = 1013.25

    def clamp_simulated_pressure(self, pressure_hpa: float) -> float:
        # Pure calculation, no side effects.
        return max(
            self.sim_min_pressure_hpa,
            min(float(pressure_hpa), self.sim_max_pressure_hpa),
        )

    def validate(self) -> None:
        if self.sea_level_pressure_hpa <= 0.0:
            raise ValueError(
                f"sea_level_pressure_hpa must be > 0 (got {self.sea_level_pressure_hpa})"
            )
        if self.sim_min_pressure_hpa >= self.sim_max_pressure_hpa:
            raise ValueError(
                "sim_min_pressure_hpa must be below sim_max_pressure_hpa "
                f"(got {self.sim_min_pressure_hpa} >= {self.sim_max_pressure_hpa})"
            )
        if self.sim_step_hpa <= 0.0:
            raise ValueError(f"sim_step_hpa must be > 0 (got {self.sim_step_hpa})")
        if self.color_min_altitude_m >= self.color_max_altitude_m:
            raise ValueError(
                "color_min_altitude_m must be below color_max_altitude_m "
                f"(got {self.color_min_altitude_m} >= {self.color_max_altitude_m})"
            )
        if not isinstance(self.initial_mode, AltimeterMode):
            raise ValueError(f"initial_mode must be an AltimeterMode (got {self.initial_mode!r})")
        if (
            self.initial_mode is AltimeterMode.SIMULATION
            and self.clamp_simulated_pressure(self.initial_pressure_hpa) != self.initial_pressure_hpa
        ):
            raise ValueError(
                f"initial_pressure_hpa={self.initial_pressure_hpa} is outside the simulated "
                f"window [{self.sim_min_pressure_hpa}, {self.sim_max_pressure_hpa}]"
            )

    def is_valid(self) -> bool:
        try:
            self.validate()
        except ValueError:
            return False
        return True
