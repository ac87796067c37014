"""
Title: Barometric Altitude Calculation
Date Created: 2026-10-12
Last Modified: 2026-10-18
Version: 1.1

Purpose:
Converts a static pressure reading into an estimated altitude using the
international barometric formula, referenced to a fixed sea-level pressure:

    h = 44330 * (1 - (P / P0) ** (1 / 5.255))

and the inverse, used by the simulated sensor to publish pressure for a
known altitude:

    P = P0 * (1 - h / 44330) ** 5.255

Scope and Limitations:
- No validation is performed; callers bound the input where required.
- Pressure above P0 yields a negative altitude.
- Pressure of 0 yields 44330 m. Negative pressure is outside the formula's
  domain and math.pow raises ValueError for it.
- Altitudes above 44330 m are outside the inverse formula's domain.

Dependencies:
- Python 3.10+
- math (standard library)
"""

import math

SEA_LEVEL_PRESSURE_HPA = 1013.25

_SCALE_M = 44330.0
_EXPONENT = 1.0 / 5.255


def compute_altitude(pressure_hpa: float, sea_level_hpa: float = SEA_LEVEL_PRESSURE_HPA) -> float:
    # Pure calculation, no side effects.
    return _SCALE_M * (1.0 - math.pow(pressure_hpa / sea_level_hpa, _EXPONENT))


def compute_pressure(altitude_m: float, sea_level_hpa: float = SEA_LEVEL_PRESSURE_HPA) -> float:
    # Inverse of compute_altitude.
    return sea_level_hpa * math.pow(1.0 - altitude_m / _SCALE_M, 1.0 / _EXPONENT)
