"""
Title: Altitude Depth Colour Mapping
Date Created: 2026-10-12
Last Modified: 2026-10-15
Version: 1.1

Purpose:
Maps an altitude estimate onto an RGB background colour used as a visual
"depth" cue: the higher the altitude, the darker the colour.

Scope and Limitations:
- Altitude is clamped to [-500, 3000] m before normalisation, so values
  outside that window saturate at the end colours.
- Channels are truncated toward zero, not rounded.
"""

RGB = tuple[int, int, int]

MIN_ALTITUDE_M = -500.0
MAX_ALTITUDE_M = 3000.0

# (base value, fade factor at full altitude)
_RED = (100.0, 0.8)
_GREEN = (150.0, 0.7)
_BLUE = (200.0, 0.5)


def _channel(base: float, fade: float, t: float) -> int:
    # Snap float noise (e.g. 19.999999999999996) before truncating.
    value = int(round(base * (1.0 - t * fade), 6))
    return max(0, min(value, 255))


def normalize_altitude(
    altitude_m: float,
    min_altitude_m: float = MIN_ALTITUDE_M,
    max_altitude_m: float = MAX_ALTITUDE_M,
) -> float:
    clamped = max(min_altitude_m, min(float(altitude_m), max_altitude_m))
    return (clamped - min_altitude_m) / (max_altitude_m - min_altitude_m)


def map_altitude_to_color(
    altitude_m: float,
    min_altitude_m: float = MIN_ALTITUDE_M,
    max_altitude_m: float = MAX_ALTITUDE_M,
) -> RGB:
    t = normalize_altitude(altitude_m, min_altitude_m, max_altitude_m)
    return (
        _channel(*_RED, t),
        _channel(*_GREEN, t),
        _channel(*_BLUE, t),
    )


def to_hex(color: RGB) -> str:
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}"
