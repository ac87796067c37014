"""
Title: Altimeter Operating Mode Definitions (AltimeterMode Enum)
Date Created: 2026-10-12
Last Modified: 2026-10-12
Version: 1.0

Purpose:
Defines the set of operating modes used by the altimeter SimulationController.
The mode decides which input path is allowed to change the current pressure:
discrete simulated deltas (SIMULATION) or pressure sensor samples (LIVE).

Scope and Limitations:
- Exactly one mode is active at a time.
- SIMULATION is the start-up mode unless configured otherwise.
- No hierarchy or substates are modeled.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not a certified altimeter and must not be used for navigation.

Dependencies:
- Python 3.10+
- enum (standard library)
"""

from enum import Enum, auto

class AltimeterMode(Enum):
    SIMULATION = auto()
    LIVE = auto()
