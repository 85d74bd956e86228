"""
Configuration & Physical Constants
==================================
This module serves as the central registry for the constants used by the
depth solver and its collaborators.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (gravity, the speed of sound
   coefficients, the reaction-time perturbation) from being scattered
   throughout the code.
2. Consistency: The solver, the trajectory sampler and the tests all read the
   same values.

Exports:
    GRAVITY (float): Standard gravitational acceleration in m/s².
    SPEED_OF_SOUND_AT_ZERO_C (float): Speed of sound in air at 0 °C in m/s.
    SPEED_OF_SOUND_SLOPE (float): Increase of the speed of sound per °C.
    METERS_TO_FEET (float): Exact meters-to-feet multiplier.
    REACTION_TIME_S (float): Timing perturbation used for the error margin.
"""

# Physics
GRAVITY: float = 9.80665  # m/s²
SPEED_OF_SOUND_AT_ZERO_C: float = 331.3  # m/s
SPEED_OF_SOUND_SLOPE: float = 0.606  # m/s per °C

# Units
METERS_TO_FEET: float = 3.28084

# Human stopwatch uncertainty (press/release reaction time)
REACTION_TIME_S: float = 0.15  # s

# Trajectory sampling
TRAJECTORY_SEGMENTS: int = 20

# Recent drops kept by a caller
HISTORY_LENGTH: int = 5
HISTORY_MIN_DEPTH_M: float = 0.01  # m

# Typical range of the temperature control, in °C
TEMPERATURE_RANGE_C: tuple[float, float] = (-20.0, 50.0)
