"""
Depth Solver
============
Recovers the depth of a shaft from the total time between releasing an object
and hearing the impact.

The observed time is the sum of two legs over the same height ``h``::

    T = t_fall + t_sound = sqrt(2h/g) + h/v_s

Substituting ``u = sqrt(h)`` turns this into the quadratic
``(1/v_s) u² + sqrt(2/g) u - T = 0``, which is solved in closed form.

Out-of-domain inputs:
    The solver never raises for real-valued inputs. A temperature that drives
    the speed of sound to zero or below is not clamped; the literal formula is
    evaluated in float64 and its IEEE result (usually ``nan``) is returned and
    a warning is logged. Callers that want to reject such inputs up front can
    use :func:`validate_inputs`.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Optional

import numpy as np

from deepdrop.config import (
    GRAVITY, SPEED_OF_SOUND_AT_ZERO_C, SPEED_OF_SOUND_SLOPE, REACTION_TIME_S
)
from deepdrop.utils import meters_to_feet

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DepthResult:
    """
    Outcome of a single depth calculation.

    Attributes:
        depth_meters: Depth of the shaft in meters.
        depth_feet: The same depth in feet.
        fall_time_seconds: Time spent in free fall.
        sound_time_seconds: Time for the impact sound to travel back up.
        speed_of_sound_meters_per_second: Speed of sound used for the sound leg.
        error_margin_meters: Half of the depth spread caused by shifting the
            measured time by the reaction-time perturbation in both directions.
    """
    depth_meters: float
    depth_feet: float
    fall_time_seconds: float
    sound_time_seconds: float
    speed_of_sound_meters_per_second: float
    error_margin_meters: float

    @property
    def total_time_seconds(self) -> float:
        return self.fall_time_seconds + self.sound_time_seconds


def speed_of_sound(
    temperature_celsius: float | npt.NDArray[np.float64],
) -> float | npt.NDArray[np.float64]:
    """
    Linear approximation of the speed of sound in air.

    Args:
        temperature_celsius: Air temperature in °C. Not clamped.

    Returns:
        Speed of sound in m/s.
    """
    return SPEED_OF_SOUND_AT_ZERO_C + SPEED_OF_SOUND_SLOPE * temperature_celsius


def solve_height(
    elapsed_time: float | npt.NDArray[np.float64],
    speed_of_sound: float | npt.NDArray[np.float64],
    gravity: float = GRAVITY,
) -> float | npt.NDArray[np.float64]:
    """
    Invert ``T = sqrt(2h/g) + h/v_s`` for the height ``h``.

    Args:
        elapsed_time: Total time(s) from release to hearing the impact, in seconds.
        speed_of_sound: Speed of sound in m/s.
        gravity: Gravitational acceleration in m/s².

    Returns:
        Height in meters. Exactly 0 wherever ``elapsed_time <= 0``. A float for
        scalar inputs, an array otherwise.
    """
    t = np.asarray(elapsed_time, dtype=np.float64)
    v_s = np.asarray(speed_of_sound, dtype=np.float64)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        a = 1.0 / v_s
        b = np.sqrt(2.0 / gravity)
        c = -t
        # With t > 0 and v_s > 0 we have a > 0 and c < 0, hence
        # b² - 4ac > b² >= 0 and sqrt(b² - 4ac) > b: the "+" root is positive
        # and the "-" root is negative, so only the "+" root is a valid sqrt(h).
        u = (-b + np.sqrt(b * b - 4.0 * a * c)) / (2.0 * a)
        height = np.where(t > 0.0, u * u, 0.0)

    if np.ndim(height) == 0:
        return float(height)
    return height


def elapsed_time_for_depth(
    depth: float | npt.NDArray[np.float64],
    speed_of_sound: float | npt.NDArray[np.float64],
    gravity: float = GRAVITY,
) -> float | npt.NDArray[np.float64]:
    """
    Forward model: time from release to hearing the impact for a given depth.

    Args:
        depth: Depth in meters (>= 0).
        speed_of_sound: Speed of sound in m/s.
        gravity: Gravitational acceleration in m/s².

    Returns:
        Total elapsed time in seconds.
    """
    return np.sqrt(2.0 * depth / gravity) + depth / speed_of_sound


def calculate(total_elapsed_time: float, temperature_celsius: float) -> DepthResult:
    """
    Estimate the shaft depth for one measured drop.

    Args:
        total_elapsed_time: Time from release to hearing the impact, in seconds.
        temperature_celsius: Ambient air temperature in °C.

    Returns:
        A fresh DepthResult. For ``total_elapsed_time <= 0`` every field is zero
        except the speed of sound.
    """
    v_s = float(speed_of_sound(temperature_celsius))
    if v_s <= 0.0:
        logger.warning(
            f"Speed of sound is {v_s:.3f} m/s at {temperature_celsius} °C; "
            f"the depth estimate is not physically meaningful."
        )

    if total_elapsed_time <= 0:
        return DepthResult(
            depth_meters=0.0,
            depth_feet=0.0,
            fall_time_seconds=0.0,
            sound_time_seconds=0.0,
            speed_of_sound_meters_per_second=v_s,
            error_margin_meters=0.0,
        )

    height = solve_height(total_elapsed_time, v_s)

    low = solve_height(max(0.0, total_elapsed_time - REACTION_TIME_S), v_s)
    high = solve_height(total_elapsed_time + REACTION_TIME_S, v_s)
    error_margin = (high - low) / 2.0

    with np.errstate(divide="ignore", invalid="ignore"):
        sound_time = float(np.divide(height, v_s))
    fall_time = total_elapsed_time - sound_time

    logger.debug(
        f"T={total_elapsed_time:.3f} s, {temperature_celsius} °C -> "
        f"h={height:.3f} m (±{error_margin:.3f} m), fall={fall_time:.3f} s, sound={sound_time:.3f} s"
    )

    return DepthResult(
        depth_meters=height,
        depth_feet=meters_to_feet(height),
        fall_time_seconds=fall_time,
        sound_time_seconds=sound_time,
        speed_of_sound_meters_per_second=v_s,
        error_margin_meters=error_margin,
    )


def validate_inputs(
    total_elapsed_time: float,
    temperature_celsius: float,
    temperature_range: Optional[tuple[float, float]] = None,
) -> None:
    """
    Reject measurements that would give a physically meaningless depth.

    :func:`calculate` does not call this; it is meant for callers that take
    their inputs from a user.

    Args:
        total_elapsed_time: Measured time in seconds.
        temperature_celsius: Air temperature in °C.
        temperature_range: Optional inclusive (low, high) bounds in °C.

    Raises:
        ValueError: If any input is out of its meaningful domain.
    """
    if not np.isfinite(total_elapsed_time):
        raise ValueError(f"Elapsed time must be finite, got {total_elapsed_time}.")
    if total_elapsed_time < 0:
        raise ValueError(f"Elapsed time must not be negative, got {total_elapsed_time} s.")
    if not np.isfinite(temperature_celsius):
        raise ValueError(f"Temperature must be finite, got {temperature_celsius}.")

    if temperature_range is not None:
        low, high = temperature_range
        if not low <= temperature_celsius <= high:
            raise ValueError(
                f"Temperature {temperature_celsius} °C is outside the range {low} to {high} °C."
            )

    if speed_of_sound(temperature_celsius) <= 0:
        raise ValueError(
            f"Temperature {temperature_celsius} °C gives a non-positive speed of sound."
        )
