"""
Validation utilities for launch and basket parameters.

Inputs are checked at the boundary, before the sampler runs. The sampler
itself accepts any finite numbers, so these helpers are where bad input
(NaN, infinities, a ball thrown at zero speed) gets rejected.
"""
from __future__ import annotations

import math
import warnings
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from hooplab.dynamics.launch import LaunchParameters, Target

# Above this step the sampled path gets visibly jagged [s]
MAX_REASONABLE_DT = 0.1


class InvalidParameterError(ValueError):
    """Raised when a numeric input cannot be used for a simulation."""


def validate_finite(value: float, name: str) -> None:
    """
    Validate that a scalar is a finite number.

    Raises
    ------
    InvalidParameterError
        If value is NaN or infinite, or not a number at all
    """
    try:
        ok = math.isfinite(value)
    except TypeError:
        raise InvalidParameterError(f"{name} must be a number, got {value!r}") from None
    if not ok:
        raise InvalidParameterError(f"{name} must be finite, got {value}")


def validate_point(point: Iterable[float], name: str) -> None:
    """Validate that a point has 2 or 3 finite coordinates."""
    coords = tuple(point)
    if len(coords) not in (2, 3):
        raise InvalidParameterError(
            f"{name} must have 2 or 3 coordinates, got {len(coords)}"
        )
    for axis, value in zip("xyz", coords):
        validate_finite(value, f"{name}.{axis}")


def validate_positive(value: float, name: str, strict: bool = True) -> None:
    """
    Validate that a scalar value is finite and positive.

    Parameters
    ----------
    value : float
        Value to validate
    name : str
        Parameter name for error messages
    strict : bool
        If True, raise InvalidParameterError. If False, issue warning.

    Raises
    ------
    InvalidParameterError
        If value is not finite, or strict=True and value <= 0
    """
    validate_finite(value, name)
    if value <= 0:
        msg = f"{name} must be positive, got {value}"
        if strict:
            raise InvalidParameterError(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=2)


def validate_non_negative(value: float, name: str) -> None:
    """Validate that a value is finite and non-negative."""
    validate_finite(value, name)
    if value < 0:
        raise InvalidParameterError(f"{name} must be non-negative, got {value}")


def validate_timestep(dt: float, max_dt: float = MAX_REASONABLE_DT) -> None:
    """
    Validate timestep is positive and reasonable.

    Parameters
    ----------
    dt : float
        Time step [s]
    max_dt : float
        Largest step that still draws a smooth arc [s]

    Raises
    ------
    InvalidParameterError
        If timestep is not finite or not positive
    """
    validate_finite(dt, "dt")
    if dt <= 0:
        raise InvalidParameterError(f"Timestep must be positive, got {dt}")
    if dt > max_dt:
        warnings.warn(
            f"Large timestep {dt}s gives a coarse trajectory. "
            f"Consider using dt <= {max_dt}s.",
            RuntimeWarning,
            stacklevel=2
        )


def validate_launch_parameters(params: LaunchParameters) -> None:
    """
    Boundary check for a throw.

    Speed must be finite and positive, angles and gravity finite. An
    elevation outside [0, pi/2] is legal (throwing downward or backward)
    and only warns.
    """
    validate_positive(params.speed, "speed")
    validate_finite(params.angle, "angle")
    validate_finite(params.azimuth, "azimuth")
    validate_finite(params.gravity, "gravity")
    validate_point(params.position, "position")
    if not 0.0 <= params.angle <= math.pi / 2:
        warnings.warn(
            f"Launch angle {math.degrees(params.angle):.2f} deg is outside "
            "[0, 90] deg; the ball is thrown downward or backward.",
            RuntimeWarning,
            stacklevel=2
        )


def validate_target(target: Target) -> None:
    """Boundary check for the basket: finite position and radius > 0."""
    validate_point(target.position, "basket position")
    validate_positive(target.radius, "acceptance radius")
