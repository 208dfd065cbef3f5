"""
Fixed-timestep trajectory sampler.

Samples the closed-form projectile equations at t = k * dt. Sampling ends
at the first landed sample or at whichever of max_time and max_steps
comes first.
"""
from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from hooplab.dynamics.kinematics import position_at
from hooplab.dynamics.launch import LaunchParameters
from hooplab.utils.validation import (
    InvalidParameterError,
    validate_finite,
    validate_non_negative,
    validate_positive,
    validate_timestep,
)

from .trajectory import Trajectory

DEFAULT_MAX_TIME = 3.0  # s
DEFAULT_MAX_STEPS = 100_000
EPSILON_TIME = 1e-9  # Slack so max_time itself is sampled despite rounding


def _cut_at_ground(params: LaunchParameters, t, positions, ground_level: float):
    # Landed: below the floor, or on it and not rising
    vy = params.velocity[1] - params.gravity * t
    y = positions[:, 1]
    landed = (y < ground_level) | ((y <= ground_level) & (vy <= 0))
    if landed.any():
        n = int(np.argmax(landed))
        return t[:n], positions[:n]
    return t, positions


def sample_count(dt: float, max_time: float, max_steps: int) -> int:
    """Number of samples the time and step bounds allow, before any ground cut."""
    return min(int(math.floor(max_time / dt + EPSILON_TIME)) + 1, int(max_steps))


def sample(
    params: LaunchParameters,
    dt: float,
    max_time: float = DEFAULT_MAX_TIME,
    ground_level: float = 0.0,
    max_steps: int = DEFAULT_MAX_STEPS,
) -> Trajectory:
    """
    Sample a throw at a fixed time step.

    Parameters
    ----------
    params : LaunchParameters
        Throw definition. Any finite values are accepted.
    dt : float
        Time step [s], > 0
    max_time : float
        Last instant that may be sampled [s]
    ground_level : float
        Height of the floor [m]. The first sample below it, or resting
        on it without rising, ends the trajectory and is not included.
    max_steps : int
        Hard cap on the number of samples

    Returns
    -------
    Trajectory
        Time-ascending samples. Empty if the ball starts below ground
        or lies on it without upward speed.

    Raises
    ------
    InvalidParameterError
        If dt, max_time or max_steps are unusable
    """
    validate_timestep(dt)
    validate_non_negative(max_time, "max_time")
    validate_finite(ground_level, "ground_level")
    if max_steps < 1:
        raise InvalidParameterError(f"max_steps must be at least 1, got {max_steps}")

    n = sample_count(dt, max_time, max_steps)
    t = np.arange(n, dtype=np.float64) * dt
    positions = position_at(params, t)
    t, positions = _cut_at_ground(params, t, positions, ground_level)
    return Trajectory(t, positions)


def sample_at(
    params: LaunchParameters,
    times: ArrayLike,
    ground_level: float | None = None,
) -> Trajectory:
    """
    Sample a throw at the given instants.

    Parameters
    ----------
    times : (N,) array
        Non-negative, ascending sample times [s]
    ground_level : float | None
        If given, cut the trajectory at the first sample below it
    """
    t = np.asarray(times, dtype=np.float64).reshape(-1)
    if t.size and (t[0] < 0 or np.any(np.diff(t) < 0)):
        raise InvalidParameterError("Sample times must be non-negative and ascending")
    positions = position_at(params, t).reshape(t.size, params.dimensions)
    if ground_level is not None:
        t, positions = _cut_at_ground(params, t, positions, ground_level)
    return Trajectory(t, positions)


def time_steps(duration: float, num_steps: int) -> np.ndarray:
    """
    Divide ``duration`` seconds into ``num_steps`` equally spaced instants.

    Both 0 and ``duration`` are included.
    """
    validate_positive(duration, "duration")
    if num_steps < 2:
        raise InvalidParameterError(f"num_steps must be at least 2, got {num_steps}")
    return np.linspace(0.0, duration, num_steps)
