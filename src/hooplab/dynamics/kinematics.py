"""
Closed-form projectile motion.

Uniformly accelerated movement, decomposed into components:

    v0_x = v0 cos(theta) cos(phi)
    v0_y = v0 sin(theta)
    v0_z = v0 cos(theta) sin(phi)

    x(t) = x0 + v0_x t
    y(t) = y0 + v0_y t - g t² / 2
    z(t) = z0 + v0_z t

No drag, no spin. Everything here is evaluated directly from t, so there
is no accumulated integration error.
"""
from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .launch import LaunchParameters


def position_at(params: LaunchParameters, t: ArrayLike) -> NDArray[np.float64]:
    """
    Evaluate the ball position at time(s) t.

    Parameters
    ----------
    params : LaunchParameters
        Throw definition
    t : float or (N,) array
        Time(s) since release [s]

    Returns
    -------
    NDArray[np.float64]
        (d,) for scalar t, (N, d) for an array of times
    """
    times = np.asarray(t, dtype=np.float64)
    p0 = np.asarray(params.position, dtype=np.float64)
    v0 = params.velocity

    pos = p0 + np.multiply.outer(times, v0)
    pos[..., 1] -= 0.5 * params.gravity * times**2
    return pos


def time_to_apex(params: LaunchParameters) -> float:
    """
    Time at which vertical velocity is zero [s].

    0 if thrown downward, inf if rising with no gravity pulling it back.
    """
    vy = params.speed * math.sin(params.angle)
    if vy <= 0:
        return 0.0
    if params.gravity <= 0:
        return math.inf
    return vy / params.gravity


def apex_height(params: LaunchParameters) -> float:
    """Highest y reached during flight [m]. inf if it never turns over."""
    vy = params.speed * math.sin(params.angle)
    y0 = params.position[1]
    if vy <= 0:
        return y0
    if params.gravity <= 0:
        return math.inf
    return y0 + vy**2 / (2.0 * params.gravity)


def time_of_flight(params: LaunchParameters, ground_level: float = 0.0) -> float | None:
    """
    Time when the ball comes back down to ``ground_level`` [s].

    Solves y0 + vy t - g t² / 2 = ground_level for the larger root.
    Returns None if the release point is already below ground, or if
    gravity is not a positive magnitude.
    """
    vy = params.speed * math.sin(params.angle)
    h = params.position[1] - ground_level
    if h < 0 or params.gravity <= 0:
        return None
    disc = vy**2 + 2.0 * params.gravity * h
    return (vy + math.sqrt(disc)) / params.gravity


def horizontal_range(params: LaunchParameters, ground_level: float = 0.0) -> float | None:
    """Horizontal distance covered before landing [m]."""
    flight = time_of_flight(params, ground_level)
    if flight is None:
        return None
    return abs(params.speed * math.cos(params.angle)) * flight


def required_speed(angle: float, dx: float, dy: float, gravity: float) -> float | None:
    """
    Launch speed needed at a fixed angle to pass through a point.

    The point is offset (dx, dy) from the release point, dx > 0.

        v² = g dx² / (2 cos²(theta) (dx tan(theta) - dy))

    Returns None when no speed reaches the point at this angle.
    """
    if dx <= 0 or gravity <= 0:
        return None
    cos_t = math.cos(angle)
    denom = 2.0 * cos_t * cos_t * (dx * math.tan(angle) - dy)
    if denom <= 0:
        return None
    v = math.sqrt(gravity * dx * dx / denom)
    if not math.isfinite(v):
        return None
    return v


def ms_to_kmh(speed: float) -> float:
    """Convert m/s to km/h."""
    return speed * 3_600.0 / 1_000.0
