"""
Immutable value types describing a throw and the basket it aims at.

Coordinates: x points from the thrower toward the basket, y is up,
z is lateral. Two-dimensional throws simply omit z.

Physical units:
- Positions: meters [m]
- Speeds: meters per second [m/s]
- Angles: radians [rad] (use ``from_degrees`` for degree input)
- Gravity: positive magnitude, applied downward [m/s²]
"""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from hooplab.utils.validation import validate_target

GRAVITY = 9.807  # m/s², standard gravity
DEFAULT_ACCEPTANCE_RADIUS = 0.1  # m, ball center within 10 cm of the rim center


def _as_point(position) -> tuple[float, ...]:
    return tuple(float(c) for c in position)


@dataclass(frozen=True)
class LaunchParameters:
    """
    Initial conditions of a throw.

    Parameters
    ----------
    speed : float
        Initial speed v0 [m/s]. Zero and negative values are accepted by
        the sampler; the boundary rejects them.
    angle : float
        Elevation above the horizontal, from +x toward +y [rad]
    position : tuple[float, ...]
        Release point (x, y) or (x, y, z) [m]
    gravity : float
        Magnitude of gravitational acceleration [m/s²]
    azimuth : float
        Horizontal heading from +x toward +z [rad]. Ignored in 2D.

    Examples
    --------
    >>> params = LaunchParameters.from_degrees(10.0, 45.0, position=(0.0, 1.5))
    >>> params.dimensions
    2
    """

    speed: float
    angle: float
    position: tuple[float, ...] = (0.0, 0.0)
    gravity: float = GRAVITY
    azimuth: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "speed", float(self.speed))
        object.__setattr__(self, "angle", float(self.angle))
        object.__setattr__(self, "position", _as_point(self.position))
        object.__setattr__(self, "gravity", float(self.gravity))
        object.__setattr__(self, "azimuth", float(self.azimuth))
        if len(self.position) not in (2, 3):
            raise ValueError(
                f"position must have 2 or 3 coordinates, got {len(self.position)}"
            )

    @classmethod
    def from_degrees(
        cls,
        speed: float,
        angle_deg: float,
        position=(0.0, 0.0),
        gravity: float = GRAVITY,
        azimuth_deg: float = 0.0,
    ) -> LaunchParameters:
        """Build parameters from angles given in degrees."""
        return cls(
            speed=speed,
            angle=math.radians(angle_deg),
            position=position,
            gravity=gravity,
            azimuth=math.radians(azimuth_deg),
        )

    @property
    def dimensions(self) -> int:
        return len(self.position)

    @property
    def angle_deg(self) -> float:
        return math.degrees(self.angle)

    @property
    def velocity(self) -> NDArray[np.float64]:
        """Initial velocity components (v0_x, v0_y[, v0_z]) [m/s]."""
        horizontal = self.speed * math.cos(self.angle)
        vx = horizontal * math.cos(self.azimuth)
        vy = self.speed * math.sin(self.angle)
        if self.dimensions == 2:
            return np.array([vx, vy], dtype=np.float64)
        vz = horizontal * math.sin(self.azimuth)
        return np.array([vx, vy, vz], dtype=np.float64)


@dataclass(frozen=True)
class Target:
    """
    The basket: a fixed point plus an acceptance radius.

    Raises
    ------
    InvalidParameterError
        If the radius is not positive or a coordinate is not finite
    """

    position: tuple[float, ...]
    radius: float = DEFAULT_ACCEPTANCE_RADIUS

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _as_point(self.position))
        object.__setattr__(self, "radius", float(self.radius))
        validate_target(self)

    @property
    def dimensions(self) -> int:
        return len(self.position)
