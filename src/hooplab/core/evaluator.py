"""
Basket-hit evaluation.

Measures the Euclidean distance from every trajectory sample to the basket
center and decides whether the throw went in:

    dist = sqrt((p_x - q_x)² + (p_y - q_y)² + (p_z - q_z)²)

2D points are treated as lying in the z = 0 plane.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hooplab.dynamics.launch import Target

from .trajectory import Trajectory, TrajectorySample


class HitOutcome(Enum):
    MADE = "made"
    MISSED = "missed"


@dataclass(frozen=True)
class HitResult:
    """
    Outcome of a throw.

    Attributes
    ----------
    outcome : HitOutcome
        MADE if some sample lies within the acceptance radius
    min_distance : float
        Closest approach to the basket center [m]. inf when there were
        no samples.
    index : int | None
        First sample index at which ``min_distance`` occurs
    sample : TrajectorySample | None
        The sample at ``index``
    entry_indices : tuple[int, ...]
        All sample indices within the acceptance radius, ascending
    """

    outcome: HitOutcome
    min_distance: float
    index: int | None = None
    sample: TrajectorySample | None = None
    entry_indices: tuple[int, ...] = ()

    @property
    def made(self) -> bool:
        return self.outcome is HitOutcome.MADE


def _pad(points: NDArray[np.float64], width: int) -> NDArray[np.float64]:
    if points.shape[-1] == width:
        return points
    pad = [(0, 0)] * (points.ndim - 1) + [(0, width - points.shape[-1])]
    return np.pad(points, pad)


def euclidean_distance(p: ArrayLike, q: ArrayLike) -> NDArray[np.float64] | float:
    """
    Distance between point(s) p and point q.

    p may be a single point (d,) or a stack (N, d). A missing z coordinate
    on either side counts as 0.
    """
    p = np.asarray(p, dtype=np.float64)
    q = np.asarray(q, dtype=np.float64)
    width = max(p.shape[-1], q.shape[-1])
    dist = np.linalg.norm(_pad(p, width) - _pad(q, width), axis=-1)
    if dist.ndim == 0:
        return float(dist)
    return dist


def distances_to_target(trajectory: Trajectory, target: Target) -> NDArray[np.float64]:
    """Per-sample distance to the basket center [m], shape (N,)."""
    if trajectory.is_empty:
        return np.zeros(0)
    return euclidean_distance(trajectory.positions, target.position)


def evaluate(trajectory: Trajectory, target: Target) -> HitResult:
    """
    Decide whether a sampled trajectory enters the basket.

    Parameters
    ----------
    trajectory : Trajectory
        Output of the sampler
    target : Target
        Basket position and acceptance radius

    Returns
    -------
    HitResult
        MADE if the minimum distance is <= target.radius. An empty
        trajectory is a miss at infinite distance.
    """
    if trajectory.is_empty:
        return HitResult(outcome=HitOutcome.MISSED, min_distance=math.inf)

    dist = distances_to_target(trajectory, target)
    # argmin returns the first occurrence, so ties go to the earliest sample
    idx = int(np.argmin(dist))
    min_dist = float(dist[idx])
    entries = tuple(int(i) for i in np.flatnonzero(dist <= target.radius))

    return HitResult(
        outcome=HitOutcome.MADE if min_dist <= target.radius else HitOutcome.MISSED,
        min_distance=min_dist,
        index=idx,
        sample=trajectory[idx],
        entry_indices=entries,
    )
