"""
Sampled trajectory containers.

A Trajectory is a time-ascending sequence of samples backed by numpy
arrays. It is produced by the sampler and never mutated afterwards.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class TrajectorySample:
    """Ball position at a single instant."""

    t: float
    position: tuple[float, ...]

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    @property
    def z(self) -> float:
        return self.position[2] if len(self.position) > 2 else 0.0


class Trajectory:
    """
    Ordered, read-only sequence of trajectory samples.

    Parameters
    ----------
    t : (N,) array
        Sample times [s], ascending
    positions : (N, d) array
        Sample positions [m], d = 2 or 3
    """

    def __init__(self, t: NDArray[np.float64], positions: NDArray[np.float64]) -> None:
        t = np.array(t, dtype=np.float64).reshape(-1)
        positions = np.array(positions, dtype=np.float64)
        if positions.ndim != 2:
            positions = positions.reshape(len(t), -1)
        if positions.shape[0] != t.shape[0]:
            raise ValueError(
                f"Got {t.shape[0]} times but {positions.shape[0]} positions"
            )
        t.setflags(write=False)
        positions.setflags(write=False)
        self._t = t
        self._positions = positions

    @classmethod
    def empty(cls, dimensions: int = 2) -> Trajectory:
        return cls(np.zeros(0), np.zeros((0, dimensions)))

    @property
    def t(self) -> NDArray[np.float64]:
        return self._t

    @property
    def positions(self) -> NDArray[np.float64]:
        return self._positions

    @property
    def dimensions(self) -> int:
        return self._positions.shape[1]

    @property
    def x(self) -> NDArray[np.float64]:
        return self._positions[:, 0]

    @property
    def y(self) -> NDArray[np.float64]:
        return self._positions[:, 1]

    @property
    def z(self) -> NDArray[np.float64]:
        if self.dimensions < 3:
            return np.zeros_like(self._t)
        return self._positions[:, 2]

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        return self._t.shape[0]

    def __getitem__(self, index: int) -> TrajectorySample:
        return TrajectorySample(
            t=float(self._t[index]),
            position=tuple(float(c) for c in self._positions[index]),
        )

    def __iter__(self) -> Iterator[TrajectorySample]:
        for i in range(len(self)):
            yield self[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trajectory):
            return NotImplemented
        return (
            np.array_equal(self._t, other._t)
            and np.array_equal(self._positions, other._positions)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Trajectory(samples={len(self)}, dimensions={self.dimensions})"

    def apex(self) -> TrajectorySample | None:
        """Highest sample (first one on ties), or None if empty."""
        if self.is_empty:
            return None
        return self[int(np.argmax(self.y))]

    def to_records(self) -> list[dict[str, float]]:
        """One dict per sample: {'t': ..., 'x': ..., 'y': ...[, 'z': ...]}."""
        axes = "xyz"[: self.dimensions]
        records = []
        for t, pos in zip(self._t, self._positions):
            row = {"t": float(t)}
            row.update({axis: float(c) for axis, c in zip(axes, pos)})
            records.append(row)
        return records
