"""
CSV logging for sampled trajectories.

Buffers rows in memory and writes in batches to minimize I/O overhead.
Implements context manager protocol for safe resource handling.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

if TYPE_CHECKING:
    from hooplab.core.simulation import ShotResult
    from hooplab.core.trajectory import TrajectorySample


class TrajectoryLogger:
    """
    Buffered CSV logger for trajectory samples.

    One row per sample: time, position components, distance to the basket
    center and whether that sample is inside the acceptance radius.

    Parameters
    ----------
    filepath : str | Path
        Output CSV file path
    buffer_size : int
        Number of rows to buffer before writing.

    Notes
    -----
    **Usage Patterns:**

    1. Context manager (recommended):
    >>> with TrajectoryLogger("shot.csv") as logger:
    ...     logger.log_result(result)

    2. Manual management:
    >>> logger = TrajectoryLogger("shot.csv")
    >>> for sample, d in zip(trajectory, distances):
    ...     logger.log(sample, d, d <= target.radius)
    >>> logger.close()  # Important!

    Output columns: ``t, x, y[, z], distance, in_basket``
    """

    def __init__(self, filepath: str | Path, buffer_size: int = 500) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be at least 1, got {buffer_size}")
        self.filepath = Path(filepath)
        self.buffer_size = buffer_size

        self._buffer: list[list[str]] = []
        self._file: TextIO | None = None
        self._writer: Any = None  # csv.writer is a function, not a type
        self._header_written = False
        self._dimensions: int | None = None

        self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def __enter__(self) -> TrajectoryLogger:
        """Open file for writing. Reopening starts a fresh file."""
        self._file = open(self.filepath, "w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file)
        self._header_written = False
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close file, flushing any remaining data."""
        self.close()

    def _write_header(self, dimensions: int) -> None:
        hdr = ["t", *"xyz"[:dimensions], "distance", "in_basket"]
        if self._writer:
            self._writer.writerow(hdr)
            if self._file:
                self._file.flush()
        self._dimensions = dimensions
        self._header_written = True

    def log(self, sample: TrajectorySample, distance: float, in_basket: bool) -> None:
        """
        Add one sample to the buffer.

        Automatically opens the file on first call if not using the
        context manager. Writes to disk when the buffer is full.
        """
        if self._file is None:
            self.__enter__()

        if not self._header_written:
            self._write_header(len(sample.position))
        elif len(sample.position) != self._dimensions:
            raise ValueError(
                f"Sample has {len(sample.position)} coordinates, "
                f"log was started with {self._dimensions}"
            )

        row = [f"{sample.t:.10f}"]
        row.extend(f"{c:.10e}" for c in sample.position)
        row.append(f"{distance:.10e}")
        row.append("1" if in_basket else "0")
        self._buffer.append(row)

        if len(self._buffer) >= self.buffer_size:
            self.flush()

    def log_result(self, result: ShotResult) -> None:
        """
        Log every sample of a finished shot.

        The header is written even when the trajectory is empty, so a
        shot that never left the floor still leaves a readable file.
        """
        from hooplab.core.evaluator import distances_to_target

        if self._file is None:
            self.__enter__()
        if not self._header_written:
            self._write_header(result.trajectory.dimensions)

        dist = distances_to_target(result.trajectory, result.target)
        entries = set(result.hit.entry_indices)
        for i, sample in enumerate(result.trajectory):
            self.log(sample, float(dist[i]), i in entries)

    def flush(self) -> None:
        """Write buffered data to disk and clear buffer."""
        if self._writer and self._buffer:
            self._writer.writerows(self._buffer)
            if self._file:
                self._file.flush()
            self._buffer.clear()

    def close(self) -> None:
        """Flush remaining data and close file."""
        self.flush()
        if self._file:
            self._file.close()
            self._file = None
            self._writer = None
