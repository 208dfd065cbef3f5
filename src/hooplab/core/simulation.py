"""
Shot orchestrator: validate, sample, evaluate, and optionally log.

The computation itself is the pure pipeline
(LaunchParameters, Target, dt) -> (Trajectory, HitResult); BasketShot adds
boundary validation, terminal reporting and output organization around it.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from hooplab.dynamics.kinematics import ms_to_kmh
from hooplab.dynamics.launch import LaunchParameters, Target
from hooplab.logger import TrajectoryLogger
from hooplab.utils.validation import (
    validate_finite,
    validate_launch_parameters,
    validate_non_negative,
    validate_target,
    validate_timestep,
)

from .evaluator import HitResult, evaluate
from .sampler import DEFAULT_MAX_STEPS, DEFAULT_MAX_TIME, sample, sample_count
from .trajectory import Trajectory

# Default output directory
DEFAULT_OUTPUT_DIR = Path("output")
DEFAULT_DT = 0.05  # s, 3 s split into 60 steps


@dataclass(frozen=True)
class ShotResult:
    """Everything a renderer needs: inputs, samples and verdict."""

    params: LaunchParameters
    target: Target
    trajectory: Trajectory
    hit: HitResult

    @property
    def made(self) -> bool:
        return self.hit.made


class BasketShot:
    """
    A single throw at a basket.

    Parameters
    ----------
    params : LaunchParameters
        Throw definition. Checked at construction: speed > 0, all finite.
    target : Target
        Basket position and acceptance radius
    dt : float
        Sampling time step [s]
    max_time : float
        Longest flight that will be sampled [s]
    ground_level : float
        Floor height [m]; sampling stops once the ball is below it
    max_steps : int
        Hard cap on the number of samples
    simulation_name : str | None
        If given, logging is enabled under this name
    output_dir : Path | str | None
        Base directory for outputs. Defaults to "./output".
    auto_timestamp : bool
        Append a timestamp to the output folder name
    auto_save_plots : bool
        Save plots automatically after run() when logging is enabled
    verbose : bool
        Print progress and summary lines

    Attributes
    ----------
    result : ShotResult | None
        Result of the last run()
    logger : TrajectoryLogger | None
        Data logger, or None if logging disabled
    output_path : Path | None
        Path to the shot output directory

    Notes
    -----
    When logging is enabled, creates:
        output_dir/
            shot_name_20260109_101530/
                logs/
                    trajectory.csv
                plots/
                    trajectory.png
                    height.png

    Examples
    --------
    >>> params = LaunchParameters.from_degrees(10.0, 45.0, position=(0.0, 1.5))
    >>> shot = BasketShot(params, Target((8.0, 3.05)), dt=0.01)
    >>> result = shot.run()
    >>> result.made
    False
    """

    def __init__(
        self,
        params: LaunchParameters,
        target: Target,
        dt: float = DEFAULT_DT,
        max_time: float = DEFAULT_MAX_TIME,
        ground_level: float = 0.0,
        max_steps: int = DEFAULT_MAX_STEPS,
        simulation_name: str | None = None,
        output_dir: Path | str | None = None,
        auto_timestamp: bool = True,
        auto_save_plots: bool = False,
        verbose: bool = True,
    ) -> None:
        validate_launch_parameters(params)
        validate_target(target)
        validate_timestep(dt)
        validate_non_negative(max_time, "max_time")
        validate_finite(ground_level, "ground_level")

        self.params = params
        self.target = target
        self.dt = float(dt)
        self.max_time = float(max_time)
        self.ground_level = float(ground_level)
        self.max_steps = int(max_steps)
        self.verbose = verbose
        self.result: ShotResult | None = None

        self._simulation_name = simulation_name
        self._output_dir = Path(output_dir) if output_dir else DEFAULT_OUTPUT_DIR
        self._auto_timestamp = auto_timestamp
        self._auto_save_plots = auto_save_plots
        self.output_path: Path | None = None
        self.logger: TrajectoryLogger | None = None

        if simulation_name is not None:
            self.enable_logging(simulation_name)

    @classmethod
    def with_logging(
        cls,
        name: str,
        params: LaunchParameters,
        target: Target,
        output_dir: Path | str | None = None,
        auto_save_plots: bool = True,
        **kwargs,
    ) -> BasketShot:
        """Convenience factory to create a BasketShot with logging pre-enabled."""
        return cls(
            params,
            target,
            simulation_name=name,
            output_dir=output_dir,
            auto_timestamp=True,
            auto_save_plots=auto_save_plots,
            **kwargs,
        )

    def _echo(self, msg: str) -> None:
        if self.verbose:
            print(f"[BasketShot] {msg}")

    def enable_logging(self, name: str | None = None) -> Path:
        """
        Enable CSV logging with automatic output organization.

        Returns
        -------
        Path
            Path to the created output directory

        Raises
        ------
        ValueError
            If no simulation name available
        """
        if name is not None:
            self._simulation_name = name

        if self._simulation_name is None:
            raise ValueError(
                "Simulation name required for logging. "
                "Either pass name to __init__ or to enable_logging()."
            )

        if self._auto_timestamp:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            folder_name = f"{self._simulation_name}_{timestamp}"
        else:
            folder_name = self._simulation_name

        self.output_path = self._output_dir / folder_name
        logs_dir = self.output_path / "logs"
        plots_dir = self.output_path / "plots"
        logs_dir.mkdir(parents=True, exist_ok=True)
        plots_dir.mkdir(parents=True, exist_ok=True)

        self.logger = TrajectoryLogger(logs_dir / "trajectory.csv")

        self._echo(f"Logging enabled: {self.output_path}")
        return self.output_path

    def disable_logging(self) -> None:
        """Disable logging and close any open log file."""
        if self.logger is not None:
            self.logger.close()
            self.logger = None
            self._echo("Logging disabled")

    def run(self) -> ShotResult:
        """
        Sample the throw and evaluate it against the basket.

        Returns
        -------
        ShotResult
            Samples and verdict. Also stored on ``self.result``.
        """
        self._echo(
            f"Sampling: dt={self.dt}s, up to {self.max_time}s, "
            f"ground at y={self.ground_level}m"
        )
        trajectory = sample(
            self.params,
            self.dt,
            max_time=self.max_time,
            ground_level=self.ground_level,
            max_steps=self.max_steps,
        )
        hit = evaluate(trajectory, self.target)
        self.result = ShotResult(self.params, self.target, trajectory, hit)

        self._echo(f"{len(trajectory)} samples, closest approach {hit.min_distance:.3f}m")
        if trajectory.is_empty:
            self._echo("No samples above the floor, so the shot is a miss.")
        elif len(trajectory) == sample_count(self.dt, self.max_time, self.max_steps):
            self._echo(
                f"Sampling stopped at t={trajectory.t[-1]:.2f}s with the ball "
                f"still in the air at y={trajectory.y[-1]:.2f}m"
            )
        self._echo("Entered the basket!" if hit.made else "Missed the basket.")

        if self.logger is not None:
            try:
                self.logger.log_result(self.result)
            finally:
                self.logger.close()
            if self._auto_save_plots:
                self._echo("Auto-generating plots...")
                self.save_plots()

        return self.result

    def save_plots(self, show: bool = False) -> None:
        """
        Save trajectory and height plots from the logged CSV.

        Raises
        ------
        RuntimeError
            If logging is not enabled or nothing has been logged yet
        """
        if self.output_path is None:
            raise RuntimeError(
                "Logging must be enabled to save plots. "
                "Call enable_logging() or use BasketShot.with_logging()."
            )

        from hooplab.visualization.plotting import plot_height_vs_time, plot_trajectory

        csv_path = self.output_path / "logs" / "trajectory.csv"
        plots_dir = self.output_path / "plots"

        if not csv_path.exists():
            raise RuntimeError(
                f"No log file found at {csv_path}. "
                "Has the shot been run yet?"
            )

        plot_trajectory(
            csv_path,
            basket=self.target.position,
            save_path=plots_dir / "trajectory.png",
            show=show,
        )
        plot_height_vs_time(
            csv_path,
            basket_height=self.target.position[1],
            save_path=plots_dir / "height.png",
            show=show,
        )
        self._echo(f"Plots saved to: {plots_dir}")

    def summary(self) -> str:
        """Initial data and, after run(), the per-sample report."""
        p, b = self.params, self.target
        axes = "xyz"
        lines = ["Data:", "", "  Player throw position:"]
        lines += [f"    pos_0_{axes[i]}: {c:0.2f} m" for i, c in enumerate(p.position)]
        lines += [
            "",
            "  Initial velocity vector:",
            f"    v_0: {p.speed:0.2f} m/s",
            f"    v_0: {ms_to_kmh(p.speed):0.2f} km/h",
            f"    teta_0: {p.angle_deg:0.2f} deg (elevation)",
        ]
        if p.dimensions == 3:
            lines.append(f"    phi_0: {math.degrees(p.azimuth):0.2f} deg (heading)")
        lines += ["", "  Basket position:"]
        lines += [f"    basket_{axes[i]}: {c:0.2f} m" for i, c in enumerate(b.position)]
        lines.append(f"    acceptance radius: {b.radius:0.2f} m")
        lines += [
            "",
            "  Sampling:",
            f"    dt: {self.dt} s, max_time: {self.max_time:0.2f} s",
        ]

        if self.result is not None:
            hit = self.result.hit
            entries = set(hit.entry_indices)
            lines += ["", "Trajectory:", f"  Entered the basket: {hit.made}", ""]
            for i, s in enumerate(self.result.trajectory):
                coords = ", ".join(
                    f"{axes[k]}: {c:0.2f} m" for k, c in enumerate(s.position)
                )
                note = " ball entered the basket" if i in entries else ""
                lines.append(f"  t: {s.t:0.2f} s, {coords}{note}")
        return "\n".join(lines)

    def print_summary(self) -> None:
        print(self.summary())
