"""
Scenario API: Fluent interface for defining and running shots.
"""
from __future__ import annotations

import math
from pathlib import Path

from hooplab.core.simulation import BasketShot, ShotResult
from hooplab.dynamics.kinematics import required_speed
from hooplab.dynamics.launch import (
    DEFAULT_ACCEPTANCE_RADIUS,
    GRAVITY,
    LaunchParameters,
    Target,
)
from hooplab.utils.io import load_shot_config

SAMPLING_PRESETS = {
    "default": {"dt": 0.05, "max_time": 3.0},
    "fine": {"dt": 0.01, "max_time": 5.0},
    "coarse": {"dt": 0.1, "max_time": 3.0},
}

# Thrower at the free-throw area, basket at regulation height
DEFAULT_LAUNCH = {
    "speed": 10.0,
    "angle_deg": 45.0,
    "position": (0.0, 1.5),
    "azimuth_deg": 0.0,
    "gravity": GRAVITY,
}
DEFAULT_BASKET = {"position": (8.0, 3.05), "radius": DEFAULT_ACCEPTANCE_RADIUS}


class Scenario:
    def __init__(self, name: str, output_dir: str = "output"):
        self.name = name
        self.output_dir = Path(output_dir)
        self._launch = dict(DEFAULT_LAUNCH)
        self._basket = dict(DEFAULT_BASKET)
        self._sampling = {**SAMPLING_PRESETS["default"], "ground_level": 0.0}
        self._logging = False
        self._plotting = False
        self._show_plots = False
        self.shot: BasketShot | None = None
        self.result: ShotResult | None = None

    @classmethod
    def from_config(cls, path: str, name: str | None = None, output_dir: str = "output") -> 'Scenario':
        """
        Build a scenario from a JSON shot config (see load_shot_config).
        """
        config = load_shot_config(path)
        scenario = cls(name or Path(path).stem, output_dir=output_dir)
        if "launch" in config:
            scenario.set_launch(**config["launch"])
        if "basket" in config:
            scenario.set_basket(**config["basket"])
        if "sampling" in config:
            sampling = dict(config["sampling"])
            scenario.configure_sampling(sampling.pop("preset", "default"), **sampling)
        return scenario

    def set_launch(
        self,
        speed: float | None = None,
        angle_deg: float | None = None,
        position: list[float] | None = None,
        azimuth_deg: float | None = None,
        gravity: float | None = None,
    ) -> 'Scenario':
        """
        Override parts of the throw. Anything left as None keeps its
        current value.
        """
        updates = dict(
            speed=speed, angle_deg=angle_deg, position=position,
            azimuth_deg=azimuth_deg, gravity=gravity,
        )
        self._launch.update({k: v for k, v in updates.items() if v is not None})
        return self

    def set_basket(self, position: list[float] | None = None, radius: float | None = None) -> 'Scenario':
        """Move the basket and/or change the acceptance radius."""
        if position is not None:
            self._basket["position"] = tuple(position)
        if radius is not None:
            self._basket["radius"] = radius
        return self

    def configure_sampling(self, preset: str = "default", **kwargs) -> 'Scenario':
        """
        Configure sampling with a preset and/or overrides.

        Presets: 'default', 'fine', 'coarse'
        Kwargs: dt, max_time, ground_level, max_steps
        """
        if preset not in SAMPLING_PRESETS:
            raise ValueError(
                f"Unknown sampling preset '{preset}'. "
                f"Options: {sorted(SAMPLING_PRESETS)}"
            )
        ground = self._sampling.get("ground_level", 0.0)
        self._sampling = {**SAMPLING_PRESETS[preset], "ground_level": ground}
        self._sampling.update(kwargs)
        return self

    def aim(self, angle_deg: float | None = None) -> 'Scenario':
        """
        Pick the launch speed that sends the ball through the basket
        center at the given (or current) elevation angle.

        Raises
        ------
        ValueError
            If the basket cannot be reached at that angle
        """
        if angle_deg is not None:
            self._launch["angle_deg"] = angle_deg
        params = self.launch_parameters()
        target = self.target()

        p0 = params.position
        q = target.position
        dy = q[1] - p0[1]
        if params.dimensions == 3 and len(q) == 3:
            dx = math.hypot(q[0] - p0[0], q[2] - p0[2])
            self._launch["azimuth_deg"] = math.degrees(math.atan2(q[2] - p0[2], q[0] - p0[0]))
        else:
            dx = q[0] - p0[0]

        v = required_speed(params.angle, dx, dy, params.gravity)
        if v is None:
            raise ValueError(
                f"Basket at ({dx:.2f}, {dy:.2f}) m is out of reach "
                f"at {params.angle_deg:.1f} deg"
            )
        self._launch["speed"] = v
        print(f"[Scenario] Aimed: v_0={v:.3f} m/s at {params.angle_deg:.1f} deg")
        return self

    def enable_logging(self) -> 'Scenario':
        self._logging = True
        return self

    def enable_plotting(self, show: bool = False) -> 'Scenario':
        """
        Save plots after the run. Implies logging.

        Parameters
        ----------
        show : bool
            If True, also display plots interactively.
        """
        self._logging = True
        self._plotting = True
        self._show_plots = show
        return self

    def launch_parameters(self) -> LaunchParameters:
        return LaunchParameters.from_degrees(
            self._launch["speed"],
            self._launch["angle_deg"],
            position=self._launch["position"],
            gravity=self._launch["gravity"],
            azimuth_deg=self._launch["azimuth_deg"],
        )

    def target(self) -> Target:
        return Target(self._basket["position"], self._basket["radius"])

    def build(self, verbose: bool = True) -> BasketShot:
        """Create the BasketShot without running it."""
        shot = BasketShot(
            self.launch_parameters(),
            self.target(),
            output_dir=self.output_dir,
            verbose=verbose,
            **self._sampling,
        )
        if self._logging:
            shot.enable_logging(self.name)
        return shot

    def run(self, verbose: bool = True) -> 'Scenario':
        if verbose:
            print(f"Running Scenario: {self.name}")
        self.shot = self.build(verbose=verbose)
        self.result = self.shot.run()
        if self._plotting:
            self.shot.save_plots(show=self._show_plots)
        return self
