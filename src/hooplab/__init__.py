"""
HoopLab - Does the basketball go into the basket?

Samples the parabolic flight of a thrown ball from the closed-form
projectile equations and checks whether it passes through the basket.

Core Components
---------------
LaunchParameters : Throw definition (speed, angle, release point, gravity)
Target : Basket position and acceptance radius
sample : Fixed-timestep trajectory sampler
evaluate : Basket-hit evaluator
BasketShot : Validate, sample, evaluate, report and log

Examples
--------
>>> from hooplab import LaunchParameters, Target, sample, evaluate
>>> params = LaunchParameters.from_degrees(10.0, 45.0, gravity=9.8)
>>> hit = evaluate(sample(params, dt=0.01), Target((10.2, 0.0), radius=0.5))
>>> hit.made
True
"""

__version__ = "0.1.0"

from hooplab.core import (
    BasketShot,
    HitOutcome,
    HitResult,
    ShotResult,
    Trajectory,
    TrajectorySample,
    euclidean_distance,
    evaluate,
    sample,
    sample_at,
    time_steps,
)
from hooplab.dynamics import GRAVITY, LaunchParameters, Target
from hooplab.logger import TrajectoryLogger
from hooplab.utils.validation import InvalidParameterError
from hooplab.api.scenario import Scenario

__all__ = [
    # Version
    "__version__",
    # Inputs
    "GRAVITY",
    "LaunchParameters",
    "Target",
    # Core
    "Trajectory",
    "TrajectorySample",
    "sample",
    "sample_at",
    "time_steps",
    "HitOutcome",
    "HitResult",
    "euclidean_distance",
    "evaluate",
    "BasketShot",
    "ShotResult",
    # Errors
    "InvalidParameterError",
    # Logging
    "TrajectoryLogger",
    # API
    "Scenario",
]
