"""Utility functions for HoopLab shots."""

from .io import load_shot_config, load_trajectory_history, save_trajectory_history
from .validation import (
    InvalidParameterError,
    validate_finite,
    validate_launch_parameters,
    validate_non_negative,
    validate_point,
    validate_positive,
    validate_target,
    validate_timestep,
)

__all__ = [
    "save_trajectory_history",
    "load_trajectory_history",
    "load_shot_config",
    "InvalidParameterError",
    "validate_finite",
    "validate_point",
    "validate_positive",
    "validate_non_negative",
    "validate_timestep",
    "validate_launch_parameters",
    "validate_target",
]
