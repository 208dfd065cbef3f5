# src/hooplab/utils/io.py
import json
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

# Keys accepted in each section of a shot config file
CONFIG_SCHEMA = {
    "launch": {"speed", "angle_deg", "position", "azimuth_deg", "gravity"},
    "basket": {"position", "radius"},
    "sampling": {"preset", "dt", "max_time", "ground_level", "max_steps"},
}


def save_trajectory_history(history: List[Dict[str, Any]], filepath: str) -> Path:
    """
    Saves a list of per-sample dicts to a CSV file.

    Args:
        history: List of dicts, e.g. Trajectory.to_records()
        filepath: Destination path (e.g., 'results/shot1.csv')

    Returns:
        The path written.
    """
    if not history:
        raise ValueError("Trajectory history is empty. Nothing to save.")

    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(history)
    df.to_csv(path, index=False)
    print(f"Trajectory saved to {path.absolute()}")
    return path


def load_trajectory_history(filepath: str) -> pd.DataFrame:
    """Read back a CSV written by save_trajectory_history or TrajectoryLogger."""
    df = pd.read_csv(filepath)
    if "t" not in df.columns:
        raise ValueError(f"{filepath} has no 't' column")
    return df


def load_shot_config(filepath: str) -> Dict[str, Dict[str, Any]]:
    """
    Load shot settings from a JSON file.

    Expected layout (every section and key optional):

        {
          "launch":   {"speed": 10, "angle_deg": 45, "position": [0, 1.5]},
          "basket":   {"position": [8.0, 3.05], "radius": 0.1},
          "sampling": {"preset": "fine", "max_time": 4.0}
        }

    Raises:
        ValueError: on unknown sections or keys.
    """
    with open(filepath, "r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"{filepath}: top level must be a JSON object")

    config: Dict[str, Dict[str, Any]] = {}
    for section, values in raw.items():
        if section not in CONFIG_SCHEMA:
            raise ValueError(
                f"{filepath}: unknown section '{section}'. "
                f"Valid sections: {sorted(CONFIG_SCHEMA)}"
            )
        if not isinstance(values, dict):
            raise ValueError(f"{filepath}: section '{section}' must be an object")
        unknown = set(values) - CONFIG_SCHEMA[section]
        if unknown:
            raise ValueError(
                f"{filepath}: unknown keys in '{section}': {sorted(unknown)}"
            )
        config[section] = dict(values)
    return config
