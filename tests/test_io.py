"""
Tests for tabular export and JSON config loading.
"""
import json

import pytest

from hooplab.core.sampler import sample
from hooplab.dynamics.launch import LaunchParameters
from hooplab.utils.io import (
    load_shot_config,
    load_trajectory_history,
    save_trajectory_history,
)


@pytest.fixture
def trajectory():
    return sample(LaunchParameters.from_degrees(10.0, 45.0, gravity=9.8), dt=0.05)


class TestHistory:
    def test_save_and_load(self, trajectory, tmp_path):
        path = save_trajectory_history(trajectory.to_records(), tmp_path / "out" / "shot.csv")
        assert path.exists()

        df = load_trajectory_history(path)
        assert list(df.columns) == ["t", "x", "y"]
        assert len(df) == len(trajectory)
        assert df["x"].iloc[-1] == pytest.approx(trajectory.x[-1])

    def test_save_empty(self, tmp_path):
        with pytest.raises(ValueError, match="empty"):
            save_trajectory_history([], tmp_path / "empty.csv")

    def test_load_requires_time(self, tmp_path):
        path = tmp_path / "no_time.csv"
        path.write_text("x,y\n0,0\n")
        with pytest.raises(ValueError, match="'t'"):
            load_trajectory_history(path)


class TestShotConfig:
    def test_valid(self, tmp_path):
        path = tmp_path / "shot.json"
        path.write_text(json.dumps({"basket": {"radius": 0.2}}))
        assert load_shot_config(path) == {"basket": {"radius": 0.2}}

    def test_unknown_section(self, tmp_path):
        path = tmp_path / "shot.json"
        path.write_text(json.dumps({"wind": {"speed": 3}}))
        with pytest.raises(ValueError, match="unknown section"):
            load_shot_config(path)

    def test_section_must_be_object(self, tmp_path):
        path = tmp_path / "shot.json"
        path.write_text(json.dumps({"launch": [1, 2]}))
        with pytest.raises(ValueError, match="must be an object"):
            load_shot_config(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "shot.json"
        path.write_text("[]")
        with pytest.raises(ValueError, match="top level"):
            load_shot_config(path)
