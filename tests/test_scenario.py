"""
Tests for the fluent Scenario API and JSON shot configs.
"""
import json
import math

import pytest

from hooplab.api import SAMPLING_PRESETS, Scenario
from hooplab.dynamics.launch import GRAVITY


def test_defaults():
    scenario = Scenario("defaults")
    params = scenario.launch_parameters()
    target = scenario.target()

    assert params.speed == 10.0
    assert params.angle_deg == pytest.approx(45.0)
    assert params.position == (0.0, 1.5)
    assert params.gravity == GRAVITY
    assert target.position == (8.0, 3.05)
    assert target.radius == 0.1


def test_run_default_scenario(capsys):
    scenario = Scenario("plain").run()
    assert scenario.result is not None
    assert scenario.shot is not None
    assert not scenario.result.made
    assert "Running Scenario: plain" in capsys.readouterr().out


def test_fluent_chain_returns_scenario():
    scenario = Scenario("chain")
    assert scenario.set_launch(speed=8.0) is scenario
    assert scenario.set_basket(radius=0.2) is scenario
    assert scenario.configure_sampling("coarse") is scenario
    assert scenario.enable_logging() is scenario


def test_set_launch_keeps_unset_values():
    scenario = Scenario("partial").set_launch(angle_deg=60.0)
    params = scenario.launch_parameters()
    assert params.speed == 10.0
    assert params.angle_deg == pytest.approx(60.0)


class TestSampling:
    def test_presets(self):
        shot = Scenario("fine").configure_sampling("fine").build(verbose=False)
        assert shot.dt == SAMPLING_PRESETS["fine"]["dt"]
        assert shot.max_time == SAMPLING_PRESETS["fine"]["max_time"]

    def test_overrides(self):
        shot = (
            Scenario("override")
            .configure_sampling("coarse", max_time=2.0, max_steps=7)
            .build(verbose=False)
        )
        assert shot.dt == 0.1
        assert shot.max_time == 2.0
        assert shot.max_steps == 7

    def test_preset_keeps_ground_level(self):
        scenario = Scenario("floor").configure_sampling(ground_level=0.5)
        shot = scenario.configure_sampling("fine").build(verbose=False)
        assert shot.ground_level == 0.5

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown sampling preset"):
            Scenario("bad").configure_sampling("ultra")


class TestAim:
    def test_aimed_shot_goes_in(self):
        scenario = Scenario("aimed").configure_sampling("fine").aim(52.0)
        assert scenario.launch_parameters().speed == pytest.approx(9.761, abs=1e-3)
        scenario.run(verbose=False)
        assert scenario.result.made

    def test_aim_uses_current_angle(self):
        scenario = Scenario("current").set_launch(angle_deg=52.0).aim()
        assert scenario.launch_parameters().angle_deg == pytest.approx(52.0)

    def test_out_of_reach(self):
        with pytest.raises(ValueError, match="out of reach"):
            Scenario("flat").aim(5.0)

    def test_aim_three_dimensional(self):
        scenario = (
            Scenario("corner")
            .set_launch(position=[0.0, 1.5, 0.0])
            .set_basket(position=[6.0, 3.05, 3.0])
            .configure_sampling("fine")
            .aim(50.0)
        )
        params = scenario.launch_parameters()
        assert math.degrees(params.azimuth) == pytest.approx(
            math.degrees(math.atan2(3.0, 6.0))
        )
        scenario.run(verbose=False)
        assert scenario.result.made


class TestOutput:
    def test_logging(self, tmp_path):
        scenario = Scenario("logged", output_dir=str(tmp_path)).enable_logging()
        scenario.run(verbose=False)
        out = scenario.shot.output_path
        assert out.parent == tmp_path
        assert (out / "logs" / "trajectory.csv").exists()
        assert not (out / "plots" / "trajectory.png").exists()

    def test_plotting(self, tmp_path):
        scenario = Scenario("plotted", output_dir=str(tmp_path)).enable_plotting()
        scenario.run(verbose=False)
        out = scenario.shot.output_path
        assert (out / "plots" / "trajectory.png").exists()
        assert (out / "plots" / "height.png").exists()

    def test_plotting_flat_throw(self, tmp_path):
        scenario = (
            Scenario("flat", output_dir=str(tmp_path))
            .set_launch(angle_deg=0.0, position=[0.0, 0.0])
            .enable_plotting()
            .run(verbose=False)
        )
        assert scenario.result.trajectory.is_empty
        assert not scenario.result.made
        assert (scenario.shot.output_path / "plots" / "trajectory.png").exists()


class TestFromConfig:
    def test_load(self, tmp_path):
        path = tmp_path / "free_throw.json"
        path.write_text(json.dumps({
            "launch": {"speed": 7.3, "angle_deg": 52, "position": [0, 2.1]},
            "basket": {"position": [4.19, 3.05], "radius": 0.12},
            "sampling": {"preset": "fine", "max_time": 2.0},
        }))
        scenario = Scenario.from_config(path)
        assert scenario.name == "free_throw"

        params = scenario.launch_parameters()
        assert params.speed == 7.3
        assert params.position == (0.0, 2.1)
        assert scenario.target().radius == 0.12

        shot = scenario.build(verbose=False)
        assert shot.dt == 0.01
        assert shot.max_time == 2.0

    def test_explicit_name(self, tmp_path):
        path = tmp_path / "shot.json"
        path.write_text("{}")
        assert Scenario.from_config(path, name="other").name == "other"

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "typo.json"
        path.write_text(json.dumps({"launch": {"sped": 7.3}}))
        with pytest.raises(ValueError, match="unknown keys"):
            Scenario.from_config(path)
