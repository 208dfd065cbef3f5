"""
Tests for matplotlib plots and the text-mode renderer.
"""
import matplotlib.pyplot as plt
import pytest
from matplotlib.animation import FuncAnimation
from matplotlib.figure import Figure

from hooplab.core.simulation import BasketShot
from hooplab.dynamics.launch import LaunchParameters, Target
from hooplab.logger import TrajectoryLogger
from hooplab.visualization import TextDisplay
from hooplab.visualization.plotting import (
    animate_trajectory,
    plot_height_vs_time,
    plot_trajectory,
)


@pytest.fixture
def made_result():
    params = LaunchParameters.from_degrees(10.0, 45.0, gravity=9.8)
    return BasketShot(params, Target((10.2, 0.0), radius=0.5), dt=0.05, verbose=False).run()


@pytest.fixture
def csv_log(made_result, tmp_path):
    path = tmp_path / "trajectory.csv"
    with TrajectoryLogger(path) as logger:
        logger.log_result(made_result)
    return path


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPlots:
    def test_trajectory_from_result(self, made_result, tmp_path):
        out = tmp_path / "plots" / "trajectory.png"
        fig = plot_trajectory(made_result, save_path=out)
        assert isinstance(fig, Figure)
        assert out.exists()

    def test_trajectory_from_csv(self, csv_log, tmp_path):
        out = tmp_path / "from_csv.png"
        plot_trajectory(csv_log, basket=(10.2, 0.0), save_path=out)
        assert out.exists()

    def test_svg_output(self, made_result, tmp_path):
        out = tmp_path / "shot.svg"
        plot_trajectory(made_result, save_path=out)
        assert "<svg" in out.read_text()

    def test_height_plot(self, csv_log, tmp_path):
        out = tmp_path / "height.png"
        plot_height_vs_time(csv_log, basket_height=0.0, save_path=out)
        assert out.exists()

    def test_missing_column(self, tmp_path):
        path = tmp_path / "partial.csv"
        path.write_text("t,y\n0.0,1.0\n0.1,1.2\n")
        with pytest.raises(KeyError, match="not found"):
            plot_trajectory(path)

    def test_time_must_come_first(self, tmp_path):
        path = tmp_path / "swapped.csv"
        path.write_text("x,t,y\n0.0,0.0,1.0\n")
        with pytest.raises(ValueError, match="time"):
            plot_trajectory(path)

    def test_header_only_csv(self, tmp_path):
        path = tmp_path / "flat.csv"
        path.write_text("t,x,y,distance,in_basket\n")
        out = tmp_path / "flat.png"
        plot_trajectory(path, basket=(5.0, 0.0), save_path=out)
        plot_height_vs_time(path, save_path=tmp_path / "flat_height.png")
        assert out.exists()


class TestAnimation:
    def test_gif_from_result(self, made_result, tmp_path):
        out = tmp_path / "anim" / "shot.gif"
        anim = animate_trajectory(made_result, save_path=out, fps=10)
        assert isinstance(anim, FuncAnimation)
        assert out.read_bytes()[:4] == b"GIF8"

    def test_basket_entries_highlighted(self, made_result):
        animate_trajectory(made_result)
        labels = plt.gcf().axes[0].get_legend_handles_labels()[1]
        assert "in basket" in labels
        assert "ball" in labels

    def test_from_csv(self, csv_log, tmp_path):
        out = tmp_path / "from_csv.gif"
        animate_trajectory(csv_log, basket=(10.2, 0.0), save_path=out, fps=10)
        assert out.exists()

    def test_html_output(self, made_result, tmp_path):
        out = tmp_path / "shot.html"
        animate_trajectory(made_result, save_path=out, fps=10)
        assert "<script" in out.read_text()

    def test_empty_trajectory(self, tmp_path):
        path = tmp_path / "flat.csv"
        path.write_text("t,x,y,distance,in_basket\n")
        with pytest.raises(ValueError, match="no samples"):
            animate_trajectory(path)


class TestTextDisplay:
    def test_grid_size(self):
        display = TextDisplay(num_rows=5, num_cols=12)
        lines = display.to_string().split("\n")
        assert len(lines) == 5
        assert all(len(line) == 12 for line in lines)

    def test_invalid_canvas(self):
        with pytest.raises(ValueError):
            TextDisplay(num_rows=1)
        with pytest.raises(ValueError):
            TextDisplay(cols_meters=0.0)

    def test_plot_point(self):
        display = TextDisplay(num_rows=11, num_cols=11)
        assert display.plot_point(5.0, 2.0)
        assert display.get_pixel(2, 5) == "O"

    def test_floor_is_bottom_line(self):
        display = TextDisplay(num_rows=11, num_cols=11)
        display.plot_point(0.0, 0.0)
        assert display.to_string().split("\n")[-1][0] == "O"

    def test_off_canvas_is_skipped(self):
        display = TextDisplay(num_rows=11, num_cols=11)
        assert not display.plot_point(-1.0, 2.0)
        assert not display.plot_point(3.0, 11.0)
        assert "O" not in display.to_string()

    def test_in_basket_mark(self):
        display = TextDisplay(num_rows=11, num_cols=11)
        display.plot_point(5.0, 5.0, in_basket=True)
        assert display.get_pixel(5, 5) == "*"
        assert [display.get_pixel(5, c) for c in (3, 4, 6, 7)] == ["="] * 4

    def test_in_basket_mark_at_edge(self):
        display = TextDisplay(num_rows=11, num_cols=11)
        display.plot_point(10.0, 5.0, in_basket=True)
        assert display.get_pixel(5, 10) == "*"
        assert display.get_pixel(5, 9) == "="

    def test_pixel_bounds(self):
        display = TextDisplay(num_rows=4, num_cols=4)
        display.set_pixel("#", 3, 3)
        assert display.get_pixel(3, 3) == "#"
        with pytest.raises(IndexError):
            display.set_pixel("#", 4, 0)
        with pytest.raises(IndexError):
            display.get_pixel(0, -1)

    def test_render_made_shot(self, made_result):
        display = TextDisplay(cols_meters=12.0)
        text = display.render(made_result)
        assert "O" in text
        assert "*" in text
        assert "=" in text

    def test_render_counts_drawn_samples(self, made_result):
        display = TextDisplay(cols_meters=12.0)
        assert display.draw(made_result) == len(made_result.trajectory)

    def test_render_starts_fresh(self, made_result):
        display = TextDisplay(cols_meters=12.0)
        display.set_pixel("#", 0, 0)
        assert "#" not in display.render(made_result)
