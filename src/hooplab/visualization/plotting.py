from __future__ import annotations
import os
import csv
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Sequence, Tuple
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.figure import Figure

if TYPE_CHECKING:
    from hooplab.core.simulation import ShotResult


def _load_csv(filepath: str | Path) -> Tuple[np.ndarray, Dict[str, np.ndarray], List[str]]:
    """
    Load a CSV produced by TrajectoryLogger.

    Returns
    -------
    t : (N,) array
        Time vector.
    cols : dict[str, np.ndarray]
        Mapping column_name -> (N,) array.
    headers : list[str]
        Column headers in order (first one should be 't').
    """
    with open(filepath, "r", newline="") as f:
        reader = csv.reader(f)
        headers = next(reader)
        has_rows = next(reader, None) is not None
    if headers[0] != "t":
        raise ValueError("First column must be time 't'.")
    if has_rows:
        data = np.loadtxt(filepath, delimiter=",", skiprows=1, dtype=float, ndmin=2)
    else:
        # Header only: a shot with no samples above the floor
        data = np.zeros((0, len(headers)))
    cols: Dict[str, np.ndarray] = {}
    for j, name in enumerate(headers):
        cols[name] = data[:, j]
    return cols["t"], cols, headers


def _columns(source: str | Path | ShotResult) -> Dict[str, np.ndarray]:
    """Column arrays from either a logged CSV or an in-memory ShotResult."""
    if isinstance(source, (str, Path)):
        _, cols, _ = _load_csv(source)
        return cols

    traj = source.trajectory
    entries = np.zeros(len(traj), dtype=bool)
    if source.hit.entry_indices:
        entries[list(source.hit.entry_indices)] = True
    cols = {"t": traj.t, "x": traj.x, "y": traj.y, "in_basket": entries.astype(float)}
    if traj.dimensions == 3:
        cols["z"] = traj.z
    return cols


def _require(cols: Dict[str, np.ndarray], names: Sequence[str]) -> None:
    for name in names:
        if name not in cols:
            raise KeyError(f"Column '{name}' not found in data.")


def _finish(fig: Figure, save_path: str | Path | None, show: bool) -> Figure:
    fig.tight_layout()
    if save_path:
        save_path = str(save_path)
        os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
        fig.savefig(save_path, dpi=180, bbox_inches="tight")
    if show:
        plt.show()
    return fig


def plot_trajectory(
    source: str | Path | ShotResult,
    basket: Sequence[float] | None = None,
    save_path: str | Path | None = None,
    show: bool = False,
    basket_width: float = 0.45,
) -> Figure:
    """
    Plot the ball path in the x-y plane with the basket marked.

    Parameters
    ----------
    source : str | Path | ShotResult
        Logger CSV, or a result straight from BasketShot.run().
    basket : sequence of float | None
        Basket center (x, y[, z]). Taken from the result when omitted.
    save_path : str | Path | None
        If given, save the figure. The extension picks the format, so
        ``.svg`` gives a vector drawing and ``.png`` a raster one.
    show : bool
        Whether to call plt.show().
    basket_width : float
        Drawn rim width [m] (a regulation rim is 0.45 m across)

    Returns
    -------
    fig : Figure
    """
    cols = _columns(source)
    _require(cols, ["x", "y"])
    if basket is None and not isinstance(source, (str, Path)):
        basket = source.target.position

    x, y = cols["x"], cols["y"]
    inside = cols.get("in_basket", np.zeros_like(x)) > 0.5

    fig, ax = plt.subplots(1, 1, figsize=(10, 6))
    ax.plot(x, y, color="#1a73e8", lw=1.5, alpha=0.6, label="path")
    ax.scatter(x[~inside], y[~inside], color="#1a73e8", s=10)
    if inside.any():
        ax.scatter(x[inside], y[inside], color="#34a853", s=30, label="in basket")
    if x.size:
        ax.scatter(x[0], y[0], color="#fbbc05", s=40, label="release")

    if basket is not None:
        bx, by = basket[0], basket[1]
        ax.plot(
            [bx - basket_width / 2, bx + basket_width / 2], [by, by],
            color="#ea4335", lw=4.0, label="basket",
        )

    ax.set_xlabel("x [m]"); ax.set_ylabel("y [m]")
    ax.set_aspect("equal", adjustable="datalim")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="best")
    ax.set_title("Basketball trajectory")
    return _finish(fig, save_path, show)


def plot_height_vs_time(
    source: str | Path | ShotResult,
    basket_height: float | None = None,
    save_path: str | Path | None = None,
    show: bool = False,
) -> Figure:
    """
    Plot y(t) with the basket height as a reference line.

    Parameters
    ----------
    source : str | Path | ShotResult
    basket_height : float | None
    save_path : str | Path | None
    show : bool

    Returns
    -------
    fig : Figure
    """
    cols = _columns(source)
    _require(cols, ["t", "y"])
    if basket_height is None and not isinstance(source, (str, Path)):
        basket_height = source.target.position[1]

    fig, ax = plt.subplots(1, 1, figsize=(10, 4))
    ax.plot(cols["t"], cols["y"], color="#1a73e8", lw=2, label="y")
    if basket_height is not None:
        ax.axhline(basket_height, color="#ea4335", ls="--", label="basket height")
    ax.set_xlabel("t [s]"); ax.set_ylabel("y [m]")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="best")
    ax.set_title("Height vs time")
    return _finish(fig, save_path, show)


def _writer_for(save_path: str | Path) -> str | None:
    suffix = Path(save_path).suffix.lower()
    if suffix == ".gif":
        return "pillow"
    if suffix in (".html", ".htm"):
        return "html"
    return None  # rcParams default (ffmpeg) for .mp4 and friends


def animate_trajectory(
    source: str | Path | ShotResult,
    basket: Sequence[float] | None = None,
    save_path: str | Path | None = None,
    show: bool = False,
    fps: int = 20,
    basket_width: float = 0.45,
) -> FuncAnimation:
    """
    Animate the ball moving along its sampled path.

    The full path is drawn faintly, samples inside the basket are marked
    green, and a yellow ball steps through the samples one frame each.

    Parameters
    ----------
    source : str | Path | ShotResult
        Logger CSV, or a result straight from BasketShot.run().
    basket : sequence of float | None
        Basket center (x, y[, z]). Taken from the result when omitted.
    save_path : str | Path | None
        If given, write the animation. ``.gif`` uses Pillow, ``.html``
        the JavaScript writer, anything else matplotlib's default writer.
    show : bool
        Whether to call plt.show().
    fps : int
        Frames (samples) per second.

    Returns
    -------
    anim : FuncAnimation
        Keep a reference to it while the window is open.

    Raises
    ------
    ValueError
        If the trajectory has no samples
    """
    cols = _columns(source)
    _require(cols, ["t", "x", "y"])
    if basket is None and not isinstance(source, (str, Path)):
        basket = source.target.position

    t, x, y = cols["t"], cols["x"], cols["y"]
    if x.size == 0:
        raise ValueError("Nothing to animate: the trajectory has no samples.")
    inside = cols.get("in_basket", np.zeros_like(x)) > 0.5

    fig, ax = plt.subplots(1, 1, figsize=(10, 6))
    ax.plot(x, y, color="#1a73e8", lw=1.0, ls="--", alpha=0.4, label="path")
    if inside.any():
        ax.scatter(x[inside], y[inside], color="#34a853", s=30, label="in basket")
    if basket is not None:
        bx, by = basket[0], basket[1]
        ax.plot(
            [bx - basket_width / 2, bx + basket_width / 2], [by, by],
            color="#ea4335", lw=4.0, label="basket",
        )
    ball, = ax.plot([], [], "o", color="#fbbc05", ms=12, label="ball")
    clock = ax.text(0.02, 0.95, "", transform=ax.transAxes)

    ax.set_xlabel("x [m]"); ax.set_ylabel("y [m]")
    ax.set_aspect("equal", adjustable="datalim")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right")
    ax.set_title("Basketball trajectory")
    fig.tight_layout()

    def update(frame: int):
        ball.set_data([x[frame]], [y[frame]])
        clock.set_text(f"t = {t[frame]:.2f} s")
        return ball, clock

    anim = FuncAnimation(fig, update, frames=x.size, interval=1000.0 / fps, blit=True)

    if save_path:
        os.makedirs(os.path.dirname(str(save_path)) or ".", exist_ok=True)
        anim.save(str(save_path), writer=_writer_for(save_path), fps=fps)
    if show:
        plt.show()
    return anim
