"""Interactive 3D view of a collection of curves."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from curvekit.curves import Circle, Curve, Ellipse, Helix, Point3D

SCREEN_WIDTH = 1200
SCREEN_HEIGHT = 800
_DPI = 100
_GRID_SLICES = 20
_GRID_SPACING = 1.0

_COLORS: tuple[tuple[type[Curve], str], ...] = (
    (Circle, "red"),
    (Ellipse, "blue"),
    (Helix, "green"),
)


def curve_color(curve: Curve) -> str:
    """Return the drawing colour for a curve, chosen by its kind."""
    for kind, color in _COLORS:
        if isinstance(curve, kind):
            return color
    return "black"


def curve_segments(
    curve: Curve, segments: int = 50, max_t: float = 4.0 * math.pi
) -> list[tuple[Point3D, Point3D]]:
    """Split the curve on ``[0, max_t]`` into ``segments`` straight pieces."""
    return [
        (
            curve.point(max_t * i / segments),
            curve.point(max_t * (i + 1) / segments),
        )
        for i in range(segments)
    ]


def _draw_grid(ax, slices: int, spacing: float) -> None:
    half = slices / 2 * spacing
    for k in range(slices + 1):
        offset = -half + k * spacing
        ax.plot([offset, offset], [-half, half], [0.0, 0.0], color="lightgray", linewidth=0.6)
        ax.plot([-half, half], [offset, offset], [0.0, 0.0], color="lightgray", linewidth=0.6)


def open_visual_window(curves: Iterable[Curve], log: str):
    """Show the curves in a 3D window together with the text log; return the figure."""
    import matplotlib.pyplot as plt

    fig = plt.figure(figsize=(SCREEN_WIDTH / _DPI, SCREEN_HEIGHT / _DPI), dpi=_DPI)
    manager = fig.canvas.manager
    if manager is not None:
        manager.set_window_title("3D Curves Visualization")

    ax = fig.add_subplot(projection="3d")
    _draw_grid(ax, _GRID_SLICES, _GRID_SPACING)

    for curve in curves:
        pieces: Sequence[tuple[Point3D, Point3D]] = curve_segments(curve)
        if not pieces:
            continue
        path = [pieces[0][0], *(end for _, end in pieces)]
        xs, ys, zs = zip(*path)
        (line,) = ax.plot(xs, ys, zs, color=curve_color(curve))
        line.set_gid("curve")

    half = _GRID_SLICES / 2 * _GRID_SPACING
    ax.set_xlim(-half, half)
    ax.set_ylim(-half, half)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    # Looking from (15, 15, 15) towards the origin.
    ax.view_init(elev=math.degrees(math.atan(1.0 / math.sqrt(2.0))), azim=45.0)

    fig.text(0.01, 0.98, "Circle=RED Ellipse=BLUE Helix=GREEN",
             fontsize=14, color="dimgray", va="top")
    fig.text(0.01, 0.95, "Close the window to exit, drag to rotate the camera",
             fontsize=14, color="dimgray", va="top")
    fig.text(0.01, 0.91, log, fontsize=7, color="dimgray", va="top", family="monospace")

    plt.show()
    return fig