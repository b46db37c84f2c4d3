"""Build a random set of curves, report on them and show them."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Iterable, Sequence

from curvekit.curves import Circle, Curve, Ellipse, Helix

T = math.pi / 4.0
NUM_CURVES = 10

_RADIUS_RANGE = (1.0, 5.0)
_STEP_RANGE = (0.5, 3.0)


def _random_curve(rng: random.Random, kind: int) -> Curve:
    if kind == 0:
        return Circle(rng.uniform(*_RADIUS_RANGE))
    if kind == 1:
        return Ellipse(rng.uniform(*_RADIUS_RANGE), rng.uniform(*_RADIUS_RANGE))
    return Helix(rng.uniform(*_RADIUS_RANGE), rng.uniform(*_STEP_RANGE))


def make_curves(rng: random.Random, count: int = NUM_CURVES) -> list[Curve]:
    """Make random curves: one of each kind first, then ``count - 3`` of random kinds."""
    curves = [_random_curve(rng, kind) for kind in range(3)]
    curves.extend(_random_curve(rng, rng.randint(0, 2)) for _ in range(3, count))
    return curves


def sorted_circles(curves: Iterable[Curve]) -> list[Circle]:
    """Return the circles among ``curves``, sorted by radius."""
    return sorted((c for c in curves if isinstance(c, Circle)), key=lambda c: c.radius)


def _fmt(value: float) -> str:
    return f"{value:g}"


def _triple(values: Sequence[float]) -> str:
    return "(" + ", ".join(_fmt(v) for v in values) + ")"


def build_report(curves: Sequence[Curve]) -> str:
    """Describe points and derivatives at PI/4 and the sorted circle radii."""
    lines = ["Points and derivatives at t = PI/4", ""]
    lines.extend(
        f"Point: {_triple(c.point(T))}  Derivative: {_triple(c.derivative(T))}"
        for c in curves
    )
    circles = sorted_circles(curves)
    total = sum(c.radius for c in circles)
    lines += ["", "Sorted circles radii:"]
    lines.extend(_fmt(c.radius) for c in circles)
    lines += ["", f"Total sum of radii: {_fmt(total)}"]
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; pass ``--no-visual`` to skip the 3D window."""
    args = list(sys.argv[1:] if argv is None else argv)
    show_visualization = not (len(args) == 1 and args[0] == "--no-visual")

    curves = make_curves(random.Random())
    report = build_report(curves)
    sys.stdout.write(report)

    if show_visualization:
        from curvekit.visual import open_visual_window

        open_visual_window(curves, report)
    return 0


if __name__ == "__main__":
    sys.exit(main())