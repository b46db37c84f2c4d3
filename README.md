# curvekit

This package gives parametric 3D curves with exact points and first
derivatives. Three curves are provided in `curvekit.curves`:

- `Circle(radius)` is a circle of the given radius in the XY plane, centred
  at the origin.
- `Ellipse(radius_x, radius_y)` is an axis-aligned ellipse in the XY plane,
  centred at the origin.
- `Helix(radius, step)` is a helix around the Z axis. It climbs `step` along
  Z on each full turn.

Every curve takes a parameter `t` in radians. `point(t)` returns the
position and `derivative(t)` returns the tangent vector. Both are
`(x, y, z)` tuples. Each curve is a frozen dataclass built on the abstract
base class `Curve`. A radius or step that is zero or negative raises
`ValueError`.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Library use

```python
import math
from curvekit.curves import Circle, Ellipse, Helix

helix = Helix(2.0, 6.0)
x, y, z = helix.point(math.pi / 4)
dx, dy, dz = helix.derivative(math.pi / 4)
```

`curvekit.app` has helpers that work on a collection of curves:

- `make_curves(rng, count=10)` takes a `random.Random` and builds curves from
  it. The first three are always a circle, an ellipse and a helix, in that
  order. The rest are of random kinds. Radii are drawn between 1 and 5, and
  helix steps between 0.5 and 3.
- `sorted_circles(curves)` picks out the circles and sorts them by radius.
- `build_report(curves)` returns a text report. It lists each curve's point
  and derivative at t = π/4, then the sorted circle radii, then their total.

`curvekit.visual` draws the curves with matplotlib:

- `curve_color(curve)` gives the colour for a curve. Circles are `"red"`,
  ellipses `"blue"` and helices `"green"`. Any other curve is `"black"`.
- `curve_segments(curve, segments=50, max_t=4π)` splits the curve on
  `[0, max_t]` into straight pieces. Each piece is a pair of points.
- `open_visual_window(curves, log)` shows the curves in a 3D window over a
  grid, with the colour key and the text `log`, then returns the figure.

## Command line

```
curvekit
```

This builds ten random curves and prints the report. It then opens the 3D
window. Drag with the mouse to rotate the view, and close the window to exit.

To print the report without opening the window:

```
curvekit --no-visual
```