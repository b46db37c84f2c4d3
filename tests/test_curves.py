import dataclasses
import math

import pytest

from curvekit.curves import Circle, Curve, Ellipse, Helix

EPS = 1e-6


def test_circle_point_and_derivative():
    c = Circle(5.0)
    t = math.pi / 4.0
    p = c.point(t)
    d = c.derivative(t)
    assert abs(p[0] - 5.0 * math.cos(t)) < EPS
    assert abs(p[1] - 5.0 * math.sin(t)) < EPS
    assert abs(d[0] + 5.0 * math.sin(t)) < EPS
    assert abs(d[1] - 5.0 * math.cos(t)) < EPS
    assert p[2] == 0.0
    assert d[2] == 0.0


def test_ellipse_point():
    e = Ellipse(3.0, 4.0)
    t = math.pi / 6.0
    p = e.point(t)
    assert abs(p[0] - 3.0 * math.cos(t)) < EPS
    assert abs(p[1] - 4.0 * math.sin(t)) < EPS
    assert p[2] == 0.0


def test_ellipse_derivative():
    e = Ellipse(3.0, 4.0)
    t = math.pi / 6.0
    d = e.derivative(t)
    assert abs(d[0] + 3.0 * math.sin(t)) < EPS
    assert abs(d[1] - 4.0 * math.cos(t)) < EPS
    assert d[2] == 0.0


def test_helix_period():
    radius = 2.0
    step = 6.0
    h = Helix(radius, step)
    t = 1.2
    p1 = h.point(t)
    p2 = h.point(t + 2.0 * math.pi)
    assert abs(p1[0] - p2[0]) < EPS
    assert abs(p1[1] - p2[1]) < EPS
    assert abs(p2[2] - (p1[2] + step)) < EPS


def test_helix_derivative_z_is_constant():
    h = Helix(2.0, 6.0)
    assert h.derivative(0.0)[2] == pytest.approx(h.derivative(3.7)[2])
    assert h.derivative(0.0)[2] * 2.0 * math.pi == pytest.approx(6.0)


def test_helix_starts_at_radius_on_x_axis():
    assert Helix(2.0, 6.0).point(0.0) == pytest.approx((2.0, 0.0, 0.0))


def test_invalid_parameters_raise():
    with pytest.raises(ValueError):
        Circle(-1.0)
    with pytest.raises(ValueError):
        Ellipse(1.0, -2.0)
    with pytest.raises(ValueError):
        Helix(-1.0, 1.0)


@pytest.mark.parametrize(
    "factory",
    [
        lambda: Circle(0.0),
        lambda: Ellipse(0.0, 1.0),
        lambda: Ellipse(1.0, 0.0),
        lambda: Helix(1.0, 0.0),
        lambda: Helix(1.0, -3.0),
    ],
)
def test_zero_or_negative_parameters_raise(factory):
    with pytest.raises(ValueError):
        factory()


def test_curve_is_abstract():
    with pytest.raises(TypeError):
        Curve()


def test_circle_is_immutable():
    c = Circle(1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.radius = 2.0
    assert c.radius == 1.0


@pytest.mark.parametrize("t", [0.0, 0.5, 1.0, 2.5, 4.0])
def test_circle_points_lie_on_circle(t):
    x, y, _ = Circle(3.0).point(t)
    assert math.hypot(x, y) == pytest.approx(3.0)


@pytest.mark.parametrize("t", [0.0, 0.7, 2.0, 5.1])
def test_circle_derivative_is_tangent(t):
    p = Circle(2.5).point(t)
    d = Circle(2.5).derivative(t)
    assert p[0] * d[0] + p[1] * d[1] == pytest.approx(0.0, abs=1e-12)