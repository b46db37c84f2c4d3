"""Parametric 3D curves: circles, ellipses and helixes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

Point3D = tuple[float, float, float]
Vector3D = tuple[float, float, float]


class Curve(ABC):
    """A parametric curve in 3D space."""

    @abstractmethod
    def point(self, t: float) -> Point3D:
        """Return the point of the curve at parameter ``t``."""

    @abstractmethod
    def derivative(self, t: float) -> Vector3D:
        """Return the first derivative of the curve at parameter ``t``."""


@dataclass(frozen=True)
class Circle(Curve):
    """A circle of the given radius in the XY plane, centred at the origin."""

    radius: float

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError("Circle radius must be positive")

    def point(self, t: float) -> Point3D:
        return (self.radius * math.cos(t), self.radius * math.sin(t), 0.0)

    def derivative(self, t: float) -> Vector3D:
        return (-self.radius * math.sin(t), self.radius * math.cos(t), 0.0)


@dataclass(frozen=True)
class Ellipse(Curve):
    """An axis-aligned ellipse in the XY plane, centred at the origin."""

    radius_x: float
    radius_y: float

    def __post_init__(self) -> None:
        if self.radius_x <= 0.0 or self.radius_y <= 0.0:
            raise ValueError("Ellipse radii must be positive")

    def point(self, t: float) -> Point3D:
        return (self.radius_x * math.cos(t), self.radius_y * math.sin(t), 0.0)

    def derivative(self, t: float) -> Vector3D:
        return (-self.radius_x * math.sin(t), self.radius_y * math.cos(t), 0.0)


@dataclass(frozen=True)
class Helix(Curve):
    """A helix around the Z axis that rises by ``step`` per full turn."""

    radius: float
    step: float

    def __post_init__(self) -> None:
        if self.radius <= 0.0 or self.step <= 0.0:
            raise ValueError("Helix radius and step must be positive")

    def point(self, t: float) -> Point3D:
        return (
            self.radius * math.cos(t),
            self.radius * math.sin(t),
            self.step * t / (2.0 * math.pi),
        )

    def derivative(self, t: float) -> Vector3D:
        return (
            -self.radius * math.sin(t),
            self.radius * math.cos(t),
            self.step / (2.0 * math.pi),
        )