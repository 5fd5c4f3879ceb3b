"""Polar-coordinate conversions and rotation about an arbitrary origin."""

from __future__ import annotations

from math import atan2, cos, hypot, sin

from .. import config
from ..errors import UnsupportedDimensionError
from . import algebra
from .algebra import AnyVector
from .vector import Vector


def from_polar(r: float, phi: float) -> Vector:
    """Create a 2D vector from radius ``r`` and angle ``phi`` (radians)."""
    return Vector.of(r * cos(phi), r * sin(phi))


def to_polar(vec: AnyVector) -> Vector:
    """Return ``(r, phi)`` for a 2D vector, indexed by ``config.R`` and ``config.PHI``.

    ``phi`` lies in ``[-pi, pi]``.
    """
    if vec.dimension != 2:
        raise UnsupportedDimensionError(
            f"Polar coordinates are only defined for 2D vectors (got dimension {vec.dimension})."
        )
    x = vec.get_value(config.X)
    y = vec.get_value(config.Y)
    return Vector.of(hypot(x, y), atan2(y, x))


def rotate_point(point: AnyVector, origin: AnyVector, angle_rad: float) -> Vector:
    """Rotate a 2D point around an origin by angle_rad (radians)."""
    return algebra.add(algebra.rotate(algebra.sub(point, origin), angle_rad), origin)
