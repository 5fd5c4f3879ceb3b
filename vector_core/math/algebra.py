"""Pure vector algebra: every function returns a new Vector or a scalar.

Inputs may be mutable or frozen vectors and are never modified.
"""

from __future__ import annotations

import logging
from math import sqrt
from typing import Union

import numpy as np

from ..errors import DimensionMismatchError, UnsupportedDimensionError
from .frozen import FrozenVector
from .vector import Vector

logger = logging.getLogger(__name__)

AnyVector = Union[Vector, FrozenVector]


def _require_fits(a: AnyVector, b: AnyVector) -> None:
    if b.dimension > a.dimension:
        logger.debug("Dimension %d does not fit into %d", b.dimension, a.dimension)
        raise DimensionMismatchError(f"Illegal dimension: {b.dimension} > {a.dimension}.")


def _require_equal(a: AnyVector, b: AnyVector) -> None:
    if a.dimension != b.dimension:
        logger.debug("Dimensions differ: %d != %d", a.dimension, b.dimension)
        raise DimensionMismatchError(f"Dimensions are not equal ({a.dimension} != {b.dimension}).")


def add(a: AnyVector, b: AnyVector) -> Vector:
    """Return ``a + b``; ``b`` may be shorter than ``a``."""
    _require_fits(a, b)
    result = a.copy()
    result.change(b)
    return result


def sub(a: AnyVector, b: AnyVector) -> Vector:
    """Return ``a - b``; ``b`` may be shorter than ``a``."""
    _require_fits(a, b)
    result = a.copy()
    result.dec(b)
    return result


def multiply(a: AnyVector, b: AnyVector) -> Vector:
    """Cross/complex product of two vectors of equal dimension.

    Dimension 1 gives the scalar product, dimension 2 the scalar cross product
    ``a.x * b.y - a.y * b.x`` (both as 1D vectors), dimension 3 the usual cross
    product.
    """
    _require_equal(a, b)
    dim = a.dimension
    if dim == 1:
        return Vector.of(a.get_value(0) * b.get_value(0))
    if dim == 2:
        return Vector.of(a.get_value(0) * b.get_value(1) - a.get_value(1) * b.get_value(0))
    if dim == 3:
        ax, ay, az = a.get()
        bx, by, bz = b.get()
        return Vector.of(
            ay * bz - az * by,
            az * bx - ax * bz,
            ax * by - ay * bx,
        )
    logger.debug("No cross product for dimension %d", dim)
    raise UnsupportedDimensionError(f"Cross product is not implemented for dimension {dim}.")


def dot(a: AnyVector, b: AnyVector) -> float:
    """Dot product over the shared leading components."""
    dim = min(a.dimension, b.dimension)
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.dot(a.to_array()[:dim], b.to_array()[:dim]))


def scale(a: AnyVector, factor: float) -> Vector:
    result = a.copy()
    result.scale(factor)
    return result


def rotate(a: AnyVector, angle: float) -> Vector:
    """Return ``a`` rotated by ``angle`` radians (2D only)."""
    result = a.copy()
    result.rotate(angle)
    return result


def distance(a: AnyVector, b: AnyVector) -> float:
    return sqrt(square_distance(a, b))


def square_distance(a: AnyVector, b: AnyVector) -> float:
    return sub(a, b).square_module()


def angle(a: AnyVector, b: AnyVector) -> float:
    """Angle between two vectors in radians.

    Unit vectors skip the magnitude division. A zero operand gives NaN.

    The cosine is clipped to ``[-1, 1]`` before ``acos``. This only absorbs
    rounding: vectors that count as unit length within ``config.EPSILON`` can
    have a dot product a few ulps past 1. NaN passes through the clip
    unchanged.
    """
    _require_equal(a, b)
    cosine = np.float64(dot(a, b))
    with np.errstate(divide="ignore", invalid="ignore"):
        if not (a.is_normalized() and b.is_normalized()):
            cosine = cosine / np.sqrt(np.float64(a.square_module()) * b.square_module())
        return float(np.arccos(np.clip(cosine, -1.0, 1.0)))


def normalize(a: AnyVector) -> Vector:
    result = a.copy()
    result.normalize()
    return result
