"""Fixed-dimension vector / complex-number value type with cached derived state."""

from .errors import (
    DimensionMismatchError,
    ImmutableVectorError,
    IndexOutOfRangeError,
    UnsupportedDimensionError,
    VectorError,
)
from .math import FrozenVector, Vector, algebra, freeze, from_polar, immutable_of, rotate_point, to_polar
from .math import constants

__all__ = [
    "DimensionMismatchError",
    "FrozenVector",
    "ImmutableVectorError",
    "IndexOutOfRangeError",
    "UnsupportedDimensionError",
    "Vector",
    "VectorError",
    "algebra",
    "constants",
    "freeze",
    "from_polar",
    "immutable_of",
    "rotate_point",
    "to_polar",
]
