"""Vector math for vector_core."""

from . import algebra
from .frozen import FrozenVector, freeze, immutable_of
from .transforms import from_polar, rotate_point, to_polar
from .vector import STALE, Vector

__all__ = [
    "FrozenVector",
    "STALE",
    "Vector",
    "algebra",
    "freeze",
    "from_polar",
    "immutable_of",
    "rotate_point",
    "to_polar",
]
