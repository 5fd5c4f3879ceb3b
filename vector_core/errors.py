"""Exceptions raised by vector_core."""

from __future__ import annotations


class VectorError(ValueError):
    """Base class for every vector_core failure."""


class DimensionMismatchError(VectorError):
    """An operand's dimension does not fit the receiving vector or operation."""


class IndexOutOfRangeError(VectorError, IndexError):
    """A component index is negative or past the end of a vector."""


class UnsupportedDimensionError(VectorError):
    """The operation is not defined for vectors of this dimension."""


class ImmutableVectorError(VectorError, TypeError):
    """A frozen vector was asked to mutate."""
