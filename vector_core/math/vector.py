"""Fixed-dimension mutable vector with lazily cached derived state."""

from __future__ import annotations

import operator
from enum import Enum
from math import cos, hypot, isfinite, sin
from typing import TYPE_CHECKING, Iterator, Sequence, Union

import numpy as np

from .. import config
from ..errors import DimensionMismatchError, IndexOutOfRangeError, UnsupportedDimensionError

if TYPE_CHECKING:
    from .frozen import FrozenVector


class CacheState(Enum):
    STALE = "stale"


# Marks a cached field that must be recomputed before it is read.
STALE = CacheState.STALE

VectorOperand = Union["Vector", "FrozenVector", Sequence[float]]


def is_vector(operand: object) -> bool:
    """Return True for mutable and frozen vectors, False for raw sequences."""
    return hasattr(operand, "dimension") and hasattr(operand, "to_array")


def _padded(values: np.ndarray, dimension: int) -> np.ndarray:
    out = np.zeros(dimension, dtype=np.float64)
    out[: values.size] = values
    return out


class Vector:
    """Mutable vector of ``dimension`` float components.

    Square magnitude, the normalized flag and the unassigned flag are computed
    on demand and cached until the next mutation. The null flag is only ever
    raised by :meth:`set_null`. Every effective mutation bumps ``version``.

    Not thread safe.
    """

    __hash__ = None

    def __init__(self, dimension: int = config.DEFAULT_DIMENSION) -> None:
        dimension = operator.index(dimension)
        if dimension < 1:
            raise UnsupportedDimensionError(f"Dimension must be positive (got {dimension}).")
        self._dimension = dimension
        self._values = np.zeros(self._dimension, dtype=np.float64)
        self._version = 0
        self._square_module: float | CacheState = STALE
        self._normalized: bool | CacheState = STALE
        self._unassigned: bool | CacheState = STALE
        self._null = False

    # -- factories -------------------------------------------------------

    @classmethod
    def of(cls, *values: float) -> "Vector":
        """Create a vector whose dimension is the number of values given."""
        return cls.of_array(values)

    @classmethod
    def of_array(cls, values: Sequence[float]) -> "Vector":
        data = np.asarray(values, dtype=np.float64)
        if data.ndim != 1:
            raise DimensionMismatchError(f"Expected a flat sequence of values (got shape {data.shape}).")
        vector = cls(data.size)
        vector._values[:] = data
        return vector

    @classmethod
    def of_vector(cls, other: "Vector | FrozenVector") -> "Vector":
        return other.copy()

    # -- cache bookkeeping -----------------------------------------------

    def _on_change(self) -> None:
        self._square_module = STALE
        self._normalized = STALE
        self._unassigned = STALE
        self._null = False
        self._version += 1

    def _operand(self, operand: VectorOperand) -> np.ndarray:
        if is_vector(operand):
            if operand.dimension > self._dimension:
                raise DimensionMismatchError(
                    f"Operand dimension {operand.dimension} exceeds vector dimension {self._dimension}."
                )
            return _padded(operand.to_array(), self._dimension)
        data = np.asarray(operand, dtype=np.float64)
        if data.ndim != 1 or data.size > self._dimension:
            raise DimensionMismatchError(
                f"Expected at most {self._dimension} values (got shape {data.shape})."
            )
        return _padded(data, self._dimension)

    # -- mutation --------------------------------------------------------

    def set_null(self) -> None:
        """Zero every component and mark the vector null.

        Calling it again before any other mutation does nothing, including
        leaving ``version`` alone.
        """
        if self._null:
            return
        self._on_change()
        self._values.fill(0.0)
        self._square_module = 0.0
        self._null = True

    def set_unassigned(self) -> None:
        self._on_change()
        self._values.fill(np.nan)
        self._unassigned = True

    def normalize(self) -> None:
        """Scale to unit length.

        Zero vectors are left as they are but still flagged normalized. The
        magnitude comes from ``hypot`` so very large or very small components
        do not overflow or underflow.
        """
        if self._normalized is True:
            return
        self._on_change()
        magnitude = hypot(*self._values)
        if magnitude > 0.0:
            with np.errstate(invalid="ignore"):
                self._values /= magnitude
            if isfinite(magnitude):
                self._square_module = 1.0
        self._normalized = True

    def change(self, operand: VectorOperand) -> None:
        """Add ``operand`` componentwise; missing trailing components count as 0."""
        delta = self._operand(operand)
        self._on_change()
        with np.errstate(over="ignore", invalid="ignore"):
            self._values += delta

    def dec(self, operand: VectorOperand) -> None:
        """Subtract ``operand`` componentwise; missing trailing components count as 0."""
        delta = self._operand(operand)
        self._on_change()
        with np.errstate(over="ignore", invalid="ignore"):
            self._values -= delta

    def scale(self, factor: float) -> None:
        self._on_change()
        with np.errstate(over="ignore", invalid="ignore"):
            self._values *= factor

    def rotate(self, angle: float) -> None:
        """Rotate a 2D vector counter-clockwise by ``angle`` radians."""
        if self._dimension != 2:
            raise UnsupportedDimensionError(
                f"Rotation is only supported for 2D vectors (got dimension {self._dimension})."
            )
        self._on_change()
        cos_a = cos(angle)
        sin_a = sin(angle)
        x, y = float(self._values[0]), float(self._values[1])
        self._values[0] = x * cos_a - y * sin_a
        self._values[1] = x * sin_a + y * cos_a

    def set_value(self, index: int, value: float) -> None:
        if index < 0 or index >= self._dimension:
            raise IndexOutOfRangeError(f"Index {index} out of range for dimension {self._dimension}.")
        self._on_change()
        self._values[index] = value

    def set(self, source: VectorOperand) -> None:
        """Overwrite components from another vector or from a sequence.

        A sequence replaces every component and zero-fills past its end. A
        vector only overwrites the first ``source.dimension`` components.
        """
        if is_vector(source):
            if source.dimension > self._dimension:
                raise DimensionMismatchError(
                    f"Source dimension {source.dimension} exceeds vector dimension {self._dimension}."
                )
            self._on_change()
            self._values[: source.dimension] = source.to_array()
            return
        data = np.asarray(source, dtype=np.float64)
        if data.ndim != 1:
            raise DimensionMismatchError(f"Expected a flat sequence of values (got shape {data.shape}).")
        if data.size > self._dimension:
            raise IndexOutOfRangeError(
                f"Got {data.size} values for a vector of dimension {self._dimension}."
            )
        self._on_change()
        self._values[:] = _padded(data, self._dimension)

    # -- queries ---------------------------------------------------------

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def version(self) -> int:
        return self._version

    def get_version(self) -> int:
        """Counter bumped by every effective mutation; cheap change detection."""
        return self._version

    def get_value(self, index: int) -> float:
        """Return one component; indices past the end read as 0.0."""
        if index < 0:
            raise IndexOutOfRangeError(f"Index must not be negative (got {index}).")
        if index >= self._dimension:
            return 0.0
        return float(self._values[index])

    def get(self) -> tuple[float, ...]:
        return tuple(float(v) for v in self._values)

    def to_array(self) -> np.ndarray:
        return self._values.copy()

    def square_module(self) -> float:
        if self._square_module is STALE:
            with np.errstate(over="ignore", invalid="ignore"):
                self._square_module = float(np.dot(self._values, self._values))
        return self._square_module

    def is_null(self) -> bool:
        return self._null

    def is_zero(self) -> bool:
        return not np.any(self._values)

    def is_infinity(self) -> bool:
        return bool(np.isinf(self._values).any())

    def is_nan(self) -> bool:
        return bool(np.isnan(self._values).any())

    def is_unassigned(self) -> bool:
        if self._unassigned is STALE:
            self._unassigned = bool(np.isnan(self._values).all())
        return self._unassigned

    def is_normalized(self) -> bool:
        if self._normalized is STALE:
            self._normalized = abs(self.square_module() - 1.0) <= config.EPSILON
        return self._normalized

    def copy(self) -> "Vector":
        """Deep copy carrying over cached state; the copy starts at version 0."""
        clone = Vector(self._dimension)
        clone._values[:] = self._values
        clone._square_module = self._square_module
        clone._normalized = self._normalized
        clone._unassigned = self._unassigned
        clone._null = self._null
        return clone

    def equals(self, other: "Vector | FrozenVector", epsilon: float) -> bool:
        """True unless some component differs from ``other`` by more than ``epsilon``.

        NaN differences do not count as exceeding ``epsilon``.
        """
        if other.dimension != self._dimension:
            raise DimensionMismatchError(
                f"Dimensions are not equal ({self._dimension} != {other.dimension})."
            )
        with np.errstate(invalid="ignore"):
            diff = np.abs(self._values - other.to_array())
        return not np.any(diff > epsilon)

    # -- dunder helpers --------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not is_vector(other):
            return NotImplemented
        return other.dimension == self._dimension and bool(np.array_equal(self._values, other.to_array()))

    def __len__(self) -> int:
        return self._dimension

    def __iter__(self) -> Iterator[float]:
        return iter(self.get())

    def __str__(self) -> str:
        return "(" + ", ".join(str(v) for v in self.get()) + ")"

    def __repr__(self) -> str:
        return "Vector.of(" + ", ".join(repr(v) for v in self.get()) + ")"
