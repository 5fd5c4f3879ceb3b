"""Read-only wrapper that turns a fully built Vector into an immutable value."""

from __future__ import annotations

import logging
from typing import Iterator, NoReturn

import numpy as np

from ..errors import ImmutableVectorError
from .vector import Vector, is_vector

logger = logging.getLogger(__name__)


class FrozenVector:
    """Immutable view over a privately owned :class:`Vector`.

    Reads are forwarded to the wrapped vector. Every mutating method raises
    :class:`ImmutableVectorError`. The constructor takes a private copy of
    ``vector``, so writes through the caller's reference never show through.
    """

    __slots__ = ("_vector",)

    def __init__(self, vector: Vector) -> None:
        self._vector = vector.copy()

    @classmethod
    def _adopt(cls, vector: Vector) -> "FrozenVector":
        # Only for vectors nobody else holds a reference to.
        frozen = cls.__new__(cls)
        frozen._vector = vector
        return frozen

    def _reject(self, operation: str) -> NoReturn:
        logger.debug("Rejected %s on frozen vector %s", operation, self._vector)
        raise ImmutableVectorError(f"Cannot {operation} an immutable vector.")

    # -- rejected mutations ----------------------------------------------

    def set_null(self) -> NoReturn:
        self._reject("set_null")

    def set_unassigned(self) -> NoReturn:
        self._reject("set_unassigned")

    def normalize(self) -> NoReturn:
        self._reject("normalize")

    def change(self, operand) -> NoReturn:
        self._reject("change")

    def dec(self, operand) -> NoReturn:
        self._reject("dec")

    def scale(self, factor: float) -> NoReturn:
        self._reject("scale")

    def rotate(self, angle: float) -> NoReturn:
        self._reject("rotate")

    def set_value(self, index: int, value: float) -> NoReturn:
        self._reject("set_value")

    def set(self, source) -> NoReturn:
        self._reject("set")

    # -- forwarded reads -------------------------------------------------

    @property
    def dimension(self) -> int:
        return self._vector.dimension

    @property
    def version(self) -> int:
        return self._vector.version

    def get_version(self) -> int:
        return self._vector.get_version()

    def get_value(self, index: int) -> float:
        return self._vector.get_value(index)

    def get(self) -> tuple[float, ...]:
        return self._vector.get()

    def to_array(self) -> np.ndarray:
        return self._vector.to_array()

    def square_module(self) -> float:
        return self._vector.square_module()

    def is_null(self) -> bool:
        return self._vector.is_null()

    def is_zero(self) -> bool:
        return self._vector.is_zero()

    def is_infinity(self) -> bool:
        return self._vector.is_infinity()

    def is_nan(self) -> bool:
        return self._vector.is_nan()

    def is_unassigned(self) -> bool:
        return self._vector.is_unassigned()

    def is_normalized(self) -> bool:
        return self._vector.is_normalized()

    def copy(self) -> Vector:
        """Return a mutable copy."""
        return self._vector.copy()

    def equals(self, other, epsilon: float) -> bool:
        return self._vector.equals(other, epsilon)

    def __eq__(self, other: object) -> bool:
        if not is_vector(other):
            return NotImplemented
        return self._vector == other

    def __hash__(self) -> int:
        return hash((self.dimension, self.get()))

    def __len__(self) -> int:
        return len(self._vector)

    def __iter__(self) -> Iterator[float]:
        return iter(self._vector)

    def __str__(self) -> str:
        return str(self._vector)

    def __repr__(self) -> str:
        return f"freeze({self._vector!r})"


def freeze(vector: Vector | FrozenVector) -> FrozenVector:
    """Return an immutable snapshot of ``vector``.

    The snapshot owns a private copy, so later writes to ``vector`` do not
    show through. Freezing an already frozen vector returns it unchanged.
    """
    if isinstance(vector, FrozenVector):
        return vector
    return FrozenVector(vector)


def immutable_of(*values: float) -> FrozenVector:
    return FrozenVector._adopt(Vector.of(*values))
