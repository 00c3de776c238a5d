"""
Vector: ordered, mutable sequence of float64 scalars.

Backed by a 1D numpy array. Arithmetic operators are shape-checked and
return new Vectors; only item assignment and the explicit length edits
(append, insert, remove_at) mutate in place.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Iterable, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pykde.core.exceptions import NumericalError, ShapeMismatchError, ValidationError
from pykde.core.validation import check_1d, check_array


class Vector:
    """
    Ordered sequence of floats supporting elementwise arithmetic.

    Construction:
        Vector()            - empty
        Vector(3)           - three zeros
        Vector([1.0, 2.0])  - copy of any 1D numeric array-like (or Vector)

    Operators:
        u + v, u - v, -v    elementwise, lengths must match
        c * v, v * c        scalar multiple
        u * v               dot product
    """

    # Keep numpy from broadcasting over Vectors in mixed expressions
    # (np.float64(2.0) * v must reach __rmul__).
    __array_ufunc__ = None

    __slots__ = ('_data',)

    def __init__(self, values: int | ArrayLike | None = None):
        if values is None:
            self._data = np.zeros(0, dtype=np.float64)
        elif isinstance(values, (int, np.integer)) and not isinstance(values, bool):
            if values < 0:
                raise ValidationError(f"length: must be >= 0, got {values}")
            self._data = np.zeros(int(values), dtype=np.float64)
        else:
            if isinstance(values, Vector):
                values = values._data
            data = check_array(values, 'values')
            check_1d(data, 'values')
            self._data = data

    @classmethod
    def _wrap(cls, data: NDArray[np.floating[Any]]) -> Vector:
        """Wrap an existing 1D float64 array without copying."""
        vector = cls.__new__(cls)
        vector._data = data
        return vector

    # --- Sequence protocol ---

    def __len__(self) -> int:
        return self._data.shape[0]

    @property
    def count(self) -> int:
        """Number of entries."""
        return self._data.shape[0]

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __setitem__(self, index: int, value: float) -> None:
        self._data[index] = value

    def __iter__(self) -> Iterator[float]:
        return (float(x) for x in self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data.shape == other._data.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()!r})"

    def __array__(self, dtype=None, copy=None) -> NDArray[np.floating[Any]]:
        if dtype is None:
            return self._data.copy() if copy else self._data
        return self._data.astype(dtype)

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Return a copy of the entries as a 1D numpy array."""
        return self._data.copy()

    def copy(self) -> Vector:
        return Vector._wrap(self._data.copy())

    # --- Length edits ---

    def append(self, value: float) -> None:
        """Add one entry at the end."""
        self._data = np.append(self._data, float(value))

    def insert(self, index: int, value: float) -> None:
        """Insert one entry before position `index`."""
        if not 0 <= index <= len(self):
            raise IndexError(f"insert index {index} out of range for length {len(self)}")
        self._data = np.insert(self._data, index, float(value))

    def remove_at(self, index: int) -> None:
        """Remove the entry at position `index` (negative indices allowed)."""
        n = len(self)
        if not -n <= index < n:
            raise IndexError(f"index {index} out of range for length {n}")
        self._data = np.delete(self._data, index % n)

    def extend(self, values: Iterable[float]) -> None:
        extra = Vector(list(values))
        self._data = np.concatenate([self._data, extra._data])

    # --- Arithmetic ---

    def _check_same_length(self, other: Vector) -> None:
        if len(self) != len(other):
            raise ShapeMismatchError()

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_length(other)
        return Vector._wrap(self._data + other._data)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_length(other)
        return Vector._wrap(self._data - other._data)

    def __neg__(self) -> Vector:
        return -1.0 * self

    def __mul__(self, other: Vector | float) -> Vector | float:
        if isinstance(other, Vector):
            return Vector.dot(self, other)
        if isinstance(other, (Real, np.floating, np.integer)):
            return Vector._wrap(float(other) * self._data)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector:
        if isinstance(other, (Real, np.floating, np.integer)):
            return Vector._wrap(float(other) * self._data)
        return NotImplemented

    @staticmethod
    def dot(u: Vector, v: Vector) -> float:
        """Dot product. Raises ShapeMismatchError if lengths differ."""
        u._check_same_length(v)
        return float(np.dot(u._data, v._data))

    def hadamard(self, other: Vector) -> Vector:
        """Elementwise (Hadamard) product."""
        self._check_same_length(other)
        return Vector._wrap(self._data * other._data)

    # --- Magnitude ---

    @property
    def magnitude(self) -> float:
        """Euclidean norm. Assigning rescales the vector to the new norm."""
        return float(np.linalg.norm(self._data))

    @magnitude.setter
    def magnitude(self, value: float) -> None:
        value = float(value)
        if not math.isfinite(value) or value < 0.0:
            raise ValidationError(f"magnitude: must be finite and >= 0, got {value}")
        current = self.magnitude
        if current == 0.0:
            if value == 0.0:
                return
            raise NumericalError("cannot rescale the zero vector to a non-zero magnitude")
        self._data *= value / current
