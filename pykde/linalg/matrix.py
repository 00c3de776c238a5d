"""
Matrix: ordered sequence of equal-length rows.

Backed by a 2D numpy array, so every row always has `column_count`
entries. Arithmetic operators are shape-checked and return new Matrices.
Structural edits (rows and columns) go through the methods here; a row
obtained with `M[i]` is a Vector view whose item writes reach the matrix.

A matrix with no rows is stored as 0x0: its column count is 0.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pykde.core.exceptions import ShapeMismatchError, ValidationError
from pykde.core.validation import check_1d, check_2d, check_array, check_same_length
from pykde.linalg.vector import Vector


class Matrix:
    """
    Dense matrix of float64 values.

    Construction:
        Matrix()                  - 0x0
        Matrix(2, 3)              - 2x3 zeros (the column count is required)
        Matrix([[1, 2], [3, 4]])  - from row sequences / Vectors / 2D array

    Operators:
        A + B, A - B, -A          elementwise, shapes must match
        c * A, A * c              scalar multiple
        A * v, A @ v              matrix-vector product (returns Vector)
        A * B, A @ B              matrix product
    """

    __array_ufunc__ = None

    __slots__ = ('_data',)

    def __init__(
        self,
        rows: int | Sequence[ArrayLike] | ArrayLike | None = None,
        columns: int | None = None,
    ):
        if rows is None:
            data = np.zeros((0, 0), dtype=np.float64)
        elif isinstance(rows, (int, np.integer)) and not isinstance(rows, bool):
            if columns is None:
                raise ValidationError(f"columns: required when rows is a count, got Matrix({rows})")
            if rows < 0 or columns < 0:
                raise ValidationError(f"shape: must be non-negative, got ({rows}, {columns})")
            data = np.zeros((int(rows), int(columns)), dtype=np.float64)
        elif isinstance(rows, Matrix):
            data = rows._data.copy()
        elif isinstance(rows, np.ndarray):
            data = check_array(rows, 'rows')
            check_2d(data, 'rows')
        else:
            data = self._stack_rows(rows)
        self._data = self._normalize(data)

    @staticmethod
    def _stack_rows(rows: Sequence[ArrayLike]) -> NDArray[np.floating[Any]]:
        vectors = [r.to_numpy() if isinstance(r, Vector) else check_array(r, 'row') for r in rows]
        if not vectors:
            return np.zeros((0, 0), dtype=np.float64)
        for v in vectors:
            check_1d(v, 'row')
        width = vectors[0].shape[0]
        if any(v.shape[0] != width for v in vectors):
            raise ShapeMismatchError()
        return np.vstack(vectors)

    @staticmethod
    def _normalize(data: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        if data.shape[0] == 0:
            return np.zeros((0, 0), dtype=np.float64)
        return data

    @classmethod
    def _wrap(cls, data: NDArray[np.floating[Any]]) -> Matrix:
        """Wrap an existing 2D float64 array without copying."""
        matrix = cls.__new__(cls)
        matrix._data = cls._normalize(data)
        return matrix

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity."""
        return cls._wrap(np.eye(n, dtype=np.float64))

    @classmethod
    def row_vector(cls, vector: Vector | ArrayLike) -> Matrix:
        """Vector as a 1 x n matrix."""
        return cls([Vector(vector)])

    @classmethod
    def column_vector(cls, vector: Vector | ArrayLike) -> Matrix:
        """Vector as an n x 1 matrix."""
        return cls.row_vector(vector).transpose()

    # --- Shape queries ---

    @property
    def row_count(self) -> int:
        return self._data.shape[0]

    @property
    def column_count(self) -> int:
        return 0 if self.row_count == 0 else self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.row_count, self.column_count)

    @property
    def is_square(self) -> bool:
        return self.row_count == self.column_count

    def __len__(self) -> int:
        return self.row_count

    # --- Element and row access ---

    def __getitem__(self, index: int | tuple[int, int]) -> Vector | float:
        if isinstance(index, tuple):
            row, col = index
            return float(self._data[row, col])
        return Vector._wrap(self._data[index])

    def __setitem__(self, index: int | tuple[int, int], value: Any) -> None:
        if isinstance(index, tuple):
            row, col = index
            self._data[row, col] = value
            return
        row = Vector(value)
        check_same_length(len(row), self.column_count, 'row')
        self._data[index] = row.to_numpy()

    def __iter__(self) -> Iterator[Vector]:
        for i in range(self.row_count):
            yield Vector._wrap(self._data[i])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"

    def __array__(self, dtype=None, copy=None) -> NDArray[np.floating[Any]]:
        if dtype is None:
            return self._data.copy() if copy else self._data
        return self._data.astype(dtype)

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Return a copy of the entries as a 2D numpy array."""
        return self._data.copy()

    def copy(self) -> Matrix:
        return Matrix._wrap(self._data.copy())

    # --- Structural edits ---

    def append_row(self, row: Vector | ArrayLike) -> None:
        """
        Add a row at the bottom.

        Raises:
            ShapeMismatchError: If the matrix has rows and len(row) differs
                from column_count
        """
        self.insert_row(self.row_count, row)

    def insert_row(self, index: int, row: Vector | ArrayLike) -> None:
        """Insert a row before position `index`."""
        values = Vector(row).to_numpy()
        if not 0 <= index <= self.row_count:
            raise IndexError(f"row index {index} out of range for {self.row_count} rows")
        if self.row_count == 0:
            self._data = values.reshape(1, -1)
            return
        check_same_length(values.shape[0], self.column_count, 'row')
        self._data = np.concatenate([self._data[:index], values.reshape(1, -1), self._data[index:]], axis=0)

    def remove_row_at(self, index: int) -> None:
        """Remove the row at position `index` (negative indices allowed)."""
        n = self.row_count
        if not -n <= index < n:
            raise IndexError(f"row index {index} out of range for {n} rows")
        self._data = self._normalize(np.delete(self._data, index % n, axis=0))

    def insert_column(self, index: int) -> None:
        """Insert a zero column before position `index` in every row."""
        if not 0 <= index <= self.column_count:
            raise IndexError(f"column index {index} out of range for {self.column_count} columns")
        if self.row_count == 0:
            return
        zeros = np.zeros((self.row_count, 1), dtype=np.float64)
        self._data = np.concatenate([self._data[:, :index], zeros, self._data[:, index:]], axis=1)

    def remove_column_at(self, index: int) -> None:
        """Remove the column at position `index` from every row."""
        n = self.column_count
        if not -n <= index < n:
            raise IndexError(f"column index {index} out of range for {n} columns")
        self._data = np.delete(self._data, index % n, axis=1)

    # --- Arithmetic ---

    def _check_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise ShapeMismatchError()

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix._wrap(self._data + other._data)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix._wrap(self._data - other._data)

    def __neg__(self) -> Matrix:
        return Matrix._wrap(-self._data)

    def __mul__(self, other: Matrix | Vector | float) -> Matrix | Vector:
        if isinstance(other, Matrix):
            return self.matrix_multiply(other)
        if isinstance(other, Vector):
            return self.vector_multiply(other)
        if isinstance(other, (Real, np.floating, np.integer)):
            return Matrix._wrap(float(other) * self._data)
        return NotImplemented

    def __rmul__(self, other: float) -> Matrix:
        if isinstance(other, (Real, np.floating, np.integer)):
            return Matrix._wrap(float(other) * self._data)
        return NotImplemented

    def __matmul__(self, other: Matrix | Vector) -> Matrix | Vector:
        if isinstance(other, Matrix):
            return self.matrix_multiply(other)
        if isinstance(other, Vector):
            return self.vector_multiply(other)
        return NotImplemented

    def vector_multiply(self, vector: Vector) -> Vector:
        """Return self @ vector. Requires len(vector) == column_count."""
        if len(vector) != self.column_count:
            raise ShapeMismatchError()
        if self.row_count == 0:
            return Vector()
        return Vector._wrap(self._data @ vector.to_numpy())

    def matrix_multiply(self, right: Matrix) -> Matrix:
        """Return self @ right. Requires right.row_count == column_count."""
        if right.row_count != self.column_count:
            raise ShapeMismatchError()
        if self.row_count == 0:
            return Matrix()
        if right.row_count == 0:
            return Matrix(self.row_count, 0)
        return Matrix._wrap(self._data @ right._data)

    def transpose(self) -> Matrix:
        """Return a new transposed matrix."""
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()
