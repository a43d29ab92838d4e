import operator
from typing import NamedTuple

import numpy as np

# Keeps every index inside a signed 64-bit integer (2 * 31 = 62 bits).
MAX_ORDER = 31


class CurveError(ValueError):
    """Base class for invalid input to a curve indexer."""


class InvalidOrderError(CurveError):
    pass


class IndexOutOfRangeError(CurveError, IndexError):
    pass


class PointOutOfRangeError(CurveError):
    pass


class UnknownCurveError(CurveError):
    pass


class Point(NamedTuple):
    x: int
    y: int


class CurveGrid:
    """
    Square grid of side 2^order shared by every curve indexer.
    Stores the order, the side length n and the number of cells n^2.
    The order is checked here so a bad value fails at construction.
    """
    __slots__ = ("_order", "_n", "_total_cells")

    def __init__(self, order: int):
        if isinstance(order, bool):
            raise InvalidOrderError(f"Order must be an integer, got {order!r}")
        try:
            order = operator.index(order)
        except TypeError:
            raise InvalidOrderError(f"Order must be an integer, got {order!r}") from None
        if order < 1 or order > MAX_ORDER:
            raise InvalidOrderError(f"Order must be between 1 and {MAX_ORDER}, got {order}")
        self._order = order
        self._n = 1 << order
        self._total_cells = self._n * self._n

    @property
    def order(self) -> int:
        return self._order

    @property
    def n(self) -> int:
        return self._n

    @property
    def total_cells(self) -> int:
        return self._total_cells

    def check_index(self, index) -> int:
        index = operator.index(index)
        if not 0 <= index < self._total_cells:
            raise IndexOutOfRangeError(
                f"Index {index} outside [0, {self._total_cells}) for order {self._order}")
        return index

    def check_indices(self, indices) -> np.ndarray:
        """
        Vectorized check_index: returns the indices as a 1-D int64 array.
        Accepts a scalar or a 1-D sequence; higher-dimensional input is rejected.
        """
        arr = np.asarray(indices)
        if arr.ndim > 1:
            raise ValueError(f"Indices must be a 1-D sequence, got shape {arr.shape}")
        if arr.dtype == object:
            # Python ints too large for int64 end up here.
            return np.array([self.check_index(i) for i in arr.reshape(-1)], dtype=np.int64)
        if arr.size and not np.issubdtype(arr.dtype, np.integer):
            raise TypeError(f"Indices must be integers, got dtype {arr.dtype}")
        arr = arr.reshape(-1)
        if arr.size and (arr.min() < 0 or arr.max() >= self._total_cells):
            bad = arr[(arr < 0) | (arr >= self._total_cells)][0]
            raise IndexOutOfRangeError(
                f"Index {bad} outside [0, {self._total_cells}) for order {self._order}")
        return arr.astype(np.int64)

    def check_point(self, x, y) -> tuple[int, int]:
        x = operator.index(x)
        y = operator.index(y)
        if not (0 <= x < self._n and 0 <= y < self._n):
            raise PointOutOfRangeError(
                f"Point ({x}, {y}) outside the {self._n}x{self._n} grid")
        return x, y

    def __eq__(self, other):
        if not isinstance(other, CurveGrid):
            return NotImplemented
        return self._order == other._order

    def __hash__(self):
        return hash(self._order)

    def __repr__(self):
        return f"CurveGrid(order={self._order})"
