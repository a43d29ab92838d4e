import operator
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import numpy as np

from .hilbert import HilbertCurve
from .morton import MortonCurve
from .utils import IndexOutOfRangeError, Point, UnknownCurveError


@runtime_checkable
class CurveIndexer(Protocol):
    """Anything that maps curve indices on a 2^order grid to points and back."""
    order: int
    n: int
    total_cells: int

    def index_to_point(self, index: int) -> Point: ...

    def point_to_index(self, x: int, y: int) -> int: ...


CURVES = {
    "hilbert": HilbertCurve,
    "morton": MortonCurve,
}


def make_indexer(kind: str, order: int) -> CurveIndexer:
    try:
        curve_cls = CURVES[kind.lower()]
    except KeyError:
        raise UnknownCurveError(
            f"Unknown curve {kind!r}, expected one of {sorted(CURVES)}") from None
    return curve_cls(order)


def generate_path(indexer: CurveIndexer) -> list[Point]:
    """
    Builds the full path eagerly: element i is indexer.index_to_point(i),
    for i from 0 to total_cells - 1.
    """
    return [indexer.index_to_point(i) for i in range(indexer.total_cells)]


def path_array(indexer: CurveIndexer) -> np.ndarray:
    """Full path as a (total_cells, 2) int64 array, using the vectorized decode."""
    indices = np.arange(indexer.total_cells, dtype=np.int64)
    if hasattr(indexer, "index_to_points"):
        return indexer.index_to_points(indices)
    return np.array([indexer.index_to_point(i) for i in indices], dtype=np.int64).reshape(-1, 2)


class CurvePath(Sequence):
    """
    Lazy view of a curve's path. Points are computed on access, so the view
    costs nothing up front and can be iterated any number of times.
    """

    def __init__(self, indexer: CurveIndexer):
        self.indexer = indexer

    def __len__(self):
        return self.indexer.total_cells

    def __getitem__(self, item):
        if isinstance(item, slice):
            return [self.indexer.index_to_point(i) for i in range(*item.indices(len(self)))]
        i = operator.index(item)
        if i < 0:
            i += len(self)
        if not 0 <= i < len(self):
            raise IndexOutOfRangeError(f"Path index {item} out of range for length {len(self)}")
        return self.indexer.index_to_point(i)

    def __iter__(self):
        for i in range(len(self)):
            yield self.indexer.index_to_point(i)

    def __repr__(self):
        return f"CurvePath({self.indexer!r})"
