import numpy as np
import pytest

from space_filling_curves.hilbert import HilbertCurve
from space_filling_curves.morton import MortonCurve
from space_filling_curves.paths import (
    CURVES,
    CurveIndexer,
    CurvePath,
    generate_path,
    make_indexer,
    path_array,
)
from space_filling_curves.utils import IndexOutOfRangeError, InvalidOrderError, Point, UnknownCurveError


@pytest.fixture(params=sorted(CURVES))
def curve_cls(request):
    return CURVES[request.param]


def test_indexers_satisfy_protocol():
    assert isinstance(HilbertCurve(2), CurveIndexer)
    assert isinstance(MortonCurve(2), CurveIndexer)


def test_make_indexer():
    assert isinstance(make_indexer("hilbert", 3), HilbertCurve)
    assert isinstance(make_indexer("Morton", 3), MortonCurve)
    assert make_indexer("morton", 3).order == 3


def test_make_indexer_unknown_curve():
    with pytest.raises(UnknownCurveError):
        make_indexer("peano", 3)


def test_make_indexer_invalid_order():
    with pytest.raises(InvalidOrderError):
        make_indexer("hilbert", 0)


@pytest.mark.parametrize("order", [1, 2, 3, 5])
def test_path_length(curve_cls, order):
    indexer = curve_cls(order)
    assert len(generate_path(indexer)) == 4 ** order
    assert len(CurvePath(indexer)) == 4 ** order
    assert path_array(indexer).shape == (4 ** order, 2)


def test_generate_path_follows_index_order(curve_cls):
    indexer = curve_cls(3)
    path = generate_path(indexer)
    assert all(isinstance(p, Point) for p in path)
    assert path == [indexer.index_to_point(i) for i in range(indexer.total_cells)]


def test_generate_path_is_repeatable(curve_cls):
    indexer = curve_cls(4)
    assert generate_path(indexer) == generate_path(indexer)


def test_hilbert_order_1_path():
    assert generate_path(HilbertCurve(1)) == [(0, 0), (1, 0), (1, 1), (0, 1)]


def test_morton_order_1_path():
    assert generate_path(MortonCurve(1)) == [(0, 0), (1, 0), (0, 1), (1, 1)]


def test_path_array_matches_generate_path(curve_cls):
    indexer = curve_cls(4)
    np.testing.assert_array_equal(path_array(indexer), np.array(generate_path(indexer)))
    assert path_array(indexer).dtype == np.int64


def test_path_array_without_vectorized_decode():
    class Diagonal:
        order = 1
        n = 2
        total_cells = 4

        def index_to_point(self, index):
            return Point(index % 2, index // 2)

        def point_to_index(self, x, y):
            return 2 * y + x

    np.testing.assert_array_equal(path_array(Diagonal()), [[0, 0], [1, 0], [0, 1], [1, 1]])


def test_lazy_path_matches_eager(curve_cls):
    indexer = curve_cls(3)
    lazy = CurvePath(indexer)
    assert list(lazy) == generate_path(indexer)


def test_lazy_path_is_restartable(curve_cls):
    lazy = CurvePath(curve_cls(2))
    assert list(lazy) == list(lazy)


def test_lazy_path_indexing():
    lazy = CurvePath(HilbertCurve(2))
    assert lazy[0] == (0, 0)
    assert lazy[4] == (0, 2)
    assert lazy[-1] == (3, 0)
    assert lazy[1:4] == [(1, 0), (1, 1), (0, 1)]
    assert lazy[::-5] == [(3, 0), (3, 3), (0, 3), (0, 0)]
    assert (1, 1) in lazy
    assert lazy.index((0, 2)) == 4


@pytest.mark.parametrize("index", [16, -17])
def test_lazy_path_out_of_range(index):
    lazy = CurvePath(MortonCurve(2))
    with pytest.raises(IndexOutOfRangeError):
        lazy[index]


def test_lazy_path_out_of_range_is_index_error():
    with pytest.raises(IndexError):
        CurvePath(MortonCurve(1))[4]
