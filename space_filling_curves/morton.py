import numpy as np

from .utils import CurveGrid, Point


# --- Z-Order Bit Interleaving ---

def interleave(x: int, y: int, bits: int) -> int:
    """
    Converts 2D coordinates to a 1D Z-order value by interleaving bits.
    Bit i of x lands on bit 2i, bit i of y on bit 2i + 1.
    """
    z = 0
    for i in range(bits):
        z |= (x & (1 << i)) << i | (y & (1 << i)) << (i + 1)
    return z


def deinterleave(z: int, bits: int) -> Point:
    """Splits a Z-order value back into its (x, y) coordinates."""
    x = y = 0
    for i in range(bits):
        x |= (z & (1 << (2 * i))) >> i
        y |= (z & (1 << (2 * i + 1))) >> (i + 1)
    return Point(x, y)


class MortonCurve:
    """Morton (Z-order) curve over a 2^order x 2^order grid."""

    def __init__(self, order: int):
        self.grid = CurveGrid(order)

    @property
    def order(self) -> int:
        return self.grid.order

    @property
    def n(self) -> int:
        return self.grid.n

    @property
    def total_cells(self) -> int:
        return self.grid.total_cells

    def index_to_point(self, index: int) -> Point:
        return deinterleave(self.grid.check_index(index), self.order)

    def point_to_index(self, x: int, y: int) -> int:
        x, y = self.grid.check_point(x, y)
        return interleave(x, y, self.order)

    def index_to_points(self, indices) -> np.ndarray:
        z = self.grid.check_indices(indices)
        x = np.zeros_like(z)
        y = np.zeros_like(z)
        for i in range(self.order):
            x |= ((z >> (2 * i)) & 1) << i
            y |= ((z >> (2 * i + 1)) & 1) << i
        return np.stack([x, y], axis=1)

    def __repr__(self):
        return f"MortonCurve(order={self.order})"
