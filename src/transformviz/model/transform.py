"""
Transform Engine
================
The 2x2 matrix value and its action on plane points.

Classes:
    Matrix2x2: Immutable 2x2 matrix.

Functions:
    apply: Map one point.
    apply_all: Map a sequence of points at once (numpy).
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, TYPE_CHECKING

import numpy as np

from transformviz.model.geometry import Point

if TYPE_CHECKING:
    import numpy.typing as npt

_CELL_NAMES = (("m00", "m01"), ("m10", "m11"))


@dataclass(frozen=True)
class Matrix2x2:
    """
    A linear map ``p' = M p`` of the plane.

    Cells are addressed as ``m[i][j]`` with row ``i`` and column ``j``.
    """
    m00: float = 1.0
    m01: float = 0.0
    m10: float = 0.0
    m11: float = 1.0

    @classmethod
    def identity(cls) -> Matrix2x2:
        return cls.from_rows(((1.0, 0.0), (0.0, 1.0)))

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix2x2:
        (a, b), (c, d) = rows
        return cls(float(a), float(b), float(c), float(d))

    @staticmethod
    def _cell_name(i: int, j: int) -> str:
        if i not in (0, 1) or j not in (0, 1):
            raise IndexError(f"Matrix cell ({i}, {j}) is out of range for a 2x2 matrix.")
        return _CELL_NAMES[i][j]

    def cell(self, i: int, j: int) -> float:
        return getattr(self, self._cell_name(i, j))

    def with_cell(self, i: int, j: int, value: float) -> Matrix2x2:
        """Return a copy with exactly one cell replaced."""
        return replace(self, **{self._cell_name(i, j): float(value)})

    def rows(self) -> tuple[tuple[float, float], tuple[float, float]]:
        return (self.m00, self.m01), (self.m10, self.m11)

    def as_array(self) -> npt.NDArray[np.float64]:
        return np.array(self.rows(), dtype=np.float64)


def apply(point: tuple[float, float], matrix: Matrix2x2) -> Point:
    """Apply ``matrix`` to a single plane point."""
    x, y = point
    return Point(
        matrix.m00 * x + matrix.m01 * y,
        matrix.m10 * x + matrix.m11 * y,
    )


def apply_all(points: Iterable[tuple[float, float]], matrix: Matrix2x2) -> npt.NDArray[np.float64]:
    """
    Apply ``matrix`` to every point.

    Points are rows, so this uses the row-vector convention ``P @ M^T``.

    Returns:
        Array of shape (N, 2); (0, 2) for no points.
    """
    pts = np.asarray(list(points), dtype=np.float64).reshape(-1, 2)
    return pts @ matrix.as_array().T
