"""
Equation formatting for the current matrix.

The LaTeX form matches what a MathJax/mathtext renderer expects; the plain
form is what the Qt label shows.
"""
from __future__ import annotations

from transformviz import config
from transformviz.model.transform import Matrix2x2


def _fmt(value: float, decimals: int) -> str:
    # "+ 0.0" folds negative zero into "0.00"
    return f"{value + 0.0:.{decimals}f}"


def format_latex(matrix: Matrix2x2, decimals: int = config.DISPLAY_DECIMALS) -> str:
    """Return ``M [x y]^T = [...]`` as a LaTeX display-math string."""
    a, b, c, d = (_fmt(v, decimals) for v in (matrix.m00, matrix.m01, matrix.m10, matrix.m11))
    return (
        "$$\\begin{bmatrix} " + a + " & " + b + " \\\\ " + c + " & " + d + " \\end{bmatrix}"
        "\\begin{bmatrix} x \\\\ y \\end{bmatrix} = "
        "\\begin{bmatrix} " + a + "x + " + b + "y \\\\ " + c + "x + " + d + "y \\end{bmatrix}$$"
    )


def format_plain(matrix: Matrix2x2, decimals: int = config.DISPLAY_DECIMALS) -> str:
    """
    Return a two-line monospace rendering of the equation, e.g.::

        | 1.00 0.00 | |x|   | 1.00x + 0.00y |
        | 0.00 1.00 | |y| = | 0.00x + 1.00y |
    """
    cells = [[_fmt(v, decimals) for v in row] for row in matrix.rows()]
    width = max(len(s) for row in cells for s in row)
    left = [" ".join(s.rjust(width) for s in row) for row in cells]
    right = [f"{row[0]}x + {row[1]}y" for row in cells]
    right_width = max(len(s) for s in right)
    lines = [
        f"| {left[0]} | |x|   | {right[0].ljust(right_width)} |",
        f"| {left[1]} | |y| = | {right[1].ljust(right_width)} |",
    ]
    return "\n".join(lines)
