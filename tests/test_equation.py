from transformviz.model.equation import format_latex, format_plain
from transformviz.model.transform import Matrix2x2


def test_latex_identity():
    assert format_latex(Matrix2x2.identity()) == (
        r"$$\begin{bmatrix} 1.00 & 0.00 \\ 0.00 & 1.00 \end{bmatrix}"
        r"\begin{bmatrix} x \\ y \end{bmatrix} = "
        r"\begin{bmatrix} 1.00x + 0.00y \\ 0.00x + 1.00y \end{bmatrix}$$"
    )


def test_latex_uses_two_decimals_and_row_order():
    latex = format_latex(Matrix2x2(1.5, -0.25, 4.0, -5.0))
    assert r"1.50 & -0.25 \\ 4.00 & -5.00" in latex
    assert r"1.50x + -0.25y \\ 4.00x + -5.00y" in latex


def test_negative_zero_is_printed_as_zero():
    latex = format_latex(Matrix2x2(-0.0, 0.0, 0.0, 1.0))
    assert "-0.00" not in latex


def test_plain_identity():
    assert format_plain(Matrix2x2.identity()).splitlines() == [
        "| 1.00 0.00 | |x|   | 1.00x + 0.00y |",
        "| 0.00 1.00 | |y| = | 0.00x + 1.00y |",
    ]


def test_plain_aligns_columns():
    lines = format_plain(Matrix2x2(-4.5, 1.0, 0.0, 2.0)).splitlines()
    assert lines[0] == "| -4.50  1.00 | |x|   | -4.50x + 1.00y |"
    assert lines[1] == "|  0.00  2.00 | |y| = | 0.00x + 2.00y  |"
    assert len(lines[0]) == len(lines[1])


def test_custom_decimals():
    assert "0.333" in format_plain(Matrix2x2(1 / 3, 0, 0, 1), decimals=3)
