from __future__ import annotations

from fractions import Fraction

import pytest

from densematrix import Matrix, MatrixLiteralError, RaggedMatrixError, mx, mx_rows, parse_literal


def test_mx_fill_matches_text_literal():
    rows, cols, init = 2, 3, 1
    assert mx(rows, cols, init) == mx("1, 1, 1; 1, 1, 1;")


def test_mx_fill_defaults_to_zero():
    assert mx(2, 3) == Matrix([[0, 0, 0], [0, 0, 0]])
    assert mx(1, 2, dtype=float) == Matrix([[0.0, 0.0]])


def test_mx_literal_rows():
    assert mx([[0, 0, 0], [0, 0, 0]]) == Matrix.fill(2, 3, 0)
    assert mx_rows([1, 2], [3, 4]) == Matrix([[1, 2], [3, 4]])


def test_mx_copies_matrix_argument():
    source = Matrix([[1, 2]])
    clone = mx(source)
    clone.set(0, 0, 5)
    assert source.get(0, 0) == 1


def test_mx_rejects_bad_arity():
    with pytest.raises(TypeError):
        mx(1, 2, 3, 4)


def test_parse_literal_numbers():
    assert parse_literal("1, 2.5; -3, 1/3") == [[1, 2.5], [-3, Fraction(1, 3)]]
    parsed = parse_literal(" 4 ;5;")
    assert parsed == [[4], [5]]
    assert all(isinstance(row[0], int) for row in parsed)


def test_parse_literal_multiline_text():
    text = """
        1, 2, 3;
        4, 5, 6;
    """
    assert mx(text) == Matrix([[1, 2, 3], [4, 5, 6]])


@pytest.mark.parametrize(
    "text,row,col",
    [("1, x; 3, 4", 0, 1), ("1, 2; 3, ", 1, 1), ("1; 1/0", 1, 0)],
)
def test_parse_literal_reports_bad_cells(text, row, col):
    with pytest.raises(MatrixLiteralError) as excinfo:
        parse_literal(text)
    assert excinfo.value.row == row
    assert excinfo.value.col == col


@pytest.mark.parametrize("text", ["", ";", "1, 2;; 3, 4"])
def test_parse_literal_rejects_empty_rows(text):
    with pytest.raises(MatrixLiteralError):
        parse_literal(text)


def test_parse_literal_rejects_ragged_rows():
    with pytest.raises(RaggedMatrixError):
        parse_literal("1, 2; 3")
