import pytest

from drills.matrix import main, transpose


def _grid(rows, cols):
    """Matrix whose entry at (row r, column c) is 100 * r + c, counting from 1."""
    return [[100 * r + c for c in range(1, cols + 1)] for r in range(1, rows + 1)]


def test_transpose_small_grid():
    assert transpose([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [
        [1, 4, 7],
        [2, 5, 8],
        [3, 6, 9],
    ]


def test_transpose_hundreds_grid():
    result = transpose(_grid(3, 3))
    assert result[0] == [101, 201, 301]
    assert result[1] == [102, 202, 302]
    assert result[2] == [103, 203, 303]


def test_transpose_twice_is_identity():
    grid = _grid(3, 3)
    assert transpose(transpose(grid)) == grid


def test_diagonal_is_unchanged():
    result = transpose(_grid(3, 3))
    assert [result[i][i] for i in range(3)] == [101, 202, 303]


def test_input_is_not_modified():
    grid = _grid(3, 3)
    transpose(grid)
    assert grid == _grid(3, 3)


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        transpose([[1, 2, 3], [4, 5]])


def test_main(capsys):
    main([])
    out = capsys.readouterr().out
    assert out.startswith("matrix: ")
    assert "transposed: " in out