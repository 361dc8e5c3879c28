import random

import pytest

from syslab.colmins import (
    check_answer,
    col_mins1,
    col_mins2,
    col_mins3,
    col_mins4,
    col_mins5,
    main,
)
from syslab.matvec import Matrix, Vector

ALL = [col_mins1, col_mins2, col_mins3, col_mins4, col_mins5]


def _matrix(rows, cols, seed):
    rng = random.Random(seed)
    mat = Matrix(rows, cols)
    for i in range(rows):
        for j in range(cols):
            mat[i, j] = rng.randint(-1000, 1000)
    return mat


@pytest.mark.parametrize("func", ALL)
def test_sequential_matrix_minimum_is_first_row(func):
    mat = Matrix(6, 7)
    mat.fill_sequential()
    assert list(func(mat)) == mat.row(0)


@pytest.mark.parametrize("func", ALL)
def test_known_matrix(func):
    mat = Matrix(4, 2)
    for (i, j), value in {
        (0, 0): 5, (0, 1): 2,
        (1, 0): 3, (1, 1): 9,
        (2, 0): 8, (2, 1): -4,
        (3, 0): 7, (3, 1): 6,
    }.items():
        mat[i, j] = value
    assert list(func(mat)) == [3, -4]


@pytest.mark.parametrize("rows,cols", [(4, 1), (5, 4), (9, 5), (13, 8), (17, 11)])
def test_all_implementations_agree(rows, cols):
    mat = _matrix(rows, cols, rows * 100 + cols)
    results = [list(f(mat)) for f in ALL]
    assert all(r == results[0] for r in results)
    assert len(results[0]) == cols


@pytest.mark.parametrize("func", ALL)
def test_result_bounded_by_every_row(func):
    mat = _matrix(8, 6, 42)
    mins = list(func(mat))
    for i in range(mat.rows):
        assert all(m <= x for m, x in zip(mins, mat.row(i)))
    for j, m in enumerate(mins):
        assert m in mat.data[j::mat.cols]


def test_col_mins3_needs_four_rows():
    mat = Matrix(3, 5)
    with pytest.raises(ValueError):
        col_mins3(mat)


@pytest.mark.parametrize("func", [col_mins1, col_mins2, col_mins4, col_mins5])
def test_single_row_matrix(func):
    mat = _matrix(1, 6, 7)
    assert list(func(mat)) == mat.row(0)


def test_check_answer_match():
    a = Vector(3)
    a.fill_sequential()
    b = Vector(3)
    b.fill_sequential()
    assert check_answer(a, b, "same") is True


def test_check_answer_reports_mismatch(capsys):
    a = Vector(3)
    a.fill_sequential()
    b = Vector(3)
    b.fill_sequential()
    b[1] = 50
    assert check_answer(a, b, "broken") is False
    out = capsys.readouterr().out
    assert "ERROR: broken produced incorrect results" in out
    assert "Element 1: expect 1  actual 50" in out


def test_main_usage(capsys):
    assert main([]) == 1
    assert "usage:" in capsys.readouterr().out


def test_main_invalid_size(capsys):
    assert main(["0", "3"]) == 1
    assert "Invalid rows or cols" in capsys.readouterr().out


def test_main_runs_all(capsys):
    assert main(["10", "9"]) == 0
    out = capsys.readouterr().out
    for func in ALL:
        assert f"{func.__name__} CPU usage:" in out
    assert "ERROR" not in out