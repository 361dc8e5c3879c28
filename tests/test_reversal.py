import pytest

from syslab.reversal import main, reverse_copy, reverse_in_place


@pytest.mark.parametrize("size", [0, 1, 2, 5, 8, 33])
def test_matches_builtin_reversal(size):
    expected = list(reversed(range(size)))
    a = list(range(size))
    reverse_copy(a)
    assert a == expected
    b = list(range(size))
    reverse_in_place(b)
    assert b == expected


def test_twice_restores():
    original = [4, -1, 9, 9, 0, 12, 3]
    a = list(original)
    reverse_copy(a)
    reverse_copy(a)
    assert a == original
    b = list(original)
    reverse_in_place(b)
    reverse_in_place(b)
    assert b == original


def test_returns_none_and_mutates():
    a = [1, 2, 3]
    assert reverse_copy(a) is None
    assert a == [3, 2, 1]
    b = [1, 2, 3]
    assert reverse_in_place(b) is None
    assert b == [3, 2, 1]


def test_both_agree():
    a = [7, 3, 5, 1, 8, 2]
    b = list(a)
    reverse_copy(a)
    reverse_in_place(b)
    assert a == b


def test_main_usage(capsys):
    assert main(["1", "2"]) == 1
    assert "usage:" in capsys.readouterr().out


@pytest.mark.parametrize("repeats", ["2", "3"])
def test_main_prints_rows(capsys, repeats):
    assert main(["0", "3", repeats]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "size \t rev1 \t\t rev2"
    sizes = [line.split(" \t ")[0] for line in lines[1:]]
    assert sizes == [str(1 << s) for s in range(0, 4)]