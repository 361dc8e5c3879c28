import pytest

from syslab.ipow import ipow, main


@pytest.mark.parametrize("base", [-5, -1, 0, 1, 2, 7])
def test_zero_exponent_is_one(base):
    assert ipow(base, 0) == 1


@pytest.mark.parametrize("exp", [-1, -10])
def test_negative_exponent_is_one(exp):
    assert ipow(3, exp) == 1


@pytest.mark.parametrize("base", [-3, 2, 3, 5])
@pytest.mark.parametrize("exp", range(0, 10))
def test_recurrence(base, exp):
    assert ipow(base, exp + 1) == ipow(base, exp) * base


def test_first_power_is_base():
    assert ipow(12345, 1) == 12345


def test_wraps_to_negative():
    assert ipow(2, 31) == -(1 << 31)


def test_wraps_to_zero():
    assert ipow(2, 32) == 0


def test_main_output(capsys):
    assert main(["3", "4"]) == 0
    assert capsys.readouterr().out == f"3^4 = {ipow(3, 4)}\n"


def test_main_usage(capsys):
    assert main(["3"]) == 1
    assert capsys.readouterr().out.startswith("usage:")