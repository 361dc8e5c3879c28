import pytest

from syslab.coins import Coins, main, set_coins


@pytest.mark.parametrize("cents", range(100))
def test_total_round_trip(cents):
    assert set_coins(cents).total() == cents


@pytest.mark.parametrize("cents", range(100))
def test_fewest_coins_bounds(cents):
    coins = set_coins(cents)
    assert 0 <= coins.quarters <= 3
    assert 0 <= coins.dimes <= 2
    assert 0 <= coins.nickels <= 1
    assert 0 <= coins.pennies <= 4
    assert not (coins.dimes == 2 and coins.nickels == 1)


def test_one_of_each():
    assert set_coins(41) == Coins(1, 1, 1, 1)


def test_zero():
    assert set_coins(0) == Coins()


@pytest.mark.parametrize("cents", [-1, 100, 1000])
def test_out_of_range(cents):
    with pytest.raises(ValueError):
        set_coins(cents)


def test_total_of_explicit_coins():
    assert Coins(quarters=2, pennies=3).total() == set_coins(53).total()


def test_main_prints_change(capsys):
    assert main(["67"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("67 cents is...\n")
    assert out.rstrip().endswith("which is 67 cents")


def test_main_usage(capsys):
    assert main([]) == 1
    assert "<cents>" in capsys.readouterr().out


def test_main_invalid(capsys):
    assert main(["150"]) == 1
    assert capsys.readouterr().out == "Invalid cents 150: must be between 0 and 99\n"


def test_main_non_numeric_is_zero(capsys):
    assert main(["abc"]) == 0
    assert "which is 0 cents" in capsys.readouterr().out