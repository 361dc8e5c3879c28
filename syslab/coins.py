"""Making change in quarters, dimes, nickels and pennies."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

_PROG = "coins"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Coins:
    """A collection of coins."""

    quarters: int = 0
    dimes: int = 0
    nickels: int = 0
    pennies: int = 0

    def total(self) -> int:
        """Total value in cents."""
        return self.quarters * 25 + self.dimes * 10 + self.nickels * 5 + self.pennies


def set_coins(cents: int) -> Coins:
    """Break ``cents`` (0 to 99) into the fewest coins.

    Raises ValueError when ``cents`` is out of range.
    """
    if not 0 <= cents <= 99:
        raise ValueError(f"Invalid cents {cents}: must be between 0 and 99")
    quarters, cents = divmod(cents, 25)
    dimes, cents = divmod(cents, 10)
    nickels, pennies = divmod(cents, 5)
    return Coins(quarters, dimes, nickels, pennies)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the change for the cents given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(f"usage: {_PROG} <cents>")
        print(" <cents> : integer from 0 to 99")
        return 1

    cents = _atoi(args[0])
    try:
        coins = set_coins(cents)
    except ValueError as err:
        print(err)
        return 1

    print(f"{cents} cents is...")
    print(f"{coins.quarters} quarters")
    print(f"{coins.dimes} dimes")
    print(f"{coins.nickels} nickels")
    print(f"{coins.pennies} pennies")
    print(f"which is {coins.total()} cents")
    return 0


if __name__ == "__main__":
    sys.exit(main())