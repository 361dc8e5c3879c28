"""Age in minutes and the privileges that come with it."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_MOD = 1 << 32


def _to_int32(value: int) -> int:
    value %= _MOD
    return value - _MOD if value >= 1 << 31 else value


def age_in_minutes(years: int) -> int:
    """Minutes in ``years`` 365-day years, as a 32-bit signed integer."""
    return _to_int32(years * 365 * 24 * 60)


def age_message(years: int) -> str:
    """What someone of ``years`` may legally do."""
    if years < 18:
        return "You're too young to do anything fun."
    if years < 21:
        return "You can vote but cannot (legally) imbibe alcohol."
    if years < 35:
        return "You may imbibe alcohol but cannot be president."
    return "You can vote, drink, and be president."


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for an age on standard input and report on it."""
    print("Enter your age in years:")
    match = _LEADING_INT.match(sys.stdin.read())
    years = _to_int32(int(match.group(1))) if match else 0
    print(f"You are {age_in_minutes(years)} minutes old.")
    print(age_message(years))
    return 0


if __name__ == "__main__":
    sys.exit(main())