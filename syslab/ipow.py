"""Integer exponentiation with 32-bit signed wrap-around."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence

_PROG = "ipow"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_MOD = 1 << 32


def _to_int32(value: int) -> int:
    value %= _MOD
    return value - _MOD if value >= 1 << 31 else value


def ipow(base: int, exp: int) -> int:
    """``base`` raised to ``exp`` as a 32-bit signed integer; 1 when ``exp`` <= 0."""
    if exp <= 0:
        return 1
    return _to_int32(pow(base, exp, _MOD))


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return _to_int32(int(match.group(1))) if match else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print base^exp for the two integers given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(f"usage: {_PROG} <base> <exp>")
        return 1
    base = _atoi(args[0])
    exp = _atoi(args[1])
    print(f"{base}^{exp} = {ipow(base, exp)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())