"""Two ways to reverse an array, with a timing benchmark."""

from __future__ import annotations

import re
import sys
import time
from typing import Callable, List, MutableSequence, Optional, Sequence

_PROG = "reversal_benchmark"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def reverse_copy(arr: MutableSequence[int]) -> None:
    """Reverse ``arr`` in place through a temporary copy."""
    tmp = arr[::-1]
    arr[:] = tmp


def reverse_in_place(arr: MutableSequence[int]) -> None:
    """Reverse ``arr`` in place by swapping elements from both ends."""
    size = len(arr)
    for i in range(size // 2):
        k = size - i - 1
        arr[i], arr[k] = arr[k], arr[i]


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _time_repeats(func: Callable[[MutableSequence[int]], None], arr: List[int], repeats: int) -> float:
    start = time.process_time()
    for _ in range(repeats):
        func(arr)
    return time.process_time() - start


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Time both reversals on arrays of size 2^min through 2^max."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print(f"usage: {_PROG} <min_pow2> <max_pow2> <repeats>")
        return 1
    min_pow = _atoi(args[0])
    max_pow = _atoi(args[1])
    repeats = _atoi(args[2])

    print("size \t rev1 \t\t rev2")
    for s in range(min_pow, max_pow + 1):
        size = 1 << s
        arr1 = list(range(size))
        arr2 = list(range(size))

        rev1_time = _time_repeats(reverse_copy, arr1, repeats)
        rev2_time = _time_repeats(reverse_in_place, arr2, repeats)
        print(f"{size} \t {rev1_time:.4e} \t {rev2_time:.4e}")

        expected = list(range(size)) if repeats % 2 == 0 else list(range(size - 1, -1, -1))
        if arr1 != expected or arr2 != expected:
            raise RuntimeError(f"reversal produced wrong contents for size {size}")
    return 0


if __name__ == "__main__":
    sys.exit(main())