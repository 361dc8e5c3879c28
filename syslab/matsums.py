"""Row and column sums of a matrix, with a CPU-time comparison."""

from __future__ import annotations

import re
import sys
import time
from typing import Callable, Optional, Sequence

from syslab.matvec import Matrix, Vector, to_int32

_PROG = "matsums"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _vector_of(values: Sequence[int]) -> Vector:
    vec = Vector(len(values))
    for i, value in enumerate(values):
        vec[i] = value
    return vec


def row_sums(mat: Matrix) -> Vector:
    """Sum of each row, walking memory in order."""
    return _vector_of([to_int32(sum(mat.row(i))) for i in range(mat.rows)])


def col_sums(mat: Matrix) -> Vector:
    """Sum of each column, walking down one column at a time."""
    return _vector_of([to_int32(sum(mat.data[j::mat.cols])) for j in range(mat.cols)])


def opt_col_sums(mat: Matrix) -> Vector:
    """Sum of each column, accumulated row by row in memory order."""
    sums = [0] * mat.cols
    for i in range(mat.rows):
        sums = [to_int32(s + x) for s, x in zip(sums, mat.row(i))]
    return _vector_of(sums)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return to_int32(int(match.group(1))) if match else 0


def _timed(func: Callable[[Matrix], Vector], mat: Matrix) -> Vector:
    start = time.process_time()
    result = func(mat)
    elapsed = time.process_time() - start
    print(f"{func.__name__:>14} CPU usage: {elapsed:.4e} sec")
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Time the summing functions on a sequentially filled matrix."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(f"usage: {_PROG} <rows> <cols>")
        return 1
    try:
        mat = Matrix(_atoi(args[0]), _atoi(args[1]))
    except ValueError as err:
        print(err)
        return 1
    mat.fill_sequential()

    _timed(row_sums, mat)
    csums = _timed(col_sums, mat)
    ocsums = _timed(opt_col_sums, mat)

    for i, (cs, os_) in enumerate(zip(csums, ocsums)):
        if cs != os_:
            print("ERROR: opt_col_sums produced incorrect results")
            print(f"Element {i}: expect {cs}  actual {os_}")
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())