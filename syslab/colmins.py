"""Column minimums of a matrix computed several ways, with a CPU-time comparison."""

from __future__ import annotations

import re
import sys
import time
from typing import Callable, List, Optional, Sequence

from syslab.matvec import Matrix, Vector, to_int32

_PROG = "colmins_main"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_UNROLL = 4


def _vector_of(values: Sequence[int]) -> Vector:
    vec = Vector(len(values))
    for i, value in enumerate(values):
        vec[i] = value
    return vec


def col_mins1(mat: Matrix) -> Vector:
    """Baseline: walk each column, reading and writing the result vector."""
    cmins = Vector(mat.cols)
    for j in range(mat.cols):
        cmins[j] = mat[0, j]
        for i in range(1, mat.rows):
            if mat[i, j] < cmins[j]:
                cmins[j] = mat[i, j]
    return cmins


def col_mins2(mat: Matrix) -> Vector:
    """Walk each column keeping the running minimum in a local."""
    mins: List[int] = []
    for j in range(mat.cols):
        low = mat[0, j]
        for i in range(1, mat.rows):
            x = mat[i, j]
            if x < low:
                low = x
        mins.append(low)
    return _vector_of(mins)


def col_mins3(mat: Matrix) -> Vector:
    """Walk each column with four independent running minimums.

    Needs at least four rows; raises ValueError otherwise.
    """
    if mat.rows < _UNROLL:
        raise ValueError(f"col_mins3 needs at least {_UNROLL} rows, got {mat.rows}")
    mins: List[int] = []
    for j in range(mat.cols):
        column = mat.data[j::mat.cols]
        lanes = [min(column[k::_UNROLL]) for k in range(_UNROLL)]
        mins.append(min(lanes))
    return _vector_of(mins)


def col_mins4(mat: Matrix) -> Vector:
    """Process four columns at a time, then the leftover columns one by one."""
    mins = [0] * mat.cols
    blocked = max(0, (mat.cols - 1) // _UNROLL) * _UNROLL
    for j in range(0, blocked, _UNROLL):
        lanes = mat.row(0)[j:j + _UNROLL]
        for i in range(1, mat.rows):
            row = mat.row(i)[j:j + _UNROLL]
            lanes = [x if x < low else low for low, x in zip(lanes, row)]
        mins[j:j + _UNROLL] = lanes
    for j in range(blocked, mat.cols):
        low = mat[0, j]
        for i in range(1, mat.rows):
            x = mat[i, j]
            if x < low:
                low = x
        mins[j] = low
    return _vector_of(mins)


def col_mins5(mat: Matrix) -> Vector:
    """Sweep the matrix row by row in memory order, updating every column."""
    mins = mat.row(0)
    for i in range(1, mat.rows):
        mins = [x if x < low else low for low, x in zip(mins, mat.row(i))]
    return _vector_of(mins)


def check_answer(expect: Vector, actual: Vector, name: str) -> bool:
    """Compare two result vectors, reporting the first mismatch.

    Returns True when they agree element by element.
    """
    for i, (e, a) in enumerate(zip(expect, actual)):
        if e != a:
            print(f"ERROR: {name} produced incorrect results")
            print(f"Element {i}: expect {e}  actual {a}")
            return False
    return True


_FUNCS: Sequence[Callable[[Matrix], Vector]] = (
    col_mins1,
    col_mins2,
    col_mins3,
    col_mins4,
    col_mins5,
)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return to_int32(int(match.group(1))) if match else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Time every column-minimum function on a sequentially filled matrix."""
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

    reference: Optional[Vector] = None
    for func in _FUNCS:
        start = time.process_time()
        try:
            result = func(mat)
        except ValueError as err:
            print(f"{func.__name__:>14} skipped: {err}")
            continue
        elapsed = time.process_time() - start
        print(f"{func.__name__:>14} CPU usage: {elapsed:.4e} sec")
        if reference is None:
            reference = result
        else:
            check_answer(reference, result, func.__name__)
    return 0


if __name__ == "__main__":
    sys.exit(main())