"""Fixed-size integer vectors and row-major matrices with text I/O."""

from __future__ import annotations

import sys
from typing import Iterator, List, Optional, TextIO, Tuple

_MOD = 1 << 32


def to_int32(value: int) -> int:
    """Wrap ``value`` to a 32-bit signed integer."""
    value %= _MOD
    return value - _MOD if value >= 1 << 31 else value


class Vector:
    """A one-dimensional array of 32-bit integers of fixed length."""

    def __init__(self, length: int) -> None:
        if length <= 0:
            raise ValueError(f"Invalid length: {length}")
        self.data: List[int] = [0] * length

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def __getitem__(self, i: int) -> int:
        return self.data[i]

    def __setitem__(self, i: int, value: int) -> None:
        self.data[i] = to_int32(int(value))

    def fill_sequential(self) -> None:
        """Set the elements to 0, 1, 2, ..."""
        self.data = list(range(len(self.data)))

    def write(self, file: Optional[TextIO] = None) -> None:
        """Write the dimensions, then one ``index: value`` line per element."""
        out = file or sys.stdout
        out.write(f"{len(self)} x 1 vector\n")
        for i, value in enumerate(self.data):
            out.write(f"{i:4d}: {value:4d}\n")


class Matrix:
    """A two-dimensional array of 32-bit integers stored row by row."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Invalid rows or cols: {rows} {cols}")
        self.rows = rows
        self.cols = cols
        self.data: List[int] = [0] * (rows * cols)

    def _flat(self, index: Tuple[int, int]) -> int:
        i, j = index
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"index ({i}, {j}) out of range for {self.rows} x {self.cols} matrix")
        return i * self.cols + j

    def __getitem__(self, index: Tuple[int, int]) -> int:
        return self.data[self._flat(index)]

    def __setitem__(self, index: Tuple[int, int], value: int) -> None:
        self.data[self._flat(index)] = to_int32(int(value))

    def row(self, i: int) -> List[int]:
        """A copy of row ``i``."""
        if not 0 <= i < self.rows:
            raise IndexError(f"row {i} out of range")
        return self.data[i * self.cols:(i + 1) * self.cols]

    def fill_sequential(self) -> None:
        """Set the elements to 0, 1, 2, ... in row-major order."""
        self.data = list(range(self.rows * self.cols))

    def write(self, file: Optional[TextIO] = None) -> None:
        """Write the dimensions, then each row prefixed by its index."""
        out = file or sys.stdout
        out.write(f"{self.rows} x {self.cols} matrix\n")
        for i in range(self.rows):
            cells = "".join(f"{x:4d} " for x in self.row(i))
            out.write(f"{i:4d}: {cells}\n")


def _int_tokens(path: str) -> Iterator[int]:
    with open(path, "r", encoding="utf-8") as fh:
        text = fh.read()
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            raise ValueError(f"{path}: '{token}' is not an integer") from None


def _take(tokens: Iterator[int], path: str) -> int:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"{path}: unexpected end of data") from None


def read_vector(path: str) -> Vector:
    """Read a vector: its length, then that many integers, space separated."""
    tokens = _int_tokens(path)
    vec = Vector(_take(tokens, path))
    for i in range(len(vec)):
        vec[i] = _take(tokens, path)
    return vec


def read_matrix(path: str) -> Matrix:
    """Read a matrix: rows and cols, then rows*cols integers in row-major order."""
    tokens = _int_tokens(path)
    rows = _take(tokens, path)
    cols = _take(tokens, path)
    mat = Matrix(rows, cols)
    mat.data = [to_int32(_take(tokens, path)) for _ in range(rows * cols)]
    return mat