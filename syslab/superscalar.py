"""Arithmetic loops that expose instruction-level parallelism, with a runner."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

_PROG = "superscalar_main"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_MASK = (1 << 64) - 1


def _u64(value: int) -> int:
    return value & _MASK


def add1_diff(iters: int, start: int, delta: int) -> int:
    """Add once per iteration."""
    ret, inc = _u64(start), _u64(delta)
    for _ in range(iters):
        ret = (ret + inc) & _MASK
    return ret


def add2_diff(iters: int, start: int, delta: int) -> int:
    """Add twice per iteration into different accumulators."""
    ret_a = _u64(start)
    ret_b = _u64(ret_a + 19)
    del_a = _u64(delta)
    del_b = _u64(del_a * 3 + 17)
    for _ in range(iters):
        ret_a = (ret_a + del_a) & _MASK
        ret_b = (ret_b + del_b) & _MASK
    return _u64(ret_a + ret_b)


def add2_same(iters: int, start: int, delta: int) -> int:
    """Add twice per iteration into the same accumulator."""
    ret_a = _u64(start)
    del_a = _u64(delta)
    del_b = _u64(del_a * 3 + 17)
    for _ in range(iters):
        ret_a = (ret_a + del_a) & _MASK
        ret_a = (ret_a + del_b) & _MASK
    return ret_a


def add3_diff(iters: int, start: int, delta: int) -> int:
    """Add three times per iteration into different accumulators."""
    ret_a = _u64(start)
    ret_b = _u64(ret_a + 19)
    ret_c = _u64(ret_b + 193)
    del_a = _u64(delta)
    del_b = _u64(del_a * 3 + 17)
    del_c = _u64(del_b * 632 - 19)
    for _ in range(iters):
        ret_a = (ret_a + del_a) & _MASK
        ret_b = (ret_b + del_b) & _MASK
        ret_c = (ret_c + del_c) & _MASK
    return _u64(ret_a + ret_b + ret_c)


def mul1_diff(iters: int, start: int, delta: int) -> int:
    """Multiply once per iteration."""
    ret, mul = _u64(start), _u64(delta)
    for _ in range(iters):
        ret = (ret * mul) & _MASK
    return ret


def mul2_diff(iters: int, start: int, delta: int) -> int:
    """Multiply twice per iteration into different accumulators."""
    ret_a = _u64(start)
    ret_b = _u64(ret_a + 19)
    del_a = _u64(delta)
    del_b = _u64(del_a * 3 + 17)
    for _ in range(iters):
        ret_a = (ret_a * del_a) & _MASK
        ret_b = (ret_b * del_b) & _MASK
    return _u64(ret_a + ret_b)


def mul3_diff(iters: int, start: int, delta: int) -> int:
    """Multiply three times per iteration into different accumulators."""
    ret_a = _u64(start)
    ret_b = _u64(ret_a + 19)
    ret_c = _u64(ret_b + 193)
    del_a = _u64(delta)
    del_b = _u64(del_a * 3 + 17)
    del_c = _u64(del_b * 632 - 19)
    for _ in range(iters):
        ret_a = (ret_a * del_a) & _MASK
        ret_b = (ret_b * del_b) & _MASK
        ret_c = (ret_c * del_c) & _MASK
    return _u64(ret_a + ret_b + ret_c)


def mul4_diff(iters: int, start: int, delta: int) -> int:
    """Multiply four times per iteration into different accumulators."""
    ret_a = _u64(start)
    ret_b = _u64(ret_a + 19)
    ret_c = _u64(ret_b + 193)
    ret_d = _u64(ret_c + 31)
    del_a = _u64(delta)
    del_b = _u64(del_a * 3 + 17)
    del_c = _u64(del_b * 632 - 19)
    del_d = _u64(del_c * 1113 - 37)
    for _ in range(iters):
        ret_a = (ret_a * del_a) & _MASK
        ret_b = (ret_b * del_b) & _MASK
        ret_c = (ret_c * del_c) & _MASK
        ret_d = (ret_d * del_d) & _MASK
    return _u64(ret_a + ret_b + ret_c + ret_d)


def mul2_same(iters: int, start: int, delta: int) -> int:
    """Multiply twice per iteration into the same accumulator."""
    ret_a = _u64(start)
    del_a = _u64(delta)
    del_b = _u64(del_a * 3 + 17)
    for _ in range(iters):
        ret_a = (ret_a * del_a) & _MASK
        ret_a = (ret_a * del_b) & _MASK
    return ret_a


def add2_and_mul_diff(iters: int, start: int, delta: int) -> int:
    """Two adds and a multiply per iteration, into different accumulators."""
    ret_a = _u64(start)
    ret_b = _u64(start + 19)
    ret_m = _u64(start)
    step = _u64(delta)
    del_b = _u64(step * 3 + 17)
    for _ in range(iters):
        ret_a = (ret_a + step) & _MASK
        ret_m = (ret_m * step) & _MASK
        if step <= 10000:
            ret_b = (ret_b + del_b) & _MASK
    return _u64(ret_a + ret_b + ret_m)


def add2_and_mul_same(iters: int, start: int, delta: int) -> int:
    """Two adds and a multiply per iteration, into the same accumulator."""
    ret = _u64(start)
    step = _u64(delta)
    del_b = _u64(step * 3 + 17)
    for _ in range(iters):
        ret = (ret + step) & _MASK
        ret = (ret * step) & _MASK
        if step <= 10000:
            ret = (ret + del_b) & _MASK
    return ret


def add1_then_mul_diff(iters: int, start: int, delta: int) -> int:
    """An add loop, then a multiply loop, into different accumulators."""
    ret_a = _u64(start)
    ret_m = _u64(start)
    step = _u64(delta)
    for _ in range(iters):
        ret_a = (ret_a + step) & _MASK
    for _ in range(iters):
        ret_m = (ret_m * step) & _MASK
    return _u64(ret_a + ret_m)


def add1_then_mul_same(iters: int, start: int, delta: int) -> int:
    """An add loop, then a multiply loop, into the same accumulator."""
    ret = _u64(start)
    step = _u64(delta)
    for _ in range(iters):
        ret = (ret + step) & _MASK
    for _ in range(iters):
        ret = (ret * step) & _MASK
    return ret


@dataclass(frozen=True)
class Algorithm:
    """A named loop to be run by the timing driver."""

    name: str
    func: Callable[[int, int, int], int]
    description: str


ALGORITHMS = (
    Algorithm("add1_diff", add1_diff, "add 1 times in loop"),
    Algorithm("add2_diff", add2_diff, "add 2 times in same loop; different destinations"),
    Algorithm("add3_diff", add3_diff, "add 3 times in same loop; different destinations"),
    Algorithm("add2_same", add2_same, "add 2 times in same loop; same destinations"),
    Algorithm("mul1_diff", mul1_diff, "multiply 1 times in loop"),
    Algorithm("mul2_diff", mul2_diff, "multiply 2 times in same loop; different destinations"),
    Algorithm("mul3_diff", mul3_diff, "multiply 3 times in same loop; different destinations"),
    Algorithm("mul4_diff", mul4_diff, "multiply 4 times in same loop; different destinations"),
    Algorithm("mul2_same", mul2_same, "multiply 2 times in same loop; same destinations"),
    Algorithm(
        "add1_then_mul_diff",
        add1_then_mul_diff,
        "add and multiply in different loops; different destinations",
    ),
    Algorithm(
        "add1_then_mul_same",
        add1_then_mul_same,
        "add and multiply in different loops; same destinations",
    ),
    Algorithm(
        "add2_and_mul_diff",
        add2_and_mul_diff,
        "add twice and multiply in the same loop; different destinations",
    ),
    Algorithm(
        "add2_and_mul_same",
        add2_and_mul_same,
        "add twice and multiply in the same loop; same destination ",
    ),
)


def usage(prog_name: str) -> str:
    """Usage text listing every available algorithm."""
    lines = [
        f"Usage: {prog_name} <MULT> <EXP> <ALG>",
        "  <MULT> and <ALG> are integers, iterates for MULT * 2^{EXP} iterations",
        "  <ALG> is one of",
    ]
    lines.extend(f"{alg.name:>18} : {alg.description}" for alg in ALGORITHMS)
    return "\n".join(lines) + "\n"


def _atol(text: str) -> int:
    match = _LEADING_INT.match(text)
    return _u64(int(match.group(1))) if match else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the named loop for MULT * 2^EXP iterations."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        sys.stdout.write(usage(_PROG))
        return 1

    mult = _atol(args[0])
    exp = _atol(args[1])
    alg_name = args[2]

    chosen = next((alg for alg in ALGORITHMS if alg.name == alg_name), None)
    if chosen is None:
        print(f"Unknown algorithm '{alg_name}'")
        sys.stdout.write(usage(_PROG))
        return 1

    iters = _u64(mult * (1 << exp))
    print(f"{alg_name} for {mult} * 2^{{{exp}}} = {iters} iterations... ", end="", flush=True)
    chosen.func(iters, 0, 3)
    print("Complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())