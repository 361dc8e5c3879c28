"""Walk-through of allocations and frees on the explicit-list heap."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from syslab.el_malloc import BLOCK_OVERHEAD, Heap


def format_ptr(label: str, ptr: Optional[int]) -> str:
    """Render a labelled address, or ``(nil)`` when there is none."""
    return f"{label}: (nil)" if ptr is None else f"{label}: {hex(ptr)}"


def run_demo(out: TextIO) -> Heap:
    """Run the demonstration sequence, writing its report to ``out``.

    Returns the heap in its final state.
    """

    def emit(*lines: str) -> None:
        for line in lines:
            out.write(line + "\n")

    def stats(title: str) -> None:
        emit(title)
        heap.print_stats(out)
        emit("")

    def pointers(**ptrs: Optional[int]) -> None:
        emit("POINTERS")
        emit(*(format_ptr(name, ptr) for name, ptr in ptrs.items()))
        emit("")

    emit(f"EL_BLOCK_OVERHEAD: {BLOCK_OVERHEAD}")
    heap = Heap()

    stats("INITIAL")

    p1 = heap.malloc(128)
    p2 = heap.malloc(48)
    p3 = heap.malloc(156)
    stats("MALLOC 3")
    pointers(p3=p3, p2=p2, p1=p1)

    p4 = heap.malloc(22)
    p5 = heap.malloc(64)
    stats("MALLOC 5")
    pointers(p5=p5, p4=p4, p3=p3, p2=p2, p1=p1)

    heap.free(p1)
    stats("FREE 1")

    heap.free(p3)
    stats("FREE 3")

    p3 = heap.malloc(32)
    p1 = heap.malloc(200)
    stats("RE-ALLOC 3,1")
    pointers(p1=p1, p3=p3, p5=p5, p4=p4, p2=p2)

    heap.free(p1)
    stats("FREE'D 1")

    heap.free(p2)
    stats("FREE'D 2")

    heap.free(p3)
    heap.free(p4)
    heap.free(p5)
    stats("FREE'D 3,4,5")

    return heap


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the demonstration to standard output."""
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())