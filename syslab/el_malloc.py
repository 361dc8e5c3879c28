"""An explicit-list memory allocator working over a simulated heap.

Blocks live inside a byte array that stands in for a memory-mapped region
at a fixed virtual address.  Every block carries a header (size, state,
two link words) in front of its payload and a footer (size) after it, so
neighbouring blocks can be found by address arithmetic alone.
"""

from __future__ import annotations

import struct
import sys
from enum import Enum
from typing import Iterator, Optional, TextIO

HEAP_START_ADDRESS = 0x0000600000000000
HEAP_INITIAL_SIZE = 4096

_WORD = struct.Struct("<Q")
HEAD_SIZE = 32  # size, state (padded to a word), next, prev
FOOT_SIZE = 8  # size
BLOCK_OVERHEAD = HEAD_SIZE + FOOT_SIZE

_STATE_OFFSET = 8


class BlockState(Enum):
    """State byte stored in a block header."""

    AVAILABLE = "a"
    USED = "u"
    BEGIN = "B"
    END = "E"


def _format_ptr(addr: Optional[int]) -> str:
    return "(nil)" if addr is None else hex(addr)


class BlockList:
    """Ordered list of block headers with length and byte accounting."""

    def __init__(self, heap: "Heap") -> None:
        self._heap = heap
        self._blocks: list[int] = []
        self.byte_count = 0

    def add_front(self, head: int) -> None:
        """Put a block at the front of the list and account for its bytes."""
        self._blocks.insert(0, head)
        self.byte_count += self._heap.size_of(head) + BLOCK_OVERHEAD

    def remove(self, head: int) -> None:
        """Unlink a block; raises ValueError if it is not in the list."""
        try:
            self._blocks.remove(head)
        except ValueError:
            raise ValueError(f"block {hex(head)} is not in this list") from None
        self.byte_count -= self._heap.size_of(head) + BLOCK_OVERHEAD

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._blocks))

    def __len__(self) -> int:
        return len(self._blocks)

    def format(self) -> str:
        """Render the list in the allocator's statistics format."""
        lines = [f"{{length: {len(self):3d}  bytes: {self.byte_count:5d}}}"]
        for i, head in enumerate(self._blocks):
            foot = self._heap.footer_of(head)
            lines.append(
                f"  [{i:3d}] head @ {_format_ptr(head)} "
                f"{{state: {self._heap.state_of(head).value}  size: {self._heap.size_of(head):5d}}}"
            )
            lines.append(
                f"{'':6s}  foot @ {_format_ptr(foot)} "
                f"{{size: {self._heap._read_word(foot):5d}}}"
            )
        return "\n".join(lines) + "\n"


class Heap:
    """A fixed-size heap managed with explicit available and used lists."""

    def __init__(
        self,
        heap_bytes: int = HEAP_INITIAL_SIZE,
        start_address: int = HEAP_START_ADDRESS,
    ) -> None:
        if heap_bytes < BLOCK_OVERHEAD:
            raise ValueError(
                f"heap size {heap_bytes} too small for a block overhead {BLOCK_OVERHEAD}"
            )
        self.heap_bytes = heap_bytes
        self.heap_start = start_address
        self.heap_end = start_address + heap_bytes
        self._memory = bytearray(heap_bytes)
        self.avail = BlockList(self)
        self.used = BlockList(self)

        first = self.heap_start
        self._write_word(first, heap_bytes - BLOCK_OVERHEAD)
        self._set_state(first, BlockState.AVAILABLE)
        self._write_word(self.footer_of(first), heap_bytes - BLOCK_OVERHEAD)
        self.avail.add_front(first)

    # raw memory access

    def _offset(self, addr: int, width: int) -> int:
        off = addr - self.heap_start
        if off < 0 or off + width > self.heap_bytes:
            raise IndexError(f"address {hex(addr)} is outside the heap")
        return off

    def _read_word(self, addr: int) -> int:
        return _WORD.unpack_from(self._memory, self._offset(addr, _WORD.size))[0]

    def _write_word(self, addr: int, value: int) -> None:
        _WORD.pack_into(self._memory, self._offset(addr, _WORD.size), value)

    def _set_state(self, head: int, state: BlockState) -> None:
        self._memory[self._offset(head + _STATE_OFFSET, 1)] = ord(state.value)

    # block geometry

    def size_of(self, head: int) -> int:
        """Payload size recorded in the header at ``head``."""
        return self._read_word(head)

    def state_of(self, head: int) -> BlockState:
        """State recorded in the header at ``head``."""
        return BlockState(chr(self._memory[self._offset(head + _STATE_OFFSET, 1)]))

    def footer_of(self, head: int) -> int:
        """Address of the footer belonging to the header at ``head``."""
        return head + HEAD_SIZE + self.size_of(head)

    def header_of(self, foot: int) -> int:
        """Address of the header belonging to the footer at ``foot``."""
        return foot - HEAD_SIZE - self._read_word(foot)

    def block_above(self, head: int) -> Optional[int]:
        """The adjacent block at a higher address, or None at the heap's end."""
        higher = head + self.size_of(head) + BLOCK_OVERHEAD
        return None if higher >= self.heap_end else higher

    def block_below(self, head: int) -> Optional[int]:
        """The adjacent block at a lower address, or None at the heap's start."""
        if head <= self.heap_start + FOOT_SIZE:
            return None
        foot = head - FOOT_SIZE
        lower = foot - HEAD_SIZE - self._read_word(foot)
        if lower < self.heap_start or lower >= self.heap_end:
            return None
        return lower

    # allocation

    def find_first_avail(self, size: int) -> Optional[int]:
        """First available block that can be split for ``size``, else one that fits."""
        splittable = next(
            (h for h in self.avail if self.size_of(h) >= size + BLOCK_OVERHEAD + 1), None
        )
        if splittable is not None:
            return splittable
        return next((h for h in self.avail if self.size_of(h) >= size), None)

    def split_block(self, head: int, new_size: int) -> Optional[int]:
        """Shrink ``head`` to ``new_size`` and carve a new available block above it.

        Returns the new block, or None (changing nothing) if there is no room.
        """
        original = self.size_of(head)
        if original < new_size + BLOCK_OVERHEAD + 1:
            return None
        self._write_word(head, new_size)
        self._write_word(self.footer_of(head), new_size)
        new_block = head + HEAD_SIZE + new_size + FOOT_SIZE
        remaining = original - new_size - BLOCK_OVERHEAD
        self._write_word(new_block, remaining)
        self._set_state(new_block, BlockState.AVAILABLE)
        self._write_word(self.footer_of(new_block), remaining)
        return new_block

    def malloc(self, nbytes: int) -> Optional[int]:
        """Allocate ``nbytes`` and return the payload address.

        Returns None for a zero-byte request; raises MemoryError when no
        available block is large enough, leaving the heap unchanged.
        """
        if nbytes < 0:
            raise ValueError("cannot allocate a negative number of bytes")
        if nbytes == 0:
            return None
        head = self.find_first_avail(nbytes)
        if head is None:
            raise MemoryError(f"no available block for {nbytes} bytes")
        self.avail.remove(head)
        if self.size_of(head) >= nbytes + BLOCK_OVERHEAD + 1:
            rest = self.split_block(head, nbytes)
            if rest is not None:
                self.avail.add_front(rest)
        self._set_state(head, BlockState.USED)
        self._write_word(self.footer_of(head), self.size_of(head))
        self.used.add_front(head)
        return head + HEAD_SIZE

    # release

    def merge_block_with_above(self, lower: Optional[int]) -> None:
        """Merge an available block with the available block directly above it."""
        if lower is None or self.state_of(lower) is not BlockState.AVAILABLE:
            return
        above = self.block_above(lower)
        if above is None or self.state_of(above) is not BlockState.AVAILABLE:
            return
        self.avail.remove(lower)
        self.avail.remove(above)
        merged = self.size_of(lower) + BLOCK_OVERHEAD + self.size_of(above)
        self._write_word(lower, merged)
        self._write_word(self.footer_of(lower), merged)
        self.avail.add_front(lower)

    def free(self, ptr: Optional[int]) -> None:
        """Release the block whose payload starts at ``ptr`` and coalesce it."""
        if ptr is None:
            return
        head = ptr - HEAD_SIZE
        self.used.remove(head)
        self._set_state(head, BlockState.AVAILABLE)
        self._write_word(self.footer_of(head), self.size_of(head))
        self.avail.add_front(head)
        self.merge_block_with_above(head)
        below = self.block_below(head)
        if below is not None and self.state_of(below) is BlockState.AVAILABLE:
            self.merge_block_with_above(below)

    # reporting

    def format_stats(self) -> str:
        """Heap totals followed by the available and used lists."""
        return (
            f"HEAP STATS (overhead per node: {BLOCK_OVERHEAD})\n"
            f"heap_start:  {_format_ptr(self.heap_start)}\n"
            f"heap_end:    {_format_ptr(self.heap_end)}\n"
            f"total_bytes: {self.heap_bytes}\n"
            f"AVAILABLE LIST: {self.avail.format()}"
            f"USED LIST: {self.used.format()}"
        )

    def print_stats(self, file: Optional[TextIO] = None) -> None:
        """Write the heap statistics to ``file`` (standard output by default)."""
        (file or sys.stdout).write(self.format_stats())