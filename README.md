# syslab

A collection of small systems-programming exercises as a Python package:

- `syslab.el_malloc`: an explicit free-list heap allocator that works on a
  simulated heap of bytes, with block headers and footers, splitting on
  allocation and merging of neighbouring free blocks on release.
- `syslab.el_demo`: a walk-through of allocations and frees on that heap.
- `syslab.matvec`, `syslab.matsums`, `syslab.colmins`: a row-major matrix and
  vector type of 32-bit integers, with row and column sums and several
  column-minimum variants.
- `syslab.reversal`, `syslab.superscalar`: small loop benchmarks.
- `syslab.dept_directory`: writes and reads a binary department contact
  directory.
- `syslab.items`: reads a binary file of named item counts.
- `syslab.coins`, `syslab.ipow`, `syslab.age`: change making, integer powers
  with 32-bit wrap-around, and an age calculator.

Nothing outside the standard library is needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The allocator

```python
import sys
from syslab.el_malloc import Heap

heap = Heap(4096, 0x600000000000)
p1 = heap.malloc(128)
p2 = heap.malloc(48)
heap.print_stats(sys.stdout)

heap.free(p1)
heap.free(p2)
heap.print_stats(sys.stdout)
```

`malloc` hands back the address of the usable space. A request for zero bytes
returns `None`; when no available block is large enough it raises
`MemoryError` and leaves the heap unchanged. `free(None)` does nothing.
`format_stats` returns the same report that `print_stats` writes (to standard
output when no file is given): the heap bounds, then the available and used
lists with each block's header and footer.

## Other modules

- `syslab.coins.set_coins(cents)` returns a `Coins` value for 0 to 99 cents and
  raises `ValueError` outside that range; `Coins.total()` gives the value back.
- `syslab.matvec.read_vector(path)` and `read_matrix(path)` read
  whitespace-separated integers: the dimensions first, then the elements.
- `syslab.dept_directory.encode_directory` / `decode_directory` convert between
  a list of `Department` values and the binary format; `write_directory` and
  `read_directory` do the same with files. Malformed data raises
  `DirectoryFormatError`.
- `syslab.items.read_items(path)` returns a list of `Item` values and raises
  `ValueError` for a truncated record or an over-long name.
- `syslab.superscalar.ALGORITHMS` lists the loops, each a function
  `(iters, start, delta)` returning the unsigned 64-bit result.

## Commands

| Command | What it does |
| --- | --- |
| `syslab-el-demo` | Runs a sequence of allocations and frees and prints the heap after each step |
| `syslab-coins <cents>` | Splits 0–99 cents into quarters, dimes, nickels and pennies |
| `syslab-ipow <base> <exp>` | Prints `base^exp` |
| `syslab-age` | Reads an age in years from standard input and reports it in minutes |
| `syslab-matsums <rows> <cols>` | Times row and column sums over a sequentially filled matrix |
| `syslab-colmins <rows> <cols>` | Times the column-minimum variants and checks they agree |
| `syslab-reversal <min_pow2> <max_pow2> <repeats>` | Compares copying and in-place array reversal |
| `syslab-superscalar <MULT> <EXP> <ALG>` | Runs one arithmetic loop for `MULT * 2^EXP` iterations |
| `syslab-make-dept-directory <file.dat>` | Writes the sample department directory |
| `syslab-print-department <file.dat> <department>` | Prints the contacts of one department (`CS`, `EE` or `IT`) |
| `syslab-read-items <file>` | Prints the items in a binary item file |

Example:

```
syslab-make-dept-directory depts.dat
syslab-print-department depts.dat CS
```

## What is not included

The package has no routine or command for converting digit strings to
integers or demonstrating two's complement negation, and no reader for text
files of floating-point numbers.