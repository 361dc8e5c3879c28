"""Reading a binary file of named item counts."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

_PROG = "read_items"
_INT = struct.Struct("<i")
_NAME_CAPACITY = 32


@dataclass(frozen=True)
class Item:
    """A named item and how many there are."""

    name: str
    count: int


def read_items(path: str) -> List[Item]:
    """Read every record: a name length, that many name bytes, then a count.

    Raises ValueError for a record that is cut short or whose name is
    longer than 31 bytes.
    """
    with open(path, "rb") as fh:
        data = fh.read()

    items = []
    pos = 0
    while len(data) - pos >= _INT.size:
        (name_len,) = _INT.unpack_from(data, pos)
        pos += _INT.size
        if not 0 <= name_len < _NAME_CAPACITY:
            raise ValueError(f"invalid name length {name_len} at byte {pos - _INT.size}")
        if len(data) - pos < name_len + _INT.size:
            raise ValueError(f"record at byte {pos - _INT.size} is truncated")
        raw_name = data[pos:pos + name_len]
        pos += name_len
        (count,) = _INT.unpack_from(data, pos)
        pos += _INT.size
        name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        items.append(Item(name, count))
    return items


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print every item in the binary file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(f"Usage: {_PROG} <file_name>")
        return 1
    try:
        items = read_items(args[0])
    except OSError:
        print("Failed to open binary file")
        return 1
    except ValueError as err:
        print(err)
        return 1
    for item in items:
        print(f"{item.count} of Item '{item.name}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())