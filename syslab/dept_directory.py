"""Binary department contact directory: writing it and looking people up.

The file starts with a header (four identifying bytes and the number of
departments), followed by one index entry per department (a short code,
the byte offset of its contacts and how many there are), followed by the
fixed-width contact records themselves, grouped by department.
"""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

IDENT = b"\xdeDIR"

_HEADER = struct.Struct("<4si")  # ident, num_depts
_ENTRY = struct.Struct("<16sQi4x")  # dept_code, offset, num_contacts, padding
_CONTACT = struct.Struct("<128s128s")  # name, email

_CODE_WIDTH = 16
_FIELD_WIDTH = 128

_MAKE_PROG = "make_dept_directory"
_PRINT_PROG = "print_department"


@dataclass(frozen=True)
class Contact:
    """A person and their e-mail address."""

    name: str
    email: str


@dataclass(frozen=True)
class Department:
    """A department code and its contacts, in file order."""

    code: str
    contacts: Tuple[Contact, ...] = ()


class DirectoryFormatError(ValueError):
    """Data that is not a well-formed department directory."""


def default_departments() -> List[Department]:
    """The built-in directory of three departments."""

    def people(*names: str) -> Tuple[Contact, ...]:
        return tuple(Contact(name, "[email]") for name in names)

    return [
        Department(
            "CS",
            people(
                "Arindam Banerjee",
                "Daniel Boley",
                "Abhishek Chandra",
                "David Hung-Chang Du",
                "Maria Gini",
                "Stephen Guy",
                "Tian He",
                "Mats Heimdahl",
            ),
        ),
        Department(
            "EE",
            people(
                "Mehmet Akcakaya",
                "Massoud Amin",
                "Raj Aravalli",
                "Kia Bazargan",
                "Itshak Bergel",
                "Stephen Campbell",
            ),
        ),
        Department(
            "IT",
            people(
                "Joseph Axberg",
                "Carl Follstad",
                "Valarie Griep",
                "Richard Howey",
                "Scott Kerlin",
            ),
        ),
    ]


def _cstring(text: str, width: int, what: str) -> bytes:
    raw = text.encode("utf-8")
    if len(raw) >= width or b"\0" in raw:
        raise ValueError(f"{what} {text!r} does not fit in a {width}-byte field")
    return raw


def _text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def encode_directory(departments: Iterable[Department]) -> bytes:
    """Serialise departments into the binary directory format."""
    depts = list(departments)
    offset = _HEADER.size + _ENTRY.size * len(depts)
    entries = []
    bodies = []
    for dept in depts:
        code = _cstring(dept.code, _CODE_WIDTH, "department code")
        entries.append(_ENTRY.pack(code, offset, len(dept.contacts)))
        for contact in dept.contacts:
            bodies.append(
                _CONTACT.pack(
                    _cstring(contact.name, _FIELD_WIDTH, "name"),
                    _cstring(contact.email, _FIELD_WIDTH, "email"),
                )
            )
        offset += _CONTACT.size * len(dept.contacts)
    return _HEADER.pack(IDENT, len(depts)) + b"".join(entries) + b"".join(bodies)


def _read_index(data: bytes) -> List[Tuple[str, int, int]]:
    if len(data) < _HEADER.size:
        raise DirectoryFormatError("data too short for a directory header")
    ident, num_depts = _HEADER.unpack_from(data, 0)
    if ident != IDENT:
        raise DirectoryFormatError("identifying bytes do not match a department directory")
    if num_depts < 0:
        raise DirectoryFormatError(f"negative department count {num_depts}")
    if len(data) < _HEADER.size + num_depts * _ENTRY.size:
        raise DirectoryFormatError("data too short for the department index")
    index = []
    for k in range(num_depts):
        code, offset, count = _ENTRY.unpack_from(data, _HEADER.size + k * _ENTRY.size)
        index.append((_text(code), offset, count))
    return index


def _contacts_at(data: bytes, offset: int, count: int) -> Tuple[Contact, ...]:
    if count < 0 or offset + count * _CONTACT.size > len(data):
        raise DirectoryFormatError(
            f"{count} contacts at offset {offset} run past the end of the data"
        )
    return tuple(
        Contact(_text(name), _text(email))
        for name, email in (
            _CONTACT.unpack_from(data, offset + k * _CONTACT.size) for k in range(count)
        )
    )


def decode_directory(data: bytes) -> List[Department]:
    """Parse binary directory data; raises DirectoryFormatError if malformed."""
    return [
        Department(code, _contacts_at(data, offset, count))
        for code, offset, count in _read_index(data)
    ]


def write_directory(path: str, departments: Iterable[Department]) -> None:
    """Write departments to ``path`` in the binary directory format."""
    payload = encode_directory(departments)
    with open(path, "wb") as fh:
        fh.write(payload)


def read_directory(path: str) -> List[Department]:
    """Read and parse the binary directory stored at ``path``."""
    with open(path, "rb") as fh:
        return decode_directory(fh.read())


def make_main(argv: Optional[Sequence[str]] = None) -> int:
    """Write the built-in directory to the file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(f"usage: {_MAKE_PROG} <file.dat>")
        return 1
    write_directory(args[0], default_departments())
    return 0


def print_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the contacts of one department from a directory file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(f"usage: {_PRINT_PROG} <file.dat> <department>")
        print("  department is one of")
        print("  CS -- computer science department")
        print("  EE -- electrical engineering department")
        print("  IT -- information technology department")
        return 1
    filename, dept_code = args[0], args[1]

    try:
        with open(filename, "rb") as fh:
            data = fh.read()
    except OSError as err:
        print(f"couldn't open '{filename}': {err.strerror}")
        return 1

    try:
        index = _read_index(data)
    except DirectoryFormatError:
        print(f"'{filename}' does not appear to be a binary department directory file")
        return 1

    found: Optional[Tuple[int, int]] = None
    for code, offset, count in index:
        print(f"Dept Name: {code} Offset: {offset}")
        if code == dept_code:
            found = (offset, count)

    if found is None:
        print(f"Department code '{dept_code}' not found")
        return 1

    offset, count = found
    try:
        contacts = _contacts_at(data, offset, count)
    except DirectoryFormatError as err:
        print(err)
        return 1
    print(f"\n{count} Contacts for {dept_code} department")
    for contact in contacts:
        print(f"{contact.name} <{contact.email}>")
    return 0


if __name__ == "__main__":
    sys.exit(print_main())