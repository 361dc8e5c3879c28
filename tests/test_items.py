import struct

import pytest

from syslab.items import Item, main, read_items


def _record(name: bytes, count: int) -> bytes:
    return struct.pack("<i", len(name)) + name + struct.pack("<i", count)


@pytest.fixture
def items_file(tmp_path):
    path = tmp_path / "items.bin"
    path.write_bytes(_record(b"apple", 3) + _record(b"pear", 12) + _record(b"", -1))
    return str(path)


def test_reads_all_records(items_file):
    assert read_items(items_file) == [Item("apple", 3), Item("pear", 12), Item("", -1)]


def test_empty_file(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    assert read_items(str(path)) == []


def test_trailing_partial_length_is_ignored(tmp_path):
    path = tmp_path / "tail.bin"
    path.write_bytes(_record(b"plum", 7) + b"\x01\x00")
    assert read_items(str(path)) == [Item("plum", 7)]


def test_truncated_record_raises(tmp_path):
    path = tmp_path / "cut.bin"
    path.write_bytes(_record(b"banana", 5)[:-2])
    with pytest.raises(ValueError):
        read_items(str(path))


def test_name_too_long_raises(tmp_path):
    path = tmp_path / "long.bin"
    path.write_bytes(_record(b"x" * 32, 1))
    with pytest.raises(ValueError):
        read_items(str(path))


def test_longest_allowed_name(tmp_path):
    path = tmp_path / "max.bin"
    path.write_bytes(_record(b"y" * 31, 2))
    assert read_items(str(path)) == [Item("y" * 31, 2)]


def test_main_prints_items(items_file, capsys):
    assert main([items_file]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["3 of Item 'apple'", "12 of Item 'pear'", "-1 of Item ''"]


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.bin")]) == 1
    assert "Failed to open binary file" in capsys.readouterr().out


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out