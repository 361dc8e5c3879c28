import pytest

from syslab.dept_directory import (
    Contact,
    Department,
    DirectoryFormatError,
    IDENT,
    decode_directory,
    default_departments,
    encode_directory,
    make_main,
    print_main,
    read_directory,
    write_directory,
)


def test_default_departments_codes_and_sizes():
    depts = default_departments()
    assert [d.code for d in depts] == ["CS", "EE", "IT"]
    assert [len(d.contacts) for d in depts] == [8, 6, 5]
    assert depts[0].contacts[0] == Contact("Arindam Banerjee", "[email]")
    assert depts[2].contacts[-1].name == "Scott Kerlin"


def test_encoded_data_starts_with_ident():
    data = encode_directory(default_departments())
    assert data[:4] == b"\xdeDIR"
    assert data[:4] == IDENT


def test_round_trip_default():
    depts = default_departments()
    assert decode_directory(encode_directory(depts)) == depts


def test_round_trip_custom_and_empty():
    depts = [
        Department("XY", (Contact("Ann Example", "ann@example.com"),)),
        Department("ZZ", ()),
    ]
    assert decode_directory(encode_directory(depts)) == depts
    assert decode_directory(encode_directory([])) == []


def test_encoded_size_grows_by_record_width():
    one = encode_directory([Department("A", (Contact("a", "a@example.com"),))])
    two = encode_directory(
        [Department("A", (Contact("a", "a@example.com"), Contact("b", "b@example.com")))]
    )
    assert len(two) - len(one) == 256


def test_bad_ident_rejected():
    data = bytearray(encode_directory(default_departments()))
    data[0] = 0
    with pytest.raises(DirectoryFormatError):
        decode_directory(bytes(data))


def test_truncated_data_rejected():
    data = encode_directory(default_departments())
    with pytest.raises(DirectoryFormatError):
        decode_directory(data[:-10])
    with pytest.raises(DirectoryFormatError):
        decode_directory(data[:6])


def test_field_too_long_rejected():
    with pytest.raises(ValueError):
        encode_directory([Department("A" * 16, ())])
    with pytest.raises(ValueError):
        encode_directory([Department("A", (Contact("n" * 128, "e@example.com"),))])


def test_write_and_read_file(tmp_path):
    path = str(tmp_path / "depts.dat")
    depts = default_departments()
    write_directory(path, depts)
    assert read_directory(path) == depts


def test_make_main_usage(capsys):
    assert make_main([]) == 1
    assert "usage:" in capsys.readouterr().out


def test_make_then_print(tmp_path, capsys):
    path = str(tmp_path / "cse.dat")
    assert make_main([path]) == 0
    assert print_main([path, "CS"]) == 0
    out = capsys.readouterr().out
    assert "Dept Name: CS Offset: 104" in out
    assert "8 Contacts for CS department" in out
    assert "Arindam Banerjee <[email]>" in out
    assert "Joseph Axberg" not in out


def test_print_unknown_department(tmp_path, capsys):
    path = str(tmp_path / "cse.dat")
    make_main([path])
    assert print_main([path, "ME"]) == 1
    assert "Department code 'ME' not found" in capsys.readouterr().out


def test_print_rejects_non_directory(tmp_path, capsys):
    path = tmp_path / "junk.dat"
    path.write_bytes(b"hello world, not a directory")
    assert print_main([str(path), "CS"]) == 1
    assert "does not appear to be a binary department directory file" in capsys.readouterr().out


def test_print_usage(capsys):
    assert print_main(["only-one"]) == 1
    assert "usage:" in capsys.readouterr().out