import io

import pytest

from tadkit.files import file_pos, file_size, read, seek, write

VALUES = [7, -3, 1000, 0, 42]


def _filled():
    f = io.BytesIO()
    for v in VALUES:
        write(f, "<i", v)
    return f


def test_write_layout():
    f = io.BytesIO()
    write(f, "<i", 1)
    assert f.getvalue() == b"\x01\x00\x00\x00"


def test_round_trip():
    f = _filled()
    seek(f, "<i", 0)
    assert [read(f, "<i") for _ in VALUES] == VALUES


def test_file_size_counts_records_and_keeps_position():
    f = _filled()
    seek(f, "<i", 2)
    assert file_size(f, "<i") == len(VALUES)
    assert file_pos(f, "<i") == 2


def test_seek_to_record():
    f = _filled()
    for n, v in enumerate(VALUES):
        seek(f, "<i", n)
        assert read(f, "<i") == v


def test_file_pos_advances():
    f = _filled()
    seek(f, "<i", 0)
    read(f, "<i")
    read(f, "<i")
    assert file_pos(f, "<i") == 2


def test_read_past_end_raises():
    f = _filled()
    with pytest.raises(EOFError):
        read(f, "<i")


def test_negative_seek_raises():
    with pytest.raises(ValueError):
        seek(io.BytesIO(), "<i", -1)


def test_multi_field_record():
    f = io.BytesIO()
    write(f, "<ih", (5, -2))
    write(f, "<ih", (9, 4))
    seek(f, "<ih", 1)
    assert read(f, "<ih") == (9, 4)
    assert file_size(f, "<ih") == 2


def test_byte_records():
    f = io.BytesIO()
    for b in b"hey":
        write(f, "B", b)
    assert f.getvalue() == b"hey"