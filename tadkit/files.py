"""Fixed-size binary records in seekable files, described by struct formats."""

import io
import struct
from typing import Any, BinaryIO


def write(f: BinaryIO, fmt: str, value: Any) -> None:
    """Write one record at the current position; tuples fill multi-field formats."""
    record = struct.Struct(fmt)
    data = record.pack(*value) if isinstance(value, tuple) else record.pack(value)
    f.write(data)


def read(f: BinaryIO, fmt: str) -> Any:
    """Read one record at the current position.

    A single-field format yields its value, others a tuple.
    """
    record = struct.Struct(fmt)
    data = f.read(record.size)
    if len(data) < record.size:
        raise EOFError("not enough data left for a whole record")
    values = record.unpack(data)
    return values[0] if len(values) == 1 else values


def seek(f: BinaryIO, fmt: str, n: int) -> None:
    """Move to the start of record number ``n``."""
    if n < 0:
        raise ValueError("record number must not be negative")
    f.seek(n * struct.calcsize(fmt), io.SEEK_SET)


def file_size(f: BinaryIO, fmt: str) -> int:
    """Return the number of whole records in ``f``, keeping the current position."""
    here = f.tell()
    end = f.seek(0, io.SEEK_END)
    f.seek(here, io.SEEK_SET)
    return end // struct.calcsize(fmt)


def file_pos(f: BinaryIO, fmt: str) -> int:
    """Return the record number at the current position."""
    return f.tell() // struct.calcsize(fmt)