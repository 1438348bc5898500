"""Reading and writing files one bit at a time, most significant bit first."""

from __future__ import annotations

from typing import BinaryIO

from tadkit import files

_BYTE = "B"


def bin_to_string(value: int, width: int = 8) -> str:
    """Return the lowest ``width`` bits of ``value`` as a string of 0s and 1s."""
    if width <= 0:
        raise ValueError("width must be positive")
    return "".join("1" if value >> shift & 1 else "0" for shift in range(width - 1, -1, -1))


class BitReader:
    """Reads single bits from a binary file."""

    def __init__(self, f: BinaryIO) -> None:
        self.f = f
        self._buffer = 0
        self._pos = 0

    def read(self) -> int:
        """Return the next bit, 0 or 1; raises EOFError when the file is exhausted."""
        if self._pos % 8 == 0:
            self._buffer = files.read(self.f, _BYTE)
            self._pos = 0
        bit = self._buffer >> (7 - self._pos) & 1
        self._pos += 1
        return bit


class BitWriter:
    """Collects bits and appends them to a binary file as whole bytes."""

    def __init__(self, f: BinaryIO) -> None:
        self.f = f
        self.pending = ""

    def write(self, bits: int | str) -> None:
        """Queue a single bit (0 or 1) or a string of bits such as ``"1011"``."""
        text = str(bits) if isinstance(bits, int) else bits
        if isinstance(bits, int) and bits not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, not {bits}")
        if any(ch not in "01" for ch in text):
            raise ValueError(f"not a bit string: {text!r}")
        self.pending += text

    def flush(self) -> None:
        """Pad the pending bits with zeros to whole bytes and append them to the file."""
        files.seek(self.f, _BYTE, files.file_size(self.f, _BYTE))
        remainder = len(self.pending) % 8
        if remainder:
            self.pending += "0" * (8 - remainder)
        for start in range(0, len(self.pending), 8):
            files.write(self.f, _BYTE, int(self.pending[start : start + 8], 2))
        self.pending = ""