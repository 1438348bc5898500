"""Conversions between characters, strings, integers and floats."""


def char_to_int(c: str) -> int:
    """Return the digit value of ``c`` in bases up to 36.

    Digits map to 0-9 and letters of either case to 10-35; any other
    character maps to its code point.
    """
    code = ord(c)
    if "0" <= c <= "9":
        return code - ord("0")
    if "A" <= c <= "Z":
        return code - ord("A") + 10
    if "a" <= c <= "z":
        return code - ord("a") + 10
    return code


def int_to_char(i: int) -> str:
    """Return the digit character for ``i``: 0-9, then A-Z for 10-35.

    Other values are taken as a code point.
    """
    if 0 <= i <= 9:
        return chr(ord("0") + i)
    if 10 <= i <= 35:
        return chr(ord("A") + i - 10)
    return chr(i)


def int_to_string(i: int) -> str:
    """Return the decimal representation of ``i``."""
    return str(i)


def string_to_int(s: str, base: int = 10) -> int:
    """Read ``s`` as an integer in ``base``, with an optional leading minus.

    Characters are not validated: each contributes its ``char_to_int`` value.
    """
    negative = s.startswith("-")
    digits = s[1:] if negative else s
    value = 0
    for position, ch in enumerate(reversed(digits)):
        value += char_to_int(ch) * base**position
    return -value if negative else value


def char_to_string(c: str) -> str:
    """Return a one-character string holding the character ``c``.

    Raises ``TypeError`` if ``c`` is not a string and ``ValueError`` if it
    is not exactly one character long.
    """
    if not isinstance(c, str):
        raise TypeError(f"expected a character, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return "".join([c])


def string_to_char(s: str) -> str:
    """Return the first character of ``s``, or NUL when ``s`` is empty."""
    return s[0] if s else "\0"


def string_to_string(s: str) -> str:
    """Return a string equal to ``s``.

    Raises ``TypeError`` if ``s`` is not a string.
    """
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return "".join([s])


def double_to_string(d: float) -> str:
    """Format ``d`` with six decimals and drop trailing zeros (the point stays)."""
    return f"{d:.6f}".rstrip("0")


def string_to_double(s: str) -> float:
    """Read ``s`` as a non-negative decimal number.

    Digits before the point form the integer part and digits after it the
    fraction. A string without a point is read entirely as fractional digits.
    """
    dot = s.find(".")
    whole = s[:dot] if dot >= 0 else ""
    fraction = s[dot + 1 :]
    value = 0.0
    for position, ch in enumerate(reversed(whole)):
        value += char_to_int(ch) * 10**position
    scale = 10.0
    for ch in fraction:
        value += char_to_int(ch) / scale
        scale *= 10
    return value