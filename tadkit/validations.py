"""Character classification and ASCII case shifting."""

_CASE_OFFSET = 32


def is_digit(c: str) -> bool:
    """Whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= ord(c) <= ord("9")


def is_letter(c: str) -> bool:
    """Whether ``c`` is an ASCII letter."""
    return is_upper_case(c) or is_lower_case(c)


def is_upper_case(c: str) -> bool:
    """Whether ``c`` is an ASCII upper-case letter."""
    return ord("A") <= ord(c) <= ord("Z")


def is_lower_case(c: str) -> bool:
    """Whether ``c`` is an ASCII lower-case letter."""
    return ord("a") <= ord(c) <= ord("z")


def to_upper_case(c: str) -> str:
    """Shift ``c`` down by the ASCII case offset.

    No check is made that ``c`` is a lower-case letter.
    """
    return chr(ord(c) - _CASE_OFFSET)


def to_lower_case(c: str) -> str:
    """Shift ``c`` up by the ASCII case offset.

    No check is made that ``c`` is an upper-case letter.
    """
    return chr(ord(c) + _CASE_OFFSET)