"""String helpers: searching, slicing, padding, trimming and case changes."""

from tadkit.validations import is_lower_case, is_upper_case
from tadkit.validations import to_lower_case as _char_lower
from tadkit.validations import to_upper_case as _char_upper


def _truncated_half(x: int) -> int:
    return x // 2 if x >= 0 else -(-x // 2)


def length(s: str) -> int:
    """Return the number of characters before the first NUL, or the whole length."""
    end = s.find("\0")
    return len(s) if end < 0 else end


def char_count(s: str, c: str) -> int:
    """Count the occurrences of ``c`` in ``s``."""
    return s.count(c)


def substring(s: str, start: int, end: int | None = None) -> str:
    """Return ``s`` from ``start`` (inclusive) to ``end`` (exclusive, default: the end)."""
    if start < 0 or (end is not None and end < 0):
        raise ValueError("substring bounds must not be negative")
    return s[start:end]


def index_of(s: str, target: str, offset: int = 0) -> int:
    """Return the first position of ``target`` at or after ``offset``, or -1."""
    if offset < 0:
        raise ValueError("search offset must not be negative")
    return s.find(target, offset)


def last_index_of(s: str, c: str) -> int:
    """Return the last position of ``c`` in ``s``, or -1."""
    return s.rfind(c)


def index_of_n(s: str, c: str, n: int) -> int:
    """Return the position of the ``n``-th occurrence of ``c`` (counting from 1).

    Returns -1 when ``c`` does not occur at all or ``n`` is below 1, and
    ``len(s)`` when ``c`` occurs fewer than ``n`` times.
    """
    positions = [i for i, ch in enumerate(s) if ch == c]
    if not positions:
        return -1
    if n > len(positions):
        return len(s)
    if n < 1:
        return -1
    return positions[n - 1]


def is_empty(s: str) -> bool:
    """Whether ``s`` holds no characters before its first NUL."""
    return length(s) == 0


def starts_with(s: str, prefix: str) -> bool:
    """Whether ``s`` begins with ``prefix``."""
    return s.startswith(prefix)


def ends_with(s: str, suffix: str) -> bool:
    """Whether ``s`` ends with ``suffix``."""
    return s.endswith(suffix)


def contains(s: str, c: str) -> bool:
    """Whether ``c`` occurs in ``s``."""
    return char_count(s, c) >= 1


def replace(s: str, old: str, new: str) -> str:
    """Replace every occurrence of the character ``old`` by ``new``."""
    return s.replace(old, new)


def insert_at(s: str, pos: int, c: str) -> str:
    """Put ``c`` at ``pos``, taking the place of the character that was there."""
    if pos < 0:
        raise ValueError("position must not be negative")
    return s[:pos] + c + s[pos + 1 :]


def remove_at(s: str, pos: int) -> str:
    """Drop the character at ``pos``."""
    if pos < 0:
        raise ValueError("position must not be negative")
    return s[:pos] + s[pos + 1 :]


def ltrim(s: str) -> str:
    """Remove leading spaces."""
    return s.lstrip(" ")


def rtrim(s: str) -> str:
    """Remove trailing spaces."""
    return s.rstrip(" ")


def trim(s: str) -> str:
    """Remove leading and trailing spaces."""
    return rtrim(ltrim(s))


def replicate(c: str, n: int) -> str:
    """Return ``c`` repeated ``n`` times; empty when ``n`` is not positive."""
    return c * max(n, 0)


def spaces(n: int) -> str:
    """Return ``n`` spaces."""
    return replicate(" ", n)


def lpad(s: str, n: int, c: str) -> str:
    """Pad ``s`` on the left with ``c`` up to length ``n``."""
    return replicate(c, n - len(s)) + s


def rpad(s: str, n: int, c: str) -> str:
    """Pad ``s`` on the right with ``c`` up to length ``n``."""
    return s + replicate(c, n - len(s))


def cpad(s: str, n: int, c: str) -> str:
    """Centre ``s`` in ``n`` characters of ``c``; an odd extra goes to the left."""
    right = _truncated_half(n - len(s))
    return lpad(s, n - right, c) + replicate(c, right)


def to_upper_case(s: str) -> str:
    """Upper-case the ASCII letters of ``s``, leaving other characters alone."""
    return "".join(_char_upper(ch) if is_lower_case(ch) else ch for ch in s)


def to_lower_case(s: str) -> str:
    """Lower-case the ASCII letters of ``s``, leaving other characters alone."""
    return "".join(_char_lower(ch) if is_upper_case(ch) else ch for ch in s)


def cmp_string(a: str, b: str) -> int:
    """Compare lexicographically: -1, 0 or 1."""
    return (a > b) - (a < b)


def char_at(s: str, pos: int) -> str:
    """Return the character at ``pos``."""
    return s[pos]