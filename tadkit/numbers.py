"""Helpers for whole numbers: digit access and three-way comparison."""


def get_digit(n: int, i: int) -> int:
    """Return the digit of ``|n|`` at position ``i``, where 0 is the units digit.

    Positions beyond the most significant digit yield 0.
    """
    if i < 0:
        raise ValueError("digit position must not be negative")
    return abs(n) % 10 ** (i + 1) // 10**i


def digit_count(n: int) -> int:
    """Return how many decimal digits ``|n|`` has; zero has one digit."""
    return len(str(abs(n)))


def cmp_int(a: int, b: int) -> int:
    """Compare two integers: negative, zero or positive as ``a`` is below, equal to or above ``b``."""
    return a - b


def cmp_double(a: float, b: float) -> int:
    """Compare two floats by their difference truncated towards zero.

    Differences smaller than one in magnitude compare as equal.
    """
    return int(a - b)