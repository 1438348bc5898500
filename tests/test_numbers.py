import pytest

from tadkit.numbers import cmp_double, cmp_int, digit_count, get_digit

SAMPLES = [0, 7, 10, 99, 100, 4321, -4321, 1000000, -90807, 2147483647]


@pytest.mark.parametrize("n", SAMPLES)
def test_digits_rebuild_absolute_value(n):
    rebuilt = sum(get_digit(n, i) * 10**i for i in range(digit_count(n)))
    assert rebuilt == abs(n)


@pytest.mark.parametrize("n", SAMPLES)
def test_digit_count_matches_decimal_representation(n):
    assert digit_count(n) == len(str(abs(n)))


@pytest.mark.parametrize("n", SAMPLES)
def test_digits_are_in_range(n):
    assert all(0 <= get_digit(n, i) <= 9 for i in range(digit_count(n) + 3))


@pytest.mark.parametrize("n", SAMPLES)
def test_positions_past_the_number_are_zero(n):
    assert get_digit(n, digit_count(n)) == 0
    assert get_digit(n, digit_count(n) + 5) == 0


def test_sign_is_ignored():
    assert get_digit(-4321, 2) == get_digit(4321, 2)
    assert digit_count(-4321) == digit_count(4321)


def test_negative_position_is_rejected():
    with pytest.raises(ValueError):
        get_digit(123, -1)


@pytest.mark.parametrize("a,b", [(1, 2), (5, 5), (9, -3), (-7, -8)])
def test_cmp_int_sign(a, b):
    result = cmp_int(a, b)
    assert (result < 0) == (a < b)
    assert (result == 0) == (a == b)
    assert (result > 0) == (a > b)


def test_cmp_int_antisymmetric():
    assert cmp_int(3, 11) == -cmp_int(11, 3)


def test_cmp_double_truncates_small_differences():
    assert cmp_double(0.5, 0.2) == 0
    assert cmp_double(0.2, 0.5) == 0


def test_cmp_double_truncates_towards_zero():
    assert cmp_double(3.7, 1.2) == 2
    assert cmp_double(1.2, 3.7) == -2


def test_cmp_double_equal_values():
    assert cmp_double(2.25, 2.25) == 0