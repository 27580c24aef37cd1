import pytest

from algokit.integers import (
    add_digits,
    check_powers_of_three,
    difference_of_sums,
    digit_square_sum,
    is_happy,
    is_palindrome_number,
    is_power_of_four,
    is_power_of_three,
    is_power_of_two,
    is_ugly,
    reverse_integer,
)


def test_check_powers_of_three():
    assert check_powers_of_three(1 + 3 + 27)
    assert check_powers_of_three(3**5 + 3**2)
    assert not check_powers_of_three(2 * 9 + 3)
    assert not check_powers_of_three(2)


def test_digit_square_sum_single_digits():
    for digit in range(10):
        assert digit_square_sum(digit) == digit * digit


def test_digit_square_sum_power_of_ten():
    for k in range(6):
        assert digit_square_sum(10**k) == 1


def test_happy():
    assert is_happy(1)
    assert is_happy(7)
    assert is_happy(19)
    assert not is_happy(2)
    assert not is_happy(4)


def test_power_of_two():
    assert all(is_power_of_two(2**k) for k in range(40))
    assert not any(is_power_of_two(2**k + 1) for k in range(1, 40))
    assert not is_power_of_two(0)
    assert not is_power_of_two(-2)


def test_power_of_three():
    assert all(is_power_of_three(3**k) for k in range(25))
    assert not any(is_power_of_three(3**k + 1) for k in range(1, 25))
    assert not is_power_of_three(0)
    assert not is_power_of_three(-3)


def test_power_of_four():
    assert all(is_power_of_four(4**k) for k in range(20))
    assert not is_power_of_four(2)
    assert not is_power_of_four(8)
    assert not is_power_of_four(0)


def test_add_digits_invariants():
    assert add_digits(0) == 0
    for n in range(1, 300):
        root = add_digits(n)
        assert 1 <= root <= 9
        assert root % 9 == n % 9
        assert add_digits(root) == root


def test_add_digits_negative_raises():
    with pytest.raises(ValueError):
        add_digits(-1)


def test_ugly():
    assert is_ugly(1)
    assert is_ugly(6)
    assert is_ugly(8)
    assert is_ugly(2**5 * 3**3 * 5**2)
    assert not is_ugly(14)
    assert not is_ugly(0)
    assert not is_ugly(-6)


def test_difference_of_sums_example():
    assert difference_of_sums(10, 3) == 19


def test_difference_of_sums_extremes():
    n = 5
    assert difference_of_sums(n, n + 1) == sum(range(n + 1))
    assert difference_of_sums(n, 1) == -sum(range(n + 1))


def test_difference_of_sums_bad_divisor():
    with pytest.raises(ValueError):
        difference_of_sums(5, 0)


def test_reverse_integer_pinned():
    assert reverse_integer(-123) == -321


@pytest.mark.parametrize("x", [123, -456, 1, 0, 98765, -7])
def test_reverse_integer_round_trip(x):
    assert reverse_integer(reverse_integer(x)) == x


def test_reverse_integer_trailing_zeros():
    assert reverse_integer(120) == reverse_integer(12)


def test_reverse_integer_overflow():
    assert reverse_integer(2**31 - 1) == 0
    assert reverse_integer(1534236469) == 0
    assert reverse_integer(-(2**31)) == 0


def test_palindrome_number():
    assert is_palindrome_number(121)
    assert is_palindrome_number(0)
    assert is_palindrome_number(1221)
    assert not is_palindrome_number(-121)
    assert not is_palindrome_number(10)