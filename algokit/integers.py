"""Number-theoretic predicates and digit manipulation on integers."""

from __future__ import annotations

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def check_powers_of_three(n: int) -> bool:
    """Whether ``n`` is a sum of distinct powers of three."""
    while n > 0:
        n, digit = divmod(n, 3)
        if digit == 2:
            return False
    return True


def digit_square_sum(n: int) -> int:
    """Sum of the squares of the decimal digits of ``n``."""
    return sum(int(digit) ** 2 for digit in str(abs(n)))


def is_happy(n: int) -> bool:
    """Whether repeatedly summing digit squares from ``n`` reaches 1."""
    slow = n
    fast = digit_square_sum(n)
    while fast != 1 and slow != fast:
        slow = digit_square_sum(slow)
        fast = digit_square_sum(digit_square_sum(fast))
    return fast == 1


def is_power_of_two(n: int) -> bool:
    """Whether ``n`` is a power of two."""
    return n > 0 and n & (n - 1) == 0


def add_digits(num: int) -> int:
    """Digital root: repeat summing the digits until one digit is left."""
    if num < 0:
        raise ValueError("num must not be negative")
    return 0 if num == 0 else 1 + (num - 1) % 9


def is_ugly(n: int) -> bool:
    """Whether ``n`` is positive with no prime factor besides 2, 3 and 5."""
    if n <= 0:
        return False
    for factor in (2, 3, 5):
        while n % factor == 0:
            n //= factor
    return n == 1


def difference_of_sums(n: int, m: int) -> int:
    """Sum of 1..n not divisible by ``m`` minus the sum of those that are."""
    if m < 1:
        raise ValueError("m must be at least 1")
    total = n * (n + 1) // 2
    multiples = n // m
    divisible = m * multiples * (multiples + 1) // 2
    return total - 2 * divisible


def _is_power_of(n: int, base: int) -> bool:
    if n <= 0:
        return False
    power = 1
    while power < n:
        power *= base
    return power == n


def is_power_of_three(n: int) -> bool:
    """Whether ``n`` is a power of three."""
    return _is_power_of(n, 3)


def is_power_of_four(n: int) -> bool:
    """Whether ``n`` is a power of four."""
    return _is_power_of(n, 4)


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves the 32-bit range."""
    reversed_abs = int(str(abs(x))[::-1])
    result = -reversed_abs if x < 0 else reversed_abs
    return result if _INT_MIN <= result <= _INT_MAX else 0


def is_palindrome_number(x: int) -> bool:
    """Whether ``x`` reads the same forwards and backwards in decimal."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]