"""Integer and numeric routines: combinatorics, digits and powers."""

from __future__ import annotations

from collections.abc import Iterator

MOD = 1_000_000_007
INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def pascals_triangle(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError("num_rows must not be negative")
    rows: list[list[int]] = []
    for length in range(1, num_rows + 1):
        if rows:
            previous = rows[-1]
            inner = [a + b for a, b in zip(previous, previous[1:])]
            rows.append([1, *inner, 1])
        else:
            rows.append([1])
    return rows


def count_orders(n: int) -> int:
    """Number of valid pickup/delivery orderings of ``n`` orders, modulo 1e9+7."""
    total = 1
    for positions in range(2 * n, 0, -2):
        total = total * (positions * (positions - 1) // 2 % MOD) % MOD
    return total


def _digits(n: int, base: int) -> Iterator[int]:
    while n > 0:
        n, digit = divmod(n, base)
        yield digit


def _palindromic_in_base(n: int, base: int) -> bool:
    seen: list[int] = []
    for digit in _digits(n, base):
        seen.append(digit)
        if seen != seen[::-1]:
            return False
    return True


def is_strictly_palindromic(n: int) -> bool:
    """Whether ``n`` reads as a palindrome in every base from 2 to n - 2."""
    return all(_palindromic_in_base(n, base) for base in range(2, n - 1))


def add_digits(num: int) -> int:
    """Repeatedly sum the decimal digits of ``num`` until one digit remains."""
    if num <= 0:
        return 0
    while num > 9:
        num = sum(int(d) for d in str(num))
    return num


def is_power_of_four(n: int) -> bool:
    """Whether ``n`` is a non-negative integer power of four."""
    while n != 1:
        if n == 0 or n % 4 != 0:
            return False
        n //= 4
    return True


def power(x: float, n: int) -> float:
    """``x`` raised to the integer power ``n`` by repeated squaring."""
    if n < 0:
        x = 1 / x
    exponent = abs(n)
    result = 1.0
    while exponent:
        if exponent & 1:
            result *= x
        x *= x
        exponent >>= 1
    return result


def reverse_integer(x: int) -> int:
    """Digits of ``x`` reversed, or 0 when the result leaves the signed 32-bit range."""
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    if reversed_value > INT_MAX or reversed_value <= INT_MIN:
        return 0
    return reversed_value


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` stairs taking one or two steps at a time."""
    current, previous = 1, 1
    for _ in range(2, n + 1):
        current, previous = current + previous, current
    return current


def is_palindrome_number(x: int) -> bool:
    """Whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]