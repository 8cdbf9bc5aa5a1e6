"""Small number-theory and integer utilities."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Sequence
from typing import Optional

_MASK32 = 0xFFFFFFFF
_SIGN32 = 0x80000000


def is_armstrong(n: int) -> bool:
    """True if n equals the sum of its digits each raised to the digit count."""
    if n < 0:
        return False
    digits = str(n)
    return sum(int(d) ** len(digits) for d in digits) == n


def binary_search(items: Sequence, key) -> Optional[int]:
    """Return the index of key in sorted items, or None if absent."""
    index = bisect_left(items, key)
    if index < len(items) and items[index] == key:
        return index
    return None


def bitwise_add(x: int, y: int) -> int:
    """Add two 32-bit signed integers using only bitwise operations."""
    x &= _MASK32
    y &= _MASK32
    while y:
        x, y = (x ^ y) & _MASK32, ((x & y) << 1) & _MASK32
    return x - (1 << 32) if x & _SIGN32 else x


def is_odd(n: int) -> bool:
    """Test parity with the lowest bit."""
    return bool(n & 1)


def is_power_of_two(n: int) -> bool:
    """True if n has exactly one bit set."""
    return bool(n) and not n & (n - 1)


def to_binary(n: int) -> str:
    """Return the binary digits of a non-negative integer."""
    if n < 0:
        raise ValueError("binary conversion needs a non-negative integer")
    if n == 0:
        return "0"
    digits = []
    while n > 0:
        n, bit = divmod(n, 2)
        digits.append(str(bit))
    return "".join(reversed(digits))


def fibonacci(count: int) -> list[int]:
    """Return the first count Fibonacci numbers, starting 0, 1."""
    terms = []
    a, b = 0, 1
    for _ in range(count):
        terms.append(a)
        a, b = b, a + b
    return terms


def gcd_subtract(a: int, b: int) -> int:
    """Greatest common divisor of two positive integers by repeated subtraction."""
    if a <= 0 or b <= 0:
        raise ValueError("subtraction gcd needs positive integers")
    while a != b:
        if a > b:
            a -= b
        else:
            b -= a
    return a


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's remainder algorithm."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def reverse_digits(n: int) -> int:
    """Reverse the decimal digits of n, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def is_palindrome_number(n: int) -> bool:
    """True if n reads the same with its digits reversed."""
    return n == reverse_digits(n)


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n <= 1:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def primes_between(low: int, high: int) -> list[int]:
    """Primes in the inclusive range low..high."""
    return [n for n in range(low, high + 1) if is_prime(n)]


def factorial(n: int) -> int:
    """n!, with every n <= 0 giving 1."""
    return math.factorial(n) if n > 0 else 1


def alternating_series(x: int) -> float:
    """1 + x - x^2/2! + x^3/3! - ... up to the x-th power."""
    total = 1.0
    for i in range(1, x + 1):
        sign = 1 if i % 2 else -1
        total += sign * (x**i / factorial(i))
    return total


def swap_xor(a: int, b: int) -> tuple[int, int]:
    """Swap two integers with the xor trick."""
    a ^= b
    b ^= a
    a ^= b
    return a, b