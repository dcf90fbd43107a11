"""Small number utilities: arithmetic, factorials, Fibonacci, GCD, primes."""

from __future__ import annotations

import math

__all__ = [
    "calculate",
    "factorial",
    "fibonacci",
    "gcd",
    "lcm",
    "is_prime",
    "is_palindrome_number",
]

OPERATORS = ("+", "-", "*", "/", "%")


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def calculate(x: float, y: float, op: str) -> float:
    """Apply a binary operator to two numbers.

    ``%`` works on the integer parts of both operands. Division or remainder
    by zero raises ZeroDivisionError; an unknown operator raises ValueError.
    """
    if op == "+":
        return float(x + y)
    if op == "-":
        return float(x - y)
    if op == "*":
        return float(x * y)
    if op == "/":
        if y == 0:
            raise ZeroDivisionError("invalid operation: division by zero")
        return float(x / y)
    if op == "%":
        divisor = int(y)
        if divisor == 0:
            raise ZeroDivisionError("invalid operation: remainder by zero")
        return float(_trunc_mod(int(x), divisor))
    raise ValueError(f"unsupported operator: {op!r}")


def factorial(n: int) -> int:
    """Return n!; values below 2 give 1."""
    return math.prod(range(2, n + 1))


def fibonacci(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting at 0."""
    numbers = []
    first, second = 0, 1
    for _ in range(count):
        numbers.append(first)
        first, second = second, first + second
    return numbers


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, _trunc_mod(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; raises ZeroDivisionError when both are zero."""
    return _trunc_div(a * b, gcd(a, b))


def is_prime(n: int) -> bool:
    """Return True if n is a prime number."""
    if n <= 1:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def is_palindrome_number(n: int) -> bool:
    """Return True if the decimal digits of n read the same both ways.

    Negative numbers are never palindromes.
    """
    if n < 0:
        return False
    digits = str(n)
    return digits == digits[::-1]