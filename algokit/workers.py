"""Run number checks in concurrent workers and collect their answers."""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from algokit.mathutils import factorial, is_prime

__all__ = [
    "NumberReport",
    "analyze_number",
    "write_report",
    "factorial_and_primality",
    "sum_in_child",
]


def _is_even(number: int) -> bool:
    return number % 2 == 0


@dataclass(frozen=True)
class NumberReport:
    """Parity, primality and factorial of one number."""

    number: int
    even: bool
    prime: bool
    factorial: int

    def to_text(self) -> str:
        """Render the report as the four-line text block."""
        lines = (
            f"Number: {self.number}",
            f"Even/Odd: {'Even' if self.even else 'Odd'}",
            f"Prime/Not Prime: {'Prime' if self.prime else 'Not Prime'}",
            f"Factorial: {self.factorial}",
        )
        return "".join(f"{line}\n" for line in lines)


def analyze_number(number: int) -> NumberReport:
    """Check parity, primality and factorial of ``number`` in three workers."""
    with ThreadPoolExecutor(max_workers=3) as pool:
        even = pool.submit(_is_even, number)
        prime = pool.submit(is_prime, number)
        fact = pool.submit(factorial, number)
        return NumberReport(
            number=number,
            even=even.result(),
            prime=prime.result(),
            factorial=fact.result(),
        )


def write_report(report: NumberReport, path: str | PathLike[str]) -> None:
    """Write the report's text to ``path``, replacing any existing file."""
    Path(path).write_text(report.to_text(), encoding="utf-8")


def factorial_and_primality(number: int) -> tuple[int, bool]:
    """Compute the factorial and the primality of ``number`` in two workers."""
    with ThreadPoolExecutor(max_workers=2) as pool:
        fact = pool.submit(factorial, number)
        prime = pool.submit(is_prime, number)
        return fact.result(), prime.result()


def sum_in_child(values: Iterable[int]) -> int:
    """Hand the values to a worker and return the sum it sends back."""
    items = list(values)
    with ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(sum, items).result()