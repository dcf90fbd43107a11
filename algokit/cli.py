"""Command-line front end for the algokit utilities."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from algokit.mathutils import calculate, factorial, fibonacci, gcd, is_palindrome_number, lcm
from algokit.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    pivot_first_quick_sort,
    quick_sort,
    selection_sort,
)
from algokit.text import is_anagram, is_palindrome
from algokit.workers import analyze_number, factorial_and_primality, sum_in_child, write_report

__all__ = ["main"]

DEMO_ARRAY = (64, 25, 12, 22, 11)

_SORTERS: dict[str, tuple[str, Callable[[list[int]], list[int]]]] = {
    "bubble": ("Bubble Sort", bubble_sort),
    "selection": ("Selection Sort", selection_sort),
    "insertion": ("Insertion Sort", insertion_sort),
    "merge": ("Merge Sort", merge_sort),
    "quick": ("Quick Sort", quick_sort),
    "heap": ("Heap Sort", heap_sort),
    "quick-first": ("Quick Sort (first pivot)", pivot_first_quick_sort),
}

_DEMO_ORDER = ("bubble", "selection", "insertion", "merge", "quick", "heap")


def _row(values: Sequence[int]) -> str:
    return "".join(f"{value} " for value in values)


def _cmd_factorial(args: argparse.Namespace) -> int:
    print(f"{args.number}! = {factorial(args.number)}")
    return 0


def _cmd_fib(args: argparse.Namespace) -> int:
    print("".join(f"{value} , " for value in fibonacci(args.count)))
    return 0


def _cmd_lcm(args: argparse.Namespace) -> int:
    try:
        multiple = lcm(args.a, args.b)
    except ZeroDivisionError:
        print("LCM is undefined when both numbers are zero", file=sys.stderr)
        return 1
    print(f"LCM of {args.a} and {args.b} is {multiple}")
    print(f"HCF = {gcd(args.a, args.b)}")
    return 0


def _cmd_calc(args: argparse.Namespace) -> int:
    try:
        value = calculate(args.x, args.y, args.op)
    except ZeroDivisionError:
        print("INVALID OPERATION", file=sys.stderr)
        return 1
    print(f"{args.x:.2f} {args.op} {args.y:.2f} = {value:.2f}")
    return 0


def _cmd_anagram(args: argparse.Namespace) -> int:
    if len(args.first) != len(args.second):
        print("Not anagrams! (Different lengths)")
    elif is_anagram(args.first, args.second):
        print("They are ANAGRAMS (case-insensitive)!")
    else:
        print("They are NOT anagrams.")
    return 0


def _cmd_palindrome(args: argparse.Namespace) -> int:
    verdict = "a" if is_palindrome(args.word) else "NOT a"
    print(f"{args.word} is {verdict} Palindrome")
    return 0


def _cmd_palindrome_number(args: argparse.Namespace) -> int:
    verdict = "a" if is_palindrome_number(args.number) else "a NOT"
    print(f"{args.number} is {verdict} Palindrome number")
    return 0


def _cmd_sort(args: argparse.Namespace) -> int:
    values = list(args.numbers) if args.numbers else list(DEMO_ARRAY)
    if args.algorithm:
        _, sorter = _SORTERS[args.algorithm]
        print(_row(sorter(values)))
        return 0
    print(f"Original array: {_row(values)}")
    for name in _DEMO_ORDER:
        label, sorter = _SORTERS[name]
        print(f"{label}: {_row(sorter(values))}")
    return 0


def _cmd_quicksort(args: argparse.Namespace) -> int:
    ordered = pivot_first_quick_sort(args.numbers)
    print("".join(f"{value}," for value in ordered))
    print()
    return 0


def _cmd_prime(args: argparse.Namespace) -> int:
    fact, prime = factorial_and_primality(args.number)
    print(f"Factorial of {args.number} is {fact}")
    print(f"{args.number} is {'PRIME' if prime else 'NOT PRIME'}")
    return 0


def _cmd_analyze(args: argparse.Namespace) -> int:
    report = analyze_number(args.number)
    sys.stdout.write(report.to_text())
    try:
        write_report(report, args.output)
    except OSError as exc:
        print(f"File write failed: {exc}", file=sys.stderr)
        return 1
    return 0


def _cmd_sum(args: argparse.Namespace) -> int:
    print(f"sum of array is : {sum_in_child(args.numbers)}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algokit", description="Small algorithm toolkit.")
    commands = parser.add_subparsers(dest="command", required=True)

    sub = commands.add_parser("factorial", help="print n!")
    sub.add_argument("number", type=int)
    sub.set_defaults(handler=_cmd_factorial)

    sub = commands.add_parser("fib", help="print the first COUNT Fibonacci numbers")
    sub.add_argument("count", type=int)
    sub.set_defaults(handler=_cmd_fib)

    sub = commands.add_parser("lcm", help="print the LCM and HCF of two numbers")
    sub.add_argument("a", type=int)
    sub.add_argument("b", type=int)
    sub.set_defaults(handler=_cmd_lcm)

    sub = commands.add_parser("calc", help="apply an operator to two numbers")
    sub.add_argument("x", type=float)
    sub.add_argument("y", type=float)
    sub.add_argument("op", choices=("+", "-", "*", "/", "%"))
    sub.set_defaults(handler=_cmd_calc)

    sub = commands.add_parser("anagram", help="check whether two words are anagrams")
    sub.add_argument("first")
    sub.add_argument("second")
    sub.set_defaults(handler=_cmd_anagram)

    sub = commands.add_parser("palindrome", help="check whether a word is a palindrome")
    sub.add_argument("word")
    sub.set_defaults(handler=_cmd_palindrome)

    sub = commands.add_parser("palindrome-number", help="check whether a number is a palindrome")
    sub.add_argument("number", type=int)
    sub.set_defaults(handler=_cmd_palindrome_number)

    sub = commands.add_parser("sort", help="sort numbers with one or all algorithms")
    sub.add_argument("--algorithm", choices=sorted(_SORTERS))
    sub.add_argument("numbers", type=int, nargs="*")
    sub.set_defaults(handler=_cmd_sort)

    sub = commands.add_parser("quicksort", help="quick sort exactly ten numbers")
    sub.add_argument("numbers", type=int, nargs=10)
    sub.set_defaults(handler=_cmd_quicksort)

    sub = commands.add_parser("prime", help="factorial and primality in two workers")
    sub.add_argument("number", type=int)
    sub.set_defaults(handler=_cmd_prime)

    sub = commands.add_parser("analyze", help="parity, primality and factorial, saved to a file")
    sub.add_argument("number", type=int)
    sub.add_argument("--output", default="results.txt")
    sub.set_defaults(handler=_cmd_analyze)

    sub = commands.add_parser("sum", help="sum ten numbers in a worker")
    sub.add_argument("numbers", type=int, nargs=10)
    sub.set_defaults(handler=_cmd_sum)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = _build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())