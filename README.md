# algokit

A small collection of classic algorithms for learning and experimenting:

- **Sorting** (`algokit.sorting`): `bubble_sort`, `selection_sort`,
  `insertion_sort`, `merge_sort`, `quick_sort` (last element as pivot),
  `pivot_first_quick_sort` (first element as pivot) and `heap_sort`.
- **Number utilities** (`algokit.mathutils`): `calculate`, `factorial`,
  `fibonacci`, `gcd`, `lcm`, `is_prime` and `is_palindrome_number`.
- **Text checks** (`algokit.text`): `is_anagram` (case-insensitive) and
  `is_palindrome` (case-sensitive).
- **Concurrent workers** (`algokit.workers`): number analysis and array
  summing handed to worker threads, with the results collected by the caller.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library usage

```python
from algokit.sorting import merge_sort
from algokit.mathutils import calculate, factorial, gcd, is_prime, lcm
from algokit.text import is_anagram, is_palindrome

print(merge_sort([64, 25, 12, 22, 11]))   # [11, 12, 22, 25, 64]
print(factorial(5))                        # 120
print(gcd(12, 18), lcm(4, 6))              # 6 12
print(is_prime(7))                         # True
print(calculate(7, 2, "+"))                # 9.0
print(is_anagram("Listen", "Silent"))      # True
print(is_palindrome("level"))              # True
```

The sorting functions take any iterable of comparable values and return a
new sorted list; the input is left untouched.

Notes on the number utilities:

- `calculate(x, y, op)` accepts `+`, `-`, `*`, `/` and `%`. `%` works on the
  integer parts of both operands, with the sign of the result following the
  dividend. Division or remainder by zero raises `ZeroDivisionError`; any
  other operator raises `ValueError`.
- `factorial(n)` returns 1 for every `n` below 2.
- `fibonacci(count)` returns the first `count` numbers, starting at 0.
- `lcm(0, 0)` raises `ZeroDivisionError`.
- `is_palindrome_number` is always `False` for negative numbers.

### Workers

```python
from algokit.workers import (
    analyze_number,
    factorial_and_primality,
    sum_in_child,
    write_report,
)

report = analyze_number(7)        # NumberReport(number=7, even=False, prime=True, factorial=5040)
print(report.to_text(), end="")
write_report(report, "results.txt")

print(factorial_and_primality(5))                       # (120, True)
print(sum_in_child([1, 2, 3, 4, 5, 6, 7, 8, 9, 10]))    # 55
```

`NumberReport.to_text()` renders four lines:

```
Number: 7
Even/Odd: Odd
Prime/Not Prime: Prime
Factorial: 5040
```

## Command line

Installing the package provides the `algokit` command:

```
algokit --help
```

Subcommands:

| Command | What it prints |
| --- | --- |
| `algokit factorial N` | `N! = ...` |
| `algokit fib COUNT` | the first COUNT Fibonacci numbers |
| `algokit lcm A B` | the LCM and HCF of A and B |
| `algokit calc X Y OP` | `X OP Y = result` to two decimals (quote `*` and `%` in the shell) |
| `algokit anagram FIRST SECOND` | whether the two words are anagrams |
| `algokit palindrome WORD` | whether WORD is a palindrome |
| `algokit palindrome-number N` | whether N is a numeric palindrome |
| `algokit sort [--algorithm NAME] [NUMBERS ...]` | sorted numbers; without `--algorithm`, the result of every algorithm; without numbers, the array `64 25 12 22 11` |
| `algokit quicksort N1 ... N10` | exactly ten numbers, sorted with the first-pivot quick sort |
| `algokit prime N` | the factorial of N and whether it is prime |
| `algokit analyze N [--output PATH]` | the four-line number report, also written to PATH (default `results.txt`) |
| `algokit sum N1 ... N10` | the sum of exactly ten numbers |

`--algorithm` takes one of `bubble`, `selection`, `insertion`, `merge`,
`quick`, `quick-first` or `heap`.

The command exits with status 1 when `calc` divides by zero, when `lcm` is
given two zeros, or when `analyze` cannot write its output file.

## What it does not do

- The workers in `algokit.workers` are threads inside the calling process;
  nothing is run in separate operating-system processes.
- The command line takes all its input as arguments; it never prompts for
  input interactively.