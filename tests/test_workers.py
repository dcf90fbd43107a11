import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.mathutils import factorial, is_prime
from algokit.workers import (
    NumberReport,
    analyze_number,
    factorial_and_primality,
    sum_in_child,
    write_report,
)


def test_analyze_prime_odd_number():
    report = analyze_number(7)
    assert report.number == 7
    assert report.even is False
    assert report.prime is True
    assert report.factorial == factorial(7)


def test_analyze_even_composite_number():
    report = analyze_number(10)
    assert report.even is True
    assert report.prime is False
    assert report.factorial == factorial(10)


def test_analyze_zero_and_negative():
    zero = analyze_number(0)
    assert zero.even is True
    assert zero.prime is False
    assert zero.factorial == 1
    negative = analyze_number(-3)
    assert negative.even is False
    assert negative.prime is False


def test_to_text_layout():
    report = NumberReport(number=5, even=False, prime=True, factorial=120)
    assert report.to_text() == (
        "Number: 5\n"
        "Even/Odd: Odd\n"
        "Prime/Not Prime: Prime\n"
        "Factorial: 120\n"
    )


def test_to_text_even_not_prime_labels():
    text = NumberReport(number=4, even=True, prime=False, factorial=24).to_text()
    lines = text.splitlines()
    assert lines[1] == "Even/Odd: Even"
    assert lines[2] == "Prime/Not Prime: Not Prime"
    assert len(lines) == 4


def test_write_report_round_trip(tmp_path):
    report = analyze_number(11)
    target = tmp_path / "results.txt"
    write_report(report, target)
    assert target.read_text(encoding="utf-8") == report.to_text()


def test_write_report_overwrites(tmp_path):
    target = tmp_path / "results.txt"
    target.write_text("old content that is longer than needed\n" * 10)
    report = analyze_number(2)
    write_report(report, str(target))
    assert target.read_text(encoding="utf-8") == report.to_text()


def test_write_report_to_directory_fails(tmp_path):
    with pytest.raises(OSError):
        write_report(analyze_number(3), tmp_path)


@given(st.integers(min_value=-20, max_value=60))
def test_factorial_and_primality_matches_helpers(number):
    fact, prime = factorial_and_primality(number)
    assert fact == factorial(number)
    assert prime == is_prime(number)


@given(st.lists(st.integers(min_value=-10**6, max_value=10**6), max_size=20))
def test_sum_in_child_matches_sum(values):
    assert sum_in_child(values) == sum(values)


def test_sum_in_child_accepts_generator():
    assert sum_in_child(x for x in range(1, 11)) == sum(range(1, 11))