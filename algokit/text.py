"""Word checks: anagrams and palindromes."""

from __future__ import annotations

__all__ = ["is_anagram", "is_palindrome"]


def is_anagram(first: str, second: str) -> bool:
    """Return True if the words use the same letters, ignoring case."""
    first = first.lower()
    second = second.lower()
    if len(first) != len(second):
        return False
    return sorted(first) == sorted(second)


def is_palindrome(word: str) -> bool:
    """Return True if the word reads the same backwards (case-sensitive)."""
    return word == word[::-1]