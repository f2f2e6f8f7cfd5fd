"""Name normalization helpers."""

from __future__ import annotations


def is_non_letter(char: str) -> bool:
    """Return True when `char` has no case distinction (digits, punctuation, symbols)."""

    return char.upper() == char.lower()


def fix_name(name: str) -> str:
    """Return the canonical token of `name` used for splicing.

    Multi-word names keep only their longest word (the first one on ties), so
    ``"F FF A"`` becomes ``"FF"``. A word that mixes letters and other
    characters has the other characters removed. A word without any letters is
    returned untouched.
    """

    parts = str(name or "").split()
    if not parts:
        return ""

    longest = max(parts, key=len)
    if all(is_non_letter(char) for char in longest):
        return longest
    return "".join(char for char in longest if not is_non_letter(char))
