"""Removal of fragments doubled by a splice."""

from __future__ import annotations

from typing import List, Optional, Tuple


def substring_candidates(subname: str) -> List[str]:
    """Return every distinct non-empty substring of `subname` in sorted order."""

    size = len(subname)
    windows = {
        subname[start : start + length]
        for length in range(1, size + 1)
        for start in range(size - length + 1)
    }
    return sorted(windows)


def find_doubled_fragment(original: str, subname: str, name_a: str, name_b: str) -> Optional[Tuple[str, int]]:
    """Return the fragment to drop from `original` and the index of its second copy.

    A fragment qualifies when its first occurrence in `original` is directly
    followed by another copy and the doubled text exists in neither source name.
    """

    for fragment in substring_candidates(subname):
        first = original.find(fragment)
        if first == -1:
            continue
        second = first + len(fragment)
        if not original.startswith(fragment, second):
            continue
        repeated = fragment + fragment
        if repeated in name_a or repeated in name_b:
            continue
        return fragment, second
    return None


def erase_substring_duplicates(original: str, subname: str, name_a: str, name_b: str) -> str:
    """Return `original` with at most one splice-induced repetition removed."""

    found = find_doubled_fragment(original, subname, name_a, name_b)
    if found is None:
        return original
    fragment, second = found
    return original[:second] + original[second + len(fragment) :]
