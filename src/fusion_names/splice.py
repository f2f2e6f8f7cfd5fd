"""Head/tail splicing of two names."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Optional

from .dedupe import erase_substring_duplicates
from .normalization import fix_name
from .structures import MIN_DECREASE_COUNT, FusionConfig


_LONG_TAIL_FACTOR = Decimal("1.5")


def _ceil_share(length: int, ratio: float) -> int:
    # str() keeps 0.7 as 0.7 instead of its binary expansion
    return math.ceil(Decimal(length) * Decimal(str(ratio)))


def head_count(length: int, ratio: float, min_decrease_count: int = MIN_DECREASE_COUNT) -> int:
    """Return how many leading characters of a head name of `length` to keep."""

    count = _ceil_share(length, ratio)
    if count >= length and count >= min_decrease_count:
        count -= 1
    return max(min(count, length), 0)


def tail_count(
    tail_length: int,
    head_length: int,
    ratio: float,
    min_decrease_count: int = MIN_DECREASE_COUNT,
) -> int:
    """Return how many trailing characters of the tail name to keep."""

    count = _ceil_share(tail_length, ratio)
    if head_length and Decimal(tail_length) / Decimal(head_length) >= _LONG_TAIL_FACTOR:
        count += 1
    while count >= tail_length and count >= min_decrease_count:
        count -= 1
    return max(min(count, tail_length), 0)


def combine(
    tail: str,
    head: str,
    use_secondary_ratios: bool = False,
    config: Optional[FusionConfig] = None,
) -> str:
    """Join the start of `head` with the end of `tail`.

    Both names are normalized first. The prefix and suffix lengths follow the
    primary ratios of `config` (70% of the head, 30% of the tail by default), or
    its secondary ratios when `use_secondary_ratios` is set. A fragment doubled
    at the seam is removed unless one of the names already contains it twice.
    """

    config = config or FusionConfig()
    ratios = config.ratios(use_secondary_ratios)

    tail = fix_name(tail)
    head = fix_name(head)

    prefix = head[: head_count(len(head), ratios.head, config.min_decrease_count)]
    kept = tail_count(len(tail), len(head), ratios.tail, config.min_decrease_count)
    suffix = tail[len(tail) - kept :]

    return erase_substring_duplicates(prefix + suffix, suffix, head, tail)
