"""Basic configuration records."""

from __future__ import annotations

import math
from dataclasses import dataclass


MIN_DECREASE_COUNT = 5  # Names shorter than this may be used in full


@dataclass(frozen=True)
class SpliceRatios:
    """Fractions of the head and tail names kept in a splice."""

    head: float
    tail: float


PRIMARY_RATIOS = SpliceRatios(head=0.70, tail=0.30)
SECONDARY_RATIOS = SpliceRatios(head=0.30, tail=0.80)


@dataclass
class FusionConfig:
    """Configuration parameters for :class:FusionNamer."""

    primary: SpliceRatios = PRIMARY_RATIOS
    secondary: SpliceRatios = SECONDARY_RATIOS
    min_decrease_count: int = MIN_DECREASE_COUNT
    verbose: bool = False

    def ratios(self, secondary: bool) -> SpliceRatios:
        return self.secondary if secondary else self.primary

    def validate(self) -> None:
        errors: list[str] = []

        for label, ratios in (("primary", self.primary), ("secondary", self.secondary)):
            if not isinstance(ratios, SpliceRatios):
                errors.append(f"{label} must be a SpliceRatios instance")
                continue
            if not _is_ratio(ratios.head):
                errors.append(f"{label} head ratio must be a non-negative number")
            if not _is_ratio(ratios.tail):
                errors.append(f"{label} tail ratio must be a non-negative number")

        if isinstance(self.min_decrease_count, bool) or not isinstance(self.min_decrease_count, int):
            errors.append("min_decrease_count must be an integer")
        elif self.min_decrease_count < 0:
            errors.append("min_decrease_count must be non-negative")

        if not isinstance(self.verbose, bool):
            errors.append("verbose must be a boolean")

        if errors:
            raise ValueError("; ".join(errors))


def _is_ratio(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0
