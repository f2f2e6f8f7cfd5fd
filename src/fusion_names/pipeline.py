"""Core pipeline for building fusion names."""

from __future__ import annotations

from dataclasses import dataclass

from .splice import combine
from .structures import FusionConfig


@dataclass
class FusionResult:
    """Result bundle returned by :class:FusionNamer."""

    name: str
    preferred: str
    reversed: str
    used_secondary: bool = False


class FusionNamer:
    """Fuse two names into one, preferring a splice that differs from both."""

    def __init__(self, config: FusionConfig | None = None) -> None:
        self.config = config or FusionConfig()
        self.config.validate()

    def fuse(self, base: str, other: str) -> FusionResult:
        """Return the fusion of `base` and `other` along with the candidates considered."""

        base = str(base or "")
        other = str(other or "")
        verbose = self.config.verbose

        if other == base:
            if verbose:
                print(f"   Identical names, nothing to fuse: '{base}'")
            return FusionResult(name=other, preferred=other, reversed=other)

        preferred = combine(other, base, False, self.config)
        reverse = combine(base, other, False, self.config)
        if verbose:
            print(f"   Preferred splice ('{base}' + '{other}'): '{preferred}'")
            print(f"   Reversed splice ('{other}' + '{base}'): '{reverse}'")

        # A splice equal to either raw input is degenerate
        originals = (base, other)
        chosen: str | None = preferred
        label = "preferred"
        if preferred in originals:
            chosen = None if reverse in originals else reverse
            label = "reversed"

        if chosen is not None:
            if verbose:
                print(f"   Using {label} splice: '{chosen}'")
            return FusionResult(name=chosen, preferred=preferred, reversed=reverse)

        secondary = combine(other, base, True, self.config)
        if verbose:
            print(f"   Both splices reproduce an input, using secondary ratios: '{secondary}'")
        return FusionResult(name=secondary, preferred=preferred, reversed=reverse, used_secondary=True)

    def get_fusion_name(self, base: str, other: str) -> str:
        return self.fuse(base, other).name


def get_fusion_name(base: str, other: str, config: FusionConfig | None = None) -> str:
    """Return a single name spliced together from `base` and `other`."""

    return FusionNamer(config).get_fusion_name(base, other)
