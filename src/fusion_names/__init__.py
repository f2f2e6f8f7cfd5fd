"""Fusion Names library initialization."""

from .pipeline import FusionNamer, FusionResult, get_fusion_name
from .structures import FusionConfig, SpliceRatios, PRIMARY_RATIOS, SECONDARY_RATIOS, MIN_DECREASE_COUNT
from .splice import combine
from .dedupe import erase_substring_duplicates
from .normalization import fix_name, is_non_letter
from .runner import fuse_names

__all__ = [
    "FusionNamer",
    "FusionResult",
    "FusionConfig",
    "SpliceRatios",
    "PRIMARY_RATIOS",
    "SECONDARY_RATIOS",
    "MIN_DECREASE_COUNT",
    "get_fusion_name",
    "combine",
    "erase_substring_duplicates",
    "fix_name",
    "is_non_letter",
    "fuse_names",
]
