"""Convenience helpers for fusing names from user-supplied text."""

from __future__ import annotations

from typing import Optional

import ftfy
from unidecode import unidecode

from .pipeline import FusionNamer
from .structures import FusionConfig


def fuse_names(
    base: str,
    other: str,
    config: Optional[FusionConfig] = None,
    transliterate: bool = False,
) -> str | None:
    """Clean up `base` and `other` and return their fusion name."""

    try:
        namer = FusionNamer(config)
    except ValueError as exc:
        print(f"ERROR: Invalid configuration: {exc}")
        return None

    base = _prepare(base, transliterate)
    other = _prepare(other, transliterate)
    return namer.get_fusion_name(base, other)


def _prepare(name: str, transliterate: bool) -> str:
    # Fix any encoding issues in names pasted from other sources
    fixed = ftfy.fix_text(str(name or ""))
    if transliterate:
        return unidecode(fixed)
    return fixed
