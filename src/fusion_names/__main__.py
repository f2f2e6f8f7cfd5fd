"""Command line entry point for the Fusion Names library."""

from __future__ import annotations

import argparse
import os
import sys

from .runner import fuse_names
from .structures import MIN_DECREASE_COUNT, PRIMARY_RATIOS, SECONDARY_RATIOS, FusionConfig, SpliceRatios


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Splice two names into a single fusion name.")
    parser.add_argument("base", help="Name contributing the leading part of the fusion")
    parser.add_argument("other", help="Name contributing the trailing part of the fusion")
    parser.add_argument(
        "--primary-ratios",
        nargs=2,
        type=float,
        metavar=("HEAD", "TAIL"),
        default=[PRIMARY_RATIOS.head, PRIMARY_RATIOS.tail],
        help="Fractions of the head and tail names used first (default: 0.7 0.3)",
    )
    parser.add_argument(
        "--secondary-ratios",
        nargs=2,
        type=float,
        metavar=("HEAD", "TAIL"),
        default=[SECONDARY_RATIOS.head, SECONDARY_RATIOS.tail],
        help="Fractions used when both primary splices reproduce an input (default: 0.3 0.8)",
    )
    parser.add_argument(
        "--min-decrease",
        type=int,
        default=MIN_DECREASE_COUNT,
        help="Minimum name length before a whole name is shortened by one character",
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Transliterate both names to ASCII before fusing",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=bool(os.getenv("FUSION_NAMES_VERBOSE")),
        help="Print the candidate splices considered",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    config = FusionConfig(
        primary=SpliceRatios(*args.primary_ratios),
        secondary=SpliceRatios(*args.secondary_ratios),
        min_decrease_count=args.min_decrease,
        verbose=args.verbose,
    )

    name = fuse_names(args.base, args.other, config, transliterate=args.ascii)
    if name is None:
        return 1
    print(name)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
