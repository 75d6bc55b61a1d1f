"""Command line entry point for the union-find toolkit."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .fixtures import load_fixture
from .pipeline import VARIANTS, ConnectivityConfig, compare_variants
from .runner import analyze_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Union a list of point pairs and report the connected components.")
    parser.add_argument("input", help="Path or URL of a JSON or algs4 text fixture")
    parser.add_argument("output", type=Path, nargs="?", help="Optional CSV or Excel file for the per-point results")
    parser.add_argument(
        "--variant",
        choices=sorted(VARIANTS),
        default=os.getenv("UNION_FIND_VARIANT", "weighted"),
        help="Union-find implementation to use (default: weighted)",
    )
    parser.add_argument(
        "--query",
        nargs=2,
        type=int,
        action="append",
        metavar=("P", "Q"),
        help="Report whether P and Q are connected once all pairs are applied; may be repeated",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Apply the fixture to every variant and check that they agree",
    )
    parser.add_argument(
        "--count-every-union",
        action="store_true",
        help="Make quick-find decrement its component count on every union call",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars even if tqdm is installed",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print errors and query answers")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    if args.compare:
        return _compare(args.input)

    config = ConnectivityConfig(
        variant=args.variant,
        use_tqdm=not args.disable_tqdm,
        verbose=not args.quiet,
        count_every_union=args.count_every_union,
    )

    result = analyze_file(args.input, args.output, config, queries=args.query)
    return 0 if result is not None else 1


def _compare(source: str) -> int:
    try:
        fixture = load_fixture(source)
    except (OSError, ValueError) as exc:
        print(f"ERROR: Could not read fixture '{source}': {exc}")
        return 1

    comparison = compare_variants(fixture)
    for name, count in comparison.counts.items():
        print(f"   {name}: {count} components")
    if comparison.equivalent:
        print("All variants produced the same partition.")
        return 0
    print("ERROR: Variants disagree on the partition.")
    return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
