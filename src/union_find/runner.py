"""Convenience helpers for running a connectivity analysis end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Tuple

import requests

from .fixtures import load_fixture
from .pipeline import ConnectivityAnalyzer, ConnectivityConfig, ConnectivityResult
from .structures import IndexOutOfRangeError


def analyze_file(
    input_source: str | Path,
    output_path: str | Path | None = None,
    config: Optional[ConnectivityConfig] = None,
    queries: Iterable[Tuple[int, int]] | None = None,
) -> ConnectivityResult | None:
    """Load `input_source`, union its pairs, and optionally write the groups."""

    try:
        fixture = load_fixture(input_source)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_source}'.")
        return None
    except requests.RequestException as exc:
        print(f"ERROR: Could not download '{input_source}': {exc}")
        return None
    except ValueError as exc:
        print(f"ERROR: Could not read fixture '{input_source}': {exc}")
        return None

    config = config or ConnectivityConfig()
    try:
        analyzer = ConnectivityAnalyzer(config)
        result = analyzer.analyze(fixture, output_path)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None
    except ImportError as exc:
        print(f"ERROR: Excel output needs the 'excel' extra (openpyxl): {exc}")
        return None
    except OSError as exc:
        print(f"ERROR: Could not write results to '{output_path}': {exc}")
        return None

    if queries:
        try:
            answers = analyzer.query(result, queries)
        except IndexOutOfRangeError as exc:
            print(f"ERROR: {exc}")
            return None
        for row in answers.itertuples(index=False):
            verdict = "connected" if row.connected else "not connected"
            print(f"{row.p} {row.q}: {verdict}")

    return result
