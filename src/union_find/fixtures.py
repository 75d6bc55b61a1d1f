"""Loading point counts and pair lists to feed a union-find structure."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple
from urllib.parse import urlparse

import requests


@dataclass
class Fixture:
    """A universe size and the ordered pairs to union within it."""

    total: int
    pairs: List[Tuple[int, int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.total, bool) or not isinstance(self.total, int):
            raise ValueError(f"total must be an integer, got {self.total!r}")
        if self.total <= 0:
            raise ValueError("total must be positive")
        checked: List[Tuple[int, int]] = []
        for pair in self.pairs:
            if len(pair) != 2 or not all(isinstance(v, int) and not isinstance(v, bool) for v in pair):
                raise ValueError(f"pair {pair!r} must be two integers")
            p, q = pair
            if not (0 <= p < self.total and 0 <= q < self.total):
                raise ValueError(f"pair {pair!r} is outside [0, {self.total - 1}]")
            checked.append((p, q))
        self.pairs = checked


REFERENCE_FIXTURE = Fixture(
    total=10,
    pairs=[(4, 3), (3, 8), (6, 5), (9, 4), (2, 1), (8, 9), (5, 0), (7, 2), (6, 1), (1, 0), (6, 7)],
)


def parse_json_fixture(text: str) -> Fixture:
    """Parse ``{"total": N, "data": [{"p": 4, "q": 3}, ...]}``.

    Pairs may also be written as two-element lists.
    """

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON fixture: {exc}") from exc
    if not isinstance(payload, dict) or "total" not in payload:
        raise ValueError("JSON fixture must be an object with a 'total' field")

    data = payload.get("data", [])
    if not isinstance(data, list):
        raise ValueError("'data' must be a list of pairs")

    pairs: List[Tuple[int, int]] = []
    for entry in data:
        if isinstance(entry, dict):
            try:
                pairs.append((entry["p"], entry["q"]))
            except KeyError as exc:
                raise ValueError(f"pair {entry!r} is missing {exc.args[0]!r}") from exc
        elif isinstance(entry, (list, tuple)):
            pairs.append(tuple(entry))  # type: ignore[arg-type]
        else:
            raise ValueError(f"unsupported pair entry {entry!r}")
    return Fixture(total=payload["total"], pairs=pairs)


def parse_text_fixture(text: str) -> Fixture:
    """Parse the algs4 layout: the point count, then whitespace-separated pairs."""

    tokens = text.split()
    if not tokens:
        raise ValueError("text fixture is empty")
    try:
        values = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"text fixture must contain only integers: {exc}") from exc
    total, rest = values[0], values[1:]
    if len(rest) % 2:
        raise ValueError("text fixture has an unpaired trailing point")
    return Fixture(total=total, pairs=list(zip(rest[0::2], rest[1::2])))


def load_fixture(source: str | Path, timeout: float = 30.0) -> Fixture:
    """Load a fixture from a local path or an HTTP(S) URL."""

    source_str = str(source)
    if _is_url(source_str):
        suffix = Path(urlparse(source_str).path).suffix.lower()
        parser = _parser_for(suffix, source_str)
        response = requests.get(source_str, timeout=timeout)
        response.raise_for_status()
        return parser(response.text)

    path = Path(source)
    parser = _parser_for(path.suffix.lower(), source_str)
    if not path.is_file():
        raise FileNotFoundError(source_str)
    return parser(path.read_text(encoding="utf-8"))


def _is_url(source: str) -> bool:
    return urlparse(source).scheme in {"http", "https"}


def _parser_for(suffix: str, source: str):
    if suffix == ".json":
        return parse_json_fixture
    if suffix in {".txt", ""}:
        return parse_text_fixture
    raise ValueError(f"Unsupported fixture format '{suffix}' for '{source}'")


__all__ = [
    "Fixture",
    "REFERENCE_FIXTURE",
    "load_fixture",
    "parse_json_fixture",
    "parse_text_fixture",
]
