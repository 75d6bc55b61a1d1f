"""Apply pair lists to union-find structures and report the resulting groups."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Sequence, Tuple, Type

import pandas as pd

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .fixtures import Fixture
from .quick_find import QuickFind
from .quick_union import QuickUnion
from .structures import UnionFind, components, partition
from .weighted import WeightedQuickUnion


VARIANTS: Dict[str, Type] = {
    "quick-find": QuickFind,
    "quick-union": QuickUnion,
    "weighted": WeightedQuickUnion,
}


def build_union_find(variant: str, size: int, *, count_every_union: bool = False) -> UnionFind:
    """Construct the union-find implementation registered under `variant`."""

    try:
        cls = VARIANTS[variant]
    except KeyError:
        choices = ", ".join(sorted(VARIANTS))
        raise ValueError(f"Unknown variant '{variant}'. Choose one of: {choices}") from None
    if cls is QuickFind:
        return QuickFind(size, count_every_union=count_every_union)
    return cls(size)


@dataclass
class ConnectivityStats:
    """Summary metrics for one analysis run."""

    total_points: int
    pairs_processed: int
    merges: int
    redundant_pairs: int
    component_count: int
    runtime_seconds: float


@dataclass
class ConnectivityResult:
    """Result bundle returned by :class:ConnectivityAnalyzer."""

    dataframe: pd.DataFrame
    component_map: Dict[int, List[int]]
    stats: ConnectivityStats
    structure: UnionFind


@dataclass
class ConnectivityConfig:
    """Configuration parameters for :class:ConnectivityAnalyzer."""

    variant: str = "weighted"
    use_tqdm: bool | None = None
    verbose: bool = True
    count_every_union: bool = False


@dataclass
class VariantComparison:
    """Partitions produced by several variants from the same fixture."""

    partitions: Dict[str, FrozenSet[FrozenSet[int]]] = field(default_factory=dict)
    counts: Dict[str, int] = field(default_factory=dict)

    @property
    def equivalent(self) -> bool:
        return len(set(self.partitions.values())) <= 1


class ConnectivityAnalyzer:
    """Feed a fixture's pairs through one union-find variant."""

    def __init__(self, config: ConnectivityConfig | None = None) -> None:
        self.config = config or ConnectivityConfig()
        if self.config.variant not in VARIANTS:
            choices = ", ".join(sorted(VARIANTS))
            raise ValueError(f"Unknown variant '{self.config.variant}'. Choose one of: {choices}")

    def analyze(self, fixture: Fixture, output_path: str | Path | None = None) -> ConnectivityResult:
        """Union every pair in order, optionally save the groups, and return them."""

        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            print(f"--- Connectivity Analysis Started ({self.config.variant}) ---")
            print("\n1. Building structure...")

        t0 = time.time()
        structure = build_union_find(
            self.config.variant,
            fixture.total,
            count_every_union=self.config.count_every_union,
        )
        if verbose:
            print(f"   Allocated {fixture.total} points. Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print(f"2. Applying {len(fixture.pairs)} pairs...")
        merges, redundant = self._apply_pairs(structure, fixture.pairs)
        if verbose:
            print(f"   Merged {merges} pairs, {redundant} already connected.")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("3. Collecting components...")
        component_map = components(structure, fixture.total)
        df = self._build_dataframe(component_map, fixture.total)
        if verbose:
            print(f"   Done in {time.time() - t0:.2f}s")

        if verbose:
            self._print_summary(structure, component_map)

        if output_path is not None:
            output_str = str(output_path)
            self._save_dataframe(df, output_str)
            if verbose:
                print(f"\n   Processing complete. Results saved to '{output_str}'")

        elapsed = time.time() - overall_start_time
        stats = ConnectivityStats(
            total_points=fixture.total,
            pairs_processed=len(fixture.pairs),
            merges=merges,
            redundant_pairs=redundant,
            component_count=structure.count(),
            runtime_seconds=elapsed,
        )

        if verbose:
            print(f"\n--- Connectivity Analysis Finished in {elapsed:.2f} seconds ---")

        return ConnectivityResult(dataframe=df, component_map=component_map, stats=stats, structure=structure)

    @staticmethod
    def query(result: ConnectivityResult, pairs: Iterable[Tuple[int, int]]) -> pd.DataFrame:
        """Answer `connected` for each pair against an analysed structure."""

        rows = [{"p": p, "q": q, "connected": result.structure.connected(p, q)} for p, q in pairs]
        return pd.DataFrame(rows, columns=["p", "q", "connected"])

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE

    def _apply_pairs(self, structure: UnionFind, pairs: Sequence[Tuple[int, int]]) -> Tuple[int, int]:
        iterator: Iterable[Tuple[int, int]] = pairs
        if pairs and self._use_tqdm:
            iterator = tqdm(pairs, desc="   Applying Pairs", unit="pair")

        merges = 0
        redundant = 0
        for p, q in iterator:
            if structure.connected(p, q):
                redundant += 1
            else:
                merges += 1
            structure.union(p, q)
        return merges, redundant

    @staticmethod
    def _build_dataframe(component_map: Dict[int, List[int]], size: int) -> pd.DataFrame:
        # Number groups by their smallest member so labels do not depend on the variant.
        ordered = sorted(component_map.items(), key=lambda item: item[1][0])
        rows: List[Dict[str, int]] = []
        for group, (component_id, members) in enumerate(ordered):
            for point in members:
                rows.append(
                    {
                        "point": point,
                        "component_id": component_id,
                        "group": group,
                        "group_size": len(members),
                    }
                )
        df = pd.DataFrame(rows, columns=["point", "component_id", "group", "group_size"])
        return df.sort_values("point").reset_index(drop=True)

    def _print_summary(self, structure: UnionFind, component_map: Dict[int, List[int]]) -> None:
        print("\n--- Results Summary ---")
        print(f"   - Components found: {structure.count()}")
        complexity = getattr(type(structure), "complexity", {})
        if complexity:
            costs = ", ".join(f"{op} {value}" for op, value in complexity.items())
            print(f"   - Cost profile: {costs}")
        groups_by_size = sorted(component_map.values(), key=len, reverse=True)
        print("\n   --- Largest Components ---")
        for idx, members in enumerate(groups_by_size[:10]):
            if len(members) <= 1:
                break
            shown = ", ".join(str(point) for point in members[:10])
            if len(members) > 10:
                shown += ", ..."
            print(f"   Component {idx + 1} (Size: {len(members)}): {shown}")

    @staticmethod
    def _save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
        path = Path(output_path)
        suffix = path.suffix.lower()
        if suffix == ".csv":
            dataframe.to_csv(path, index=False)
            return
        if suffix == ".xlsx":
            dataframe.to_excel(path, index=False)
            return
        raise ValueError(f"Unsupported output file format: '{suffix}'")


def compare_variants(fixture: Fixture, variants: Sequence[str] | None = None) -> VariantComparison:
    """Apply `fixture` to each variant and collect the partitions they induce."""

    comparison = VariantComparison()
    for name in variants or list(VARIANTS):
        structure = build_union_find(name, fixture.total)
        for p, q in fixture.pairs:
            structure.union(p, q)
        comparison.partitions[name] = partition(structure, fixture.total)
        comparison.counts[name] = structure.count()
    return comparison


__all__ = [
    "VARIANTS",
    "ConnectivityAnalyzer",
    "ConnectivityConfig",
    "ConnectivityResult",
    "ConnectivityStats",
    "VariantComparison",
    "build_union_find",
    "compare_variants",
]
