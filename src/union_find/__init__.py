"""Union-find library initialization."""

from .structures import IndexOutOfRangeError, UnionFind, components, partition
from .quick_find import QuickFind
from .quick_union import QuickUnion
from .weighted import WeightedQuickUnion
from .fixtures import Fixture, REFERENCE_FIXTURE, load_fixture
from .pipeline import (
    VARIANTS,
    ConnectivityAnalyzer,
    ConnectivityConfig,
    ConnectivityResult,
    ConnectivityStats,
    build_union_find,
    compare_variants,
)
from .runner import analyze_file

__all__ = [
    "IndexOutOfRangeError",
    "UnionFind",
    "components",
    "partition",
    "QuickFind",
    "QuickUnion",
    "WeightedQuickUnion",
    "Fixture",
    "REFERENCE_FIXTURE",
    "load_fixture",
    "VARIANTS",
    "ConnectivityAnalyzer",
    "ConnectivityConfig",
    "ConnectivityResult",
    "ConnectivityStats",
    "build_union_find",
    "compare_variants",
    "analyze_file",
]
