import pandas as pd
import pytest

from union_find.fixtures import REFERENCE_FIXTURE, Fixture
from union_find.pipeline import (
    VARIANTS,
    ConnectivityAnalyzer,
    ConnectivityConfig,
    VariantComparison,
    build_union_find,
    compare_variants,
)
from union_find.quick_find import QuickFind


def _analyzer(variant="weighted", **kwargs):
    return ConnectivityAnalyzer(ConnectivityConfig(variant=variant, use_tqdm=False, verbose=False, **kwargs))


def test_build_union_find_by_name():
    for name, cls in VARIANTS.items():
        assert isinstance(build_union_find(name, 3), cls)


def test_build_union_find_passes_count_flag_to_quick_find():
    structure = build_union_find("quick-find", 3, count_every_union=True)
    assert isinstance(structure, QuickFind)
    assert structure.count_every_union


def test_build_union_find_unknown_variant():
    with pytest.raises(ValueError, match="Unknown variant"):
        build_union_find("fastest", 3)


def test_analyzer_rejects_unknown_variant():
    with pytest.raises(ValueError):
        ConnectivityAnalyzer(ConnectivityConfig(variant="fastest"))


@pytest.mark.parametrize("variant", sorted(VARIANTS))
def test_analyze_reference_fixture(variant):
    result = _analyzer(variant).analyze(REFERENCE_FIXTURE)

    assert result.stats.total_points == 10
    assert result.stats.pairs_processed == 11
    assert result.stats.merges == 8
    assert result.stats.redundant_pairs == 3
    assert result.stats.component_count == 2
    assert sorted(sorted(members) for members in result.component_map.values()) == [
        [0, 1, 2, 5, 6, 7],
        [3, 4, 8, 9],
    ]

    df = result.dataframe
    assert list(df.columns) == ["point", "component_id", "group", "group_size"]
    assert df["point"].tolist() == list(range(10))
    groups = dict(zip(df["point"], df["group"]))
    assert {groups[p] for p in (0, 1, 2, 5, 6, 7)} == {0}
    assert {groups[p] for p in (3, 4, 8, 9)} == {1}
    sizes = dict(zip(df["point"], df["group_size"]))
    assert sizes[4] == 4
    assert sizes[0] == 6


def test_analyze_counts_singletons():
    result = _analyzer().analyze(Fixture(total=5, pairs=[(0, 1)]))
    assert result.stats.component_count == 4
    assert result.dataframe["group"].tolist() == [0, 0, 1, 2, 3]


def test_analyze_count_every_union():
    result = _analyzer("quick-find", count_every_union=True).analyze(REFERENCE_FIXTURE)
    assert result.stats.component_count == -1
    assert result.stats.merges == 8


def test_analyze_saves_csv(tmp_path):
    output = tmp_path / "groups.csv"
    _analyzer().analyze(REFERENCE_FIXTURE, output)
    saved = pd.read_csv(output)
    assert len(saved) == 10
    assert saved["group"].nunique() == 2


def test_analyze_rejects_unknown_output_format(tmp_path):
    with pytest.raises(ValueError, match="Unsupported output file format"):
        _analyzer().analyze(REFERENCE_FIXTURE, tmp_path / "groups.json")


def test_verbose_analysis_prints_summary(capsys):
    analyzer = ConnectivityAnalyzer(ConnectivityConfig(use_tqdm=False, verbose=True))
    analyzer.analyze(REFERENCE_FIXTURE)
    out = capsys.readouterr().out
    assert "Components found: 2" in out
    assert "Cost profile" in out
    assert "Component 1 (Size: 6)" in out


def test_query_reports_connectivity():
    analyzer = _analyzer()
    result = analyzer.analyze(REFERENCE_FIXTURE)
    answers = analyzer.query(result, [(4, 3), (4, 5), (0, 7)])
    assert answers["connected"].tolist() == [True, False, True]
    assert answers["p"].tolist() == [4, 4, 0]


def test_compare_variants_agree_on_reference():
    comparison = compare_variants(REFERENCE_FIXTURE)
    assert set(comparison.partitions) == set(VARIANTS)
    assert comparison.equivalent
    assert set(comparison.counts.values()) == {2}


def test_compare_selected_variants():
    comparison = compare_variants(REFERENCE_FIXTURE, ["quick-union"])
    assert list(comparison.partitions) == ["quick-union"]


def test_variant_comparison_detects_disagreement():
    comparison = VariantComparison(
        partitions={
            "a": frozenset({frozenset({0, 1}), frozenset({2})}),
            "b": frozenset({frozenset({0}), frozenset({1, 2})}),
        }
    )
    assert not comparison.equivalent
