import pytest

from icon_search.catalog import IconCatalog
from icon_search.scoring import (
    LayerScores,
    combine_layer_scores,
    dominant_layer,
    rank,
    round_half_up,
)


def test_total_is_capped():
    breakdown = combine_layer_scores(100, 15, 25, 25, 20)
    assert breakdown.total == 100
    assert breakdown.substring == 100


def test_layers_are_clamped():
    breakdown = combine_layer_scores(fuzzy=40, semantic=-3, synonym=float("nan"))
    assert breakdown.fuzzy == 15
    assert breakdown.semantic == 0
    assert breakdown.synonym == 0
    assert breakdown.total == 15


def test_partial_layers_add_up():
    breakdown = combine_layer_scores(substring=15, fuzzy=15, visual=18)
    assert breakdown.total == 48
    assert breakdown.rounded() == {"substring": 15, "fuzzy": 15, "semantic": 0, "visual": 18, "synonym": 0}


def test_dominant_layer():
    assert dominant_layer(combine_layer_scores(substring=100, semantic=25)) == "exact"
    assert dominant_layer(combine_layer_scores(substring=15, semantic=25)) == "semantic"
    assert dominant_layer(combine_layer_scores(substring=15, fuzzy=15)) == "substring"
    assert dominant_layer(combine_layer_scores(synonym=20, visual=18)) == "synonym"


def test_round_half_up():
    assert round_half_up(12.5) == 13
    assert round_half_up(12.49) == 12
    assert round_half_up(0.5) == 1


def test_layer_scores_keep_maximum():
    scores = LayerScores()
    assert scores.raise_to("semantic", 10)
    assert not scores.raise_to("semantic", 5)
    assert scores.semantic == 10
    with pytest.raises(KeyError):
        scores.raise_to("bogus", 1)
    assert scores.combine().total == 10


def test_rank_orders_and_truncates():
    catalog = IconCatalog(["SaveCopyRegular", "SaveFilled", "SaveRegular", "HomeRegular"])
    entry = {e.name: e for e in catalog}
    scored = [
        (entry["SaveCopyRegular"], combine_layer_scores(substring=100)),
        (entry["SaveFilled"], combine_layer_scores(substring=100)),
        (entry["SaveRegular"], combine_layer_scores(substring=100)),
        (entry["HomeRegular"], combine_layer_scores()),
    ]
    ranked = rank(scored, 10)
    assert [e.name for e, _ in ranked] == ["SaveRegular", "SaveCopyRegular", "SaveFilled"]
    assert len(rank(scored, 1)) == 1


def test_rank_falls_back_to_catalog_order():
    catalog = IconCatalog(["LockRegular", "HomeRegular", "AlertRegular", "HomeFilled"])
    scored = [(entry, combine_layer_scores(visual=25)) for entry in reversed(list(catalog))]
    ranked = rank(scored, 10)
    assert [e.name for e, _ in ranked] == ["LockRegular", "HomeRegular", "AlertRegular", "HomeFilled"]
