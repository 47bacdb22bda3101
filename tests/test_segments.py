from icon_search.segments import (
    MatchTier,
    contains_pascal_word,
    segment_starts,
    split_pascal_case,
    substring_points,
    substring_tier,
)


def test_split_pascal_case():
    assert split_pascal_case("DrinkBeerRegular") == ["Drink", "Beer", "Regular"]
    assert split_pascal_case("Wifi1Regular") == ["Wifi1", "Regular"]
    assert split_pascal_case("") == []


def test_segment_starts():
    assert segment_starts("AddCircle") == [0, 3]


def test_substring_tiers():
    assert substring_tier("SaveRegular", "save") is MatchTier.EXACT
    assert substring_tier("AgentsRegular", "agent") is MatchTier.BOUNDARY
    assert substring_tier("GlobeErrorRegular", "beer") is MatchTier.EMBEDDED
    assert substring_tier("TextUppercaseRegular", "case") is MatchTier.EMBEDDED
    assert substring_tier("SaveRegular", "zzz") is MatchTier.NONE
    assert substring_tier("SaveRegular", "") is MatchTier.NONE


def test_variant_suffix_is_a_segment():
    assert substring_tier("SaveRegular", "regular") is MatchTier.EXACT


def test_boundary_found_on_later_occurrence():
    # first "arrow" is embedded in "Narrow", the second starts a segment
    assert substring_tier("NarrowArrowRegular", "arrow") is MatchTier.BOUNDARY


def test_contains_pascal_word():
    assert contains_pascal_word("DrinkCoffeeRegular", "Coffee")
    assert contains_pascal_word("DrinkCoffeeRegular", "coffee")
    assert not contains_pascal_word("TextUppercaseRegular", "Cup")
    assert contains_pascal_word("ArrowDownloadRegular", "ArrowDownload")
    assert not contains_pascal_word("DownloadArrowRegular", "ArrowDownload")
    assert not contains_pascal_word("SaveRegular", "")


def test_substring_points_takes_best_word():
    assert substring_points("SaveRegular", ["agent", "save"]) == 100
    assert substring_points("AgentsRegular", ["agent"]) == 15
    assert substring_points("GlobeErrorRegular", ["beer"]) == 15
    assert substring_points("HomeRegular", ["beer"]) == 0
