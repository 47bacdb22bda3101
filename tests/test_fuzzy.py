from icon_search.fuzzy import FuzzyIndex, distance


def test_contained_query_has_zero_distance():
    index = FuzzyIndex(["agents", "home"])
    matches = index.search("agent", 0.0)
    assert [m.item for m in matches] == ["agents"]
    assert matches[0].distance == 0.0


def test_short_queries_match_nothing():
    index = FuzzyIndex(["a", "ab"])
    assert index.search("a", 1.0) == []
    assert index.search("  ", 1.0) == []


def test_longer_query_compared_as_whole():
    index = FuzzyIndex(["up"])
    assert index.search("upload", 0.3) == []
    assert distance("upload", "up") == 0.5


def test_ties_prefer_shorter_field_then_corpus_order():
    index = FuzzyIndex(["saveas", "save", "save"])
    assert [m.index for m in index.search("save", 0.0)] == [1, 2, 0]


def test_limit_and_keys():
    items = [("HomeRegular", "Home"), ("HomeFilled", "Home"), ("Save", "Save")]
    index = FuzzyIndex(items, keys=(lambda item: item[1], lambda item: item[0]))
    matches = index.search("HOME", 0.0, limit=1)
    assert len(matches) == 1
    assert matches[0].item == items[0]


def test_threshold_is_monotone():
    corpus = ["arrow", "arrows", "narrow", "barrow", "harrow", "error", "mirror", "road"]
    index = FuzzyIndex(corpus)
    previous = set()
    for threshold in (0.0, 0.1, 0.2, 0.4, 0.6, 1.0):
        found = {m.item for m in index.search("arow", threshold)}
        assert previous <= found
        previous = found
    assert "arrow" in previous


def test_results_are_cached_copies():
    index = FuzzyIndex(["save"])
    first = index.search("save", 0.1)
    first.clear()
    assert len(index.search("save", 0.1)) == 1


def test_cache_holds_distance_index_pairs():
    index = FuzzyIndex([f"icon{i}" for i in range(50)])
    matches = index.search("icon", 1.0)
    assert len(matches) == 50
    cached = index._search_cached("icon", 1.0, None)
    assert cached[0] == (0.0, 0)
    assert all(isinstance(dist, float) and isinstance(pos, int) for dist, pos in cached)


def test_short_and_long_fields_use_matching_scorer():
    index = FuzzyIndex(["up", "upload", "uploads"])
    found = {m.item: m.distance for m in index.search("upload", 1.0)}
    assert found["upload"] == 0.0
    assert found["uploads"] == 0.0
    assert found["up"] == distance("upload", "up")
