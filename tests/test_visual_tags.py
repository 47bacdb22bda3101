import json

import pytest

from icon_search.visual_tags import (
    TAG_DICTIONARY,
    VisualTagIndex,
    build_visual_tag_index,
    load_visual_tags,
    save_visual_tags,
    tags_for_name,
)


def _names(name):
    return {TAG_DICTIONARY[i] for i in tags_for_name(name)}


def test_dictionary_is_closed_and_unique():
    assert len(TAG_DICTIONARY) == 130
    assert len(set(TAG_DICTIONARY)) == 130


def test_rules_accumulate_tags():
    assert _names("ArrowUpRegular") == {"arrow", "pointing", "up", "outline"}
    indices = tags_for_name("ArrowUpRegular")
    assert indices == sorted(set(indices))


def test_segment_rules_guard_embedded_words():
    assert "drink" in _names("DrinkBeerRegular")
    assert "drink" not in _names("TextUppercaseRegular")
    assert "tab" in _names("TabDesktopRegular")
    assert "tab" not in _names("TableRegular")
    assert "table" in _names("TableRegular")


def test_style_tags():
    assert "strikethrough" in _names("AlertOffRegular")
    assert "filled" in _names("SaveFilled")
    assert "filled" not in _names("SaveRegular")


def test_build_index_merges_variants():
    index = build_visual_tag_index(["LockClosedRegular", "LockClosedFilled", "HomeRegular"])
    assert {"security", "closing", "outline", "filled"} <= set(index.tag_names("LockClosed"))
    assert index.find_by_tag("security") == ["LockClosed"]
    assert index.find_by_tag("no-such-tag") == []
    assert index.tags_for("Missing") == ()


def test_invalid_indices_are_skipped():
    index = VisualTagIndex(["a", "b"], {"X": [0, 5], "Y": [9], "Z": [1, 1]})
    assert index.base_names == ["X", "Z"]
    assert index.tags_for("X") == (0,)
    assert index.bases_with_tag(1) == ("Z",)


def test_from_dict_rejects_malformed_data():
    with pytest.raises(ValueError):
        VisualTagIndex.from_dict({"tags": "x", "icons": {}})


def test_save_and_load(tmp_path):
    index = build_visual_tag_index(["LockClosedRegular", "HomeRegular"])
    path = tmp_path / "tags.json"
    save_visual_tags(index, path)
    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["tags"] == list(TAG_DICTIONARY)
    assert "LockClosed" in raw["icons"]

    loaded = load_visual_tags(path)
    assert loaded.to_dict() == index.to_dict()


def test_load_drops_bases_unknown_to_catalog(tmp_path, caplog):
    path = tmp_path / "tags.json"
    path.write_text(json.dumps({"tags": ["a"], "icons": {"Known": [0], "Gone": [0]}}), encoding="utf-8")
    with caplog.at_level("WARNING"):
        index = load_visual_tags(path, known_bases=["Known"])
    assert index.base_names == ["Known"]
    assert "Gone" in caplog.text
