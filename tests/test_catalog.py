import json

import pytest

from icon_search.catalog import IconCatalog, load_catalog, parse_icon_name, sized_icon_name
from icon_search.errors import CatalogError


def test_parse_icon_name():
    assert parse_icon_name("AddCircleRegular") == ("AddCircle", "Regular")
    assert parse_icon_name("HeartColor") == ("Heart", "Color")
    assert parse_icon_name("Foo") == ("Foo", "")


def test_sized_icon_name():
    assert sized_icon_name("SendRegular", "24") == "Send24Regular"
    assert sized_icon_name("SendRegular", None) == "SendRegular"
    assert sized_icon_name("Foo", "24") == "Foo"


def test_catalog_skips_duplicates_and_invalid():
    catalog = IconCatalog(["SaveRegular", "SaveRegular", 5, "  ", "SaveFilled"])
    assert catalog.names == ["SaveRegular", "SaveFilled"]
    assert [e.index for e in catalog] == [0, 1]


def test_catalog_lookups():
    catalog = IconCatalog(["SaveRegular", "SaveFilled", "Foo"], {"Save": ["16", "24"]})
    assert "SaveFilled" in catalog
    assert catalog.entry_for("Save", "Filled").name == "SaveFilled"
    assert catalog.entry_for("Save", "Color") is None
    assert [e.name for e in catalog.entries_for_base("Save")] == ["SaveRegular", "SaveFilled"]
    assert catalog.available_sizes("SaveFilled") == ["16", "24"]
    assert catalog.available_sizes("Foo") == []
    assert catalog.get("Foo").category == "Icon"
    assert catalog.get("SaveRegular").category == "Regular"
    assert catalog.get("SaveRegular").is_default_variant


def test_load_catalog(tmp_path):
    names = tmp_path / "names.json"
    names.write_text(json.dumps(["SaveRegular", "SaveFilled"]), encoding="utf-16")
    sizes = tmp_path / "sizes.json"
    sizes.write_text(json.dumps({"Save": ["20"]}), encoding="utf-8-sig")
    catalog = load_catalog(names, sizes)
    assert len(catalog) == 2
    assert catalog.available_sizes("SaveRegular") == ["20"]


def test_load_catalog_accepts_wrapped_list_and_missing_sizes(tmp_path):
    names = tmp_path / "names.json"
    names.write_text(json.dumps({"icons": ["HomeRegular"]}), encoding="utf-8")
    catalog = load_catalog(names, tmp_path / "missing.json")
    assert catalog.names == ["HomeRegular"]
    assert catalog.available_sizes("HomeRegular") == []


def test_load_catalog_errors(tmp_path):
    with pytest.raises(CatalogError):
        load_catalog(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"foo": 1}), encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog(bad)
    broken = tmp_path / "broken.json"
    broken.write_text("[not json", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog(broken)
