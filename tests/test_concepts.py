from icon_search.concepts import CONCEPT_MAPPING, ConceptMapping


def test_default_mapping_covers_intents():
    concepts = ConceptMapping()
    assert len(concepts) == len(CONCEPT_MAPPING)
    assert len(concepts) >= 300
    assert "delete" in concepts
    assert "Trash" in concepts.fragments("delete")


def test_keys_and_fragments_are_normalized():
    concepts = ConceptMapping({" Foo ": ["Bar", "Bar", " ", "Baz"], "empty": []})
    assert concepts.keys() == ["foo"]
    assert concepts.fragments("foo") == ("Bar", "Baz")
    assert concepts.fragments("empty") == ()
    assert concepts.fragments("unknown") == ()


def test_unmatched_fragments():
    concepts = ConceptMapping({"delete": ["Delete", "Nope"], "cup": ["Cup"]})
    unmatched = concepts.unmatched_fragments(["DeleteRegular", "TextUppercaseRegular"])
    assert unmatched == {"delete": ["Nope"], "cup": ["Cup"]}


def test_all_keys_are_single_lowercase_words():
    for key in ConceptMapping().keys():
        assert key == key.lower()
        assert " " not in key
