import pytest

from icon_search.errors import SynonymLookupError
from synonyms import provider as provider_module
from synonyms.cache import SynonymCache
from synonyms.models import SynonymCatalog, SynonymEntry
from synonyms.normalizer import clean_synonym, filter_synonyms
from synonyms.provider import (
    ThesaurusProvider,
    TwoTierSynonymProvider,
    WordNetProvider,
)
from synonyms.storage import rebuild_indexes


class FakeSynset:
    def __init__(self, *lemmas):
        self._lemmas = lemmas

    def lemma_names(self):
        return list(self._lemmas)


class FakeWordNet:
    def __init__(self, synsets=None, error=None):
        self.synsets_by_word = synsets or {}
        self.error = error
        self.calls = []

    def synsets(self, word):
        self.calls.append(word)
        if self.error:
            raise self.error
        return self.synsets_by_word.get(word, [])


def _thesaurus(**entries):
    catalog = SynonymCatalog(entries={k: SynonymEntry(k, v) for k, v in entries.items()})
    rebuild_indexes(catalog)
    return ThesaurusProvider(catalog)


def test_clean_and_filter():
    assert clean_synonym("Throw_away") == "throwaway"
    assert clean_synonym("wipe out") == "wipeout"
    assert filter_synonyms("delete", ["Delete", "ax", "erase", "Erase", "rub out"], 10) == ["erase", "rubout"]
    assert filter_synonyms("x", ["aaa", "bbb", "ccc"], 2) == ["aaa", "bbb"]


def test_thesaurus_direct_and_reverse_lookup():
    thesaurus = _thesaurus(delete=["erase", "remove", "wipe out"])
    assert thesaurus.lookup("delete") == ["erase", "remove", "wipeout"]
    assert thesaurus.lookup("erase") == ["delete", "remove", "wipeout"]
    assert thesaurus.lookup("unknown") == []


def test_thesaurus_limit():
    thesaurus = _thesaurus(big=[f"word{i}" for i in range(20)])
    assert len(thesaurus.lookup("big")) == 10


def test_wordnet_splits_compound_lemmas(monkeypatch):
    fake = FakeWordNet({"science": [FakeSynset("science", "scientific_discipline"), FakeSynset("skill", "art")]})
    monkeypatch.setattr(provider_module, "wordnet", fake)
    assert WordNetProvider().lookup("science") == ["scientific", "discipline", "skill", "art"]


def test_wordnet_missing_corpus_raises(monkeypatch):
    monkeypatch.setattr(provider_module, "wordnet", FakeWordNet(error=LookupError("Resource wordnet not found")))
    with pytest.raises(SynonymLookupError) as info:
        WordNetProvider().lookup("science")
    assert info.value.word == "science"


def test_two_tier_prefers_thesaurus(monkeypatch):
    fake = FakeWordNet({"delete": [FakeSynset("cancel")]})
    monkeypatch.setattr(provider_module, "wordnet", fake)
    provider = TwoTierSynonymProvider(_thesaurus(delete=["erase"]), WordNetProvider(), SynonymCache())
    assert provider.lookup("Delete") == ["erase"]
    assert fake.calls == []


def test_two_tier_falls_back_and_caches(monkeypatch):
    fake = FakeWordNet({"science": [FakeSynset("skill")]})
    monkeypatch.setattr(provider_module, "wordnet", fake)
    cache = SynonymCache()
    provider = TwoTierSynonymProvider(_thesaurus(), WordNetProvider(), cache)
    assert provider.lookup("science") == ["skill"]
    assert provider.lookup("science") == ["skill"]
    assert fake.calls == ["science"]
    assert "science" in cache

    assert provider.lookup("nothing") == []
    provider.lookup("nothing")
    assert fake.calls == ["science", "nothing"]
    assert cache.get("nothing") == []


def test_failures_are_not_cached(monkeypatch):
    monkeypatch.setattr(provider_module, "wordnet", FakeWordNet(error=LookupError("missing")))
    cache = SynonymCache()
    provider = TwoTierSynonymProvider(None, WordNetProvider(), cache)
    with pytest.raises(SynonymLookupError):
        provider.lookup("science")
    assert "science" not in cache
    assert len(cache) == 0


def test_disabled_provider_leaves_others_alone():
    disabled = TwoTierSynonymProvider(_thesaurus(delete=["erase"]), enabled=False)
    active = TwoTierSynonymProvider(_thesaurus(delete=["erase"]))
    assert disabled.lookup("delete") == []
    assert len(disabled.cache) == 0
    assert active.lookup("delete") == ["erase"]


def test_cache_returns_copies():
    cache = SynonymCache()
    cache.set("a", ["b"])
    cache.get("a").append("c")
    assert cache.get("a") == ["b"]
    assert cache.get("missing") is None
    cache.clear()
    assert len(cache) == 0
