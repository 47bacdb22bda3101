"""Two-tier synonym lookup for the search engine.

Tier 1 is the curated thesaurus (``data/thesaurus.json``), answered from
memory. Only when it knows nothing about a word does tier 2 ask WordNet via
NLTK, which is slower and broader. Answers, including empty ones, are kept in
a :class:`~synonyms.cache.SynonymCache`; failures are not cached so that a
later query can retry.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from nltk.corpus import wordnet

from icon_search.errors import SynonymLookupError

from .cache import SynonymCache
from .models import SynonymCatalog
from .normalizer import filter_synonyms, normalize_term

logger = logging.getLogger(__name__)

THESAURUS_LIMIT = 10
WORDNET_LIMIT = 15


def _lookup_base_terms(term: str, catalog: SynonymCatalog) -> List[str]:
    """Return all headwords matching ``term`` via direct or reverse lookup."""
    bases: List[str] = []
    norm = normalize_term(term)
    if norm in catalog.entries:
        bases.append(norm)
    for base in catalog.index.get(norm, []):
        if base not in bases:
            bases.append(base)
    return bases


class ThesaurusProvider:
    """Tier 1: curated thesaurus held in memory."""

    def __init__(self, catalog: SynonymCatalog, limit: int = THESAURUS_LIMIT) -> None:
        self.catalog = catalog
        self.limit = limit

    def lookup(self, word: str) -> List[str]:
        candidates: List[str] = []
        for base in _lookup_base_terms(word, self.catalog):
            entry = self.catalog.entries[base]
            candidates.append(base)
            candidates.extend(entry.synonyms)
        return filter_synonyms(word, candidates, self.limit)


class WordNetProvider:
    """Tier 2: lemma names of every WordNet synset of the word.

    Compound lemmas such as ``scientific_discipline`` are split and each part
    counts as a synonym of its own.
    """

    def __init__(self, limit: int = WORDNET_LIMIT) -> None:
        self.limit = limit

    def lookup(self, word: str) -> List[str]:
        try:
            synsets = wordnet.synsets(word)
        except LookupError as exc:
            raise SynonymLookupError(word, "WordNet corpus not installed (nltk.download('wordnet'))") from exc
        parts: List[str] = []
        for synset in synsets:
            for lemma in synset.lemma_names():
                parts.extend(lemma.lower().split("_"))
        return filter_synonyms(word, parts, self.limit)


class TwoTierSynonymProvider:
    """Cache first, then the thesaurus, then WordNet.

    ``enabled`` switches this provider off without touching its cache; other
    providers in the process are unaffected.
    """

    def __init__(
        self,
        thesaurus: Optional[ThesaurusProvider] = None,
        wordnet_provider: Optional[WordNetProvider] = None,
        cache: Optional[SynonymCache] = None,
        *,
        enabled: bool = True,
    ) -> None:
        self.thesaurus = thesaurus
        self.wordnet = wordnet_provider
        self.cache = cache if cache is not None else SynonymCache()
        self.enabled = enabled

    def lookup(self, word: str) -> List[str]:
        """Return up to a tier's limit of synonyms for ``word``.

        Raises :class:`SynonymLookupError` when the broad tier is needed but
        unavailable; the caller decides how to degrade.
        """

        word = normalize_term(word)
        if not word or not self.enabled:
            return []
        cached = self.cache.get(word)
        if cached is not None:
            return cached

        found: List[str] = []
        if self.thesaurus is not None:
            found = self.thesaurus.lookup(word)
        if not found and self.wordnet is not None:
            found = self.wordnet.lookup(word)
        self.cache.set(word, found)
        return list(found)
