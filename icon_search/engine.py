"""Multi-layer icon search with additive scoring.

A query is lowercased and split on whitespace. Five independent layers then
award points to catalog entries:

* substring - a query word equal to a PascalCase segment of the name scores
  100, a word merely contained in the name scores 15
* fuzzy - the whole query against names and base names, up to 15
* semantic - concept dictionary fragments found as whole segments, up to 25
  (18 when the concept key itself was only matched fuzzily)
* synonym - thesaurus/WordNet synonyms bridged into the concept dictionary
  (up to 20) or matched directly against names (up to 14)
* visual - query words equal or close to a visual tag, up to 25 / 18

Each layer keeps its best contribution per entry; the layer maxima are summed
and capped at 100. A failing layer is logged and contributes nothing.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor, wait
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

from .catalog import CatalogEntry, IconCatalog, load_catalog
from .concepts import ConceptMapping
from .errors import CatalogError, InputError, SynonymLookupError
from .formatting import SearchResult, format_results_table
from .fuzzy import FuzzyIndex, FuzzyMatch
from .log_setup import DETAIL_LOGGER_NAME
from .scoring import (
    FUZZY_MAX,
    SEMANTIC_FUZZY_KEY,
    SEMANTIC_MAX,
    SYNONYM_DIRECT,
    SYNONYM_MAX,
    VISUAL_FUZZY,
    VISUAL_MAX,
    LayerScores,
    dominant_layer,
    rank,
)
from .segments import MatchTier, TIER_POINTS, contains_pascal_word, substring_tier
from .settings import SearchSettings
from .visual_tags import VisualTagIndex, build_visual_tag_index, load_visual_tags

logger = logging.getLogger(__name__)
detail_logger = logging.getLogger(DETAIL_LOGGER_NAME)

FUZZY_LIMIT_FACTOR = 3
CONCEPT_FRAGMENT_LIMIT = 10
CONCEPT_KEY_LIMIT = 5
CONCEPT_FUZZY_FRAGMENT_LIMIT = 8
SYNONYM_BRIDGE_LIMIT = 8
SYNONYM_DIRECT_LIMIT = 5
VISUAL_FUZZY_TAG_LIMIT = 3
VISUAL_VARIANTS: Tuple[str, ...] = ("Regular", "Filled")


class SynonymSource(Protocol):
    def lookup(self, word: str) -> List[str]:
        ...


def normalize_query(query: str) -> List[str]:
    """Lowercase, trim and split ``query`` on whitespace runs."""
    return query.lower().split()


def validate_search_params(
    query: object,
    max_results: object,
    threshold: object,
    settings: SearchSettings,
) -> Tuple[str, int, float]:
    """Return the checked ``(query, max_results, threshold)`` or raise :class:`InputError`."""

    if not isinstance(query, str):
        raise InputError("query must be a string")
    if not query.strip():
        raise InputError("query must not be empty")
    if len(query) > settings.max_query_length:
        raise InputError(f"query longer than {settings.max_query_length} characters")

    if isinstance(max_results, bool) or not isinstance(max_results, int):
        raise InputError("maxResults must be an integer")
    if max_results < 1:
        raise InputError("maxResults must be at least 1")
    if max_results > settings.max_results_limit:
        raise InputError(f"maxResults must not exceed {settings.max_results_limit}")

    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise InputError("threshold must be a number")
    value = float(threshold)
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InputError("threshold must lie between 0 and 1")
    return query, max_results, value


class _LayerHits:
    """Best points and reasons one layer found, keyed by catalog index."""

    def __init__(self, layer: str) -> None:
        self.layer = layer
        self.points: Dict[int, float] = {}
        self.reasons: Dict[int, List[str]] = {}

    def add(self, entry: CatalogEntry, points: float, reason: str) -> None:
        if points <= 0:
            return
        if points > self.points.get(entry.index, 0.0):
            self.points[entry.index] = points
        bucket = self.reasons.setdefault(entry.index, [])
        if reason not in bucket:
            bucket.append(reason)


class IconSearchEngine:
    """Ranks catalog entries for free-text queries.

    The catalog, concept dictionary and visual tag index are read-only and
    may be shared between threads; the only mutable state is the synonym
    provider's cache.
    """

    def __init__(
        self,
        catalog: IconCatalog,
        concepts: Optional[ConceptMapping] = None,
        visual_tags: Optional[VisualTagIndex] = None,
        synonym_provider: Optional[SynonymSource] = None,
        settings: Optional[SearchSettings] = None,
    ) -> None:
        self.catalog = catalog
        self.concepts = concepts if concepts is not None else ConceptMapping()
        self.visual_tags = visual_tags if visual_tags is not None else build_visual_tag_index(catalog.names)
        self.synonym_provider = synonym_provider
        self.settings = settings or SearchSettings()

        self._icon_index: FuzzyIndex[CatalogEntry] = FuzzyIndex(
            catalog.entries,
            keys=(lambda entry: entry.base_name, lambda entry: entry.name),
        )
        self._concept_index: FuzzyIndex[str] = FuzzyIndex(self.concepts.keys())
        self._tag_index: FuzzyIndex[str] = FuzzyIndex(self.visual_tags.tags)
        self._warn_missing_tag_bases()

    def _warn_missing_tag_bases(self) -> None:
        missing = [base for base in self.visual_tags.base_names if not self.catalog.entries_for_base(base)]
        if missing:
            logger.warning(
                "Visual-Tag-Index: %s Basisnamen ohne Katalogeintrag (z.B. %s)",
                len(missing),
                ", ".join(missing[:3]),
            )

    # ------------------------------------------------------------------
    # public API

    def search(
        self,
        query: str,
        max_results: Optional[int] = None,
        threshold: Optional[float] = None,
    ) -> List[SearchResult]:
        """Return at most ``max_results`` results, best first.

        Raises :class:`InputError` for an empty or oversized query and for
        out-of-range parameters. An unmatched query yields ``[]``.
        """

        if max_results is None:
            max_results = self.settings.default_max_results
        if threshold is None:
            threshold = self.settings.default_threshold
        query, max_results, threshold = validate_search_params(query, max_results, threshold, self.settings)

        words = normalize_query(query)
        phrase = " ".join(words)
        detail_logger.info('Suche "%s": Woerter %s (threshold=%s)', query, words, threshold)

        synonyms = self._fetch_synonyms(words)

        layers: List[Tuple[str, Callable[[], _LayerHits]]] = [
            ("substring", lambda: self._substring_layer(words)),
            ("fuzzy", lambda: self._fuzzy_layer(phrase, threshold, max_results)),
            ("semantic", lambda: self._semantic_layer(words, threshold)),
            ("synonym", lambda: self._synonym_layer(words, synonyms, threshold)),
            ("visual", lambda: self._visual_layer(words, threshold)),
        ]

        scores: Dict[int, LayerScores] = {}
        reasons: Dict[int, List[str]] = {}
        for name, run in layers:
            try:
                hits = run()
            except Exception:
                logger.exception("Suchschicht %s fehlgeschlagen - Beitrag 0", name)
                continue
            for index, points in hits.points.items():
                scores.setdefault(index, LayerScores()).raise_to(name, points)
            for index, items in hits.reasons.items():
                bucket = reasons.setdefault(index, [])
                bucket.extend(item for item in items if item not in bucket)

        entries = self.catalog.entries
        ranked = rank(((entries[index], layer.combine()) for index, layer in scores.items()), max_results)
        results = [
            SearchResult(
                name=entry.name,
                base_name=entry.base_name,
                variant=entry.variant,
                available_sizes=tuple(self.catalog.available_sizes(entry.name)),
                breakdown=breakdown,
                score_layer=dominant_layer(breakdown),
                match_reasons=tuple(reasons.get(entry.index, ())),
            )
            for entry, breakdown in ranked
        ]
        if detail_logger.isEnabledFor(logging.INFO):
            detail_logger.info("Ergebnisse fuer \"%s\":\n%s", query, format_results_table(results))
        return results

    # ------------------------------------------------------------------
    # layers

    def _substring_layer(self, words: Sequence[str]) -> _LayerHits:
        hits = _LayerHits("substring")
        for entry in self.catalog:
            best = MatchTier.NONE
            best_word = ""
            for word in words:
                tier = substring_tier(entry.name, word)
                if tier > best:
                    best, best_word = tier, word
                    if best is MatchTier.EXACT:
                        break
            if best is MatchTier.NONE:
                continue
            label = "Exact word" if best is MatchTier.EXACT else "Partial"
            hits.add(entry, TIER_POINTS[best], f'{label}: "{best_word}"')
        return hits

    def _fuzzy_layer(self, phrase: str, threshold: float, max_results: int) -> _LayerHits:
        hits = _LayerHits("fuzzy")
        for match in self._icon_index.search(phrase, threshold, limit=max_results * FUZZY_LIMIT_FACTOR):
            hits.add(match.item, (1.0 - match.distance) * FUZZY_MAX, f'Fuzzy: "{phrase}"')
        return hits

    def _fragment_matches(self, fragment: str, limit: int) -> List[FuzzyMatch[CatalogEntry]]:
        """Hits for ``fragment`` that contain it as whole segment(s).

        A whole-segment hit always contains the fragment, i.e. has distance 0,
        so only containing names are searched regardless of the threshold.
        """
        found: List[FuzzyMatch[CatalogEntry]] = []
        for match in self._icon_index.search(fragment, 0.0):
            if contains_pascal_word(match.item.name, fragment):
                found.append(match)
                if len(found) >= limit:
                    break
        return found

    def _semantic_layer(self, words: Sequence[str], threshold: float) -> _LayerHits:
        hits = _LayerHits("semantic")
        for word in words:
            if word in self.concepts:
                fragments = self.concepts.fragments(word)
                detail_logger.info('Konzept "%s" -> %s', word, list(fragments))
                for fragment in fragments:
                    for match in self._fragment_matches(fragment, CONCEPT_FRAGMENT_LIMIT):
                        hits.add(match.item, SEMANTIC_MAX * (1.0 - match.distance), f'Semantic: "{word}" -> "{fragment}"')

            for key_match in self._concept_index.search(word, threshold, limit=CONCEPT_KEY_LIMIT):
                key = key_match.item
                if key == word:
                    # already scored above at full weight
                    continue
                detail_logger.info('Konzept unscharf "%s" ~ "%s"', word, key)
                key_factor = 1.0 - key_match.distance
                for fragment in self.concepts.fragments(key):
                    for match in self._fragment_matches(fragment, CONCEPT_FUZZY_FRAGMENT_LIMIT):
                        points = SEMANTIC_FUZZY_KEY * (1.0 - match.distance) * key_factor
                        hits.add(match.item, points, f'Fuzzy semantic: "{word}" ~ "{key}" -> "{fragment}"')
        return hits

    def _synonym_layer(self, words: Sequence[str], synonyms: Dict[str, List[str]], threshold: float) -> _LayerHits:
        hits = _LayerHits("synonym")
        for word in words:
            for synonym in synonyms.get(word, []):
                if synonym in self.concepts:
                    for fragment in self.concepts.fragments(synonym):
                        for match in self._fragment_matches(fragment, SYNONYM_BRIDGE_LIMIT):
                            hits.add(
                                match.item,
                                SYNONYM_MAX * (1.0 - match.distance),
                                f'Synonym: "{word}" -> "{synonym}" -> semantic "{fragment}"',
                            )
                for match in self._icon_index.search(synonym, threshold, limit=SYNONYM_DIRECT_LIMIT):
                    hits.add(match.item, SYNONYM_DIRECT * (1.0 - match.distance), f'Synonym: "{word}" -> "{synonym}"')
        return hits

    def _visual_layer(self, words: Sequence[str], threshold: float) -> _LayerHits:
        hits = _LayerHits("visual")
        for word in words:
            tag_index = self.visual_tags.tag_index(word)
            if tag_index is not None:
                for entry in self._tagged_entries(tag_index):
                    hits.add(entry, VISUAL_MAX, f'Visual tag: "{word}"')
                continue
            tag_matches = self._tag_index.search(word, threshold, limit=VISUAL_FUZZY_TAG_LIMIT)
            if tag_matches:
                detail_logger.info('Visuelle Tags fuer "%s": %s', word, [m.item for m in tag_matches])
            for tag_match in tag_matches:
                matched = self.visual_tags.tag_index(tag_match.item)
                if matched is None:
                    continue
                points = VISUAL_FUZZY * (1.0 - tag_match.distance)
                for entry in self._tagged_entries(matched):
                    hits.add(entry, points, f'Fuzzy visual: "{word}" ~ "{tag_match.item}"')
        return hits

    def _tagged_entries(self, tag_index: int) -> Iterable[CatalogEntry]:
        for base in self.visual_tags.bases_with_tag(tag_index):
            for variant in VISUAL_VARIANTS:
                entry = self.catalog.entry_for(base, variant)
                if entry is not None:
                    yield entry

    # ------------------------------------------------------------------
    # synonyms

    def _fetch_synonyms(self, words: Sequence[str]) -> Dict[str, List[str]]:
        """Look up all words in parallel and wait for every lookup to settle.

        A failing or timed out lookup yields ``[]`` for that word only.
        """

        if self.synonym_provider is None or not words:
            return {}
        unique = list(dict.fromkeys(words))
        timeout = self.settings.synonym_timeout or None
        executor = ThreadPoolExecutor(
            max_workers=min(self.settings.synonym_workers, len(unique)),
            thread_name_prefix="synonyms",
        )
        result: Dict[str, List[str]] = {}
        try:
            futures = {executor.submit(self.synonym_provider.lookup, word): word for word in unique}
            _, pending = wait(futures, timeout=timeout)
            for future, word in futures.items():
                if future in pending:
                    logger.warning("Synonymsuche fuer '%s' nach %ss abgebrochen", word, timeout)
                    result[word] = []
                    continue
                try:
                    result[word] = list(future.result())
                except SynonymLookupError as exc:
                    logger.warning("Synonymsuche fuer '%s' fehlgeschlagen: %s", word, exc)
                    result[word] = []
                except Exception:
                    logger.exception("Unerwarteter Fehler bei der Synonymsuche fuer '%s'", word)
                    result[word] = []
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        for word in unique:
            if result.get(word):
                detail_logger.info('Synonyme "%s" -> %s', word, result[word])
        return result


def create_engine(settings: Optional[SearchSettings] = None) -> IconSearchEngine:
    """Build an engine from configuration (``config.ini`` when ``settings`` is omitted)."""

    # Imported here: the synonyms package depends on icon_search.errors.
    from synonyms.cache import SynonymCache
    from synonyms.provider import (
        ThesaurusProvider,
        TwoTierSynonymProvider,
        WordNetProvider,
    )
    from synonyms.storage import load_synonyms

    if settings is None:
        from runtime_config import config_main_path, load_merged_config

        main_path = config_main_path()
        settings = SearchSettings.from_config(load_merged_config(main_path), main_path.parent)

    if settings.catalog_path is None:
        raise CatalogError("No catalog_path configured in [SEARCH]")
    catalog = load_catalog(settings.catalog_path, settings.sizes_path)

    tags_path: Optional[Path] = settings.visual_tags_path
    if tags_path is not None and tags_path.exists():
        try:
            visual_tags = load_visual_tags(tags_path, known_bases=catalog.base_names)
        except (OSError, ValueError) as exc:
            logger.warning("Visual-Tag-Index %s nicht lesbar (%s) - erzeuge aus Regeln", tags_path, exc)
            visual_tags = build_visual_tag_index(catalog.names)
    else:
        visual_tags = build_visual_tag_index(catalog.names)
        logger.info("Visual-Tag-Index aus Namensregeln erzeugt (%s Basisnamen).", len(visual_tags))

    provider: Optional[TwoTierSynonymProvider] = None
    if settings.synonyms_enabled:
        thesaurus = None
        if settings.thesaurus_path is not None:
            thesaurus = ThesaurusProvider(load_synonyms(settings.thesaurus_path), limit=settings.thesaurus_limit)
            logger.info(" ✓ Thesaurus geladen (%s Einträge).", len(thesaurus.catalog.entries))
        wordnet_provider = WordNetProvider(limit=settings.wordnet_limit) if settings.wordnet_enabled else None
        provider = TwoTierSynonymProvider(thesaurus, wordnet_provider, SynonymCache())

    return IconSearchEngine(catalog, ConceptMapping(), visual_tags, provider, settings)
