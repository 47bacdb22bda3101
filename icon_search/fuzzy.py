"""Approximate string matching over an immutable corpus.

Similarity comes from rapidfuzz. A query that is not longer than the
candidate is compared against the best aligned window of the candidate
(location within the candidate is ignored); a longer query is compared
against the whole candidate so that ``"upload"`` does not match a two letter
tag such as ``"up"``. The resulting distance is ``1 - similarity`` and lies
in ``[0, 1]`` with ``0`` meaning identical or fully contained.
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

from rapidfuzz import fuzz, process

T = TypeVar("T")

MIN_MATCH_LENGTH = 2
_EPSILON = 1e-9


@dataclass(frozen=True)
class FuzzyMatch(Generic[T]):
    item: T
    distance: float
    index: int


def similarity(query: str, candidate: str, score_cutoff: float = 0.0) -> float:
    """Return the similarity of ``query`` and ``candidate`` on a 0-100 scale."""

    if not query or not candidate:
        return 0.0
    if len(query) <= len(candidate):
        if query in candidate:
            return 100.0
        return fuzz.partial_ratio(query, candidate, score_cutoff=score_cutoff)
    return fuzz.ratio(query, candidate, score_cutoff=score_cutoff)


def distance(query: str, candidate: str) -> float:
    """Normalized distance between lowercase ``query`` and ``candidate``."""

    return 1.0 - similarity(query.lower(), candidate.lower()) / 100.0


class FuzzyIndex(Generic[T]):
    """Searchable corpus; each item may expose several text fields (keys).

    ``search`` keeps every item whose best field lies within ``threshold`` and
    orders the hits by distance, then by the length of the matching field
    (shorter fields are the more specific match), then by corpus position.
    Fields are kept sorted by length: those shorter than the query are scored
    with ``fuzz.ratio``, the rest with ``fuzz.partial_ratio``, each batch in a
    single ``process.extract`` call. Results are memoized per
    ``(query, threshold, limit)`` as ``(distance, index)`` pairs.
    """

    def __init__(
        self,
        items: Sequence[T],
        keys: Optional[Sequence[Callable[[T], str]]] = None,
        *,
        min_match_length: int = MIN_MATCH_LENGTH,
        cache_size: int = 512,
    ) -> None:
        self._items: Tuple[T, ...] = tuple(items)
        key_funcs: Sequence[Callable[[T], str]] = keys or (str,)
        fields = sorted(
            (len(text), text, index)
            for index, item in enumerate(self._items)
            for text in (func(item).lower() for func in key_funcs)
        )
        self._field_lengths: List[int] = [length for length, _, _ in fields]
        self._field_texts: List[str] = [text for _, text, _ in fields]
        self._field_owners: List[int] = [index for _, _, index in fields]
        self._min_match_length = min_match_length
        self._search_cached = lru_cache(maxsize=cache_size)(self._search)

    def __len__(self) -> int:
        return len(self._items)

    def search(self, query: str, threshold: float, limit: Optional[int] = None) -> List[FuzzyMatch[T]]:
        needle = " ".join(query.lower().split())
        if len(needle) < self._min_match_length:
            return []
        threshold = min(1.0, max(0.0, float(threshold)))
        return [
            FuzzyMatch(self._items[index], dist, index)
            for dist, index in self._search_cached(needle, threshold, limit)
        ]

    def _search(self, needle: str, threshold: float, limit: Optional[int]) -> Tuple[Tuple[float, int], ...]:
        # Zero scores never count as a match, even at threshold 1.0.
        cutoff = max(_EPSILON, 100.0 * (1.0 - threshold) - _EPSILON)
        split = bisect_left(self._field_lengths, len(needle))
        batches = ((fuzz.ratio, 0, split), (fuzz.partial_ratio, split, len(self._field_texts)))

        best: Dict[int, Tuple[float, int]] = {}
        for scorer, start, stop in batches:
            if start >= stop:
                continue
            found = process.extract(
                needle,
                self._field_texts[start:stop],
                scorer=scorer,
                score_cutoff=cutoff,
                limit=None,
            )
            for _, score, position in found:
                position += start
                candidate = (1.0 - score / 100.0, self._field_lengths[position])
                owner = self._field_owners[position]
                current = best.get(owner)
                if current is None or candidate < current:
                    best[owner] = candidate

        ranked = sorted(
            (dist, length, index) for index, (dist, length) in best.items() if dist <= threshold + _EPSILON
        )
        if limit is not None:
            ranked = ranked[:limit]
        return tuple((dist, index) for dist, _, index in ranked)
