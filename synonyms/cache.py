"""Per-word synonym cache owned by a provider instance."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional


class SynonymCache:
    """Unbounded word -> synonyms map without eviction.

    The query vocabulary is small, so growth is accepted. Concurrent ``set``
    calls for the same word are harmless: the last write wins and both
    writers computed the same value.
    """

    def __init__(self) -> None:
        self._data: Dict[str, List[str]] = {}

    def get(self, word: str) -> Optional[List[str]]:
        cached = self._data.get(word)
        return list(cached) if cached is not None else None

    def set(self, word: str, synonyms: List[str]) -> None:
        self._data[word] = list(synonyms)

    def __contains__(self, word: object) -> bool:
        return word in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def clear(self) -> None:
        self._data.clear()
