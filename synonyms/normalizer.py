"""Helpers to normalize terms before comparison."""

from __future__ import annotations

from typing import Iterable, List

MIN_SYNONYM_LENGTH = 3


def normalize_term(term: str) -> str:
    """Return a standardized representation of ``term`` for matching."""

    if not isinstance(term, str):
        return ""
    return " ".join(term.lower().split())


def clean_synonym(term: str) -> str:
    """Collapse a thesaurus phrase into a single lowercase token.

    ``"Throw_away"`` and ``"throw away"`` both become ``"throwaway"``.
    """

    if not isinstance(term, str):
        return ""
    return "".join(ch for ch in term.lower() if ch not in " _\t").strip()


def filter_synonyms(word: str, candidates: Iterable[str], limit: int) -> List[str]:
    """Clean ``candidates``; drop short ones, the word itself and duplicates."""

    own = clean_synonym(word)
    result: List[str] = []
    for candidate in candidates:
        cleaned = clean_synonym(candidate)
        if len(cleaned) < MIN_SYNONYM_LENGTH or cleaned == own or cleaned in result:
            continue
        result.append(cleaned)
        if len(result) >= limit:
            break
    return result
