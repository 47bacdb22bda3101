"""Dataclasses representing the curated thesaurus."""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class SynonymEntry:
    """Single thesaurus entry.

    Attributes:
        base_term: Headword, lowercase.
        synonyms: Alternative words aggregated over all parts of speech.
        by_pos: Mapping of part of speech (``noun``, ``verb`` ...) to synonyms.
    """

    base_term: str
    synonyms: List[str] = field(default_factory=list)
    by_pos: Dict[str, List[str]] = field(default_factory=dict)


@dataclass
class SynonymCatalog:
    """Collection of thesaurus entries keyed by the headword.

    The ``index`` attribute maps known synonyms (normalized) to all
    headwords that reference them, so a lookup of ``"erase"`` also finds the
    entry of ``"delete"``.
    """

    entries: Dict[str, SynonymEntry] = field(default_factory=dict)
    index: Dict[str, List[str]] = field(default_factory=dict)
