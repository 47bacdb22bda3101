"""Storage helpers for the curated thesaurus.

The persistence layer tolerates different JSON encodings and the two schema
variants in use: the plain form ``{"delete": ["erase", "remove"]}`` and the
grouped form ``{"delete": {"synonyms": {"verb": [...], "noun": [...]}}}``.
Loading normalises headwords to lowercase and rebuilds the reverse index;
saving emits the grouped form whenever parts of speech are known.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List

from .models import SynonymCatalog, SynonymEntry
from .normalizer import normalize_term

logger = logging.getLogger(__name__)


def _dedupe_preserve_order(items: Iterable[str]) -> List[str]:
    seen: set[str] = set()
    result: List[str] = []
    for item in items:
        if not item:
            continue
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def _clean_list(raw: object) -> List[str]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list):
        return []
    return [str(s).strip() for s in raw if isinstance(s, str) and s.strip()]


def _append_index_entry(target: Dict[str, List[str]], key: str, base: str) -> None:
    if not key:
        return
    bucket = target.setdefault(key, [])
    if base not in bucket:
        bucket.append(base)


def _add_index(target: Dict[str, List[str]], key: str, base: str) -> None:
    norm = normalize_term(key)
    if not norm:
        return

    _append_index_entry(target, norm, base)

    simplified = re.sub(r"[^a-z0-9]+", " ", norm).strip()
    if simplified and simplified != norm:
        _append_index_entry(target, simplified, base)


def _decode(raw: bytes) -> str:
    for enc in ("utf-8-sig", "utf-16"):
        try:
            return raw.decode(enc)
        except UnicodeDecodeError:
            continue
    return raw.decode("utf-8", errors="replace")


def load_synonyms(path: str | Path) -> SynonymCatalog:
    """Return the thesaurus stored at ``path`` or an empty one if not found."""
    p = Path(path)
    catalog = SynonymCatalog()
    if not p.exists():
        logger.warning("Thesaurus %s nicht gefunden - Stufe 1 bleibt leer", p)
        return catalog

    text = _decode(p.read_bytes())
    if not text.strip():
        return catalog

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        cleaned = "".join(ch for ch in text if ch >= " " or ch in "\n\t\r")
        if not cleaned.strip():
            return catalog
        data = json.loads(cleaned)

    if not isinstance(data, dict):
        logger.error("Unerwartetes Thesaurus-Format: %s", type(data).__name__)
        return catalog

    for base, value in data.items():
        headword = normalize_term(str(base))
        if not headword:
            continue
        syns: List[str] = []
        by_pos: Dict[str, List[str]] = {}

        if isinstance(value, dict):
            syn_val = value.get("synonyms")
            if isinstance(syn_val, dict):
                for pos, items in syn_val.items():
                    variants = _clean_list(items)
                    if variants:
                        by_pos[str(pos).lower()] = _dedupe_preserve_order(variants)
                        syns.extend(variants)
            else:
                syns.extend(_clean_list(syn_val))
            for pos in ("noun", "verb", "adjective", "adverb"):
                variants = _clean_list(value.get(pos))
                if variants:
                    current = by_pos.setdefault(pos, [])
                    for variant in variants:
                        if variant not in current:
                            current.append(variant)
                    syns.extend(variants)
        else:
            syns.extend(_clean_list(value))

        existing = catalog.entries.get(headword)
        if existing is not None:
            # "Delete" and "delete" collapse into one entry.
            syns = existing.synonyms + syns
            for pos, values in existing.by_pos.items():
                by_pos[pos] = _dedupe_preserve_order(values + by_pos.get(pos, []))

        catalog.entries[headword] = SynonymEntry(
            base_term=headword,
            synonyms=_dedupe_preserve_order(syns),
            by_pos={pos: _dedupe_preserve_order(vals) for pos, vals in by_pos.items()},
        )

    rebuild_indexes(catalog)
    return catalog


def save_synonyms(catalog: SynonymCatalog, path: str | Path) -> None:
    """Persist ``catalog`` as JSON at ``path``."""
    p = Path(path)
    data: dict[str, object] = {}
    for base, entry in catalog.entries.items():
        if entry.by_pos:
            data[base] = {
                "synonyms": {pos: syns[:] for pos, syns in entry.by_pos.items() if syns}
            }
        else:
            data[base] = entry.synonyms[:]
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


def validate_catalog(catalog: SynonymCatalog) -> None:
    """Raise ``ValueError`` if the catalog contains malformed entries."""
    for base, entry in catalog.entries.items():
        if not isinstance(entry.base_term, str) or not entry.base_term:
            raise ValueError(f"Invalid base term: {base!r}")
        if not isinstance(entry.synonyms, list):
            raise ValueError(f"Invalid synonyms for {base}")
        for syn in entry.synonyms:
            if not isinstance(syn, str) or not syn.strip():
                raise ValueError(f"Invalid synonym for {base}: {syn!r}")
        if not isinstance(entry.by_pos, dict):
            raise ValueError(f"Invalid part-of-speech mapping for {base}")
        for pos, values in entry.by_pos.items():
            if not isinstance(values, list):
                raise ValueError(f"Invalid synonyms for {base} ({pos})")


def rebuild_indexes(catalog: SynonymCatalog) -> None:
    """Rebuild the synonym reverse index for ``catalog``."""
    catalog.index.clear()

    for base, entry in catalog.entries.items():
        _add_index(catalog.index, base, base)
        for syn in entry.synonyms:
            _add_index(catalog.index, syn, base)
        for pos_values in entry.by_pos.values():
            for syn in pos_values:
                _add_index(catalog.index, syn, base)
