"""Static icon catalog: names, parsed base names/variants and size lookup.

The catalog is a generated artifact (``data/icon_names.json``) holding every
icon component name in the form ``{BaseName}{Variant}``. A second artifact
(``data/icon_sizes.json``) maps base names to the pixel sizes in which sized
siblings such as ``Send24Regular`` exist.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from .errors import CatalogError

logger = logging.getLogger(__name__)

VARIANTS: Tuple[str, ...] = ("Regular", "Filled", "Color")
DEFAULT_VARIANT = "Regular"
FALLBACK_CATEGORY = "Icon"

_NAME_RE = re.compile(r"^(.+?)(Regular|Filled|Color)$")


def parse_icon_name(name: str) -> Tuple[str, str]:
    """Split ``name`` into ``(base_name, variant)``.

    >>> parse_icon_name("AddCircleRegular")
    ('AddCircle', 'Regular')

    Names without a known variant suffix are returned unchanged with an empty
    variant.
    """

    match = _NAME_RE.match(name)
    if match:
        return match.group(1), match.group(2)
    return name, ""


def sized_icon_name(name: str, size: Optional[str]) -> str:
    """Return the sized component name, e.g. ``SendRegular`` + 24 -> ``Send24Regular``."""

    if not size:
        return name
    base, variant = parse_icon_name(name)
    if not variant:
        return name
    return f"{base}{size}{variant}"


def read_json(path: Path) -> Any:
    """Load JSON from ``path`` tolerating a UTF-8 BOM or UTF-16 encoding."""

    raw = path.read_bytes()
    text = ""
    for enc in ("utf-8-sig", "utf-16"):
        try:
            text = raw.decode(enc)
            break
        except UnicodeDecodeError:
            continue
    else:
        text = raw.decode("utf-8", errors="replace")
    return json.loads(text)


@dataclass(frozen=True)
class CatalogEntry:
    """One searchable icon."""

    name: str
    base_name: str
    variant: str
    index: int

    @property
    def category(self) -> str:
        return self.variant or FALLBACK_CATEGORY

    @property
    def is_default_variant(self) -> bool:
        return self.variant == DEFAULT_VARIANT


class IconCatalog:
    """Immutable, ordered collection of :class:`CatalogEntry` objects."""

    def __init__(
        self,
        names: Iterable[str],
        sizes: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> None:
        entries: List[CatalogEntry] = []
        by_name: Dict[str, CatalogEntry] = {}
        skipped = 0
        for raw in names:
            if not isinstance(raw, str) or not raw.strip():
                skipped += 1
                continue
            name = raw.strip()
            if name in by_name:
                skipped += 1
                continue
            base, variant = parse_icon_name(name)
            entry = CatalogEntry(name, base, variant, len(entries))
            entries.append(entry)
            by_name[name] = entry
        if skipped:
            logger.warning("Katalog: %s ungueltige oder doppelte Namen uebersprungen", skipped)

        self._entries: Tuple[CatalogEntry, ...] = tuple(entries)
        self._by_name = by_name
        by_base: Dict[str, List[CatalogEntry]] = {}
        for entry in entries:
            by_base.setdefault(entry.base_name, []).append(entry)
        self._by_base: Dict[str, Tuple[CatalogEntry, ...]] = {
            base: tuple(items) for base, items in by_base.items()
        }
        self._sizes: Dict[str, Tuple[str, ...]] = {}
        for base, labels in (sizes or {}).items():
            if isinstance(labels, (list, tuple)):
                self._sizes[str(base)] = tuple(str(label) for label in labels)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def entries(self) -> Tuple[CatalogEntry, ...]:
        return self._entries

    @property
    def names(self) -> List[str]:
        return [entry.name for entry in self._entries]

    @property
    def base_names(self) -> List[str]:
        return list(self._by_base)

    def get(self, name: str) -> Optional[CatalogEntry]:
        return self._by_name.get(name)

    def entries_for_base(self, base_name: str) -> Tuple[CatalogEntry, ...]:
        return self._by_base.get(base_name, ())

    def entry_for(self, base_name: str, variant: str) -> Optional[CatalogEntry]:
        return self._by_name.get(f"{base_name}{variant}")

    def available_sizes(self, name: str) -> List[str]:
        """Return the size labels of ``name``'s base icon (possibly empty)."""

        base, _ = parse_icon_name(name)
        return list(self._sizes.get(base, ()))


def load_catalog(names_path: str | Path, sizes_path: str | Path | None = None) -> IconCatalog:
    """Load the catalog artifacts; a missing or malformed name list is fatal."""

    p = Path(names_path)
    if not p.exists():
        raise CatalogError(f"Icon catalog not found: {p}")
    try:
        names = read_json(p)
    except (OSError, ValueError) as exc:
        raise CatalogError(f"Icon catalog {p} unreadable: {exc}") from exc
    if isinstance(names, dict):
        names = names.get("icons", names.get("names"))
    if not isinstance(names, list):
        raise CatalogError(f"Icon catalog {p} must contain a JSON list of names")

    sizes: Dict[str, Sequence[str]] = {}
    if sizes_path:
        sp = Path(sizes_path)
        if sp.exists():
            try:
                data = read_json(sp)
            except (OSError, ValueError) as exc:
                logger.warning("Groessentabelle %s nicht lesbar: %s", sp, exc)
                data = {}
            if isinstance(data, dict):
                sizes = data
            else:
                logger.warning("Unerwartetes Format der Groessentabelle: %s", type(data).__name__)
        else:
            logger.info("Keine Groessentabelle unter %s - availableSizes bleiben leer", sp)

    catalog = IconCatalog(names, sizes)
    logger.info(" ✓ Icon-Katalog geladen (%s Einträge).", len(catalog))
    return catalog
