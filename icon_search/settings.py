"""Typed view of the ``[SEARCH]`` and ``[SYNONYMS]`` configuration sections."""

from __future__ import annotations

import configparser
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_ICON_PACKAGE = "@fluentui/react-icons"


def _get_float_option(cfg: configparser.ConfigParser, section: str, option: str, default: float) -> float:
    """Liest einen Float und fällt bei ungültigem Wert auf ``default`` zurück."""
    if cfg.has_option(section, option):
        try:
            return cfg.getfloat(section, option)
        except ValueError:
            logger.warning(
                "Ignoriere ungueltigen Wert fuer %s.%s: %s",
                section,
                option,
                cfg.get(section, option, fallback="").strip(),
            )
    return default


def _get_int_option(cfg: configparser.ConfigParser, section: str, option: str, default: int) -> int:
    if cfg.has_option(section, option):
        try:
            return cfg.getint(section, option)
        except ValueError:
            logger.warning(
                "Ignoriere ungueltigen Wert fuer %s.%s: %s",
                section,
                option,
                cfg.get(section, option, fallback="").strip(),
            )
    return default


def _get_flag(cfg: configparser.ConfigParser, section: str, option: str, default: bool) -> bool:
    return _get_int_option(cfg, section, option, 1 if default else 0) == 1


def _resolve(base_dir: Path, raw: str) -> Optional[Path]:
    raw = (raw or "").strip()
    if not raw:
        return None
    path = Path(raw).expanduser()
    return path if path.is_absolute() else base_dir / path


@dataclass(frozen=True)
class SearchSettings:
    default_max_results: int = 20
    default_threshold: float = 0.1
    max_query_length: int = 500
    max_results_limit: int = 200
    icon_package: str = DEFAULT_ICON_PACKAGE
    catalog_path: Optional[Path] = None
    sizes_path: Optional[Path] = None
    visual_tags_path: Optional[Path] = None
    synonyms_enabled: bool = True
    thesaurus_path: Optional[Path] = None
    wordnet_enabled: bool = True
    synonym_timeout: float = 2.0
    synonym_workers: int = 4
    thesaurus_limit: int = 10
    wordnet_limit: int = 15

    @classmethod
    def from_config(cls, cfg: configparser.ConfigParser, base_dir: Optional[Path] = None) -> "SearchSettings":
        """Build settings from ``cfg``; relative paths resolve against ``base_dir``."""

        base = Path(base_dir) if base_dir is not None else Path.cwd()
        defaults = cls()
        return cls(
            default_max_results=max(1, _get_int_option(cfg, "SEARCH", "default_max_results", defaults.default_max_results)),
            default_threshold=min(1.0, max(0.0, _get_float_option(cfg, "SEARCH", "default_threshold", defaults.default_threshold))),
            max_query_length=max(1, _get_int_option(cfg, "SEARCH", "max_query_length", defaults.max_query_length)),
            max_results_limit=max(1, _get_int_option(cfg, "SEARCH", "max_results_limit", defaults.max_results_limit)),
            icon_package=cfg.get("SEARCH", "icon_package", fallback=DEFAULT_ICON_PACKAGE).strip() or DEFAULT_ICON_PACKAGE,
            catalog_path=_resolve(base, cfg.get("SEARCH", "catalog_path", fallback="data/icon_names.json")),
            sizes_path=_resolve(base, cfg.get("SEARCH", "sizes_path", fallback="data/icon_sizes.json")),
            visual_tags_path=_resolve(base, cfg.get("SEARCH", "visual_tags_path", fallback="")),
            synonyms_enabled=_get_flag(cfg, "SYNONYMS", "enabled", True),
            thesaurus_path=_resolve(base, cfg.get("SYNONYMS", "thesaurus_path", fallback="data/thesaurus.json")),
            wordnet_enabled=_get_flag(cfg, "SYNONYMS", "wordnet_enabled", True),
            synonym_timeout=max(0.0, _get_float_option(cfg, "SYNONYMS", "timeout_seconds", defaults.synonym_timeout)),
            synonym_workers=max(1, _get_int_option(cfg, "SYNONYMS", "max_workers", defaults.synonym_workers)),
            thesaurus_limit=max(1, _get_int_option(cfg, "SYNONYMS", "thesaurus_limit", defaults.thesaurus_limit)),
            wordnet_limit=max(1, _get_int_option(cfg, "SYNONYMS", "wordnet_limit", defaults.wordnet_limit)),
        )
