"""
Pytest configuration: ensure project root is on sys.path for imports.

Several tests import the local `icon_search` and `synonyms` packages
directly. When running tests from certain IDEs or subdirectories, the
repository root might not be on the Python module search path. This hook
prepends the repo root so imports work consistently.

The fixtures below build a small in-memory catalog and a canned synonym
provider so that no data files, network or NLTK corpora are needed.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List

import pytest


def _add_repo_root_to_sys_path() -> None:
    # tests/ -> repo root
    root = Path(__file__).resolve().parents[1]
    root_str = str(root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


_add_repo_root_to_sys_path()

from icon_search.catalog import IconCatalog  # noqa: E402
from icon_search.concepts import ConceptMapping  # noqa: E402
from icon_search.engine import IconSearchEngine  # noqa: E402
from icon_search.settings import SearchSettings  # noqa: E402
from icon_search.visual_tags import build_visual_tag_index  # noqa: E402

TEST_BASES = [
    "Save",
    "SaveCopy",
    "Agents",
    "DrinkBeer",
    "DrinkCoffee",
    "GlobeError",
    "Delete",
    "Trash",
    "Dismiss",
    "PersonRemove",
    "TextClearFormatting",
    "TextUppercase",
    "Checkmark",
    "ArrowDownload",
    "ArrowUp",
    "LockClosed",
    "Home",
    "Warning",
    "TabDesktop",
    "Table",
    "Bot",
]

TEST_NAMES = [f"{base}{variant}" for base in TEST_BASES for variant in ("Regular", "Filled")]

TEST_SIZES = {
    "Save": ["16", "20", "24"],
    "Agents": ["20", "24"],
}


class FakeSynonymProvider:
    """Canned synonyms; records every lookup."""

    def __init__(self, mapping: Dict[str, List[str]] | None = None) -> None:
        self.mapping = mapping or {}
        self.calls: List[str] = []

    def lookup(self, word: str) -> List[str]:
        self.calls.append(word)
        return list(self.mapping.get(word, []))


@pytest.fixture
def catalog() -> IconCatalog:
    return IconCatalog(TEST_NAMES, TEST_SIZES)


@pytest.fixture
def synonym_provider() -> FakeSynonymProvider:
    return FakeSynonymProvider({"obliterate": ["delete"]})


@pytest.fixture
def engine(catalog, synonym_provider) -> IconSearchEngine:
    return IconSearchEngine(
        catalog,
        ConceptMapping(),
        build_visual_tag_index(catalog.names),
        synonym_provider,
        SearchSettings(),
    )
