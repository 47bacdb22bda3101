"""Multi-layer icon search: catalog, matching layers and additive ranking."""

# Package exports should be side-effect free.

from .catalog import IconCatalog, load_catalog
from .concepts import ConceptMapping
from .engine import IconSearchEngine, create_engine
from .errors import CatalogError, IconSearchError, InputError, SynonymLookupError
from .formatting import SearchResult
from .settings import SearchSettings
from .visual_tags import VisualTagIndex, build_visual_tag_index

__version__ = "1.0.0"

__all__ = [
    "CatalogError",
    "ConceptMapping",
    "IconCatalog",
    "IconSearchEngine",
    "IconSearchError",
    "InputError",
    "SearchResult",
    "SearchSettings",
    "SynonymLookupError",
    "VisualTagIndex",
    "build_visual_tag_index",
    "create_engine",
    "load_catalog",
]
