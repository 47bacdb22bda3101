"""Lexical synonym lookup used by the icon search engine."""

# Package exports should be side-effect free.

from . import (
    models,
    storage,
    normalizer,
    cache,
    provider,
)
from .cache import SynonymCache
from .provider import (
    ThesaurusProvider,
    TwoTierSynonymProvider,
    WordNetProvider,
)

__all__ = [
    "models",
    "storage",
    "normalizer",
    "cache",
    "provider",
    "SynonymCache",
    "ThesaurusProvider",
    "TwoTierSynonymProvider",
    "WordNetProvider",
]
