"""PascalCase segmentation shared by the substring, concept and synonym layers.

A segment starts at the first character of a name and at every uppercase
letter that follows a non-uppercase character. ``"DrinkBeerRegular"`` yields
``["Drink", "Beer", "Regular"]``; uppercase runs such as ``"PDF"`` stay
together.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, List


class MatchTier(IntEnum):
    """Raw strength of a query word found inside an icon name."""

    NONE = 0
    EMBEDDED = 1
    BOUNDARY = 2
    EXACT = 3


def segment_starts(name: str) -> List[int]:
    """Return the character offsets at which segments of ``name`` begin."""

    starts: List[int] = []
    for i, char in enumerate(name):
        if i == 0 or (char.isupper() and not name[i - 1].isupper()):
            starts.append(i)
    return starts


def split_pascal_case(name: str) -> List[str]:
    """Split ``name`` into its PascalCase word segments."""

    starts = segment_starts(name)
    bounds = starts[1:] + [len(name)]
    return [name[start:end] for start, end in zip(starts, bounds)]


def contains_pascal_word(name: str, fragment: str) -> bool:
    """Return ``True`` if ``fragment`` occurs as complete segment(s) of ``name``.

    ``contains_pascal_word("DrinkCoffeeRegular", "Coffee")`` is true while
    ``contains_pascal_word("TextUppercaseRegular", "Cup")`` is not. Compound
    fragments such as ``"ArrowDownload"`` must cover consecutive segments.
    """

    wanted = [segment.lower() for segment in split_pascal_case(fragment)]
    if not wanted:
        return False
    segments = [segment.lower() for segment in split_pascal_case(name)]
    width = len(wanted)
    return any(segments[i:i + width] == wanted for i in range(len(segments) - width + 1))


def substring_tier(name: str, word: str) -> MatchTier:
    """Classify how the lowercase query ``word`` occurs inside ``name``."""

    if not word:
        return MatchTier.NONE
    if any(segment.lower() == word for segment in split_pascal_case(name)):
        return MatchTier.EXACT

    lowered = name.lower()
    idx = lowered.find(word)
    if idx == -1:
        return MatchTier.NONE

    starts = set(segment_starts(name))
    while idx != -1:
        if idx in starts:
            return MatchTier.BOUNDARY
        idx = lowered.find(word, idx + 1)
    return MatchTier.EMBEDDED


def best_substring_tier(name: str, words: Iterable[str]) -> MatchTier:
    """Return the strongest tier reached by any of ``words``."""

    best = MatchTier.NONE
    for word in words:
        tier = substring_tier(name, word)
        if tier > best:
            best = tier
            if best is MatchTier.EXACT:
                break
    return best


# Both partial tiers collapse to the same contribution; only a whole segment
# reaches the cap on its own.
TIER_POINTS = {
    MatchTier.NONE: 0.0,
    MatchTier.EMBEDDED: 15.0,
    MatchTier.BOUNDARY: 15.0,
    MatchTier.EXACT: 100.0,
}


def substring_points(name: str, words: Iterable[str]) -> float:
    """Substring-layer points of ``name`` for the lowercase query ``words``."""

    return TIER_POINTS[best_substring_tier(name, words)]
