"""Additive score aggregation.

Each layer reports the best points it found for an icon; the layer maxima are
clamped to their ceilings, summed and clamped again to ``TOTAL_MAX``. Keeping
this step pure makes the aggregation rule testable without running any of
the matching layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Tuple

from .catalog import CatalogEntry
from .segments import TIER_POINTS, MatchTier

SUBSTRING_MAX = TIER_POINTS[MatchTier.EXACT]
PARTIAL_POINTS = TIER_POINTS[MatchTier.BOUNDARY]
FUZZY_MAX = 15.0
SEMANTIC_MAX = 25.0
SEMANTIC_FUZZY_KEY = 18.0
VISUAL_MAX = 25.0
VISUAL_FUZZY = 18.0
SYNONYM_MAX = 20.0
SYNONYM_DIRECT = 14.0
TOTAL_MAX = 100.0

LAYER_CAPS: Dict[str, float] = {
    "substring": SUBSTRING_MAX,
    "fuzzy": FUZZY_MAX,
    "semantic": SEMANTIC_MAX,
    "visual": VISUAL_MAX,
    "synonym": SYNONYM_MAX,
}
LAYERS: Tuple[str, ...] = tuple(LAYER_CAPS)

EXACT_LABEL = "exact"


def round_half_up(value: float) -> int:
    """Round for display; ``12.5`` becomes ``13``."""
    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


@dataclass
class LayerScores:
    """Per-icon accumulator; each layer keeps only its best contribution."""

    substring: float = 0.0
    fuzzy: float = 0.0
    semantic: float = 0.0
    visual: float = 0.0
    synonym: float = 0.0

    def raise_to(self, layer: str, points: float) -> bool:
        """Store ``points`` for ``layer`` if it beats the current value."""
        if layer not in LAYER_CAPS:
            raise KeyError(layer)
        if points > getattr(self, layer):
            setattr(self, layer, points)
            return True
        return False

    def combine(self) -> "ScoreBreakdown":
        return combine_layer_scores(self.substring, self.fuzzy, self.semantic, self.visual, self.synonym)


@dataclass(frozen=True)
class ScoreBreakdown:
    substring: float
    fuzzy: float
    semantic: float
    visual: float
    synonym: float
    total: float

    def layer_values(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in LAYERS}

    def rounded(self) -> Dict[str, int]:
        return {name: round_half_up(value) for name, value in self.layer_values().items()}


def _clamp(value: float, ceiling: float) -> float:
    if value != value or value <= 0:  # NaN or negative
        return 0.0
    return min(float(value), ceiling)


def combine_layer_scores(
    substring: float = 0.0,
    fuzzy: float = 0.0,
    semantic: float = 0.0,
    visual: float = 0.0,
    synonym: float = 0.0,
) -> ScoreBreakdown:
    """Clamp every layer to its ceiling and the sum to ``TOTAL_MAX``."""

    values = {
        "substring": _clamp(substring, SUBSTRING_MAX),
        "fuzzy": _clamp(fuzzy, FUZZY_MAX),
        "semantic": _clamp(semantic, SEMANTIC_MAX),
        "visual": _clamp(visual, VISUAL_MAX),
        "synonym": _clamp(synonym, SYNONYM_MAX),
    }
    total = min(TOTAL_MAX, sum(values.values()))
    return ScoreBreakdown(total=total, **values)


def dominant_layer(breakdown: ScoreBreakdown) -> str:
    """Label of the layer contributing most; earlier layers win ties."""

    if breakdown.substring >= SUBSTRING_MAX:
        return EXACT_LABEL
    best = LAYERS[0]
    best_value = breakdown.substring
    for layer in LAYERS[1:]:
        value = getattr(breakdown, layer)
        if value > best_value:
            best, best_value = layer, value
    return best


def rank(
    scored: Iterable[Tuple[CatalogEntry, ScoreBreakdown]],
    max_results: int,
) -> List[Tuple[CatalogEntry, ScoreBreakdown]]:
    """Drop zero totals, order and truncate.

    Order: total descending, Regular before other variants, shorter base name
    (the plain icon before its compounds), catalog position.
    """

    kept = [item for item in scored if item[1].total > 0]
    kept.sort(
        key=lambda item: (
            -item[1].total,
            not item[0].is_default_variant,
            len(item[0].base_name),
            item[0].index,
        )
    )
    return kept[:max_results]


__all__ = [
    "EXACT_LABEL",
    "FUZZY_MAX",
    "LAYERS",
    "LAYER_CAPS",
    "LayerScores",
    "PARTIAL_POINTS",
    "SEMANTIC_FUZZY_KEY",
    "SEMANTIC_MAX",
    "SUBSTRING_MAX",
    "SYNONYM_DIRECT",
    "SYNONYM_MAX",
    "ScoreBreakdown",
    "TOTAL_MAX",
    "VISUAL_FUZZY",
    "VISUAL_MAX",
    "combine_layer_scores",
    "dominant_layer",
    "rank",
    "round_half_up",
]
