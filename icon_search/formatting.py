"""Search results and their presentation for hosts.

The engine only produces :class:`SearchResult` objects; turning them into a
JSX snippet, an import statement or a text listing is templating done here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from .catalog import FALLBACK_CATEGORY
from .scoring import LAYERS, ScoreBreakdown, round_half_up
from .settings import DEFAULT_ICON_PACKAGE


def jsx_element(name: str) -> str:
    return f"<{name} />"


def import_statement(name: str, package: str = DEFAULT_ICON_PACKAGE) -> str:
    return f'import {{ {name} }} from "{package}";'


@dataclass(frozen=True)
class SearchResult:
    name: str
    base_name: str
    variant: str
    available_sizes: Tuple[str, ...]
    breakdown: ScoreBreakdown
    score_layer: str
    match_reasons: Tuple[str, ...] = field(default=())

    @property
    def category(self) -> str:
        return self.variant or FALLBACK_CATEGORY

    @property
    def score(self) -> int:
        return round_half_up(self.breakdown.total)

    def to_dict(self, icon_package: str = DEFAULT_ICON_PACKAGE, *, explain: bool = False) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "jsxElement": jsx_element(self.name),
            "importStatement": import_statement(self.name, icon_package),
            "category": self.category,
            "availableSizes": list(self.available_sizes),
            "score": self.score,
            "scoreLayer": self.score_layer,
            "scoreBreakdown": self.breakdown.rounded(),
        }
        if explain:
            data["matchReasons"] = list(self.match_reasons)
        return data


def format_text_results(query: str, results: Sequence[SearchResult], *, explain: bool = False) -> str:
    """Plain-text listing for hosts without a UI."""

    if not results:
        return f'No icons found matching "{query}".'
    lines: List[str] = [f'Found {len(results)} icon(s) for "{query}":', ""]
    for i, result in enumerate(results, start=1):
        lines.append(f"{i}. {result.name} ({result.category}) - score {result.score} [{result.score_layer}]")
        lines.append(f"   {jsx_element(result.name)}")
        if result.available_sizes:
            lines.append(f"   Sizes: {', '.join(result.available_sizes)}")
        if explain:
            parts = [f"{layer}={value}" for layer, value in result.breakdown.rounded().items() if value]
            lines.append(f"   Breakdown: {', '.join(parts)}")
            for reason in result.match_reasons:
                lines.append(f"   - {reason}")
    return "\n".join(lines)


def format_results_table(results: Sequence[SearchResult]) -> str:
    """Fixed-width table of totals and per-layer points for the detail log."""

    header = "#".ljust(4) + "Icon Name".ljust(40) + "Total".rjust(6)
    header += "".join(layer[:3].capitalize().rjust(5) for layer in LAYERS)
    rows = [header, "-" * len(header)]
    for i, result in enumerate(results, start=1):
        values = result.breakdown.rounded()
        row = str(i).ljust(4) + result.name[:39].ljust(40) + str(result.score).rjust(6)
        row += "".join((str(values[layer]) if values[layer] else "-").rjust(5) for layer in LAYERS)
        rows.append(row)
        if result.match_reasons:
            rows.append("     └─ " + " | ".join(result.match_reasons))
    return "\n".join(rows)
