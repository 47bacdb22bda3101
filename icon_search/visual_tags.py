"""Visual tag vocabulary and the base-name -> tag index built from name rules.

Tags describe what an icon looks like or stands for (``arrow``, ``security``,
``drink`` ...). The index is derived from the icon names alone: every rule
whose pattern matches a base name contributes its tags, duplicates removed,
indices sorted. ``build_visual_tags.py`` writes the index as a JSON artifact
(``{"tags": [...], "icons": {"AddCircle": [1, 45], ...}}``) so services can
load it instead of re-running the rules.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Pattern, Sequence, Set, Tuple, Union

from .catalog import parse_icon_name, read_json
from .segments import split_pascal_case

logger = logging.getLogger(__name__)

TAG_DICTIONARY: Tuple[str, ...] = (
    # shapes
    "arrow", "circle", "square", "triangle", "line",
    "curve", "rectangle", "diamond", "star", "cross",
    # objects
    "person", "people", "document", "folder", "calendar",
    "clock", "phone", "mail", "camera", "screen",
    "keyboard", "mouse", "speaker", "microphone", "headphones",
    "glasses", "pen", "pencil", "brush", "scissors",
    # actions
    "pointing", "moving", "rotating", "expanding", "shrinking",
    "opening", "closing", "connecting", "disconnecting", "stacking",
    "sorting", "filtering", "searching", "editing", "deleting",
    "adding", "removing", "copying", "pasting", "cutting",
    # concepts
    "communication", "navigation", "security", "warning", "error",
    "success", "info", "question", "notification", "settings",
    "data", "storage", "cloud", "network", "power",
    "money", "shopping", "health", "food", "drink",
    # style
    "filled", "outline", "badge", "overlay", "strikethrough",
    "dashed", "dotted", "gradient", "3d", "flat",
    # direction
    "up", "down", "left", "right", "horizontal",
    "vertical", "diagonal", "inward", "outward", "bidirectional",
    # containers
    "box", "panel", "window", "tab", "card",
    "list", "grid", "table", "tree", "chart",
    # nature
    "sun", "moon", "weather", "plant", "animal",
    "water", "fire", "earth", "air", "leaf",
    # tech
    "code", "database", "server", "api", "terminal",
    "bug", "git", "robot", "ai", "chip",
    # media
    "image", "video", "audio", "music", "play",
    "pause", "stop", "record", "volume", "mute",
)

_TAG_POSITIONS: Dict[str, int] = {tag: i for i, tag in enumerate(TAG_DICTIONARY)}


@dataclass(frozen=True)
class TagRule:
    """Tags granted to every base name matching ``pattern``.

    ``pattern`` is either a case-insensitive regular expression or a tuple of
    words that must appear as complete PascalCase segments.
    """

    pattern: Union[Pattern[str], Tuple[str, ...]]
    tags: Tuple[str, ...]

    def matches(self, base_name: str) -> bool:
        if isinstance(self.pattern, tuple):
            segments = {segment.lower() for segment in split_pascal_case(base_name)}
            return any(word.lower() in segments for word in self.pattern)
        return self.pattern.search(base_name) is not None


def _rule(pattern: str, *tags: str) -> TagRule:
    return TagRule(re.compile(pattern, re.IGNORECASE), tags)


def _segment_rule(words: Sequence[str], *tags: str) -> TagRule:
    return TagRule(tuple(words), tags)


TAG_RULES: Tuple[TagRule, ...] = (
    # arrows and directions
    _rule(r"Arrow", "arrow", "pointing"),
    _rule(r"ArrowUp|ArrowTop|ChevronUp", "arrow", "up"),
    _rule(r"ArrowDown|ArrowBottom|ChevronDown", "arrow", "down"),
    _rule(r"ArrowLeft|ChevronLeft", "arrow", "left"),
    _rule(r"ArrowRight|ChevronRight", "arrow", "right"),
    _rule(r"ArrowSync|ArrowRepeat|Sync", "arrow", "rotating", "bidirectional"),
    _rule(r"ArrowExpand|Expand|Maximize", "arrow", "expanding"),
    _rule(r"ArrowMinimize|Minimize|Shrink", "arrow", "shrinking"),
    _rule(r"ArrowMove|Drag|Move", "moving"),
    _rule(r"Diagonal", "diagonal"),
    # shapes
    _rule(r"Circle", "circle"),
    _rule(r"Square", "square"),
    _rule(r"Triangle", "triangle"),
    _rule(r"Rectangle", "rectangle"),
    _rule(r"Diamond", "diamond"),
    _rule(r"Star", "star"),
    _rule(r"Cross|Plus", "cross", "adding"),
    _rule(r"Line(?!ar)", "line"),
    _rule(r"Cube", "3d", "box"),
    # people
    _rule(r"Person(?!al)", "person"),
    _rule(r"People|Group|Team|Organization", "people"),
    _rule(r"Guest|User|Account", "person"),
    # documents
    _rule(r"Document|Doc|File|Page", "document"),
    _rule(r"Folder", "folder"),
    _rule(r"Note|Notebook|Notepad", "document", "editing"),
    # time
    _rule(r"Calendar|Date|Event", "calendar"),
    _rule(r"Clock|Time|Timer|Alarm", "clock"),
    _rule(r"History", "clock", "arrow"),
    # communication
    _rule(r"Phone|Call|Dial", "phone", "communication"),
    _rule(r"Mail|Email|Envelope", "mail", "communication"),
    _rule(r"Chat|Message|Comment", "communication"),
    _rule(r"Send", "arrow", "communication"),
    # devices
    _rule(r"Camera", "camera"),
    _rule(r"Screen|Display|Monitor|Desktop", "screen"),
    _rule(r"Keyboard", "keyboard"),
    _rule(r"Mouse", "mouse"),
    _rule(r"Speaker", "speaker", "volume"),
    _rule(r"Microphone|Mic", "microphone"),
    _rule(r"Headphone|Headset", "headphones"),
    # tools
    _rule(r"Glasses|Eyeglasses", "glasses"),
    _rule(r"Pen(?!cil)", "pen"),
    _rule(r"Pencil", "pencil"),
    _rule(r"Brush|Paint", "brush"),
    _rule(r"Scissors|Cut(?!e)", "scissors", "cutting"),
    # actions
    _rule(r"Add(?!ress)", "adding"),
    _rule(r"Remove|Delete|Trash", "deleting", "removing"),
    _rule(r"Edit|Modify", "editing"),
    _rule(r"Copy|Duplicate", "copying"),
    _rule(r"Paste", "pasting"),
    _rule(r"Search|Find|Magnify", "searching"),
    _rule(r"Filter", "filtering"),
    _rule(r"Sort", "sorting"),
    _rule(r"Connect|Link|Attach", "connecting"),
    _rule(r"Disconnect|Unlink|Detach", "disconnecting"),
    _rule(r"Stack|Layer", "stacking"),
    _rule(r"Open", "opening"),
    _rule(r"Close", "closing"),
    # status
    _rule(r"Warning|Caution", "warning", "triangle"),
    _rule(r"Error|Failed|Problem", "error"),
    _rule(r"Success|Check|Complete", "success"),
    _rule(r"Info|Information", "info"),
    _rule(r"Question|Help", "question"),
    _rule(r"Alert|Notification|Bell", "notification"),
    # settings
    _rule(r"Settings|Gear|Cog|Config", "settings"),
    _rule(r"Option|Preference", "settings"),
    # security
    _rule(r"Lock|Secure|Locked", "security"),
    _rule(r"Unlock|Unsecure", "security", "opening"),
    _rule(r"Key", "security"),
    _rule(r"Shield|Guard|Protect", "security"),
    _rule(r"Eye(?!glasses)", "security"),
    # data and storage
    _rule(r"Data", "data"),
    _rule(r"Storage|Drive|Disk", "storage"),
    _rule(r"Cloud", "cloud"),
    _rule(r"Server", "server"),
    _rule(r"Database", "database"),
    _rule(r"Network|Internet|Globe|World", "network"),
    _rule(r"Globe|Earth|World", "earth"),
    _rule(r"Navigation|Compass|Location|Map", "navigation"),
    # power
    _rule(r"Power|Battery", "power"),
    _rule(r"Plugin|Plug", "power", "connecting"),
    # commerce
    _rule(r"Money|Dollar|Currency|Payment", "money"),
    _rule(r"Cart|Shopping|Store|Buy", "shopping"),
    _rule(r"Receipt|Invoice", "document", "money"),
    # health and food
    _rule(r"Heart|Health|Medical", "health"),
    _rule(r"Food|Eat|Restaurant|Bowl|Pizza|Apple|Egg", "food"),
    _segment_rule(("Drink", "Coffee", "Cup", "Beer", "Wine"), "drink"),
    _rule(r"Beaker", "food", "circle"),
    # nature
    _rule(r"Sun|Bright", "sun"),
    _rule(r"Moon|Night|Dark", "moon"),
    _rule(r"Weather|Cloud(?!y)|Rain|Snow", "weather"),
    _rule(r"Plant|Tree|Garden", "plant"),
    _rule(r"Animal|Dog|Cat|Bird|Bug(?!Report)", "animal"),
    _rule(r"Water|Drop|Liquid", "water"),
    _rule(r"Fire|Flame|Hot", "fire"),
    _rule(r"Wind|Air(?!plane)", "air"),
    _rule(r"Leaf", "leaf"),
    # tech
    _rule(r"Code|Braces|Script", "code"),
    _rule(r"Terminal|Console|Command", "terminal"),
    _rule(r"Bug|Debug", "bug"),
    _rule(r"Git|Branch|Merge|Commit", "git"),
    _rule(r"Bot|Robot", "robot"),
    _rule(r"Brain|Intelligence|Smart", "ai"),
    _segment_rule(("AI",), "ai"),
    _rule(r"Chip|Processor|CPU", "chip"),
    _rule(r"Api(?![a-z])|Webhook", "api"),
    # media
    _rule(r"Image|Photo|Picture", "image"),
    _rule(r"Video|Movie|Film", "video"),
    _rule(r"Audio|Sound", "audio"),
    _rule(r"Music|Song", "music"),
    _rule(r"Play(?!ground)", "play"),
    _rule(r"Pause", "pause"),
    _rule(r"Stop", "stop"),
    _rule(r"Record", "record"),
    _rule(r"Volume", "volume"),
    _rule(r"Mute|Silent", "mute"),
    # containers
    _rule(r"Box", "box"),
    _rule(r"Panel", "panel"),
    _rule(r"Window", "window"),
    _segment_rule(("Tab",), "tab"),
    _rule(r"Card", "card"),
    _rule(r"List", "list"),
    _rule(r"Grid|Gallery", "grid"),
    _rule(r"Table", "table"),
    _rule(r"Tree", "tree", "plant"),
    _rule(r"Chart|Graph|Analytics", "chart", "data"),
    # style modifiers
    _rule(r"Off$|Dismiss|Prohibited", "strikethrough"),
    _rule(r"Badge|Count", "badge"),
    _rule(r"Dashed|Dash", "dashed"),
    _rule(r"Dotted|Dots", "dotted"),
)

# Variant suffixes carry style tags of their own.
VARIANT_TAGS: Mapping[str, Tuple[str, ...]] = {"Filled": ("filled",), "Regular": ("outline",)}


def tags_for_name(name: str) -> List[int]:
    """Return the sorted tag indices that the rule table assigns to ``name``."""

    base, variant = parse_icon_name(name)
    found: Set[int] = set()
    for rule in TAG_RULES:
        if rule.matches(base):
            found.update(_TAG_POSITIONS[tag] for tag in rule.tags)
    found.update(_TAG_POSITIONS[tag] for tag in VARIANT_TAGS.get(variant, ()))
    return sorted(found)


class VisualTagIndex:
    """Immutable mapping of base names to indices into a tag dictionary."""

    def __init__(self, tags: Sequence[str], icons: Mapping[str, Iterable[int]]) -> None:
        self._tags: Tuple[str, ...] = tuple(tags)
        self._positions: Dict[str, int] = {tag: i for i, tag in enumerate(self._tags)}
        by_base: Dict[str, Tuple[int, ...]] = {}
        by_tag: Dict[int, List[str]] = {}
        invalid = 0
        for base, indices in icons.items():
            valid: Set[int] = set()
            for idx in indices:
                if isinstance(idx, int) and not isinstance(idx, bool) and 0 <= idx < len(self._tags):
                    valid.add(idx)
                else:
                    invalid += 1
            if not valid:
                continue
            ordered = tuple(sorted(valid))
            by_base[str(base)] = ordered
            for idx in ordered:
                by_tag.setdefault(idx, []).append(str(base))
        if invalid:
            logger.warning("Visual-Tag-Index: %s ungueltige Tag-Indizes ignoriert", invalid)
        self._by_base = by_base
        self._by_tag: Dict[int, Tuple[str, ...]] = {
            idx: tuple(sorted(bases)) for idx, bases in by_tag.items()
        }

    def __len__(self) -> int:
        return len(self._by_base)

    def __contains__(self, base_name: object) -> bool:
        return base_name in self._by_base

    @property
    def tags(self) -> Tuple[str, ...]:
        return self._tags

    @property
    def base_names(self) -> List[str]:
        return list(self._by_base)

    def tag_index(self, tag: str) -> Optional[int]:
        return self._positions.get(tag)

    def tags_for(self, base_name: str) -> Tuple[int, ...]:
        return self._by_base.get(base_name, ())

    def tag_names(self, base_name: str) -> List[str]:
        return [self._tags[i] for i in self.tags_for(base_name)]

    def bases_with_tag(self, index: int) -> Tuple[str, ...]:
        return self._by_tag.get(index, ())

    def find_by_tag(self, tag: str) -> List[str]:
        idx = self.tag_index(tag)
        if idx is None:
            return []
        return list(self.bases_with_tag(idx))

    def to_dict(self) -> Dict[str, object]:
        return {
            "tags": list(self._tags),
            "icons": {base: list(self._by_base[base]) for base in sorted(self._by_base)},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "VisualTagIndex":
        tags = data.get("tags")
        icons = data.get("icons")
        if not isinstance(tags, list) or not isinstance(icons, dict):
            raise ValueError("visual tag data needs a 'tags' list and an 'icons' mapping")
        cleaned = {
            str(base): [i for i in indices if isinstance(i, int)]
            for base, indices in icons.items()
            if isinstance(indices, list)
        }
        return cls([str(t) for t in tags], cleaned)


def build_visual_tag_index(names: Iterable[str], tags: Sequence[str] = TAG_DICTIONARY) -> VisualTagIndex:
    """Apply the rule table to every icon name, merging the variants per base name."""

    if tuple(tags) != TAG_DICTIONARY:
        raise ValueError("rules are defined against TAG_DICTIONARY")
    merged: Dict[str, Set[int]] = {}
    for name in names:
        base, _ = parse_icon_name(name)
        indices = tags_for_name(name)
        if indices:
            merged.setdefault(base, set()).update(indices)
    return VisualTagIndex(tags, {base: sorted(idx) for base, idx in merged.items()})


def save_visual_tags(index: VisualTagIndex, path: str | Path) -> None:
    """Persist ``index`` as JSON at ``path``."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(index.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")


def load_visual_tags(path: str | Path, known_bases: Optional[Iterable[str]] = None) -> VisualTagIndex:
    """Load a generated index; base names unknown to the catalog are dropped."""

    index = VisualTagIndex.from_dict(read_json(Path(path)))
    if known_bases is None:
        return index
    known = set(known_bases)
    stale = [base for base in index.base_names if base not in known]
    if not stale:
        return index
    logger.warning(
        "Visual-Tag-Index %s: %s Basisnamen ohne Katalogeintrag werden ignoriert (z.B. %s)",
        path,
        len(stale),
        ", ".join(stale[:3]),
    )
    data = index.to_dict()
    icons = data["icons"]
    assert isinstance(icons, dict)
    for base in stale:
        icons.pop(base, None)
    return VisualTagIndex.from_dict(data)


def write_visual_tags(names: Iterable[str], output: str | Path) -> VisualTagIndex:
    """Build the index for ``names`` and save it at ``output``."""

    index = build_visual_tag_index(names)
    save_visual_tags(index, output)
    logger.info(" ✓ Visual-Tag-Index geschrieben: %s (%s Basisnamen).", output, len(index))
    return index
