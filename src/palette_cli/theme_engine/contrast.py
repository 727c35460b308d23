"""WCAG 2.1 contrast levels and palette validation.

``validate_palette`` walks a fixed table of semantically paired slots and
reports every evaluated pair that falls below the requested level. Pairs
with a missing side are skipped silently.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Optional

from .color import Color, contrast_ratio
from .palette import Palette


class ContrastLevel(str, Enum):
    """WCAG 2.1 conformance levels"""
    AA_NORMAL = "aa"
    AA_LARGE = "aa-large"
    AAA_NORMAL = "aaa"
    AAA_LARGE = "aaa-large"

    @property
    def threshold(self) -> float:
        """Minimum contrast ratio required for this level."""
        return _THRESHOLDS[self]

    def passes(self, ratio: float) -> bool:
        return ratio >= self.threshold

    @classmethod
    def parse(cls, text: str) -> 'ContrastLevel':
        """Parse ``aa``, ``aa-large``, ``aaa`` or ``aaa-large``."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise ValueError(f"unknown contrast level: {text}") from None


_THRESHOLDS = {
    ContrastLevel.AA_NORMAL: 4.5,
    ContrastLevel.AA_LARGE: 3.0,
    ContrastLevel.AAA_NORMAL: 7.0,
    ContrastLevel.AAA_LARGE: 4.5,
}


@dataclass(frozen=True)
class ContrastViolation:
    """A foreground/background pair that fails a contrast check."""
    foreground_label: str
    background_label: str
    foreground: Color
    background: Color
    ratio: float
    level: ContrastLevel


def meets_level(fg: Color, bg: Color, level: ContrastLevel) -> bool:
    """Whether ``fg`` over ``bg`` meets the given level."""
    return level.passes(contrast_ratio(fg, bg))


class ContrastPair(NamedTuple):
    fg_section: str
    fg_slot: str        # "*" pairs every populated slot of fg_section
    bg_section: str
    bg_slot: str


EACH = "*"

# Evaluation order is part of the output contract.
CONTRAST_PAIRS = (
    # Core readability
    ContrastPair("base", "foreground", "base", "background"),
    ContrastPair("base", "foreground_dark", "base", "background"),
    ContrastPair("base", "foreground", "base", "background_dark"),
    ContrastPair("base", "foreground", "base", "background_highlight"),
    ContrastPair("semantic", EACH, "base", "background"),
    # Editor
    ContrastPair("editor", "selection_fg", "editor", "selection_bg"),
    ContrastPair("editor", "inlay_hint_fg", "editor", "inlay_hint_bg"),
    ContrastPair("editor", "search_fg", "editor", "search_bg"),
    ContrastPair("editor", "cursor_text", "editor", "cursor"),
    # Diff
    ContrastPair("diff", "added_fg", "diff", "added_bg"),
    ContrastPair("diff", "modified_fg", "diff", "modified_bg"),
    ContrastPair("diff", "removed_fg", "diff", "removed_bg"),
    # Typography and syntax over the background
    ContrastPair("typography", "comment", "base", "background"),
    ContrastPair("typography", "line_number", "base", "background"),
    ContrastPair("syntax", EACH, "base", "background"),
)


def check_pair(fg_label: str, bg_label: str,
               fg: Optional[Color], bg: Optional[Color],
               level: ContrastLevel) -> Optional[ContrastViolation]:
    """Check one pair; ``None`` if either side is missing or the pair passes."""
    if fg is None or bg is None:
        return None
    ratio = contrast_ratio(fg, bg)
    if level.passes(ratio):
        return None
    return ContrastViolation(
        foreground_label=fg_label,
        background_label=bg_label,
        foreground=fg,
        background=bg,
        ratio=ratio,
        level=level,
    )


def validate_palette(palette: Palette, level: ContrastLevel) -> List[ContrastViolation]:
    """Check all semantically paired slots for contrast violations.

    Returns:
        Violations in table order; empty when every evaluated pair passes
    """
    violations = []

    for pair in CONTRAST_PAIRS:
        bg = palette.group(pair.bg_section).get(pair.bg_slot)
        bg_label = f"{pair.bg_section}.{pair.bg_slot}"

        if pair.fg_slot == EACH:
            candidates = list(palette.populated_slots(pair.fg_section))
        else:
            candidates = [(pair.fg_slot, palette.group(pair.fg_section).get(pair.fg_slot))]

        for name, fg in candidates:
            violation = check_pair(f"{pair.fg_section}.{name}", bg_label, fg, bg, level)
            if violation is not None:
                violations.append(violation)

    return violations
