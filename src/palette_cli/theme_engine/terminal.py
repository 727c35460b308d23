"""Rich adapters for resolved palettes.

Converts palette colors into ``rich`` colors, a per-group mapping of
terminal-native colors, a ``rich.theme.Theme`` whose style names follow the
``<section>.<slot>`` pattern, and a ``TerminalTheme`` for console export.
"""

from typing import Dict, List, Optional, Tuple

from rich.color import Color as RichColor
from rich.style import Style
from rich.terminal_theme import TerminalTheme
from rich.theme import Theme

from .color import Color
from .palette import Palette
from .schema import COLOR_GROUPS

_ANSI_NAMES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")

# Used for any ANSI slot or base color a palette leaves unset.
_FALLBACK_BACKGROUND = (0, 0, 0)
_FALLBACK_FOREGROUND = (255, 255, 255)


def to_rich_color(color: Color) -> RichColor:
    """Convert a palette color to a truecolor ``rich.color.Color``."""
    return RichColor.from_rgb(color.r, color.g, color.b)


def _optional_rich(color: Optional[Color]) -> Optional[RichColor]:
    return to_rich_color(color) if color is not None else None


def to_terminal_theme(palette: Palette) -> Dict[str, Dict[str, Optional[RichColor]]]:
    """Convert every slot of every group to a rich color.

    Returns:
        ``{section: {slot: rich Color or None}}`` with all slots present,
        plus ``platform.<name>`` entries for platform overrides
    """
    theme = {}
    for spec in COLOR_GROUPS:
        group = getattr(palette, spec.attribute)
        theme[spec.section] = {slot: _optional_rich(group.get(slot)) for slot in spec.slots}

    for name, override in palette.platform.items():
        theme[f"platform.{name}"] = {
            "background": _optional_rich(override.background),
            "foreground": _optional_rich(override.foreground),
        }
    return theme


def rich_styles(palette: Palette) -> Dict[str, Style]:
    """Map ``<section>.<slot>`` names to foreground styles for populated slots."""
    styles = {}
    for spec in COLOR_GROUPS:
        for slot, color in getattr(palette, spec.attribute).populated_slots():
            styles[f"{spec.section}.{slot}"] = Style(color=to_rich_color(color))

    for name, override in palette.platform.items():
        if override.background is not None:
            styles[f"platform.{name}.background"] = Style(bgcolor=to_rich_color(override.background))
        if override.foreground is not None:
            styles[f"platform.{name}.foreground"] = Style(color=to_rich_color(override.foreground))
    return styles


def to_rich_theme(palette: Palette) -> Theme:
    """Build a ``rich.theme.Theme`` for ``Console(theme=...)``."""
    return Theme(rich_styles(palette), inherit=True)


def _rgb_or(color: Optional[Color], fallback: Tuple[int, int, int]) -> Tuple[int, int, int]:
    return color.rgb if color is not None else fallback


def to_console_export_theme(palette: Palette, platform: Optional[str] = None) -> TerminalTheme:
    """Build a rich ``TerminalTheme`` for ``Console.export_svg``/``export_html``.

    Args:
        palette: Resolved palette
        platform: Optional platform name whose background/foreground
            overrides take precedence over the base colors

    Returns:
        TerminalTheme with unset ANSI colors filled from fallbacks; an unset
        bright color reuses its normal counterpart
    """
    background = palette.base.background
    foreground = palette.base.foreground

    override = palette.platform.get(platform) if platform else None
    if override is not None:
        background = override.background or background
        foreground = override.foreground or foreground

    ansi = palette.terminal_ansi
    normal: List[Tuple[int, int, int]] = []
    bright: List[Tuple[int, int, int]] = []
    for name in _ANSI_NAMES:
        fallback = _FALLBACK_BACKGROUND if name == "black" else _FALLBACK_FOREGROUND
        normal.append(_rgb_or(ansi.get(name), fallback))
        bright.append(_rgb_or(ansi.get(f"bright_{name}"), normal[-1]))

    return TerminalTheme(
        _rgb_or(background, _FALLBACK_BACKGROUND),
        _rgb_or(foreground, _FALLBACK_FOREGROUND),
        normal,
        bright,
    )
