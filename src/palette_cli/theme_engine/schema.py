"""Theme schema definitions for the palette theming system.

The slot vocabulary lives in exactly one place, ``COLOR_GROUPS``. The typed
color-group models and the terminal export are derived from it, and the CSS
alias table is checked against it at import.
"""

from typing import Dict, Iterator, NamedTuple, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, create_model

from .color import Color


class ColorGroupSpec(NamedTuple):
    """One fixed category of color slots."""
    attribute: str      # attribute name on Palette
    section: str        # section name in theme source and error context
    model_name: str
    slots: Tuple[str, ...]
    description: str


COLOR_GROUPS: Tuple[ColorGroupSpec, ...] = (
    ColorGroupSpec(
        "base", "base", "BaseColors",
        (
            "background",
            "background_dark",
            "background_highlight",
            "foreground",
            "foreground_dark",
            "border",
            "border_highlight",
        ),
        "Core background, foreground, and border colors.",
    ),
    ColorGroupSpec(
        "semantic", "semantic", "SemanticColors",
        ("success", "warning", "error", "info", "hint"),
        "Status colors: success, warning, error, info, hint.",
    ),
    ColorGroupSpec(
        "diff", "diff", "DiffColors",
        (
            "added",
            "added_bg",
            "added_fg",
            "modified",
            "modified_bg",
            "modified_fg",
            "removed",
            "removed_bg",
            "removed_fg",
            "text_bg",
            "ignored",
        ),
        "Version-control diff highlighting.",
    ),
    ColorGroupSpec(
        "surface", "surface", "SurfaceColors",
        (
            "menu",
            "sidebar",
            "statusline",
            "float",
            "popup",
            "overlay",
            "highlight",
            "selection",
            "focus",
            "search",
        ),
        "UI surface colors: menus, sidebars, popups, overlays.",
    ),
    ColorGroupSpec(
        "typography", "typography", "TypographyColors",
        ("comment", "gutter", "line_number", "selection_text", "link", "title"),
        "Text chrome: comments, gutter, line numbers, links.",
    ),
    ColorGroupSpec(
        "syntax", "syntax", "SyntaxColors",
        (
            "keywords",
            "keywords_fn",
            "functions",
            "variables",
            "variables_builtin",
            "parameters",
            "properties",
            "types",
            "types_builtin",
            "constants",
            "numbers",
            "booleans",
            "strings",
            "strings_doc",
            "strings_escape",
            "strings_regex",
            "operators",
            "punctuation",
            "punctuation_bracket",
            "annotations",
            "attributes",
            "constructor",
            "tag",
            "tag_delimiter",
            "tag_attribute",
            "comments",
        ),
        "Syntax-highlighting token colors.",
    ),
    ColorGroupSpec(
        "editor", "editor", "EditorColors",
        (
            "cursor",
            "cursor_text",
            "match_paren",
            "selection_bg",
            "selection_fg",
            "inlay_hint_bg",
            "inlay_hint_fg",
            "search_bg",
            "search_fg",
            "diagnostic_error",
            "diagnostic_warn",
            "diagnostic_info",
            "diagnostic_hint",
            "diagnostic_underline_error",
            "diagnostic_underline_warn",
            "diagnostic_underline_info",
            "diagnostic_underline_hint",
        ),
        "Editor chrome: cursor, selections, diagnostics, inlay hints.",
    ),
    ColorGroupSpec(
        "terminal_ansi", "terminal", "TerminalAnsiColors",
        (
            "black",
            "red",
            "green",
            "yellow",
            "blue",
            "magenta",
            "cyan",
            "white",
            "bright_black",
            "bright_red",
            "bright_green",
            "bright_yellow",
            "bright_blue",
            "bright_magenta",
            "bright_cyan",
            "bright_white",
        ),
        "Standard 16-color ANSI terminal palette.",
    ),
)

SECTION_NAMES: Tuple[str, ...] = tuple(spec.section for spec in COLOR_GROUPS)

# Platform overrides only understand these keys; anything else is ignored.
PLATFORM_SLOTS: Tuple[str, ...] = ("background", "foreground")


def group_for_section(section: str) -> ColorGroupSpec:
    """Look up a group spec by its source section name."""
    for spec in COLOR_GROUPS:
        if spec.section == section:
            return spec
    raise KeyError(section)


class ColorGroup(BaseModel):
    """Base for generated color-group models.

    Every slot is ``Optional[Color]``; ``None`` means the renderer should
    apply its own default.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def slot_names(cls) -> Tuple[str, ...]:
        return tuple(cls.model_fields)

    def populated_slots(self) -> Iterator[Tuple[str, Color]]:
        """Yield ``(slot, Color)`` for assigned slots, in declaration order."""
        for name in type(self).model_fields:
            color = getattr(self, name)
            if color is not None:
                yield name, color

    def get(self, slot: str) -> Optional[Color]:
        if slot not in type(self).model_fields:
            raise KeyError(slot)
        return getattr(self, slot)


def _build_group_model(spec: ColorGroupSpec) -> Type[ColorGroup]:
    fields = {slot: (Optional[Color], None) for slot in spec.slots}
    model = create_model(spec.model_name, __base__=ColorGroup, __module__=__name__, **fields)
    model.__doc__ = spec.description
    return model


GROUP_MODELS: Dict[str, Type[ColorGroup]] = {
    spec.attribute: _build_group_model(spec) for spec in COLOR_GROUPS
}

BaseColors = GROUP_MODELS["base"]
SemanticColors = GROUP_MODELS["semantic"]
DiffColors = GROUP_MODELS["diff"]
SurfaceColors = GROUP_MODELS["surface"]
TypographyColors = GROUP_MODELS["typography"]
SyntaxColors = GROUP_MODELS["syntax"]
EditorColors = GROUP_MODELS["editor"]
TerminalAnsiColors = GROUP_MODELS["terminal_ansi"]
