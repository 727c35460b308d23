"""Palette export to CSS custom properties and JSON snapshots."""

from typing import Any, Dict, Optional

from .palette import Palette
from .schema import COLOR_GROUPS

# Short CSS variable names per (section, slot). Slots missing here fall back
# to "<section>-<slot-with-hyphens>".
CSS_NAMES: Dict[tuple, str] = {
    # base and semantic carry no prefix
    ("base", "background"): "bg",
    ("base", "background_dark"): "bg-dark",
    ("base", "background_highlight"): "bg-hi",
    ("base", "foreground"): "fg",
    ("base", "foreground_dark"): "fg-dark",
    ("base", "border"): "border",
    ("base", "border_highlight"): "border-hi",
    ("semantic", "success"): "success",
    ("semantic", "warning"): "warning",
    ("semantic", "error"): "error",
    ("semantic", "info"): "info",
    ("semantic", "hint"): "hint",

    ("surface", "menu"): "ui-menu",
    ("surface", "sidebar"): "ui-sidebar",
    ("surface", "statusline"): "ui-statusline",
    ("surface", "float"): "ui-float",
    ("surface", "popup"): "ui-popup",
    ("surface", "overlay"): "ui-overlay",
    ("surface", "highlight"): "ui-hi",
    ("surface", "selection"): "ui-sel",
    ("surface", "focus"): "ui-focus",
    ("surface", "search"): "ui-search",

    ("typography", "comment"): "text-comment",
    ("typography", "gutter"): "text-gutter",
    ("typography", "line_number"): "text-line-num",
    ("typography", "selection_text"): "text-sel",
    ("typography", "link"): "text-link",
    ("typography", "title"): "text-title",

    ("syntax", "keywords"): "syn-keyword",
    ("syntax", "keywords_fn"): "syn-keyword-fn",
    ("syntax", "functions"): "syn-fn",
    ("syntax", "variables"): "syn-var",
    ("syntax", "variables_builtin"): "syn-var-builtin",
    ("syntax", "parameters"): "syn-param",
    ("syntax", "properties"): "syn-prop",
    ("syntax", "types"): "syn-type",
    ("syntax", "types_builtin"): "syn-type-builtin",
    ("syntax", "constants"): "syn-const",
    ("syntax", "numbers"): "syn-number",
    ("syntax", "booleans"): "syn-bool",
    ("syntax", "strings"): "syn-string",
    ("syntax", "strings_doc"): "syn-string-doc",
    ("syntax", "strings_escape"): "syn-string-esc",
    ("syntax", "strings_regex"): "syn-string-re",
    ("syntax", "operators"): "syn-op",
    ("syntax", "punctuation"): "syn-punct",
    ("syntax", "punctuation_bracket"): "syn-punct-bracket",
    ("syntax", "annotations"): "syn-annotation",
    ("syntax", "attributes"): "syn-attr",
    ("syntax", "constructor"): "syn-ctor",
    ("syntax", "tag"): "syn-tag",
    ("syntax", "tag_delimiter"): "syn-tag-delim",
    ("syntax", "tag_attribute"): "syn-tag-attr",
    ("syntax", "comments"): "syn-comment",

    ("editor", "cursor"): "ed-cursor",
    ("editor", "cursor_text"): "ed-cursor-text",
    ("editor", "match_paren"): "ed-match-paren",
    ("editor", "selection_bg"): "ed-sel-bg",
    ("editor", "selection_fg"): "ed-sel-fg",
    ("editor", "inlay_hint_bg"): "ed-hint-bg",
    ("editor", "inlay_hint_fg"): "ed-hint-fg",
    ("editor", "search_bg"): "ed-search-bg",
    ("editor", "search_fg"): "ed-search-fg",
    ("editor", "diagnostic_error"): "ed-diag-error",
    ("editor", "diagnostic_warn"): "ed-diag-warn",
    ("editor", "diagnostic_info"): "ed-diag-info",
    ("editor", "diagnostic_hint"): "ed-diag-hint",
    ("editor", "diagnostic_underline_error"): "ed-diag-ul-error",
    ("editor", "diagnostic_underline_warn"): "ed-diag-ul-warn",
    ("editor", "diagnostic_underline_info"): "ed-diag-ul-info",
    ("editor", "diagnostic_underline_hint"): "ed-diag-ul-hint",

    ("diff", "added"): "diff-added",
    ("diff", "added_bg"): "diff-added-bg",
    ("diff", "added_fg"): "diff-added-fg",
    ("diff", "modified"): "diff-modified",
    ("diff", "modified_bg"): "diff-modified-bg",
    ("diff", "modified_fg"): "diff-modified-fg",
    ("diff", "removed"): "diff-removed",
    ("diff", "removed_bg"): "diff-removed-bg",
    ("diff", "removed_fg"): "diff-removed-fg",
    ("diff", "text_bg"): "diff-text-bg",
    ("diff", "ignored"): "diff-ignored",

    ("terminal", "black"): "ansi-black",
    ("terminal", "red"): "ansi-red",
    ("terminal", "green"): "ansi-green",
    ("terminal", "yellow"): "ansi-yellow",
    ("terminal", "blue"): "ansi-blue",
    ("terminal", "magenta"): "ansi-magenta",
    ("terminal", "cyan"): "ansi-cyan",
    ("terminal", "white"): "ansi-white",
    ("terminal", "bright_black"): "ansi-bright-black",
    ("terminal", "bright_red"): "ansi-bright-red",
    ("terminal", "bright_green"): "ansi-bright-green",
    ("terminal", "bright_yellow"): "ansi-bright-yellow",
    ("terminal", "bright_blue"): "ansi-bright-blue",
    ("terminal", "bright_magenta"): "ansi-bright-magenta",
    ("terminal", "bright_cyan"): "ansi-bright-cyan",
    ("terminal", "bright_white"): "ansi-bright-white",
}


def _check_css_names() -> None:
    known = {(spec.section, slot) for spec in COLOR_GROUPS for slot in spec.slots}
    unknown = sorted(set(CSS_NAMES) - known)
    if unknown:
        raise RuntimeError(f"CSS aliases reference unknown slots: {unknown}")


_check_css_names()


def css_name(section: str, slot: str) -> str:
    """CSS variable name (without leading dashes) for a slot."""
    alias = CSS_NAMES.get((section, slot))
    if alias is not None:
        return alias
    return f"{section}-{slot.replace('_', '-')}"


def to_css(palette: Palette, prefix: Optional[str] = None, wrap_selector: Optional[str] = None) -> str:
    """Render populated slots as CSS custom property declarations.

    Args:
        palette: Resolved palette
        prefix: Optional prefix, giving ``--<prefix>-<name>``
        wrap_selector: Optional selector (e.g. ``:root``) to wrap the block in

    Returns:
        One ``  --name: #RRGGBB;`` line per populated slot, in schema order
    """
    lines = []
    for spec in COLOR_GROUPS:
        for slot, color in getattr(palette, spec.attribute).populated_slots():
            name = css_name(spec.section, slot)
            if prefix:
                name = f"{prefix}-{name}"
            lines.append(f"  --{name}: {color.to_hex()};\n")

    body = "".join(lines)
    if wrap_selector:
        return f"{wrap_selector} {{\n{body}}}\n"
    return body


def to_dict(palette: Palette) -> Dict[str, Any]:
    """JSON-compatible mapping mirroring the palette's shape.

    Absent slots are ``None`` and colors are ``#RRGGBB`` strings.
    """
    return palette.model_dump(mode="json")


def to_json(palette: Palette, indent: int = 2) -> str:
    """Serialize a palette to a pretty-printed JSON string."""
    return palette.model_dump_json(indent=indent)
