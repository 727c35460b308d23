"""Palette CLI Theme Engine Package.

This package resolves declarative theme definitions into typed, render-ready
palettes: hex color codec and color science, manifest parsing, single-level
inheritance, WCAG contrast validation, a theme registry with built-in and
custom themes, and CSS/JSON/rich exporters.
"""

from .color import (
    Color,
    parse_hex,
    format_hex,
    relative_luminance,
    contrast_ratio,
    rgb_to_hsl,
    hsl_to_rgb,
    blend,
)
from .contrast import (
    ContrastLevel,
    ContrastViolation,
    CONTRAST_PAIRS,
    meets_level,
    validate_palette,
)
from .errors import (
    PaletteError,
    ManifestParseError,
    ThemeIOError,
    MissingBaseError,
    MissingMetaError,
    InvalidHexError,
    UnknownPresetError,
)
from .manifest import ManifestMeta, PaletteManifest, parse_manifest
from .merge import merge_manifests
from .palette import Palette, PaletteMeta, PlatformOverride
from .registry import (
    ThemeInfo,
    ThemeRegistry,
    preset_ids,
    load_preset,
    load_preset_file,
)
from .schema import (
    COLOR_GROUPS,
    SECTION_NAMES,
    BaseColors,
    SemanticColors,
    DiffColors,
    SurfaceColors,
    TypographyColors,
    SyntaxColors,
    EditorColors,
    TerminalAnsiColors,
)

__all__ = [
    # Color
    "Color",
    "parse_hex",
    "format_hex",
    "relative_luminance",
    "contrast_ratio",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "blend",

    # Contrast
    "ContrastLevel",
    "ContrastViolation",
    "CONTRAST_PAIRS",
    "meets_level",
    "validate_palette",

    # Errors
    "PaletteError",
    "ManifestParseError",
    "ThemeIOError",
    "MissingBaseError",
    "MissingMetaError",
    "InvalidHexError",
    "UnknownPresetError",

    # Manifest and palette
    "ManifestMeta",
    "PaletteManifest",
    "parse_manifest",
    "merge_manifests",
    "Palette",
    "PaletteMeta",
    "PlatformOverride",

    # Registry
    "ThemeInfo",
    "ThemeRegistry",
    "preset_ids",
    "load_preset",
    "load_preset_file",

    # Schema
    "COLOR_GROUPS",
    "SECTION_NAMES",
    "BaseColors",
    "SemanticColors",
    "DiffColors",
    "SurfaceColors",
    "TypographyColors",
    "SyntaxColors",
    "EditorColors",
    "TerminalAnsiColors",
]
