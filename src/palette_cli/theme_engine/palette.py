"""Resolved, render-ready palettes.

This module turns a :class:`PaletteManifest` of raw hex strings into a
:class:`Palette` of typed ``Optional[Color]`` slots grouped by category.
Resolution is fail-fast: the first bad hex value aborts the whole palette
with an error naming the section, slot and value.
"""

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .color import Color
from .errors import InvalidHexError
from .manifest import ManifestSection, PaletteManifest, PlatformSections
from .schema import (
    COLOR_GROUPS,
    GROUP_MODELS,
    PLATFORM_SLOTS,
    BaseColors,
    ColorGroup,
    DiffColors,
    EditorColors,
    SemanticColors,
    SurfaceColors,
    SyntaxColors,
    TerminalAnsiColors,
    TypographyColors,
    group_for_section,
)


def resolve_color(section: ManifestSection, section_name: str, field: str) -> Optional[Color]:
    """Resolve one slot; absent keys are ``None``.

    Raises:
        InvalidHexError: With ``section`` and ``field`` attached
    """
    raw = section.get(field)
    if raw is None:
        return None
    try:
        return Color.parse_hex(raw)
    except InvalidHexError as e:
        raise InvalidHexError(e.value, section=section_name, field=field) from e


def resolve_group(model: Type[ColorGroup], section: ManifestSection, section_name: str) -> ColorGroup:
    values = {
        slot: resolve_color(section, section_name, slot)
        for slot in model.slot_names()
    }
    return model(**values)


class PaletteMeta(BaseModel):
    """Theme identity: name, preset id and style tag (e.g. "dark")."""

    model_config = ConfigDict(frozen=True)

    name: str
    preset_id: str
    style: str


class PlatformOverride(BaseModel):
    """Background/foreground overrides for one platform target."""

    model_config = ConfigDict(frozen=True)

    background: Optional[Color] = None
    foreground: Optional[Color] = None


def resolve_platforms(sections: PlatformSections) -> Dict[str, PlatformOverride]:
    """Parse ``platform.<name>`` sections; keys other than bg/fg are ignored."""
    overrides = {}
    for name in sorted(sections):
        section_name = f"platform.{name}"
        values = {
            slot: resolve_color(sections[name], section_name, slot)
            for slot in PLATFORM_SLOTS
        }
        overrides[name] = PlatformOverride(**values)
    return overrides


class Palette(BaseModel):
    """Resolved color palette ready for rendering.

    Each group field holds ``Optional[Color]`` slots; absent slots mean the
    theme defers to the renderer's default. ``platform`` is a read-only
    mapping of platform name to override.
    """

    model_config = ConfigDict(frozen=True)

    meta: Optional[PaletteMeta] = None
    base: BaseColors = Field(default_factory=BaseColors)
    semantic: SemanticColors = Field(default_factory=SemanticColors)
    diff: DiffColors = Field(default_factory=DiffColors)
    surface: SurfaceColors = Field(default_factory=SurfaceColors)
    typography: TypographyColors = Field(default_factory=TypographyColors)
    syntax: SyntaxColors = Field(default_factory=SyntaxColors)
    editor: EditorColors = Field(default_factory=EditorColors)
    terminal_ansi: TerminalAnsiColors = Field(default_factory=TerminalAnsiColors)
    platform: Mapping[str, PlatformOverride] = Field(default_factory=dict, validate_default=True)

    @field_validator('platform')
    @classmethod
    def freeze_platforms(cls, v):
        return MappingProxyType(dict(v))

    @field_serializer('platform')
    def serialize_platforms(self, v):
        return dict(v)

    @classmethod
    def from_manifest(cls, manifest: PaletteManifest) -> 'Palette':
        """Build a palette from a manifest, resolving hex strings to colors.

        Raises:
            InvalidHexError: On the first slot whose value is not ``#RRGGBB``
        """
        meta = None
        if manifest.meta is not None:
            meta = PaletteMeta(
                name=manifest.meta.name,
                preset_id=manifest.meta.preset_id,
                style=manifest.meta.style,
            )

        groups = {
            spec.attribute: resolve_group(
                GROUP_MODELS[spec.attribute], manifest.section(spec.section), spec.section
            )
            for spec in COLOR_GROUPS
        }
        return cls(meta=meta, platform=resolve_platforms(manifest.platform), **groups)

    @classmethod
    def default(cls) -> 'Palette':
        """Neutral dark palette with enough colors for legible rendering.

        Covers base, semantic, and the surface highlight/selection slots.
        Everything else is left to the renderer.
        """
        c = Color.parse_hex
        return cls(
            base=BaseColors(
                background=c("#1A1A2E"),
                background_dark=c("#131322"),
                background_highlight=c("#24243E"),
                foreground=c("#D0D0D0"),
                foreground_dark=c("#808090"),
                border=c("#3A3A4E"),
                border_highlight=c("#505068"),
            ),
            semantic=SemanticColors(
                success=c("#50C878"),
                warning=c("#E0B050"),
                error=c("#E05050"),
                info=c("#5090E0"),
                hint=c("#707088"),
            ),
            surface=SurfaceColors(
                highlight=c("#2A2A44"),
                selection=c("#303050"),
            ),
        )

    def group(self, section: str) -> ColorGroup:
        """Return a color group by its source section name (``terminal`` too)."""
        return getattr(self, group_for_section(section).attribute)

    def populated_slots(self, section: str) -> Iterator[Tuple[str, Color]]:
        return self.group(section).populated_slots()

    def to_css(self, prefix: Optional[str] = None) -> str:
        from .export import to_css
        return to_css(self, prefix)

    def to_json(self) -> str:
        from .export import to_json
        return to_json(self)


def _check_palette_fields() -> None:
    """Palette group fields must mirror the slot schema exactly."""
    expected = [spec.attribute for spec in COLOR_GROUPS]
    actual = [name for name in Palette.model_fields if name not in ('meta', 'platform')]
    if actual != expected:
        raise RuntimeError(f"Palette groups {actual} do not match schema {expected}")
    for name in expected:
        if Palette.model_fields[name].annotation is not GROUP_MODELS[name]:
            raise RuntimeError(f"Palette.{name} is not typed as its schema group model")


_check_palette_fields()
