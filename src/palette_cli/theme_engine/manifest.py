"""Unresolved theme manifests.

A manifest is the section-oriented view of theme source text: each section
maps slot names to raw hex strings, nothing is converted to colors yet.
Resolve inheritance with :func:`merge_manifests` and then convert with
:meth:`Palette.from_manifest`.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer, field_validator

from .errors import ManifestParseError, MissingBaseError

ManifestSection = Mapping[str, str]
PlatformSections = Mapping[str, ManifestSection]


def _sorted_section(section: Mapping[str, str]) -> ManifestSection:
    return MappingProxyType({key: section[key] for key in sorted(section)})


class ManifestMeta(BaseModel):
    """The ``meta`` section of a theme source."""

    model_config = ConfigDict(frozen=True)

    name: str
    preset_id: str
    schema_version: str
    style: str
    kind: str
    inherits: Optional[str] = None
    upstream_repo: Optional[str] = None


class PaletteManifest(BaseModel):
    """Parsed but unresolved theme definition.

    Sections are read-only mappings with keys in sorted order.
    """

    model_config = ConfigDict(frozen=True)

    meta: Optional[ManifestMeta] = None
    base: ManifestSection
    semantic: ManifestSection = Field(default_factory=dict, validate_default=True)
    diff: ManifestSection = Field(default_factory=dict, validate_default=True)
    surface: ManifestSection = Field(default_factory=dict, validate_default=True)
    typography: ManifestSection = Field(default_factory=dict, validate_default=True)
    syntax: ManifestSection = Field(default_factory=dict, validate_default=True)
    editor: ManifestSection = Field(default_factory=dict, validate_default=True)
    terminal: ManifestSection = Field(default_factory=dict, validate_default=True)
    platform: PlatformSections = Field(default_factory=dict, validate_default=True)

    @field_validator(
        'semantic', 'diff', 'surface', 'typography', 'syntax', 'editor', 'terminal', 'platform',
        mode='before',
    )
    @classmethod
    def empty_when_null(cls, v):
        """A null optional section is the same as an absent one."""
        return {} if v is None else v

    @field_validator(
        'base', 'semantic', 'diff', 'surface', 'typography', 'syntax', 'editor', 'terminal',
    )
    @classmethod
    def order_by_key(cls, v):
        return _sorted_section(v)

    @field_validator('platform')
    @classmethod
    def order_platforms(cls, v):
        return MappingProxyType({name: _sorted_section(v[name]) for name in sorted(v)})

    @field_serializer(
        'base', 'semantic', 'diff', 'surface', 'typography', 'syntax', 'editor', 'terminal',
    )
    def serialize_section(self, v):
        return dict(v)

    @field_serializer('platform')
    def serialize_platforms(self, v):
        return {name: dict(section) for name, section in v.items()}

    @classmethod
    def from_mapping(cls, data: Any) -> 'PaletteManifest':
        """Build a manifest from an already-decoded document.

        Raises:
            MissingBaseError: If the ``base`` section is absent
            ManifestParseError: For any other structural problem
        """
        if not isinstance(data, dict):
            raise ManifestParseError(
                f"expected a mapping at the top level, got {type(data).__name__}"
            )
        if data.get('base') is None:
            raise MissingBaseError()
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ManifestParseError(str(e)) from e

    @classmethod
    def from_text(cls, text: str) -> 'PaletteManifest':
        """Parse YAML (or JSON) theme source text into a manifest."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ManifestParseError(str(e)) from e
        return cls.from_mapping({} if data is None else data)

    def section(self, name: str) -> ManifestSection:
        """Return a color section by its source name."""
        return getattr(self, name)

    def inherits_from(self) -> Optional[str]:
        """The parent preset id if this manifest uses inheritance."""
        if self.meta is None:
            return None
        return self.meta.inherits


def parse_manifest(text: str) -> PaletteManifest:
    return PaletteManifest.from_text(text)
