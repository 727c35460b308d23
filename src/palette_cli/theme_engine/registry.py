"""Theme registry for built-in and custom themes.

This module maps theme ids to source text and resolves one level of
inheritance. Built-in themes ship as YAML files in ``theme_presets`` and
carry static metadata; custom themes are registered from text, files or
directories and keep their full source.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple, Union

from .errors import MissingMetaError, ThemeIOError, UnknownPresetError
from .manifest import PaletteManifest
from .merge import merge_manifests
from .palette import Palette

logger = logging.getLogger(__name__)

PRESETS_DIR = Path(__file__).parent.parent / "theme_presets"

# Checked in this order when looking for a sibling parent file.
THEME_FILE_SUFFIXES = (".yaml", ".yml", ".json")


@dataclass(frozen=True)
class ThemeInfo:
    """Display metadata for a theme, available without resolving it."""
    id: str
    name: str
    style: str
    builtin: bool = False


# (id, display name, style); sources live in theme_presets/<id>.yaml
_BUILTIN_THEMES: Tuple[Tuple[str, str, str], ...] = (
    ("catppuccin", "Catppuccin Mocha", "mocha"),
    ("catppuccin_frappe", "Catppuccin Frappe", "frappe"),
    ("catppuccin_latte", "Catppuccin Latte", "latte"),
    ("catppuccin_macchiato", "Catppuccin Macchiato", "macchiato"),
    ("dracula", "Dracula", "dark"),
    ("gruvbox_dark", "Gruvbox Dark", "dark"),
    ("gruvbox_light", "Gruvbox Light", "light"),
    ("nord", "Nord", "dark"),
    ("one_dark", "One Dark", "dark"),
    ("one_light", "One Light", "light"),
    ("rose_pine", "Rose Pine", "dark"),
    ("rose_pine_dawn", "Rose Pine Dawn", "dawn"),
    ("rose_pine_moon", "Rose Pine Moon", "moon"),
    ("solarized_dark", "Solarized Dark", "dark"),
    ("solarized_light", "Solarized Light", "light"),
    ("tokyonight", "TokyoNight (Night)", "night"),
    ("tokyonight_day", "TokyoNight Day", "day"),
    ("tokyonight_moon", "TokyoNight Moon", "moon"),
    ("tokyonight_storm", "TokyoNight Storm", "storm"),
)


def preset_ids() -> List[str]:
    """Ids of all built-in presets, in declaration order."""
    return [theme_id for theme_id, _, _ in _BUILTIN_THEMES]


@lru_cache(maxsize=None)
def preset_source(preset_id: str) -> Optional[str]:
    """Embedded source text for a built-in preset, or ``None`` if unknown."""
    if preset_id not in preset_ids():
        return None
    return read_theme_file(PRESETS_DIR / f"{preset_id}.yaml")


def read_theme_file(path: Union[str, Path]) -> str:
    """Read a theme file, attributing failures to its path."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ThemeIOError(path, e) from e


def resolve_with_inheritance(source: str,
                             resolve_parent: Callable[[str], PaletteManifest]) -> Palette:
    """Parse ``source``, merge its parent (one hop) and resolve to a palette."""
    manifest = PaletteManifest.from_text(source)
    parent_id = manifest.inherits_from()
    if parent_id is not None:
        parent = resolve_parent(parent_id)
        if parent.inherits_from() is not None:
            logger.debug(
                f"Ignoring grandparent '{parent.inherits_from()}' of '{parent_id}'; "
                f"inheritance resolves one level only"
            )
        manifest = merge_manifests(manifest, parent)
    return Palette.from_manifest(manifest)


def load_preset(preset_id: str) -> Palette:
    """Load a built-in preset; parents are looked up among built-ins only."""
    source = preset_source(preset_id)
    if source is None:
        raise UnknownPresetError(preset_id)
    return resolve_with_inheritance(source, _builtin_manifest)


def _builtin_manifest(preset_id: str) -> PaletteManifest:
    source = preset_source(preset_id)
    if source is None:
        raise UnknownPresetError(preset_id)
    return PaletteManifest.from_text(source)


def _sibling_theme_file(child_path: Path, parent_id: str) -> Optional[Path]:
    for suffix in THEME_FILE_SUFFIXES:
        candidate = child_path.parent / f"{parent_id}{suffix}"
        if candidate.is_file():
            return candidate
    return None


def load_preset_file(path: Union[str, Path]) -> Palette:
    """Load a theme file without a registry.

    A parent is resolved from a sibling file named after the parent id in the
    same directory, falling back to the built-in presets.
    """
    path = Path(path)
    source = read_theme_file(path)

    def resolve_parent(parent_id: str) -> PaletteManifest:
        sibling = _sibling_theme_file(path, parent_id)
        if sibling is not None:
            logger.debug(f"Resolved parent '{parent_id}' from {sibling}")
            return PaletteManifest.from_text(read_theme_file(sibling))
        return _builtin_manifest(parent_id)

    return resolve_with_inheritance(source, resolve_parent)


def extract_theme_info(source: str) -> ThemeInfo:
    """Read id, name and style from a custom theme's ``meta`` section."""
    manifest = PaletteManifest.from_text(source)
    if manifest.meta is None:
        raise MissingMetaError()
    return ThemeInfo(
        id=manifest.meta.preset_id,
        name=manifest.meta.name,
        style=manifest.meta.style,
    )


@dataclass
class _Entry:
    info: ThemeInfo
    source: Optional[str] = None    # None for built-ins


class ThemeRegistry:
    """Unified theme registry combining built-in presets with custom themes.

    Entries keep insertion order. Registering a custom theme whose id is
    already present replaces that entry in place. The registry is not safe
    for concurrent mutation; callers sharing one across threads must
    serialize writes themselves.
    """

    def __init__(self, include_builtins: bool = True):
        """Initialize the registry.

        Args:
            include_builtins: Pre-populate with every built-in preset
        """
        self._entries: List[_Entry] = []
        if include_builtins:
            for theme_id, name, style in _BUILTIN_THEMES:
                self._entries.append(_Entry(ThemeInfo(theme_id, name, style, builtin=True)))

    def __len__(self) -> int:
        return len(self._entries)

    def list_themes(self) -> List[ThemeInfo]:
        """All registered themes in insertion order."""
        return [entry.info for entry in self._entries]

    def by_style(self, style: str) -> Iterator[ThemeInfo]:
        return (entry.info for entry in self._entries if entry.info.style == style)

    def theme_exists(self, theme_id: str) -> bool:
        return any(entry.info.id == theme_id for entry in self._entries)

    def get_info(self, theme_id: str) -> ThemeInfo:
        return self._find_entry(theme_id).info

    def load(self, theme_id: str) -> Palette:
        """Load a palette by id, resolving inheritance within the registry.

        Raises:
            UnknownPresetError: If the theme or its parent is not registered
        """
        source = self._source_for(theme_id)
        logger.debug(f"Loading theme '{theme_id}'")
        return resolve_with_inheritance(source, self._resolve_manifest)

    def add_custom(self, source: str) -> ThemeInfo:
        """Register a custom theme from source text.

        Raises:
            MissingMetaError: If the theme has no ``meta`` section
        """
        info = extract_theme_info(source)
        entry = _Entry(info, source)

        for index, existing in enumerate(self._entries):
            if existing.info.id == info.id:
                self._entries[index] = entry
                logger.debug(f"Replaced theme '{info.id}' at position {index}")
                break
        else:
            self._entries.append(entry)
            logger.debug(f"Registered custom theme '{info.id}'")

        return info

    def add_file(self, path: Union[str, Path]) -> ThemeInfo:
        """Register a custom theme from a file on disk."""
        return self.add_custom(read_theme_file(path))

    def add_directory(self, directory: Union[str, Path]) -> List[ThemeInfo]:
        """Register every theme file in a directory (non-recursive).

        Files without a theme extension are skipped. Any read or parse
        failure aborts the whole scan.
        """
        directory = Path(directory)
        try:
            paths = sorted(directory.iterdir())
        except OSError as e:
            raise ThemeIOError(directory, e) from e

        added = []
        for path in paths:
            if path.suffix.lower() not in THEME_FILE_SUFFIXES or not path.is_file():
                logger.debug(f"Skipping non-theme entry: {path}")
                continue
            added.append(self.add_file(path))
        return added

    def _find_entry(self, theme_id: str) -> _Entry:
        # Most recent registration wins
        for entry in reversed(self._entries):
            if entry.info.id == theme_id:
                return entry
        raise UnknownPresetError(theme_id)

    def _source_for(self, theme_id: str) -> str:
        entry = self._find_entry(theme_id)
        if entry.source is not None:
            return entry.source
        source = preset_source(theme_id)
        if source is None:
            raise UnknownPresetError(theme_id)
        return source

    def _resolve_manifest(self, theme_id: str) -> PaletteManifest:
        logger.debug(f"Resolving parent theme '{theme_id}'")
        return PaletteManifest.from_text(self._source_for(theme_id))
