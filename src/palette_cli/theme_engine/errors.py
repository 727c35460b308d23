"""Exception types raised while loading and resolving themes.

Every error carries the context needed to report it to the user (file path,
section, slot, offending value or preset id) rather than a generic message.
"""

from pathlib import Path
from typing import Optional, Union


class PaletteError(Exception):
    """Base class for all theme loading and resolution failures."""


class ManifestParseError(PaletteError, ValueError):
    """Theme source text could not be parsed into a manifest."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"failed to parse manifest: {message}")


class ThemeIOError(PaletteError):
    """A theme file or directory could not be read."""

    def __init__(self, path: Union[str, Path], cause: OSError):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"failed to read {self.path}: {cause}")


class MissingBaseError(PaletteError):
    """Manifest has no [base] section."""

    def __init__(self):
        super().__init__("manifest missing required [base] section")


class MissingMetaError(PaletteError):
    """A custom theme was registered without a [meta] section."""

    def __init__(self):
        super().__init__("manifest missing required [meta] section")


class InvalidHexError(PaletteError, ValueError):
    """A color value is not a valid ``#RRGGBB`` string.

    ``section`` and ``field`` are ``None`` when the error comes straight from
    :meth:`Color.parse_hex`; palette resolution re-raises with both filled in.
    """

    def __init__(self, value: str, section: Optional[str] = None, field: Optional[str] = None):
        self.value = value
        self.section = section
        self.field = field
        if section is None or field is None:
            message = f"invalid hex color: {value}"
        else:
            message = f"invalid hex `{value}` in [{section}].{field}"
        super().__init__(message)


class UnknownPresetError(PaletteError):
    """No theme is registered under the requested id."""

    def __init__(self, preset_id: str):
        self.preset_id = preset_id
        super().__init__(f"unknown preset: {preset_id}")
