"""Palette CLI - theme palette resolution, validation and export."""

__version__ = "0.1.0"

from .theme_engine import (
    Color,
    ContrastLevel,
    Palette,
    ThemeRegistry,
)

__all__ = ["Color", "ContrastLevel", "Palette", "ThemeRegistry", "__version__"]
