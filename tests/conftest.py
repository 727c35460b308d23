"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def theme_source(preset_id, base, inherits=None, style="dark", **sections):
    """Build YAML theme source text with a meta section.

    ``base`` and each extra section are dicts of slot name to hex string.
    """
    lines = [
        "meta:",
        f"  name: \"{preset_id.replace('_', ' ').title()}\"",
        f"  preset_id: {preset_id}",
        "  schema_version: \"1\"",
        f"  style: {style}",
        "  kind: custom",
    ]
    if inherits:
        lines.append(f"  inherits: {inherits}")

    for name, slots in [("base", base)] + list(sections.items()):
        lines.append(f"{name}:")
        for slot, value in slots.items():
            lines.append(f"  {slot}: \"{value}\"")
    return "\n".join(lines) + "\n"


@pytest.fixture
def make_theme_source():
    """Factory for YAML theme source text."""
    return theme_source


@pytest.fixture
def write_theme(tmp_path):
    """Write a theme source to ``tmp_path/<filename>`` and return the path."""
    def _write(filename, text, directory=None):
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / filename
        path.write_text(text, encoding="utf-8")
        return path
    return _write
