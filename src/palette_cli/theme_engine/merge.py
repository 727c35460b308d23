"""Single-level theme inheritance.

``merge_manifests(variant, base)`` overlays a child manifest on its parent:
every key of the parent's sections is kept unless the child defines it.
Only one hop is resolved; if the parent itself declares ``inherits``, that
grandparent link is ignored.
"""

from .manifest import ManifestSection, PaletteManifest, PlatformSections
from .schema import SECTION_NAMES


def merge_sections(primary: ManifestSection, fallback: ManifestSection) -> ManifestSection:
    """Union of two sections, ``primary`` winning on key collision."""
    merged = dict(fallback)
    merged.update(primary)
    return merged


def merge_platform_sections(primary: PlatformSections,
                            fallback: PlatformSections) -> PlatformSections:
    """Merge platform sections per platform name, then per key."""
    merged = {name: dict(section) for name, section in primary.items()}
    for name, section in fallback.items():
        merged[name] = merge_sections(merged.get(name, {}), section)
    return merged


def merge_manifests(variant: PaletteManifest, base: PaletteManifest) -> PaletteManifest:
    """Resolve one level of inheritance.

    Args:
        variant: The child manifest; its meta is kept as the result's identity
        base: The parent manifest; its meta is discarded

    Returns:
        A new manifest with every section merged child-over-parent
    """
    data = {
        name: merge_sections(variant.section(name), base.section(name))
        for name in SECTION_NAMES
    }
    data['platform'] = merge_platform_sections(variant.platform, base.platform)
    return PaletteManifest(meta=variant.meta, **data)
