"""Theme CLI commands.

This module provides CLI commands for listing, inspecting, exporting and
validating themes, plus small color utilities (contrast, adjust, blend).
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.style import Style
from rich.table import Table
from rich.text import Text

from ..config import ConfigModel, get_config
from ..theme_engine import (
    COLOR_GROUPS,
    Color,
    ContrastLevel,
    Palette,
    PaletteError,
    ThemeRegistry,
    contrast_ratio,
    load_preset_file,
    validate_palette,
)
from ..theme_engine.export import to_css, to_json
from ..theme_engine.terminal import to_rich_color

logger = logging.getLogger(__name__)

LEVEL_CHOICES = [level.value for level in ContrastLevel]
FILE_OPTION = click.option(
    '--file', 'file', type=click.Path(), help='Load a theme file instead of a registered theme'
)


def _config(ctx: click.Context) -> ConfigModel:
    if ctx.obj and ctx.obj.get('config') is not None:
        return ctx.obj['config']
    return get_config()


def build_registry(config: ConfigModel) -> ThemeRegistry:
    """Built-in themes plus every theme file in the configured themes dir."""
    registry = ThemeRegistry()
    themes_path = config.get_themes_path()
    if themes_path.is_dir():
        added = registry.add_directory(themes_path)
        logger.debug(f"Registered {len(added)} custom theme(s) from {themes_path}")
    return registry


def _fail(console: Console, message: str, error: Exception) -> None:
    console.print(f"[red]{message}: {escape(str(error))}[/red]")
    sys.exit(1)


def _swatch(color: Color) -> Text:
    return Text("    ", style=Style(bgcolor=to_rich_color(color)))


@click.group()
def theme():
    """Inspect, export and validate color themes."""
    pass


@theme.command(name="list")
@click.option('--style', help='Only show themes with this style (e.g. dark, light)')
@click.pass_context
def list_themes(ctx, style: Optional[str]):
    """List all registered themes."""
    console = Console()
    try:
        config = _config(ctx)
        registry = build_registry(config)
        themes = registry.by_style(style) if style else registry.list_themes()

        table = Table(title="Available Themes", show_header=True, header_style="bold")
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("Name")
        table.add_column("Style", style="magenta")
        table.add_column("Source", style="blue")

        for info in themes:
            theme_id = escape(info.id)
            if info.id == config.default_theme:
                theme_id = f"[bold]{theme_id}[/bold]"
            table.add_row(theme_id, escape(info.name), escape(info.style),
                          "builtin" if info.builtin else "custom")

        console.print(table)
    except PaletteError as e:
        _fail(console, "Error listing themes", e)


def _load_palette(ctx: click.Context, theme_id: Optional[str], file: Optional[str] = None) -> Palette:
    if file:
        return load_preset_file(Path(file))
    if not theme_id:
        raise click.UsageError("Provide a theme ID or --file")
    return build_registry(_config(ctx)).load(theme_id)


def _target(theme_id: Optional[str], file: Optional[str]) -> str:
    return escape(theme_id or file or "")


@theme.command()
@click.argument('theme_id', required=False)
@FILE_OPTION
@click.pass_context
def show(ctx, theme_id: Optional[str], file: Optional[str]):
    """Show the populated color slots of a theme."""
    console = Console()
    try:
        palette = _load_palette(ctx, theme_id, file)

        title = palette.meta.name if palette.meta else (theme_id or file)
        table = Table(title=escape(str(title)), show_header=True, header_style="bold")
        table.add_column("Slot", style="cyan", no_wrap=True)
        table.add_column("Hex", no_wrap=True)
        table.add_column("Swatch", no_wrap=True)

        for spec in COLOR_GROUPS:
            for slot, color in getattr(palette, spec.attribute).populated_slots():
                table.add_row(f"{spec.section}.{slot}", color.to_hex(), _swatch(color))

        for name, override in palette.platform.items():
            for slot in ("background", "foreground"):
                color = getattr(override, slot)
                if color is not None:
                    table.add_row(escape(f"platform.{name}.{slot}"), color.to_hex(), _swatch(color))

        console.print(table)
    except PaletteError as e:
        _fail(console, f"Error loading theme '{_target(theme_id, file)}'", e)


@theme.command()
@click.argument('theme_id', required=False)
@FILE_OPTION
@click.option('--prefix', help='CSS variable prefix (--<prefix>-<name>)')
@click.option('--root', is_flag=True, help='Wrap declarations in a :root block')
@click.pass_context
def css(ctx, theme_id: Optional[str], file: Optional[str], prefix: Optional[str], root: bool):
    """Export a theme as CSS custom properties."""
    try:
        palette = _load_palette(ctx, theme_id, file)
        if prefix is None:
            prefix = _config(ctx).css_prefix
        click.echo(to_css(palette, prefix, wrap_selector=":root" if root else None), nl=False)
    except PaletteError as e:
        _fail(Console(stderr=True), f"Error exporting theme '{_target(theme_id, file)}'", e)


@theme.command(name="json")
@click.argument('theme_id', required=False)
@FILE_OPTION
@click.pass_context
def json_export(ctx, theme_id: Optional[str], file: Optional[str]):
    """Export a resolved theme as JSON."""
    try:
        click.echo(to_json(_load_palette(ctx, theme_id, file)))
    except PaletteError as e:
        _fail(Console(stderr=True), f"Error exporting theme '{_target(theme_id, file)}'", e)


@theme.command()
@click.argument('theme_id', required=False)
@FILE_OPTION
@click.option('--level', type=click.Choice(LEVEL_CHOICES, case_sensitive=False),
              help='WCAG level to check against (default from config)')
@click.pass_context
def validate(ctx, theme_id: Optional[str], file: Optional[str], level: Optional[str]):
    """Check a theme's paired slots against a WCAG contrast level."""
    console = Console()
    try:
        contrast_level = ContrastLevel.parse(level or _config(ctx).contrast_level)
        palette = _load_palette(ctx, theme_id, file)
    except (PaletteError, ValueError) as e:
        _fail(console, f"Error validating theme '{_target(theme_id, file)}'", e)
        return

    violations = validate_palette(palette, contrast_level)
    if not violations:
        console.print(
            f"[green]✅ {_target(theme_id, file)}: no contrast violations at "
            f"{contrast_level.value} ({contrast_level.threshold}:1)[/green]"
        )
        return

    table = Table(
        title=f"{len(violations)} contrast violation(s) at {contrast_level.value}",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Foreground", style="cyan", no_wrap=True)
    table.add_column("Background", style="cyan", no_wrap=True)
    table.add_column("Ratio", justify="right")
    table.add_column("Required", justify="right")

    for violation in violations:
        table.add_row(
            violation.foreground_label,
            violation.background_label,
            f"{violation.ratio:.2f}",
            f"{violation.level.threshold}",
        )

    console.print(table)
    sys.exit(1)


def _parse_color(console: Console, text: str) -> Color:
    try:
        return Color.parse_hex(text)
    except PaletteError as e:
        _fail(console, "Invalid color", e)


@theme.command()
@click.argument('foreground')
@click.argument('background')
def contrast(foreground: str, background: str):
    """Show the contrast ratio of two colors and which WCAG levels pass."""
    console = Console()
    fg = _parse_color(console, foreground)
    bg = _parse_color(console, background)
    ratio = contrast_ratio(fg, bg)

    console.print(f"Contrast ratio: [bold]{ratio:.2f}:1[/bold]")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Level")
    table.add_column("Required", justify="right")
    table.add_column("Result")
    for level in ContrastLevel:
        result = "[green]pass[/green]" if level.passes(ratio) else "[red]fail[/red]"
        table.add_row(level.value, f"{level.threshold}", result)
    console.print(table)


@theme.command()
@click.argument('color')
@click.option('--lighten', type=float, help='Increase lightness by N (0-1)')
@click.option('--darken', type=float, help='Decrease lightness by N (0-1)')
@click.option('--saturate', type=float, help='Increase saturation by N (0-1)')
@click.option('--desaturate', type=float, help='Decrease saturation by N (0-1)')
@click.option('--rotate', type=float, help='Rotate hue by DEG degrees')
def adjust(color: str, lighten: Optional[float], darken: Optional[float],
           saturate: Optional[float], desaturate: Optional[float], rotate: Optional[float]):
    """Apply HSL adjustments to a color and print the result."""
    result = _parse_color(Console(stderr=True), color)

    # Fixed order: lighten, darken, saturate, desaturate, rotate
    if lighten is not None:
        result = result.lighten(lighten)
    if darken is not None:
        result = result.darken(darken)
    if saturate is not None:
        result = result.saturate(saturate)
    if desaturate is not None:
        result = result.desaturate(desaturate)
    if rotate is not None:
        result = result.rotate_hue(rotate)

    click.echo(result.to_hex())


@theme.command()
@click.argument('foreground')
@click.argument('background')
@click.argument('alpha', type=float)
def blend(foreground: str, background: str, alpha: float):
    """Composite FOREGROUND over BACKGROUND at ALPHA (0-1)."""
    console = Console(stderr=True)
    fg = _parse_color(console, foreground)
    bg = _parse_color(console, background)
    click.echo(fg.blend(bg, alpha).to_hex())


# Register the theme group with the main CLI
def get_theme_commands():
    """Get the theme command group for registration with main CLI."""
    return theme
