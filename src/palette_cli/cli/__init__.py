"""Command-line interface package for Palette CLI."""

import logging
from pathlib import Path

import click

from ..config import get_config, load_config
from .theme_cmds import get_theme_commands

__all__ = ["main"]

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@click.group()
@click.option("--config", type=click.Path(), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config, verbose):
    """Palette CLI - resolve, validate and export color themes."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    # Load configuration
    if config:
        cfg = load_config(Path(config))
    else:
        cfg = get_config()
    ctx.obj['config'] = cfg

    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(str(cfg.log_level).upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


# Add theme command group
main.add_command(get_theme_commands())


if __name__ == "__main__":
    main()
