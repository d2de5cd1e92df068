"""
colorize/cli.py

Command-line interface for colorize.

Usage:
    colorize themes
    colorize preview vibrant
    colorize echo "Build passed" --color green --emphasis bright
    colorize survey
    colorize set-theme dark
"""

import sys
import json
import logging
from pathlib import Path

import click

from .config import SettingsManager, apply_env
from .formatter import colorizer
from .survey import run_survey
from .theme.engine import BUILTIN_THEMES, CATEGORIES, registry

SAMPLE_TEXT = {
    "success": "Saved 3 files",
    "error": "Connection refused",
    "warning": "Disk usage at 91%",
    "info": "Starting sync",
    "debug": "retry=2 delay=0.5s",
    "prompt": "What's your name?",
}


@click.group()
@click.option("-t", "--theme", default=None, help="Theme name (overrides COLORIZE_THEME)")
@click.option("--no-color", is_flag=True, help="Disable ANSI styling")
@click.option("--debug", is_flag=True, help="Enable debug logging and messages")
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Settings file (default ~/.colorize/config.json)")
@click.pass_context
def cli(ctx, theme, no_color, debug, config_path):
    """Theme-based ANSI colorizer for terminal output."""
    ctx.ensure_object(dict)

    manager = SettingsManager(config_path)
    settings = apply_env(manager.settings)
    debug = debug or settings.debug
    if debug:
        logging.basicConfig(level=logging.DEBUG)

    registry.load_themes()
    if settings.theme_dir:
        registry.load_themes(Path(settings.theme_dir).expanduser())

    colorizer.set_theme(theme or settings.theme_name)
    colorizer.set_enabled(settings.enabled and not no_color)

    ctx.obj["manager"] = manager
    ctx.obj["out"] = colorizer
    ctx.obj["debug"] = debug


@cli.command("themes")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_themes(ctx, output_json):
    """List registered themes."""
    out = ctx.obj["out"]
    names = registry.names()

    if output_json:
        click.echo(json.dumps(names, indent=2))
        return

    rows = {
        name: {
            "source": "builtin" if name in BUILTIN_THEMES else "file",
            "active": "*" if registry.get(name) is out.theme else "",
        }
        for name in names
    }
    out.table(rows, "Available themes:")
    click.echo(f"\n{len(names)} theme(s)")


@cli.command("preview")
@click.argument("name")
@click.pass_context
def preview_theme(ctx, name):
    """Show one sample line per category in a theme."""
    out = ctx.obj["out"]

    if name not in registry:
        click.echo(f"Theme '{name}' not found.", err=True)
        sys.exit(1)

    theme = registry.get(name)
    saved = out.theme
    out.set_theme(theme)
    try:
        for category in CATEGORIES:
            text = f"{category:<8} {SAMPLE_TEXT[category]}"
            if category == "prompt":
                click.echo(out.format_prompt(text), color=True)
            else:
                getattr(out, category)(text)
    finally:
        out.set_theme(saved)


@cli.command("echo")
@click.argument("text")
@click.option("-c", "--color", default=None, help="Foreground code, e.g. red")
@click.option("-b", "--background", default=None, help="Background code, e.g. bgBlue")
@click.option("-e", "--emphasis", default=None, help="Style code, e.g. bright")
@click.pass_context
def echo_text(ctx, text, color, background, emphasis):
    """Print TEXT with explicit style codes."""
    ctx.obj["out"].log(text, color, background, emphasis)


@cli.command("survey")
@click.pass_context
def survey(ctx):
    """Ask for name, age and major, then print a summary."""
    out = ctx.obj["out"]
    try:
        run_survey(out, debug=ctx.obj["debug"])
    except (EOFError, KeyboardInterrupt):
        out.error("Input closed before the survey finished.")
        sys.exit(1)


@cli.command("set-theme")
@click.argument("name")
@click.pass_context
def set_default_theme(ctx, name):
    """Persist NAME as the default theme."""
    out = ctx.obj["out"]

    if name not in registry:
        click.echo(f"Theme '{name}' not found.", err=True)
        sys.exit(1)

    manager = ctx.obj["manager"]
    manager.settings.theme_name = name
    manager.save()
    out.success(f"Default theme set to {name}")


def main():
    """Entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
