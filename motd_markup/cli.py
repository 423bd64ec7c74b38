"""
Renders section-sign formatted server MOTDs as plain text, chat-component JSON
or HTML, and runs the small helpers that go with them.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import TextIO

import click

from .config import apply_overrides, load_settings
from .constants import SETTINGS_FILE
from .encoders import render as render_markup
from .favicon import get_favicon
from .log import OFF, TRACE, init_logging
from .models import OutputKind
from .notifier import WebhookNotifier
from .renderer import tree_to_html

__all__ = ["cli"]

logger = logging.getLogger("motd_markup.cli")

LOG_LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "off": OFF,
}

settings_option = click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=SETTINGS_FILE,
    show_default=True,
    help="YAML settings file",
)


@click.group()
@click.version_option()
@click.option("--trace", is_flag=True, help="Log TRACE and above to the terminal")
@click.option("--debug", is_flag=True, help="Log DEBUG and above to the terminal")
@click.option("--info", is_flag=True, help="Log INFO and above (default)")
@click.option("--warn", is_flag=True, help="Log WARN and above to the terminal")
@click.option("--error", is_flag=True, help="Log ERROR only to the terminal")
@click.option("--off", is_flag=True, help="Disable terminal logging")
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for log files; file logging is off when omitted",
)
@click.option("--trace-file", is_flag=True, help="Log TRACE and above to the log file")
def cli(
    trace: bool = False,
    debug: bool = False,
    info: bool = False,
    warn: bool = False,
    error: bool = False,
    off: bool = False,
    log_dir: Path | None = None,
    trace_file: bool = False,
):
    """
    Work with section-sign (§) formatted server MOTDs.

    Args:
        trace, debug, info, warn, error, off: Terminal logging threshold; at
            most one may be given, INFO when none is.
        log_dir: Directory receiving ``latest.log``; file logging is off when
            omitted.
        trace_file: Lower the file threshold from DEBUG to TRACE.

    Raises:
        click.UsageError: If more than one log level flag is given.

    Examples:
        motd-markup render "§aHello §lWorld" --format html
    """
    flags = {"trace": trace, "debug": debug, "info": info, "warn": warn, "error": error, "off": off}
    selected = [name for name, enabled in flags.items() if enabled]
    if len(selected) > 1:
        options = ", ".join(f"--{name}" for name in selected)
        raise click.UsageError(f"Log level flags are mutually exclusive: {options}")

    log_level = selected[0] if selected else "info"
    init_logging(
        level=LOG_LEVELS[log_level],
        file_level=TRACE if trace_file else logging.DEBUG,
        log_dir=log_dir,
    )
    logger.debug("Terminal log level: %s", log_level.upper())


@cli.command()
@click.argument("text", required=False)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([kind.value for kind in OutputKind]),
    default=OutputKind.HTML.value,
    show_default=True,
    help="Output encoding",
)
@click.option(
    "--canonical-flags",
    is_flag=True,
    help="Key JSON style flags by name (bold) instead of by declaration",
)
@settings_option
def render(
    text: str | None,
    output_format: str,
    canonical_flags: bool,
    settings_path: Path,
):
    """
    Render TEXT, or the configured server name when TEXT is omitted.

    Args:
        text: Markup string to render.
        output_format: One of ``json``, ``html`` or ``plain``.
        canonical_flags: Use canonical style flag names in JSON output.
        settings_path: Settings file read when `text` is omitted.

    Examples:
        motd-markup render "§6Gold §lBold" --format json
    """
    if text is None:
        text = load_settings(settings_path).server_name

    output = render_markup(text, OutputKind(output_format), canonical_flags=canonical_flags)
    if output.kind is OutputKind.COMPONENT_TREE:
        click.echo(json.dumps(output.value, indent=2, ensure_ascii=False))
    else:
        click.echo(output.value)


@cli.command("tree-html")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def tree_html(source: TextIO):
    """
    Render a chat-component JSON tree from SOURCE (default: stdin) as HTML.

    Raises:
        click.BadParameter: If SOURCE is not valid JSON.
    """
    try:
        tree = json.load(source)
    except json.JSONDecodeError as error:
        raise click.BadParameter(f"Invalid JSON: {error}", param_hint="SOURCE") from error

    click.echo(tree_to_html(tree))


@cli.command()
@click.option(
    "--fav-icon-path",
    type=click.Path(dir_okay=False, resolve_path=True),
    help="PNG file used instead of the configured favicon path",
)
@settings_option
def favicon(fav_icon_path: str | None, settings_path: Path):
    """Print the favicon data URI advertised by the server."""
    settings = load_settings(settings_path)
    if fav_icon_path is not None:
        # A ready data URI in the settings would otherwise win over the file.
        settings = replace(settings, fav_icon=None, fav_icon_path=fav_icon_path)
    click.echo(get_favicon(settings, base_dir=settings_path.resolve().parent))


@cli.command()
@click.option("--login", "player_name", help="Announce that PLAYER_NAME woke the server")
@click.option("--stop", is_flag=True, help="Announce that the server shut down")
@click.option("--webhook-url", help="Webhook used instead of the configured discordWebhookUrl")
@settings_option
def notify(player_name: str | None, stop: bool, webhook_url: str | None, settings_path: Path):
    """
    Send a wake-up or shutdown notice to the configured webhook.

    Raises:
        click.UsageError: If neither or both of --login and --stop are given.
        click.ClickException: If no webhook is configured or delivery fails.
    """
    if (player_name is None) == (not stop):
        raise click.UsageError("Pass exactly one of --login or --stop.")

    settings = apply_overrides(load_settings(settings_path), discord_webhook_url=webhook_url)
    if not settings.discord_webhook_url:
        raise click.ClickException(f"No discordWebhookUrl configured in {settings_path}")

    notifier = WebhookNotifier(settings)
    if stop:
        response = notifier.on_server_stop()
    else:
        response = notifier.on_player_login(player_name)

    if response is None:
        raise click.ClickException("Failed to deliver notification")
    click.echo(response)


if __name__ == "__main__":
    cli()
