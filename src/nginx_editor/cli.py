"""
Click-based CLI for nginx-editor.

IMPORTANT: This module only ORCHESTRATES. It never tokenizes or formats itself.
- Loads settings
- Reads files / stdin
- Invokes the tokenizer, formatter and highlighter
- Formats output
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from nginx_editor import __version__
from nginx_editor.actions.format import FormatAction, FormatResult
from nginx_editor.actions.reporters import REPORTERS, RichReporter
from nginx_editor.config import SettingsManager
from nginx_editor.engine.highlight import Highlighter
from nginx_editor.errors import SettingsError, UnknownThemeError
from nginx_editor.model.theme import EDITOR_THEMES, ColorMode, require_editor_theme, theme_ids
from nginx_editor.parser.tokenizer import iter_spans, tokenize

console = Console()
err_console = Console(stderr=True)

STDIN = "-"


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _read_source(path: str) -> str:
    """Read a file argument, with '-' meaning stdin."""
    if path == STDIN:
        return sys.stdin.read()
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Failed to read {path}: {e}") from e


@click.group()
@click.version_option(version=__version__, prog_name="nginx-editor")
@click.option("--config", "-c", type=click.Path(file_okay=False), help="Path to settings directory")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """nginx-editor: format and highlight nginx configuration files."""
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    config_dir = Path(config) if config else None
    ctx.obj["settings_mgr"] = SettingsManager(config_dir)


@main.command("format")
@click.argument("paths", nargs=-1, required=True)
@click.option("--check", is_flag=True, help="Don't write; exit 1 if any file would change")
@click.option("--diff", "show_diff", is_flag=True, help="Print a unified diff instead of writing")
@click.option("--stdout", "to_stdout", is_flag=True, help="Print formatted text instead of writing files")
def format_cmd(paths: tuple[str, ...], check: bool, show_diff: bool, to_stdout: bool) -> None:
    """Re-indent configuration files in place.

    Use '-' to read from stdin and write the result to stdout.
    """
    action = FormatAction()
    results: list[FormatResult] = []

    for path in paths:
        if path == STDIN:
            result = action.format_text(sys.stdin.read())
            if not check and not show_diff:
                click.echo(result.formatted, nl=False)
        else:
            result = action.format_file(path, check=check or show_diff or to_stdout)
            if to_stdout and result.success:
                click.echo(result.formatted, nl=False)
        results.append(result)

        if not result.success:
            err_console.print(f"[bold red]Error:[/] {result.error}")
            continue
        if show_diff and result.changed:
            click.echo(result.diff(), nl=False)
        if check and result.changed:
            err_console.print(f"[yellow]Would reformat:[/] {result.path}")
        elif result.written:
            err_console.print(f"[green]Formatted:[/] {result.path}")

    failed = sum(1 for r in results if not r.success)
    changed = sum(1 for r in results if r.changed)

    if check:
        err_console.print(f"[dim]{changed} file(s) would change, {len(results) - changed - failed} unchanged[/]")
    if failed or (check and changed):
        sys.exit(1)


@main.command()
@click.argument("path")
@click.option("--format", "fmt", type=click.Choice(sorted(REPORTERS)), default="rich", help="Output format")
@click.option("--all", "include_whitespace", is_flag=True, help="Include whitespace spans")
@click.pass_context
def tokens(ctx: click.Context, path: str, fmt: str, include_whitespace: bool) -> None:
    """List the classified tokens of a configuration file."""
    content = _read_source(path)
    token_list = list(iter_spans(content)) if include_whitespace else tokenize(content)

    reporter_cls = REPORTERS[fmt]
    if reporter_cls is RichReporter:
        settings = ctx.obj["settings_mgr"].load()
        highlighter = Highlighter(require_editor_theme(settings.theme), settings.color_mode)
        reporter = RichReporter(console, highlighter)
    else:
        reporter = reporter_cls(console)
    reporter.report_tokens(token_list, source_name="<stdin>" if path == STDIN else path)


def _validate_theme(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return require_editor_theme(value).id
    except UnknownThemeError as e:
        raise click.BadParameter(f"{e}. Choose from: {', '.join(theme_ids())}") from e


@main.command()
@click.argument("path")
@click.option("--theme", "-t", callback=_validate_theme, help="Editor theme id (default from settings)")
@click.option("--mode", "-m", type=click.Choice([m.value for m in ColorMode]), help="Colour mode")
@click.pass_context
def highlight(ctx: click.Context, path: str, theme: str | None, mode: str | None) -> None:
    """Print a configuration file with syntax highlighting."""
    settings = ctx.obj["settings_mgr"].load()
    editor_theme = require_editor_theme(theme or settings.theme)
    color_mode = ColorMode(mode) if mode else settings.color_mode

    content = _read_source(path)
    console.print(Highlighter(editor_theme, color_mode).highlight(content), soft_wrap=True)


@main.command()
@click.pass_context
def themes(ctx: click.Context) -> None:
    """List available editor themes."""
    settings = ctx.obj["settings_mgr"].load()
    color_mode = settings.color_mode

    table = Table(title=f"Editor themes ({color_mode.value})", title_justify="left")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Description", style="dim")
    table.add_column("Palette")

    for theme in EDITOR_THEMES:
        colors = theme.colors(color_mode)
        swatch = Text()
        for color in (colors.keyword, colors.directive, colors.string, colors.variable, colors.number):
            swatch.append("■ ", style=color)
        marker = " *" if theme.id == settings.theme else ""
        table.add_row(theme.id + marker, theme.name, theme.description, swatch)

    console.print(table)


@main.command()
@click.option("--host", default="127.0.0.1", help="Bind address (forced to 127.0.0.1)")
@click.option("--port", "-p", default=8765, type=int, help="Port to listen on")
def serve(host: str, port: int) -> None:
    """Run the local HTTP API used by the browser editor."""
    from nginx_editor.web.app import run_server

    run_server(host=host, port=port)


@main.group()
def settings() -> None:
    """Manage editor preferences."""
    pass


@settings.command("show")
@click.pass_context
def settings_show(ctx: click.Context) -> None:
    """Show current preferences."""
    settings_mgr = ctx.obj["settings_mgr"]
    current = settings_mgr.load()
    console.print(f"[bold green]theme[/]: {current.theme}")
    console.print(f"[bold green]mode[/]: {current.mode}")
    console.print(f"[dim]file: {settings_mgr.settings_file}[/]")


@settings.command("set-theme")
@click.argument("theme_id")
@click.pass_context
def settings_set_theme(ctx: click.Context, theme_id: str) -> None:
    """Set the default editor theme."""
    try:
        ctx.obj["settings_mgr"].set_theme(theme_id)
    except SettingsError as e:
        console.print(f"[bold red]Error:[/] {e}")
        sys.exit(1)
    console.print(f"[bold green]✓ Default theme:[/] {theme_id}")


@settings.command("set-mode")
@click.argument("mode")
@click.pass_context
def settings_set_mode(ctx: click.Context, mode: str) -> None:
    """Set the default colour mode (dark or light)."""
    try:
        ctx.obj["settings_mgr"].set_mode(mode)
    except SettingsError as e:
        console.print(f"[bold red]Error:[/] {e}")
        sys.exit(1)
    console.print(f"[bold green]✓ Default mode:[/] {mode}")


if __name__ == "__main__":
    main()
