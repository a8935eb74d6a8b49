"""Click CLI for entrycache — view content through the session file cache."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from entrycache.config.hierarchy import load_config_hierarchy
from entrycache.errors.exceptions import EntryCacheError

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(str(default_level).upper())
    if not isinstance(level, int):
        level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


def _fail(e: Exception) -> NoReturn:
    error_console.print(f"[red]Error:[/red] {e}")
    sys.exit(1)


def _print_path(path: Path) -> None:
    console.print(str(path), soft_wrap=True, markup=False, highlight=False)


def _cache_dir(config: dict[str, Any]) -> Path:
    """Resolve the configured cache directory without taking ownership of it."""
    from entrycache.cache.resolver import resolve_cache_dir

    if config.get("cache_dir") is not None:
        return Path(config["cache_dir"]).absolute()
    return resolve_cache_dir(config["app_name"])


@click.group()
@click.version_option(package_name="entrycache")
@click.option("--cache-dir", type=click.Path(file_okay=False), help="Override cache directory.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
@click.pass_context
def cli(ctx: click.Context, cache_dir: str | None, verbose: int) -> None:
    """entrycache — open feed entry content in an external viewer."""
    config = load_config_hierarchy(cache_dir=cache_dir)
    _setup_logging(verbose, config.get("log_level", "WARNING"))
    ctx.obj = config


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option("--name", type=str, default=None, help="Cache file name (default: content hash).")
@click.option("--suffix", type=str, default=None, help="Suffix for generated names.")
@click.option("--viewer", type=str, default=None, help="Browser name to open the file with.")
@click.option("--no-open", is_flag=True, default=False, help="Only print the cached path.")
@click.pass_obj
def view(
    config: dict[str, Any],
    source: str,
    name: str | None,
    suffix: str | None,
    viewer: str | None,
    no_open: bool,
) -> None:
    """Cache SOURCE (a file, or - for stdin) and open it in a viewer.

    The cached file is removed when you end the session.
    """
    from entrycache.cache.file_cache import FileCache
    from entrycache.cache.keys import entry_file_name
    from entrycache.viewer import open_in_viewer

    if source == "-":
        raw = click.get_binary_stream("stdin").read()
    else:
        raw = Path(source).read_bytes()
    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise click.BadParameter(
            f"{source} is not UTF-8 text: {e}", param_hint="SOURCE"
        ) from e

    fname = name or entry_file_name(
        source, content, suffix or config.get("entry_suffix", ".html")
    )

    try:
        with FileCache.from_config(config) as file_cache:
            path = file_cache.cache_as_file(fname, content)
            _print_path(path)
            if not no_open:
                open_in_viewer(path, viewer or config.get("viewer"))
            click.pause("Press any key to end the session and remove the cached file...")
    except EntryCacheError as e:
        _fail(e)


@cli.command()
@click.pass_obj
def where(config: dict[str, Any]) -> None:
    """Print the cache directory."""
    try:
        _print_path(_cache_dir(config))
    except EntryCacheError as e:
        _fail(e)


@cli.command("ls")
@click.pass_obj
def list_files(config: dict[str, Any]) -> None:
    """List files left behind in the cache directory."""
    from entrycache.cache.file_cache import list_cached_files

    try:
        files = list_cached_files(_cache_dir(config))
    except EntryCacheError as e:
        _fail(e)

    if not files:
        console.print("[green]Cache is empty.[/green]")
        return

    table = Table(title="Cached Files", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Size (bytes)", justify="right")

    for cached in files:
        table.add_row(cached.name, f"{cached.size_bytes:,}")

    console.print(table)


@cli.command("clear")
@click.confirmation_option(prompt="Are you sure you want to clear the cache?")
@click.pass_obj
def clear(config: dict[str, Any]) -> None:
    """Remove everything in the cache directory."""
    from entrycache.cache.file_cache import FileCache

    try:
        with FileCache.from_config(config) as file_cache:
            file_cache.clear_cache()
    except EntryCacheError as e:
        _fail(e)
    console.print("[green]Cache cleared.[/green]")


def main() -> None:
    """Entry point for the CLI."""
    cli()
