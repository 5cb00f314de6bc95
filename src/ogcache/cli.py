"""Click CLI for ogcache — serve, render and inspect Open Graph images."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ogcache.config.hierarchy import load_config_hierarchy
from ogcache.errors.exceptions import ConfigurationError, OgCacheError

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, configured_level: str | None = None) -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(configured_level.upper()) if configured_level else logging.WARNING
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


def _load_config(verbose: int, **overrides: Any) -> dict[str, Any]:
    config = load_config_hierarchy(**overrides)
    _setup_logging(verbose, config.get("log_level"))
    return config


def _build_generator_or_exit(config: dict[str, Any]):
    from ogcache.app import build_generator

    try:
        return build_generator(config)
    except ConfigurationError as e:
        error_console.print(f"[red]Configuration error:[/red] {e.message}")
        sys.exit(1)


_metadata_option = click.option(
    "--metadata",
    "metadata_path",
    type=click.Path(),
    default=None,
    help="Path to the og-metadata JSON file.",
)
_store_option = click.option(
    "--store",
    type=click.Choice(["memory", "disk", "redis"], case_sensitive=False),
    default=None,
    help="Artifact store backend.",
)
_verbose_option = click.option(
    "-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)."
)


@click.group()
@click.version_option(package_name="ogcache")
def cli() -> None:
    """ogcache — cached Open Graph image generation."""


@cli.command()
@_metadata_option
@_store_option
@click.option("--host", type=str, default=None, help="Bind address.")
@click.option("--port", type=int, default=None, help="Bind port.")
@_verbose_option
def serve(
    metadata_path: str | None,
    store: str | None,
    host: str | None,
    port: int | None,
    verbose: int,
) -> None:
    """Serve GET /og-image?p=<identifier> over HTTP."""
    import uvicorn

    from ogcache.server import create_app

    config = _load_config(
        verbose, metadata_path=metadata_path, store=store, host=host, port=port
    )
    generator = _build_generator_or_exit(config)
    uvicorn.run(
        create_app(generator),
        host=config["host"],
        port=int(config["port"]),
        log_level="debug" if verbose >= 2 else "info",
    )


@cli.command()
@click.argument("identifier")
@click.option("-o", "--output", type=click.Path(), required=True, help="Output PNG path.")
@_metadata_option
@_store_option
@click.option("--brand", type=str, default=None, help="Override the brand line.")
@_verbose_option
def render(
    identifier: str,
    output: str,
    metadata_path: str | None,
    store: str | None,
    brand: str | None,
    verbose: int,
) -> None:
    """Generate (or fetch from cache) the image for IDENTIFIER."""
    config = _load_config(verbose, metadata_path=metadata_path, store=store, brand=brand)
    generator = _build_generator_or_exit(config)

    async def _run():
        try:
            return await generator.generate_image(identifier)
        finally:
            await generator.store.close()

    try:
        result = asyncio.run(_run())
    except OgCacheError as e:
        error_console.print(f"[red]Error:[/red] {e.message}")
        sys.exit(1)

    out_path = Path(output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(result.data)
    source = "cache" if result.cached else "renderer"
    console.print(
        f"[green]Written to {out_path}[/green] ({result.size_bytes:,} bytes from {source})",
        soft_wrap=True,
    )
    if verbose >= 1:
        error_console.print(f"Cache key: {result.key}")


@cli.command()
@click.argument("identifier")
@_metadata_option
@_verbose_option
def key(identifier: str, metadata_path: str | None, verbose: int) -> None:
    """Show how IDENTIFIER resolves and the cache key it maps to."""
    from ogcache.app import build_context
    from ogcache.cache.keys import build_cache_key, fingerprint

    config = _load_config(verbose, metadata_path=metadata_path)
    try:
        context = build_context(config)
    except ConfigurationError as e:
        error_console.print(f"[red]Configuration error:[/red] {e.message}")
        sys.exit(1)

    resolution = context.metadata.resolve(identifier)
    record_fingerprint = fingerprint(resolution.record)

    table = Table(title="Cache Key", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Requested", identifier)
    table.add_row("Resolved", resolution.identifier)
    table.add_row("Fallback", "yes" if resolution.is_fallback else "no")
    table.add_row("Title", resolution.record.title)
    table.add_row("Fingerprint", record_fingerprint)
    table.add_row("Key", build_cache_key(resolution.identifier, record_fingerprint))
    console.print(table)


@cli.group()
def cache() -> None:
    """Disk artifact store management commands."""


_disk_path_option = click.option(
    "--disk-path", type=click.Path(), default=None, help="SQLite artifact store path."
)


def _open_disk_store(disk_path: str | None):
    from ogcache.app import config_number
    from ogcache.cache.disk import DiskStore

    config = load_config_hierarchy(disk_path=disk_path)
    path = config.get("disk_path")
    try:
        max_size_mb = config_number(config, "disk_mb")
    except ConfigurationError as e:
        error_console.print(f"[red]Configuration error:[/red] {e.message}")
        sys.exit(1)
    return DiskStore(db_path=Path(path) if path else None, max_size_mb=max_size_mb)


@cache.command("stats")
@_disk_path_option
def cache_stats(disk_path: str | None) -> None:
    """Show disk artifact store statistics."""
    store = _open_disk_store(disk_path)
    try:
        table = Table(title="Artifact Store", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Value")
        table.add_row("Path", str(store.path))
        table.add_row("Entries", str(store.entry_count))
        table.add_row("Size (MB)", f"{store.size_mb:.1f}")
        console.print(table)
    finally:
        store.close()


@cache.command("clear")
@_disk_path_option
@click.confirmation_option(prompt="Are you sure you want to clear the artifact store?")
def cache_clear(disk_path: str | None) -> None:
    """Delete every stored artifact."""
    store = _open_disk_store(disk_path)
    try:
        removed = store.clear()
    finally:
        store.close()
    console.print(f"[green]Artifact store cleared ({removed} entries).[/green]")


def main() -> None:
    """Entry point for the CLI."""
    cli()
