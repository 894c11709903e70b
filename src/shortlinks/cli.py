"""CLI interface for Shortlinks.

Command-line tool for serving, resolving, and checking shortlinks.
"""

import logging
import sys
from pathlib import Path

import click

from shortlinks.config import Config
from shortlinks.core.check import count_links, find_problems
from shortlinks.core.resolver import resolve

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Path to configuration file (default: auto-discover shortlinks.json)",
)


@click.group()
def cli() -> None:
    """Shortlinks - short paths, long URLs."""


@cli.command()
@config_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log every resolution)",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the shortlink server."""
    from shortlinks.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = _load_config(config_path).with_overrides(host=host, port=port)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Config file: {config.config_path}")
    click.echo(f"Links: {count_links(config.links)}")

    run_server(config)


@cli.command("resolve")
@click.argument("shortlink")
@config_option
def resolve_command(shortlink: str, config_path: Path | None) -> None:
    """Print the redirect target for SHORTLINK."""
    config = _load_config(config_path)

    target = resolve(shortlink, config.links)
    if target is None:
        click.echo(f"Not found: {shortlink}", err=True)
        sys.exit(1)

    click.echo(target)


@cli.command()
@config_option
def check(config_path: Path | None) -> None:
    """Report links that can never resolve."""
    config = _load_config(config_path)

    problems = find_problems(config.links)
    if problems:
        for problem in problems:
            click.echo(click.style(f"[PROBLEM] {problem}", fg="yellow"), err=True)
        click.echo(f"{len(problems)} problem(s) found", err=True)
        sys.exit(1)

    click.echo(f"OK: {count_links(config.links)} links")


def _load_config(config_path: Path | None) -> Config:
    """Load configuration, exiting with an error message on failure."""
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
