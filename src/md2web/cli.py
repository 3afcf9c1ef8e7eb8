"""CLI interface for md2web.

Serves the markdown files of a directory as a website.
"""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from md2web.app_keys import static_url_key
from md2web.config import Config


@click.command()
@click.argument("host")
@click.argument("port", type=int)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover md2web.toml)",
)
@click.option(
    "--source-dir",
    "-s",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Site root containing main.md (overrides config)",
)
@click.option(
    "--exclude",
    "-e",
    multiple=True,
    help="File or folder name to hide from the site (repeatable)",
)
@click.option(
    "--static-subdomain",
    default=None,
    help="Serve static assets on this subdomain instead of a path prefix",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log every request resolution)",
)
def cli(
    host: str,
    port: int,
    config_path: Path | None,
    source_dir: Path | None,
    exclude: tuple[str, ...],
    static_subdomain: str | None,
    verbose: bool,
) -> None:
    """Serve the markdown files under the site root on HOST and PORT."""
    from md2web.server import create_app, run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            source_dir=source_dir,
            exclude=list(exclude),
            static_subdomain=static_subdomain,
        )
        app = create_app(config)
    except (FileNotFoundError, ValueError) as e:
        _fail(e)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Source directory: {config.site.source_dir}")
    click.echo(f"Static assets: {app[static_url_key]}")

    run_server(config, app)


def _fail(error: Exception) -> NoReturn:
    """Print an error and exit without starting the server."""
    click.echo(click.style(f"Error: {error}", fg="red"), err=True)
    sys.exit(1)
