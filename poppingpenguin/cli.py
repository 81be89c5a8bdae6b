"""Command-line interface: ``shrink`` and ``version`` commands."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
from typing import Any

import click
import yaml

from poppingpenguin.logger import new_logger
from poppingpenguin.shrinker import ImageShrinker

_PROG_NAME = "poppingpenguin"
_DEFAULT_CONFIG_NAME = ".poppingpenguin.yaml"


def load_config(config_file: str | None = None) -> tuple[Path, dict[str, Any]] | None:
    """Read the YAML config file; return its path and contents, or None if unreadable.

    Without an explicit file, ``~/.poppingpenguin.yaml`` is used.
    """
    if config_file:
        path = Path(config_file)
    else:
        path = Path.home() / _DEFAULT_CONFIG_NAME
    try:
        with path.open(encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError):
        return None
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return None
    return path, data


@click.group(
    name=_PROG_NAME,
    short_help="A tool for shrinking image files",
    help="PoppingPenguin is a CLI application that shrinks image files "
    "and provides detailed size statistics.",
)
@click.option(
    "--config",
    "config_file",
    default=None,
    help="config file (default is $HOME/.poppingpenguin.yaml)",
)
@click.option("-v", "--verbose", count=True, help="increase verbosity")
@click.pass_context
def _cli(ctx: click.Context, config_file: str | None, verbose: int) -> None:
    try:
        loaded = load_config(config_file)
    except RuntimeError as exc:
        raise click.ClickException(str(exc)) from exc
    config: dict[str, Any] = {}
    if loaded is not None:
        path, config = loaded
        click.echo(f"Using config file: {path}", err=True)
    ctx.obj = {"verbose": verbose, "config": config}


@_cli.command(
    name="shrink",
    short_help="Shrink image files",
    help="Shrink image files and display the original size, new size, "
    "and shrink percentage.",
)
@click.argument("files", nargs=-1, required=True)
@click.option(
    "-l",
    "--level",
    "compression_level",
    type=int,
    default=80,
    show_default=True,
    help="compression level (1-100, lower means smaller file)",
)
@click.option(
    "-c",
    "--concurrency",
    "concurrency_level",
    type=int,
    default=4,
    show_default=True,
    help="number of images to process concurrently",
)
@click.option("-v", "--verbose", count=True, help="increase verbosity")
@click.pass_context
def _shrink_command(
    ctx: click.Context,
    files: tuple[str, ...],
    compression_level: int,
    concurrency_level: int,
    verbose: int,
) -> None:
    total_verbosity = (ctx.obj or {}).get("verbose", 0) + verbose
    logger = new_logger(total_verbosity)
    try:
        shrinker = ImageShrinker(compression_level, concurrency_level, logger)
        shrinker.shrink_images(list(files))
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


@_cli.command(
    name="version",
    short_help="Print the version number",
    help="Print the version number of poppingpenguin",
)
def _version_command() -> None:
    try:
        version = metadata.version(_PROG_NAME)
    except metadata.PackageNotFoundError:
        version = "development"
    click.echo(f"{_PROG_NAME} version: {version}")


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the process exit status."""
    try:
        result = _cli.main(args=argv, prog_name=_PROG_NAME, standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0