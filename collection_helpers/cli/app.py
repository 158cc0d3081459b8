"""Typer-based CLI application for `collection_helpers`.

Thin command-line front end over the in-process helpers. Items are passed
as arguments; nothing is read from or written to files.
"""
from __future__ import annotations

import logging
from typing import Optional

import typer
from pydantic import BaseModel, Field, ValidationError
from rich.console import Console
from rich.logging import RichHandler

from ..__about__ import __version__
from ..config import get_settings
from ..errors import InvalidConfigurationError
from ..utils.helpers import greet
from ..utils.partition import split_fixed_count, split_fixed_count_set, split_fixed_size
from ..utils.randomness import make_random
from ..utils.sufficiency import missing_items

app = typer.Typer(help="collection_helpers command-line interface")
console = Console()
err_console = Console(stderr=True)


class Requirement(BaseModel):
    """A parsed ``ITEM=COUNT`` requirement."""

    item: str = Field(..., min_length=1)
    minimum: int = Field(..., ge=0)


def parse_requirement(raw: str) -> Requirement:
    """Parse an ``ITEM=COUNT`` option value.

    Args:
        raw: Value as given on the command line.

    Returns:
        The validated requirement.

    Raises:
        typer.BadParameter: If the value is malformed.
    """
    item, sep, count = raw.rpartition("=")
    if not sep:
        raise typer.BadParameter(f"expected ITEM=COUNT, got {raw!r}")
    try:
        return Requirement(item=item, minimum=count)
    except ValidationError as exc:
        message = exc.errors()[0]["msg"]
        raise typer.BadParameter(f"invalid requirement {raw!r}: {message}") from exc


def version_callback(value: bool) -> None:
    """Print the package version and exit if requested.

    Args:
        value: Whether the ``--version`` flag was provided.
    """
    if value:
        console.print(f"collection_helpers {__version__}")
        raise typer.Exit()


def _print_groups(groups: list[list[str]]) -> None:
    for number, group in enumerate(groups, start=1):
        console.print(f"Group {number}: {', '.join(group)}", markup=False)


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(  # noqa: UP007 - Optional for clarity in help
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
    seed: Optional[int] = typer.Option(  # noqa: UP007
        None, "--seed", help="Seed the shuffle for reproducible groups."
    ),
) -> None:
    """Root command callback.

    Configures logging and the random source shared by the subcommands.

    Args:
        ctx: Typer context object.
        version: If provided, prints version and exits.
        seed: Overrides the configured random seed.
    """
    try:
        settings = get_settings()
    except ValidationError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(2) from exc
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    ctx.ensure_object(dict)
    ctx.obj["rng"] = make_random(seed if seed is not None else settings.random_seed)


@app.command()
def hello(name: str = typer.Argument(..., help="Name to greet")) -> None:
    """Greet a user by name.

    Args:
        name: The name to greet.
    """
    message = greet(name)
    console.print(message)


@app.command("split-size")
def split_size(
    ctx: typer.Context,
    items: list[str] = typer.Argument(..., help="Items to partition"),
    size: int = typer.Option(..., "--size", "-s", help="Items per group"),
) -> None:
    """Shuffle ITEMS and slice them into groups of --size."""
    try:
        groups = split_fixed_size(items, size, ctx.obj["rng"])
    except InvalidConfigurationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(2)
    _print_groups(groups)


@app.command("split-count")
def split_count(
    ctx: typer.Context,
    items: list[str] = typer.Argument(..., help="Items to partition"),
    parts: int = typer.Option(..., "--parts", "-p", help="Number of groups"),
    unique: bool = typer.Option(False, "--unique", help="Drop duplicate items first."),
) -> None:
    """Shuffle ITEMS and deal them into --parts near-equal groups."""
    rng = ctx.obj["rng"]
    try:
        if unique:
            groups = split_fixed_count_set(dict.fromkeys(items).keys(), parts, rng)
        else:
            groups = split_fixed_count(items, parts, rng)
    except InvalidConfigurationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(2)
    _print_groups(groups)


@app.command()
def check(
    items: list[str] = typer.Argument(None, help="Observed items"),
    require: list[str] = typer.Option(
        None, "--require", "-r", help="Requirement as ITEM=COUNT; repeatable."
    ),
) -> None:
    """Check that ITEMS hold at least the required count of each item."""
    requirements = [parse_requirement(raw) for raw in require or []]
    shortfalls = missing_items(
        [(req.item, req.minimum) for req in requirements], items or []
    )
    if not shortfalls:
        console.print("sufficient")
        return

    for item, required, observed in shortfalls:
        console.print(f"missing {item}: need {required}, have {observed}", markup=False)
    raise typer.Exit(1)


if __name__ == "__main__":  # pragma: no cover
    app()
