"""``assegai-util path``: path engine commands.

Every command prints its result on stdout, one value per line. The
resolution context (current directory, platform policy) is built by the
top-level command from ``--cwd`` and ``--platform``.

Failure modes
- A malformed argument (e.g. ``format`` without ``--dir``) raises ``ClickException``
  with the library's message and exit status 1.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager
from typing import cast

import click
import click_extra as clickx

from assegai_util import path as engine
from assegai_util.errors import UtilError
from assegai_util.path import ParseMode, ResolutionContext

from .helpers import warn

pass_context = click.make_pass_decorator(ResolutionContext)


@contextmanager
def _reported_errors() -> Iterator[None]:
    try:
        yield
    except UtilError as e:
        raise click.ClickException(str(e)) from e


@click.group(cls=clickx.ExtraGroup)
def path() -> None:
    """Pure path manipulation (no filesystem access)."""


@path.command()
@click.argument("value")
@pass_context
def normalize(ctx: ResolutionContext, value: str) -> None:
    """Fold '.' and '..' segments and repeated separators out of VALUE."""
    with _reported_errors():
        click.echo(engine.normalize(value, ctx))


@path.command()
@click.argument("fragments", nargs=-1)
@pass_context
def join(ctx: ResolutionContext, fragments: tuple[str, ...]) -> None:
    """Join FRAGMENTS with the platform separator."""
    with _reported_errors():
        click.echo(engine.join(*fragments, policy=ctx.policy))


@path.command()
@click.argument("fragments", nargs=-1)
@pass_context
def resolve(ctx: ResolutionContext, fragments: tuple[str, ...]) -> None:
    """Resolve FRAGMENTS, right to left, into an absolute path."""
    with _reported_errors():
        click.echo(engine.resolve(*fragments, ctx=ctx))


@path.command()
@click.argument("from_path", metavar="FROM")
@click.argument("to_path", metavar="TO")
@pass_context
def relative(ctx: ResolutionContext, from_path: str, to_path: str) -> None:
    """Print the relative path leading from FROM to TO."""
    with _reported_errors():
        result = engine.relative(from_path, to_path, ctx)
    if result and ctx.policy.is_absolute(result):
        warn("Paths are on different roots; printing the absolute target.")
    click.echo(result)


@path.command()
@click.argument("value")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON object.")
@pass_context
def parse(ctx: ResolutionContext, value: str, as_json: bool) -> None:
    """Split VALUE into dir, base, filename and extension."""
    with _reported_errors():
        parts = cast(dict[str, str], engine.parse(value, ctx, mode=ParseMode.MAPPING))
    if as_json:
        click.echo(json.dumps(parts))
        return
    for key, part in parts.items():
        click.echo(f"{key:<9}: {part}")


@path.command("format")
@click.option("--dir", "dir_", default=None, help="Directory part.")
@click.option("--base", default=None, help="Base name (filename plus extension).")
@click.option("--filename", default=None, help="File name without extension.")
@click.option("--extension", default=None, help="Extension without the dot.")
@pass_context
def format_(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: ResolutionContext,
    dir_: str | None,
    base: str | None,
    filename: str | None,
    extension: str | None,
) -> None:
    """Build a path from its parts; the inverse of 'parse'."""
    parts = {"dir": dir_, "base": base, "filename": filename, "extension": extension}
    with _reported_errors():
        click.echo(engine.format(parts, policy=ctx.policy))


@path.command()
@click.argument("value")
@pass_context
def basename(ctx: ResolutionContext, value: str) -> None:
    """Print the last segment of VALUE."""
    with _reported_errors():
        click.echo(engine.basename(value, ctx))


@path.command()
@click.argument("value")
@pass_context
def dirname(ctx: ResolutionContext, value: str) -> None:
    """Print everything before the last segment of VALUE."""
    with _reported_errors():
        click.echo(engine.dirname(value, ctx))


@path.command()
@click.argument("value")
@pass_context
def extension(ctx: ResolutionContext, value: str) -> None:
    """Print the extension of VALUE (without the dot)."""
    with _reported_errors():
        click.echo(engine.extension(value, ctx))


@path.command("is-absolute")
@click.argument("value")
@pass_context
def is_absolute(ctx: ResolutionContext, value: str) -> None:
    """Print 'true' if VALUE is absolute on the selected platform."""
    click.echo("true" if engine.is_absolute(value, ctx.policy) else "false")
