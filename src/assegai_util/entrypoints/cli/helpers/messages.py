"""Terminal message helpers for the assegai-util CLI.

Lines go to stderr so stdout carries only command results, and emojis fall
back to ASCII on terminals that cannot encode them.
"""

import click


def _glyph(emoji: str, fallback: str) -> str:
    """Return *emoji* if stderr can encode it, otherwise *fallback*."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except UnicodeEncodeError:
        return fallback
    return emoji


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line: ``⚠️  Paths are on different roots.``"""
    click.secho(f"{_glyph('⚠️', '[!]')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line, e.g. ``✅  Emptied build/.``"""
    click.secho(f"{_glyph('✅', '[OK]')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line, e.g. ``❌  Not a directory: build/``"""
    click.secho(f"{_glyph('❌', '[X]')}  {msg}", fg="red", bold=True, err=True)
