"""Pure path algorithms: join, normalize, resolve, relative, parse, format.

Every function is a pure function of its arguments. Anything that would
otherwise come from process state (the working directory, the platform) is
read from the `ResolutionContext` or `PlatformPolicy` passed in.

Examples:
    >>> ctx = ResolutionContext("/home/user")
    >>> normalize("foo/can/../bar", ctx)
    'foo/bar'
    >>> resolve("/foo/bar", "./baz", ctx=ctx)
    '/foo/bar/baz'
    >>> relative("/data/orandea/test/aaa", "/data/orandea/impl/bbb", ctx)
    '../../impl/bbb'
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from assegai_util.errors import InvalidPathTypeError, MissingPathFieldError

from .context import ResolutionContext
from .parsed import ParsedPath, ParseMode
from .policy import POSIX, PlatformPolicy

# pylint: disable=redefined-builtin

logger = logging.getLogger(__name__)

_ANY_SEPARATOR_RUN = re.compile(r"[\\/]+")
CURRENT = "."
PARENT = ".."


# --- Internal Helpers ---


def _require_str(argument: str, value: object) -> None:
    if not isinstance(value, str):
        raise InvalidPathTypeError(argument, value)


def _unify(path: str, policy: PlatformPolicy) -> str:
    """Replace every run of ``/`` or ``\\`` with a single policy separator."""
    return _ANY_SEPARATOR_RUN.sub(lambda _: policy.separator, path)


def _collapse(path: str, policy: PlatformPolicy) -> str:
    """Drop ``.`` and empty segments and fold ``..`` into its parent.

    A ``..`` with nothing left to pop is discarded, so absolute paths clamp
    at their root. Whitespace around a dot segment is ignored; every other
    segment is kept verbatim.
    """
    root, rest = policy.split_root(path)
    retained: list[str] = []
    for segment in rest.split(policy.separator):
        if not segment or segment.strip() == CURRENT:
            continue
        if segment.strip() == PARENT:
            if retained:
                retained.pop()
            continue
        retained.append(segment)
    return root + policy.separator.join(retained)


def _parent(path: str, policy: PlatformPolicy) -> str:
    root, rest = policy.split_root(path)
    head, _, _ = rest.rpartition(policy.separator)
    return root + head


def _split_last(path: str, policy: PlatformPolicy) -> tuple[str, str]:
    """Split a normalized path into ``(dir, base)``."""
    root, rest = policy.split_root(path)
    if policy.separator in rest:
        head, _, base = rest.rpartition(policy.separator)
        return root + head, base
    if root:
        return root, rest
    return CURRENT, rest


def _parse(path: str, ctx: ResolutionContext) -> ParsedPath:
    dir, base = _split_last(normalize(path, ctx), ctx.policy)
    dot = base.rfind(".")
    if 0 < dot < len(base) - 1:
        return ParsedPath(dir, base, filename=base[:dot], extension=base[dot + 1 :])
    return ParsedPath(dir, base, filename=base, extension="")


def _part(parts: Any, name: str) -> str | None:
    if isinstance(parts, Mapping):
        value = parts.get(name)
    else:
        value = getattr(parts, name, None)
    if value is not None:
        _require_str(name, value)
    return value


# --- Core Operations ---


def normalize(path: str, ctx: ResolutionContext) -> str:
    """Canonicalize separators and fold ``.``/``..`` segments.

    ``"."`` and ``"./"`` stand for the current directory and ``".."`` and
    ``"../"`` for its parent, ignoring surrounding whitespace; both are taken
    from *ctx*. Nothing touches the filesystem.

    Args:
        path: Path to normalize. Either separator is accepted.
        ctx: Current directory and platform policy.

    Returns:
        str: The path with single separators, no ``.`` segments, no trailing
        separator (unless it is a root) and ``..`` folded away.

    Raises:
        InvalidPathTypeError: If *path* is not a string.
    """
    _require_str("path", path)
    policy = ctx.policy
    unified = _unify(path, policy)
    shorthand = unified.strip()

    if shorthand in (PARENT, PARENT + policy.separator):
        logger.debug("normalize %r: parent of %r", path, ctx.current_directory)
        current = _collapse(_unify(ctx.current_directory, policy), policy)
        return _parent(current, policy)
    if shorthand in (CURRENT, CURRENT + policy.separator):
        logger.debug(
            "normalize %r: current directory %r", path, ctx.current_directory
        )
        return _collapse(_unify(ctx.current_directory, policy), policy)

    return _collapse(unified, policy)


def join(*fragments: str, policy: PlatformPolicy = POSIX) -> str:
    """Join path fragments with the policy separator.

    Empty fragments are skipped, runs of separators collapse to one and a
    single trailing separator is removed unless the result is a root.

    Raises:
        InvalidPathTypeError: If any fragment is not a string.
    """
    for index, fragment in enumerate(fragments):
        _require_str(f"fragments[{index}]", fragment)

    joined = policy.separator.join(fragment for fragment in fragments if fragment)
    joined = policy.separator_pattern.sub(lambda _: policy.separator, joined)
    if joined.endswith(policy.separator) and not policy.is_root(joined):
        joined = joined[: -len(policy.separator)]
    return joined


def resolve(*fragments: str, ctx: ResolutionContext) -> str:
    """Resolve a sequence of fragments into an absolute, normalized path.

    Fragments are processed right to left and prepended to an accumulator
    until an absolute fragment is met. If none is, the accumulator is resolved
    against ``ctx.current_directory``.

    Called with no fragments, returns ``ctx.current_directory`` as given.

    Raises:
        InvalidPathTypeError: If any fragment is not a string.
    """
    for index, fragment in enumerate(fragments):
        _require_str(f"fragments[{index}]", fragment)

    if not fragments:
        return ctx.current_directory

    policy = ctx.policy
    accumulated = ""
    for fragment in reversed(fragments):
        accumulated = join(fragment, accumulated, policy=policy)
        if policy.is_absolute(fragment):
            logger.debug("resolve: stopped at absolute fragment %r", fragment)
            return normalize(accumulated, ctx)

    normalized = normalize(accumulated, ctx)
    if policy.is_absolute(normalized):
        return normalized
    return normalize(join(ctx.current_directory, accumulated, policy=policy), ctx)


def relative(from_path: str, to_path: str, ctx: ResolutionContext) -> str:
    """Return the path leading from *from_path* to *to_path*.

    Both paths are resolved first. The result climbs out of *from_path* with
    ``..`` segments as far as the common prefix and then descends into
    *to_path*. Identical paths give ``""``. Paths on different roots (Windows
    drives) have no relative form, so the resolved *to_path* is returned.
    Under a case-insensitive policy (Windows) roots and segments compare
    without regard to case; the descent keeps the spelling of *to_path*.

    Raises:
        InvalidPathTypeError: If either path is not a string.
    """
    _require_str("from_path", from_path)
    _require_str("to_path", to_path)

    policy = ctx.policy
    source = resolve(from_path, ctx=ctx)
    target = resolve(to_path, ctx=ctx)
    if policy.comparable(source) == policy.comparable(target):
        return ""

    source_root, source_rest = policy.split_root(source)
    target_root, target_rest = policy.split_root(target)
    if policy.comparable(source_root) != policy.comparable(target_root):
        return target

    source_parts = [part for part in source_rest.split(policy.separator) if part]
    target_parts = [part for part in target_rest.split(policy.separator) if part]

    shared = 0
    for source_part, target_part in zip(source_parts, target_parts):
        if policy.comparable(source_part) != policy.comparable(target_part):
            break
        shared += 1

    climb = [PARENT] * (len(source_parts) - shared)
    return policy.separator.join(climb + target_parts[shared:])


# --- Structure ---


def parse(
    path: str, ctx: ResolutionContext, mode: ParseMode = ParseMode.RECORD
) -> ParsedPath | dict[str, str]:
    """Split a path into directory, base name, file name and extension.

    The path is normalized first. The extension is the text after the last
    ``.`` of the base name, provided that dot is neither the first nor the
    last character; it is returned without the dot.

    Args:
        path: Path to split.
        ctx: Current directory and platform policy.
        mode: `ParseMode.RECORD` for a `ParsedPath`, `ParseMode.MAPPING` for a
            plain dict with the same keys.

    Returns:
        ParsedPath | dict[str, str]: A fresh value on every call.

    Example:
        >>> parse("/my/name/is/kang.jpg", ctx)
        ParsedPath(dir='/my/name/is', base='kang.jpg', filename='kang', extension='jpg')
    """
    parsed = _parse(path, ctx)
    if mode is ParseMode.MAPPING:
        return parsed.as_dict()
    return parsed


def format(
    parts: ParsedPath | Mapping[str, str] | Any, policy: PlatformPolicy = POSIX
) -> str:
    """Build a path from parsed components; the inverse of `parse`.

    *parts* may be a `ParsedPath`, a mapping or any object with attributes.
    ``dir`` is required; a ``dir`` of ``"."`` (what `parse` reports for a
    bare name) adds no prefix. ``base`` is required unless ``filename`` (with
    an optional ``extension``, leading dot allowed) is given instead.

    Raises:
        MissingPathFieldError: If ``dir`` or ``base`` cannot be determined.
        InvalidPathTypeError: If a present component is not a string.
    """
    if (dir := _part(parts, "dir")) is None:
        raise MissingPathFieldError("dir")

    if (base := _part(parts, "base")) is None:
        if (filename := _part(parts, "filename")) is None:
            raise MissingPathFieldError("base")
        extension = (_part(parts, "extension") or "").removeprefix(".")
        base = f"{filename}.{extension}" if extension else filename

    if dir == CURRENT:
        return join(base, policy=policy)
    return join(dir, base, policy=policy)


def basename(path: str, ctx: ResolutionContext) -> str:
    """Return the last segment of the normalized path."""
    return _split_last(normalize(path, ctx), ctx.policy)[1]


def dirname(path: str, ctx: ResolutionContext) -> str:
    """Return everything before the last segment (``"."`` if nothing)."""
    return _split_last(normalize(path, ctx), ctx.policy)[0]


def extension(path: str, ctx: ResolutionContext) -> str:
    """Return the extension of the base name, without the leading dot."""
    return _parse(path, ctx).extension


# --- Platform ---


def is_absolute(path: str, policy: PlatformPolicy = POSIX) -> bool:
    """Return True if *path* is absolute under *policy*."""
    _require_str("path", path)
    return policy.is_absolute(path)


def delimiter(policy: PlatformPolicy = POSIX) -> str:
    """Return the character separating path segments."""
    return policy.separator


def sep(policy: PlatformPolicy = POSIX) -> str:
    """Return the character separating entries of a search path."""
    return policy.list_separator


def windows(path: str) -> str:
    """Rewrite forward slashes as backslashes."""
    _require_str("path", path)
    return path.replace("/", "\\")


def posix(path: str) -> str:
    """Rewrite backslashes as forward slashes."""
    _require_str("path", path)
    return path.replace("\\", "/")
