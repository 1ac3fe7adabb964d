"""Unit tests for `parse`, `format` and the structural accessors."""

from types import SimpleNamespace

import pytest

from assegai_util.errors import InvalidPathTypeError, MissingPathFieldError
from assegai_util.path import (
    POSIX,
    WINDOWS,
    ParsedPath,
    ParseMode,
    basename,
    delimiter,
    dirname,
    extension,
    format,
    is_absolute,
    normalize,
    parse,
    posix,
    sep,
    windows,
)

# pylint: disable=magic-value-comparison, redefined-builtin

# ============================================================================
#                                   parse
# ============================================================================


@pytest.mark.parametrize(
    "path, expected",
    [
        ("foo/bar", ParsedPath("foo", "bar", "bar", "")),
        ("/my/name/is/kang.jpg", ParsedPath("/my/name/is", "kang.jpg", "kang", "jpg")),
        ("bar.tar.gz", ParsedPath(".", "bar.tar.gz", "bar.tar", "gz")),
        (".bashrc", ParsedPath(".", ".bashrc", ".bashrc", "")),
        ("notes.", ParsedPath(".", "notes.", "notes.", "")),
        ("/", ParsedPath("/", "", "", "")),
        ("/foo", ParsedPath("/", "foo", "foo", "")),
        ("a//b/../c.txt/", ParsedPath("a", "c.txt", "c", "txt")),
        (".", ParsedPath("/home", "user", "user", "")),
    ],
)
def test_parse_posix(posix_ctx, path, expected):
    """Paths are normalized, then split at the last separator and last dot."""
    assert parse(path, posix_ctx) == expected


def test_parse_mapping_mode(posix_ctx):
    """MAPPING mode returns a plain dict with the same fields."""
    assert parse("/my/name/is/kang.jpg", posix_ctx, ParseMode.MAPPING) == {
        "dir": "/my/name/is",
        "base": "kang.jpg",
        "filename": "kang",
        "extension": "jpg",
    }


def test_parse_returns_a_fresh_value_each_call(posix_ctx):
    """Two parses of the same path are equal but not the same object."""
    first = parse("foo/bar", posix_ctx, ParseMode.MAPPING)
    second = parse("foo/bar", posix_ctx, ParseMode.MAPPING)
    assert first == second
    assert first is not second


@pytest.mark.parametrize(
    "path, expected",
    [
        ("C:\\dir\\file.txt", ParsedPath("C:\\dir", "file.txt", "file", "txt")),
        ("C:/file.txt", ParsedPath("C:\\", "file.txt", "file", "txt")),
        ("docs/readme.md", ParsedPath("docs", "readme.md", "readme", "md")),
    ],
)
def test_parse_windows(windows_ctx, path, expected):
    """Windows paths split on backslashes and keep the drive root."""
    assert parse(path, windows_ctx) == expected


# ============================================================================
#                                   format
# ============================================================================


@pytest.mark.parametrize(
    "parts",
    [
        {"dir": "foo", "base": "bar"},
        SimpleNamespace(dir="foo", base="bar"),
        ParsedPath("foo", "bar", "bar", ""),
        {"dir": "foo", "filename": "bar"},
        {"dir": "foo/", "base": "/bar"},
    ],
)
def test_format_accepts_records_mappings_and_objects(parts):
    """Any shape exposing dir and base (or filename) formats the same way."""
    assert format(parts) == "foo/bar"


def test_format_builds_base_from_filename_and_extension():
    """filename and extension stand in for a missing base."""
    assert format({"dir": "/home", "filename": "notes", "extension": "txt"}) == (
        "/home/notes.txt"
    )


@pytest.mark.parametrize("extension", ["txt", ".txt"])
def test_format_accepts_extension_with_or_without_dot(extension):
    """A single leading dot on the extension is not doubled."""
    assert format({"dir": "a", "filename": "b", "extension": extension}) == "a/b.txt"


@pytest.mark.parametrize(
    "parts, expected",
    [
        ({"dir": ".", "base": "foo"}, "foo"),
        ({"dir": ".", "filename": "foo", "extension": "md"}, "foo.md"),
        ({"dir": ".", "base": ""}, ""),
        ({"dir": "./sub", "base": "foo"}, "./sub/foo"),
    ],
)
def test_format_current_directory_adds_no_prefix(parts, expected):
    """A bare "." dir, as parse reports for a lone name, is dropped."""
    assert format(parts) == expected


@pytest.mark.parametrize("path", ["foo", "notes.txt", "/", "/foo", ""])
def test_format_inverts_parse_for_short_paths(posix_ctx, path):
    assert format(parse(path, posix_ctx)) == normalize(path, posix_ctx)


def test_format_prefers_base_over_filename():
    """An explicit base wins over filename/extension."""
    parts = {"dir": "/", "base": "a.md", "filename": "b", "extension": "txt"}
    assert format(parts) == "/a.md"


def test_format_windows():
    """The policy decides the separator placed between dir and base."""
    assert format({"dir": "C:\\", "base": "x.txt"}, policy=WINDOWS) == "C:\\x.txt"


@pytest.mark.parametrize(
    "parts, field",
    [
        ({"base": "bar"}, "dir"),
        ({"dir": None, "base": "bar"}, "dir"),
        ({"dir": "foo"}, "base"),
        ({"dir": "foo", "extension": "txt"}, "base"),
        (SimpleNamespace(base="bar"), "dir"),
    ],
)
def test_format_names_the_missing_field(parts, field):
    """Missing dir/base raise an ArgumentError naming the field."""
    with pytest.raises(MissingPathFieldError, match=f"'{field}'") as excinfo:
        format(parts)
    assert excinfo.value.field == field


def test_format_rejects_non_string_parts():
    """Present but non-string components are type errors, not coerced."""
    with pytest.raises(InvalidPathTypeError, match="'dir'"):
        format({"dir": 42, "base": "bar"})


# ============================================================================
#                           structural accessors
# ============================================================================


def test_basename_dirname_extension(posix_ctx):
    """Accessors return single fields of the parsed path."""
    assert basename("foo/bar", posix_ctx) == "bar"
    assert dirname("foo/bar", posix_ctx) == "foo"
    assert dirname("bar", posix_ctx) == "."
    assert extension("foo/bar.php", posix_ctx) == "php"
    assert extension("foo/bar", posix_ctx) == ""


@pytest.mark.parametrize(
    "path, posix_expected, windows_expected",
    [
        ("/foo/bar", True, True),
        ("foo/bar", False, False),
        ("\\foo", False, True),
        ("C:\\x", False, True),
        ("c:/x", False, True),
        ("C:x", False, False),
        ("", False, False),
    ],
)
def test_is_absolute_dispatches_through_policy(path, posix_expected, windows_expected):
    """Each policy answers independently of the host operating system."""
    assert is_absolute(path, POSIX) is posix_expected
    assert is_absolute(path, WINDOWS) is windows_expected


def test_is_absolute_rejects_non_strings():
    """Type errors surface instead of a silent False."""
    with pytest.raises(InvalidPathTypeError):
        is_absolute(None, POSIX)


def test_separators():
    """delimiter() separates segments, sep() separates search-path entries."""
    assert delimiter(POSIX) == "/"
    assert delimiter(WINDOWS) == "\\"
    assert sep() == ":"
    assert sep(WINDOWS) == ";"


def test_separator_converters():
    """windows() and posix() swap slashes without normalizing."""
    assert windows("foo/bar") == "foo\\bar"
    assert windows("/a//b/") == "\\a\\\\b\\"
    assert posix("foo\\bar") == "foo/bar"
