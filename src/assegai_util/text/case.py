"""Case-conversion helpers.

Words are split on whitespace, hyphens, underscores and any other
non-word character; camelCase boundaries are split where noted.
"""

import re

from assegai_util.errors import ArgumentError

_WORD_BREAK = re.compile(r"[\s\-\W_]+")
_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_ALL_CAPS = re.compile(r"[A-Z]+")
_CLASS_DEFINITION = re.compile(r"class\s+([A-Za-z_][A-Za-z0-9_]*)")


def _require_str(value: object) -> str:
    if not isinstance(value, str):
        raise ArgumentError(f"Expected a str, got {type(value).__name__}.")
    return value


def _upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def _lower_first(word: str) -> str:
    return word[:1].lower() + word[1:]


def to_pascal(text: str) -> str:
    """Convert to PascalCase: ``"foo_bar"`` -> ``"FooBar"``.

    A single all-caps word is treated as one word: ``"FOOBAR"`` -> ``"Foobar"``.
    """
    if _ALL_CAPS.fullmatch(_require_str(text)):
        return text.lower().capitalize()
    return "".join(_upper_first(word) for word in _WORD_BREAK.split(text))


def to_camel(text: str) -> str:
    """Convert to camelCase: ``"foo-bar"`` -> ``"fooBar"``."""
    return _lower_first(to_pascal(text))


def _delimit(text: str, delimiter: str) -> str:
    output = _WORD_BREAK.sub(delimiter, _require_str(text))
    output = _CAMEL_BOUNDARY.sub(rf"\1{delimiter}\2", output)
    return output.lower()


def to_snake(text: str) -> str:
    """Convert to snake_case: ``"fooBar"`` -> ``"foo_bar"``."""
    return _delimit(text, "_")


def to_kebab(text: str) -> str:
    """Convert to kebab-case: ``"foo bar"`` -> ``"foo-bar"``."""
    return _delimit(text, "-")


def to_kebab_ucfirst(text: str) -> str:
    """Kebab-case with the first letter capitalized: ``"Foo-bar"``."""
    return _upper_first(to_kebab(text))


def to_title(text: str) -> str:
    """Capitalize each word and join with spaces: ``"foo_bar"`` -> ``"Foo Bar"``."""
    words = [word for word in _WORD_BREAK.split(_require_str(text)) if word]
    return " ".join(_upper_first(word) for word in words)


def to_sentence(text: str) -> str:
    """Lowercase everything, then capitalize the first letter."""
    return _upper_first(_require_str(text).lower())


def extract_class_name(source: str) -> str | None:
    """Return the name in the first ``class Name`` definition of *source*.

    Returns:
        str | None: The class name, or None when *source* defines no class.
    """
    if (match := _CLASS_DEFINITION.search(_require_str(source))) is None:
        return None
    return match.group(1)
