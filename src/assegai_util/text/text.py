"""Immutable text value with case and inflection helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass

from assegai_util.errors import ArgumentError

from . import case, inflection

_TERMINAL_PUNCTUATION = ("!", "?", ".")


@dataclass(frozen=True)
class Text:
    """A string with convenience methods.

    Every operation returns a new value; a `Text` is never modified.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ArgumentError(
                f"Text wraps a str, got {type(self.value).__name__}."
            )

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    # --- Inspection ---

    def char_at(self, index: int) -> str | None:
        """Return the character at *index*, or None when out of range."""
        try:
            return self.value[index]
        except IndexError:
            return None

    def compare_to(self, other: Text | str, ignore_case: bool = False) -> int:
        """Return -1, 0 or 1 as this text sorts before, with or after *other*."""
        left, right = self.value, str(other)
        if ignore_case:
            left, right = left.casefold(), right.casefold()
        return (left > right) - (left < right)

    def equals(self, other: Text | str) -> bool:
        return self.compare_to(other) == 0

    def substring(self, offset: int = 0, length: int | None = None) -> str:
        """Return *length* characters starting at *offset*.

        A negative *offset* counts from the end. A negative *length* leaves
        that many characters off the end; None reads to the end.

        Example:
            >>> Text("assegai").substring(-3, 2)
            'ga'
        """
        size = len(self.value)
        start = offset if offset >= 0 else max(size + offset, 0)
        if length is None:
            return self.value[start:]
        end = start + length if length >= 0 else size + length
        return self.value[start:end]

    def contains(self, other: Text | str) -> bool:
        return str(other) in self.value

    def index_of(self, other: Text | str, start: int = 0) -> int | None:
        """Return the first index of *other* at or after *start*, or None."""
        index = self.value.find(str(other), start)
        return None if index == -1 else index

    def last_index_of(self, other: Text | str) -> int | None:
        """Return the last index of *other* (case-insensitive), or None."""
        index = self.value.casefold().rfind(str(other).casefold())
        return None if index == -1 else index

    def is_empty(self) -> bool:
        return not self.value

    def is_blank(self) -> bool:
        """Return True if empty or made of whitespace only."""
        return not self.value.strip()

    def ends_with_punctuation(self) -> bool:
        return self.value.endswith(_TERMINAL_PUNCTUATION)

    # --- Derivation ---

    def concat(self, other: Text | str) -> Text:
        return Text(self.value + str(other))

    def terminate(self, terminator: str = ".") -> Text:
        """Append *terminator* unless the text already ends with punctuation.

        Terminators other than ``.``, ``!`` and ``?`` fall back to ``.``.
        """
        if terminator not in _TERMINAL_PUNCTUATION:
            terminator = "."
        if self.ends_with_punctuation():
            return self
        return Text(self.value + terminator)

    def words(self) -> list[str]:
        return [word for word in re.split(r"[\W_]+", self.value) if word]

    @property
    def camel_case(self) -> str:
        return case.to_camel(self.value)

    @property
    def pascal_case(self) -> str:
        return case.to_pascal(self.value)

    @property
    def snake_case(self) -> str:
        return case.to_snake(self.value)

    @property
    def kebab_case(self) -> str:
        return case.to_kebab(self.value)

    @property
    def title_case(self) -> str:
        return case.to_title(self.value)

    @property
    def sentence_case(self) -> str:
        return case.to_sentence(self.value)

    def plural(self) -> str:
        return inflection.pluralize(self.value)

    def singular(self, article: str | None = None) -> str:
        return inflection.singularize(self.value, article=article)
