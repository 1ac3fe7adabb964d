"""Structured result of `parse`."""

from dataclasses import asdict, dataclass
from enum import Enum


class ParseMode(Enum):
    """Output shape of `parse`."""

    RECORD = "record"
    MAPPING = "mapping"


@dataclass(frozen=True)
class ParsedPath:
    """Components of a normalized path.

    ``base`` is ``filename`` when ``extension`` is empty, otherwise
    ``filename + "." + extension``.
    """

    dir: str
    base: str
    filename: str
    extension: str

    def as_dict(self) -> dict[str, str]:
        """Return the components as a plain mapping."""
        return asdict(self)
