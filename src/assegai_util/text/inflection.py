"""English pluralization backed by the `inflect` library."""

from functools import lru_cache

import inflect

from assegai_util.errors import ArgumentError

_INDEFINITE_ARTICLES = {"a", "an"}


@lru_cache(maxsize=1)
def _engine() -> inflect.engine:
    return inflect.engine()


def _require_word(word: object) -> str:
    if not isinstance(word, str) or not word.strip():
        raise ArgumentError("Expected a non-empty word.")
    return word


def pluralize(word: str) -> str:
    """Return the plural form of *word*: ``"category"`` -> ``"categories"``."""
    return _engine().plural(_require_word(word))


def singularize(word: str, article: str | None = None) -> str:
    """Return the singular form of *word*, optionally with an article.

    Words that are already singular are returned unchanged.

    Args:
        word: An English noun.
        article: ``"a"``/``"an"`` (any case) picks the correct indefinite
            article for the singular; any other value is prefixed as given.

    Example:
        >>> singularize("apples", article="a")
        'an apple'
    """
    engine = _engine()
    singular = engine.singular_noun(_require_word(word)) or word
    if not article:
        return singular
    if article.lower() in _INDEFINITE_ARTICLES:
        phrase = engine.a(singular)
        return phrase[:1].upper() + phrase[1:] if article[:1].isupper() else phrase
    return f"{article} {singular}"
