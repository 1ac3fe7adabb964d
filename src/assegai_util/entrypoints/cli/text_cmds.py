"""``assegai-util text``: case conversion and pluralization commands."""

import click
import click_extra as clickx

from assegai_util.errors import UtilError
from assegai_util.text import case, inflection

CONVERTERS = {
    "camel": case.to_camel,
    "pascal": case.to_pascal,
    "snake": case.to_snake,
    "kebab": case.to_kebab,
    "title": case.to_title,
    "sentence": case.to_sentence,
}


@click.group(cls=clickx.ExtraGroup)
def text() -> None:
    """String helpers."""


@text.command("case")
@click.argument("style", type=click.Choice(sorted(CONVERTERS), case_sensitive=False))
@click.argument("value")
def convert_case(style: str, value: str) -> None:
    """Convert VALUE to STYLE case."""
    click.echo(CONVERTERS[style.lower()](value))


@text.command()
@click.argument("word")
def plural(word: str) -> None:
    """Print the plural form of WORD."""
    try:
        click.echo(inflection.pluralize(word))
    except UtilError as e:
        raise click.BadParameter(str(e), param_hint="WORD") from e


@text.command()
@click.argument("word")
@click.option("--article", default=None, help="Prefix an article ('a' picks a/an).")
def singular(word: str, article: str | None) -> None:
    """Print the singular form of WORD."""
    try:
        click.echo(inflection.singularize(word, article=article))
    except UtilError as e:
        raise click.BadParameter(str(e), param_hint="WORD") from e
