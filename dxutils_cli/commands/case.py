"""Convert text between naming cases."""

from enum import Enum

import typer
from typing_extensions import Annotated

from dxutils import strings
from dxutils.exceptions import UnsupportedFormatError
from dxutils_cli.display import ResultRenderer


class CaseChoice(str, Enum):
    camel = "camel"
    pascal = "pascal"
    lower_split = "lower-split"
    upper_split = "upper-split"
    camel_to_pascal = "camel-to-pascal"
    pascal_to_camel = "pascal-to-camel"
    sentence = "sentence"
    title = "title"


def convert_case(text: str, to: CaseChoice, splitter: str | None = None) -> str:
    """Apply the conversion named by `to`.

    The splitter default depends on the direction: "_" when joining words
    (camel, pascal), "" when splitting them.
    """
    if to is CaseChoice.camel:
        return strings.convert_lower_case_to_camel_case(text, _or(splitter, "_"))
    if to is CaseChoice.pascal:
        return strings.convert_lower_case_to_pascal_case(text, _or(splitter, "_"))
    if to is CaseChoice.lower_split:
        return strings.get_camel_case_splitted_to_lower_case(text, _or(splitter, ""))
    if to is CaseChoice.upper_split:
        return strings.get_camel_case_splitted_to_upper_case(text, _or(splitter, ""))
    if to is CaseChoice.camel_to_pascal:
        return strings.convert_camel_case_to_pascal_case(text)
    if to is CaseChoice.pascal_to_camel:
        return strings.convert_pascal_case_to_camel_case(text)
    if to is CaseChoice.sentence:
        return strings.get_sentence_case(text)
    if to is CaseChoice.title:
        return strings.get_sentence_case(text, capitalise_every_word=True)
    raise UnsupportedFormatError(f"Unsupported case conversion: {to}")


def _or(value: str | None, default: str) -> str:
    return default if value is None else value


def case(
    text: Annotated[str, typer.Argument(help="Text to convert")],
    to: Annotated[
        CaseChoice,
        typer.Option("--to", "-t", help="Target case"),
    ] = CaseChoice.camel,
    splitter: Annotated[
        str | None,
        typer.Option("--splitter", "-s", help="Word separator"),
    ] = None,
) -> None:
    """Convert TEXT between camelCase, PascalCase, snake/kebab and sentence case."""
    ResultRenderer().render_value(convert_case(text, to, splitter))
