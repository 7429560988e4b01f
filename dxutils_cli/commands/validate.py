"""Run validators against one or more values."""

import json
from enum import Enum

import typer
from typing_extensions import Annotated

from dxutils.validators import is_json_string, is_numeric, validate_email_address
from dxutils_cli.display import ResultRenderer


class ValidatorChoice(str, Enum):
    email = "email"
    json = "json"
    numeric = "numeric"


VALIDATORS = {
    ValidatorChoice.email: validate_email_address,
    ValidatorChoice.json: is_json_string,
    ValidatorChoice.numeric: is_numeric,
}


def validate(
    kind: Annotated[ValidatorChoice, typer.Argument(help="Validator to run")],
    values: Annotated[list[str], typer.Argument(help="Values to check")],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print results as a JSON object"),
    ] = False,
) -> None:
    """Check each VALUE with the KIND validator."""
    validator = VALIDATORS[kind]
    results = [(value, validator(value)) for value in values]

    renderer = ResultRenderer()
    if as_json:
        renderer.render_value(json.dumps(dict(results)))
    else:
        renderer.render_validation(kind.value, results)
