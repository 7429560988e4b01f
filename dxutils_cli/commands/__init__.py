"""CLI commands package."""

from dxutils_cli.commands.case import case
from dxutils_cli.commands.date import date
from dxutils_cli.commands.demo import demo
from dxutils_cli.commands.message import message
from dxutils_cli.commands.random_string import random_string
from dxutils_cli.commands.rounding import round_value
from dxutils_cli.commands.validate import validate

__all__ = [
    "case",
    "date",
    "demo",
    "message",
    "random_string",
    "round_value",
    "validate",
]
