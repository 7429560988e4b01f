"""Display module for rendering CLI output.

It provides:
- console: Shared Rich console instance
- ResultRenderer: helper results and validation tables
"""

from dxutils_cli.display.console import console
from dxutils_cli.display.result_renderer import ResultRenderer

__all__ = [
    "console",
    "ResultRenderer",
]
