"""Per-invocation state for dxutils commands."""

from dxutils.config import FormatterConfig
from dxutils.formatting import ConsoleSink, set_default_sink


class CLIContext:
    """Verbosity flags plus the formatter config and sink for one run.

    Config and sink are built on first access, so commands that only print
    plain values never read the environment twice or touch the terminal.

    Usage:
        ctx = CLIContext()
        render("hello", sink=ctx.sink)
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: Show INFO logs on stderr
            quiet: Show only ERROR logs on stderr
        """
        self.verbose = verbose
        self.quiet = quiet

        self._config: FormatterConfig | None = None
        self._sink: ConsoleSink | None = None

    @property
    def config(self) -> FormatterConfig:
        """FormatterConfig read from DXUTILS_* variables and .env."""
        if self._config is None:
            self._config = FormatterConfig.from_env()
        return self._config

    @property
    def sink(self) -> ConsoleSink:
        """Stdout sink sized and ruled from config.

        The first access also makes it the formatter's shared sink, so the
        print_* helpers called without a sink write the same way.
        """
        if self._sink is None:
            self._sink = ConsoleSink(
                width=self.config.terminal_width,
                fallback_width=self.config.fallback_width,
                rule_character=self.config.rule_character,
            )
            set_default_sink(self._sink)
        return self._sink


# Installed by the typer callback in dxutils_cli.parser
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Return the context the typer callback installed for this run.

    Raises:
        RuntimeError: If called outside a dxutils command
    """
    if _ctx is None:
        raise RuntimeError("No dxutils context; call set_context() first.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Install ctx for the commands of this run."""
    global _ctx
    _ctx = ctx
