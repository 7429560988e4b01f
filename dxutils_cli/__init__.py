"""Command-line front end for dx-utils."""

import logging
import sys

from dxutils.config import FormatterConfig


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: FormatterConfig | None = None
) -> None:
    """Route dxutils logs to a log file and to stderr.

    Stdout carries command results and styled messages, so log records never
    go there. The file under config.log_dir gets every record with a
    timestamp; stderr gets WARNING and up unless -v or -q changes it.

    Args:
        verbose: Lower the stderr threshold to INFO
        quiet: Raise the stderr threshold to ERROR
        config: Source of log_dir and log_filename (read from env if None)
    """
    if config is None:
        config = FormatterConfig.from_env()

    config.log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(config.log_dir / config.log_filename)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    file_handler.setLevel(logging.DEBUG)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    if quiet:
        stderr_handler.setLevel(logging.ERROR)
    elif verbose:
        stderr_handler.setLevel(logging.INFO)
    else:
        stderr_handler.setLevel(logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # The callback runs once per invocation; CliRunner reuses the process
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.addHandler(file_handler)
    root_logger.addHandler(stderr_handler)


def main() -> None:
    """Entry point for the dxutils console script."""
    from dxutils_cli.parser import main as run

    run()


__all__ = ["main", "setup_logging"]
