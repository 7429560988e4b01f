"""Configuration for dx-utils."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError

from dxutils.constants import (
    DEFAULT_RANDOM_STRING_LENGTH,
    DEFAULT_RULE_CHARACTER,
    DEFAULT_TERMINAL_WIDTH,
)
from dxutils.exceptions import ConfigurationError

# Integer settings: environment variable -> field name
_INT_ENV_VARS = {
    "DXUTILS_TERMINAL_WIDTH": "terminal_width",
    "DXUTILS_FALLBACK_WIDTH": "fallback_width",
    "DXUTILS_RANDOM_LENGTH": "random_string_length",
}


class FormatterConfig(BaseModel):
    """Formatter and helper configuration with Pydantic validation."""

    # Console output
    terminal_width: int | None = Field(default=None, ge=1)
    fallback_width: int = Field(default=DEFAULT_TERMINAL_WIDTH, ge=1)
    rule_character: str = Field(
        default=DEFAULT_RULE_CHARACTER, min_length=1, max_length=1
    )

    # Helpers
    random_string_length: int = Field(default=DEFAULT_RANDOM_STRING_LENGTH, ge=0)

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="dxutils.log")

    @classmethod
    def from_env(cls) -> "FormatterConfig":
        """Load configuration from environment variables and .env file."""
        # Search from the working directory, not this package
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        for env_key, field_name in _INT_ENV_VARS.items():
            if env_key in os.environ:
                try:
                    config_dict[field_name] = int(os.environ[env_key])
                except ValueError:
                    pass  # Keep default if invalid

        if "DXUTILS_RULE_CHARACTER" in os.environ:
            config_dict["rule_character"] = os.environ["DXUTILS_RULE_CHARACTER"]

        # Logging
        if "DXUTILS_LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["DXUTILS_LOG_DIR"])
        if "DXUTILS_LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["DXUTILS_LOG_FILENAME"]

        try:
            return cls(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
