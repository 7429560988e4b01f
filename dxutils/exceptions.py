"""Exception hierarchy for dx-utils operations."""


class DxUtilsError(Exception):
    """Base exception for dx-utils operations."""

    pass


class DateFormatError(DxUtilsError):
    """Date input could not be interpreted."""

    pass


class UnsupportedFormatError(DxUtilsError):
    """Conversion or format not supported."""

    pass


class ConfigurationError(DxUtilsError):
    """Invalid configuration value."""

    pass
