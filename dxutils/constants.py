"""Shared constants for dx-utils."""

# MySQL DATETIME textual layout
MYSQL_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Characters used by generate_random_string
RANDOM_STRING_CHARACTERS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
)
DEFAULT_RANDOM_STRING_LENGTH = 8

# Rule width used when the output is not a terminal
DEFAULT_TERMINAL_WIDTH = 80
DEFAULT_RULE_CHARACTER = "-"

# RFC 5322 approximation. Kept byte-for-byte, including the embedded newlines
# and control characters, so that matching tolerances stay the same.
EMAIL_PATTERN = (
    "(?:[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*|\"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21\x23-\x5b\x5d-\x7f]|\n"
    "\\\\[\x01-\x09\x0b\x0c\x0e-\x7f])*\")@(?:(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?|\n"
    "\\[(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\\.){3}(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?|[a-z0-9-]*[a-z0-9]:\n"
    "(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21-\x5a\x53-\x7f]|\\\\[\x01-\x09\x0b\x0c\x0e-\x7f])+)\\])"
)
