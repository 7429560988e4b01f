"""Date strings for MySQL DATETIME columns."""

import logging
from datetime import date, datetime, timedelta, timezone

from dxutils.constants import MYSQL_DATE_FORMAT
from dxutils.exceptions import DateFormatError

logger = logging.getLogger(__name__)

DateInput = datetime | date | str | int | float | None


def _to_datetime(value: DateInput) -> datetime:
    """Coerce a date-like value to a timezone-aware datetime.

    Args:
        value: Datetime, date, ISO-8601 string, epoch milliseconds, or None
            for the current time.

    Returns:
        Timezone-aware datetime. Naive datetime objects and date-only strings
        are taken as UTC; date-time strings without an offset as local time.

    Raises:
        DateFormatError: If the value cannot be interpreted as a date.
    """
    if value is None:
        return datetime.now(timezone.utc)

    if isinstance(value, bool):
        raise DateFormatError(f"Cannot interpret {value!r} as a date")

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise DateFormatError(f"Timestamp out of range: {value}") from e

    if isinstance(value, str):
        text = value.strip().replace("Z", "+00:00")
        try:
            # Date-only strings fall through as dates and are read as UTC
            value = date.fromisoformat(text)
        except ValueError:
            try:
                value = datetime.fromisoformat(text)
            except ValueError as e:
                logger.debug(f"Rejected date string: {value!r}")
                raise DateFormatError(f"Invalid date string: {value!r}") from e
            if value.tzinfo is None:
                # Date-time strings without an offset are local wall time
                value = value.astimezone()

    # Handle date objects (no time component)
    if isinstance(value, date) and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)

    if not isinstance(value, datetime):
        raise DateFormatError(f"Cannot interpret {value!r} as a date")

    if value.tzinfo is None:
        # If no timezone, assume UTC
        value = value.replace(tzinfo=timezone.utc)
    return value


def get_date_string_from_current_date(
    current_date_utc: DateInput = None, seconds_to_add: float = 0
) -> str:
    """Return a UTC date string that can be used with MySQL.

    Args:
        current_date_utc: The date to format (defaults to now).
        seconds_to_add: Offset applied before formatting; may be negative.

    Returns:
        Date string in "YYYY-MM-DD HH:MM:SS" format.
    """
    current = _to_datetime(current_date_utc) + timedelta(seconds=seconds_to_add)
    return current.astimezone(timezone.utc).strftime(MYSQL_DATE_FORMAT)


def get_local_date_string_from_current_date(
    current_date_local: DateInput = None, seconds_to_add: float = 0
) -> str:
    """Return a local-timezone date string that can be used with MySQL.

    Args:
        current_date_local: The date to format (defaults to now).
        seconds_to_add: Offset applied before formatting; may be negative.

    Returns:
        Date string in "YYYY-MM-DD HH:MM:SS" format, in the local timezone.
    """
    current = _to_datetime(current_date_local) + timedelta(seconds=seconds_to_add)
    return current.astimezone().strftime(MYSQL_DATE_FORMAT)
