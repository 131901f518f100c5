"""Utility functions for date operations."""

import logging
from datetime import datetime, timezone

import dateutil.parser

logger = logging.getLogger("mcp-jira")

# Timestamp layout Jira expects for worklog ``started`` values
JIRA_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S.{millis}%z"


def parse_date(date_str: str | None, format_string: str = "%Y-%m-%d") -> str:
    """
    Parse a date string returned by Jira into the given format.

    Accepts epoch milliseconds (digits only) and anything ``dateutil`` can
    parse (ISO 8601, RFC 3339, ...).

    Args:
        date_str: Date string
        format_string: The output format (default: "%Y-%m-%d")

    Returns:
        Formatted date, empty string for empty input, or the input unchanged
        if it cannot be parsed
    """
    if not date_str:
        return ""

    try:
        if date_str.isdigit():
            date = datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
        else:
            date = dateutil.parser.parse(date_str)
        return date.strftime(format_string)
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug(f"Could not parse date '{date_str}': {e}")

    return date_str


def format_jira_datetime(value: str | datetime | None = None) -> str:
    """
    Format a timestamp the way Jira's worklog API requires.

    Jira rejects plain ISO strings such as ``2024-01-01T10:00:00Z``; it wants
    ``2024-01-01T10:00:00.000+0000``. Naive datetimes are taken as UTC.

    Args:
        value: Datetime, parseable string, or None for the current time

    Returns:
        Timestamp as ``yyyy-MM-dd'T'HH:mm:ss.SSSZ``
    """
    if value is None:
        moment = datetime.now(timezone.utc)
    elif isinstance(value, datetime):
        moment = value
    else:
        moment = dateutil.parser.parse(value)

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)

    millis = f"{moment.microsecond // 1000:03d}"
    return moment.strftime(JIRA_DATETIME_FORMAT.format(millis=millis))
