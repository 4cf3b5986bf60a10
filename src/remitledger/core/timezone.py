"""Timestamp utilities. All ledger timestamps are normalized to UTC."""

from datetime import date, datetime
from typing import Union

import pytz
from dateutil import parser as date_parser

from remitledger.core.exceptions import InvalidTimestampError

UTC = pytz.UTC


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC; naive values are assumed to already be UTC."""
    if dt.tzinfo is None:
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def parse_timestamp(value: Union[str, datetime]) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware UTC datetime.

    Date-only strings resolve to midnight UTC. Anything that cannot be
    parsed raises InvalidTimestampError.
    """
    if isinstance(value, datetime):
        return to_utc(value)
    if not isinstance(value, str) or not value.strip():
        raise InvalidTimestampError(value)
    try:
        dt = date_parser.isoparse(value.strip())
    except (ValueError, OverflowError) as exc:
        raise InvalidTimestampError(value) from exc
    return to_utc(dt)


def month_key(value: Union[str, date, datetime]) -> str:
    """Return the YYYY-MM bucket for a date, datetime or ISO string."""
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y-%m")
    return value[:7]
