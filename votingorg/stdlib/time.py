from datetime import datetime as dt
from datetime import timezone
import time

import iso8601

from votingorg import config
from votingorg.exceptions import InvalidTimestamp

SECONDS_IN_MINUTE = 60
SECONDS_IN_HOUR = 3600
SECONDS_IN_DAY = 86400
SECONDS_IN_WEEK = 604800


def get_raw_seconds(weeks=0, days=0, hours=0, minutes=0, seconds=0):
    m_sec = minutes * SECONDS_IN_MINUTE
    h_sec = hours * SECONDS_IN_HOUR
    d_sec = days * SECONDS_IN_DAY
    w_sec = weeks * SECONDS_IN_WEEK

    return seconds + m_sec + h_sec + d_sec + w_sec


def to_timestamp(value) -> int:
    """
    Normalizes an int, a datetime or an ISO 8601 string into unsigned 64-bit
    seconds since the epoch. Naive datetimes are taken as UTC.
    """
    if isinstance(value, bool):
        raise InvalidTimestamp(value=value)

    if isinstance(value, dt):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        seconds = int(value.timestamp())

    elif isinstance(value, int):
        seconds = value

    elif isinstance(value, str):
        try:
            parsed = iso8601.parse_date(value, default_timezone=timezone.utc)
        except iso8601.ParseError:
            raise InvalidTimestamp(value=value)
        seconds = int(parsed.timestamp())

    else:
        raise InvalidTimestamp(value=value)

    if not 0 <= seconds <= config.U64_MAX:
        raise InvalidTimestamp(value=value)

    return seconds


def now() -> int:
    return int(time.time())
