"""Time formatting utilities used by the logger."""

import datetime


def time_iso8601() -> str:
    """Return the current UTC time formatted as ``YYYY-MM-DDTHH:MM:SS.fffZ``."""

    dt = datetime.datetime.now(datetime.timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
