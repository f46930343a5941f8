# tracker/utils.py
from datetime import datetime, timezone

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

def utc_timestamp(moment: datetime | None = None) -> str:
    """
    Fixed-width UTC text (e.g. 2024-01-01T00:00:00Z), sortable as a string.
    Naive datetimes are treated as UTC already.
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(TIMESTAMP_FORMAT)
