"""Epoch → display timestamp for the report's DATE_TIME field."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

DISPLAY_FORMAT = "%m/%d/%Y %H:%M:%S"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def format_epoch(milliseconds: int) -> str:
    """Render epoch milliseconds as ``MM/DD/YYYY HH:MM:SS`` (UTC)."""
    try:
        moment = _EPOCH + timedelta(milliseconds=int(milliseconds))
    except (OverflowError, ValueError, TypeError):
        moment = _EPOCH
    return moment.strftime(DISPLAY_FORMAT)
