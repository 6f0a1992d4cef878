"""Calendar date strings that seed the daily puzzle."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.constants import DATE_FORMAT, DEFAULT_TIMEZONE
from .logger import get_logger


LOGGER = get_logger(__name__)


def daily_date_string(now: Optional[datetime] = None, tz_name: str = DEFAULT_TIMEZONE) -> str:
    """Return ``YYYY-MM-DD`` for ``now`` as seen in ``tz_name``.

    Naive datetimes are taken as UTC. An unknown zone falls back to the
    machine's local date.
    """

    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    try:
        zone = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        LOGGER.warning("Unknown time zone %r; using the local date", tz_name)
        return moment.astimezone().strftime(DATE_FORMAT)
    return moment.astimezone(zone).strftime(DATE_FORMAT)


def parse_date_string(value: str) -> str:
    """Validate a ``YYYY-MM-DD`` string and return it normalized."""
    try:
        parsed = datetime.strptime(value, DATE_FORMAT)
    except ValueError as exc:
        raise ValueError(f"date must be YYYY-MM-DD, got: {value}") from exc
    return parsed.strftime(DATE_FORMAT)
