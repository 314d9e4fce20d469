"""Injectable UTC clock and the date stamps derived from it."""

import math
from datetime import datetime, timedelta, timezone
from typing import Union

from loguru import logger

from .errors import ClockError, InvalidOption
from .models import DateParts


def _to_utc(instant: datetime) -> datetime:
    """Normalize to an aware UTC datetime; naive values are taken as UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def format_instant(instant: datetime) -> str:
    """
    Format as ISO8601 with millisecond precision and a Z suffix.

    Example: 2016-03-24T20:43:47.314Z
    """
    return _to_utc(instant).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Clock:
    """
    Source of the current UTC instant.

    Subclasses implement now(). get_date() and get_expiration() each read
    now() once; use FrozenClock to pin a single read across both.
    """

    def now(self) -> datetime:
        raise NotImplementedError

    def _utc_now(self) -> datetime:
        instant = self.now()
        if not isinstance(instant, datetime):
            raise ClockError(f"Clock returned {type(instant).__name__}, expected datetime")
        return _to_utc(instant)

    def get_date(self) -> DateParts:
        """Derive the YYYYMMDD stamp and the midnight X-Amz-Date value."""
        yymmdd = self._utc_now().strftime("%Y%m%d")
        return DateParts(yymmdd=yymmdd, amz_date=f"{yymmdd}T000000Z")

    def get_expiration(self, ttl_seconds: Union[int, float]) -> str:
        """
        Compute the policy expiration instant.

        Args:
            ttl_seconds: Seconds from now (must be > 0)

        Returns:
            ISO8601 string, e.g. 2024-01-02T03:09:05.000Z

        Raises:
            InvalidOption: If ttl_seconds <= 0 or the expiration is past
                datetime.max
        """
        try:
            seconds = float(ttl_seconds)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidOption("expiration_sec", f"must be a number: {e}") from e
        if math.isnan(seconds) or seconds <= 0:
            raise InvalidOption("expiration_sec", f"must be > 0, got {ttl_seconds}")
        instant = self._utc_now()
        try:
            expires_at = instant + timedelta(seconds=seconds)
        except OverflowError as e:
            raise InvalidOption(
                "expiration_sec", f"{ttl_seconds} seconds overflows the expiration date"
            ) from e
        return format_instant(expires_at)


class SystemClock(Clock):
    """Wall-clock time."""

    def now(self) -> datetime:
        try:
            return datetime.now(timezone.utc)
        except (OSError, OverflowError, ValueError) as e:
            logger.error(f"Failed to read system clock: {e}")
            raise ClockError(f"System clock unavailable: {e}") from e


class FrozenClock(Clock):
    """Clock fixed at a single instant (tests, and pinning one read per call)."""

    def __init__(self, instant: datetime):
        if not isinstance(instant, datetime):
            raise ClockError(f"FrozenClock needs a datetime, got {type(instant).__name__}")
        self._instant = _to_utc(instant)

    def now(self) -> datetime:
        return self._instant

    def __repr__(self) -> str:
        return f"FrozenClock({format_instant(self._instant)})"
