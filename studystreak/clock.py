"""Time and date helpers: local-date bucketing and elapsed minutes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timezone, tzinfo
from pathlib import Path

from studystreak.workspace import get_user_timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(ts: datetime) -> datetime:
    """Normalize to an aware UTC datetime; naive values are taken as UTC."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def local_date(ts: datetime, tz: tzinfo | None = None) -> date:
    """Calendar date of *ts* in *tz* (system local zone when None)."""
    return as_utc(ts).astimezone(tz).date()


def _total_minutes(start: datetime, end: datetime) -> float:
    return (as_utc(end) - as_utc(start)).total_seconds() / 60


def rounded_minutes(start: datetime, end: datetime) -> int:
    """Duration rounded to the nearest minute, clamped at zero."""
    return max(0, round(_total_minutes(start, end)))


def elapsed_minutes(start: datetime, now: datetime | None = None) -> int:
    """Whole minutes elapsed since *start*, truncated, clamped at zero."""
    if now is None:
        now = utc_now()
    return max(0, math.floor(_total_minutes(start, now)))


@dataclass(frozen=True)
class Clock:
    """Source of "now" and of the zone used for local dates.

    ``fixed`` pins the current instant (tests); ``tz=None`` means the
    system local zone.
    """

    tz: tzinfo | None = None
    fixed: datetime | None = None

    @classmethod
    def for_workspace(cls, root: Path | None = None) -> Clock:
        return cls(tz=get_user_timezone(root))

    def now(self) -> datetime:
        if self.fixed is not None:
            return as_utc(self.fixed)
        return utc_now()

    def today(self) -> date:
        return local_date(self.now(), self.tz)

    def local_date(self, ts: datetime) -> date:
        return local_date(ts, self.tz)
