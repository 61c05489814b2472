"""Typed dataclasses for the StudyStreak data model.

All persisted models use from_dict/to_dict for JSON serialization.
camelCase in JSON is mapped to snake_case in Python. Dates are stored
as YYYY-MM-DD, timestamps as ISO-8601 in UTC.

from_dict is strict about required fields: a missing or malformed value
raises KeyError, TypeError or ValueError, which the store treats as a
corrupt document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from studystreak.clock import as_utc


# ── Primitives ────────────────────────────────────────────────


def parse_date(value: Any) -> date:
    if not isinstance(value, str):
        raise TypeError(f"Expected a YYYY-MM-DD string, got {value!r}")
    return date.fromisoformat(value.strip())


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 timestamp; 'Z' suffix accepted, naive means UTC."""
    if not isinstance(value, str):
        raise TypeError(f"Expected an ISO-8601 timestamp, got {value!r}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return as_utc(datetime.fromisoformat(text))


def format_timestamp(ts: datetime) -> str:
    return as_utc(ts).isoformat()


# ── Goals ─────────────────────────────────────────────────────


@dataclass
class Goal:
    title: str
    date: date
    done: bool = False

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Goal:
        title = d["title"]
        if not isinstance(title, str):
            raise TypeError(f"Goal title must be a string, got {title!r}")
        if not title.strip():
            raise ValueError("Goal title is empty")
        done = d.get("done", False)
        if not isinstance(done, bool):
            raise TypeError(f"Goal done flag must be a boolean, got {done!r}")
        return cls(title=title, date=parse_date(d["date"]), done=done)

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "date": self.date.isoformat(), "done": self.done}


# ── Sessions ──────────────────────────────────────────────────


@dataclass(frozen=True)
class CompletedSession:
    """A finished study interval, bucketed by the local date it started on."""

    date: date
    minutes: int

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> CompletedSession:
        minutes = d["minutes"]
        if isinstance(minutes, bool) or not isinstance(minutes, int):
            raise TypeError(f"Session minutes must be an integer, got {minutes!r}")
        if minutes < 0:
            raise ValueError(f"Session minutes must be non-negative, got {minutes}")
        return cls(date=parse_date(d["date"]), minutes=minutes)

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date.isoformat(), "minutes": self.minutes}


@dataclass
class ActiveSession:
    """The single in-progress session. Running while ``end`` is None."""

    start: datetime
    end: datetime | None = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> ActiveSession:
        end = d.get("end")
        return cls(
            start=parse_timestamp(d["start"]),
            end=parse_timestamp(end) if end is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": format_timestamp(self.start),
            "end": format_timestamp(self.end) if self.end is not None else None,
        }


# ── App state ─────────────────────────────────────────────────


@dataclass
class AppState:
    """The whole persisted document."""

    sessions: list[CompletedSession] = field(default_factory=list)
    goals: list[Goal] = field(default_factory=list)
    active_session: ActiveSession | None = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> AppState:
        if not d:
            return cls()
        if not isinstance(d, dict):
            raise TypeError(f"Expected a JSON object, got {type(d).__name__}")
        active = d.get("activeSession")
        return cls(
            sessions=[CompletedSession.from_dict(s) for s in (d.get("sessions") or [])],
            goals=[Goal.from_dict(g) for g in (d.get("goals") or [])],
            active_session=ActiveSession.from_dict(active) if active else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "sessions": [s.to_dict() for s in self.sessions],
            "goals": [g.to_dict() for g in self.goals],
            "activeSession": self.active_session.to_dict() if self.active_session else None,
        }


# ── Reports ───────────────────────────────────────────────────


@dataclass
class TodaySummary:
    date: date
    minutes: int = 0
    goals_done: int = 0
    goals_total: int = 0
    active_minutes: int | None = None


@dataclass
class DayTotal:
    date: date
    minutes: int = 0


@dataclass
class WeekSummary:
    days: list[DayTotal] = field(default_factory=list)
    streak: int = 0
