"""Summaries over recorded sessions and goals: today, last 7 days, streak."""

from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta

from studystreak.clock import Clock
from studystreak.goals import goals_on
from studystreak.models import AppState, DayTotal, TodaySummary, WeekSummary
from studystreak.sessions import running_minutes

WINDOW_DAYS = 7


def minutes_by_date(state: AppState) -> dict[date, int]:
    totals: dict[date, int] = defaultdict(int)
    for s in state.sessions:
        totals[s.date] += s.minutes
    return totals


def minutes_on(state: AppState, day: date) -> int:
    """Total recorded minutes for one calendar date."""
    return sum(s.minutes for s in state.sessions if s.date == day)


def today_summary(state: AppState, clock: Clock | None = None) -> TodaySummary:
    """Today's minutes and goal progress, plus the running session's live minutes."""
    if clock is None:
        clock = Clock()
    today = clock.today()
    todays = goals_on(state, today)
    return TodaySummary(
        date=today,
        minutes=minutes_on(state, today),
        goals_done=sum(1 for g in todays if g.done),
        goals_total=len(todays),
        active_minutes=running_minutes(state, clock),
    )


def compute_streak(days: list[DayTotal]) -> int:
    """Consecutive days with minutes > 0, walking back from the last entry.

    Stops at the first empty day (the last entry included) or when the
    window runs out.
    """
    streak = 0
    for day in reversed(days):
        if day.minutes <= 0:
            break
        streak += 1
    return streak


def seven_day_summary(state: AppState, clock: Clock | None = None) -> WeekSummary:
    """Daily totals for today-6 .. today (ascending) and the streak ending today."""
    if clock is None:
        clock = Clock()
    today = clock.today()
    start = today - timedelta(days=WINDOW_DAYS - 1)
    totals = minutes_by_date(state)

    days = []
    for i in range(WINDOW_DAYS):
        day = start + timedelta(days=i)
        days.append(DayTotal(date=day, minutes=totals.get(day, 0)))
    return WeekSummary(days=days, streak=compute_streak(days))
