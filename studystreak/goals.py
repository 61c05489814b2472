"""Daily goals: add for today, list today's, complete by position."""

from __future__ import annotations

from datetime import date

from studystreak.clock import Clock
from studystreak.errors import InvalidSelection, InvalidTitle, NoGoalsToday
from studystreak.models import AppState, Goal
from studystreak.store import Store


def goals_on(state: AppState, day: date) -> list[Goal]:
    return [g for g in state.goals if g.date == day]


def list_today(state: AppState, clock: Clock | None = None) -> list[Goal]:
    """Goals dated today, in insertion order."""
    if clock is None:
        clock = Clock()
    return goals_on(state, clock.today())


def add_goal(state: AppState, store: Store, title: str, clock: Clock | None = None) -> Goal:
    """Add a goal for today. Raises InvalidTitle on a blank title."""
    if clock is None:
        clock = Clock()
    title = (title or "").strip()
    if not title:
        raise InvalidTitle()

    goal = Goal(title=title, date=clock.today(), done=False)
    state.goals.append(goal)
    store.save(state)
    return goal


def parse_selection(selection: int | str, count: int) -> int:
    """Validate a 1-based selection against *count* items, returning a 0-based index."""
    if isinstance(selection, bool):
        raise InvalidSelection(selection)
    if isinstance(selection, int):
        pick = selection
    else:
        try:
            pick = int(str(selection).strip())
        except ValueError:
            raise InvalidSelection(selection) from None
    if pick < 1 or pick > count:
        raise InvalidSelection(selection)
    return pick - 1


def complete_goal(
    state: AppState,
    store: Store,
    selection: int | str,
    clock: Clock | None = None,
) -> Goal:
    """Mark one of today's goals done.

    *selection* indexes the today-list (1-based), not the full goal list,
    so it is only valid against a fresh ``list_today()``.
    """
    todays = list_today(state, clock)
    if not todays:
        raise NoGoalsToday()

    goal = todays[parse_selection(selection, len(todays))]
    goal.done = True
    store.save(state)
    return goal
