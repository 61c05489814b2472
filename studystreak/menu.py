"""Menu presentation: maps choices and typed answers to core operations.

Each call returns a Reply with the lines to show. Choices that need more
input (goal title, goal number) return a prompt; the answer goes to
``Menu.answer``. Every StudyStreakError becomes a message here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from studystreak.clock import Clock
from studystreak.errors import StudyStreakError
from studystreak.goals import add_goal, complete_goal, list_today
from studystreak.models import AppState
from studystreak.reports import seven_day_summary, today_summary
from studystreak.sessions import start_session, stop_session
from studystreak.store import Store

TITLE = "StudyStreak"

MENU: list[tuple[str, str]] = [
    ("1", "Start session"),
    ("2", "Stop session"),
    ("3", "Add goal"),
    ("4", "Complete goal"),
    ("5", "Today summary"),
    ("6", "7-day summary"),
    ("0", "Save & exit"),
]


def menu_text() -> str:
    lines = [f"=== {TITLE} ==="]
    lines += [f"{key}) {label}" for key, label in MENU]
    return "\n".join(lines)


@dataclass
class Reply:
    lines: list[str] = field(default_factory=list)
    prompt: str | None = None
    exit: bool = False


class Menu:
    """One user's menu session over an in-memory AppState."""

    def __init__(self, state: AppState, store: Store, clock: Clock | None = None) -> None:
        self.state = state
        self.store = store
        self.clock = clock or Clock()
        self._pending: Callable[[str], Reply] | None = None

    @property
    def awaiting_answer(self) -> bool:
        return self._pending is not None

    def select(self, choice: str | None) -> Reply:
        self._pending = None
        handler = {
            "1": self._start,
            "2": self._stop,
            "3": self._ask_goal_title,
            "4": self._ask_goal_pick,
            "5": self._today,
            "6": self._seven_days,
            "0": self._exit,
        }.get((choice or "").strip())
        if handler is None:
            return Reply(["Pick a valid option."])
        try:
            return handler()
        except StudyStreakError as e:
            return Reply([str(e)])

    def answer(self, text: str | None) -> Reply:
        pending, self._pending = self._pending, None
        if pending is None:
            return Reply()
        try:
            return pending(text or "")
        except StudyStreakError as e:
            return Reply([str(e)])

    def cancel(self) -> None:
        self._pending = None

    # ── Handlers ──────────────────────────────────────────────

    def _saved(self, lines: list[str]) -> list[str]:
        err = self.store.last_error
        if err is not None:
            lines.append(f"(Could not save data: {err})")
        return lines

    def _start(self) -> Reply:
        start_session(self.state, self.store, self.clock)
        return Reply(self._saved(["Session started."]))

    def _stop(self) -> Reply:
        finished = stop_session(self.state, self.store, self.clock)
        return Reply(self._saved([f"Session saved: {finished.minutes} minutes."]))

    def _ask_goal_title(self) -> Reply:
        self._pending = self._add_goal
        return Reply(prompt="Goal title: ")

    def _add_goal(self, title: str) -> Reply:
        add_goal(self.state, self.store, title, self.clock)
        return Reply(self._saved(["Goal added."]))

    def _ask_goal_pick(self) -> Reply:
        todays = list_today(self.state, self.clock)
        if not todays:
            return Reply(["No goals for today."])
        lines = [
            f"{i}) {'[x]' if g.done else '[ ]'} {g.title}"
            for i, g in enumerate(todays, start=1)
        ]
        self._pending = self._complete_goal
        return Reply(lines, prompt="Complete which? ")

    def _complete_goal(self, selection: str) -> Reply:
        complete_goal(self.state, self.store, selection, self.clock)
        return Reply(self._saved(["Marked complete."]))

    def _today(self) -> Reply:
        s = today_summary(self.state, self.clock)
        lines = [
            f"Today: {s.minutes} minutes",
            f"Goals: {s.goals_done}/{s.goals_total} done",
        ]
        if s.active_minutes is not None:
            lines.append(f"Active session: {s.active_minutes} minutes so far")
        return Reply(lines)

    def _seven_days(self) -> Reply:
        week = seven_day_summary(self.state, self.clock)
        lines = ["Last 7 days (minutes):"]
        lines += [f"{d.date.isoformat()}: {d.minutes}" for d in week.days]
        lines.append(f"Current streak (ending today): {week.streak} day(s)")
        return Reply(lines)

    def _exit(self) -> Reply:
        self.store.save(self.state)
        return Reply(self._saved(["Saving…"]), exit=True)


def run_plain(
    menu: Menu,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Numbered prompt loop. End of input acts as "Save & exit"."""
    while True:
        write("")
        write(menu_text())
        try:
            choice = read("Select: ")
        except EOFError:
            choice = "0"
        reply = menu.select(choice)
        while reply.prompt is not None:
            for line in reply.lines:
                write(line)
            try:
                text = read(reply.prompt)
            except EOFError:
                text = ""
            reply = menu.answer(text)
        for line in reply.lines:
            write(line)
        if reply.exit:
            return
