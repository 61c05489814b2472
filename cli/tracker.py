#!/usr/bin/env python3
"""StudyStreak TUI — interactive study tracker powered by Textual.

Run with ``--plain`` for the numbered prompt loop instead.
"""

from __future__ import annotations

import logging
import sys

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header, Input, Label, Log, Static

from studystreak.clock import Clock
from studystreak.menu import MENU, TITLE, Menu, Reply, run_plain
from studystreak.reports import seven_day_summary
from studystreak.store import JsonFileStore
from studystreak.workspace import configure_logging, data_path, workspace_root


# ── Stylesheet ─────────────────────────────────────────────────

CSS = """
Screen {
    background: $surface;
}

#main-layout {
    height: 1fr;
}

#menu-pane {
    width: 30;
    border-right: tall $primary-background-darken-2;
    padding: 0 1;
}

#output-pane {
    width: 1fr;
    padding: 0 1;
}

.section-title {
    text-style: bold;
    color: $text;
    margin: 1 0 0 0;
    padding: 0 1;
}

#menu-list {
    height: auto;
    padding: 0 1;
}

#output {
    height: 1fr;
}

#answer {
    display: none;
}
"""


class NotifyHandler(logging.Handler):
    """Forward warnings from the core to Textual notifications.

    Save failures are skipped: the menu already reports them in its reply.
    """

    QUIET = ("studystreak.store",)

    def __init__(self, app: App) -> None:
        super().__init__(level=logging.WARNING)
        self.app = app
        self.addFilter(lambda record: not record.name.startswith(self.QUIET))

    def emit(self, record: logging.LogRecord) -> None:
        severity = "error" if record.levelno >= logging.ERROR else "warning"
        self.app.notify(self.format(record), severity=severity)


# ── Main app ───────────────────────────────────────────────────


class StudyStreakApp(App):
    """StudyStreak — sessions, goals and streaks."""

    TITLE = TITLE
    CSS = CSS
    AUTO_FOCUS = None

    BINDINGS = [
        Binding("1", "choose('1')", "Start"),
        Binding("2", "choose('2')", "Stop"),
        Binding("3", "choose('3')", "Add goal"),
        Binding("4", "choose('4')", "Complete"),
        Binding("5", "choose('5')", "Today"),
        Binding("6", "choose('6')", "7 days"),
        Binding("0", "choose('0')", "Save & exit"),
        Binding("escape", "cancel_prompt", "Back", show=False),
    ]

    def __init__(self, tracker: Menu) -> None:
        super().__init__()
        self.tracker = tracker
        self._log_handler = NotifyHandler(self)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Horizontal(
            Vertical(
                Label("Menu", classes="section-title"),
                Static("\n".join(f"{key}) {label}" for key, label in MENU), id="menu-list"),
                id="menu-pane",
            ),
            Vertical(
                Label("Output", classes="section-title"),
                Log(id="output"),
                Input(id="answer"),
                id="output-pane",
            ),
            id="main-layout",
        )
        yield Footer()

    def on_mount(self) -> None:
        logging.getLogger("studystreak").addHandler(self._log_handler)
        self._update_streak_display()

    def on_unmount(self) -> None:
        logging.getLogger("studystreak").removeHandler(self._log_handler)

    def _update_streak_display(self) -> None:
        """Update sub_title with the current streak and running state."""
        week = seven_day_summary(self.tracker.state, self.tracker.clock)
        parts = [f"🔥 {week.streak}"]
        if self.tracker.state.active_session is not None:
            parts.append("[RUNNING]")
        self.sub_title = "  ".join(parts)

    def _show(self, reply: Reply) -> None:
        output = self.query_one("#output", Log)
        for line in reply.lines:
            output.write_line(line)

        answer = self.query_one("#answer", Input)
        if reply.prompt is not None:
            answer.placeholder = reply.prompt.strip()
            answer.value = ""
            answer.display = True
            answer.focus()
        else:
            answer.display = False
            self.set_focus(None)

        self._update_streak_display()
        if reply.exit:
            self.exit()

    def action_choose(self, choice: str) -> None:
        self._show(self.tracker.select(choice))

    def action_cancel_prompt(self) -> None:
        self.tracker.cancel()
        self._show(Reply())

    @on(Input.Submitted, "#answer")
    def _on_answer(self, event: Input.Submitted) -> None:
        self._show(self.tracker.answer(event.value))


# ── Entry point ────────────────────────────────────────────────


def main() -> None:
    root = workspace_root()
    configure_logging(root)
    store = JsonFileStore(data_path(root))
    menu = Menu(store.load(), store, Clock.for_workspace(root))

    if "--plain" in sys.argv[1:]:
        run_plain(menu)
        return

    app = StudyStreakApp(menu)
    app.run()


if __name__ == "__main__":
    main()
