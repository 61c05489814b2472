"""Tests for studystreak/menu.py — choice dispatch, messages, prompt loop."""

from dataclasses import replace
from datetime import timedelta

import pytest

from conftest import NOW, TODAY, days_ago, sessions_by_offset
from studystreak.menu import MENU, Menu, menu_text, run_plain
from studystreak.models import Goal
from studystreak.store import MemoryStore


@pytest.fixture
def menu(state, store, clock) -> Menu:
    return Menu(state, store, clock)


def test_menu_text_lists_all_choices():
    text = menu_text()
    assert text.startswith("=== StudyStreak ===")
    for key, label in MENU:
        assert f"{key}) {label}" in text


def test_unknown_choice(menu):
    assert menu.select("9").lines == ["Pick a valid option."]
    assert menu.select(None).lines == ["Pick a valid option."]


def test_start_and_stop(menu, clock):
    assert menu.select("1").lines == ["Session started."]
    assert menu.select(" 1 ").lines == ["A session is already running."]
    menu.clock = replace(clock, fixed=NOW + timedelta(minutes=25))
    assert menu.select("2").lines == ["Session saved: 25 minutes."]
    assert menu.select("2").lines == ["No active session."]


def test_add_goal_prompt(menu, state):
    reply = menu.select("3")
    assert reply.prompt == "Goal title: "
    assert menu.awaiting_answer
    assert menu.answer("Read").lines == ["Goal added."]
    assert not menu.awaiting_answer
    assert state.goals[0].title == "Read"


def test_add_goal_blank(menu, state):
    menu.select("3")
    assert menu.answer("   ").lines == ["Title required."]
    assert state.goals == []


def test_complete_goal_no_goals(menu):
    reply = menu.select("4")
    assert reply.lines == ["No goals for today."]
    assert reply.prompt is None


def test_complete_goal_flow(menu, state):
    state.goals = [
        Goal(title="Read", date=TODAY, done=True),
        Goal(title="old", date=days_ago(1)),
        Goal(title="Flashcards", date=TODAY),
    ]
    reply = menu.select("4")
    assert reply.lines == ["1) [x] Read", "2) [ ] Flashcards"]
    assert reply.prompt == "Complete which? "
    assert menu.answer("2").lines == ["Marked complete."]
    assert state.goals[2].done is True


def test_complete_goal_invalid_pick(menu, state):
    state.goals = [Goal(title="Read", date=TODAY)]
    menu.select("4")
    assert menu.answer("7").lines == ["Invalid choice."]
    assert state.goals[0].done is False


def test_answer_without_prompt(menu):
    assert menu.answer("anything").lines == []


def test_cancel_prompt(menu, state):
    menu.select("3")
    menu.cancel()
    assert menu.answer("Read").lines == []
    assert state.goals == []


def test_selecting_drops_pending_prompt(menu):
    menu.select("3")
    menu.select("5")
    assert not menu.awaiting_answer


def test_today_lines(menu, state, clock):
    state.goals = [Goal(title="Read", date=TODAY, done=True), Goal(title="B", date=TODAY)]
    state.sessions = sessions_by_offset({0: 30})
    assert menu.select("5").lines == ["Today: 30 minutes", "Goals: 1/2 done"]

    menu.select("1")
    menu.clock = replace(clock, fixed=NOW + timedelta(minutes=7, seconds=45))
    assert menu.select("5").lines[-1] == "Active session: 7 minutes so far"


def test_seven_day_lines(menu, state):
    state.sessions = sessions_by_offset({2: 10, 1: 20, 0: 30})
    lines = menu.select("6").lines
    assert lines[0] == "Last 7 days (minutes):"
    assert lines[1] == f"{days_ago(6).isoformat()}: 0"
    assert lines[7] == "2026-02-11: 30"
    assert lines[8] == "Current streak (ending today): 3 day(s)"


def test_exit_saves(menu, store):
    reply = menu.select("0")
    assert reply.exit is True
    assert reply.lines == ["Saving…"]
    assert store.saves == 1


def test_save_failure_message(state, clock):
    menu = Menu(state, MemoryStore(fail=True), clock)
    lines = menu.select("1").lines
    assert lines[0] == "Session started."
    assert lines[1].startswith("(Could not save data:")
    assert state.active_session is not None


def _scripted(answers):
    it = iter(answers)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def test_run_plain_session(menu, store):
    out: list[str] = []
    run_plain(menu, read=_scripted(["3", "Read", "4", "1", "5", "0"]), write=out.append)
    assert "Goal added." in out
    assert "1) [ ] Read" in out
    assert "Marked complete." in out
    assert "Goals: 1/1 done" in out
    assert out[-1] == "Saving…"
    assert store.document["goals"][0]["done"] is True


def test_run_plain_end_of_input_exits(menu, store):
    out: list[str] = []
    run_plain(menu, read=_scripted(["3"]), write=out.append)
    assert "Title required." in out
    assert out[-1] == "Saving…"
    assert store.saves == 1
