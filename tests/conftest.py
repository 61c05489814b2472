"""Shared test fixtures for StudyStreak tests."""

from __future__ import annotations

import os
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

import pytest
import yaml

from studystreak.clock import Clock
from studystreak.models import AppState, CompletedSession
from studystreak.store import MemoryStore

NOW = datetime(2026, 2, 11, 15, 0, tzinfo=timezone.utc)
TODAY = date(2026, 2, 11)


def days_ago(n: int) -> date:
    return TODAY - timedelta(days=n)


def sessions_by_offset(minutes: dict[int, int]) -> list[CompletedSession]:
    """Completed sessions keyed by how many days before TODAY they happened."""
    return [CompletedSession(date=days_ago(n), minutes=m) for n, m in sorted(minutes.items())]


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a temporary workspace with a profile and point STUDYSTREAK_ROOT at it."""
    root = tmp_path / "workspace"
    root.mkdir(parents=True)

    profile = {"timezone": "UTC", "log_level": "DEBUG"}
    (root / "profile.yaml").write_text(
        yaml.dump(profile, default_flow_style=False), encoding="utf-8"
    )

    os.environ["STUDYSTREAK_ROOT"] = str(root)
    yield root
    if "STUDYSTREAK_ROOT" in os.environ:
        del os.environ["STUDYSTREAK_ROOT"]


@pytest.fixture
def clock() -> Clock:
    """Clock pinned to 2026-02-11 15:00 UTC, bucketing dates in UTC."""
    return Clock(tz=timezone.utc, fixed=NOW)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def state() -> AppState:
    return AppState()
