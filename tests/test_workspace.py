"""Tests for studystreak/workspace.py — root and profile lookups."""

import logging
from zoneinfo import ZoneInfo

from studystreak.workspace import (
    data_path,
    get_user_timezone,
    load_profile,
    log_path,
    profile_path,
    workspace_root,
)


def test_workspace_root_from_env(workspace):
    assert workspace_root() == workspace.resolve()
    assert data_path() == workspace.resolve() / "data.json"


def test_workspace_root_defaults_to_executable_dir(monkeypatch, tmp_path):
    monkeypatch.delenv("STUDYSTREAK_ROOT", raising=False)
    monkeypatch.setattr("sys.argv", [str(tmp_path / "studystreak")])
    assert workspace_root() == tmp_path.resolve()


def test_path_helpers(tmp_path):
    assert data_path(tmp_path) == tmp_path / "data.json"
    assert profile_path(tmp_path) == tmp_path / "profile.yaml"
    assert log_path(tmp_path) == tmp_path / "studystreak.log"


def test_timezone_from_profile(workspace):
    assert get_user_timezone(workspace) == ZoneInfo("UTC")


def test_timezone_missing_profile(tmp_path):
    assert get_user_timezone(tmp_path) is None


def test_timezone_invalid_name(tmp_path):
    (tmp_path / "profile.yaml").write_text("timezone: Not/A_Zone\n", encoding="utf-8")
    assert get_user_timezone(tmp_path) is None


def test_timezone_broken_yaml(tmp_path):
    (tmp_path / "profile.yaml").write_text("timezone: [unclosed\n", encoding="utf-8")
    assert get_user_timezone(tmp_path) is None


def test_profile_that_is_not_a_mapping(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="studystreak.workspace")
    (tmp_path / "profile.yaml").write_text("- UTC\n", encoding="utf-8")
    assert load_profile(tmp_path) == {}
    assert get_user_timezone(tmp_path) is None
    assert "profile.yaml" in caplog.text


def test_load_profile_reads_settings(tmp_path):
    (tmp_path / "profile.yaml").write_text("log_level: debug\n", encoding="utf-8")
    assert load_profile(tmp_path) == {"log_level": "debug"}
