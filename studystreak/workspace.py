"""Workspace root, timezone, path helpers for StudyStreak."""

from __future__ import annotations

import logging
import os
import sys
from datetime import tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from studystreak.fileio import read_profile

logger = logging.getLogger(__name__)

ROOT_ENV = "STUDYSTREAK_ROOT"
DATA_FILENAME = "data.json"
PROFILE_FILENAME = "profile.yaml"
LOG_FILENAME = "studystreak.log"


def workspace_root() -> Path:
    """Directory holding data.json: $STUDYSTREAK_ROOT or the executable's directory."""
    configured = os.environ.get(ROOT_ENV)
    if configured:
        return Path(configured).expanduser().resolve()
    return Path(sys.argv[0] or ".").resolve().parent


def load_profile(root: Path | None = None) -> dict[str, Any]:
    """Settings from profile.yaml. An unreadable profile counts as empty."""
    if root is None:
        root = workspace_root()
    try:
        return read_profile(profile_path(root))
    except (OSError, yaml.YAMLError, ValueError) as e:
        logger.warning("Ignoring %s: %s", PROFILE_FILENAME, e)
        return {}


def get_user_timezone(root: Path | None = None) -> tzinfo | None:
    """Get the user's timezone from profile.yaml.

    Returns None when no valid timezone is configured, meaning the
    system local zone is used for date bucketing.
    """
    name = load_profile(root).get("timezone")
    if not name:
        return None
    try:
        return ZoneInfo(str(name))
    except (ZoneInfoNotFoundError, ValueError):
        return None


# ── Path helpers ──────────────────────────────────────────────

def data_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / DATA_FILENAME


def profile_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / PROFILE_FILENAME


def log_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / LOG_FILENAME


def configure_logging(root: Path | None = None) -> None:
    """Send diagnostics to studystreak.log; level from profile.yaml ``log_level``."""
    if root is None:
        root = workspace_root()
    level = str(load_profile(root).get("log_level", "WARNING")).upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "WARNING"
    fmt = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    try:
        logging.basicConfig(filename=str(log_path(root)), level=level, format=fmt)
    except OSError:
        logging.basicConfig(level=level, format=fmt)
