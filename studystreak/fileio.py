"""On-disk formats for StudyStreak: the JSON data document and the YAML profile."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

import yaml


def _read_optional(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def read_document(path: Path) -> dict[str, Any]:
    """Decode the data document. A missing or blank file is an empty document.

    Raises ``ValueError`` for malformed JSON or a top-level value that is
    not an object; pathological nesting surfaces as ``RecursionError``.
    """
    text = _read_optional(path)
    if text is None or not text.strip():
        return {}
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}, got {type(data).__name__}")
    return data


def read_profile(path: Path) -> dict[str, Any]:
    """Parse profile.yaml into a mapping; absent or empty means no settings."""
    text = _read_optional(path)
    if text is None:
        return {}
    profile = yaml.safe_load(text)
    if profile is None:
        return {}
    if not isinstance(profile, dict):
        raise ValueError(f"{path.name} must be a mapping, got {type(profile).__name__}")
    return profile


def write_document(path: Path, data: dict[str, Any]) -> None:
    """Replace the data document in one step.

    The JSON goes to a sibling temp file that is fsynced and then moved
    over *path*, so readers see either the old document or the new one.
    """
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}-", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise
