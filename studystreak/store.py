"""Persistence gateway: load AppState at startup, save after every mutation."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Protocol

from studystreak.errors import LoadCorruption, PersistenceFailure
from studystreak.fileio import read_document, write_document
from studystreak.models import AppState
from studystreak.workspace import data_path

logger = logging.getLogger(__name__)


class Store(Protocol):
    """What the core needs from storage.

    ``save`` never raises: it returns False and keeps the failure in
    ``last_error`` until the next successful save.
    """

    last_error: PersistenceFailure | None

    def load(self) -> AppState: ...

    def save(self, state: AppState) -> bool: ...


def decode_state(data: dict[str, Any]) -> AppState:
    """Build AppState from a decoded document, raising LoadCorruption on bad shape."""
    try:
        return AppState.from_dict(data)
    except (KeyError, TypeError, ValueError, AttributeError, OverflowError) as e:
        raise LoadCorruption(f"Unreadable document: {e}") from e


class JsonFileStore:
    """AppState stored as one JSON document, replaced atomically on save."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path if path is not None else data_path()
        self.last_error: PersistenceFailure | None = None

    def _read(self) -> AppState:
        try:
            data = read_document(self.path)
        except (OSError, ValueError, RecursionError) as e:
            raise LoadCorruption(f"Cannot read {self.path}: {e}") from e
        return decode_state(data)

    def load(self) -> AppState:
        """Load the document; a missing or corrupt file yields an empty state."""
        if not self.path.exists():
            return AppState()
        try:
            return self._read()
        except LoadCorruption as e:
            logger.debug("Starting fresh: %s", e)
            return AppState()

    def _write(self, state: AppState) -> None:
        try:
            write_document(self.path, state.to_dict())
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceFailure(str(e)) from e

    def save(self, state: AppState) -> bool:
        """Write the document. Failures are logged and reported via the return value."""
        try:
            self._write(state)
        except PersistenceFailure as e:
            self.last_error = e
            logger.error("Could not save data: %s", e)
            return False
        self.last_error = None
        logger.debug("Saved %s", self.path)
        return True


class MemoryStore:
    """In-memory store; keeps the last saved document as a plain dict."""

    def __init__(self, document: dict[str, Any] | None = None, fail: bool = False) -> None:
        self.document = copy.deepcopy(document) if document else None
        self.fail = fail
        self.saves = 0
        self.last_error: PersistenceFailure | None = None

    def load(self) -> AppState:
        if not self.document:
            return AppState()
        try:
            return decode_state(copy.deepcopy(self.document))
        except LoadCorruption as e:
            logger.debug("Starting fresh: %s", e)
            return AppState()

    def save(self, state: AppState) -> bool:
        if self.fail:
            self.last_error = PersistenceFailure("store is read-only")
            logger.error("Could not save data: %s", self.last_error)
            return False
        self.document = state.to_dict()
        self.saves += 1
        self.last_error = None
        return True
