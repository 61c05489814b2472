"""Error taxonomy for StudyStreak operations.

Every error is recoverable at the operation boundary; the menu layer
turns each one into a message and keeps going.
"""

from __future__ import annotations


class StudyStreakError(ValueError):
    """Base class for all StudyStreak errors."""


class AlreadyRunning(StudyStreakError):
    def __init__(self) -> None:
        super().__init__("A session is already running.")


class NoActiveSession(StudyStreakError):
    def __init__(self) -> None:
        super().__init__("No active session.")


class InvalidTitle(StudyStreakError):
    def __init__(self) -> None:
        super().__init__("Title required.")


class NoGoalsToday(StudyStreakError):
    def __init__(self) -> None:
        super().__init__("No goals for today.")


class InvalidSelection(StudyStreakError):
    def __init__(self, selection: object = None) -> None:
        super().__init__("Invalid choice.")
        self.selection = selection


class PersistenceFailure(StudyStreakError):
    """Saving the document failed; the previous file is left in place."""


class LoadCorruption(StudyStreakError):
    """The stored document could not be decoded."""
