"""Study session lifecycle: start, stop, and live elapsed time.

At most one session runs at a time. Stopping it turns it into an
immutable CompletedSession dated by the local day it started on.
"""

from __future__ import annotations

from studystreak.clock import Clock, elapsed_minutes, rounded_minutes
from studystreak.errors import AlreadyRunning, NoActiveSession
from studystreak.models import ActiveSession, AppState, CompletedSession
from studystreak.store import Store


def start_session(state: AppState, store: Store, clock: Clock | None = None) -> ActiveSession:
    """Start a new session. Raises AlreadyRunning if one is active."""
    if clock is None:
        clock = Clock()
    if state.active_session is not None:
        raise AlreadyRunning()

    session = ActiveSession(start=clock.now())
    state.active_session = session
    store.save(state)
    return session


def close_session(session: ActiveSession, clock: Clock) -> CompletedSession:
    """End *session* now and convert it into its completed record.

    Any ``end`` already present on a loaded session is overwritten.
    """
    session.end = clock.now()
    return CompletedSession(
        date=clock.local_date(session.start),
        minutes=rounded_minutes(session.start, session.end),
    )


def stop_session(state: AppState, store: Store, clock: Clock | None = None) -> CompletedSession:
    """Stop the active session and record it. Raises NoActiveSession if none."""
    if clock is None:
        clock = Clock()
    if state.active_session is None:
        raise NoActiveSession()

    finished = close_session(state.active_session, clock)
    state.sessions.append(finished)
    state.active_session = None
    store.save(state)
    return finished


def running_minutes(state: AppState, clock: Clock | None = None) -> int | None:
    """Whole minutes the active session has been running, or None."""
    if state.active_session is None:
        return None
    if clock is None:
        clock = Clock()
    return elapsed_minutes(state.active_session.start, clock.now())
