"""StudyStreak core library — study sessions, daily goals, streak reports.

Public API re-exports for convenient imports:
    from studystreak import JsonFileStore, start_session, seven_day_summary, ...
"""

# Workspace & paths
from studystreak.workspace import (
    workspace_root,
    load_profile,
    get_user_timezone,
    data_path,
    profile_path,
    log_path,
    configure_logging,
)

# Time
from studystreak.clock import (
    Clock,
    local_date,
    rounded_minutes,
    elapsed_minutes,
)

# Errors
from studystreak.errors import (
    StudyStreakError,
    AlreadyRunning,
    NoActiveSession,
    InvalidTitle,
    NoGoalsToday,
    InvalidSelection,
    PersistenceFailure,
    LoadCorruption,
)

# Models
from studystreak.models import (
    Goal,
    CompletedSession,
    ActiveSession,
    AppState,
    TodaySummary,
    DayTotal,
    WeekSummary,
)

# Persistence
from studystreak.store import (
    Store,
    JsonFileStore,
    MemoryStore,
)

# Sessions
from studystreak.sessions import (
    start_session,
    stop_session,
    running_minutes,
)

# Goals
from studystreak.goals import (
    add_goal,
    list_today,
    complete_goal,
)

# Reports
from studystreak.reports import (
    minutes_on,
    today_summary,
    seven_day_summary,
)

# Menu
from studystreak.menu import (
    MENU,
    Menu,
    Reply,
    run_plain,
)
