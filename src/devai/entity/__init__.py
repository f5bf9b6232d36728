from .standup import DayEntry, ProjectEntry, StandupReport

__all__ = ["DayEntry", "ProjectEntry", "StandupReport"]
