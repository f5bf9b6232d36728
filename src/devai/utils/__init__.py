from .standup import (
    classify_line,
    extract_today,
    merge_reports,
    merge_text,
    parse_report,
    render_report,
)
from .store import StandupStore

__all__ = [
    "StandupStore",
    "classify_line",
    "extract_today",
    "merge_reports",
    "merge_text",
    "parse_report",
    "render_report",
]
