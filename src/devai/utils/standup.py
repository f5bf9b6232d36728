import logging
import re
from datetime import datetime
from typing import Callable, NamedTuple, Optional, Tuple

from devai.entity import DayEntry, ProjectEntry, StandupReport
from devai.tools import today_stamp

logger = logging.getLogger(__name__)

DATE_HEADER = re.compile(r"^Updates \[(.+)\]:-?$")
TASK_LINE = re.compile(r"^-\s+(.+)$")


def match_date_header(line: str) -> Optional[str]:
    # label kept verbatim so that rendering reproduces the same header
    m = DATE_HEADER.match(line)
    if m:
        return m.group(1)
    return None


def match_project_header(line: str) -> Optional[str]:
    # a bare ":" is a project named "", which still starts a new group
    if line.startswith("-") or not line.endswith(":"):
        return None
    return line[:-1].strip()


def match_task_line(line: str) -> Optional[str]:
    m = TASK_LINE.match(line)
    if m:
        return m.group(1).strip()
    return None


# Checked in order; the first shape that matches wins. A date header
# without its trailing hyphen also ends in ":", so it must come first.
LINE_SHAPES: Tuple[Tuple[str, Callable[[str], Optional[str]]], ...] = (
    ("date", match_date_header),
    ("project", match_project_header),
    ("task", match_task_line),
)


def classify_line(line: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Return ``(shape, value)`` for a trimmed report line.

    ``shape`` is one of ``"date"``, ``"project"``, ``"task"``, or ``None``
    for lines that should be ignored (blank lines, model prose).
    """
    for shape, matcher in LINE_SHAPES:
        value = matcher(line)
        if value is not None:
            return shape, value
    return None, None


class _Cursor(NamedTuple):
    day: Optional[DayEntry] = None
    project: Optional[ProjectEntry] = None


def _advance(report: StandupReport, cursor: _Cursor, line: str) -> _Cursor:
    shape, value = classify_line(line)
    if shape == "date":
        return _Cursor(day=report.ensure_day(value))
    if shape == "project" and cursor.day is not None:
        return _Cursor(day=cursor.day, project=cursor.day.ensure_project(value))
    if shape == "task" and cursor.project is not None:
        cursor.project.add_task(value)
    return cursor


def parse_report(text: str) -> StandupReport:
    """
    Parse report text into a StandupReport.

    Malformed or unrecognised lines are skipped, never raised on, so an
    unexpected model answer degrades into a partial report.
    """
    report = StandupReport()
    cursor = _Cursor()
    for raw in (text or "").splitlines():
        cursor = _advance(report, cursor, raw.strip())
    return report


def render_report(report: StandupReport) -> str:
    blocks: list[str] = []
    for day in report.days:
        lines = [f"Updates [{day.label}]:-"]
        for project in day.projects:
            lines.append(f"{project.name}:")
            lines.extend(f"- {task}" for task in project.tasks)
            lines.append("")
        blocks.append("\n".join(lines).rstrip("\n"))
    return "\n\n".join(blocks)


def merge_reports(existing: StandupReport, new: StandupReport) -> StandupReport:
    """
    Union two reports without mutating either.

    Existing dates, projects and tasks keep their place; whatever ``new``
    introduces is appended after them in the order it first appears.
    """
    merged = existing.model_copy(deep=True)
    for day in new.days:
        target_day = merged.ensure_day(day.label)
        for project in day.projects:
            target_project = target_day.ensure_project(project.name)
            for task in project.tasks:
                if not target_project.add_task(task):
                    logger.debug("Skipping duplicate task %r under %s / %s", task, day.label, project.name)
    return merged


def merge_text(existing_text: str, new_text: str) -> str:
    return render_report(merge_reports(parse_report(existing_text), parse_report(new_text)))


def extract_today(text: str, now: datetime | None = None) -> Optional[str]:
    """
    Render the block for today's date, or return None if there is none.

    The label only has to *contain* ``DD/MM/YYYY``; the day-name suffix
    is not reconstructed. The first matching date wins.
    """
    stamp = today_stamp(now)
    for day in parse_report(text).days:
        if stamp in day.label:
            return render_report(StandupReport(days=[day]))
    return None
