from typing import List, Optional

from pydantic import BaseModel, Field


class ProjectEntry(BaseModel):
    name: str
    tasks: List[str] = Field(default_factory=list)

    def add_task(self, task: str) -> bool:
        # exact string match only, no fuzzy dedup
        if task in self.tasks:
            return False
        self.tasks.append(task)
        return True


class DayEntry(BaseModel):
    label: str
    projects: List[ProjectEntry] = Field(default_factory=list)

    def get_project(self, name: str) -> Optional[ProjectEntry]:
        for project in self.projects:
            if project.name == name:
                return project
        return None

    def ensure_project(self, name: str) -> ProjectEntry:
        project = self.get_project(name)
        if project is None:
            project = ProjectEntry(name=name)
            self.projects.append(project)
        return project


class StandupReport(BaseModel):
    """
    Ordered date -> project -> task structure of a standup report.

    Dates, projects and tasks keep first-seen order; labels are opaque
    strings and never parsed as calendar dates.
    """

    days: List[DayEntry] = Field(default_factory=list)

    def get_day(self, label: str) -> Optional[DayEntry]:
        for day in self.days:
            if day.label == label:
                return day
        return None

    def ensure_day(self, label: str) -> DayEntry:
        day = self.get_day(label)
        if day is None:
            day = DayEntry(label=label)
            self.days.append(day)
        return day

    def is_empty(self) -> bool:
        return not self.days
