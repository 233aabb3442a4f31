"""Data models for the to-do list manager.

A task is identified by its description; there is no separate id field.
Completion state carries a local timestamp that is only meaningful while
the task is completed.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional

COMPLETED = "Completed"
PENDING = "Pending"


@dataclass
class Task:
    """A single to-do item.

    Fields:
        description: Free text; doubles as the identity key.
        completed: Completion flag.
        due_date: Free text due date ("" when not set).
        tags: Labels in insertion order (duplicates allowed).
        completion_timestamp: Local time of completion (None while pending).
    """
    description: str
    completed: bool = False
    due_date: str = ""
    tags: List[str] = field(default_factory=list)
    completion_timestamp: Optional[datetime] = None

    @property
    def status(self) -> str:
        return COMPLETED if self.completed else PENDING

    def mark_completed(self) -> None:
        self.completed = True
        self.completion_timestamp = datetime.now()

    def mark_pending(self) -> None:
        self.completed = False
        self.completion_timestamp = None

    def set_due_date(self, due_date: str) -> None:
        self.due_date = due_date

    def add_tag(self, tag: str) -> None:
        self.tags.append(tag)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(description={self.description!r}, status={self.status})"


class TaskBuilder:
    """Fluent construction of a Task with optional attributes."""

    def __init__(self, description: str):
        self._task = Task(description=description)

    def set_due_date(self, due_date: str) -> "TaskBuilder":
        self._task.set_due_date(due_date)
        return self

    def add_tag(self, tag: str) -> "TaskBuilder":
        self._task.add_tag(tag)
        return self

    def add_tags(self, tags: Iterable[str]) -> "TaskBuilder":
        for tag in tags:
            self._task.add_tag(tag)
        return self

    def build(self) -> Task:
        return self._task
