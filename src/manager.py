"""Task manager: holds the task list, snapshot history, mutation and rendering.

Every mutation records a deep copy of the whole list on the undo history
and empties the redo history. Undo/redo move snapshots between the two
stacks and install a fresh copy of the selected snapshot, so recorded
states are never altered by later in-place changes.
"""
import copy
import logging
from typing import List, Optional, Tuple
from models import Task
from errors import EmptyListError, InvalidIndexError, InvalidMenuChoiceError
from theme import color, HEADER_COLOR, STATUS_COLOR, EMPTY_COLOR

logger = logging.getLogger(__name__)

SHOW_ALL = "Show all"
SHOW_COMPLETED = "Show completed"
SHOW_PENDING = "Show pending"
FILTERS: Tuple[str, ...] = (SHOW_ALL, SHOW_COMPLETED, SHOW_PENDING)

Snapshot = List[Task]


class TaskManager:
    def __init__(self):
        self.tasks: List[Task] = []
        # seeded with the empty list so the first mutation can be undone
        self.undo_history: List[Snapshot] = [[]]
        self.redo_history: List[Snapshot] = []

    # -------------------- history --------------------
    def _record(self) -> None:
        self.undo_history.append(copy.deepcopy(self.tasks))
        self.redo_history.clear()

    def _restore(self, snapshot: Snapshot) -> None:
        self.tasks = copy.deepcopy(snapshot)

    @property
    def can_undo(self) -> bool:
        return len(self.undo_history) > 1

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_history)

    def undo(self) -> str:
        """Step back one snapshot. Reports success even when there is nothing to undo."""
        if self.can_undo:
            self.redo_history.append(self.undo_history.pop())
            self._restore(self.undo_history[-1])
            logger.debug("Undo: restored %d task(s)", len(self.tasks))
        else:
            logger.debug("Undo requested with no earlier state")
        return "Undo successful!"

    def redo(self) -> str:
        """Re-apply the last undone snapshot. Reports success even when there is nothing to redo."""
        if self.can_redo:
            snapshot = self.redo_history.pop()
            self.undo_history.append(snapshot)
            self._restore(snapshot)
            logger.debug("Redo: restored %d task(s)", len(self.tasks))
        else:
            logger.debug("Redo requested with empty redo history")
        return "Redo successful!"

    # -------------------- task operations --------------------
    def add_task(self, task: Task) -> None:
        self.tasks.append(task)
        self._record()
        logger.debug("Added task %r (%d total)", task.description, len(self.tasks))

    def ensure_not_empty(self, action: str) -> None:
        if not self.tasks:
            raise EmptyListError(action)

    def _select(self, number: Optional[int], action: str, outcome: str) -> Task:
        self.ensure_not_empty(action)
        if number is None or not 1 <= number <= len(self.tasks):
            raise InvalidIndexError(number, outcome)
        return self.tasks[number - 1]

    def mark_completed(self, number: Optional[int]) -> str:
        task = self._select(number, "mark as completed", "marked as completed")
        task.mark_completed()
        self._record()
        logger.debug("Completed task #%d %r", number, task.description)
        return f"Task '{task.description}' marked as completed successfully!"

    def delete_task(self, number: Optional[int]) -> str:
        """Delete the selected task and every other task sharing its description."""
        description = self._select(number, "delete", "deleted").description
        before = len(self.tasks)
        self.tasks = [t for t in self.tasks if t.description != description]
        self._record()
        logger.debug("Deleted %d task(s) described %r", before - len(self.tasks), description)
        return f"Task '{description}' deleted successfully!"

    # -------------------- display --------------------
    def numbered_lines(self) -> List[str]:
        return [f"{i}. {task.description}" for i, task in enumerate(self.tasks, start=1)]

    def display_numbered(self) -> None:
        for line in self.numbered_lines():
            print(line)

    @staticmethod
    def _matches(task: Task, task_filter: str) -> bool:
        if task_filter == SHOW_COMPLETED:
            return task.completed
        if task_filter == SHOW_PENDING:
            return not task.completed
        return True

    @staticmethod
    def format_task(task: Task) -> str:
        line = f"{task.description} - {color(task.status, STATUS_COLOR.get(task.status, ''))}"
        if task.due_date:
            line += f", Due: {task.due_date}"
        if task.completed and task.completion_timestamp is not None:
            line += f", Completed On: {task.completion_timestamp.ctime()}"
        if task.tags:
            line += ", Tags: " + "".join(f"{tag} " for tag in task.tags)
        return line

    def filtered(self, task_filter: str = SHOW_ALL) -> List[Task]:
        if task_filter not in FILTERS:
            raise InvalidMenuChoiceError(task_filter)
        return [t for t in self.tasks if self._matches(t, task_filter)]

    def view_tasks(self, task_filter: str = SHOW_ALL) -> None:
        """Print the task list through a filter.

        "EMPTY" is shown only when the whole list is empty; a filter that
        matches nothing prints no task lines.
        """
        matching = self.filtered(task_filter)
        print(color("Task List:", HEADER_COLOR))
        if not self.tasks:
            print(color("EMPTY", EMPTY_COLOR))
            return
        for task in matching:
            print(self.format_task(task))

    def __str__(self) -> str:
        completed = sum(1 for t in self.tasks if t.completed)
        return (f'Tasks: {len(self.tasks)} ({completed} completed), '
                f'undo states: {len(self.undo_history) - 1}, redo states: {len(self.redo_history)}')
