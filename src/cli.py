"""Interactive menu loop for the to-do list manager.

Reads a numbered menu choice, collects any further input and dispatches to
the TaskManager. Bad input is reported and the menu is shown again; the
loop only ends on choice 0, end of input or Ctrl-C.
"""
import logging
from typing import List, Optional
from models import TaskBuilder
from errors import TodoError, InvalidMenuChoiceError
from manager import TaskManager, SHOW_ALL, SHOW_COMPLETED, SHOW_PENDING
from theme import color, HEADER_COLOR

logger = logging.getLogger(__name__)

MENU_TITLE = "===== TO-DO LIST MANAGER ====="
MENU_ITEMS = (
    "1. Add Task",
    "2. Mark Task as Completed",
    "3. Delete Task",
    "4. Undo",
    "5. Redo",
    "6. View Tasks",
    "0. Exit",
)
FILTER_CHOICES = {1: SHOW_ALL, 2: SHOW_COMPLETED, 3: SHOW_PENDING}
MENU_ERROR = "Invalid choice! Please enter a number between 0 and 6."


def _parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _split_tags(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(',') if part.strip()]


class CLI:
    def __init__(self, manager: TaskManager):
        self.manager: TaskManager = manager

    def run(self) -> None:
        exit_message: Optional[str] = None
        try:
            while True:
                self._display_menu()
                choice = _parse_int(input("Enter your choice: "))
                if choice == 0:
                    exit_message = "Exiting the program. Goodbye!"
                    break
                self._handle_choice(choice)
        except (KeyboardInterrupt, EOFError):
            exit_message = "Interrupted. Goodbye."
        finally:
            if exit_message:
                print(exit_message)

    # -------------------- command dispatch --------------------
    def _handle_choice(self, choice: Optional[int]) -> None:
        actions = {
            1: self._add,
            2: self._mark_completed,
            3: self._delete,
            4: lambda: print(self.manager.undo()),
            5: lambda: print(self.manager.redo()),
            6: self._view,
        }
        action = actions.get(choice)  # type: ignore[arg-type]
        try:
            if action is None:
                raise InvalidMenuChoiceError(choice, MENU_ERROR)
            action()
            logger.debug("After choice %s: %s", choice, self.manager)
        except TodoError as err:
            logger.info("Rejected input (%s): %s", err.rejected, err)
            print(err)

    # -------------------- user-interactive flows --------------------
    def _display_menu(self) -> None:
        print()
        print(color(MENU_TITLE, HEADER_COLOR))
        for item in MENU_ITEMS:
            print(item)
        print(color("=" * len(MENU_TITLE), HEADER_COLOR))
        print()

    def _add(self) -> None:
        description = input("Enter task description: ")
        due_date = input("Enter due date (or leave empty): ")
        tags = _split_tags(input("Enter tags (comma-separated, or leave empty): "))
        task = TaskBuilder(description).set_due_date(due_date).add_tags(tags).build()
        self.manager.add_task(task)
        print("Task added successfully!")

    def _mark_completed(self) -> None:
        self.manager.ensure_not_empty("mark as completed")
        print("Select a task to mark as completed:")
        self.manager.display_numbered()
        number = _parse_int(input("Enter the task number to mark as completed: "))
        print(self.manager.mark_completed(number))

    def _delete(self) -> None:
        self.manager.ensure_not_empty("delete")
        print("Select a task to delete:")
        self.manager.display_numbered()
        number = _parse_int(input("Enter the task number to delete: "))
        print(self.manager.delete_task(number))

    def _view(self) -> None:
        print("Select filter option:")
        for number, name in FILTER_CHOICES.items():
            print(f"{number}. {name}")
        choice = _parse_int(input("Enter your choice: "))
        task_filter = FILTER_CHOICES.get(choice)  # type: ignore[arg-type]
        if task_filter is None:
            raise InvalidMenuChoiceError(choice)
        self.manager.view_tasks(task_filter)
        input("\nPress any key to continue...")
