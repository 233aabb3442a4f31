"""User-input errors raised by the task manager and reported by the CLI.

None of these are fatal; the menu loop prints the message and carries on.
"""


class TodoError(Exception):
    """Base class; ``str(err)`` is the message shown to the user.

    ``rejected`` holds the offending input (or the attempted action) for logging.
    """

    def __init__(self, message: str, rejected=None):
        super().__init__(message)
        self.rejected = rejected


class EmptyListError(TodoError):
    def __init__(self, action: str):
        super().__init__(f"No tasks to {action}. Task list is empty.", action)


class InvalidIndexError(TodoError):
    def __init__(self, number, outcome: str):
        super().__init__(f"Invalid task number. No task {outcome}.", number)


class InvalidMenuChoiceError(TodoError):
    def __init__(self, choice, message: str = "Invalid choice!"):
        super().__init__(message, choice)
