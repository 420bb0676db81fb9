# src/taskrofi/errors.py

"""Custom exceptions for taskrofi.

Everything the UI can fail with derives from TaskMenuError, so the entry point
can turn any of them into a single "Error: ..." line in the menu.
MenuCancelled is the one benign member: the user pressed Escape.
"""


class TaskMenuError(Exception):
    """Base exception for user-visible failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class MenuCancelled(TaskMenuError):
    """The user dismissed a menu."""

    def __init__(self, message: str = "Menu cancelled"):
        super().__init__(message)


class MenuError(TaskMenuError):
    """Menu picker failed or returned an unusable selection."""

    pass


class TaskCommandError(TaskMenuError):
    """The task binary failed or produced undecodable output."""

    pass


class UnexpectedOutputError(TaskCommandError):
    """The task binary succeeded but its output lacks an expected marker."""

    pass


class InputError(TaskMenuError):
    """User input (or the chosen task) cannot be acted on."""

    pass
