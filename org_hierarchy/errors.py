"""Exceptions raised by the hierarchy core.

The console layer catches :class:`HierarchyError` and reports ``str(exc)``.
"""

from __future__ import annotations


class HierarchyError(Exception):
    """Base class for every recoverable hierarchy failure."""


class EmptyTreeError(HierarchyError):
    def __init__(self) -> None:
        super().__init__("No company exists.")


class NotFoundError(HierarchyError):
    def __init__(self, employee_id: int, message: str | None = None) -> None:
        self.employee_id = employee_id
        super().__init__(message or f"No employee found with ID {employee_id}.")


class ParentNotFoundError(NotFoundError):
    def __init__(self, employee_id: int) -> None:
        super().__init__(employee_id, f"Supervisor not found (ID {employee_id}).")


class InvalidArgumentError(HierarchyError):
    pass


class DuplicateIdError(InvalidArgumentError):
    def __init__(self, employee_id: int) -> None:
        self.employee_id = employee_id
        super().__init__(f"An employee with ID {employee_id} already exists.")


class ExportFormatError(HierarchyError):
    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        super().__init__(f"Line {line_number}: {reason}")


class IOFailureError(HierarchyError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not access {path!r}: {reason}")


class StaleIteratorError(HierarchyError):
    def __init__(self) -> None:
        super().__init__("The hierarchy changed while it was being traversed.")
