"""Task repository interface."""

from typing import Protocol

from shepherd.core.activities import Task


class TaskRepository(Protocol):
    """Interface for storing the session's committed tasks."""

    @property
    def version(self) -> int:
        """Counter that changes whenever the collection changes."""
        ...

    def append(self, task: Task) -> None:
        """Add a task to the collection. Never fails."""
        ...

    def list_all(self) -> list[Task]:
        """Return every task. Order is not guaranteed."""
        ...
