"""In-memory task storage adapter."""

import logging

from shepherd.core.activities import Task

logger = logging.getLogger(__name__)


class InMemoryTaskRepository:
    """
    Session-scoped task storage.

    Implements TaskRepository protocol. Append-only; everything is lost when
    the process exits.
    """

    def __init__(self, tasks: list[Task] | None = None):
        self._tasks: list[Task] = list(tasks or [])
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    def append(self, task: Task) -> None:
        """Add a task to the end of the collection."""
        self._tasks.append(task)
        self._version += 1
        logger.debug(f"Stored task {task.id} ({task.title!r}), {len(self._tasks)} total")

    def list_all(self) -> list[Task]:
        """Return a copy of every stored task."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)
