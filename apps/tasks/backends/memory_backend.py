"""
In-Memory Task Backend - Process-local storage for demos and tests.

Tasks are kept as unsaved Task instances in a module-level dict, so every
InMemoryTaskService shares the same store for the life of the process.
Nothing is persisted and nothing touches the database.

Usage:
    Set TASK_SERVICE_BACKEND=memory in your .env file.
"""

import copy
import itertools
import logging
import threading
from typing import Dict, List, Optional

from django.utils import timezone

from apps.tasks.models import EDITABLE_FIELDS, Task
from apps.tasks.services import TaskServiceInterface

logger = logging.getLogger(__name__)


_lock = threading.Lock()
_tasks: Dict[int, Task] = {}
_ids = itertools.count(1)


class InMemoryTaskService(TaskServiceInterface):
    """
    Keep tasks in process memory.

    Callers get copies, so mutating a returned task does not change the
    store until it is passed back through save_task().

    Note: Each worker process has its own store. Only use for
    development and tests.
    """

    @staticmethod
    def reset():
        """Drop every stored task and restart ids at 1."""
        global _ids
        with _lock:
            _tasks.clear()
            _ids = itertools.count(1)

    def get_all_tasks(self) -> List[Task]:
        with _lock:
            return [copy.copy(_tasks[task_id]) for task_id in sorted(_tasks)]

    def get_task_by_id(self, task_id: int) -> Optional[Task]:
        with _lock:
            task = _tasks.get(task_id)
            return copy.copy(task) if task is not None else None

    def save_task(self, task: Task) -> Task:
        now = timezone.now()
        with _lock:
            stored = _tasks.get(task.pk) if task.pk is not None else None

            if stored is not None:
                for field in EDITABLE_FIELDS:
                    setattr(stored, field, getattr(task, field))
                stored.updated_at = now
                logger.info(f"[MEMORY] Updated task {stored.pk}")
                return copy.copy(stored)

            if task.pk is not None:
                logger.warning(f"[MEMORY] Task {task.pk} not found, saving as a new task")

            stored = copy.copy(task)
            stored.pk = next(_ids)
            stored.created_at = now
            stored.updated_at = now
            _tasks[stored.pk] = stored
            logger.info(f"[MEMORY] Created task {stored.pk}")
            return copy.copy(stored)

    def delete_task(self, task_id: int) -> bool:
        with _lock:
            removed = _tasks.pop(task_id, None)

        if removed is None:
            logger.warning(f"[MEMORY] Delete requested for missing task {task_id}")
            return False

        logger.info(f"[MEMORY] Deleted task {task_id}")
        return True
