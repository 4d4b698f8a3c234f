"""
TaskService - Storage abstraction used by the task pages and API.

Views never touch the ORM directly; they ask get_task_service() for the
configured backend and call the four contract methods below.

Usage:
    from apps.tasks.services import get_task_service

    service = get_task_service()
    tasks = service.get_all_tasks()
    task = service.get_task_by_id(42)  # None if missing

Environment Configuration:
    TASK_SERVICE_BACKEND=database  # Django ORM (default)
    TASK_SERVICE_BACKEND=memory    # In-process store (demos, tests)
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from django.conf import settings
from django.utils import timezone

from .models import EDITABLE_FIELDS, Task

logger = logging.getLogger(__name__)


class TaskServiceInterface(ABC):
    """
    Contract between the task views and task storage.

    Implementations:
    - DatabaseTaskService: Django ORM over the configured database
    - InMemoryTaskService: process-wide dict, see backends.memory_backend
    """

    @abstractmethod
    def get_all_tasks(self) -> List[Task]:
        """Return every task, ordered by id."""
        pass

    @abstractmethod
    def get_task_by_id(self, task_id: int) -> Optional[Task]:
        """Return the task with this id, or None."""
        pass

    @abstractmethod
    def save_task(self, task: Task) -> Task:
        """
        Insert or update a task.

        - task.pk is None: insert, a fresh id is assigned
        - task.pk matches a stored task: update its editable fields in place,
          created_at is kept
        - task.pk set but unknown: insert as a new task with a fresh id

        Returns:
            The stored task
        """
        pass

    @abstractmethod
    def delete_task(self, task_id: int) -> bool:
        """Remove a task. Returns False if no task had this id."""
        pass


class DatabaseTaskService(TaskServiceInterface):
    """TaskService backed by the Django ORM."""

    def get_all_tasks(self) -> List[Task]:
        return list(Task.objects.order_by('id'))

    def get_task_by_id(self, task_id: int) -> Optional[Task]:
        try:
            return Task.objects.get(id=task_id)
        except Task.DoesNotExist:
            return None

    def save_task(self, task: Task) -> Task:
        if task.pk is not None:
            values = {field: getattr(task, field) for field in EDITABLE_FIELDS}
            updated = Task.objects.filter(id=task.pk).update(
                **values,
                updated_at=timezone.now(),
            )
            if updated:
                logger.info(f"Updated task {task.pk}")
                return Task.objects.get(id=task.pk)

            logger.warning(f"Task {task.pk} not found, saving as a new task")
            task.pk = None

        task.save()
        logger.info(f"Created task {task.pk}")
        return task

    def delete_task(self, task_id: int) -> bool:
        deleted, _ = Task.objects.filter(id=task_id).delete()
        if not deleted:
            logger.warning(f"Delete requested for missing task {task_id}")
            return False

        logger.info(f"Deleted task {task_id}")
        return True


def get_task_service() -> TaskServiceInterface:
    """Get the configured task backend based on the TASK_SERVICE_BACKEND setting."""
    backend = getattr(settings, 'TASK_SERVICE_BACKEND', 'database')

    if backend == 'database':
        return DatabaseTaskService()
    elif backend == 'memory':
        from apps.tasks.backends.memory_backend import InMemoryTaskService
        return InMemoryTaskService()
    else:
        raise ValueError(f"Unknown TASK_SERVICE_BACKEND: {backend}")
