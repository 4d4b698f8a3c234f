"""
Tasks API endpoints.

JSON CRUD over the same TaskService the pages use. Unlike the pages,
missing ids are reported as 404.
"""
from typing import List

from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from .dtos import TaskIn, TaskOut
from .services import get_task_service

router = Router(tags=["Tasks"])


@router.get("", response=List[TaskOut])
def list_tasks_api(request: HttpRequest):
    """List all tasks ordered by id."""
    return get_task_service().get_all_tasks()


@router.get("/{task_id}", response=TaskOut)
def get_task_api(request: HttpRequest, task_id: int):
    """Get details of a single task."""
    task = get_task_service().get_task_by_id(task_id)
    if not task:
        raise HttpError(404, "Task not found")
    return task


@router.post("", response={201: TaskOut})
def create_task_api(request: HttpRequest, payload: TaskIn):
    """Create a new task."""
    task = get_task_service().save_task(payload.to_task())
    return 201, task


@router.put("/{task_id}", response=TaskOut)
def update_task_api(request: HttpRequest, task_id: int, payload: TaskIn):
    """
    Replace the editable fields of an existing task.

    The service would insert an unknown id as a new task, so existence
    is checked here first.
    """
    service = get_task_service()
    if service.get_task_by_id(task_id) is None:
        raise HttpError(404, "Task not found")
    return service.save_task(payload.to_task(task_id))


@router.delete("/{task_id}", response={204: None})
def delete_task_api(request: HttpRequest, task_id: int):
    """Delete a task."""
    if not get_task_service().delete_task(task_id):
        raise HttpError(404, "Task not found")
    return 204, None
