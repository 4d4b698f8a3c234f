"""
Task pages - server-rendered routes for the task dashboard.

Each view picks a template and a small context, or redirects to the
dashboard after a write. Storage is left to the configured TaskService.
"""
import logging

from django.http import HttpRequest
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_POST, require_safe

from .forms import TaskForm
from .models import Task
from .services import get_task_service

logger = logging.getLogger(__name__)


@require_safe
def index(request: HttpRequest):
    return render(request, "tasks/index.html")


@require_safe
def login(request: HttpRequest):
    return render(request, "tasks/login.html")


@require_safe
def dashboard(request: HttpRequest):
    tasks = get_task_service().get_all_tasks()
    return render(request, "tasks/dashboard.html", {"tasks": tasks})


@require_safe
def new_task_form(request: HttpRequest):
    return render(request, "tasks/task_form.html", {"task": Task()})


@require_POST
def save_task(request: HttpRequest):
    """
    Bind the posted fields to a Task and hand it to the service.

    A body that cannot be bound re-renders the form with the field
    errors and status 400; nothing is saved.
    """
    form = TaskForm(request.POST)
    if not form.is_valid():
        logger.info(f"Rejected task form: {form.errors.as_json()}")
        return render(
            request,
            "tasks/task_form.html",
            {"task": form.bound_task(), "errors": form.errors},
            status=400,
        )

    get_task_service().save_task(form.to_task())
    return redirect("tasks:dashboard")


@require_safe
def edit_task(request: HttpRequest, task_id: int):
    task = get_task_service().get_task_by_id(task_id)
    if task is None:
        logger.warning(f"Edit requested for missing task {task_id}")
    return render(request, "tasks/task_form.html", {"task": task})


@require_GET
def delete_task(request: HttpRequest, task_id: int):
    get_task_service().delete_task(task_id)
    return redirect("tasks:dashboard")
