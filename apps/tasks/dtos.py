from ninja import Schema
from ninja.orm import create_schema
from typing import Optional
from datetime import date
from .models import Task, TaskStatus, TaskPriority

TaskOut = create_schema(Task)

class TaskIn(Schema):
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[date] = None

    def to_task(self, task_id: Optional[int] = None) -> Task:
        return Task(id=task_id, **self.dict())
