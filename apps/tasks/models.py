from django.db import models


class TaskStatus(models.TextChoices):
    TODO = 'TODO', 'To Do'
    IN_PROGRESS = 'IN_PROGRESS', 'In Progress'
    DONE = 'DONE', 'Done'


class TaskPriority(models.TextChoices):
    LOW = 'LOW', 'Low'
    MEDIUM = 'MEDIUM', 'Medium'
    HIGH = 'HIGH', 'High'


# Fields a user may set through the form or the API
EDITABLE_FIELDS = ['title', 'description', 'status', 'priority', 'due_date']


class Task(models.Model):
    """
    A unit of work tracked on the dashboard.
    Identified by an integer id assigned on first save.
    """
    id = models.BigAutoField(primary_key=True)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')

    status = models.CharField(
        max_length=20,
        choices=TaskStatus.choices,
        default=TaskStatus.TODO
    )
    priority = models.CharField(
        max_length=10,
        choices=TaskPriority.choices,
        default=TaskPriority.MEDIUM
    )
    due_date = models.DateField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # Exposed for the task form template
    status_choices = TaskStatus.choices
    priority_choices = TaskPriority.choices

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"#{self.id} {self.title}" if self.id else self.title

    @property
    def is_done(self):
        return self.status == TaskStatus.DONE
