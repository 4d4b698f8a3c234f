from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from apps.tasks.models import Task, TaskPriority, TaskStatus
from apps.tasks.services import get_task_service

SAMPLE_TITLES = [
    'Write project README',
    'Set up CI pipeline',
    'Review open pull requests',
    'Plan next sprint',
    'Fix login page layout',
    'Update dependencies',
    'Back up production database',
    'Draft release notes',
    'Triage bug reports',
    'Clean up old branches',
]


class Command(BaseCommand):
    help = 'Seeds the configured task store with sample tasks'

    def add_arguments(self, parser):
        parser.add_argument('--count', type=int, default=10, help='Number of tasks to create')

    def handle(self, *args, **options):
        count = options['count']
        service = get_task_service()
        existing = {task.title for task in service.get_all_tasks()}

        statuses = [choice[0] for choice in TaskStatus.choices]
        priorities = [choice[0] for choice in TaskPriority.choices]
        today = timezone.localdate()

        created = 0
        self.stdout.write('Generating tasks...')

        for i in range(count):
            title = SAMPLE_TITLES[i % len(SAMPLE_TITLES)]
            if i >= len(SAMPLE_TITLES):
                title = f"{title} ({i // len(SAMPLE_TITLES) + 1})"

            if title in existing:
                continue

            service.save_task(Task(
                title=title,
                status=statuses[i % len(statuses)],
                priority=priorities[i % len(priorities)],
                due_date=today + timedelta(days=i + 1),
            ))
            created += 1

        self.stdout.write(self.style.SUCCESS(f'Successfully created {created} tasks'))
