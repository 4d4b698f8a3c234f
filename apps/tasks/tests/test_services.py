"""
Unit tests for the task services.
The same contract checks run against the ORM and in-memory backends.
"""
import pytest
from datetime import date

from django.test import TestCase, SimpleTestCase, override_settings

from apps.tasks.backends.memory_backend import InMemoryTaskService
from apps.tasks.models import Task, TaskStatus
from apps.tasks.services import DatabaseTaskService, get_task_service


class TaskServiceContract:
    """Checks every TaskService backend must pass. Subclasses set make_service()."""

    def make_service(self):
        raise NotImplementedError

    def test_starts_empty(self):
        self.assertEqual(self.service.get_all_tasks(), [])

    def test_save_new_task_assigns_id(self):
        saved = self.service.save_task(Task(title='New'))
        self.assertIsNotNone(saved.pk)
        self.assertIsNotNone(saved.created_at)
        self.assertEqual(self.service.get_task_by_id(saved.pk).title, 'New')

    def test_get_all_tasks_ordered_by_id(self):
        a = self.service.save_task(Task(title='A'))
        b = self.service.save_task(Task(title='B'))
        c = self.service.save_task(Task(title='C'))
        ids = [task.pk for task in self.service.get_all_tasks()]
        self.assertEqual(ids, sorted([a.pk, b.pk, c.pk]))

    def test_get_missing_task_returns_none(self):
        self.assertIsNone(self.service.get_task_by_id(12345))

    def test_save_existing_task_updates_in_place(self):
        saved = self.service.save_task(Task(title='Draft', description='v1'))
        self.service.save_task(Task(title='Other'))

        updated = self.service.save_task(Task(
            id=saved.pk,
            title='Final',
            description='v2',
            status=TaskStatus.DONE,
            due_date=date(2026, 12, 31),
        ))

        self.assertEqual(updated.pk, saved.pk)
        self.assertEqual(len(self.service.get_all_tasks()), 2)

        stored = self.service.get_task_by_id(saved.pk)
        self.assertEqual(stored.title, 'Final')
        self.assertEqual(stored.description, 'v2')
        self.assertEqual(stored.status, TaskStatus.DONE)
        self.assertEqual(stored.due_date, date(2026, 12, 31))
        self.assertEqual(stored.created_at, saved.created_at)

    def test_save_with_unknown_id_inserts_new_task(self):
        existing = self.service.save_task(Task(title='Existing'))
        saved = self.service.save_task(Task(id=existing.pk + 100, title='Orphan'))

        self.assertNotEqual(saved.pk, existing.pk + 100)
        self.assertEqual(
            sorted(task.title for task in self.service.get_all_tasks()),
            ['Existing', 'Orphan'],
        )

    def test_delete_task(self):
        saved = self.service.save_task(Task(title='Temp'))
        self.assertTrue(self.service.delete_task(saved.pk))
        self.assertIsNone(self.service.get_task_by_id(saved.pk))
        self.assertEqual(self.service.get_all_tasks(), [])

    def test_delete_missing_task_returns_false(self):
        self.assertFalse(self.service.delete_task(12345))


class DatabaseTaskServiceTest(TaskServiceContract, TestCase):
    """Contract checks against the Django ORM."""

    def setUp(self):
        self.service = DatabaseTaskService()

    def test_update_refreshes_updated_at(self):
        saved = self.service.save_task(Task(title='Clock'))
        updated = self.service.save_task(Task(id=saved.pk, title='Clock 2'))
        self.assertGreaterEqual(updated.updated_at, saved.updated_at)


class InMemoryTaskServiceTest(TaskServiceContract, SimpleTestCase):
    """Contract checks against the in-memory store."""

    def setUp(self):
        InMemoryTaskService.reset()
        self.service = InMemoryTaskService()

    def tearDown(self):
        InMemoryTaskService.reset()

    def test_returned_tasks_are_copies(self):
        saved = self.service.save_task(Task(title='Original'))
        fetched = self.service.get_task_by_id(saved.pk)
        fetched.title = 'Changed locally'
        self.assertEqual(self.service.get_task_by_id(saved.pk).title, 'Original')

    def test_store_is_shared_between_instances(self):
        saved = self.service.save_task(Task(title='Shared'))
        self.assertEqual(InMemoryTaskService().get_task_by_id(saved.pk).title, 'Shared')

    def test_reset_restarts_ids(self):
        self.service.save_task(Task(title='One'))
        InMemoryTaskService.reset()
        self.assertEqual(self.service.save_task(Task(title='Again')).pk, 1)


class GetTaskServiceTest(SimpleTestCase):
    """Test backend selection."""

    @override_settings(TASK_SERVICE_BACKEND='database')
    def test_database_backend(self):
        self.assertIsInstance(get_task_service(), DatabaseTaskService)

    @override_settings(TASK_SERVICE_BACKEND='memory')
    def test_memory_backend(self):
        self.assertIsInstance(get_task_service(), InMemoryTaskService)

    @override_settings(TASK_SERVICE_BACKEND='redis')
    def test_unknown_backend_raises(self):
        with pytest.raises(ValueError, match="Unknown TASK_SERVICE_BACKEND"):
            get_task_service()
