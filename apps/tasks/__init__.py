"""
Tasks app - Task tracking with server-rendered pages and a JSON API.

Pages (apps.tasks.urls) and the REST router (apps.tasks.api) both go
through the TaskService contract in apps.tasks.services.
"""
