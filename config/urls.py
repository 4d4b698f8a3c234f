"""
URL configuration for the task manager project.
"""
from django.contrib import admin
from django.urls import include, path
from ninja import NinjaAPI

api = NinjaAPI(
    title="Task Manager API",
    version="1.0.0",
    description="JSON access to the task list",
    docs_url="/docs",
)

from apps.tasks.api import router as tasks_router

api.add_router("/tasks/", tasks_router)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', api.urls),
    path('', include('apps.tasks.urls')),
]
