from django.urls import path

from . import views

app_name = "tasks"

urlpatterns = [
    path("", views.index, name="index"),
    path("login", views.login, name="login"),
    path("dashboard", views.dashboard, name="dashboard"),
    path("task/new", views.new_task_form, name="new"),
    path("task/save", views.save_task, name="save"),
    path("task/edit/<int:task_id>", views.edit_task, name="edit"),
    path("task/delete/<int:task_id>", views.delete_task, name="delete"),
]
