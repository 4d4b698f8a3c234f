"""Django project configuration for the task manager."""
