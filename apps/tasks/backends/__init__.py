"""TaskService implementations other than the default ORM-backed one."""
