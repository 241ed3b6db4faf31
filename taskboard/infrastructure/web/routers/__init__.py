"""
HTTP routers.
"""

from . import users, projects, tasks, events

__all__ = ["users", "projects", "tasks", "events"]
