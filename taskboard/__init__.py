"""
Taskboard: users, projects and tasks behind a REST API, plus an outbound webhook.
"""

__version__ = "1.0.0"
