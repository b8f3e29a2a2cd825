"""Task Manager API: per-user task lists behind bearer-token sessions."""

__version__ = "1.0.0"
