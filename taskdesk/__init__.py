"""In-memory multi-user task manager with an interactive terminal menu."""

__version__ = "0.1.0"
__all__ = ["task", "user", "manager", "cli"]