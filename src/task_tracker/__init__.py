"""Personal task tracker: task list, derived views and statistics over a local key/value store."""

__version__ = "0.1.0"
