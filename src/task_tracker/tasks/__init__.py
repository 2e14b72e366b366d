"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, Theme) + create_task
- ids.py: id generators (secure random, deterministic)
- task_store.py: persistence adapter over a key/value store (+ seed.py demo data)
- query.py: search / category filter / sort
- stats.py: counters, overdue, completion percentage, per-category breakdown
- task_api.py: lifecycle operations and view-state setters used by the rest of the app
"""
