# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASK_TRACKER_APP_NAME": "App display name (default: task-tracker).",
    "TASK_TRACKER_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Console
    "TASK_TRACKER_COLOR": "Colour console output (true/false, default: true). NO_COLOR disables it too.",
    # Paths (gitignored)
    "TASK_TRACKER_DATA_DIR": "Local data directory (default: .local/task_tracker).",
    "TASK_TRACKER_STORE_PATH": "Key/value SQLite path (default: <data_dir>/storage.sqlite3).",
    "TASK_TRACKER_LOG_DIR": "Directory for task_tracker.log (default: <data_dir>).",
}
