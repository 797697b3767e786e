# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "App display name (default: taskpad).",
    "TASKPAD_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKPAD_LOG_TO_FILE": "Also write <data_dir>/taskpad.log at DEBUG (true/false, default: true).",
    # Paths (gitignored)
    "TASKPAD_DATA_DIR": "Local data directory (default: .local/taskpad).",
    "TASKPAD_STORAGE_DB_PATH": "Slot store SQLite path (default: <data_dir>/storage.sqlite3).",
    # Task list
    "TASKPAD_STORAGE_KEY": "Slot name holding the task list (default: tasks).",
    "TASKPAD_FIXTURE_PATH": "JSON file used instead of the bundled default task list.",
}
