# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLING_APP_NAME": "App display name used in the greeting (default: taskling).",
    "TASKLING_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TASKLING_DATA_DIR": "Local data directory (default: .local/taskling).",
    "TASKLING_TASKS_PATH": "Saved task list (default: <data_dir>/tasks.txt).",
    "TASKLING_LOG_FILE": "Log file path (default: <data_dir>/taskling.log).",
}
