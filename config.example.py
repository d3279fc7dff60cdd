# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "JOTTER_APP_NAME": "Name used in the greeting and logs (default: jotter).",
    "JOTTER_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths
    "JOTTER_DATA_DIR": "Directory for the saved list and jotter.log (default: .local/jotter).",
    "JOTTER_STORAGE_PATH": "JSON file holding tasks and notes (default: <data_dir>/jotter.json).",
    # Console
    "JOTTER_AUTOSAVE": "Save after every command that changes the list (true/false, default: true).",
    "JOTTER_TIMESTAMPS": "Prefix replies with the local time (true/false, default: true).",
}
