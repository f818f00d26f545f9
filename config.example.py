# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKCAL_APP_NAME": "App display name, also the OpenAPI title (default: task-calendar).",
    "TASKCAL_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # HTTP
    "TASKCAL_HOST": "Bind address (default: 127.0.0.1).",
    "TASKCAL_PORT": "Port (default: 8000).",
    "TASKCAL_CORS_ORIGINS": "Comma/space separated origins allowed to call the API (empty => no CORS).",
    # Calendar
    "TASKCAL_CALENDAR_TZ": "IANA timezone used to bucket due dates into days (default: UTC).",
    # Paths (gitignored)
    "TASKCAL_DATA_DIR": "Local directory for the log file (default: .local/task_calendar).",
}
