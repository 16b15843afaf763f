# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables, optionally via a
local .env file in the working directory.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name used in logs (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level on stderr (default: WARNING).",
    "TODO_LOG_TO_FILE": "Also write DEBUG logs to <data_dir>/todo.log (true/false).",
    # Paths
    "TODO_DATA_DIR": "Local data directory (default: ~/.local/share/todo-cli).",
    "TODO_DATA_PATH": "Todo JSON file (default: <data_dir>/todos.json).",
}
