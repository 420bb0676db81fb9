# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKROFI_APP_NAME": "App display name used in logs (default: taskrofi).",
    "TASKROFI_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "TASKROFI_LOG_FILE_ENABLED": "Write <data_dir>/taskrofi.log with DEBUG logs (true/false, default: true).",
    "TASKROFI_DATA_DIR": "Log directory (default: ~/.local/share/taskrofi).",
    # External programs
    "TASKROFI_TASK_BIN": "Taskwarrior binary (default: task).",
    "TASKROFI_MENU_COMMAND": "Menu picker command line; must accept rofi's -p/-format flags (default: rofi -dmenu -i).",
    "TASKROFI_OPEN_COMMAND": "Command used to open annotation links, e.g. xdg-open (default: system browser).",
    # Display
    "TASKROFI_LABEL_WIDTH": "Description width in task rows (default: 60).",
    "TASKROFI_WAIT_PRESETS": "Comma/space separated suggestions for Wait (default: tomorrow 1h 2h 4h monday).",
}
