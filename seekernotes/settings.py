from __future__ import annotations
from pathlib import Path

APP_NAME = "seekernotes"
CONFIG_FOLDER_NAME = "seekernotes"
CONFIG_FILE_NAME = "config.json"
NOTE_SUFFIX = ".snt"
EMPTY_NOTE_PLACEHOLDER = "Start writing in SeekerNotes..."

LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"
