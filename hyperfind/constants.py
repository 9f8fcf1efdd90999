#===============================================================================
#  HyperFind | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Central place for window sizing, result caps, section titles and the
#  file/folder naming conventions used for usage history and app discovery.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_TITLE = "HyperFind"
SEARCH_PLACEHOLDER = "Search…"

# --- Result list ---
MAX_RESULTS = 10    # selectable entries visible at once (headers don't count)
MAX_FREQUENT = 5    # entries promoted into "Frequently Used"

FREQUENT_HEADER = "Frequently Used"
ALL_APPS_HEADER = "All Apps"

# --- Ranking ---
SUBSTRING_BONUS = 1000
SIMILARITY_THRESHOLD = 0.75
SIMILARITY_SCALE = 1000
QUERY_USAGE_WEIGHT = 10
IDLE_COUNT_WEIGHT = 1000

# --- Usage history (<user-data-home>/hyperfind/usage.json) ---
DATA_FOLDER_NAME = "hyperfind"
USAGE_FILE_NAME = "usage.json"
U64_MAX = 2 ** 64 - 1

# --- Application discovery (freedesktop.org) ---
DEFAULT_DATA_HOME = ".local/share"          # relative to $HOME
DEFAULT_DATA_DIRS = "/usr/local/share:/usr/share"
APPLICATIONS_FOLDER_NAME = "applications"
DESKTOP_ENTRY_SECTION = "Desktop Entry"

TERMINAL_CANDIDATES = [
    "x-terminal-emulator",
    "kitty",
    "alacritty",
    "foot",
    "gnome-terminal",
    "konsole",
    "xfce4-terminal",
    "xterm",
]

# --- Window ---
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 320
ROW_ICON_SIZE = 20

WINDOW_BG = "#101010"
ACCENT = "#0078D7"
