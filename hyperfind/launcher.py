#===============================================================================
#  HyperFind | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Launches desktop entries (Exec line, optionally inside a terminal) and
#  records usage only for launches that actually started.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from typing import List, Optional

from .constants import TERMINAL_CANDIDATES
from .desktop_discovery import DesktopLaunch
from .models import AppEntry
from .usage import UsageStore

log = logging.getLogger(__name__)

# Field codes that expand to files/URLs; we never pass any, so they drop out.
_DROPPED_FIELD_CODES = set("fFuUdDnNvm")


class LaunchError(RuntimeError):
    pass


def expand_exec(exec_line: str, name: str = "", icon: Optional[str] = None, desktop_file: str = "") -> List[str]:
    """Split an Exec line into argv, expanding/removing % field codes."""
    try:
        tokens = shlex.split(exec_line)
    except ValueError as e:
        raise LaunchError(f"Malformed Exec line {exec_line!r}: {e}") from e

    argv: List[str] = []
    for token in tokens:
        if token == "%i":
            if icon:
                argv += ["--icon", icon]
            continue

        out = []
        i = 0
        while i < len(token):
            ch = token[i]
            if ch == "%" and i + 1 < len(token):
                code = token[i + 1]
                i += 2
                if code == "%":
                    out.append("%")
                elif code == "c":
                    out.append(name)
                elif code == "k":
                    out.append(desktop_file)
                elif code in _DROPPED_FIELD_CODES:
                    pass
                continue
            out.append(ch)
            i += 1
        expanded = "".join(out)
        if expanded or "%" not in token:
            argv.append(expanded)

    if not argv:
        raise LaunchError(f"Nothing to run in Exec line {exec_line!r}")
    return argv


def find_terminal() -> Optional[str]:
    for t in TERMINAL_CANDIDATES:
        p = shutil.which(t)
        if p:
            return p
    return None


def build_command(entry: AppEntry) -> List[str]:
    launch = entry.launch
    if not isinstance(launch, DesktopLaunch):
        raise LaunchError("No launch information")

    argv = expand_exec(launch.exec_line, entry.display_name, entry.icon, launch.desktop_file)
    if launch.terminal:
        terminal = find_terminal()
        if not terminal:
            raise LaunchError("Terminal application requested but no terminal emulator found")
        argv = [terminal, "-e"] + argv
    return argv


def launch_app(entry: AppEntry) -> None:
    """Spawn the application detached from the launcher. Raises LaunchError."""
    argv = build_command(entry)
    cwd = entry.launch.working_dir
    try:
        subprocess.Popen(
            argv,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        raise LaunchError(str(e)) from e


def launch_and_record(entry: AppEntry, store: UsageStore) -> bool:
    """Launch, then record + save usage. Returns False (logged) on failure."""
    try:
        launch_app(entry)
    except LaunchError as e:
        log.error("Failed to launch %s: %s", entry.display_name, e)
        return False

    store.record_launch(entry.key)
    log.info("Launched %s", entry.display_name)
    return True
