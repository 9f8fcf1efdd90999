#===============================================================================
#  HyperFind | desktop_discovery.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Discovery of installed applications from freedesktop.org .desktop files
#  under $XDG_DATA_HOME/applications and $XDG_DATA_DIRS/*/applications.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import configparser
import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from .constants import (
    APPLICATIONS_FOLDER_NAME,
    DEFAULT_DATA_DIRS,
    DESKTOP_ENTRY_SECTION,
)
from .models import AppEntry
from .usage import user_data_home

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DesktopLaunch:
    """Launch payload for a .desktop entry (opaque to ranking/view code)."""
    exec_line: str
    desktop_file: str
    terminal: bool = False
    working_dir: Optional[str] = None


def application_dirs() -> List[Path]:
    """Search order: user data home first, then system data dirs."""
    dirs = [user_data_home() / APPLICATIONS_FOLDER_NAME]
    data_dirs = os.environ.get("XDG_DATA_DIRS", "").strip() or DEFAULT_DATA_DIRS
    for d in data_dirs.split(":"):
        if d.strip():
            dirs.append(Path(d.strip()) / APPLICATIONS_FOLDER_NAME)
    return dirs


def desktop_id(apps_dir: Path, desktop_file: Path) -> str:
    """freedesktop id: path below applications/ with '/' replaced by '-'."""
    return desktop_file.relative_to(apps_dir).as_posix().replace("/", "-")


def usage_key(app_id: Optional[str], name: str) -> str:
    """Prefer the registry id; fall back to the display name."""
    return app_id if app_id else name


def _is_true(section, key: str) -> bool:
    return section.get(key, "false").strip().lower() == "true"


def _desktop_list(value: str) -> List[str]:
    return [v.strip() for v in (value or "").split(";") if v.strip()]


def current_desktops() -> List[str]:
    return [d for d in os.environ.get("XDG_CURRENT_DESKTOP", "").split(":") if d]


def should_show(section, desktops: List[str]) -> bool:
    """Mirror the registry's visibility rules for one [Desktop Entry] section."""
    if section.get("Type", "").strip() != "Application":
        return False
    if _is_true(section, "NoDisplay") or _is_true(section, "Hidden"):
        return False

    only_show_in = _desktop_list(section.get("OnlyShowIn", ""))
    if only_show_in and not any(d in only_show_in for d in desktops):
        return False
    not_show_in = _desktop_list(section.get("NotShowIn", ""))
    if any(d in not_show_in for d in desktops):
        return False

    try_exec = section.get("TryExec", "").strip()
    if try_exec and not shutil.which(try_exec):
        return False
    return True


def parse_desktop_file(path: Path, app_id: str, desktops: Optional[List[str]] = None) -> Optional[AppEntry]:
    """Parse one .desktop file into an AppEntry, or None if it isn't shown."""
    cp = configparser.ConfigParser(interpolation=None, strict=False, delimiters=("=",))
    cp.optionxform = str  # keys are case-sensitive (Name vs name)
    try:
        with open(path, encoding="utf-8", errors="ignore") as fh:
            cp.read_file(fh)
    except (OSError, configparser.Error) as e:
        log.debug("Skipping unreadable desktop file %s: %s", path, e)
        return None

    if DESKTOP_ENTRY_SECTION not in cp:
        return None
    section = cp[DESKTOP_ENTRY_SECTION]

    if not should_show(section, current_desktops() if desktops is None else desktops):
        return None

    name = section.get("Name", "")
    if not name.strip():
        return None
    exec_line = section.get("Exec", "").strip()
    if not exec_line:
        return None

    return AppEntry(
        key=usage_key(app_id, name),
        display_name=name,
        launch=DesktopLaunch(
            exec_line=exec_line,
            desktop_file=str(path),
            terminal=_is_true(section, "Terminal"),
            working_dir=section.get("Path", "").strip() or None,
        ),
        icon=section.get("Icon", "").strip() or None,
    )


def scan_applications(dirs: Optional[List[Path]] = None) -> List[AppEntry]:
    """Scan the application dirs and return visible entries sorted by name.

    A desktop id found in an earlier dir hides the same id further down,
    including hidden/NoDisplay overrides.
    """
    seen: Dict[str, Optional[AppEntry]] = {}
    desktops = current_desktops()

    for apps_dir in (dirs if dirs is not None else application_dirs()):
        if not apps_dir.is_dir():
            continue
        for desktop_file in sorted(apps_dir.rglob("*.desktop")):
            if not desktop_file.is_file():
                continue
            app_id = desktop_id(apps_dir, desktop_file)
            if app_id in seen:
                continue
            seen[app_id] = parse_desktop_file(desktop_file, app_id, desktops)

    apps = [a for a in seen.values() if a is not None]
    apps.sort(key=lambda a: (a.display_name.lower(), a.display_name, a.key))
    log.debug("Discovered %d applications", len(apps))
    return apps
