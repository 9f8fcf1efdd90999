#===============================================================================
#  HyperFind | usage.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Load/save of per-application usage history (launch counts + last use).
#  The file is a cache: anything unreadable degrades to an empty history.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
import os
import time
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import DATA_FOLDER_NAME, DEFAULT_DATA_HOME, U64_MAX, USAGE_FILE_NAME
from .models import UsageEntry, UsageMap

log = logging.getLogger(__name__)


def now_unix() -> int:
    return int(time.time())


def user_data_home() -> Path:
    """$XDG_DATA_HOME, or ~/.local/share when unset/empty."""
    configured = os.environ.get("XDG_DATA_HOME", "").strip()
    if configured:
        return Path(configured)
    return Path.home() / DEFAULT_DATA_HOME


def usage_path() -> Path:
    return user_data_home() / DATA_FOLDER_NAME / USAGE_FILE_NAME


def _is_u64(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= U64_MAX


def parse_usage(data: Any) -> Optional[UsageMap]:
    """Validate a decoded usage document.

    Returns None when any record is malformed; callers fall back to an empty
    history for the whole file rather than keeping the good records.
    """
    if not isinstance(data, dict):
        return None
    usage: UsageMap = {}
    for key, record in data.items():
        if not isinstance(record, dict):
            return None
        count = record.get("count")
        last_used = record.get("last_used")
        if not (_is_u64(count) and _is_u64(last_used)):
            return None
        usage[key] = UsageEntry(count=count, last_used=last_used)
    return usage


def load_usage(path: Optional[Path] = None) -> UsageMap:
    """Load usage history from disk (empty on missing/unreadable/malformed)."""
    path = path or usage_path()
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError, RecursionError) as e:
        log.warning("Ignoring unreadable usage file %s: %s", path, e)
        return {}

    usage = parse_usage(data)
    if usage is None:
        log.warning("Ignoring malformed usage file %s", path)
        return {}
    return usage


def dump_usage(usage: UsageMap) -> Dict[str, Dict[str, int]]:
    return {k: {"count": e.count, "last_used": e.last_used} for k, e in usage.items()}


def save_usage(usage: UsageMap, path: Optional[Path] = None) -> bool:
    """Persist usage history. Failures are logged, never raised."""
    path = path or usage_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        log.error("Failed to create usage dir %s: %s", path.parent, e)
        return False

    try:
        path.write_text(json.dumps(dump_usage(usage)), encoding="utf-8")
    except OSError as e:
        log.error("Failed to save usage data to %s: %s", path, e)
        return False
    return True


def record_usage(key: str, usage: UsageMap, now: Optional[int] = None) -> UsageEntry:
    """Bump the launch counter (saturating) and refresh the timestamp."""
    entry = usage.setdefault(key, UsageEntry())
    entry.count = min(entry.count + 1, U64_MAX)
    entry.last_used = now_unix() if now is None else now
    return entry


class UsageStore:
    """Single owner of the in-memory usage snapshot and its file."""

    def __init__(self, path: Optional[Path] = None, usage: Optional[UsageMap] = None):
        self.path = path or usage_path()
        self.usage: UsageMap = usage if usage is not None else {}

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "UsageStore":
        path = path or usage_path()
        return cls(path, load_usage(path))

    def record_launch(self, key: str) -> UsageEntry:
        """Record one successful launch and write it out before returning."""
        entry = record_usage(key, self.usage)
        save_usage(self.usage, self.path)
        return entry
