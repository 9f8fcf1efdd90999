#===============================================================================
#  HyperFind | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Shared data models: catalog entries, usage records and the view items /
#  view state the result list is rendered from.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass(frozen=True)
class AppEntry:
    """Represents a launchable application discovered in the desktop registry."""
    key: str                    # stable identity for usage history (desktop id)
    display_name: str           # non-empty, shown in the list
    launch: Any = field(default=None, compare=False)  # opaque, handed to the launcher
    icon: Optional[str] = None  # theme icon name or absolute path


@dataclass
class UsageEntry:
    count: int = 0
    last_used: int = 0          # unix seconds


UsageMap = Dict[str, UsageEntry]


@dataclass(frozen=True)
class HeaderItem:
    """Non-selectable section title."""
    title: str


@dataclass(frozen=True)
class AppItem:
    """Selectable row wrapping a catalog entry."""
    app: AppEntry


ViewItem = Union[HeaderItem, AppItem]


@dataclass
class ViewState:
    items: List[ViewItem] = field(default_factory=list)
    offset: int = 0
    selected_index: Optional[int] = None
