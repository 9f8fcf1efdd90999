#===============================================================================
#  HyperFind | view_model.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Turns (catalog, query, usage) into the flat list of headers + app rows, and
#  owns the scroll offset / selection over it. At most MAX_RESULTS app rows are
#  visible at once; headers take a row but don't count toward the cap.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .constants import ALL_APPS_HEADER, FREQUENT_HEADER, MAX_FREQUENT, MAX_RESULTS
from .models import AppEntry, AppItem, HeaderItem, UsageMap, ViewItem, ViewState
from .ranking import is_idle_query, rank


def build_view_items(apps: Sequence[AppEntry], query: str, usage: UsageMap) -> List[ViewItem]:
    """Build the rows for a query.

    Query mode: ranked matches, no headers.
    Idle mode : "Frequently Used" (top MAX_FREQUENT by count/recency, only if
                any history exists), then "All Apps" with everything else in
                catalog order.
    """
    if not is_idle_query(query):
        return [AppItem(app) for _, app in rank(apps, query, usage)]

    frequent = [app for _, app in rank(apps, query, usage)][:MAX_FREQUENT]

    items: List[ViewItem] = []
    if frequent:
        items.append(HeaderItem(FREQUENT_HEADER))
        items.extend(AppItem(app) for app in frequent)

    items.append(HeaderItem(ALL_APPS_HEADER))
    frequent_keys = {app.key for app in frequent}
    items.extend(AppItem(app) for app in apps if app.key not in frequent_keys)
    return items


def is_selectable(item: ViewItem) -> bool:
    return isinstance(item, AppItem)


def first_selectable_index(items: Sequence[ViewItem]) -> Optional[int]:
    for idx, item in enumerate(items):
        if is_selectable(item):
            return idx
    return None


def next_selectable_index(items: Sequence[ViewItem], start: int, direction: int) -> Optional[int]:
    index = start + direction
    while 0 <= index < len(items):
        if is_selectable(items[index]):
            return index
        index += direction
    return None


def visible_indices(items: Sequence[ViewItem], offset: int, limit: int = MAX_RESULTS) -> List[int]:
    """Absolute indices shown from `offset`, stopping right after the limit-th app row."""
    shown: List[int] = []
    app_count = 0
    for idx in range(offset, len(items)):
        shown.append(idx)
        if is_selectable(items[idx]):
            app_count += 1
            if app_count >= limit:
                break
    return shown


def ensure_visible(state: ViewState, limit: int = MAX_RESULTS) -> None:
    """Scroll just enough that the selected row is inside the window."""
    selected = state.selected_index
    if selected is None or not state.items or len(state.items) <= limit:
        state.offset = 0
        return

    if selected < state.offset:
        state.offset = selected
        return

    while state.offset < len(state.items):
        shown = visible_indices(state.items, state.offset, limit)
        if shown and selected <= shown[-1]:
            break
        state.offset += 1


def reset_state(state: ViewState, items: List[ViewItem]) -> None:
    state.items = items
    state.offset = 0
    state.selected_index = first_selectable_index(items)


def move_selection(state: ViewState, direction: int, limit: int = MAX_RESULTS) -> bool:
    """Step the selection by +1/-1 over app rows. Returns False on a no-op."""
    if state.selected_index is None:
        state.selected_index = first_selectable_index(state.items)
        ensure_visible(state, limit)
        return state.selected_index is not None

    nxt = next_selectable_index(state.items, state.selected_index, direction)
    if nxt is None:
        return False
    state.selected_index = nxt
    ensure_visible(state, limit)
    return True


def label_text(app: AppEntry, usage: UsageMap, show_usage: bool = False) -> str:
    if not show_usage:
        return app.display_name
    entry = usage.get(app.key)
    return f"{app.display_name}  ({entry.count if entry else 0} uses)"


class ViewModel:
    """Catalog + usage + view state, driven by query changes and key presses."""

    def __init__(self, apps: Sequence[AppEntry], usage: UsageMap, limit: int = MAX_RESULTS):
        self.apps = list(apps)
        self.usage = usage
        self.limit = limit
        self.state = ViewState()

    def update(self, query: str) -> None:
        reset_state(self.state, build_view_items(self.apps, query, self.usage))

    def move(self, direction: int) -> bool:
        return move_selection(self.state, direction, self.limit)

    def visible_rows(self) -> List[Tuple[int, ViewItem]]:
        items = self.state.items
        return [(idx, items[idx]) for idx in visible_indices(items, self.state.offset, self.limit)]

    def selected_row(self) -> Optional[int]:
        """Row within the visible slice holding the selection, if it's shown."""
        for row, (idx, _item) in enumerate(self.visible_rows()):
            if idx == self.state.selected_index:
                return row
        return None

    def select_row(self, row: int) -> bool:
        """Select the app shown at a rendered row (clicks). Headers are ignored."""
        rows = self.visible_rows()
        if not 0 <= row < len(rows):
            return False
        idx, item = rows[row]
        if not is_selectable(item):
            return False
        self.state.selected_index = idx
        ensure_visible(self.state, self.limit)
        return True

    def app_at_row(self, row: int) -> Optional[AppEntry]:
        """Map a rendered row back to its entry (None for headers/out of range)."""
        if row < 0:
            return None
        rows = self.visible_rows()
        if row >= len(rows):
            return None
        item = rows[row][1]
        return item.app if isinstance(item, AppItem) else None

    def selected_app(self) -> Optional[AppEntry]:
        idx = self.state.selected_index
        if idx is None or idx >= len(self.state.items):
            return None
        item = self.state.items[idx]
        return item.app if isinstance(item, AppItem) else None

    def first_visible_app(self) -> Optional[AppEntry]:
        for _idx, item in self.visible_rows():
            if isinstance(item, AppItem):
                return item.app
        return None
