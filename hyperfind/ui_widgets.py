#===============================================================================
#  HyperFind | ui_widgets.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Reusable UI widgets (result list + row builders). Keeps the window smaller.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QFont, QIcon
from PySide6.QtWidgets import QAbstractItemView, QListWidget, QListWidgetItem

from .constants import ROW_ICON_SIZE


class ResultList(QListWidget):
    """Flat list of section headers and app rows. Scrolling is driven by the view model."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSelectionMode(QAbstractItemView.SingleSelection)
        self.setIconSize(QSize(ROW_ICON_SIZE, ROW_ICON_SIZE))
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        # keyboard stays in the search field
        self.setFocusPolicy(Qt.NoFocus)


def resolve_icon(icon: Optional[str]) -> Optional[QIcon]:
    if not icon:
        return None
    if Path(icon).is_absolute():
        return QIcon(icon) if Path(icon).exists() else None
    themed = QIcon.fromTheme(icon)
    return None if themed.isNull() else themed


def make_header_item(title: str) -> QListWidgetItem:
    item = QListWidgetItem(title)
    font = QFont()
    font.setBold(True)
    item.setFont(font)
    item.setFlags(Qt.ItemIsEnabled)  # shown, never selectable
    return item


def make_app_item(label: str, icon: Optional[str] = None) -> QListWidgetItem:
    item = QListWidgetItem(label)
    qicon = resolve_icon(icon)
    if qicon is not None:
        item.setIcon(qicon)
    return item
