#===============================================================================
#  HyperFind | hyperfind/main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Popup launcher window:
#    - Search field; every keystroke re-ranks the catalog
#    - Result list with "Frequently Used" / "All Apps" sections when idle
#    - Up/Down move the selection (headers skipped), Enter launches, Esc quits
#    - Successful launch records usage and closes the launcher
#===============================================================================

from __future__ import annotations

from typing import Optional, Sequence

from PySide6.QtCore import QEvent, Qt, QTimer
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import (
    QApplication,
    QLabel,
    QLineEdit,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from .constants import (
    ACCENT,
    APP_TITLE,
    SEARCH_PLACEHOLDER,
    WINDOW_BG,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .launcher import launch_and_record
from .models import AppEntry, AppItem
from .ui_widgets import ResultList, make_app_item, make_header_item
from .usage import UsageStore
from .view_model import ViewModel, label_text


class LauncherWindow(QWidget):
    def __init__(self, apps: Sequence[AppEntry], store: UsageStore, show_usage: bool = False):
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.store = store
        self.show_usage = show_usage
        self.view_model = ViewModel(apps, store.usage)

        self.setWindowFlags(
            Qt.FramelessWindowHint
            | Qt.WindowStaysOnTopHint
            | Qt.Tool
        )
        self.setFixedSize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self.setStyleSheet(f"""
        QWidget {{ background: {WINDOW_BG}; color: white; }}
        QLineEdit {{
            background: #1a1a1a;
            border: 1px solid #2a2a2a;
            padding: 6px 8px;
        }}
        QListWidget {{ border: none; }}
        QListWidget::item:selected {{ background: {ACCENT}; }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 8, 10, 8)
        layout.setSpacing(6)

        self.title = QLabel(APP_TITLE)
        self.title.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        layout.addWidget(self.title)

        self.search = QLineEdit()
        self.search.setPlaceholderText(SEARCH_PLACEHOLDER)
        self.search.textChanged.connect(self.update_results)
        self.search.installEventFilter(self)
        layout.addWidget(self.search)

        self.results = ResultList()
        self.results.itemActivated.connect(self.launch_item)
        self.results.currentRowChanged.connect(self.select_row)
        layout.addWidget(self.results, 1)

        self.update_results("")
        self.center_on_screen()

    def showEvent(self, event):
        super().showEvent(event)
        self.activateWindow()
        QTimer.singleShot(0, self.search.setFocus)

    def center_on_screen(self):
        screen = QGuiApplication.primaryScreen()
        if screen is None:
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())

    # ----------------------------
    # Keyboard
    # ----------------------------
    def eventFilter(self, obj, event):
        if obj is self.search and event.type() == QEvent.KeyPress:
            key = event.key()
            if key == Qt.Key_Escape:
                QApplication.quit()
                return True
            if key == Qt.Key_Down:
                self.move_selection(1)
                return True
            if key == Qt.Key_Up:
                self.move_selection(-1)
                return True
            if key in (Qt.Key_Return, Qt.Key_Enter):
                self.launch_selected()
                return True
        return super().eventFilter(obj, event)

    # ----------------------------
    # Results
    # ----------------------------
    def update_results(self, query: str):
        self.view_model.update(query)
        self.render()

    def move_selection(self, direction: int):
        if self.view_model.move(direction):
            self.render()

    def select_row(self, row: int):
        # clicked row becomes the selection Enter and Up/Down work from
        self.view_model.select_row(row)

    def render(self):
        # rebuilding rows must not feed back into select_row
        self.results.blockSignals(True)
        try:
            self.results.clear()
            usage = self.store.usage
            for _idx, item in self.view_model.visible_rows():
                if isinstance(item, AppItem):
                    row = make_app_item(label_text(item.app, usage, self.show_usage), item.app.icon)
                else:
                    row = make_header_item(item.title)
                self.results.addItem(row)

            selected = self.view_model.selected_row()
            if selected is not None:
                self.results.setCurrentRow(selected)
        finally:
            self.results.blockSignals(False)

    # ----------------------------
    # Launch behavior
    # ----------------------------
    def launch_item(self, item: QListWidgetItem):
        self.launch(self.view_model.app_at_row(self.results.row(item)))

    def launch_selected(self):
        self.launch(self.view_model.selected_app() or self.view_model.first_visible_app())
        self.search.setFocus()

    def launch(self, app: Optional[AppEntry]):
        if app is None:
            return
        if launch_and_record(app, self.store):
            QApplication.quit()
