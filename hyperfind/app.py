#===============================================================================
#  HyperFind | app.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Process entry point: command line, logging, catalog + usage load, window.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication

from .constants import APP_TITLE
from .desktop_discovery import scan_applications
from .logging_setup import configure_logging
from .main_window import LauncherWindow
from .usage import UsageStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hyperfind", description=f"{APP_TITLE} application launcher")
    parser.add_argument("--usage", action="store_true", help="show launch counts next to app names")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args, qt_args = build_parser().parse_known_args(argv)

    log = configure_logging(verbose=args.verbose)

    apps = scan_applications()
    store = UsageStore.load()
    log.debug("Loaded %d apps, %d usage records from %s", len(apps), len(store.usage), store.path)

    app = QApplication([sys.argv[0]] + qt_args)
    w = LauncherWindow(apps, store, show_usage=args.usage)
    w.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
