#===============================================================================
#  HyperFind  |  Keyboard-driven Application Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  A popup launcher that lists the installed desktop applications, ranks them
#  against what you type, and remembers what you launch so the apps you use
#  most float to the top.
#  Supports:
#    - Substring + fuzzy (Jaro-Winkler) matching on application names
#    - "Frequently Used" / "All Apps" sections when the search is empty
#    - Keyboard navigation (Up/Down, Enter, Esc)
#    - Persistent usage history (~/.local/share/hyperfind/usage.json)
#
#  Usage
#  -----
#    python main.py [--usage] [--verbose]
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (PySide6, rapidfuzz) which are
#  licensed separately by their respective authors. Ensure compliance with
#  their license terms when distributing this software.
#===============================================================================

import sys

from hyperfind.app import main


if __name__ == "__main__":
    sys.exit(main())
