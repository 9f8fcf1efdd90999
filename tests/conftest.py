from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hyperfind.models import AppEntry  # noqa: E402


@pytest.fixture()
def make_apps() -> Callable[..., list]:
    """Build catalog entries from names; key is '<lowercased>.desktop'."""
    def _make(*names: str) -> list:
        return [AppEntry(key=f"{n.lower()}.desktop", display_name=n) for n in names]
    return _make
