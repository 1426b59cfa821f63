from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Any

from sorteador.contracts import ClipboardUnavailableError

_DISPLAY_VARIABLES = ("DISPLAY", "WAYLAND_DISPLAY", "QT_QPA_PLATFORM")


def display_available() -> bool:
    # Qt aborts the process when it cannot load a platform plugin on X11/Wayland systems.
    if not sys.platform.startswith("linux"):
        return True
    return any(os.environ.get(name) for name in _DISPLAY_VARIABLES)


@dataclass(slots=True)
class QtClipboardAdapter:
    """Qt system clipboard; swappable behind ClipboardAdapter contract."""

    _app: Any = field(default=None, repr=False)

    def write_text(self, text: str) -> None:
        try:
            from PySide6.QtGui import QGuiApplication
        except ModuleNotFoundError as exc:  # pragma: no cover - depends on the runtime environment
            raise ClipboardUnavailableError("PySide6 is required for clipboard export") from exc

        if QGuiApplication.instance() is None:
            if not display_available():
                raise ClipboardUnavailableError("no display available for the system clipboard")
            self._app = QGuiApplication([])
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            raise ClipboardUnavailableError("no system clipboard available")
        clipboard.setText(text)
