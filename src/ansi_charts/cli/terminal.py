"""Host-side terminal setup - kept out of the rendering core."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

# Windows code page for UTF-8
UTF8_CODE_PAGE = 65001


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Terminal setup helpers used by the CLI before anything is rendered."""

    _utf8_enabled = False

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    @classmethod
    def enable_utf8_output(cls) -> bool:
        """
        Switch console output to UTF-8 once per process.

        On Windows the console code page is set to 65001 so box-drawing
        glyphs display; elsewhere this is a no-op. Returns True when the
        console was switched by this call.
        """
        if cls._utf8_enabled:
            return False
        cls._utf8_enabled = True
        if sys.platform != "win32":
            return False

        import ctypes
        ctypes.windll.kernel32.SetConsoleOutputCP(UTF8_CODE_PAGE)
        reconfigure = getattr(sys.stdout, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding="utf-8")
        return True
