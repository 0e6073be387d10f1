"""Toast notifications - a one-line message in a colored box."""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Callable, TextIO

from ansi_charts.core import constants as c
from ansi_charts.core.ansi_text import visible_len


class ToastType(Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> str:
        return _TOAST_COLORS[self]

    @property
    def icon(self) -> str:
        return _TOAST_ICONS[self]

    @property
    def label(self) -> str:
        return self.name


_TOAST_COLORS = {
    ToastType.INFO: c.BLUE,
    ToastType.SUCCESS: c.GREEN,
    ToastType.WARNING: c.YELLOW,
    ToastType.ERROR: c.RED,
}

_TOAST_ICONS = {
    ToastType.INFO: "ℹ",
    ToastType.SUCCESS: "✓",
    ToastType.WARNING: "⚠",
    ToastType.ERROR: "✗",
}


@dataclass(frozen=True)
class Toast:
    """
    A notification message framed in a box colored by its type.

    The box is at least four columns wider than the content; a configured
    width widens it further, with the content centered.

    Example:
        >>> Toast("Build finished", ToastType.SUCCESS).with_width(40).show()
    """
    message: str
    toast_type: ToastType = ToastType.INFO
    show_icon: bool = True
    show_timestamp: bool = False
    width: int | None = None
    clock: Callable[[], datetime] = datetime.now

    def with_icon(self, show: bool = True) -> "Toast":
        return replace(self, show_icon=show)

    def with_timestamp(self, show: bool = True) -> "Toast":
        return replace(self, show_timestamp=show)

    def with_width(self, width: int | None) -> "Toast":
        return replace(self, width=width)

    def with_clock(self, clock: Callable[[], datetime]) -> "Toast":
        """Use a different time source for timestamps."""
        return replace(self, clock=clock)

    def content(self) -> str:
        """The text inside the frame."""
        parts: list[str] = []
        if self.show_icon:
            parts.append(f"{self.toast_type.icon} ")
        parts.append(f"{self.toast_type.label}: {self.message}")
        if self.show_timestamp:
            parts.append(f" [{self.clock().strftime('%H:%M:%S')}]")
        return ''.join(parts)

    def render(self) -> str:
        """Render the framed toast to a string."""
        color = self.toast_type.color
        content = self.content()
        visual_len = visible_len(content)

        box_width = visual_len + 4
        if self.width is not None:
            box_width = max(self.width, box_width)
        padding = box_width - visual_len - 2
        left_pad = padding // 2
        right_pad = padding - left_pad
        rule = "─" * (box_width - 2)

        buffer = io.StringIO()
        buffer.write(f"{color}{c.BOLD}┌{rule}┐{c.RESET}\n")
        buffer.write(
            f"{color}{c.BOLD}│{' ' * left_pad}{c.RESET}{color}{content}"
            f"{' ' * right_pad}{c.RESET}{color}│{c.RESET}\n"
        )
        buffer.write(f"{color}{c.BOLD}└{rule}┘{c.RESET}\n")
        return buffer.getvalue()

    def show(self, out: TextIO | None = None) -> None:
        """Write the toast to out (stdout by default)."""
        out = out if out is not None else sys.stdout
        out.write(self.render())


def show_info(message: str, out: TextIO | None = None) -> None:
    Toast(message, ToastType.INFO).show(out)


def show_success(message: str, out: TextIO | None = None) -> None:
    Toast(message, ToastType.SUCCESS).show(out)


def show_warning(message: str, out: TextIO | None = None) -> None:
    Toast(message, ToastType.WARNING).show(out)


def show_error(message: str, out: TextIO | None = None) -> None:
    Toast(message, ToastType.ERROR).show(out)
