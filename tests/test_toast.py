"""Tests for toast notifications."""

from datetime import datetime

import pytest

from ansi_charts.core import constants as c
from ansi_charts.notify.toast import Toast, ToastType, show_error, show_success


def fixed_clock() -> datetime:
    return datetime(2024, 1, 2, 3, 4, 5)


class TestToastContent:

    def test_icon_and_label(self) -> None:
        assert Toast("Saved", ToastType.SUCCESS).content() == "✓ SUCCESS: Saved"

    def test_without_icon(self) -> None:
        assert Toast("Hi").with_icon(False).content() == "INFO: Hi"

    def test_timestamp_from_clock(self) -> None:
        toast = Toast("Hi").with_icon(False).with_timestamp().with_clock(fixed_clock)
        assert toast.content() == "INFO: Hi [03:04:05]"

    @pytest.mark.parametrize("kind, color, icon", [
        (ToastType.INFO, c.BLUE, "ℹ"),
        (ToastType.SUCCESS, c.GREEN, "✓"),
        (ToastType.WARNING, c.YELLOW, "⚠"),
        (ToastType.ERROR, c.RED, "✗"),
    ])
    def test_type_properties(self, kind, color, icon) -> None:
        assert kind.color == color
        assert kind.icon == icon
        assert kind.label == kind.name

    def test_setters_return_new_toast(self) -> None:
        toast = Toast("Hi")
        toast.with_width(30)
        assert toast.width is None


class TestToastRender:

    def test_minimal_box(self, plain_lines) -> None:
        lines = plain_lines(Toast("Hi").with_icon(False).render())
        assert lines == [
            "┌──────────┐",
            "│ INFO: Hi │",
            "└──────────┘",
        ]

    def test_configured_width_centers_content(self, plain_lines) -> None:
        lines = plain_lines(Toast("Hi").with_icon(False).with_width(20).render())
        assert lines[0] == "┌" + "─" * 18 + "┐"
        assert lines[1] == "│     INFO: Hi     │"

    def test_width_smaller_than_content_is_ignored(self, plain_lines) -> None:
        lines = plain_lines(Toast("Hi").with_icon(False).with_width(3).render())
        assert lines[1] == "│ INFO: Hi │"

    def test_odd_padding_goes_right(self, plain_lines) -> None:
        lines = plain_lines(Toast("Hi").with_icon(False).with_width(13).render())
        assert lines[1] == "│ INFO: Hi  │"

    def test_frame_is_colored(self) -> None:
        rendered = Toast("Oops", ToastType.ERROR).render()
        assert rendered.startswith(f"{c.RED}{c.BOLD}┌")
        assert rendered.endswith(f"┘{c.RESET}\n")

    def test_show_helpers(self, out, plain_lines) -> None:
        show_success("Done", out)
        show_error("Failed", out)
        lines = plain_lines(out.getvalue())
        assert len(lines) == 6
        assert "SUCCESS: Done" in lines[1]
        assert "ERROR: Failed" in lines[4]
