"""ANSI text utilities - measuring, truncating and padding strings with escape codes."""

from __future__ import annotations

import re
from enum import Enum

from rich.cells import cell_len, get_character_cell_size

from ansi_charts.core.constants import RESET

# CSI sequence: ESC [ then parameter/intermediate bytes, ended by a byte in 0x40-0x7E
_ANSI_ESCAPE = re.compile(r'\x1b\[[\x20-\x3f]*[\x40-\x7e]')


class Alignment(Enum):
    """Horizontal alignment of text inside a fixed-width cell."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def strip_ansi(s: str) -> str:
    """Remove ANSI escape sequences, leaving only visible text."""
    return _ANSI_ESCAPE.sub('', s)


def visible_len(s: str) -> int:
    """Get display width of string in terminal cells (excluding ANSI escape codes)."""
    return cell_len(strip_ansi(s))


def _escape_end(s: str, i: int) -> int:
    """Index just past the CSI sequence starting at s[i]."""
    j = i + 2
    while j < len(s) and not '\x40' <= s[j] <= '\x7e':
        j += 1
    if j < len(s):
        j += 1  # Include terminator
    return j


def truncate(s: str, max_width: int, reset: bool = True) -> str:
    """
    Truncate an ANSI-escaped string to max visible width.

    Preserves ANSI codes but counts only visible cells, so the result
    displays in max_width columns or less. A wide character that would
    straddle the limit is dropped.

    Args:
        s: String to truncate
        max_width: Maximum visible width
        reset: If True, append reset sequence when styled text is truncated
            to prevent color bleed
    """
    if max_width <= 0:
        return ""

    result: list[str] = []
    vis_len = 0
    i = 0

    while i < len(s):
        if s[i] == '\x1b' and i + 1 < len(s) and s[i + 1] == '[':
            j = _escape_end(s, i)
            result.append(s[i:j])
            i = j
            continue
        width = get_character_cell_size(s[i])
        if vis_len + width > max_width:
            break
        result.append(s[i])
        vis_len += width
        i += 1

    output = ''.join(result)

    # Styled text was cut while something visible remained
    if reset and '\x1b' in output and strip_ansi(s[i:]):
        output += RESET

    return output


def pad_to_width(s: str, width: int, char: str = ' ') -> str:
    """Pad string with char to reach exactly width visible characters."""
    current = visible_len(s)
    if current >= width:
        return s
    return s + char * (width - current)


def truncate_and_pad(s: str, width: int) -> str:
    """Truncate if too long, pad if too short. Always returns exactly width visible chars."""
    return align(s, width, Alignment.LEFT)


def align(s: str, width: int, alignment: Alignment = Alignment.LEFT) -> str:
    """
    Fit text into exactly width visible cells.

    Longer text is truncated (never wrapped). Shorter text is padded:
    LEFT pads on the right, RIGHT pads on the left, CENTER splits the
    padding with the odd extra column on the right.
    """
    if width <= 0:
        return ""
    if visible_len(s) > width:
        s = truncate(s, width)
    padding = width - visible_len(s)
    if padding <= 0:
        return s

    if alignment is Alignment.RIGHT:
        return ' ' * padding + s
    if alignment is Alignment.CENTER:
        left = padding // 2
        return ' ' * left + s + ' ' * (padding - left)
    return s + ' ' * padding


def center_line(text: str, width: int) -> str:
    """Left-pad text so it sits centered over a block of the given width."""
    padding = max(0, (width - visible_len(text)) // 2)
    return ' ' * padding + text
