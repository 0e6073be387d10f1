"""Shared ANSI constants for chart rendering."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"
BOLD = f"{CSI}1m"
DIM = f"{CSI}2m"

# Standard foreground colors (SGR 30-37)
BLACK = f"{CSI}30m"
RED = f"{CSI}31m"
GREEN = f"{CSI}32m"
YELLOW = f"{CSI}33m"
BLUE = f"{CSI}34m"
MAGENTA = f"{CSI}35m"
CYAN = f"{CSI}36m"
WHITE = f"{CSI}37m"

# Background colors (SGR 40-47)
BG_BLACK = f"{CSI}40m"
BG_RED = f"{CSI}41m"
BG_GREEN = f"{CSI}42m"
BG_YELLOW = f"{CSI}43m"
BG_BLUE = f"{CSI}44m"
BG_MAGENTA = f"{CSI}45m"
BG_CYAN = f"{CSI}46m"
BG_WHITE = f"{CSI}47m"

# Bright foreground colors (SGR 90-97)
BRIGHT_BLACK = f"{CSI}90m"
BRIGHT_RED = f"{CSI}91m"
BRIGHT_GREEN = f"{CSI}92m"
BRIGHT_YELLOW = f"{CSI}93m"
BRIGHT_BLUE = f"{CSI}94m"
BRIGHT_MAGENTA = f"{CSI}95m"
BRIGHT_CYAN = f"{CSI}96m"
BRIGHT_WHITE = f"{CSI}97m"

# Lookup by name, used by hosts that configure colors with strings
COLORS: dict[str, str] = {
    "black": BLACK,
    "red": RED,
    "green": GREEN,
    "yellow": YELLOW,
    "blue": BLUE,
    "magenta": MAGENTA,
    "cyan": CYAN,
    "white": WHITE,
    "bright_black": BRIGHT_BLACK,
    "bright_red": BRIGHT_RED,
    "bright_green": BRIGHT_GREEN,
    "bright_yellow": BRIGHT_YELLOW,
    "bright_blue": BRIGHT_BLUE,
    "bright_magenta": BRIGHT_MAGENTA,
    "bright_cyan": BRIGHT_CYAN,
    "bright_white": BRIGHT_WHITE,
    "bg_black": BG_BLACK,
    "bg_red": BG_RED,
    "bg_green": BG_GREEN,
    "bg_yellow": BG_YELLOW,
    "bg_blue": BG_BLUE,
    "bg_magenta": BG_MAGENTA,
    "bg_cyan": BG_CYAN,
    "bg_white": BG_WHITE,
}

# Palette sampled per cell by bar charts in random color mode
RANDOM_COLORS: tuple[str, ...] = (
    RED, GREEN, YELLOW, BRIGHT_RED, BRIGHT_WHITE, BRIGHT_BLUE,
    BLUE, BRIGHT_CYAN, BG_RED, CYAN, BG_GREEN, BG_BLUE,
)

# Default segment colors for breakdown charts, indexed modulo length
SEGMENT_COLORS: tuple[str, ...] = (RED, GREEN, BLUE, YELLOW, MAGENTA, CYAN, WHITE)
