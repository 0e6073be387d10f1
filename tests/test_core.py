"""Tests for core building blocks (cells, canvas, scaling, text, colors)."""

import math
import random

import pytest

from ansi_charts.core import constants as c
from ansi_charts.core.ansi_text import (
    Alignment,
    align,
    center_line,
    pad_to_width,
    strip_ansi,
    truncate,
    truncate_and_pad,
    visible_len,
)
from ansi_charts.core.canvas import Canvas, segment_glyph
from ansi_charts.core.cell import Cell
from ansi_charts.core.color import Color, cycle_picker, random_picker, to_escape
from ansi_charts.core.errors import InvalidValueError
from ansi_charts.core.glyphs import (
    LineStyle,
    TableStyle,
    box_chars,
    line_glyphs,
)
from ansi_charts.core.scale import (
    AxisBounds,
    ScaleMapper,
    allocate_widths,
    check_finite,
    round_half_up,
    scale_length,
)

ASCII = line_glyphs(LineStyle.ASCII)


class CountingCanvas(Canvas):
    """Canvas that counts draw_point calls."""

    calls = 0

    def draw_point(self, x: int, y: int, glyph: str, style: str | None = None) -> None:
        self.calls += 1
        super().draw_point(x, y, glyph, style)


class TestCell:
    """Tests for Cell dataclass."""

    def test_default_cell(self) -> None:
        cell = Cell()
        assert cell.char == ' '
        assert cell.style is None
        assert cell.is_default() is True

    def test_cell_copy(self) -> None:
        cell = Cell(char='X', style=c.RED)
        copy = cell.copy()
        assert copy.char == 'X'
        assert copy.style == c.RED
        assert copy is not cell

    def test_is_default(self) -> None:
        assert Cell(char='X').is_default() is False
        assert Cell(style=c.RED).is_default() is False


class TestCanvas:
    """Tests for Canvas."""

    def test_blank_canvas(self) -> None:
        canvas = Canvas(4, 2)
        assert canvas.current_height == 2
        assert canvas.to_text() == "    \n    "

    def test_get_set_cell(self) -> None:
        canvas = Canvas(10, 5)
        canvas.set(3, 4, Cell('A'))
        assert canvas.get(3, 4).char == 'A'
        canvas[1, 1] = Cell('B')
        assert canvas[1, 1].char == 'B'

    def test_out_of_bounds_access_raises(self) -> None:
        canvas = Canvas(10, 5)
        with pytest.raises(IndexError):
            canvas.get(10, 0)
        with pytest.raises(IndexError):
            canvas.get(0, -1)

    def test_draw_point_drops_out_of_range(self) -> None:
        canvas = Canvas(3, 3)
        canvas.draw_point(-1, 0, '*')
        canvas.draw_point(0, 3, '*')
        canvas.draw_point(5, 5, '*')
        assert all(cell.is_default() for _, _, cell in canvas.cells())

    def test_horizontal_line(self) -> None:
        canvas = Canvas(5, 1)
        canvas.draw_line(0, 0, 4, 0, ASCII)
        assert canvas.to_text() == "-----"

    def test_vertical_line(self) -> None:
        canvas = Canvas(3, 4)
        canvas.draw_line(1, 0, 1, 3, ASCII)
        assert [row[1].char for row in canvas.rows()] == ['|'] * 4

    def test_rising_diagonal(self) -> None:
        canvas = Canvas(5, 5)
        canvas.draw_line(0, 4, 4, 0, ASCII)
        for i in range(5):
            assert canvas.get(i, 4 - i).char == '/'

    def test_falling_diagonal(self) -> None:
        canvas = Canvas(4, 4)
        canvas.draw_line(0, 0, 3, 3, ASCII)
        for i in range(4):
            assert canvas.get(i, i).char == '\\'

    def test_zero_length_segment_draws_nothing(self) -> None:
        canvas = Canvas(3, 3)
        canvas.draw_line(1, 1, 1, 1, ASCII)
        assert all(cell.is_default() for _, _, cell in canvas.cells())

    def test_line_clipped_at_edges(self) -> None:
        canvas = Canvas(3, 1)
        canvas.draw_line(-2, 0, 2, 0, ASCII)
        assert canvas.to_text() == "---"

    def test_far_endpoint_visits_only_visible_steps(self) -> None:
        canvas = CountingCanvas(5, 5)
        canvas.draw_line(0, 0, 10**9, 0, ASCII)
        assert canvas.to_text().splitlines()[0] == "-----"
        assert canvas.calls <= 10

    def test_far_diagonal_visits_only_visible_steps(self) -> None:
        canvas = CountingCanvas(5, 5)
        canvas.draw_line(4 - 10**9, 10**9, 4, 0, ASCII)
        for i in range(5):
            assert canvas.get(i, 4 - i).char == '/'
        assert canvas.calls <= 10

    def test_segment_entirely_off_grid(self) -> None:
        canvas = CountingCanvas(5, 5)
        canvas.draw_line(0, 10**6, 10**6, 10**6, ASCII)
        assert canvas.calls == 0
        assert all(cell.is_default() for _, _, cell in canvas.cells())

    def test_segment_glyph_directions(self) -> None:
        assert segment_glyph(5, 1, ASCII) == '-'
        assert segment_glyph(1, -5, ASCII) == '|'
        assert segment_glyph(3, -3, ASCII) == '/'
        assert segment_glyph(-3, 3, ASCII) == '/'
        assert segment_glyph(3, 3, ASCII) == '\\'
        assert segment_glyph(-3, -3, ASCII) == '\\'

    def test_grid_spacing(self) -> None:
        canvas = Canvas(10, 10)
        canvas.draw_grid('-', '|')
        assert canvas.get(1, 0).char == '-'
        assert canvas.get(0, 1).char == '|'
        assert canvas.get(2, 0).char == '|'   # verticals drawn over horizontals
        assert canvas.get(1, 1).char == ' '
        assert canvas.get(1, 2).char == '-'

    def test_grid_on_tiny_canvas(self) -> None:
        canvas = Canvas(3, 2)
        canvas.draw_grid('-', '|')
        assert canvas.to_text() == "|||\n|||"

    def test_render_lines_wraps_styles(self) -> None:
        canvas = Canvas(3, 1)
        canvas.draw_point(1, 0, '*', c.RED)
        canvas.draw_point(2, 0, '*', c.RED)
        assert canvas.render_lines() == [f" {c.RED}**{c.RESET}"]

    def test_put_text_clips(self) -> None:
        canvas = Canvas(4, 1)
        canvas.put_text(2, 0, "hello")
        assert canvas.to_text() == "  he"


class TestScale:
    """Tests for bounds, coordinate mapping and width allocation."""

    def test_check_finite(self) -> None:
        assert check_finite(3) == 3.0
        for bad in (math.nan, math.inf, -math.inf):
            with pytest.raises(InvalidValueError):
                check_finite(bad)

    def test_round_half_up(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(2.49) == 2

    def test_map_corners(self) -> None:
        mapper = ScaleMapper(AxisBounds.fixed(0, 10, 0, 10), 11, 11)
        assert mapper.map_point(0, 0) == (0, 10)
        assert mapper.map_point(10, 10) == (10, 0)
        assert mapper.map_point(5, 5) == (5, 5)

    def test_flat_range_centers(self) -> None:
        mapper = ScaleMapper(AxisBounds(2, 2, 3, 3), 11, 21)
        assert mapper.map_point(2, 3) == (5, 10)

    def test_auto_bounds_padding(self) -> None:
        class P:
            def __init__(self, x, y):
                self.x, self.y = x, y

        bounds = AxisBounds.from_points([P(0, 0), P(10, 20)])
        assert bounds.min_x == pytest.approx(-0.5)
        assert bounds.max_x == pytest.approx(10.5)
        assert bounds.min_y == pytest.approx(-1.0)
        assert bounds.max_y == pytest.approx(21.0)
        assert bounds.auto_scale is True

    def test_auto_bounds_flat_axis_unpadded(self) -> None:
        class P:
            def __init__(self, x, y):
                self.x, self.y = x, y

        bounds = AxisBounds.from_points([P(1, 4), P(3, 4)])
        assert (bounds.min_y, bounds.max_y) == (4, 4)

    def test_empty_points_give_zero_bounds(self) -> None:
        assert AxisBounds.from_points([]) == AxisBounds()

    def test_scale_length(self) -> None:
        assert scale_length(10, 10, 40) == 40
        assert scale_length(1, 4, 10) == 3
        assert scale_length(3, 8, 10) == 4
        assert scale_length(0, 0, 10) == 0

    @pytest.mark.parametrize("values,width,min_width", [
        ([1, 1, 1], 10, 1),
        ([45, 30, 15, 10], 40, 1),
        ([45.2, 28.7, 16.1, 10.0], 50, 1),
        ([1, 2, 3, 4, 5, 6, 7], 13, 1),
        ([1, 1, 1, 100], 10, 5),
        ([99.5, 0.25, 0.25], 7, 2),
        ([5], 33, 1),
    ])
    def test_widths_sum_to_total(self, values, width, min_width) -> None:
        total = sum(values)
        percentages = [v / total * 100 for v in values]
        widths = allocate_widths(percentages, width, min_width)
        assert sum(widths) == width
        assert len(widths) == len(values)
        assert all(w >= 0 for w in widths)

    def test_allocation_rounds_and_last_absorbs(self) -> None:
        assert allocate_widths([100 / 3] * 3, 10) == [3, 3, 4]

    def test_allocation_minimum_width(self) -> None:
        assert allocate_widths([1, 1, 98], 20, 2) == [2, 2, 16]

    def test_allocation_empty(self) -> None:
        assert allocate_widths([], 10) == []


class TestAnsiText:
    """Tests for ANSI-aware measurement and padding."""

    def test_strip_and_measure(self) -> None:
        s = f"{c.RED}Hello{c.RESET} {c.BOLD}World{c.RESET}"
        assert strip_ansi(s) == "Hello World"
        assert visible_len(s) == 11

    def test_wide_characters(self) -> None:
        assert visible_len("日本") == 4

    def test_truncate_keeps_escapes(self) -> None:
        s = f"{c.RED}abcdef{c.RESET}"
        result = truncate(s, 3)
        assert result.startswith(c.RED)
        assert strip_ansi(result) == "abc"
        assert result.endswith(c.RESET)

    def test_truncate_wide_character_not_split(self) -> None:
        assert truncate("日本語", 3, reset=False) == "日"

    def test_pad_to_width(self) -> None:
        assert pad_to_width("ab", 4) == "ab  "
        assert pad_to_width("abcdef", 4) == "abcdef"

    def test_truncate_and_pad(self) -> None:
        assert truncate_and_pad("abcdef", 4) == "abcd"
        assert truncate_and_pad("ab", 4) == "ab  "

    def test_align(self) -> None:
        assert align("ab", 6, Alignment.LEFT) == "ab    "
        assert align("ab", 6, Alignment.RIGHT) == "    ab"
        assert align("ab", 6, Alignment.CENTER) == "  ab  "
        assert align("abc", 6, Alignment.CENTER) == " abc  "
        assert align("abcdefgh", 6) == "abcdef"
        assert align("abc", 0) == ""

    def test_align_ignores_escapes(self) -> None:
        colored = f"{c.GREEN}ab{c.RESET}"
        assert visible_len(align(colored, 5)) == 5
        assert visible_len(align(f"{c.GREEN}abcdefgh{c.RESET}", 5)) == 5

    def test_center_line(self) -> None:
        assert center_line("Hi", 10) == "    Hi"
        assert center_line("too long", 4) == "too long"


class TestGlyphs:

    def test_lookup_by_name(self) -> None:
        assert box_chars("rounded").top_left == "╭"
        assert box_chars(TableStyle.DOUBLE_LINE).cross == "╬"

    def test_unknown_style(self) -> None:
        with pytest.raises(ValueError):
            box_chars("fancy")


class TestColor:
    """Tests for Color class and pickers."""

    def test_extended_colors(self) -> None:
        assert Color.from_256(196).fg == "\x1b[38;5;196m"
        assert Color.from_rgb(255, 0, 0).fg == "\x1b[38;2;255;0;0m"

    def test_extended_color_ranges(self) -> None:
        with pytest.raises(ValueError):
            Color.from_256(256)
        with pytest.raises(ValueError):
            Color.from_rgb(0, -1, 0)

    def test_to_escape(self) -> None:
        assert to_escape("red") == c.RED
        assert to_escape("Bright_Cyan") == c.BRIGHT_CYAN
        assert to_escape(c.MAGENTA) == c.MAGENTA
        assert to_escape(Color.from_256(196)) == "\x1b[38;5;196m"
        with pytest.raises(ValueError):
            to_escape("chartreuse")

    def test_cycle_picker(self) -> None:
        pick = cycle_picker([c.RED, c.GREEN])
        assert [pick() for _ in range(3)] == [c.RED, c.GREEN, c.RED]

    def test_random_picker_is_reproducible(self) -> None:
        first = random_picker(rng=random.Random(7))
        second = random_picker(rng=random.Random(7))
        drawn = [first() for _ in range(20)]
        assert drawn == [second() for _ in range(20)]
        assert set(drawn) <= set(c.RANDOM_COLORS)

    def test_empty_palette_rejected(self) -> None:
        with pytest.raises(ValueError):
            cycle_picker([])
