"""Cell grid the dashboard paints each frame into.

Widgets never talk to prompt_toolkit directly: they draw into a ``Canvas``
sized to the terminal, and the application turns the grid into one
``FormattedText`` block per redraw.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from prompt_toolkit.formatted_text import FormattedText
from wcwidth import wcwidth

Cell = Tuple[str, str]

BOX_TOP_LEFT = "╭"
BOX_TOP_RIGHT = "╮"
BOX_BOTTOM_LEFT = "╰"
BOX_BOTTOM_RIGHT = "╯"
BOX_HORIZONTAL = "─"
BOX_VERTICAL = "│"


def char_width(ch: str) -> int:
    width = wcwidth(ch)
    return width if width > 0 else 0


def display_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def inner(self, dx: int = 1, dy: int = 1) -> "Rect":
        """Shrink by ``dx`` columns on both sides and ``dy`` rows top and bottom."""
        return Rect(
            self.x + dx,
            self.y + dy,
            max(0, self.width - 2 * dx),
            max(0, self.height - 2 * dy),
        )

    def split_rows(self, sizes: Sequence[Optional[int]]) -> List["Rect"]:
        """Stack rows top to bottom.

        Integers are fixed heights, ``None`` entries share whatever is left.
        Rows that run past the bottom edge are clipped to zero height.
        """
        fixed = sum(size for size in sizes if size is not None)
        flexible = [index for index, size in enumerate(sizes) if size is None]
        remaining = max(0, self.height - fixed)
        heights: List[int] = []
        for index, size in enumerate(sizes):
            if size is not None:
                heights.append(size)
                continue
            share = remaining // len(flexible)
            if index == flexible[-1]:
                share = remaining - share * (len(flexible) - 1)
            heights.append(share)
        rects: List[Rect] = []
        cursor = self.y
        for height in heights:
            height = max(0, min(height, self.bottom - cursor))
            rects.append(Rect(self.x, cursor, self.width, height))
            cursor += height
        return rects

    def split_columns_percent(self, percents: Sequence[int]) -> List["Rect"]:
        """Side-by-side columns; the last column takes the rounding remainder."""
        rects: List[Rect] = []
        cursor = self.x
        for index, percent in enumerate(percents):
            if index == len(percents) - 1:
                width = self.right - cursor
            else:
                width = self.width * percent // 100
            width = max(0, min(width, self.right - cursor))
            rects.append(Rect(cursor, self.y, width, self.height))
            cursor += width
        return rects

    def centered(self, percent_x: int, percent_y: int) -> "Rect":
        width = self.width * percent_x // 100
        height = self.height * percent_y // 100
        return Rect(
            self.x + (self.width - width) // 2,
            self.y + (self.height - height) // 2,
            width,
            height,
        )


class Canvas:
    def __init__(self, width: int, height: int):
        self.width = max(0, width)
        self.height = max(0, height)
        self.area = Rect(0, 0, self.width, self.height)
        self.cursor: Optional[Tuple[int, int]] = None
        self._rows: List[List[Cell]] = [[("", " ")] * self.width for _ in range(self.height)]

    def _clip(self, rect: Rect) -> Rect:
        x = max(rect.x, 0)
        y = max(rect.y, 0)
        right = min(rect.right, self.width)
        bottom = min(rect.bottom, self.height)
        return Rect(x, y, max(0, right - x), max(0, bottom - y))

    def _set_cell(self, row: List[Cell], x: int, cell: Cell) -> None:
        # overwriting half of a wide glyph blanks the other half
        old_style, old_text = row[x]
        if old_text == "" and x > 0:
            row[x - 1] = (row[x - 1][0], " ")
        elif char_width(old_text[:1]) == 2 and x + 1 < self.width:
            row[x + 1] = (old_style, " ")
        row[x] = cell

    def fill(self, rect: Rect, char: str = " ", style: str = "") -> None:
        rect = self._clip(rect)
        for y in range(rect.y, rect.bottom):
            row = self._rows[y]
            for x in range(rect.x, rect.right):
                self._set_cell(row, x, (style, char))

    def clear(self, rect: Rect) -> None:
        """Blank a region so whatever was painted underneath cannot show through."""
        self.fill(rect)
        if self.cursor and rect.x <= self.cursor[0] < rect.right and rect.y <= self.cursor[1] < rect.bottom:
            self.cursor = None

    def put_text(self, x: int, y: int, text: str, style: str = "", max_width: Optional[int] = None) -> int:
        """Write one line of text starting at (x, y); returns the columns used."""
        if y < 0 or y >= self.height or x >= self.width:
            return 0
        limit = self.width if max_width is None else min(self.width, x + max(0, max_width))
        row = self._rows[y]
        col = x
        for ch in text:
            if ch == "\n":
                break
            width = wcwidth(ch)
            if width < 0:
                continue
            if width == 0:
                if x < col <= limit and col - 1 >= 0:
                    prev_style, prev_text = row[col - 1]
                    row[col - 1] = (prev_style, prev_text + ch)
                continue
            if col + width > limit:
                break
            if col >= 0:
                self._set_cell(row, col, (style, ch))
                if width == 2:
                    self._set_cell(row, col + 1, (style, " "))
                    row[col + 1] = (style, "")
            col += width
        return col - x

    def put_fragments(self, x: int, y: int, fragments: Sequence[Tuple[str, str]], max_width: Optional[int] = None) -> int:
        used = 0
        for style, text in fragments:
            remaining = None if max_width is None else max_width - used
            if remaining is not None and remaining <= 0:
                break
            used += self.put_text(x + used, y, text, style, remaining)
        return used

    def draw_box(self, rect: Rect, title: str = "", style: str = "class:border", title_style: str = "class:header") -> None:
        rect = self._clip(rect)
        if rect.width < 2 or rect.height < 2:
            return
        horizontal = BOX_HORIZONTAL * (rect.width - 2)
        self.put_text(rect.x, rect.y, BOX_TOP_LEFT + horizontal + BOX_TOP_RIGHT, style)
        for y in range(rect.y + 1, rect.bottom - 1):
            self.put_text(rect.x, y, BOX_VERTICAL, style)
            self.put_text(rect.right - 1, y, BOX_VERTICAL, style)
        self.put_text(rect.x, rect.bottom - 1, BOX_BOTTOM_LEFT + horizontal + BOX_BOTTOM_RIGHT, style)
        if title:
            self.put_text(rect.x + 1, rect.y, title, title_style, rect.width - 2)

    def set_cursor(self, x: int, y: int) -> None:
        if 0 <= y < self.height:
            self.cursor = (max(0, min(x, self.width - 1)), y)

    def cursor_point(self) -> Optional[Tuple[int, int]]:
        """Cursor as (character offset, row); wide glyphs use one character for two cells."""
        if self.cursor is None:
            return None
        x, y = self.cursor
        return sum(len(text) for _, text in self._rows[y][:x]), y

    def to_formatted_text(self) -> FormattedText:
        fragments: List[Tuple[str, str]] = []
        for index, row in enumerate(self._rows):
            if index:
                fragments.append(("", "\n"))
            style = None
            chunk: List[str] = []
            for cell_style, text in row:
                if cell_style != style and chunk:
                    fragments.append((style or "", "".join(chunk)))
                    chunk = []
                style = cell_style
                chunk.append(text)
            if chunk:
                fragments.append((style or "", "".join(chunk)))
        return FormattedText(fragments)
