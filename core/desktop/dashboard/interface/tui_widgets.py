"""Building blocks shared by every dashboard surface."""

from typing import Optional, Sequence, Tuple

from core.desktop.dashboard.interface.tui_canvas import Canvas, Rect, display_width
from core.desktop.dashboard.interface.tui_keys import (
    KEY_BACKSPACE,
    KEY_DELETE,
    KEY_DOWN,
    KEY_END,
    KEY_HOME,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    KeyEvent,
)

SELECTED_PREFIX = "> "


class TextField:
    """Single-line editable text with a cursor measured in characters."""

    def __init__(self, text: str = ""):
        self.text = ""
        self.cursor = 0
        self.active = False
        self.set_text(text)

    def set_text(self, text: str) -> None:
        self.text = text or ""
        self.cursor = len(self.text)

    def clear(self) -> None:
        self.text = ""
        self.cursor = 0

    def insert(self, char: str) -> None:
        self.text = self.text[: self.cursor] + char + self.text[self.cursor :]
        self.cursor += len(char)

    def delete_before_cursor(self) -> None:
        if self.cursor == 0:
            return
        self.text = self.text[: self.cursor - 1] + self.text[self.cursor :]
        self.cursor -= 1

    def delete_at_cursor(self) -> None:
        self.text = self.text[: self.cursor] + self.text[self.cursor + 1 :]

    def move_left(self) -> None:
        self.cursor = max(0, self.cursor - 1)

    def move_right(self) -> None:
        self.cursor = min(len(self.text), self.cursor + 1)

    def handle_key(self, event: KeyEvent) -> bool:
        if event.is_char:
            self.insert(event.char)
        elif event.code == KEY_BACKSPACE:
            self.delete_before_cursor()
        elif event.code == KEY_DELETE:
            self.delete_at_cursor()
        elif event.code == KEY_LEFT:
            self.move_left()
        elif event.code == KEY_RIGHT:
            self.move_right()
        elif event.code == KEY_HOME:
            self.cursor = 0
        elif event.code == KEY_END:
            self.cursor = len(self.text)
        else:
            return False
        return True

    def render(self, canvas: Canvas, area: Rect) -> None:
        if area.is_empty:
            return
        # keep the cursor inside the visible window for long values
        start = 0
        while start < self.cursor and display_width(self.text[start : self.cursor]) >= area.width:
            start += 1
        canvas.put_text(area.x, area.y, self.text[start:], "class:text", area.width)
        if self.active:
            canvas.set_cursor(area.x + display_width(self.text[start : self.cursor]), area.y)


class SelectableList:
    """Selection state over a list of multi-line summaries."""

    def __init__(self):
        self.index = 0
        self.count = 0
        self.offset = 0

    def set_count(self, count: int) -> None:
        self.count = max(0, count)
        if self.count == 0:
            self.index = 0
        else:
            self.index = min(self.index, self.count - 1)
        self.offset = min(self.offset, self.index)

    def up(self) -> None:
        if self.index > 0:
            self.index -= 1

    def down(self) -> None:
        if self.index + 1 < self.count:
            self.index += 1

    def handle_key(self, event: KeyEvent) -> bool:
        if event.code in (KEY_UP, KEY_LEFT):
            self.up()
        elif event.code in (KEY_DOWN, KEY_RIGHT):
            self.down()
        else:
            return False
        return True

    def _scroll_to_selection(self, heights: Sequence[int], visible: int) -> None:
        if self.index < self.offset:
            self.offset = self.index
        while self.offset < self.index and sum(heights[self.offset : self.index + 1]) > visible:
            self.offset += 1

    def render(self, canvas: Canvas, area: Rect, rows: Sequence[str]) -> None:
        self.set_count(len(rows))
        if area.is_empty or not rows:
            return
        lines_per_row = [row.split("\n") for row in rows]
        self._scroll_to_selection([len(lines) for lines in lines_per_row], area.height)
        y = area.y
        for index in range(self.offset, len(rows)):
            selected = index == self.index
            style = "class:selected" if selected else "class:text"
            for line_no, line in enumerate(lines_per_row[index]):
                if y >= area.bottom:
                    return
                if selected and line_no == 0:
                    line = SELECTED_PREFIX + line
                canvas.put_text(area.x, y, line, style, area.width)
                y += 1


class Pane:
    """Bordered titled region; the border is highlighted while the pane is active."""

    def __init__(self, title: str):
        self.title = title
        self.active = False

    @property
    def border_style(self) -> str:
        return "class:border.active" if self.active else "class:border"

    def render(self, canvas: Canvas, area: Rect) -> Rect:
        canvas.draw_box(area, f"  {self.title}  ", self.border_style)
        return area.inner()


class Overlay:
    """Centered box drawn on top of the base layout."""

    def __init__(self, title: str, size: Tuple[int, int] = (80, 80)):
        self.title = title
        self.size = size
        self.active = False

    def area_in(self, frame: Rect) -> Rect:
        return frame.centered(*self.size)

    def render(self, canvas: Canvas) -> Rect:
        area = self.area_in(canvas.area)
        canvas.clear(area)
        canvas.draw_box(area, f"  {self.title}  ", "class:border.active")
        return area.inner()


class HelpOverlay:
    def __init__(self, title: str):
        self.overlay = Overlay(title)

    @property
    def active(self) -> bool:
        return self.overlay.active

    @active.setter
    def active(self, value: bool) -> None:
        self.overlay.active = value

    def render(self, canvas: Canvas, lines: Sequence[str]) -> Optional[Rect]:
        if not self.active:
            return None
        content = self.overlay.render(canvas).inner(1, 0)
        for offset, line in enumerate(lines):
            if offset >= content.height:
                break
            style = "class:header" if line.startswith("[") else "class:text"
            canvas.put_text(content.x, content.y + offset, line, style, content.width)
        return content

