"""Add/edit forms shown as overlays over a resource pane."""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from core.desktop.dashboard.interface.tui_canvas import Canvas, Rect
from core.desktop.dashboard.interface.tui_keys import KeyEvent
from core.desktop.dashboard.interface.tui_widgets import Overlay, Pane, TextField
from core.modes import FormMode

FIELD_HEIGHT = 3


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    fill: bool = False


class FormField:
    def __init__(self, spec: FieldSpec):
        self.spec = spec
        self.input = TextField()
        self.pane = Pane(spec.label)

    @property
    def active(self) -> bool:
        return self.input.active

    def set_active(self, active: bool) -> None:
        self.input.active = active
        self.pane.active = active


class EditForm:
    """Ordered text fields with exactly one focused field while the form is open.

    Focus moves forward with ``advance_focus`` (wrapping to the first field)
    and backward with ``retreat_focus``. Closing keeps the typed text unless
    the caller asks for a clear.
    """

    FIELDS: Tuple[FieldSpec, ...] = ()
    NEW_TITLE = "Add"
    EDIT_TITLE = "Edit"

    def __init__(self):
        self.fields: List[FormField] = [FormField(spec) for spec in self.FIELDS]
        self.overlay = Overlay(self.NEW_TITLE)
        self.mode = FormMode.NEW
        self.active_index: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.overlay.active

    def field(self, name: str) -> TextField:
        for form_field in self.fields:
            if form_field.spec.name == name:
                return form_field.input
        raise KeyError(name)

    def focus(self, index: Optional[int]) -> None:
        self.active_index = index
        for position, form_field in enumerate(self.fields):
            form_field.set_active(position == index)

    def open(self, mode: FormMode, values: Optional[Mapping[str, str]] = None) -> None:
        self.mode = mode
        self.overlay.title = self.NEW_TITLE if mode is FormMode.NEW else self.EDIT_TITLE
        self.clear()
        for name, value in (values or {}).items():
            self.field(name).set_text(value)
        self.overlay.active = True
        self.focus(0 if self.fields else None)

    def close(self, clear: bool = False) -> None:
        self.overlay.active = False
        self.focus(None)
        if clear:
            self.clear()

    def clear(self) -> None:
        for form_field in self.fields:
            form_field.input.clear()

    def advance_focus(self) -> None:
        if not self.fields:
            return
        if self.active_index is None:
            self.focus(0)
        else:
            self.focus((self.active_index + 1) % len(self.fields))

    def retreat_focus(self) -> None:
        if not self.fields:
            return
        if self.active_index is None:
            self.focus(len(self.fields) - 1)
        else:
            self.focus((self.active_index - 1) % len(self.fields))

    def dispatch_key(self, event: KeyEvent) -> bool:
        if self.active_index is None:
            return False
        return self.fields[self.active_index].input.handle_key(event)

    def values(self) -> Dict[str, str]:
        return {form_field.spec.name: form_field.input.text for form_field in self.fields}

    def _layout(self, area: Rect) -> List[Rect]:
        sizes = [None if form_field.spec.fill else FIELD_HEIGHT for form_field in self.fields]
        if None not in sizes:
            sizes.append(None)
        return area.split_rows(sizes)

    def render(self, canvas: Canvas) -> None:
        if not self.is_open:
            return
        content = self.overlay.render(canvas)
        for form_field, rect in zip(self.fields, self._layout(content)):
            if rect.height < 3:
                continue
            form_field.input.render(canvas, form_field.pane.render(canvas, rect))


class BookmarkForm(EditForm):
    FIELDS = (
        FieldSpec("title", "Title"),
        FieldSpec("url", "URL"),
    )
    NEW_TITLE = "Add Bookmark"
    EDIT_TITLE = "Edit Bookmark"


class ScheduleForm(EditForm):
    FIELDS = (
        FieldSpec("summary", "Summary"),
        FieldSpec("start", "Start"),
        FieldSpec("end", "End"),
        FieldSpec("description", "Description", fill=True),
    )
    NEW_TITLE = "Add Schedule"
    EDIT_TITLE = "Edit Schedule"


class TaskForm(EditForm):
    FIELDS = (
        FieldSpec("title", "Title"),
        FieldSpec("notes", "Notes", fill=True),
        FieldSpec("due", "Due"),
    )
    NEW_TITLE = "Add Task"
    EDIT_TITLE = "Edit Task"
