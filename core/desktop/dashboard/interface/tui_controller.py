"""Shared behaviour of the four resource controllers.

A controller owns one resource's items, its list selection, an optional
add/edit form, a help overlay and the pane the list is drawn in. Keyboard
events reach exactly one of those surfaces, picked by ``ModalState``.
"""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Type

from core.desktop.dashboard.interface.tui_canvas import Canvas, Rect
from core.desktop.dashboard.interface.tui_forms import EditForm
from core.desktop.dashboard.interface.tui_keys import (
    KEY_BACKTAB,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_F1,
    KEY_F2,
    KEY_F3,
    KEY_F12,
    KEY_TAB,
    KEY_UP,
    KeyEvent,
)
from core.desktop.dashboard.interface.tui_widgets import HelpOverlay, Pane, SelectableList
from core.modes import ControllerId, FormMode, ModalState


class KeyOutcome(Enum):
    HANDLED = "handled"
    IGNORED = "ignored"
    LEAVE = "leave"


class ResourceController:
    controller_id: ControllerId
    TITLE = ""
    HELP_TITLE = ""
    HELP_LINES: Sequence[str] = ()
    FORM_CLASS: Optional[Type[EditForm]] = None
    SUPPORTS_RELOAD = True
    SUPPORTS_DELETE = True

    def __init__(self):
        self.pane = Pane(self.TITLE)
        self.list = SelectableList()
        self.help = HelpOverlay(self.HELP_TITLE)
        self.form: Optional[EditForm] = self.FORM_CLASS() if self.FORM_CLASS else None
        self.state = ModalState.BASE
        self.items: List[Any] = []
        self.reload()

    # ---- data --------------------------------------------------------

    def _load(self) -> List[Any]:
        raise NotImplementedError

    def reload(self) -> None:
        self.items = list(self._load())
        self.list.set_count(len(self.items))

    def selected(self) -> Optional[Any]:
        if not self.items:
            return None
        return self.items[self.list.index]

    def summaries(self) -> List[str]:
        return [item.summary_text() for item in self.items]

    # ---- modal state -------------------------------------------------

    @property
    def is_base(self) -> bool:
        return self.state is ModalState.BASE

    def transition(self, state: ModalState, values: Optional[Mapping[str, str]] = None) -> None:
        """Move between list, help and form; overlay flags always follow ``state``."""
        if state.is_form and self.form is None:
            return
        self.state = state
        self.help.active = state is ModalState.HELP
        if self.form is None:
            return
        if state is ModalState.FORM_NEW:
            self.form.open(FormMode.NEW)
        elif state is ModalState.FORM_EDIT:
            self.form.open(FormMode.EDIT, values)
        elif self.form.is_open:
            self.form.close()

    # ---- actions -----------------------------------------------------

    def open_selected(self) -> None:
        item = self.selected()
        if item is not None:
            self._open(item)

    def _open(self, item: Any) -> None:
        raise NotImplementedError

    def add(self) -> None:
        if self.form is None:
            return
        self._create(self.form.values())
        self._after_write()
        self._finish_form()

    def edit(self) -> None:
        if self.form is None:
            return
        item = self.selected()
        if item is not None:
            self._update(self.list.index, item, self.form.values())
            self._after_write()
        self._finish_form()

    def delete(self) -> None:
        item = self.selected()
        if item is None:
            return
        self._remove(self.list.index, item)
        self._after_write()

    def _create(self, values: Dict[str, str]) -> None:
        raise NotImplementedError

    def _update(self, index: int, item: Any, values: Dict[str, str]) -> None:
        raise NotImplementedError

    def _remove(self, index: int, item: Any) -> None:
        raise NotImplementedError

    def _after_write(self) -> None:
        self.reload()

    def _finish_form(self) -> None:
        self.transition(ModalState.BASE)
        self.form.clear()

    def form_values(self, item: Any) -> Dict[str, str]:
        return {}

    # ---- keys --------------------------------------------------------

    def key_binding(self, event: KeyEvent) -> KeyOutcome:
        if self.state is ModalState.HELP:
            return self._help_key(event)
        if self.state.is_form:
            return self._form_key(event)
        return self._base_key(event)

    def _help_key(self, event: KeyEvent) -> KeyOutcome:
        if event.code in (KEY_F1, KEY_ESCAPE):
            self.transition(ModalState.BASE)
            return KeyOutcome.HANDLED
        return KeyOutcome.IGNORED

    def _form_key(self, event: KeyEvent) -> KeyOutcome:
        if event.code in (KEY_TAB, KEY_DOWN):
            self.form.advance_focus()
        elif event.code in (KEY_UP, KEY_BACKTAB):
            self.form.retreat_focus()
        elif event.code == KEY_ESCAPE:
            self.transition(ModalState.BASE)
        elif event.code == KEY_F12:
            if self.state is ModalState.FORM_NEW:
                self.add()
            else:
                self.edit()
        elif not self.form.dispatch_key(event):
            return KeyOutcome.IGNORED
        return KeyOutcome.HANDLED

    def _base_key(self, event: KeyEvent) -> KeyOutcome:
        if self.list.handle_key(event):
            return KeyOutcome.HANDLED
        if event.code == KEY_ENTER:
            self.open_selected()
        elif event.code == KEY_F1:
            self.transition(ModalState.HELP)
        elif event.code == KEY_F2 and self.form is not None:
            self.transition(ModalState.FORM_NEW)
        elif event.code == KEY_F3 and self.form is not None:
            item = self.selected()
            if item is None:
                return KeyOutcome.IGNORED
            self.transition(ModalState.FORM_EDIT, self.form_values(item))
        elif event.is_key("D") and self.SUPPORTS_DELETE:
            self.delete()
        elif event.is_key("R") and self.SUPPORTS_RELOAD:
            self.reload()
        elif event.code == KEY_ESCAPE:
            return KeyOutcome.LEAVE
        else:
            return self._extra_key(event)
        return KeyOutcome.HANDLED

    def _extra_key(self, event: KeyEvent) -> KeyOutcome:
        return KeyOutcome.IGNORED

    # ---- drawing -----------------------------------------------------

    def render(self, canvas: Canvas, area: Rect) -> None:
        inner = self.pane.render(canvas, area)
        self.list.render(canvas, inner, self.summaries())

    def render_overlays(self, canvas: Canvas) -> None:
        self.help.render(canvas, self.HELP_LINES)
        if self.form is not None:
            self.form.render(canvas)
