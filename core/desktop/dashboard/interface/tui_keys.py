"""Translate prompt_toolkit key presses into dashboard key events."""

from dataclasses import dataclass
from typing import Dict, List

from prompt_toolkit.keys import Keys

KEY_CHAR = "char"
KEY_ENTER = "enter"
KEY_TAB = "tab"
KEY_BACKTAB = "backtab"
KEY_ESCAPE = "escape"
KEY_BACKSPACE = "backspace"
KEY_DELETE = "delete"
KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_HOME = "home"
KEY_END = "end"
KEY_F1 = "f1"
KEY_F2 = "f2"
KEY_F3 = "f3"
KEY_F5 = "f5"
KEY_F6 = "f6"
KEY_F12 = "f12"


@dataclass(frozen=True)
class KeyEvent:
    code: str
    char: str = ""

    @classmethod
    def character(cls, char: str) -> "KeyEvent":
        return cls(KEY_CHAR, char)

    @property
    def is_char(self) -> bool:
        return self.code == KEY_CHAR

    def is_key(self, char: str) -> bool:
        return self.code == KEY_CHAR and self.char == char


_NAMED_KEYS: Dict[str, str] = {
    Keys.ControlI: KEY_TAB,
    Keys.BackTab: KEY_BACKTAB,
    Keys.ControlM: KEY_ENTER,
    Keys.ControlJ: KEY_ENTER,
    Keys.Escape: KEY_ESCAPE,
    Keys.ControlH: KEY_BACKSPACE,
    Keys.Delete: KEY_DELETE,
    Keys.Up: KEY_UP,
    Keys.Down: KEY_DOWN,
    Keys.Left: KEY_LEFT,
    Keys.Right: KEY_RIGHT,
    Keys.Home: KEY_HOME,
    Keys.End: KEY_END,
}
_NAMED_KEYS.update({getattr(Keys, f"F{n}"): f"f{n}" for n in range(1, 25)})


def _printable(char: str) -> bool:
    return len(char) == 1 and char.isprintable()


def key_events_from_press(key_press) -> List[KeyEvent]:
    """Events for one prompt_toolkit ``KeyPress``; pastes expand to one event per character."""
    key = key_press.key
    if key == Keys.BracketedPaste:
        return [KeyEvent.character(ch) for ch in (key_press.data or "") if _printable(ch)]
    named = _NAMED_KEYS.get(key)
    if named:
        return [KeyEvent(named)]
    if not isinstance(key, Keys) and _printable(key):
        return [KeyEvent.character(key)]
    return []
