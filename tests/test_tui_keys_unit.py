from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys

from core.desktop.dashboard.interface.tui_keys import (
    KEY_BACKSPACE,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_F1,
    KEY_F12,
    KEY_TAB,
    KeyEvent,
    key_events_from_press,
)


def test_named_keys_are_translated():
    assert key_events_from_press(KeyPress(Keys.Tab)) == [KeyEvent(KEY_TAB)]
    assert key_events_from_press(KeyPress(Keys.Enter)) == [KeyEvent(KEY_ENTER)]
    assert key_events_from_press(KeyPress(Keys.ControlJ)) == [KeyEvent(KEY_ENTER)]
    assert key_events_from_press(KeyPress(Keys.Escape)) == [KeyEvent(KEY_ESCAPE)]
    assert key_events_from_press(KeyPress(Keys.Backspace)) == [KeyEvent(KEY_BACKSPACE)]
    assert key_events_from_press(KeyPress(Keys.Down)) == [KeyEvent(KEY_DOWN)]
    assert key_events_from_press(KeyPress(Keys.F1)) == [KeyEvent(KEY_F1)]
    assert key_events_from_press(KeyPress(Keys.F12)) == [KeyEvent(KEY_F12)]


def test_printable_characters_become_char_events():
    events = key_events_from_press(KeyPress("D"))
    assert events == [KeyEvent.character("D")]
    assert events[0].is_char and events[0].is_key("D")
    assert not events[0].is_key("d")


def test_unhandled_keys_produce_nothing():
    assert key_events_from_press(KeyPress(Keys.ControlX)) == []
    assert key_events_from_press(KeyPress(Keys.CPRResponse, "\x1b[1;1R")) == []


def test_bracketed_paste_expands_to_characters():
    events = key_events_from_press(KeyPress(Keys.BracketedPaste, "ab\nc"))
    assert [e.char for e in events] == ["a", "b", "c"]
