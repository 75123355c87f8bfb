import pytest

from core import BookmarkItem, ScheduleItem, TaskItem, VirtualMachineItem
from core.modes import (
    TAB_POSITIONS,
    ControllerId,
    ModalState,
    TabMode,
    WindowMode,
    derive_active,
    tab_position,
)


def test_derive_active():
    assert derive_active(WindowMode.BOOKMARK, TabMode.TASKS) is ControllerId.BOOKMARKS
    assert derive_active(WindowMode.TAB, TabMode.SCHEDULE) is ControllerId.SCHEDULE
    assert derive_active(WindowMode.TAB, TabMode.TASKS) is ControllerId.TASKS
    assert derive_active(WindowMode.TAB, TabMode.VIRTUALBOX) is ControllerId.VIRTUALBOX


def test_tab_positions_cover_every_tab():
    assert sorted(tab_position(tab) for tab in TabMode) == [0, 1, 2]
    assert set(TAB_POSITIONS) == set(TabMode)


def test_tab_from_string():
    assert TabMode.from_string(" Tasks ") is TabMode.TASKS
    with pytest.raises(ValueError):
        TabMode.from_string("mail")


def test_modal_state_forms():
    assert ModalState.FORM_NEW.is_form and ModalState.FORM_EDIT.is_form
    assert not ModalState.HELP.is_form and not ModalState.BASE.is_form


def test_bookmark_from_dict_requires_strings():
    assert BookmarkItem.from_dict({"title": "a", "url": "b"}) == BookmarkItem("a", "b")
    with pytest.raises(KeyError):
        BookmarkItem.from_dict({"title": "a"})
    with pytest.raises(ValueError):
        BookmarkItem.from_dict({"title": "a", "url": 3})


def test_summary_texts():
    assert BookmarkItem("t", "u").summary_text() == "t"
    assert ScheduleItem("1", "Meet", "10:00", "11:00").summary_text() == "Meet\n  10:00 - 11:00"
    assert TaskItem("1", "Do", notes="n", due="d").summary_text() == "Do\n  n\n  d"
    assert VirtualMachineItem("vm").summary_text() == "vm"


def test_task_payload_omits_empty_fields():
    assert TaskItem("1", "Do").to_payload() == {"id": "1", "title": "Do", "status": "needsAction"}
    assert TaskItem.from_resource({"id": "1", "title": "Do", "status": "completed"}).completed


def test_schedule_from_event_defaults():
    item = ScheduleItem.from_event({"id": "x"})
    assert (item.summary, item.description, item.start, item.end, item.link) == (
        "No summary",
        "No description",
        "No start time",
        "No end time",
        "",
    )
