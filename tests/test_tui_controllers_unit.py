import json
from types import SimpleNamespace

import pytest

from core.desktop.dashboard.interface.tui_bookmarks import BookmarksController
from core.desktop.dashboard.interface.tui_controller import KeyOutcome
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
from core.desktop.dashboard.interface.tui_machines import MachinesController
from core.desktop.dashboard.interface.tui_schedule import ScheduleController
from core.desktop.dashboard.interface.tui_tasks import TasksController
from core.errors import LaunchError
from core.items import TASK_COMPLETED, BookmarkItem, ScheduleItem, TaskItem, VirtualMachineItem
from core.modes import ModalState
from infrastructure.bookmark_repository import FileBookmarkRepository
from infrastructure.google import GoogleCalendarService


def key(code):
    return KeyEvent(code)


def type_text(controller, text):
    for ch in text:
        controller.key_binding(KeyEvent.character(ch))


class FakeLauncher:
    def __init__(self, fail=False):
        self.opened = []
        self.fail = fail

    def open_url(self, url):
        if self.fail:
            raise LaunchError("boom")
        self.opened.append(url)


class FakeCalendar:
    def __init__(self, events):
        self.events = list(events)
        self.calls = []

    def list_events(self):
        return list(self.events)

    def create_event(self, summary, start, end, description):
        self.calls.append(("create", summary, start, end, description))
        self.events.append(ScheduleItem(id=f"n{len(self.events)}", summary=summary, start=start, end=end))
        return True

    def update_event(self, event_id, summary, start, end, description):
        self.calls.append(("update", event_id, summary, start, end, description))
        return True

    def delete_event(self, event_id):
        self.calls.append(("delete", event_id))
        self.events = [e for e in self.events if e.id != event_id]
        return True


class FakeTasks:
    def __init__(self, tasks):
        self.tasks = list(tasks)
        self.updates = []
        self.created = []
        self.deleted = []

    def list_tasks(self):
        return [t for t in self.tasks if not t.completed]

    def create_task(self, title, notes, due):
        self.created.append((title, notes, due))
        return True

    def update_task(self, task):
        self.updates.append(task)
        self.tasks = [task if t.id == task.id else t for t in self.tasks]
        return True

    def delete_task(self, task_id):
        self.deleted.append(task_id)
        return True


class FakeMachines:
    def __init__(self, names):
        self.names = names
        self.started = []
        self.list_calls = 0

    def list_machines(self):
        self.list_calls += 1
        return [VirtualMachineItem(name) for name in self.names]

    def start_machine(self, name):
        self.started.append(name)


def _events(n):
    return [ScheduleItem(id=f"e{i}", summary=f"ev{i}", start="s", end="e", link=f"http://l/{i}") for i in range(n)]


@pytest.fixture
def bookmarks(tmp_path):
    store = FileBookmarkRepository(tmp_path / "bookmark.json")
    return BookmarksController(store, FakeLauncher())


class TestBookmarks:
    def test_empty_store_down_keeps_index_zero(self, bookmarks):
        assert bookmarks.items == []
        assert bookmarks.key_binding(key(KEY_DOWN)) is KeyOutcome.HANDLED
        assert bookmarks.list.index == 0

    def test_add_through_form_persists(self, bookmarks, tmp_path):
        bookmarks.key_binding(key(KEY_F2))
        assert bookmarks.state is ModalState.FORM_NEW
        type_text(bookmarks, "A")
        bookmarks.key_binding(key(KEY_TAB))
        type_text(bookmarks, "http://a")
        bookmarks.key_binding(key(KEY_F12))
        assert len(bookmarks.items) == 1
        assert json.loads((tmp_path / "bookmark.json").read_text()) == [{"title": "A", "url": "http://a"}]
        assert bookmarks.state is ModalState.BASE
        assert not bookmarks.form.is_open
        assert bookmarks.form.values() == {"title": "", "url": ""}

    def test_edit_prefills_and_overwrites_selected(self, tmp_path):
        store = FileBookmarkRepository(tmp_path / "b.json")
        store.save([BookmarkItem("a", "http://a"), BookmarkItem("b", "http://b")])
        controller = BookmarksController(store, FakeLauncher())
        controller.key_binding(key(KEY_DOWN))
        controller.key_binding(key(KEY_F3))
        assert controller.form.field("title").text == "b"
        type_text(controller, "2")
        controller.key_binding(key(KEY_F12))
        assert store.load() == [BookmarkItem("a", "http://a"), BookmarkItem("b2", "http://b")]

    def test_f3_on_empty_list_does_nothing(self, bookmarks):
        assert bookmarks.key_binding(key(KEY_F3)) is KeyOutcome.IGNORED
        assert bookmarks.state is ModalState.BASE

    def test_delete_last_item_reclamps_selection(self, tmp_path):
        store = FileBookmarkRepository(tmp_path / "b.json")
        store.save([BookmarkItem("a", "1"), BookmarkItem("b", "2")])
        controller = BookmarksController(store, FakeLauncher())
        controller.key_binding(key(KEY_DOWN))
        controller.key_binding(KeyEvent.character("D"))
        assert controller.list.index == 0
        assert store.load() == [BookmarkItem("a", "1")]

    def test_enter_opens_url(self, tmp_path):
        store = FileBookmarkRepository(tmp_path / "b.json")
        store.save([BookmarkItem("a", "http://a")])
        launcher = FakeLauncher()
        controller = BookmarksController(store, launcher)
        controller.key_binding(key(KEY_ENTER))
        assert launcher.opened == ["http://a"]

    def test_launch_failure_propagates(self, tmp_path):
        store = FileBookmarkRepository(tmp_path / "b.json")
        store.save([BookmarkItem("a", "http://a")])
        controller = BookmarksController(store, FakeLauncher(fail=True))
        with pytest.raises(LaunchError):
            controller.key_binding(key(KEY_ENTER))

    def test_escape_in_form_closes_without_saving(self, bookmarks, tmp_path):
        bookmarks.key_binding(key(KEY_F2))
        type_text(bookmarks, "X")
        assert bookmarks.key_binding(key(KEY_ESCAPE)) is KeyOutcome.HANDLED
        assert bookmarks.state is ModalState.BASE
        assert bookmarks.items == []
        assert not (tmp_path / "bookmark.json").exists()

    def test_escape_in_base_leaves(self, bookmarks):
        assert bookmarks.key_binding(key(KEY_ESCAPE)) is KeyOutcome.LEAVE

    def test_up_down_move_focus_inside_form(self, bookmarks):
        bookmarks.key_binding(key(KEY_F2))
        bookmarks.key_binding(key(KEY_DOWN))
        assert bookmarks.form.active_index == 1
        bookmarks.key_binding(key(KEY_UP))
        assert bookmarks.form.active_index == 0

    def test_backtab_moves_focus_backwards_with_wrap(self, bookmarks):
        bookmarks.key_binding(key(KEY_F2))
        assert bookmarks.key_binding(key(KEY_BACKTAB)) is KeyOutcome.HANDLED
        assert bookmarks.form.active_index == 1
        assert bookmarks.form.field("title").text == ""


class TestModalPrecedence:
    def test_help_swallows_everything_but_close_keys(self, tmp_path):
        store = FileBookmarkRepository(tmp_path / "b.json")
        store.save([BookmarkItem("a", "1"), BookmarkItem("b", "2")])
        controller = BookmarksController(store, FakeLauncher())
        controller.key_binding(key(KEY_F1))
        assert controller.state is ModalState.HELP
        assert controller.help.active
        for event in [key(KEY_DOWN), KeyEvent.character("D"), key(KEY_F2), key(KEY_ENTER), KeyEvent.character("x")]:
            assert controller.key_binding(event) is KeyOutcome.IGNORED
        assert controller.list.index == 0
        assert len(controller.items) == 2
        assert not controller.form.is_open
        assert controller.key_binding(key(KEY_ESCAPE)) is KeyOutcome.HANDLED
        assert controller.state is ModalState.BASE
        assert not controller.help.active

    def test_f1_closes_help(self, bookmarks):
        bookmarks.key_binding(key(KEY_F1))
        bookmarks.key_binding(key(KEY_F1))
        assert bookmarks.state is ModalState.BASE

    def test_typing_d_in_form_does_not_delete(self, tmp_path):
        store = FileBookmarkRepository(tmp_path / "b.json")
        store.save([BookmarkItem("a", "1")])
        controller = BookmarksController(store, FakeLauncher())
        controller.key_binding(key(KEY_F2))
        controller.key_binding(KeyEvent.character("D"))
        assert controller.form.field("title").text == "D"
        assert len(controller.items) == 1

    def test_help_and_form_never_open_together(self, bookmarks):
        bookmarks.key_binding(key(KEY_F2))
        bookmarks.key_binding(key(KEY_F1))
        assert not bookmarks.help.active
        assert bookmarks.form.is_open


class TestSchedule:
    def test_delete_first_of_three(self):
        calendar = FakeCalendar(_events(3))
        controller = ScheduleController(calendar, FakeLauncher())
        controller.key_binding(KeyEvent.character("D"))
        assert calendar.calls == [("delete", "e0")]
        assert len(controller.items) == 2
        assert controller.list.index == 0

    def test_add_passes_form_values(self):
        calendar = FakeCalendar([])
        controller = ScheduleController(calendar, FakeLauncher())
        controller.key_binding(key(KEY_F2))
        type_text(controller, "Lunch")
        controller.key_binding(key(KEY_TAB))
        type_text(controller, "2024-05-01T12:00:00")
        controller.key_binding(key(KEY_TAB))
        type_text(controller, "2024-05-01T13:00:00")
        controller.key_binding(key(KEY_F12))
        assert calendar.calls == [("create", "Lunch", "2024-05-01T12:00:00", "2024-05-01T13:00:00", "")]
        assert len(controller.items) == 1

    def test_edit_updates_selected_event(self):
        calendar = FakeCalendar(_events(2))
        controller = ScheduleController(calendar, FakeLauncher())
        controller.key_binding(key(KEY_DOWN))
        controller.key_binding(key(KEY_F3))
        assert controller.state is ModalState.FORM_EDIT
        type_text(controller, "!")
        controller.key_binding(key(KEY_F12))
        assert calendar.calls == [("update", "e1", "ev1!", "s", "e", "")]

    def test_enter_opens_event_link(self):
        launcher = FakeLauncher()
        controller = ScheduleController(FakeCalendar(_events(1)), launcher)
        controller.key_binding(key(KEY_ENTER))
        assert launcher.opened == ["http://l/0"]

    def test_reload_rereads(self):
        calendar = FakeCalendar([])
        controller = ScheduleController(calendar, FakeLauncher())
        calendar.events = _events(2)
        controller.key_binding(KeyEvent.character("R"))
        assert len(controller.items) == 2

    def test_bad_offset_starts_empty_and_survives_reload(self):
        client = SimpleNamespace(get_json=lambda *args, **kwargs: {"items": [{"id": "e1"}]})
        controller = ScheduleController(GoogleCalendarService(client, "+9"), FakeLauncher())
        assert controller.items == []
        assert controller.key_binding(KeyEvent.character("R")) is KeyOutcome.HANDLED
        assert controller.items == []


class TestTasks:
    def test_complete_marks_status_before_write_and_drops_item(self):
        service = FakeTasks([TaskItem("t1", "one"), TaskItem("t2", "two")])
        controller = TasksController(service, FakeLauncher())
        assert controller.key_binding(KeyEvent.character("C")) is KeyOutcome.HANDLED
        assert service.updates[0].id == "t1"
        assert service.updates[0].status == TASK_COMPLETED
        assert [t.id for t in controller.items] == ["t2"]

    def test_enter_opens_tasks_page(self):
        launcher = FakeLauncher()
        controller = TasksController(FakeTasks([TaskItem("t1", "one")]), launcher, tasks_url="http://tasks")
        controller.key_binding(key(KEY_ENTER))
        assert launcher.opened == ["http://tasks"]

    def test_enter_on_empty_list_is_noop(self):
        launcher = FakeLauncher()
        controller = TasksController(FakeTasks([]), launcher)
        controller.key_binding(key(KEY_ENTER))
        assert launcher.opened == []

    def test_edit_puts_full_task(self):
        service = FakeTasks([TaskItem("t1", "one", notes="n", due="2024-01-01T00:00:00.000Z")])
        controller = TasksController(service, FakeLauncher())
        controller.key_binding(key(KEY_F3))
        controller.key_binding(key(KEY_TAB))
        type_text(controller, "2")
        controller.key_binding(key(KEY_F12))
        assert service.updates == [TaskItem("t1", "one", notes="n2", due="2024-01-01T00:00:00.000Z")]

    def test_add_and_delete(self):
        service = FakeTasks([TaskItem("t1", "one")])
        controller = TasksController(service, FakeLauncher())
        controller.key_binding(key(KEY_F2))
        type_text(controller, "new")
        controller.key_binding(key(KEY_F12))
        controller.key_binding(KeyEvent.character("D"))
        assert service.created == [("new", "", "")]
        assert service.deleted == ["t1"]


class TestMachines:
    def test_enter_starts_selected_machine(self):
        manager = FakeMachines(["vm1", "vm2"])
        controller = MachinesController(manager)
        controller.key_binding(key(KEY_DOWN))
        controller.key_binding(key(KEY_ENTER))
        assert manager.started == ["vm2"]

    def test_no_form_no_delete_no_reload(self):
        manager = FakeMachines(["vm1"])
        controller = MachinesController(manager)
        assert controller.form is None
        assert controller.key_binding(key(KEY_F2)) is KeyOutcome.IGNORED
        assert controller.key_binding(KeyEvent.character("D")) is KeyOutcome.IGNORED
        assert controller.key_binding(KeyEvent.character("R")) is KeyOutcome.IGNORED
        assert manager.list_calls == 1
        assert controller.state is ModalState.BASE

    def test_help_still_available(self):
        controller = MachinesController(FakeMachines([]))
        controller.key_binding(key(KEY_F1))
        assert controller.state is ModalState.HELP


def test_summaries_use_item_text():
    controller = ScheduleController(FakeCalendar(_events(1)), FakeLauncher())
    assert controller.summaries() == ["ev0\n  s - e"]


def test_schedule_help_shows_offset_placeholder():
    controller = ScheduleController(FakeCalendar([]), FakeLauncher())
    formats = [line for line in controller.HELP_LINES if line.startswith("Start/End Datetime Format")]
    assert formats[-1].endswith("yyyy-mm-ddThh:mm:ss+hh:mm")
    assert not any("+09:00" in line for line in controller.HELP_LINES)
