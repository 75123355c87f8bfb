from dataclasses import replace
from typing import Dict, List

from application.ports import BookmarkRepository, Launcher
from core.desktop.dashboard.interface.help_texts import BOOKMARK_HELP
from core.desktop.dashboard.interface.tui_controller import ResourceController
from core.desktop.dashboard.interface.tui_forms import BookmarkForm
from core.items import BookmarkItem
from core.modes import ControllerId


class BookmarksController(ResourceController):
    """Local bookmarks; every mutation rewrites the whole store from memory."""

    controller_id = ControllerId.BOOKMARKS
    TITLE = "Bookmark"
    HELP_TITLE = "Help Bookmark"
    HELP_LINES = BOOKMARK_HELP
    FORM_CLASS = BookmarkForm

    def __init__(self, store: BookmarkRepository, launcher: Launcher):
        self.store = store
        self.launcher = launcher
        super().__init__()

    def _load(self) -> List[BookmarkItem]:
        return self.store.load()

    def _open(self, item: BookmarkItem) -> None:
        self.launcher.open_url(item.url)

    def form_values(self, item: BookmarkItem) -> Dict[str, str]:
        return {"title": item.title, "url": item.url}

    def _create(self, values: Dict[str, str]) -> None:
        self.items.append(BookmarkItem(title=values["title"], url=values["url"]))

    def _update(self, index: int, item: BookmarkItem, values: Dict[str, str]) -> None:
        self.items[index] = replace(item, title=values["title"], url=values["url"])

    def _remove(self, index: int, item: BookmarkItem) -> None:
        del self.items[index]

    def _after_write(self) -> None:
        self.store.save(self.items)
        self.list.set_count(len(self.items))
