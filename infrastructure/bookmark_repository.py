import json
import logging
from pathlib import Path
from typing import List

from application.ports import BookmarkRepository
from core.items import BookmarkItem

logger = logging.getLogger("dashdeck.bookmarks")


class FileBookmarkRepository(BookmarkRepository):
    """Bookmarks stored as one flat JSON array of ``{"title", "url"}`` objects."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[BookmarkItem]:
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(raw, list):
                raise ValueError("bookmark store is not a JSON array")
            return [BookmarkItem.from_dict(entry) for entry in raw]
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.warning("Unable to read bookmarks from %s: %s", self.path, exc)
            return []

    def save(self, bookmarks: List[BookmarkItem]) -> None:
        payload = json.dumps([b.to_dict() for b in bookmarks], indent=2, ensure_ascii=False)
        try:
            if self.path.parent and not self.path.parent.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload + "\n", encoding="utf-8")
        except OSError as exc:
            logger.warning("Unable to write bookmarks to %s: %s", self.path, exc)
