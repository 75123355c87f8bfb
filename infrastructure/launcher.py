import logging
import subprocess
import webbrowser
from typing import Callable, Optional

from application.ports import Launcher
from core.errors import LaunchError

logger = logging.getLogger("dashdeck.launcher")


class BrowserLauncher(Launcher):
    """Spawn a browser for a URL; an explicit executable wins over the platform default."""

    def __init__(self, browser: str = "", spawner: Optional[Callable[..., subprocess.Popen]] = None) -> None:
        self.browser = (browser or "").strip()
        self.spawner = spawner or subprocess.Popen

    def open_url(self, url: str) -> None:
        logger.info("Opening %s", url)
        if self.browser:
            try:
                self.spawner(
                    [self.browser, url],
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                    start_new_session=True,
                )
            except OSError as exc:
                raise LaunchError(f"Failed to launch browser {self.browser!r}: {exc}") from exc
            return
        try:
            controller = webbrowser.get()
        except webbrowser.Error as exc:
            raise LaunchError(f"No browser available to open {url}: {exc}") from exc
        if not controller.open(url):
            raise LaunchError(f"Browser refused to open {url}")
