import webbrowser
from types import SimpleNamespace

import pytest

from core.errors import LaunchError
from infrastructure.launcher import BrowserLauncher


def test_configured_browser_is_spawned():
    spawned = []
    launcher = BrowserLauncher("/usr/bin/firefox", spawner=lambda cmd, **kw: spawned.append(cmd))
    launcher.open_url("http://a")
    assert spawned == [["/usr/bin/firefox", "http://a"]]


def test_spawn_failure_is_fatal():
    def spawner(cmd, **kw):
        raise FileNotFoundError(cmd[0])

    with pytest.raises(LaunchError, match="Failed to launch browser"):
        BrowserLauncher("missing-browser", spawner=spawner).open_url("http://a")


def test_default_browser_used_without_executable(monkeypatch):
    opened = []
    monkeypatch.setattr(webbrowser, "get", lambda: SimpleNamespace(open=lambda url: opened.append(url) or True))
    BrowserLauncher().open_url("http://a")
    assert opened == ["http://a"]


def test_no_default_browser_is_fatal(monkeypatch):
    def get():
        raise webbrowser.Error("could not locate runnable browser")

    monkeypatch.setattr(webbrowser, "get", get)
    with pytest.raises(LaunchError):
        BrowserLauncher().open_url("http://a")


def test_browser_refusing_url_is_fatal(monkeypatch):
    monkeypatch.setattr(webbrowser, "get", lambda: SimpleNamespace(open=lambda url: False))
    with pytest.raises(LaunchError):
        BrowserLauncher("  ").open_url("http://a")
