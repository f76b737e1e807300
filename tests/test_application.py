"""Tests for the application shell: actions, accels and file opening."""
import pytest

gi = pytest.importorskip("gi")
try:
    gi.require_version("Gtk", "4.0")
    gi.require_version("Adw", "1")
    from gi.repository import Gio, Gtk
except (ImportError, ValueError) as exc:
    pytest.skip(f"GTK 4 / Libadwaita unavailable: {exc}", allow_module_level=True)

if not Gtk.init_check():
    pytest.skip("GTK could not open a display", allow_module_level=True)

from exampleapp.application import ExampleApp
from exampleapp.config import Settings
from exampleapp.window import ExampleAppWindow


@pytest.fixture
def app():
    application = ExampleApp(
        Settings(),
        flags=Gio.ApplicationFlags.HANDLES_OPEN | Gio.ApplicationFlags.NON_UNIQUE,
    )
    application.register(None)
    yield application
    for win in application.get_windows():
        win.destroy()


@pytest.fixture
def text_files(tmp_path):
    files = []
    for name, text in (("a.txt", "one"), ("b.txt", "two words"), ("c.txt", "x\ny\nz")):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        files.append(Gio.File.new_for_path(str(path)))
    return files


def test_startup_installs_actions(app):
    """Test that startup registers the app actions and their accels."""
    assert app.lookup_action("quit") is not None
    assert app.lookup_action("preferences") is not None
    assert app.get_accels_for_action("app.quit") == ["<Primary>q"]
    assert app.get_accels_for_action("win.open") == ["<Primary>o"]


def test_open_reuses_first_window(app, text_files):
    """Test that opening files creates one window and then reuses it."""
    app.open(text_files[:1], "")
    windows = app.get_windows()
    assert len(windows) == 1
    win = windows[0]
    assert isinstance(win, ExampleAppWindow)
    assert len(win.documents) == 1

    app.open(text_files[1:], "")
    assert app.get_windows() == [win]
    assert [doc.basename for doc in win.documents.values()] == ["a.txt", "b.txt", "c.txt"]


def test_activate_creates_window(app):
    """Test that each activation presents a fresh window."""
    app.activate()
    app.activate()
    windows = app.get_windows()
    assert len(windows) == 2
    assert all(isinstance(win, ExampleAppWindow) for win in windows)
    assert all(win.settings is app.settings for win in windows)
