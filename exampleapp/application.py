from __future__ import annotations

import logging
import sys

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gio, GLib  # type: ignore

from .config import APPLICATION_ID, APPLICATION_NAME, Settings, configure_logging
from .prefs import ExampleAppPrefs
from .window import ExampleAppWindow

logger = logging.getLogger(__name__)

GLib.set_application_name(APPLICATION_NAME)


class ExampleApp(Adw.Application):
    def __init__(
        self,
        settings: Settings | None = None,
        flags: Gio.ApplicationFlags = Gio.ApplicationFlags.HANDLES_OPEN,
    ) -> None:
        super().__init__(application_id=APPLICATION_ID, flags=flags)
        self.settings = settings if settings is not None else Settings.load()

    def do_startup(self) -> None:
        Adw.Application.do_startup(self)

        quit_action = Gio.SimpleAction.new("quit", None)
        quit_action.connect("activate", lambda _action, _param: self.quit())
        self.add_action(quit_action)

        preferences = Gio.SimpleAction.new("preferences", None)
        preferences.connect("activate", self.on_preferences)
        self.add_action(preferences)

        self.set_accels_for_action("app.quit", ["<Primary>q"])
        self.set_accels_for_action("app.preferences", ["<Primary>comma"])
        self.set_accels_for_action("win.open", ["<Primary>o"])

    def do_activate(self) -> None:
        win = ExampleAppWindow(self, self.settings)
        win.present()

    def do_open(self, files: list[Gio.File], _n_files: int, _hint: str) -> None:
        windows = self.get_windows()
        win = windows[0] if windows else ExampleAppWindow(self, self.settings)
        for gfile in files:
            win.open(gfile)
        win.present()

    def on_preferences(self, _action: Gio.SimpleAction, _param: GLib.Variant | None) -> None:
        windows = self.get_windows()
        parent = windows[0] if windows else None
        prefs = ExampleAppPrefs(parent, self.settings)
        prefs.present()


def main() -> None:
    configure_logging()
    app = ExampleApp()
    raise SystemExit(app.run(sys.argv))


if __name__ == "__main__":
    main()
