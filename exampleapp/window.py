from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gio, GLib, GObject, Gtk  # type: ignore

from .config import (
    APPLICATION_NAME,
    CONFIG_KEY_FONT,
    CONFIG_KEY_SHOW_LINES,
    CONFIG_KEY_SHOW_WORDS,
    CONFIG_KEY_TRANSITION,
    TRANSITION_CROSSFADE,
    TRANSITION_NONE,
    TRANSITION_SLIDE,
    Settings,
)
from .text import count_lines, find_first, scan_words

logger = logging.getLogger(__name__)

TRANSITION_TYPES = {
    TRANSITION_NONE: Gtk.StackTransitionType.NONE,
    TRANSITION_CROSSFADE: Gtk.StackTransitionType.CROSSFADE,
    TRANSITION_SLIDE: Gtk.StackTransitionType.SLIDE_LEFT_RIGHT,
}
SIDEBAR_MIN_WIDTH = 160


def transition_type(transition_id: str) -> Gtk.StackTransitionType:
    return TRANSITION_TYPES.get(transition_id, Gtk.StackTransitionType.NONE)


@dataclass
class Document:
    basename: str
    buffer: Gtk.TextBuffer
    view: Gtk.TextView
    tag: Gtk.TextTag
    path: Path | None = None

    @property
    def text(self) -> str:
        start, end = self.buffer.get_bounds()
        return self.buffer.get_text(start, end, False)


def update_words(win: ExampleAppWindow) -> None:
    """Rebuild the sidebar with one button per word of the visible tab."""
    document = win.visible_document()
    if document is None:
        return
    words = scan_words(document.text)
    child = win.words.get_first_child()
    while child is not None:
        next_child = child.get_next_sibling()
        win.words.remove(child)
        child = next_child
    for word in words:
        row = Gtk.Button(label=word)
        row.set_has_frame(False)
        row.connect("clicked", lambda _button, word=word: win.searchentry.set_text(word))
        win.words.append(row)


def update_lines(win: ExampleAppWindow) -> None:
    document = win.visible_document()
    if document is None:
        return
    win.lines.set_text(str(count_lines(document.text)))


class ExampleAppWindow(Adw.ApplicationWindow):
    def __init__(self, app: Adw.Application | None, settings: Settings) -> None:
        super().__init__(application=app, title=APPLICATION_NAME)
        self.set_default_size(600, 400)

        self.settings = settings
        self.documents: dict[str, Document] = {}
        self._page_counter = 0

        header_bar = Adw.HeaderBar()

        self.stack = Gtk.Stack()
        self.stack.set_hexpand(True)
        self.stack.set_vexpand(True)
        header_bar.set_title_widget(Gtk.StackSwitcher(stack=self.stack))

        self.lines_label = Gtk.Label(label="Lines:")
        header_bar.pack_start(self.lines_label)
        self.lines = Gtk.Label()
        header_bar.pack_start(self.lines)

        self.gears = Gtk.MenuButton(icon_name="open-menu-symbolic")
        header_bar.pack_end(self.gears)

        self.search_button = Gtk.ToggleButton(icon_name="edit-find-symbolic")
        self.search_button.set_sensitive(False)
        header_bar.pack_end(self.search_button)

        self.searchentry = Gtk.SearchEntry()
        self.searchentry.set_hexpand(True)
        self.searchentry.connect("search-changed", self._on_search_text_changed)
        self.searchbar = Gtk.SearchBar()
        self.searchbar.set_child(self.searchentry)
        self.searchbar.connect_entry(self.searchentry)
        self.searchbar.set_key_capture_widget(self)

        self.words = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
        sidebar_scroller = Gtk.ScrolledWindow()
        sidebar_scroller.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        sidebar_scroller.set_min_content_width(SIDEBAR_MIN_WIDTH)
        sidebar_scroller.set_vexpand(True)
        sidebar_scroller.set_child(self.words)
        self.sidebar = Gtk.Revealer()
        self.sidebar.set_transition_type(Gtk.RevealerTransitionType.SLIDE_RIGHT)
        self.sidebar.set_child(sidebar_scroller)

        content = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL)
        content.append(self.sidebar)
        content.append(self.stack)

        self.toast_overlay = Adw.ToastOverlay()
        self.toast_overlay.set_child(content)
        toolbar_view = Adw.ToolbarView()
        toolbar_view.add_top_bar(header_bar)
        toolbar_view.add_top_bar(self.searchbar)
        toolbar_view.set_content(self.toast_overlay)
        self.set_content(toolbar_view)

        self._bind_settings()
        self._setup_menu()
        self.stack.connect("notify::visible-child", self._on_visible_child_changed)
        self.sidebar.connect("notify::reveal-child", self._on_reveal_child_changed)

    def _bind_settings(self) -> None:
        self.settings.bind(
            CONFIG_KEY_TRANSITION,
            self.stack,
            "transition-type",
            GObject.BindingFlags.DEFAULT,
            lambda _binding, value: transition_type(value),
        )
        self.search_button.bind_property(
            "active",
            self.searchbar,
            "search-mode-enabled",
            GObject.BindingFlags.BIDIRECTIONAL | GObject.BindingFlags.SYNC_CREATE,
        )
        self.settings.bind(CONFIG_KEY_SHOW_WORDS, self.sidebar, "reveal-child")
        self.settings.bind(
            CONFIG_KEY_SHOW_LINES,
            self.lines,
            "visible",
            GObject.BindingFlags.DEFAULT,
        )
        self.lines.bind_property(
            "visible",
            self.lines_label,
            "visible",
            GObject.BindingFlags.SYNC_CREATE,
        )

    def _setup_menu(self) -> None:
        menu = Gio.Menu()
        view_section = Gio.Menu()
        view_section.append("_Words", f"win.{CONFIG_KEY_SHOW_WORDS}")
        view_section.append("_Lines", f"win.{CONFIG_KEY_SHOW_LINES}")
        menu.append_section(None, view_section)
        app_section = Gio.Menu()
        app_section.append("_Open…", "win.open")
        app_section.append("_Preferences", "app.preferences")
        app_section.append("_Quit", "app.quit")
        menu.append_section(None, app_section)
        self.gears.set_menu_model(menu)

        self.add_action(self.settings.create_action(CONFIG_KEY_SHOW_WORDS))
        self.add_action(self.settings.create_action(CONFIG_KEY_SHOW_LINES))

        open_action = Gio.SimpleAction.new("open", None)
        open_action.connect("activate", self._on_open_action)
        self.add_action(open_action)

    def show_toast(self, message: str) -> None:
        self.toast_overlay.add_toast(Adw.Toast(title=message))

    def visible_document(self) -> Document | None:
        name = self.stack.get_visible_child_name()
        if not name:
            return None
        return self.documents.get(name)

    def open(self, gfile: Gio.File) -> Document | None:
        basename = gfile.get_basename() or gfile.get_uri()
        try:
            _ok, contents, _etag = gfile.load_contents(None)
        except GLib.Error as exc:
            logger.error("Could not open %s: %s", gfile.get_uri(), exc.message)
            self.show_toast(f"Could not open {basename}: {exc.message}")
            return None

        scrolled = Gtk.ScrolledWindow()
        scrolled.set_hexpand(True)
        scrolled.set_vexpand(True)

        view = Gtk.TextView()
        view.set_editable(False)
        view.set_cursor_visible(False)
        scrolled.set_child(view)

        buffer = view.get_buffer()
        buffer.set_text(bytes(contents).decode("utf-8", errors="replace"))
        tag = buffer.create_tag()
        self.settings.bind(CONFIG_KEY_FONT, tag, "font", GObject.BindingFlags.DEFAULT)
        start, end = buffer.get_bounds()
        buffer.apply_tag(tag, start, end)

        local_path = gfile.get_path()
        document = Document(
            basename=basename,
            buffer=buffer,
            view=view,
            tag=tag,
            path=Path(local_path) if local_path else None,
        )
        self._page_counter += 1
        name = f"document-{self._page_counter}"
        self.documents[name] = document
        buffer.connect("changed", self._on_buffer_changed, name)
        self.stack.add_titled(scrolled, name, basename)

        self.search_button.set_sensitive(True)
        update_words(self)
        update_lines(self)
        logger.info("Opened %s as %s", gfile.get_uri(), name)
        return document

    def _on_open_action(self, _action: Gio.SimpleAction, _param: GLib.Variant | None) -> None:
        dialog = Gtk.FileDialog(title="Open Files")
        file_filter = Gtk.FileFilter()
        file_filter.add_mime_type("text/plain")
        file_filter.set_name("Text files")
        dialog.set_default_filter(file_filter)
        dialog.open_multiple(self, None, self._on_files_chosen)

    def _on_files_chosen(self, dialog: Gtk.FileDialog, result: Gio.AsyncResult) -> None:
        try:
            files = dialog.open_multiple_finish(result)
        except GLib.Error:
            return
        for index in range(files.get_n_items()):
            gfile = files.get_item(index)
            if isinstance(gfile, Gio.File):
                self.open(gfile)

    def search(self, query: str) -> bool:
        """Select and scroll to the first match of ``query`` in the visible tab.

        Returns False and leaves the selection alone when there is nothing
        to search for or no match.
        """
        if not query:
            return False
        document = self.visible_document()
        if document is None:
            return False
        match = find_first(document.text, query)
        if match is None:
            return False
        start = document.buffer.get_iter_at_offset(match[0])
        end = document.buffer.get_iter_at_offset(match[1])
        document.buffer.select_range(start, end)
        document.view.scroll_to_iter(start, 0.0, False, 0.0, 0.0)
        return True

    def _on_search_text_changed(self, entry: Gtk.SearchEntry) -> None:
        self.search(entry.get_text())

    def _on_visible_child_changed(self, _stack: Gtk.Stack, _pspec: Any) -> None:
        self.searchbar.set_search_mode(False)
        update_words(self)
        update_lines(self)

    def _on_reveal_child_changed(self, _revealer: Gtk.Revealer, _pspec: Any) -> None:
        update_words(self)

    def _on_buffer_changed(self, _buffer: Gtk.TextBuffer, name: str) -> None:
        if name != self.stack.get_visible_child_name():
            return
        update_words(self)
        update_lines(self)
