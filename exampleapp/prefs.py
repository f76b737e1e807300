from __future__ import annotations

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, GObject, Gtk, Pango  # type: ignore

from .config import (
    CONFIG_KEY_FONT,
    CONFIG_KEY_TRANSITION,
    DEFAULT_FONT,
    DEFAULT_TRANSITION,
    TRANSITION_IDS,
    TRANSITIONS,
    Settings,
)


def _font_to_desc(_binding: GObject.Binding, value: str) -> Pango.FontDescription:
    return Pango.FontDescription.from_string(value or DEFAULT_FONT)


def _desc_to_font(_binding: GObject.Binding, value: Pango.FontDescription | None) -> str:
    if value is None:
        return DEFAULT_FONT
    return value.to_string() or DEFAULT_FONT


def _transition_to_index(_binding: GObject.Binding, value: str) -> int:
    if value in TRANSITION_IDS:
        return TRANSITION_IDS.index(value)
    return TRANSITION_IDS.index(DEFAULT_TRANSITION)


def _index_to_transition(_binding: GObject.Binding, value: int) -> str:
    if 0 <= value < len(TRANSITION_IDS):
        return TRANSITION_IDS[value]
    return DEFAULT_TRANSITION


class ExampleAppPrefs(Adw.Window):
    """Preferences window editing the font and the tab transition."""

    def __init__(self, parent: Gtk.Window | None, settings: Settings) -> None:
        super().__init__(title="Preferences", modal=True)
        if parent is not None:
            self.set_transient_for(parent)
        self.set_default_size(420, 260)
        self.settings = settings
        self._build_ui()

    def _build_ui(self) -> None:
        view = Adw.ToolbarView()
        header = Adw.HeaderBar()
        header.add_css_class("flat")
        view.add_top_bar(header)

        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        box.set_margin_top(18)
        box.set_margin_bottom(18)
        box.set_margin_start(18)
        box.set_margin_end(18)

        group = Adw.PreferencesGroup(title="Display")
        group.set_hexpand(True)
        box.append(group)

        font_row = Adw.ActionRow(title="Font")
        font_dialog = Gtk.FontDialog()
        font_dialog.set_modal(True)
        self.font = Gtk.FontDialogButton(dialog=font_dialog)
        self.font.set_valign(Gtk.Align.CENTER)
        font_row.add_suffix(self.font)
        font_row.set_activatable_widget(self.font)
        group.add(font_row)
        self.settings.bind(
            CONFIG_KEY_FONT,
            self.font,
            "font-desc",
            GObject.BindingFlags.BIDIRECTIONAL,
            _font_to_desc,
            _desc_to_font,
        )

        labels = Gtk.StringList.new([label for _transition_id, label in TRANSITIONS])
        self.transition = Adw.ComboRow(title="Transition", model=labels)
        group.add(self.transition)
        self.settings.bind(
            CONFIG_KEY_TRANSITION,
            self.transition,
            "selected",
            GObject.BindingFlags.BIDIRECTIONAL,
            _transition_to_index,
            _index_to_transition,
        )

        view.set_content(box)
        self.set_content(view)
