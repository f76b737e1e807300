from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable

import gi

gi.require_version("Gio", "2.0")
from gi.repository import Gio, GLib, GObject  # type: ignore

logger = logging.getLogger(__name__)

# =====================
# Configuration
# =====================
APPLICATION_ID = "org.gtk.exampleapp"
APPLICATION_NAME = "Example App"

CONFIG_DIR_NAME = "exampleapp"
CONFIG_FILE_NAME = "config.json"
CONFIG_ENV_VAR = "EXAMPLEAPP_CONFIG"
LOG_LEVEL_ENV_VAR = "EXAMPLEAPP_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = logging.WARNING
CONFIG_KEY_FONT = "font"
CONFIG_KEY_TRANSITION = "transition"
CONFIG_KEY_SHOW_WORDS = "show-words"
CONFIG_KEY_SHOW_LINES = "show-lines"
CONFIG_KEYS = (
    CONFIG_KEY_FONT,
    CONFIG_KEY_TRANSITION,
    CONFIG_KEY_SHOW_WORDS,
    CONFIG_KEY_SHOW_LINES,
)
TRANSITION_NONE = "none"
TRANSITION_CROSSFADE = "crossfade"
TRANSITION_SLIDE = "slide-left-right"
TRANSITIONS = (
    (TRANSITION_NONE, "None"),
    (TRANSITION_CROSSFADE, "Fade"),
    (TRANSITION_SLIDE, "Slide"),
)
TRANSITION_IDS = tuple(transition_id for transition_id, _label in TRANSITIONS)
DEFAULT_FONT = "Monospace 12"
DEFAULT_TRANSITION = TRANSITION_NONE
DEFAULT_SHOW_WORDS = True
DEFAULT_SHOW_LINES = False


def configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    level = logging.getLevelName(level_name) if level_name else DEFAULT_LOG_LEVEL
    if not isinstance(level, int):
        level = DEFAULT_LOG_LEVEL
    logging.basicConfig(level=level, format=LOG_FORMAT)


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return Path(GLib.get_user_config_dir()) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _read_config(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        raw = path.read_text(encoding="utf-8")
        data = json.loads(raw)
        if isinstance(data, dict):
            return data
        logger.warning("Ignoring config %s: expected a JSON object", path)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read config %s: %s", path, exc)
    return {}


def _write_config(path: Path, config: dict[str, Any]) -> None:
    serializable: dict[str, Any] = {}
    for key, value in config.items():
        if not isinstance(key, str):
            continue
        serializable[key] = value
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(serializable, indent=2), encoding="utf-8")
    except OSError as exc:
        logger.error("Could not write config %s: %s", path, exc)


def _coerce_font(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _coerce_transition(value: Any, default: str) -> str:
    if isinstance(value, str) and value in TRANSITION_IDS:
        return value
    return default


def _coerce_flag(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    return default


class Settings(GObject.Object):
    """Process-wide preferences with change notification.

    Each key is a GObject property named after it, so widgets can bind to
    ``font``, ``transition``, ``show-words`` and ``show-lines`` directly.
    When a path is given every change is written straight back to it.
    """

    __gtype_name__ = "ExampleAppSettings"

    font = GObject.Property(type=str, default=DEFAULT_FONT)
    transition = GObject.Property(type=str, default=DEFAULT_TRANSITION)
    show_words = GObject.Property(type=bool, default=DEFAULT_SHOW_WORDS)
    show_lines = GObject.Property(type=bool, default=DEFAULT_SHOW_LINES)

    def __init__(self, path: Path | None = None) -> None:
        super().__init__()
        self.path = path
        config = _read_config(path) if path is not None else {}
        self.props.font = _coerce_font(config.get(CONFIG_KEY_FONT), DEFAULT_FONT)
        self.props.transition = _coerce_transition(
            config.get(CONFIG_KEY_TRANSITION), DEFAULT_TRANSITION
        )
        self.props.show_words = _coerce_flag(config.get(CONFIG_KEY_SHOW_WORDS), DEFAULT_SHOW_WORDS)
        self.props.show_lines = _coerce_flag(config.get(CONFIG_KEY_SHOW_LINES), DEFAULT_SHOW_LINES)
        self.connect("notify", self._on_notify)

    @classmethod
    def load(cls, path: Path | None = None) -> Settings:
        target = path if path is not None else config_path()
        logger.info("Loading settings from %s", target)
        return cls(target)

    def to_dict(self) -> dict[str, Any]:
        return {key: self.get_property(key) for key in CONFIG_KEYS}

    def bind(
        self,
        key: str,
        target: GObject.Object,
        target_property: str,
        flags: GObject.BindingFlags = GObject.BindingFlags.BIDIRECTIONAL,
        transform_to: Callable[[GObject.Binding, Any], Any] | None = None,
        transform_from: Callable[[GObject.Binding, Any], Any] | None = None,
    ) -> GObject.Binding:
        if key not in CONFIG_KEYS:
            raise KeyError(key)
        return self.bind_property(
            key,
            target,
            target_property,
            flags | GObject.BindingFlags.SYNC_CREATE,
            transform_to,
            transform_from,
        )

    def create_action(self, key: str) -> Gio.PropertyAction:
        if key not in CONFIG_KEYS:
            raise KeyError(key)
        return Gio.PropertyAction.new(key, self, key)

    def _on_notify(self, _settings: Settings, pspec: GObject.ParamSpec) -> None:
        logger.debug("Setting %s changed", pspec.name)
        if self.path is None:
            return
        _write_config(self.path, self.to_dict())
