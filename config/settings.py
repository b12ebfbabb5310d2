"""Highlighter settings backed by QSettings.

Usage:
    from config.settings import HighlightSettings
    settings = HighlightSettings()
    settings.mask_color = QColor("#ffcc80")
    highlighter = TextHighlighter.from_settings(settings)
"""

import logging
import os
from pathlib import Path

from platformdirs import user_config_dir
from PyQt6.QtCore import QSettings
from PyQt6.QtGui import QColor, QFont

from core.text_highlighter import DEFAULT_MASK_COLOR

logger = logging.getLogger(__name__)

APP_NAME = "TextHighlighter"
APP_ORG = "TextHighlighter"

DEFAULT_PREFIX_WEIGHT = QFont.Weight.Bold.value


def default_settings_path() -> Path:
    return Path(user_config_dir(APP_NAME, APP_ORG)) / "highlighter.ini"


class HighlightSettings:
    """Thin wrapper around QSettings with typed property accessors."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        if qsettings is None:
            qsettings = QSettings(str(default_settings_path()), QSettings.Format.IniFormat)
        self._qs = qsettings

    # ------------------------------------------------------------------
    # Emphasis styles
    # ------------------------------------------------------------------

    @property
    def prefix_weight(self) -> QFont.Weight:
        raw = int(self._qs.value("highlight/prefix_weight", DEFAULT_PREFIX_WEIGHT))
        if not 1 <= raw <= 1000:
            logger.warning("Ignoring out-of-range font weight %s in settings", raw)
            return QFont.Weight(DEFAULT_PREFIX_WEIGHT)
        return QFont.Weight(raw)

    @prefix_weight.setter
    def prefix_weight(self, value: QFont.Weight) -> None:
        self._qs.setValue("highlight/prefix_weight", int(getattr(value, "value", value)))

    @property
    def mask_color(self) -> QColor:
        raw = os.environ.get("HIGHLIGHT_MASK_COLOR", self._qs.value("highlight/mask_color", DEFAULT_MASK_COLOR))
        color = QColor(raw)
        if not color.isValid():
            logger.warning("Ignoring invalid mask colour %r", raw)
            return QColor(DEFAULT_MASK_COLOR)
        return color

    @mask_color.setter
    def mask_color(self, value: QColor | str) -> None:
        self._qs.setValue("highlight/mask_color", value if isinstance(value, str) else value.name())

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    @property
    def last_entries_path(self) -> str:
        return self._qs.value("files/last_entries_path", "")

    @last_entries_path.setter
    def last_entries_path(self, value: str) -> None:
        self._qs.setValue("files/last_entries_path", value)

    # ------------------------------------------------------------------
    # Window geometry
    # ------------------------------------------------------------------

    @property
    def window_geometry(self) -> bytes | None:
        val = self._qs.value("ui/window_geometry")
        return bytes(val) if val else None

    @window_geometry.setter
    def window_geometry(self, value: bytes) -> None:
        self._qs.setValue("ui/window_geometry", value)

    def sync(self) -> None:
        self._qs.sync()
