"""Tests for config.settings."""

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtGui import QColor, QFont

from config.settings import HighlightSettings


@pytest.fixture
def settings(tmp_path, monkeypatch):
    monkeypatch.delenv("HIGHLIGHT_MASK_COLOR", raising=False)
    qs = QSettings(str(tmp_path / "highlighter.ini"), QSettings.Format.IniFormat)
    return HighlightSettings(qs)


class TestEmphasisSettings:
    def test_defaults(self, settings):
        assert settings.prefix_weight == QFont.Weight.Bold
        assert settings.mask_color == QColor("#ffeb3b")

    def test_prefix_weight_round_trip(self, settings):
        settings.prefix_weight = QFont.Weight.DemiBold
        assert settings.prefix_weight == QFont.Weight.DemiBold

    def test_intermediate_weight_is_kept(self, settings):
        settings.prefix_weight = 650
        assert settings.prefix_weight.value == 650

    @pytest.mark.parametrize("raw", [0, 5000])
    def test_out_of_range_weight_falls_back(self, settings, raw):
        settings.prefix_weight = raw
        assert settings.prefix_weight == QFont.Weight.Bold

    def test_mask_color_round_trip(self, settings):
        settings.mask_color = QColor("#80cbc4")
        assert settings.mask_color == QColor("#80cbc4")

    def test_invalid_mask_color_falls_back(self, settings):
        settings.mask_color = "not-a-colour"
        assert settings.mask_color == QColor("#ffeb3b")

    def test_env_overrides_mask_color(self, settings, monkeypatch):
        settings.mask_color = "#000000"
        monkeypatch.setenv("HIGHLIGHT_MASK_COLOR", "#ff8800")
        assert settings.mask_color == QColor("#ff8800")


class TestPersistence:
    def test_values_survive_reopen(self, tmp_path, monkeypatch):
        monkeypatch.delenv("HIGHLIGHT_MASK_COLOR", raising=False)
        path = str(tmp_path / "highlighter.ini")
        first = HighlightSettings(QSettings(path, QSettings.Format.IniFormat))
        first.mask_color = "#112233"
        first.last_entries_path = "/tmp/entries.txt"
        first.sync()

        second = HighlightSettings(QSettings(path, QSettings.Format.IniFormat))
        assert second.mask_color == QColor("#112233")
        assert second.last_entries_path == "/tmp/entries.txt"

    def test_window_geometry_empty_by_default(self, settings):
        assert settings.window_geometry is None
