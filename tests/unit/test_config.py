"""Tests for env-driven settings."""

from __future__ import annotations

from a11yguard.config import Settings
from a11yguard.models.rules import WCAGLevel
from a11yguard.reporting.renderer import ReportFormat


class TestSettings:
    def test_defaults(self, isolated_settings):
        assert isolated_settings.level is WCAGLevel.AA
        assert isolated_settings.default_lang == "en"
        assert isolated_settings.report_format is ReportFormat.TEXT
        assert isolated_settings.log_level == "WARNING"
        assert isolated_settings.large_text is False

    def test_env_overrides(self, isolated_settings, monkeypatch):
        monkeypatch.setenv("A11YGUARD_LEVEL", "aaa")
        monkeypatch.setenv("A11YGUARD_DEFAULT_LANG", "de")
        monkeypatch.setenv("A11YGUARD_REPORT_FORMAT", "json")
        monkeypatch.setenv("A11YGUARD_LOG_LEVEL", "debug")
        monkeypatch.setenv("A11YGUARD_LARGE_TEXT", "true")
        settings = Settings(_env_file=None)
        assert settings.level is WCAGLevel.AAA
        assert settings.default_lang == "de"
        assert settings.report_format is ReportFormat.JSON
        assert settings.log_level == "DEBUG"
        assert settings.large_text is True

    def test_unknown_level_falls_back_to_aa(self, isolated_settings, monkeypatch):
        monkeypatch.setenv("A11YGUARD_LEVEL", "gold")
        assert Settings(_env_file=None).level is WCAGLevel.AA

    def test_env_file(self, isolated_settings, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("A11YGUARD_DEFAULT_LANG=fr\n", encoding="utf-8")
        assert Settings(_env_file=env_file).default_lang == "fr"

    def test_keyword_arguments(self, isolated_settings):
        assert Settings(_env_file=None, level="A").level is WCAGLevel.A
