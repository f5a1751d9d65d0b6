"""Runtime configuration: env-driven defaults for the command line.

Settings are read from ``A11YGUARD_*`` environment variables and an
optional ``.env`` file.  Only the CLI reads them; the audit engine, rules,
contrast analyzer and fix passes take everything as explicit arguments.
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from a11yguard.models.rules import WCAGLevel
from a11yguard.reporting.renderer import ReportFormat


class Settings(BaseSettings):
    """CLI defaults with environment variable overrides.

    Examples
    --------
    Override via environment::

        export A11YGUARD_LEVEL=AAA
        export A11YGUARD_DEFAULT_LANG=de
        export A11YGUARD_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="A11YGUARD_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Audit
    level: WCAGLevel = WCAGLevel.AA
    large_text: bool = False

    # Fixing
    default_lang: str = "en"

    # Output
    report_format: ReportFormat = ReportFormat.TEXT
    log_level: str = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, value: object) -> WCAGLevel:
        return WCAGLevel.coerce(value)

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


# Module-level singleton; import as `from a11yguard.config import settings`
settings = Settings()
