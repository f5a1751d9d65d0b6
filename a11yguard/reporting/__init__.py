"""Text, markdown, JSON and Rich rendering of a11yguard results."""

from a11yguard.reporting.renderer import (
    AuditRenderer,
    ReportFormat,
    format_audit_report,
    format_contrast_report,
    format_fix_report,
)

__all__ = [
    "AuditRenderer",
    "ReportFormat",
    "format_audit_report",
    "format_contrast_report",
    "format_fix_report",
]
