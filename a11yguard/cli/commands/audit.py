"""``a11yguard audit PATH``: audit a markup or component file.

Component files (``.jsx``, ``.tsx``, ``.vue``, ``.svelte``) are reduced to
their markup first.  The exit code reflects the ``--fail-on`` threshold so
the command can gate a CI job.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from a11yguard import config
from a11yguard.cli.commands.common import console, read_source
from a11yguard.core.auditor import audit_file
from a11yguard.models.issues import AuditSummary
from a11yguard.reporting.renderer import AuditRenderer, ReportFormat, format_audit_report


class FailOn(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    NONE = "none"


def should_fail(summary: AuditSummary, fail_on: FailOn) -> bool:
    """Whether *summary* has issues at or above the *fail_on* severity."""
    if fail_on is FailOn.ERROR:
        return summary.errors > 0
    if fail_on is FailOn.WARNING:
        return summary.errors + summary.warnings > 0
    return False


def audit_cmd(
    path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="HTML or component file to audit.",
    ),
    level: Optional[str] = typer.Option(
        None,
        "--level",
        "-l",
        help="WCAG level: A, AA or AAA (default from A11YGUARD_LEVEL).",
    ),
    fmt: Optional[ReportFormat] = typer.Option(
        None,
        "--format",
        "-f",
        help="Report format (default from A11YGUARD_REPORT_FORMAT).",
    ),
    fail_on: FailOn = typer.Option(
        FailOn.ERROR,
        "--fail-on",
        help="Exit with code 1 when issues of this severity or worse are found.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        dir_okay=False,
        help="Write the report to this file instead of the terminal.",
    ),
) -> None:
    """Audit a file against the WCAG rule catalog."""
    settings = config.settings
    report_format = fmt or settings.report_format
    result = audit_file(read_source(path), str(path), level or settings.level)

    if output is not None:
        output.write_text(format_audit_report(result, report_format) + "\n", encoding="utf-8")
        console.print(f"[dim]Report written to {output}[/dim]")
    elif report_format is ReportFormat.TEXT:
        AuditRenderer(console=console).print_audit(result)
    else:
        typer.echo(format_audit_report(result, report_format))

    if should_fail(result.summary, fail_on):
        raise typer.Exit(code=1)
