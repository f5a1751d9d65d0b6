"""``a11yguard contrast`` and ``a11yguard scan-contrast``: color checks.

``contrast FG BG`` checks a single pair and suggests a passing foreground.
``scan-contrast PATH`` walks a style sheet or an HTML file for failing
declared pairs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from a11yguard import config
from a11yguard.cli.commands.common import console, read_source
from a11yguard.contrast.analyzer import (
    meets_requirement,
    scan_declarations,
    scan_markup,
    suggest_fix,
)
from a11yguard.contrast.color import parse_color
from a11yguard.markup.document import MarkupParseError, parse_markup
from a11yguard.models.rules import WCAGLevel
from a11yguard.reporting.renderer import AuditRenderer, ReportFormat, format_contrast_report


def contrast_cmd(
    foreground: str = typer.Argument(..., help="Text color, e.g. '#777' or 'rgb(0,0,0)'."),
    background: str = typer.Argument(..., help="Background color."),
    level: Optional[str] = typer.Option(
        None, "--level", "-l", help="WCAG level: A, AA or AAA."
    ),
    large: Optional[bool] = typer.Option(
        None,
        "--large/--normal",
        help="Treat the text as large (18pt, or 14pt bold).",
    ),
) -> None:
    """Check the contrast ratio of a color pair.  Exits 1 when it fails."""
    settings = config.settings
    for name, value in (("FOREGROUND", foreground), ("BACKGROUND", background)):
        if parse_color(value) is None:
            console.print(f"[bold red]Unrecognised color for {name}:[/bold red] {value}")
            raise typer.Exit(code=2)

    wcag_level = WCAGLevel.coerce(level or settings.level)
    is_large = settings.large_text if large is None else large
    requirement = meets_requirement(foreground, background, wcag_level, is_large)
    suggestion = None
    if not requirement.passes:
        suggestion = suggest_fix(foreground, background, wcag_level, is_large)

    console.print(
        AuditRenderer(console=console).render_contrast(
            foreground, background, requirement, suggestion
        )
    )
    if not requirement.passes:
        raise typer.Exit(code=1)


def scan_contrast_cmd(
    path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="CSS or HTML file to scan.",
    ),
    level: Optional[str] = typer.Option(
        None, "--level", "-l", help="WCAG level: A, AA or AAA."
    ),
    fmt: Optional[ReportFormat] = typer.Option(
        None, "--format", "-f", help="Report format."
    ),
) -> None:
    """Report declared color pairs that fail the contrast threshold."""
    settings = config.settings
    source = read_source(path)
    wcag_level = WCAGLevel.coerce(level or settings.level)

    if path.suffix.lower() == ".css":
        findings = scan_declarations(source, wcag_level)
    else:
        try:
            findings = scan_markup(parse_markup(source), wcag_level)
        except MarkupParseError as exc:
            console.print(f"[bold red]Cannot parse {path}:[/bold red] {exc}")
            raise typer.Exit(code=2)

    typer.echo(format_contrast_report(findings, fmt or settings.report_format))
    if findings:
        raise typer.Exit(code=1)
