"""Report rendering for audit, contrast and fix results.

Plain-string formatters (``text``, ``markdown``, ``json``) for files and
pipes, plus ``AuditRenderer`` which turns results into Rich renderables for
terminal display.

Color scheme
------------
- bold red : error
- yellow   : warning
- cyan     : info
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from pydantic import TypeAdapter
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from a11yguard.models.contrast import (
    ContrastFinding,
    ContrastRequirement,
    ContrastSuggestion,
)
from a11yguard.models.fixes import FixAllResult
from a11yguard.models.issues import AuditResult, FileAuditResult
from a11yguard.models.rules import RuleInfo, RuleSeverity


class ReportFormat(str, Enum):
    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"


_FINDINGS_ADAPTER = TypeAdapter(list[ContrastFinding])

# ---------------------------------------------------------------------------
# Severity -> Rich style mapping
# ---------------------------------------------------------------------------

_SEVERITY_STYLES: dict[RuleSeverity, str] = {
    RuleSeverity.ERROR: "bold red",
    RuleSeverity.WARNING: "yellow",
    RuleSeverity.INFO: "cyan",
}


def _md_cell(value: str | None) -> str:
    if not value:
        return ""
    return " ".join(value.split()).replace("|", "\\|")


# ---------------------------------------------------------------------------
# Plain-string formatters
# ---------------------------------------------------------------------------


def format_audit_report(
    result: AuditResult, fmt: ReportFormat | str = ReportFormat.TEXT
) -> str:
    """Render *result* as text, markdown or camelCase JSON."""
    fmt = ReportFormat(fmt)
    if fmt is ReportFormat.JSON:
        return result.model_dump_json(by_alias=True, indent=2)

    summary = result.summary
    target = f" for {result.file}" if isinstance(result, FileAuditResult) else ""
    counts = (
        f"{summary.total} issue(s): {summary.errors} error(s), "
        f"{summary.warnings} warning(s), {summary.info} info"
    )

    if fmt is ReportFormat.MARKDOWN:
        lines = [
            f"# Accessibility audit{target} (WCAG {summary.level.value})",
            "",
            counts,
        ]
        if result.issues:
            lines += [
                "",
                "| Severity | Rule | Message | Element | Suggestion |",
                "|----------|------|---------|---------|------------|",
            ]
            for issue in result.issues:
                lines.append(
                    f"| {issue.severity.value} | `{issue.rule_id}` "
                    f"| {_md_cell(issue.message)} | `{_md_cell(issue.element)}` "
                    f"| {_md_cell(issue.suggestion)} |"
                )
        return "\n".join(lines)

    lines = [f"Accessibility audit{target} (WCAG {summary.level.value})", counts]
    for issue in result.issues:
        lines.append("")
        lines.append(f"[{issue.severity.value.upper()}] {issue.rule_id}: {issue.message}")
        lines.append(f"  Element: {issue.element}")
        if issue.suggestion:
            lines.append(f"  Suggestion: {issue.suggestion}")
    return "\n".join(lines)


def format_contrast_report(
    findings: Sequence[ContrastFinding], fmt: ReportFormat | str = ReportFormat.TEXT
) -> str:
    fmt = ReportFormat(fmt)
    if fmt is ReportFormat.JSON:
        return _FINDINGS_ADAPTER.dump_json(list(findings), by_alias=True, indent=2).decode()

    if fmt is ReportFormat.MARKDOWN:
        lines = [f"# Color contrast ({len(findings)} failing pair(s))"]
        if findings:
            lines += [
                "",
                "| Foreground | Background | Ratio | Required | Location |",
                "|------------|------------|-------|----------|----------|",
            ]
            for finding in findings:
                lines.append(
                    f"| `{finding.foreground}` | `{finding.background}` "
                    f"| {finding.ratio:.2f}:1 | {finding.required_ratio}:1 "
                    f"| `{_md_cell(finding.location)}` |"
                )
        return "\n".join(lines)

    lines = [f"Color contrast: {len(findings)} failing pair(s)"]
    for finding in findings:
        where = f" at {finding.location}" if finding.location else ""
        lines.append(
            f"  {finding.foreground} on {finding.background}: "
            f"{finding.ratio:.2f}:1, needs {finding.required_ratio}:1 "
            f"(WCAG {finding.level.value}){where}"
        )
    return "\n".join(lines)


def format_fix_report(
    result: FixAllResult, fmt: ReportFormat | str = ReportFormat.TEXT
) -> str:
    fmt = ReportFormat(fmt)
    if fmt is ReportFormat.JSON:
        return result.model_dump_json(by_alias=True, indent=2)

    summary = result.summary
    bullet = "-" if fmt is ReportFormat.MARKDOWN else " "
    lines = [f"Applied {summary.total_changes} change(s)"]
    for fix_type, count in sorted(summary.by_type.items()):
        lines.append(f"{bullet} {fix_type}: {count}")
    if result.changes:
        lines.append("")
        for change in result.changes:
            lines.append(f"{bullet} [{change.type}] {change.description}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Rich terminal renderer
# ---------------------------------------------------------------------------


class AuditRenderer:
    """Renders results as Rich terminal output.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_audit(self, result: AuditResult) -> Panel:
        """Render an audit result as a Panel containing an issue Table."""
        summary = result.summary
        table = Table(
            show_header=True,
            header_style="bold cyan",
            expand=True,
            show_lines=False,
        )
        table.add_column("#", style="dim", width=4, justify="right")
        table.add_column("Severity", width=9)
        table.add_column("Rule", style="cyan", min_width=16)
        table.add_column("Message", min_width=24)
        table.add_column("Element", style="dim", overflow="fold")

        for i, issue in enumerate(result.issues, start=1):
            style = _SEVERITY_STYLES.get(issue.severity, "")
            message = escape(issue.message)
            if issue.suggestion:
                message += f"\n[dim]{escape(issue.suggestion)}[/dim]"
            table.add_row(
                str(i),
                f"[{style}]{issue.severity.value}[/{style}]",
                issue.rule_id,
                message,
                escape(issue.element[:120]),
            )

        footer = "  |  ".join([
            f"[bold]Level:[/bold] WCAG {summary.level.value}",
            f"[bold]Total:[/bold] {summary.total}",
            f"[bold red]Errors:[/bold red] {summary.errors}",
            f"[yellow]Warnings:[/yellow] {summary.warnings}",
            f"[cyan]Info:[/cyan] {summary.info}",
        ])
        body = table if result.issues else Text("No issues found.", style="green")
        title = "[bold]Accessibility Audit[/bold]"
        if isinstance(result, FileAuditResult):
            title += f" [dim]{escape(result.file)}[/dim]"

        return Panel(
            Group(body, Text(""), Text.from_markup(footer)),
            title=title,
            border_style="red" if summary.errors else "green",
            padding=(1, 2),
        )

    def render_rules(self, rules: Sequence[RuleInfo]) -> Table:
        table = Table(title="Rule Catalog", header_style="bold cyan")
        table.add_column("ID", style="cyan")
        table.add_column("Name")
        table.add_column("Level", justify="center")
        table.add_column("Criteria", justify="center")
        table.add_column("Severity")
        for rule in rules:
            style = _SEVERITY_STYLES.get(rule.severity, "")
            table.add_row(
                rule.id,
                rule.name,
                rule.wcag_level.value,
                rule.wcag_criteria,
                f"[{style}]{rule.severity.value}[/{style}]",
            )
        return table

    def render_contrast(
        self,
        foreground: str,
        background: str,
        requirement: ContrastRequirement,
        suggestion: ContrastSuggestion | None = None,
    ) -> Panel:
        verdict = "[bold green]PASS[/bold green]" if requirement.passes else "[bold red]FAIL[/bold red]"
        lines = [
            f"[bold]Foreground:[/bold] {escape(foreground)}",
            f"[bold]Background:[/bold] {escape(background)}",
            f"[bold]Ratio:[/bold] {requirement.ratio:.2f}:1 "
            f"(needs {requirement.required_ratio}:1 for WCAG {requirement.level.value})",
            f"[bold]Result:[/bold] {verdict}",
        ]
        if suggestion is not None:
            if suggestion.error:
                lines.append(f"[red]{escape(suggestion.error)}[/red]")
            elif not requirement.passes:
                lines.append(
                    f"[bold]Suggested foreground:[/bold] {suggestion.suggested_foreground} "
                    f"({suggestion.new_ratio:.2f}:1)"
                )
        return Panel(
            Text.from_markup("\n".join(lines)),
            title="[bold]Color Contrast[/bold]",
            border_style="green" if requirement.passes else "red",
            padding=(1, 2),
        )

    # ------------------------------------------------------------------
    # Standalone print
    # ------------------------------------------------------------------

    def print_audit(self, result: AuditResult) -> None:
        self.console.print(self.render_audit(result))

    def print_rules(self, rules: Sequence[RuleInfo]) -> None:
        self.console.print(self.render_rules(rules))
