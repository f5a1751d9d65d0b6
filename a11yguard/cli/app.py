"""Main Typer application: imports and registers all CLI commands.

Entry point: ``a11yguard`` (configured via pyproject.toml project.scripts).
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from a11yguard import __version__, config
from a11yguard.cli.commands.audit import audit_cmd
from a11yguard.cli.commands.common import console
from a11yguard.cli.commands.contrast import contrast_cmd, scan_contrast_cmd
from a11yguard.cli.commands.fix import fix_cmd
from a11yguard.cli.commands.rules import rules_cmd

app = typer.Typer(
    name="a11yguard",
    help="a11yguard: WCAG accessibility auditing and automatic fixes for markup.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="audit", help="Audit an HTML or component file.")(audit_cmd)
app.command(name="fix", help="Apply automatic accessibility fixes to a file.")(fix_cmd)
app.command(name="contrast", help="Check the contrast ratio of a color pair.")(contrast_cmd)
app.command(name="scan-contrast", help="Find failing color pairs in CSS or HTML.")(
    scan_contrast_cmd
)
app.command(name="rules", help="List the rule catalog.")(rules_cmd)


def configure_logging(level: str) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True), rich_tracebacks=True, show_path=False
            )
        ],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"a11yguard {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (default from A11YGUARD_LOG_LEVEL).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """a11yguard: WCAG accessibility auditing and automatic fixes for markup."""
    configure_logging(log_level or config.settings.log_level)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
