"""``a11yguard rules``: list the rule catalog."""

from __future__ import annotations

from typing import Optional

import typer

from a11yguard.cli.commands.common import console
from a11yguard.reporting.renderer import AuditRenderer
from a11yguard.rules import DEFAULT_CATALOG


def rules_cmd(
    level: Optional[str] = typer.Option(
        None,
        "--level",
        "-l",
        help="Only show rules an audit at this level would run.",
    ),
) -> None:
    """List the available rules."""
    if level is None:
        rules = DEFAULT_CATALOG.get_all_rules()
    else:
        rules = DEFAULT_CATALOG.get_rules_up_to(level)
    AuditRenderer(console=console).print_rules([rule.info() for rule in rules])
