"""``a11yguard fix PATH``: apply the automatic fix passes to a file.

Prints a line-positional patch and a change summary.  Nothing is written
unless ``--write`` is given.  The passes only rewrite the start and end
tags they fix, so the rest of the file is kept byte for byte.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from a11yguard import config
from a11yguard.cli.commands.common import console, read_source
from a11yguard.core.fix_pipeline import fix_all, generate_patch
from a11yguard.reporting.renderer import format_fix_report


def fix_cmd(
    path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="HTML or component file to fix.",
    ),
    write: bool = typer.Option(
        False,
        "--write/--dry-run",
        help="Write the fixed markup back to PATH (default: dry run).",
    ),
    lang: Optional[str] = typer.Option(
        None,
        "--lang",
        help="Language code added to <html> when missing (default from A11YGUARD_DEFAULT_LANG).",
    ),
) -> None:
    """Fix common accessibility defects automatically."""
    default_lang = (lang if lang is not None else config.settings.default_lang).strip()
    if not default_lang:
        raise typer.BadParameter("Language code must not be empty.", param_hint="--lang")

    original = read_source(path)
    result = fix_all(original, default_lang=default_lang)

    if not result.changes:
        console.print(f"[green]No fixes needed for {path}.[/green]")
        return

    for line in generate_patch(original, result.fixed).split("\n"):
        style = "red" if line.startswith("-") else "green"
        console.print(f"[{style}]{escape(line)}[/{style}]", soft_wrap=True)
    console.print()
    console.print(escape(format_fix_report(result)))

    if write:
        path.write_text(result.fixed, encoding="utf-8")
        console.print(f"[bold green]Wrote {len(result.changes)} change(s) to {path}[/bold green]")
    else:
        console.print("[dim]Dry run; re-run with --write to apply.[/dim]")
