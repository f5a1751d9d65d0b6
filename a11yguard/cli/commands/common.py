"""Helpers shared by the CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

logger = logging.getLogger(__name__)

console = Console()


def read_source(path: Path) -> str:
    """Read *path* as UTF-8, exiting with code 2 if it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Failed to read %s", path, exc_info=True)
        console.print(f"[bold red]Cannot read {path}:[/bold red] {exc}")
        raise typer.Exit(code=2)
