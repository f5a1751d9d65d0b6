"""a11yguard CLI: Typer-based command-line interface.

Provides the ``a11yguard`` command with subcommands for auditing files,
applying automatic fixes, checking color pairs and listing the rule
catalog.

All terminal output uses Rich for formatted display.
"""
