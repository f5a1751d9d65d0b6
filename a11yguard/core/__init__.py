"""a11yguard core: audit engine and fix pipeline."""

from a11yguard.core.auditor import Auditor, audit, audit_file, levels_to_include
from a11yguard.core.fix_pipeline import FixPipeline, fix_all, generate_patch

__all__ = [
    "Auditor",
    "audit",
    "audit_file",
    "levels_to_include",
    "FixPipeline",
    "fix_all",
    "generate_patch",
]
