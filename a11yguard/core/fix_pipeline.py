"""Fix pipeline: threads the ordered fix passes over one markup string.

Each pass sees the output of the previous pass.  Passes are idempotent and
copy untouched text through verbatim, so running the pipeline twice yields
no further changes and markup with nothing to fix comes back unchanged.
"""

from __future__ import annotations

import logging
from typing import Sequence

from a11yguard.fixers import FIX_PASS_ORDER, BaseFixPass, get_fix_pass
from a11yguard.fixers.document_lang import DEFAULT_LANG
from a11yguard.models.fixes import Change, FixAllResult, FixResult, FixSummary

logger = logging.getLogger(__name__)


class FixPipeline:
    """An ordered sequence of fix passes.

    Parameters
    ----------
    passes:
        The passes to run, in order.  Defaults to every registered pass in
        ``FIX_PASS_ORDER``.
    default_lang:
        Language code used by the document-language pass when *passes* is
        not given.
    """

    def __init__(
        self,
        passes: Sequence[BaseFixPass] | None = None,
        default_lang: str = DEFAULT_LANG,
    ) -> None:
        if passes is None:
            passes = [
                get_fix_pass(name, default_lang=default_lang)
                if name == "document-language"
                else get_fix_pass(name)
                for name in FIX_PASS_ORDER
            ]
        self.passes: tuple[BaseFixPass, ...] = tuple(passes)

    def run_pass(self, name: str, markup: str) -> FixResult:
        """Run the single pass called *name* from this pipeline."""
        for fix_pass in self.passes:
            if fix_pass.name == name:
                return fix_pass.apply(markup)
        return get_fix_pass(name).apply(markup)

    def run(self, markup: str) -> FixAllResult:
        current = markup
        changes: list[Change] = []
        for fix_pass in self.passes:
            result = fix_pass.apply(current)
            current = result.fixed
            changes.extend(result.changes)

        summary = FixSummary.from_changes(changes)
        logger.info(
            "Fix pipeline: %d change(s) across %d pass(es).",
            summary.total_changes,
            len(self.passes),
        )
        return FixAllResult(fixed=current, changes=changes, summary=summary)

    def __len__(self) -> int:
        return len(self.passes)

    def __repr__(self) -> str:
        return f"<FixPipeline passes={[p.name for p in self.passes]}>"


def fix_all(markup: str, default_lang: str = DEFAULT_LANG) -> FixAllResult:
    """Apply every fix pass to *markup* in order."""
    return FixPipeline(default_lang=default_lang).run(markup)


def generate_patch(original: str, fixed: str) -> str:
    """Line-positional diff: ``- old`` / ``+ new`` for each differing line.

    Lines are compared by position, not aligned, so an inserted line shows
    every following line as changed.  Identical inputs give ``""``.
    """
    original_lines = original.split("\n")
    fixed_lines = fixed.split("\n")
    out: list[str] = []
    for i in range(max(len(original_lines), len(fixed_lines))):
        old = original_lines[i] if i < len(original_lines) else None
        new = fixed_lines[i] if i < len(fixed_lines) else None
        if old == new:
            continue
        if old is not None:
            out.append(f"- {old}")
        if new is not None:
            out.append(f"+ {new}")
    return "\n".join(out)
