"""a11yguard: WCAG accessibility auditing and automatic fixes for markup.

  - Rule catalog of 15 checks across WCAG levels A, AA and AAA
  - Cumulative level filtering (an AA audit includes every A rule)
  - Color contrast analysis with nearest-passing color suggestions
  - Idempotent fix passes that rewrite only the tags they repair
  - Markup extraction for JSX/TSX, Vue and Svelte components
  - Text, markdown, JSON and Rich terminal reports
"""

__version__ = "0.1.0"
__description__ = "WCAG accessibility auditing and automatic fixes for markup"

from a11yguard.core.auditor import Auditor, audit, audit_file
from a11yguard.core.fix_pipeline import FixPipeline, fix_all, generate_patch
from a11yguard.rules import DEFAULT_CATALOG

__all__ = [
    "Auditor",
    "FixPipeline",
    "DEFAULT_CATALOG",
    "audit",
    "audit_file",
    "fix_all",
    "generate_patch",
    "__version__",
]
