"""Best-effort extraction of auditable markup from component source files.

JSX/TSX, Vue single-file components and Svelte components are reduced to an
HTML-shaped string the audit engine can parse.  This is heuristic pattern
matching, not a grammar: embedded expressions are dropped and nested
expression blocks may be merged or lost.  It never raises.
"""

from __future__ import annotations

import logging
import re
from pathlib import PurePath

logger = logging.getLogger(__name__)

_RETURN_RE = re.compile(r"return\s*\(\s*([\s\S]*?)\s*\);?")
_ARROW_RE = re.compile(r"=>\s*\(\s*([\s\S]*?)\s*\)(?:\s*[;,}]|\s*$)")
_SELF_CLOSING_RE = re.compile(r"<([a-z][a-z0-9]*)\s+[^>]*/>", re.IGNORECASE)
_PAIRED_RE = re.compile(r"<([a-z][a-z0-9]*)\s+[^>]*>[\s\S]*?</\1>", re.IGNORECASE)
_ANY_TAG_RE = re.compile(r"<[A-Za-z][^>]*(?:/>|>[\s\S]*?</[A-Za-z]+>)")
_VUE_TEMPLATE_RE = re.compile(r"<template>([\s\S]*?)</template>")
_SCRIPT_RE = re.compile(r"<script[\s\S]*?</script>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style[\s\S]*?</style>", re.IGNORECASE)
_EXPRESSION_RE = re.compile(r"\{[^}]*\}")

COMPONENT_SUFFIXES: frozenset[str] = frozenset({".jsx", ".tsx", ".vue", ".svelte"})


def extract_jsx(content: str) -> str:
    """Collect JSX from ``return (...)`` and ``=> (...)`` bodies."""
    blocks: list[str] = [m.group(1) for m in _RETURN_RE.finditer(content)]
    blocks.extend(m.group(1) for m in _ARROW_RE.finditer(content))

    if blocks:
        # Self-closing tags inside ``{cond && <img />}`` would be lost with
        # the expression, so keep a copy of each.
        combined = "\n".join(blocks)
        blocks.extend(m.group(0) for m in _SELF_CLOSING_RE.finditer(combined))
        return "\n".join(blocks)

    blocks.extend(m.group(0) for m in _SELF_CLOSING_RE.finditer(content))
    blocks.extend(m.group(0) for m in _PAIRED_RE.finditer(content))
    if not blocks:
        blocks.extend(m.group(0) for m in _ANY_TAG_RE.finditer(content))
    return "\n".join(blocks)


def extract_vue_template(content: str) -> str:
    match = _VUE_TEMPLATE_RE.search(content)
    return match.group(1) if match else ""


def extract_svelte(content: str) -> str:
    return _STYLE_RE.sub("", _SCRIPT_RE.sub("", content))


def normalize_component_markup(content: str) -> str:
    """Rewrite JSX-isms into plain HTML attribute and element forms."""
    html = content.replace("className=", "class=")
    html = _EXPRESSION_RE.sub("", html)
    html = html.replace("<>", "<div>").replace("</>", "</div>")
    html = html.replace("<React.Fragment>", "<div>").replace("</React.Fragment>", "</div>")
    return html


def extract_markup(content: str, filename: str) -> str:
    """Return the auditable markup for *content*, chosen by *filename*'s suffix.

    HTML and unknown file types are returned unchanged.
    """
    suffix = PurePath(filename).suffix.lower()
    if suffix in (".jsx", ".tsx"):
        extracted = normalize_component_markup(extract_jsx(content))
    elif suffix == ".vue":
        extracted = normalize_component_markup(extract_vue_template(content))
    elif suffix == ".svelte":
        extracted = normalize_component_markup(extract_svelte(content))
    else:
        return content
    logger.debug(
        "Extracted %d char(s) of markup from %s (%s).", len(extracted), filename, suffix
    )
    return extracted
