"""Immutable markup document: an arena of element nodes with source spans.

The document is parsed once with BeautifulSoup (``html.parser`` builder,
which records where every start tag begins) and flattened into a tuple of
``MarkupNode`` records addressed by integer index.  Nodes never change after
construction; rewrites are expressed as ``SourceEdit`` substitutions over the
original text, so bytes outside an edit are always preserved verbatim.

Building the arena is linear in the size of the markup: end tags are paired
with their start tags in one stack-based sweep over the source, and element
text is a slice of a single flattened text string rather than a per-node
concatenation.
"""

from __future__ import annotations

import logging
import re
import warnings
from dataclasses import dataclass, field
from functools import cached_property
from html import escape
from typing import Iterator

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, ParserRejectedMarkup, Tag
from bs4.element import (
    CData,
    NavigableString,
    PageElement,
    RubyParenthesisString,
    RubyTextString,
    TemplateString,
)

logger = logging.getLogger(__name__)

# Elements that never have an end tag.
VOID_ELEMENTS: frozenset[str] = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input", "link",
    "meta", "param", "source", "track", "wbr",
})

# Elements whose content the parser keeps as raw text.
RAW_TEXT_ELEMENTS: frozenset[str] = frozenset({"script", "style"})

HEADING_TAGS: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")

# String types that count as an element's text content.
_TEXT_TYPES: frozenset[type] = frozenset({
    NavigableString, CData, TemplateString, RubyTextString, RubyParenthesisString,
})

_TOKEN_RE = re.compile(
    r"""<!--[\s\S]*?(?:-->|$)"""
    r"""|</([a-zA-Z][^\s/>]*)[^>]*>"""
    r"""|<([a-zA-Z][^\s/>]*)(?:"[^"]*"|'[^']*'|[^'">])*>"""
)
_RAW_TEXT_END_RE: dict[str, re.Pattern[str]] = {
    name: re.compile(r"</" + name + r"(?=[\s/>])[^>]*>", re.IGNORECASE)
    for name in RAW_TEXT_ELEMENTS
}
_ATTR_RE = re.compile(
    r"""([^\s"'<>/=]+)(?:\s*=\s*("[^"]*"|'[^']*'|[^\s"'=<>`]+))?"""
)
_TAG_NAME_RE = re.compile(r"^<\s*[^\s/>]+")
_END_TAG_NAME_RE = re.compile(r"^</\s*[^\s>]+")
_TAG_TAIL_RE = re.compile(r"\s*/?>$")

_NO_SPAN = (-1, -1, -1, -1)


class MarkupParseError(ValueError):
    """Raised when the markup cannot be parsed at all."""


@dataclass(frozen=True)
class MarkupNode:
    """One element in the arena.

    ``start``/``start_end`` delimit the raw start tag in the source and
    ``close_start``/``end`` the matching end tag.  Void or unclosed elements
    have ``close_start == -1`` and ``end == start_end``.  Spans are ``-1``
    when the parser could not report a position.

    ``text`` is ``text_source[text_start:text_end]``; the source string is
    shared by every node of a document.
    """

    index: int
    tag: str
    attrs: tuple[tuple[str, str], ...]
    parent: int | None
    children: tuple[int, ...]
    start: int = -1
    start_end: int = -1
    close_start: int = -1
    end: int = -1
    text_start: int = 0
    text_end: int = 0
    text_source: str = field(default="", repr=False, compare=False)

    @property
    def text(self) -> str:
        return self.text_source[self.text_start:self.text_end]

    def get(self, name: str, default: str | None = None) -> str | None:
        for key, value in self.attrs:
            if key == name:
                return value
        return default

    def has(self, name: str) -> bool:
        return any(key == name for key, _ in self.attrs)

    @property
    def has_span(self) -> bool:
        return self.start >= 0

    @property
    def heading_depth(self) -> int | None:
        if self.tag in HEADING_TAGS:
            return int(self.tag[1])
        return None


@dataclass(frozen=True)
class MarkupDocument:
    """A parsed markup snapshot.  Query helpers return nodes in document order."""

    source: str
    nodes: tuple[MarkupNode, ...] = ()

    # -- Queries -----------------------------------------------------------

    def __iter__(self) -> Iterator[MarkupNode]:
        return iter(self.nodes)

    @cached_property
    def _by_tag(self) -> dict[str, tuple[MarkupNode, ...]]:
        index: dict[str, list[MarkupNode]] = {}
        for node in self.nodes:
            index.setdefault(node.tag, []).append(node)
        return {tag: tuple(nodes) for tag, nodes in index.items()}

    @cached_property
    def _memo(self) -> dict[tuple[str, ...], object]:
        return {}

    def elements(self, *tags: str) -> list[MarkupNode]:
        if len(tags) == 1:
            return list(self._by_tag.get(tags[0], ()))
        wanted = set(tags)
        return [node for node in self.nodes if node.tag in wanted]

    def with_attribute(self, name: str) -> list[MarkupNode]:
        return [node for node in self.nodes if node.has(name)]

    def attr(self, node: MarkupNode, name: str) -> str | None:
        return node.get(name)

    def attribute_values(self, tag: str, name: str) -> frozenset[str]:
        """Every non-empty value of attribute *name* on *tag* elements."""
        key = ("values", tag, name)
        if key not in self._memo:
            values = (node.get(name) for node in self._by_tag.get(tag, ()))
            self._memo[key] = frozenset(value for value in values if value)
        return self._memo[key]

    @property
    def root(self) -> MarkupNode | None:
        """The ``<html>`` element, when the markup is a whole document."""
        for node in self.nodes:
            if node.tag == "html":
                return node
        return None

    def ancestors(self, node: MarkupNode) -> Iterator[MarkupNode]:
        parent = node.parent
        while parent is not None:
            current = self.nodes[parent]
            yield current
            parent = current.parent

    def descendants(self, node: MarkupNode) -> Iterator[MarkupNode]:
        stack = list(reversed(node.children))
        while stack:
            current = self.nodes[stack.pop()]
            yield current
            stack.extend(reversed(current.children))

    def within(self, node: MarkupNode, tag: str) -> bool:
        """Whether *node* has an ancestor element named *tag*."""
        key = ("within", tag)
        if key not in self._memo:
            # Parents precede their children in the arena.
            flags: list[bool] = []
            for current in self.nodes:
                parent = current.parent
                flags.append(
                    parent is not None and (self.nodes[parent].tag == tag or flags[parent])
                )
            self._memo[key] = tuple(flags)
        return self._memo[key][node.index]

    # -- Source access -----------------------------------------------------

    def start_tag(self, node: MarkupNode) -> str:
        if node.has_span:
            return self.source[node.start:node.start_end]
        return _render_start_tag(node)

    def snippet(self, node: MarkupNode) -> str:
        """The element's outer markup as written in the source."""
        if node.has_span:
            return self.source[node.start:node.end]
        return _render_start_tag(node)


@dataclass(frozen=True)
class SourceEdit:
    """Replace ``source[start:end]`` with ``replacement``."""

    start: int
    end: int
    replacement: str


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_markup(source: str) -> MarkupDocument:
    """Parse *source* into a ``MarkupDocument``.

    Raises ``MarkupParseError`` if the parser rejects the input.
    """
    if not isinstance(source, str):
        raise MarkupParseError(f"Expected markup string, got {type(source).__name__}")
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            soup = BeautifulSoup(source, "html.parser", multi_valued_attributes=None)
    except (ParserRejectedMarkup, AssertionError, UnicodeError) as exc:
        raise MarkupParseError(f"Markup could not be parsed: {exc}") from exc

    spans = _scan_tags(source)
    line_starts = _line_starts(source)

    tags: list[Tag] = []
    parents: list[int | None] = []
    children: list[list[int]] = []
    text_bounds: list[list[int]] = []
    pieces: list[str] = []
    offset = 0
    stack: list[tuple[int | None, Iterator[PageElement]]] = [(None, iter(soup.contents))]
    while stack:
        owner, contents = stack[-1]
        child = next(contents, None)
        if child is None:
            stack.pop()
            if owner is not None:
                text_bounds[owner][1] = offset
            continue
        if isinstance(child, Tag):
            index = len(tags)
            tags.append(child)
            parents.append(owner)
            children.append([])
            text_bounds.append([offset, offset])
            if owner is not None:
                children[owner].append(index)
            stack.append((index, iter(child.contents)))
        elif type(child) in _TEXT_TYPES:
            pieces.append(child)
            offset += len(child)
    flat_text = "".join(pieces)

    nodes: list[MarkupNode] = []
    for index, tag in enumerate(tags):
        name = tag.name.lower()
        start, start_end, close_start, end = _locate(spans, line_starts, tag, name)
        text_source = flat_text
        text_start, text_end = text_bounds[index]
        if name in RAW_TEXT_ELEMENTS:
            text_source = "".join(
                str(s) for s in tag.contents if isinstance(s, NavigableString)
            )
            text_start, text_end = 0, len(text_source)
        nodes.append(
            MarkupNode(
                index=index,
                tag=name,
                attrs=tuple((str(k), _attr_text(v)) for k, v in tag.attrs.items()),
                parent=parents[index],
                children=tuple(children[index]),
                start=start,
                start_end=start_end,
                close_start=close_start,
                end=end,
                text_start=text_start,
                text_end=text_end,
                text_source=text_source,
            )
        )
    logger.debug("Parsed markup into %d element node(s).", len(nodes))
    return MarkupDocument(source=source, nodes=tuple(nodes))


def as_document(markup: str | MarkupDocument) -> MarkupDocument:
    """Return *markup* parsed, or unchanged if it already is a document."""
    if isinstance(markup, MarkupDocument):
        return markup
    return parse_markup(markup)


def _attr_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value)


def _line_starts(source: str) -> list[int]:
    starts = [0]
    for match in re.finditer("\n", source):
        starts.append(match.end())
    return starts


def _scan_tags(source: str) -> dict[int, tuple[str, int, int, int]]:
    """Pair start and end tags in one sweep over *source*.

    Maps each start tag offset to ``(name, start_end, close_start, end)``.
    An end tag closes the nearest open element of the same name and leaves
    any elements opened after it unclosed; an end tag with no open element
    of its name is ignored.  Comments and raw-text content are skipped.
    """
    spans: dict[int, tuple[str, int, int, int]] = {}
    stack: list[tuple[str, int]] = []
    open_counts: dict[str, int] = {}
    pos = 0
    while True:
        match = _TOKEN_RE.search(source, pos)
        if match is None:
            break
        pos = match.end()
        end_name, start_name = match.group(1), match.group(2)

        if start_name is not None:
            name = start_name.lower()
            start = match.start()
            spans[start] = (name, pos, -1, pos)
            if name in RAW_TEXT_ELEMENTS:
                close = _RAW_TEXT_END_RE[name].search(source, pos)
                if close is None:
                    break
                spans[start] = (name, pos, close.start(), close.end())
                pos = close.end()
            elif name not in VOID_ELEMENTS and not match.group(0).endswith("/>"):
                stack.append((name, start))
                open_counts[name] = open_counts.get(name, 0) + 1

        elif end_name is not None:
            name = end_name.lower()
            if not open_counts.get(name):
                continue
            while stack:
                open_name, open_start = stack.pop()
                open_counts[open_name] -= 1
                if open_name == name:
                    start_end = spans[open_start][1]
                    spans[open_start] = (name, start_end, match.start(), match.end())
                    break
    return spans


def _locate(
    spans: dict[int, tuple[str, int, int, int]],
    line_starts: list[int],
    tag: Tag,
    name: str,
) -> tuple[int, int, int, int]:
    line, column = tag.sourceline, tag.sourcepos
    if line is None or column is None or line - 1 >= len(line_starts):
        return _NO_SPAN
    start = line_starts[line - 1] + column
    span = spans.get(start)
    if span is None or span[0] != name:
        return _NO_SPAN
    _, start_end, close_start, end = span
    return start, start_end, close_start, end


def _render_start_tag(node: MarkupNode) -> str:
    parts = [node.tag] + [f'{k}="{escape(v, quote=True)}"' for k, v in node.attrs]
    return "<" + " ".join(parts) + ">"


# ---------------------------------------------------------------------------
# Rewriting
# ---------------------------------------------------------------------------


def apply_edits(source: str, edits: list[SourceEdit]) -> str:
    """Build a new string from non-overlapping substitutions.

    Edits are applied in source order; an edit overlapping an earlier one is
    dropped.
    """
    if not edits:
        return source
    pieces: list[str] = []
    cursor = 0
    for edit in sorted(edits, key=lambda e: (e.start, e.end)):
        if edit.start < cursor:
            logger.warning(
                "Dropping overlapping edit at %d-%d.", edit.start, edit.end
            )
            continue
        pieces.append(source[cursor:edit.start])
        pieces.append(edit.replacement)
        cursor = edit.end
    pieces.append(source[cursor:])
    return "".join(pieces)


def set_attribute(raw_tag: str, name: str, value: str) -> str:
    """Return *raw_tag* with attribute *name* set to *value*.

    An existing attribute is replaced in place; a new one is appended before
    the closing ``>`` (or ``/>``).  Other attributes are kept verbatim.
    """
    rendered = f'{name}="{escape(value, quote=True)}"'
    head = _TAG_NAME_RE.match(raw_tag)
    offset = head.end() if head else 0
    for match in _ATTR_RE.finditer(raw_tag, offset):
        if match.group(1).lower() == name.lower():
            return raw_tag[:match.start()] + rendered + raw_tag[match.end():]
    tail = _TAG_TAIL_RE.search(raw_tag)
    if tail is None:
        return f"{raw_tag} {rendered}"
    return f"{raw_tag[:tail.start()]} {rendered}{raw_tag[tail.start():]}"


def rename_tag(raw_tag: str, new_name: str) -> str:
    """Rename the element in a raw start or end tag, keeping everything else."""
    if raw_tag.startswith("</"):
        return _END_TAG_NAME_RE.sub("</" + new_name, raw_tag, count=1)
    return _TAG_NAME_RE.sub("<" + new_name, raw_tag, count=1)
