"""
Markdown reader using markdown-it-py.

Parses markdown into a small tagged-variant tree (Node) with only the
kinds the extractors care about: headings, tables and the inline spans
inside table cells. Pipe tables are enabled.

This module provides raw parsing - webhook detection is handled
by the extractors module (SectionScanner).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    """Kinds of nodes in a parsed markdown tree."""

    DOCUMENT = "document"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    TABLE = "table"
    TABLE_HEADER = "table_header"  # Header row; children are cells
    TABLE_ROW = "table_row"  # Body row; children are cells
    TABLE_CELL = "table_cell"
    LINK = "link"
    CODE_SPAN = "code_span"
    TEXT = "text"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    OTHER = "other"


# markdown-it node types -> NodeKind. Types not listed map to OTHER.
_KIND_BY_TYPE: dict[str, NodeKind] = {
    "heading": NodeKind.HEADING,
    "paragraph": NodeKind.PARAGRAPH,
    "table": NodeKind.TABLE,
    "th": NodeKind.TABLE_CELL,
    "td": NodeKind.TABLE_CELL,
    "link": NodeKind.LINK,
    "code_inline": NodeKind.CODE_SPAN,
    "text": NodeKind.TEXT,
    "text_special": NodeKind.TEXT,
    "em": NodeKind.EMPHASIS,
    "strong": NodeKind.STRONG,
}

# Wrappers whose children are lifted into the parent
_SPLICED_TYPES = {"inline", "tbody"}

# Leaf types that contribute literal source text
_LITERAL_TYPES = {"text", "text_special", "code_inline"}
_BREAK_TYPES = {"softbreak", "hardbreak"}


@dataclass
class Node:
    """A node of the parsed markdown tree.

    ``kind`` is the discriminant. Only leaves carry ``literal`` text; the
    text of any other node is materialized on demand from its leaves.
    """

    kind: NodeKind
    children: list[Node] = field(default_factory=list)
    literal: str = ""  # Source text of TEXT / CODE_SPAN leaves
    level: int = 0  # Heading level (1-6), 0 for other kinds
    line_range: tuple[int, int] | None = None  # 0-based [start, end) source lines

    @property
    def text(self) -> str:
        """Literal text of this node: the concatenation of its leaves."""
        return "".join(n.literal for n in walk(self) if n.literal)

    @property
    def first_child(self) -> Node | None:
        return self.children[0] if self.children else None

    def __repr__(self) -> str:
        return f"Node({self.kind.name}, children={len(self.children)}, text={self.text!r:.40})"


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all its descendants in document (pre-)order.

    Iterative so callers can stop early (e.g. with ``next()``) on any depth.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


class MarkdownReader:
    """Parses markdown into a Node tree using markdown-it-py.

    Usage:
        reader = MarkdownReader()
        document = reader.parse(source_bytes)
        for node in document.children:
            print(node.kind, node.text)
    """

    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark", {"html": False}).enable("table")

    def parse(self, source: bytes | str) -> Node:
        """Parse a markdown document.

        Args:
            source: Markdown text; bytes are decoded as UTF-8.

        Returns:
            DOCUMENT node whose children are the top-level blocks.
        """
        if isinstance(source, bytes):
            source = source.decode("utf-8")

        tree = SyntaxTreeNode(self._md.parse(source))
        document = Node(NodeKind.DOCUMENT)
        for child in tree.children:
            document.children.extend(_convert(child))

        logger.debug("Parsed %d top-level blocks", len(document.children))
        return document


def _convert(stn: SyntaxTreeNode) -> list[Node]:
    """Convert a markdown-it node into zero or more Nodes."""
    if stn.type in _SPLICED_TYPES:
        return [node for child in stn.children for node in _convert(child)]

    if stn.type == "thead":
        # A header section holds exactly one row
        return [_convert_row(row, NodeKind.TABLE_HEADER) for row in stn.children]

    if stn.type == "tr":
        return [_convert_row(stn, NodeKind.TABLE_ROW)]

    node = Node(kind=_kind(stn), line_range=_line_range(stn))

    if stn.type in _LITERAL_TYPES:
        node.literal = stn.content
    elif stn.type in _BREAK_TYPES:
        node.literal = "\n"
    elif node.kind is NodeKind.HEADING:
        node.level = int(stn.tag[1:])

    for child in stn.children:
        node.children.extend(_convert(child))
    return [node]


def _kind(stn: SyntaxTreeNode) -> NodeKind:
    # Autolinks (<https://...>) are bare URLs, not named links
    if stn.type == "link" and stn.markup == "autolink":
        return NodeKind.OTHER
    return _KIND_BY_TYPE.get(stn.type, NodeKind.OTHER)


def _convert_row(row: SyntaxTreeNode, kind: NodeKind) -> Node:
    node = Node(kind=kind, line_range=_line_range(row))
    for cell in row.children:
        node.children.extend(_convert(cell))
    return node


def _line_range(stn: SyntaxTreeNode) -> tuple[int, int] | None:
    line_map = stn.map
    return (line_map[0], line_map[1]) if line_map else None
