"""
Inline content helpers for table cells.
"""

from __future__ import annotations

from webhookgen.readers.markdown_reader import Node, NodeKind, walk


def first_link_text(node: Node) -> str | None:
    """Return the text of the first link under ``node``, or None.

    The text of every direct child of the link is collected. Emphasis
    delimiters such as ``_`` may split link text into several pieces
    (``pull_request`` can arrive as ``pull`` + ``_request``), and a link
    may wrap a code span, so taking only the first child is not enough.
    """
    link = next((n for n in walk(node) if n.kind is NodeKind.LINK), None)
    if link is None:
        return None
    return "".join(child.text for child in link.children)


def collect_code_spans(node: Node) -> list[str]:
    """Return the text of every inline code span under ``node`` in document order."""
    return [n.literal for n in walk(node) if n.kind is NodeKind.CODE_SPAN]
