"""Markdown reading module.

Parsing uses markdown-it-py with pipe tables enabled; sources come from
local files or HTTP (requests).
"""

from webhookgen.readers.markdown_reader import (
    MarkdownReader,
    Node,
    NodeKind,
    walk,
)
from webhookgen.readers.sources import (
    fetch_markdown,
    read_markdown_file,
)

__all__ = [
    # Classes
    "MarkdownReader",
    "Node",
    "NodeKind",
    # Utility functions
    "walk",
    "fetch_markdown",
    "read_markdown_file",
]
