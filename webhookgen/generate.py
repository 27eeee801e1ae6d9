"""
Generation orchestrator.

This module provides the main `generate()` function that turns the
"Events that trigger workflows" markdown into Python source by wiring
together:
- MarkdownReader (parsing)
- SectionScanner (webhook extraction)
- emit_python_source (rendering + black formatting)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from webhookgen.config import GenerateConfig
from webhookgen.emitters.python_source import emit_python_source
from webhookgen.exceptions import OutputWriteError
from webhookgen.extractors.sections import extract_webhooks
from webhookgen.models import WebhookTable
from webhookgen.readers.markdown_reader import MarkdownReader
from webhookgen.readers.sources import fetch_markdown, read_markdown_file

logger = logging.getLogger(__name__)

STDOUT = "-"


def load_markdown_source(
    path: str | Path | None = None,
    config: GenerateConfig | None = None,
) -> bytes:
    """Load the markdown document from ``path``, or fetch it when path is None.

    Raises:
        SourceReadError: If the file cannot be read.
        FetchError: If the HTTP fetch fails.
    """
    config = config or GenerateConfig()
    if path is None:
        return fetch_markdown(config.source_url, timeout=config.timeout)
    return read_markdown_file(path)


def extract_webhook_table(
    source: bytes | str,
    config: GenerateConfig | None = None,
) -> WebhookTable:
    """Parse markdown and extract its webhooks.

    Raises:
        HeadingNotFoundError: If the section heading is missing.
        NoWebhookTableError: If no webhook table follows the heading.
    """
    config = config or GenerateConfig()
    document = MarkdownReader().parse(source)
    return extract_webhooks(
        document,
        heading_text=config.heading_text,
        heading_level=config.heading_level,
        header_text=config.payload_header,
    )


def generate(
    source: bytes | str,
    config: GenerateConfig | None = None,
) -> str:
    """
    Generate the Python webhook table module from markdown.

    Args:
        source: Markdown text of "Events that trigger workflows"
        config: Generation configuration (uses defaults if None)

    Returns:
        Black-formatted Python source

    Raises:
        ExtractionError: If the document has no webhook section or tables
        SourceFormatError: If the generated source is not valid Python

    Example:
        >>> source = generate(Path("events.md").read_bytes())
        >>> print(source)
    """
    config = config or GenerateConfig()
    webhooks = extract_webhook_table(source, config)
    return emit_python_source(
        webhooks,
        source_url=config.source_url,
        variable_name=config.variable_name,
        generator=config.generator,
    )


def write_output(text: str, dst: str | Path | None = None, stream: TextIO | None = None) -> None:
    """Write generated source to ``dst``, or to stdout for None or "-".

    Raises:
        OutputWriteError: If the destination cannot be written.
    """
    if dst is None or str(dst) == STDOUT:
        out = stream or sys.stdout
        try:
            out.write(text)
            out.flush()
        except OSError as exc:
            raise OutputWriteError(f"could not write output: {exc}") from exc
        logger.debug("Successfully wrote output to stdout")
        return

    path = Path(dst)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"could not write output to {path}: {exc}") from exc
    logger.info("Successfully wrote output to %s", path)


def generate_file(
    src: str | Path | None = None,
    dst: str | Path | None = None,
    config: GenerateConfig | None = None,
) -> str:
    """Load, generate and write in one step.

    The destination is only written after generation succeeded, so a
    failed run never leaves a truncated file behind.

    Args:
        src: Markdown file, or None to fetch ``config.source_url``
        dst: Output file, or None / "-" for stdout
        config: Generation configuration

    Returns:
        The generated source
    """
    config = config or GenerateConfig()
    markdown = load_markdown_source(src, config)
    text = generate(markdown, config)
    write_output(text, dst)
    return text
