"""
Section scanner.

Walks the top-level blocks of the document, skipping everything up to the
"## Webhook events" heading and classifying every table after it.

Usage:
    scanner = SectionScanner()
    result = scanner.scan(document)
    for webhook in result.webhooks:
        print(webhook.name, webhook.types)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from webhookgen.exceptions import HeadingNotFoundError, NoWebhookTableError
from webhookgen.extractors.tables import PAYLOAD_HEADER, match_webhook_table
from webhookgen.models import MatchStatus, WebhookTable
from webhookgen.readers.markdown_reader import Node, NodeKind

logger = logging.getLogger(__name__)


class ScanState(Enum):
    BEFORE_HEADING = "before_heading"
    AFTER_HEADING = "after_heading"


@dataclass
class ScanResult:
    """Result of scanning a document."""

    webhooks: WebhookTable = field(default_factory=WebhookTable)
    heading_found: bool = False
    tables_seen: int = 0  # Tables after the heading, matched or not
    skipped: dict[MatchStatus, int] = field(default_factory=dict)
    processing_log: list[str] = field(default_factory=list)


class SectionScanner:
    """Collects webhooks from the tables under a specific heading.

    Tables before the heading are never inspected. After the heading every
    table is classified; non-webhook tables are skipped silently. The scan
    itself never raises; see extract_webhooks() for the failure checks.
    """

    def __init__(
        self,
        *,
        heading_text: str = "Webhook events",
        heading_level: int = 2,
        header_text: str = PAYLOAD_HEADER,
    ):
        """Initialize the scanner.

        Args:
            heading_text: Exact text of the heading that opens the section.
            heading_level: Level of that heading (2 for "##").
            header_text: Exact text of a webhook table's first header cell.
        """
        self.heading_text = heading_text
        self.heading_level = heading_level
        self.header_text = header_text

    def _is_section_heading(self, node: Node) -> bool:
        return (
            node.kind is NodeKind.HEADING
            and node.level == self.heading_level
            and node.text == self.heading_text
        )

    def scan(self, document: Node) -> ScanResult:
        """Scan the top-level children of a DOCUMENT node."""
        result = ScanResult()
        state = ScanState.BEFORE_HEADING

        for node in document.children:
            if state is ScanState.BEFORE_HEADING:
                if self._is_section_heading(node):
                    state = ScanState.AFTER_HEADING
                    result.heading_found = True
                    result.processing_log.append(f"Found {self.heading_text!r} heading")
                    logger.debug("Found %r heading", self.heading_text)
                continue

            if node.kind is not NodeKind.TABLE:
                continue

            result.tables_seen += 1
            match = match_webhook_table(node, self.header_text)
            if not match.matched:
                result.skipped[match.status] = result.skipped.get(match.status, 0) + 1
                continue

            result.webhooks.add(match.webhook)
            result.processing_log.append(f"Webhook {match.webhook.name!r}")

        result.processing_log.append(
            f"Scan complete: {len(result.webhooks)} webhooks from {result.tables_seen} tables"
        )
        return result


def extract_webhooks(
    document: Node,
    *,
    heading_text: str = "Webhook events",
    heading_level: int = 2,
    header_text: str = PAYLOAD_HEADER,
) -> WebhookTable:
    """Extract all webhooks from a parsed document.

    Raises:
        HeadingNotFoundError: If the section heading never appears.
        NoWebhookTableError: If no table under the heading is a webhook table.
    """
    scanner = SectionScanner(
        heading_text=heading_text,
        heading_level=heading_level,
        header_text=header_text,
    )
    result = scanner.scan(document)

    if not result.heading_found:
        marker = "#" * heading_level
        raise HeadingNotFoundError(f'"{marker} {heading_text}" heading was missing')

    if not result.webhooks:
        raise NoWebhookTableError(
            f"no webhook table was found in given markdown source "
            f"({result.tables_seen} tables after the heading)"
        )

    logger.info(
        "Extracted %d webhooks from %d tables", len(result.webhooks), result.tables_seen
    )
    return result.webhooks
