"""
Webhook table classification.

A webhook table in the "Events that trigger workflows" document looks like:

    | Webhook event payload | Activity types | `GITHUB_SHA` | `GITHUB_REF` |
    | --------------------- | -------------- | ------------ | ------------ |
    | [`check_run`](...)    | - `created`<br/>- `completed` | ... | ... |

Every table after the heading is passed through match_webhook_table().
Rejections are expected and never raise: most tables in the document are
not webhook tables, and the layout of the page changes over time.
"""

from __future__ import annotations

import logging

from webhookgen.extractors.inline import collect_code_spans, first_link_text
from webhookgen.models import TableMatch, Webhook
from webhookgen.readers.markdown_reader import Node, NodeKind

logger = logging.getLogger(__name__)

PAYLOAD_HEADER = "Webhook event payload"


def match_webhook_table(table: Node, header_text: str = PAYLOAD_HEADER) -> TableMatch:
    """Classify a table and extract its webhook if it is a payload table.

    Only the first data row is used; one table documents one webhook.

    Args:
        table: A TABLE node.
        header_text: Required text of the first header cell.

    Returns:
        TableMatch with status MATCHED and the webhook, NOT_MATCHED for
        other tables, or INVALID when the header or data row is missing.
    """
    logger.debug("Table at lines %s: %.60r", table.line_range, table.text)

    saw_header = False
    for row in table.children:
        if row.kind is NodeKind.TABLE_HEADER:
            saw_header = True
            cell = row.first_child
            if cell is None or cell.text != header_text:
                logger.debug("  Skip this table because it is not for %s", header_text)
                return TableMatch.skip(f"first header cell is not {header_text!r}")
            logger.debug("  Found table header for %s", header_text)
            continue

        if row.kind is not NodeKind.TABLE_ROW:
            continue

        if not saw_header:
            logger.debug("  Skip this table because it does not have a header")
            return TableMatch.invalid("data row before header")

        return _match_first_row(row)

    logger.debug("  Table row was not found (saw_header=%s)", saw_header)
    return TableMatch.invalid("no data row")


def _match_first_row(row: Node) -> TableMatch:
    cells = row.children
    if not cells:
        return TableMatch.skip("first data row has no cells")

    name = first_link_text(cells[0])
    if not name:
        logger.debug(
            "  Skip this table because the first cell of the first row has no link: %r",
            cells[0].text,
        )
        return TableMatch.skip("no link in first cell")

    types = collect_code_spans(cells[1]) if len(cells) > 1 else []

    logger.debug("  Found webhook table: %r %s", name, types)
    return TableMatch.found(Webhook(name, tuple(types)))
