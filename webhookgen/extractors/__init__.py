"""
Webhook extraction module.

Turns a parsed markdown tree into webhook records:
- SectionScanner: finds the "## Webhook events" section and visits its tables
- match_webhook_table: accepts or rejects one table, extracting its webhook
- first_link_text / collect_code_spans: pull values out of table cells
"""

from webhookgen.extractors.inline import (
    collect_code_spans,
    first_link_text,
)
from webhookgen.extractors.sections import (
    ScanResult,
    ScanState,
    SectionScanner,
    extract_webhooks,
)
from webhookgen.extractors.tables import (
    PAYLOAD_HEADER,
    match_webhook_table,
)

__all__ = [
    # Scanner
    "SectionScanner",
    "ScanResult",
    "ScanState",
    "extract_webhooks",
    # Tables
    "PAYLOAD_HEADER",
    "match_webhook_table",
    # Inline
    "first_link_text",
    "collect_code_spans",
]
