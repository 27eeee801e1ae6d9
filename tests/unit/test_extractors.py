"""
Unit tests for the webhook extraction module.

Tests the inline helpers, the table classifier and the section scanner.
"""

import pytest

from webhookgen.exceptions import HeadingNotFoundError, NoWebhookTableError
from webhookgen.extractors import (
    ScanResult,
    SectionScanner,
    collect_code_spans,
    extract_webhooks,
    first_link_text,
    match_webhook_table,
)
from webhookgen.models import MatchStatus, Webhook
from webhookgen.readers import Node, NodeKind

HEADING = "## Webhook events\n\n"


def webhook_table(first_cell: str, second_cell: str, *extra_rows: str) -> str:
    """Markdown for a webhook payload table."""
    rows = [
        "| Webhook event payload | Activity types |",
        "| --------------------- | -------------- |",
        f"| {first_cell} | {second_cell} |",
        *extra_rows,
    ]
    return "\n".join(rows) + "\n\n"


def only_table(parse, markdown: str) -> Node:
    doc = parse(markdown)
    tables = [n for n in doc.children if n.kind is NodeKind.TABLE]
    assert len(tables) == 1
    return tables[0]


class TestFirstLinkText:
    """Test first_link_text()."""

    def test_no_link(self, parse):
        """Returns None when there is no link."""
        assert first_link_text(parse("plain *text*\n")) is None

    def test_plain_link(self, parse):
        """Returns the link text."""
        assert first_link_text(parse("see [push](/push)\n")) == "push"

    def test_underscore_name(self, parse):
        """Link text split at an emphasis delimiter is rejoined."""
        assert first_link_text(parse("[pull_request](/pr)\n")) == "pull_request"

    def test_multiple_underscores(self, parse):
        """Names with several delimiters survive."""
        text = first_link_text(parse("[pull_request_review_comment](/prc)\n"))
        assert text == "pull_request_review_comment"

    def test_code_span_link(self, parse):
        """A link wrapping a code span yields the code content."""
        assert first_link_text(parse("[`check_run`](/cr)\n")) == "check_run"

    def test_first_link_wins(self, parse):
        """Only the first link in document order is used."""
        assert first_link_text(parse("[one](/1) and [two](/2)\n")) == "one"

    def test_autolink_is_not_named(self, parse):
        """Bare-URL autolinks have no link text."""
        assert first_link_text(parse("<https://example.com/push>\n")) is None

    def test_split_children(self):
        """Each direct child of the link contributes its text."""
        link = Node(
            NodeKind.LINK,
            children=[
                Node(NodeKind.TEXT, literal="pull"),
                Node(NodeKind.TEXT, literal="_"),
                Node(NodeKind.TEXT, literal="request"),
            ],
        )
        cell = Node(NodeKind.TABLE_CELL, children=[link])
        assert first_link_text(cell) == "pull_request"


class TestCollectCodeSpans:
    """Test collect_code_spans()."""

    def test_empty(self, parse):
        """No code spans gives an empty list."""
        assert collect_code_spans(parse("n/a\n")) == []

    def test_document_order(self, parse):
        """Spans are collected in order."""
        spans = collect_code_spans(parse("- `created`\n- `rerequested`\n- `completed`\n"))
        assert spans == ["created", "rerequested", "completed"]

    def test_nested(self, parse):
        """Spans inside emphasis and links are included."""
        spans = collect_code_spans(parse("*`a`* [`b`](/b) `c`\n"))
        assert spans == ["a", "b", "c"]


class TestMatchWebhookTable:
    """Test match_webhook_table()."""

    def test_pull_request(self, parse):
        """A payload table yields its webhook."""
        table = only_table(parse, webhook_table("[pull_request](/pr)", "`opened`, `closed`"))
        match = match_webhook_table(table)

        assert match.status is MatchStatus.MATCHED
        assert match.matched
        assert match.webhook == Webhook("pull_request", ("opened", "closed"))

    def test_no_types(self, parse):
        """A second cell without code spans gives empty types."""
        table = only_table(parse, webhook_table("[push](/push)", "n/a"))
        match = match_webhook_table(table)
        assert match.webhook == Webhook("push", ())

    def test_other_header(self, parse):
        """Tables with another first header are not matched."""
        markdown = "| Activity type | Default |\n| --- | --- |\n| [a](/a) | `b` |\n"
        match = match_webhook_table(only_table(parse, markdown))
        assert match.status is MatchStatus.NOT_MATCHED
        assert match.webhook is None

    def test_header_must_match_exactly(self, parse):
        """The header comparison is exact."""
        markdown = "| Webhook event payloads | x |\n| --- | --- |\n| [a](/a) | `b` |\n"
        match = match_webhook_table(only_table(parse, markdown))
        assert match.status is MatchStatus.NOT_MATCHED

    def test_no_link(self, parse):
        """A first cell without a link rejects the table."""
        table = only_table(parse, webhook_table("Custom event", "`created`"))
        match = match_webhook_table(table)
        assert match.status is MatchStatus.NOT_MATCHED
        assert "link" in match.reason

    def test_autolink_first_cell(self, parse):
        """A first cell holding only an autolink rejects the table."""
        table = only_table(parse, webhook_table("<https://example.com/push>", "`created`"))
        match = match_webhook_table(table)
        assert match.status is MatchStatus.NOT_MATCHED
        assert match.webhook is None

    def test_only_first_row(self, parse):
        """Rows after the first are ignored."""
        markdown = webhook_table("[issues](/i)", "`opened`", "| [other](/o) | `closed` |")
        match = match_webhook_table(only_table(parse, markdown))
        assert match.webhook == Webhook("issues", ("opened",))

    def test_header_without_rows(self, parse):
        """A header-only table is invalid."""
        markdown = "| Webhook event payload | Activity types |\n| --- | --- |\n"
        match = match_webhook_table(only_table(parse, markdown))
        assert match.status is MatchStatus.INVALID

    def test_row_before_header(self):
        """A data row before any header is invalid."""
        row = Node(
            NodeKind.TABLE_ROW,
            children=[
                Node(NodeKind.TABLE_CELL, children=[Node(NodeKind.TEXT, literal="x")]),
            ],
        )
        match = match_webhook_table(Node(NodeKind.TABLE, children=[row]))
        assert match.status is MatchStatus.INVALID

    def test_single_column(self, parse):
        """A missing second cell gives empty types."""
        markdown = "| Webhook event payload |\n| --- |\n| [push](/push) |\n"
        match = match_webhook_table(only_table(parse, markdown))
        assert match.webhook == Webhook("push")

    def test_custom_header(self, parse):
        """The expected header text is configurable."""
        markdown = "| Event | Types |\n| --- | --- |\n| [push](/push) | `a` |\n"
        table = only_table(parse, markdown)
        assert not match_webhook_table(table).matched
        assert match_webhook_table(table, header_text="Event").matched


class TestSectionScanner:
    """Test SectionScanner.scan()."""

    def test_scan_result(self, parse):
        """scan() returns a ScanResult with a processing log."""
        doc = parse(HEADING + webhook_table("[push](/push)", "n/a"))
        result = SectionScanner().scan(doc)

        assert isinstance(result, ScanResult)
        assert result.heading_found
        assert result.tables_seen == 1
        assert result.webhooks.names == ["push"]
        assert result.processing_log

    def test_tables_before_heading_ignored(self, parse):
        """Tables before the heading are never inspected."""
        markdown = (
            webhook_table("[early](/early)", "`x`")
            + HEADING
            + webhook_table("[late](/late)", "`y`")
        )
        result = SectionScanner().scan(parse(markdown))
        assert result.webhooks.names == ["late"]
        assert result.tables_seen == 1

    def test_skips_counted(self, parse):
        """Rejected tables are counted by status."""
        markdown = (
            HEADING
            + "| Activity type | Default |\n| --- | --- |\n| a | b |\n\n"
            + webhook_table("[push](/push)", "n/a")
            + "| Webhook event payload | x |\n| --- | --- |\n\n"
        )
        result = SectionScanner().scan(parse(markdown))
        assert result.skipped == {MatchStatus.NOT_MATCHED: 1, MatchStatus.INVALID: 1}
        assert len(result.webhooks) == 1

    def test_heading_level_must_match(self, parse):
        """A level-3 heading with the same text does not open the section."""
        markdown = "### Webhook events\n\n" + webhook_table("[push](/push)", "n/a")
        result = SectionScanner().scan(parse(markdown))
        assert not result.heading_found
        assert len(result.webhooks) == 0

    def test_heading_text_must_match(self, parse):
        """The heading text is compared exactly."""
        markdown = "## Webhook Events\n\n" + webhook_table("[push](/push)", "n/a")
        assert not SectionScanner().scan(parse(markdown)).heading_found

    def test_later_headings_do_not_stop_scan(self, parse):
        """Once the section starts, tables under later headings still count."""
        markdown = (
            HEADING
            + webhook_table("[a](/a)", "n/a")
            + "## Scheduled events\n\n"
            + webhook_table("[b](/b)", "n/a")
        )
        assert SectionScanner().scan(parse(markdown)).webhooks.names == ["a", "b"]

    def test_custom_heading(self, parse):
        """Heading text and level are configurable."""
        markdown = "# Hooks\n\n" + webhook_table("[push](/push)", "n/a")
        scanner = SectionScanner(heading_text="Hooks", heading_level=1)
        assert scanner.scan(parse(markdown)).webhooks.names == ["push"]


class TestExtractWebhooks:
    """Test extract_webhooks() failure handling."""

    def test_heading_missing(self, parse):
        """No heading fails even when webhook tables exist."""
        doc = parse(webhook_table("[push](/push)", "n/a"))
        with pytest.raises(HeadingNotFoundError, match="Webhook events"):
            extract_webhooks(doc)

    def test_empty_document(self, parse):
        """An empty document is missing the heading."""
        with pytest.raises(HeadingNotFoundError):
            extract_webhooks(parse(""))

    def test_no_webhook_table(self, parse):
        """Heading without payload tables fails."""
        markdown = HEADING + "| Activity type | Default |\n| --- | --- |\n| a | b |\n"
        with pytest.raises(NoWebhookTableError, match="no webhook table"):
            extract_webhooks(parse(markdown))

    def test_only_table_without_link(self, parse):
        """A matching header without a link is not enough."""
        markdown = HEADING + webhook_table("Custom event", "n/a")
        with pytest.raises(NoWebhookTableError):
            extract_webhooks(parse(markdown))

    def test_document_order(self, parse):
        """Webhooks keep document order, not alphabetical order."""
        names = ("workflow_run", "check_run", "push")
        markdown = HEADING + "".join(webhook_table(f"[{n}](/{n})", "n/a") for n in names)
        webhooks = extract_webhooks(parse(markdown))
        assert webhooks.names == ["workflow_run", "check_run", "push"]
