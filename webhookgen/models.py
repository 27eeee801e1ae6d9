"""
Data models for webhookgen.

These models represent what the extractors pull out of the
"Events that trigger workflows" document.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Webhook:
    """A webhook event and the activity types it can be filtered on.

    An empty ``types`` means the event has no activity types and fires
    on any activity.
    """

    name: str
    types: tuple[str, ...] = ()

    def __post_init__(self):
        if not self.name:
            raise ValueError("Webhook name must not be empty")
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "types", tuple(self.types))


@dataclass
class WebhookTable:
    """
    Webhooks keyed by name, in the order they appear in the document.

    Consumers must not assume the entries are sorted.

    Example:
        >>> table = WebhookTable()
        >>> table.add(Webhook("push"))
        >>> table.add(Webhook("pull_request", ("opened", "closed")))
        >>> table.to_dict()
        {'push': [], 'pull_request': ['opened', 'closed']}
    """

    _entries: dict[str, Webhook] = field(default_factory=dict)

    def add(self, webhook: Webhook) -> None:
        """Add a webhook. A repeated name keeps its first position."""
        if webhook.name in self._entries:
            logger.warning(
                "Webhook %r appears more than once; keeping types %s",
                webhook.name,
                list(webhook.types),
            )
        self._entries[webhook.name] = webhook

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Webhook]:
        return iter(self._entries.values())

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __getitem__(self, name: str) -> Webhook:
        return self._entries[name]

    @property
    def names(self) -> list[str]:
        """Webhook names in document order."""
        return list(self._entries)

    def to_dict(self) -> dict[str, list[str]]:
        """Plain ``{name: [types]}`` mapping in document order."""
        return {w.name: list(w.types) for w in self._entries.values()}


class MatchStatus(Enum):
    """Outcome of classifying one table."""

    MATCHED = "matched"  # Webhook payload table, record extracted
    NOT_MATCHED = "not_matched"  # Some other table
    INVALID = "invalid"  # Missing header or data row


@dataclass(frozen=True)
class TableMatch:
    """Result of classifying a table. ``webhook`` is set only when matched."""

    status: MatchStatus
    webhook: Webhook | None = None
    reason: str = ""

    @property
    def matched(self) -> bool:
        return self.status is MatchStatus.MATCHED

    @classmethod
    def found(cls, webhook: Webhook) -> TableMatch:
        return cls(MatchStatus.MATCHED, webhook, "webhook payload table")

    @classmethod
    def skip(cls, reason: str) -> TableMatch:
        return cls(MatchStatus.NOT_MATCHED, None, reason)

    @classmethod
    def invalid(cls, reason: str) -> TableMatch:
        return cls(MatchStatus.INVALID, None, reason)
