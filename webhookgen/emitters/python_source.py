"""
Python source emitter.

Renders a WebhookTable as a generated Python module holding a single
``dict[str, list[str]]`` constant, formatted with black.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import black

from webhookgen.config import DEFAULT_SOURCE_URL
from webhookgen.exceptions import SourceFormatError
from webhookgen.models import Webhook

logger = logging.getLogger(__name__)

HEADER_TEMPLATE = """\
# Code generated by {generator}. DO NOT EDIT.
#
# {variable} maps every webhook event that can trigger a workflow to its
# activity types. It was generated by {generator} from
# {source_url}
"""


def format_source(source: str) -> str:
    """Format Python source with black's default style.

    Raises:
        SourceFormatError: If black cannot parse the source.
    """
    try:
        return black.format_str(source, mode=black.Mode())
    except black.InvalidInput as exc:
        raise SourceFormatError(f"could not format Python source: {exc}") from exc


def emit_python_source(
    webhooks: Iterable[Webhook],
    *,
    source_url: str = DEFAULT_SOURCE_URL,
    variable_name: str = "ALL_WEBHOOK_TYPES",
    generator: str = "webhookgen",
) -> str:
    """Render webhooks as a formatted Python module.

    Entries keep the order of ``webhooks`` (document order); a webhook
    without activity types becomes an empty list.

    Args:
        webhooks: Webhooks to emit, usually a WebhookTable.
        source_url: Document URL recorded in the header.
        variable_name: Name of the generated constant.
        generator: Tool name recorded in the header.

    Returns:
        Black-formatted module source.

    Raises:
        SourceFormatError: If the rendered source is not valid Python.
    """
    lines = [
        HEADER_TEMPLATE.format(
            generator=generator, variable=variable_name, source_url=source_url
        ).rstrip("\n"),
        f"{variable_name}: dict[str, list[str]] = {{",
    ]

    count = 0
    for webhook in webhooks:
        types = ", ".join(repr(t) for t in webhook.types)
        lines.append(f"    {webhook.name!r}: [{types}],")
        count += 1
    lines.append("}")

    source = format_source("\n".join(lines) + "\n")
    logger.debug("Rendered %d webhooks as %d lines of Python", count, source.count("\n"))
    return source
