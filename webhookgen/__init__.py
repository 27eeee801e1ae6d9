"""
webhookgen: Generate the GitHub Actions webhook table from the docs.

Reads the "Events that trigger workflows" page of the GitHub docs,
extracts every webhook event with its activity types, and emits a
Python module holding them as a dictionary.

Example:
    >>> import webhookgen
    >>> source = webhookgen.generate(markdown_bytes)
    >>> print(source)  # ALL_WEBHOOK_TYPES: dict[str, list[str]] = {...}

    >>> # Fetch from GitHub and write a module
    >>> webhookgen.generate_file(dst="all_webhooks.py")
"""

from webhookgen._version import __version__
from webhookgen.config import DEFAULT_SOURCE_URL, GenerateConfig
from webhookgen.exceptions import (
    ConfigurationError,
    ExtractionError,
    FetchError,
    HeadingNotFoundError,
    NoWebhookTableError,
    OutputWriteError,
    SourceError,
    SourceFormatError,
    SourceReadError,
    WebhookGenError,
)
from webhookgen.extractors import extract_webhooks
from webhookgen.generate import (
    extract_webhook_table,
    generate,
    generate_file,
    load_markdown_source,
    write_output,
)
from webhookgen.models import (
    MatchStatus,
    TableMatch,
    Webhook,
    WebhookTable,
)

__all__ = [
    # Main API
    "generate",
    "generate_file",
    "extract_webhook_table",
    "extract_webhooks",
    "load_markdown_source",
    "write_output",
    # Configuration
    "GenerateConfig",
    "DEFAULT_SOURCE_URL",
    # Models
    "Webhook",
    "WebhookTable",
    "MatchStatus",
    "TableMatch",
    # Exceptions
    "WebhookGenError",
    "SourceError",
    "FetchError",
    "SourceReadError",
    "ExtractionError",
    "HeadingNotFoundError",
    "NoWebhookTableError",
    "SourceFormatError",
    "OutputWriteError",
    "ConfigurationError",
]
