"""
Exception classes for webhookgen.

All webhookgen exceptions inherit from WebhookGenError,
making it easy to catch all library errors.

Example:
    >>> try:
    ...     source = webhookgen.generate(markdown)
    ... except webhookgen.HeadingNotFoundError as e:
    ...     print(f"Document layout changed: {e}")
    ... except webhookgen.WebhookGenError as e:
    ...     print(f"webhookgen error: {e}")
"""


class WebhookGenError(Exception):
    """
    Base exception for all webhookgen errors.

    Catch this to handle any webhookgen-specific error.
    """

    pass


class SourceError(WebhookGenError):
    """Raised when the markdown source cannot be obtained."""

    pass


class FetchError(SourceError):
    """
    Raised when fetching the markdown document over HTTP fails.

    Covers connection errors and non-2xx responses. There is no retry.
    """

    pass


class SourceReadError(SourceError):
    """Raised when a local markdown file cannot be read."""

    pass


class ExtractionError(WebhookGenError):
    """
    Raised when the document does not have the expected structure.

    Individual tables that do not look like webhook tables are skipped
    silently; this is only raised for whole-document failures.
    """

    pass


class HeadingNotFoundError(ExtractionError):
    """
    Raised when the "## Webhook events" heading is missing.

    Example:
        >>> extract_webhooks(MarkdownReader().parse("# Title"))
        HeadingNotFoundError: "## Webhook events" heading was missing
    """

    pass


class NoWebhookTableError(ExtractionError):
    """Raised when the heading exists but no webhook table followed it."""

    pass


class SourceFormatError(WebhookGenError):
    """
    Raised when the generated Python source does not format.

    This means the emitter produced invalid code and is a bug in webhookgen,
    not in the input document.
    """

    pass


class OutputWriteError(WebhookGenError):
    """Raised when the generated source cannot be written to its destination."""

    pass


class ConfigurationError(WebhookGenError, ValueError):
    """
    Raised for invalid configuration.

    Example:
        >>> GenerateConfig(heading_level=9)
        ConfigurationError: heading_level must be between 1 and 6, got 9
    """

    pass
