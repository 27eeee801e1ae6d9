"""
Configuration for webhook table generation.

Defaults match the layout of the GitHub Actions documentation page
"Events that trigger workflows".
"""

import keyword
from dataclasses import dataclass

from webhookgen.exceptions import ConfigurationError

DEFAULT_SOURCE_URL = (
    "https://raw.githubusercontent.com/github/docs/main/"
    "content/actions/reference/events-that-trigger-workflows.md"
)


@dataclass
class GenerateConfig:
    """
    Configuration for extracting webhooks and emitting the Python module.

    All options have sensible defaults. Create a config only
    if you need to customize behavior.

    Example:
        >>> config = GenerateConfig(variable_name="WEBHOOK_TYPES")
        >>> source = webhookgen.generate(markdown, config)
    """

    # Source options
    source_url: str = DEFAULT_SOURCE_URL
    timeout: float | None = None  # Seconds; None waits for the server

    # Document layout
    heading_text: str = "Webhook events"
    heading_level: int = 2
    payload_header: str = "Webhook event payload"

    # Output options
    variable_name: str = "ALL_WEBHOOK_TYPES"
    generator: str = "webhookgen"  # Named in the generated header

    def __post_init__(self):
        """Validate configuration."""
        if not 1 <= self.heading_level <= 6:
            raise ConfigurationError(
                f"heading_level must be between 1 and 6, got {self.heading_level}"
            )
        if not self.heading_text:
            raise ConfigurationError("heading_text must not be empty")
        if not self.payload_header:
            raise ConfigurationError("payload_header must not be empty")
        if not self.variable_name.isidentifier() or keyword.iskeyword(self.variable_name):
            raise ConfigurationError(
                f"variable_name must be a valid Python identifier, got {self.variable_name!r}"
            )
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
