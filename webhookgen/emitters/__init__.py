"""Output emitters for extracted webhook tables."""

from webhookgen.emitters.python_source import (
    emit_python_source,
    format_source,
)

__all__ = [
    "emit_python_source",
    "format_source",
]
