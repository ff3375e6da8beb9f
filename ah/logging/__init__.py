"""Console logging helpers for the ah CLI."""

from ah.logging.filters import StreamRoutingFilter
from ah.logging.formatters import StreamFormatter

__all__ = ["StreamFormatter", "StreamRoutingFilter"]
