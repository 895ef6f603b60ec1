"""Upstream repository access."""

from .client import UpstreamClient
from .transport import HttpTransport, TransportError

__all__ = ["HttpTransport", "TransportError", "UpstreamClient"]
