"""Bybit connectors for direct use."""

from .rest import BybitRESTClient
from .ws import BybitWSConnector

__all__ = ["BybitRESTClient", "BybitWSConnector"]
