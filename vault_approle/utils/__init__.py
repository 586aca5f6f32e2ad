"""HTTP transport utilities."""

from .http import Transport, VaultHTTPTransport

__all__ = ["Transport", "VaultHTTPTransport"]
