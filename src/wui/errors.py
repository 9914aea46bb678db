from __future__ import annotations

from typing import Optional


class WuiError(Exception):
    """Base class for every error raised by wui and its provider clients."""


class ConfigurationError(WuiError):
    """Missing or malformed configuration (e.g. an empty API key)."""


class InvalidArgument(WuiError, ValueError):
    pass


class UpstreamError(WuiError):
    """The provider answered, but not with something we can use.

    ``status_code`` and ``body`` are set when the provider returned a
    non-success HTTP status.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class TransportError(WuiError):
    """Network-level failure before any response was obtained."""


__all__ = ['WuiError', 'ConfigurationError', 'InvalidArgument', 'UpstreamError', 'TransportError']
