"""Exceptions module for the DNS-over-HTTPS client."""
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .core.response import Response
    from .core.types import ResourceRecordType


class DoHException(Exception):
    """Base exception class for DNS-over-HTTPS failures."""


class InvalidNameError(DoHException, ValueError):
    """Raised when the name to resolve is empty or missing."""


class InvalidRecordTypeError(DoHException, ValueError):
    """Raised when a record type is neither a known mnemonic nor a 16-bit code."""


class EmptyBodyError(DoHException):
    """Raised when the resolver answered with an empty body."""


class ResponseDecodeError(DoHException):
    """Raised when a response body is not a well-formed DNS JSON reply.

    Attributes:
        preview: The first characters of the offending body
    """

    def __init__(self, message: str, preview: str = ""):
        super().__init__(message)
        self.preview = preview


class ResolutionError(DoHException):
    """Raised when a decoded reply signals a failed query.

    The decoded reply is kept on ``response`` so callers can inspect it
    without querying again.
    """

    def __init__(self, message: str, response: Optional['Response'] = None, *,
                 name: Optional[str] = None,
                 record_type: Optional['ResourceRecordType'] = None,
                 status_code: Optional[int] = None):
        super().__init__(message)
        self.response = response
        self.name = name
        self.record_type = record_type
        self.status_code = status_code


class ConfigError(DoHException, ValueError):
    """Raised when a client configuration cannot be loaded."""
