"""DNS-over-HTTPS Client Module.

This module provides the resolver client that sends DNS JSON queries
and turns the replies into typed responses.
"""

from .client import DoHClient

__all__ = ['DoHClient']
