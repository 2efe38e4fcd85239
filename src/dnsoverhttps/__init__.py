"""dnsoverhttps - An asyncio client for DNS-over-HTTPS JSON resolvers."""

__version__ = "0.1.0"
__author__ = "dnsoverhttps developers"

from .core.types import ResourceRecordType, ResponseCode
from .core.query import build_query_string
from .core.response import Answer, Question, Response
from .core.config import ClientConfig, load_config
from .client.client import DoHClient
from .utils.logger import get_logger, setup_logger
from .exceptions import (
    ConfigError,
    DoHException,
    EmptyBodyError,
    InvalidNameError,
    InvalidRecordTypeError,
    ResolutionError,
    ResponseDecodeError,
)

__all__ = [
    "DoHClient",
    "ClientConfig",
    "load_config",
    "build_query_string",
    "ResourceRecordType",
    "ResponseCode",
    "Question",
    "Answer",
    "Response",
    "DoHException",
    "InvalidNameError",
    "InvalidRecordTypeError",
    "EmptyBodyError",
    "ResponseDecodeError",
    "ResolutionError",
    "ConfigError",
    "get_logger",
    "setup_logger",
]
