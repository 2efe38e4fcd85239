"""Core DNS JSON components."""

from .types import ResourceRecordType, ResponseCode
from .query import build_query_string
from .response import Answer, Question, Response, parse_response, validate_response

__all__ = [
    "ResourceRecordType",
    "ResponseCode",
    "build_query_string",
    "Answer",
    "Question",
    "Response",
    "parse_response",
    "validate_response",
]
