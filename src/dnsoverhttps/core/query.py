"""Query string construction for DNS JSON requests."""

from typing import Optional, Union
from urllib.parse import quote_plus

from .types import ResourceRecordType
from ..exceptions import InvalidNameError
from ..utils.logger import get_logger

logger = get_logger(__name__)

RecordTypeLike = Union[ResourceRecordType, int, str, None]


def require_name(name: Optional[str]) -> str:
    """Return ``name``, or raise InvalidNameError if it is empty or missing."""
    if not name:
        raise InvalidNameError("Name is null or empty.")
    return name


def build_query_string(name: Optional[str],
                       record_type: RecordTypeLike = ResourceRecordType.A,
                       request_dnssec: bool = False,
                       validate_dnssec: bool = False) -> str:
    """Build the query string appended to the resolver endpoint.

    Args:
        name: The FQDN to resolve, e.g. ``foo.bar.example.com``
        record_type: Record type to ask for. ``A`` is the resolver default
            and is left out of the query string.
        request_dnssec: Ask for DNSSEC records (``do=1``)
        validate_dnssec: Disable DNSSEC validation upstream (``cd=1``)

    Returns:
        A string of the form ``?name=...[&type=...][&do=1][&cd=1]``

    Raises:
        InvalidNameError: If ``name`` is empty or missing; checked first
        InvalidRecordTypeError: If ``record_type`` names no record type
    """
    require_name(name)
    rtype = ResourceRecordType.coerce(record_type)

    query = f"?name={quote_plus(name)}"
    if rtype is not ResourceRecordType.A:
        query += f"&type={quote_plus(rtype.mnemonic)}"
    if request_dnssec:
        query += "&do=1"
    if validate_dnssec:
        query += "&cd=1"

    logger.debug(f"Built query string for {name} ({rtype}): {query}")
    return query
