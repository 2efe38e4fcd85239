"""DNS-over-HTTPS client implementation."""

import asyncio
from typing import Iterable, List, Optional

import httpx

from ..core.config import ClientConfig
from ..core.query import RecordTypeLike, build_query_string, require_name
from ..core.response import Answer, Response, parse_response, validate_response
from ..core.types import ResourceRecordType
from ..exceptions import EmptyBodyError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class DoHClient:
    """Client for resolving names through a DNS JSON resolver.

    One instance owns one ``httpx.AsyncClient``. Its headers, HTTP version
    and endpoint are fixed at construction, so a single instance may be
    shared by any number of concurrent queries.

    Example:
        async with DoHClient() as client:
            answer = await client.resolve_first("example.com", "NS")
    """

    def __init__(self, config: Optional[ClientConfig] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize the client.

        Args:
            config: Transport settings, defaults to ``ClientConfig()``
            transport: Optional httpx transport, mainly for tests
        """
        self.config = config or ClientConfig()
        self._http = httpx.AsyncClient(
            headers=self.config.headers,
            http2=self.config.http2,
            timeout=self.config.timeout,
            verify=self.config.verify,
            transport=transport,
        )

    async def __aenter__(self) -> 'DoHClient':
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    async def resolve(self, name: str,
                      record_type: RecordTypeLike = ResourceRecordType.A,
                      request_dnssec: bool = False,
                      validate_dnssec: bool = False) -> Response:
        """Resolve a name and return the full, unfiltered reply.

        Args:
            name: The FQDN to resolve. Example: ``foo.bar.example.com``
            record_type: The record type to resolve, ``A`` by default
            request_dnssec: Whether to request DNSSEC data in the reply;
                it shows up in ``answers``
            validate_dnssec: Whether to set the checking-disabled flag

        Raises:
            InvalidNameError: If ``name`` is empty, before any request is sent
            InvalidRecordTypeError: If ``record_type`` names no record type
            EmptyBodyError: If the resolver sent no content
            ResponseDecodeError: If the content is not a DNS JSON reply
            ResolutionError: If the reply signals a failed query
            httpx.HTTPError: On transport failures
        """
        require_name(name)
        rtype = ResourceRecordType.coerce(record_type)
        url = self.config.base_url + build_query_string(name, rtype, request_dnssec, validate_dnssec)

        logger.debug(f"GET {url}")
        try:
            http_response = await self._http.get(url)
        except httpx.HTTPError as e:
            logger.error(f"Request for {rtype} of '{name}' failed: {e}")
            raise

        body = await http_response.aread()
        logger.debug(f"Received HTTP {http_response.status_code} ({len(body)} bytes) for {rtype} of '{name}'")
        if not body:
            raise EmptyBodyError("Response content is empty, can't parse as JSON.")

        response = validate_response(
            parse_response(body, self.config.preview_max_length),
            http_response.status_code, name, rtype,
        )
        if response.status.is_error:
            logger.debug(f"Resolver answered {response.status} for {rtype} of '{name}'")
        return response

    async def resolve_many(self, name: str,
                           record_types: Iterable[RecordTypeLike],
                           request_dnssec: bool = False,
                           validate_dnssec: bool = False) -> List[Response]:
        """Resolve several record types of one name concurrently.

        Replies come back in the order of ``record_types``, not in the
        order the requests complete. Duplicate types are queried twice.
        If any query fails its exception is raised and the other replies
        are discarded; queries still in flight are left to finish.
        """
        require_name(name)
        rtypes = [ResourceRecordType.coerce(t) for t in record_types]
        results: List[Optional[Response]] = [None] * len(rtypes)

        async def _resolve_into(index: int, rtype: ResourceRecordType) -> None:
            results[index] = await self.resolve(name, rtype, request_dnssec, validate_dnssec)

        logger.debug(f"Resolving {len(rtypes)} record types of '{name}' in parallel")
        await asyncio.gather(*(_resolve_into(i, rtype) for i, rtype in enumerate(rtypes)))
        return results

    async def resolve_first(self, name: str,
                            record_type: RecordTypeLike = ResourceRecordType.A,
                            request_dnssec: bool = False,
                            validate_dnssec: bool = False) -> Optional[Answer]:
        """Return the first answer of ``record_type``, or None when there is none."""
        require_name(name)
        rtype = ResourceRecordType.coerce(record_type)
        response = await self.resolve(name, rtype, request_dnssec, validate_dnssec)
        return response.first_answer(rtype)

    async def resolve_all(self, name: str,
                          record_type: RecordTypeLike = ResourceRecordType.A,
                          request_dnssec: bool = False,
                          validate_dnssec: bool = False) -> List[Answer]:
        """Return every answer of ``record_type``; the list may be empty."""
        require_name(name)
        rtype = ResourceRecordType.coerce(record_type)
        response = await self.resolve(name, rtype, request_dnssec, validate_dnssec)
        return response.answers_of(rtype)
