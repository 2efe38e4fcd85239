"""DNS JSON response model, decoding and validation.

The JSON dialect is the one served by ``application/dns-json`` resolvers:
https://developers.cloudflare.com/1.1.1.1/encryption/dns-over-https/make-api-requests/dns-json/
"""

from typing import Annotated, Any, List, Optional, Union

import dns.rdata
import dns.rdataclass
from pydantic import BaseModel, ConfigDict, Field, PlainValidator, ValidationError

from .types import ResourceRecordType, ResponseCode
from .. import constants
from ..exceptions import ResolutionError, ResponseDecodeError
from ..utils.logger import get_logger

logger = get_logger(__name__)

HTTP_OK = 200


def _record_type_from_wire(value: Any) -> ResourceRecordType:
    """Accept a numeric code or a mnemonic (``"MX"``).

    Codes missing from :class:`ResourceRecordType` are kept as ``TYPE<n>``.
    """
    if value is None:
        raise ValueError("record type is missing")
    return ResourceRecordType.coerce(value)


RecordType = Annotated[ResourceRecordType, PlainValidator(_record_type_from_wire)]


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Question(_WireModel):
    """A DNS question echoed back by the resolver."""

    name: str = Field(..., description="The FQDN record name requested")
    type: RecordType = Field(..., description="The type of DNS record requested")


class Answer(_WireModel):
    """A DNS record sent by the resolver."""

    name: str = Field(..., description="The record owner")
    type: RecordType = Field(..., description="The type of DNS record")
    ttl: int = Field(..., alias="TTL", ge=0, description="Seconds the record may be cached")
    data: str = Field(..., description="Record value; text for known types, hex for unknown types")

    def to_rdata(self) -> dns.rdata.Rdata:
        """Parse ``data`` into a dnspython rdata object.

        Unknown types arrive in the generic ``\\# <len> <hex>`` form, which
        dnspython understands as well.
        """
        return dns.rdata.from_text(dns.rdataclass.IN, int(self.type), self.data)


class Response(_WireModel):
    """The decoded result of a DNS-over-HTTPS query.

    Sections the resolver left out stay ``None``; an empty list means the
    resolver sent an empty array.
    """

    status: ResponseCode = Field(default=ResponseCode.NoError, alias="Status")
    truncated: bool = Field(default=False, alias="TC")
    recursion_desired: bool = Field(default=False, alias="RD")
    recursion_available: bool = Field(default=False, alias="RA")
    authentic_data: bool = Field(default=False, alias="AD")
    checking_disabled: bool = Field(default=False, alias="CD")
    questions: List[Question] = Field(default_factory=list, alias="Question")
    answers: Optional[List[Answer]] = Field(default=None, alias="Answer")
    authorities: Optional[List[Answer]] = Field(default=None, alias="Authority")
    additional: Optional[List[Answer]] = Field(default=None, alias="Additional")
    error: Optional[str] = None
    comments: Optional[List[str]] = Field(default=None, alias="Comment")

    def is_successful(self, status_code: int = HTTP_OK) -> bool:
        """Whether this reply, received with ``status_code``, is a success.

        The DNS status alone does not decide: an NXDOMAIN reply without an
        ``error`` or ``Comment`` is a valid answer saying the name is absent.
        """
        return status_code == HTTP_OK and not self.error and self.comments is None

    def answers_of(self, record_type: Union[ResourceRecordType, int, str, None]) -> List[Answer]:
        """Return the answers matching ``record_type``, in reply order."""
        rtype = ResourceRecordType.coerce(record_type)
        return [answer for answer in self.answers or [] if answer.type == rtype]

    def first_answer(self, record_type: Union[ResourceRecordType, int, str, None]) -> Optional[Answer]:
        matching = self.answers_of(record_type)
        return matching[0] if matching else None


def body_preview(body: Union[bytes, str], max_length: int = constants.PREVIEW_MAX_LENGTH) -> str:
    """Return at most ``max_length`` characters of a response body.

    Undecodable bytes are replaced so building a preview never fails.
    """
    if isinstance(body, bytes):
        # a UTF-8 character is at most 4 bytes
        body = body[:max_length * 4].decode("utf-8", errors="replace")
    return body[:max_length]


def parse_response(body: Union[bytes, str],
                   preview_max_length: int = constants.PREVIEW_MAX_LENGTH) -> Response:
    """Decode a JSON body into a :class:`Response`.

    Raises:
        ResponseDecodeError: If the body is not valid JSON or does not have
            the DNS JSON shape. The message carries a bounded preview.
    """
    try:
        return Response.model_validate_json(body)
    except (ValidationError, ValueError) as e:
        preview = body_preview(body, preview_max_length)
        logger.debug(f"Failed to decode response body: {e}")
        raise ResponseDecodeError(
            f"Exception while parsing JSON: {type(e).__name__} => {e}\nPreview: {preview}",
            preview=preview,
        ) from e


def validate_response(response: Response, status_code: int, name: str,
                      record_type: ResourceRecordType) -> Response:
    """Check a decoded reply and raise if it signals failure.

    Raises:
        ResolutionError: If the HTTP status is not 200, the reply carries an
            ``error`` string, or the reply carries a ``Comment`` field.
    """
    if response.is_successful(status_code):
        return response

    message = (
        f"Failed to query type {record_type} of '{name}', "
        f"received HTTP status code {status_code}."
    )
    if response.error:
        message += f"\nError: {response.error}"
    if response.comments is not None:
        comments = "\n".join(response.comments)
        message += f"\nComment: {comments}"

    logger.warning(message.replace("\n", " "))
    raise ResolutionError(
        message,
        response,
        name=name,
        record_type=record_type,
        status_code=status_code,
    )
