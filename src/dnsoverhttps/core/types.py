"""DNS record type and response code enumerations.

Values follow the IANA DNS parameters registry:
https://www.iana.org/assignments/dns-parameters/dns-parameters.xhtml
Both enumerations have gaps, so every member carries its code explicitly.
"""

from enum import IntEnum
from typing import Union

from ..exceptions import InvalidRecordTypeError

# Record types are 16-bit fields
MAX_TYPE_CODE = 0xFFFF


class ResourceRecordType(IntEnum):
    """Type of a DNS resource record."""

    A = 1
    NS = 2
    MD = 3
    MF = 4
    CNAME = 5
    SOA = 6
    MB = 7
    MG = 8
    MR = 9
    NULL = 10
    WKS = 11
    PTR = 12
    HINFO = 13
    MINFO = 14
    MX = 15
    TXT = 16
    RP = 17
    AFSDB = 18
    SIG = 24
    KEY = 25
    AAAA = 28
    LOC = 29
    SRV = 33
    NAPTR = 35
    KX = 36
    CERT = 37
    DNAME = 39
    OPT = 41
    APL = 42
    DS = 43
    SSHFP = 44
    IPSECKEY = 45
    RRSIG = 46
    NSEC = 47
    DNSKEY = 48
    DHCID = 49
    NSEC3 = 50
    NSEC3PARAM = 51
    TLSA = 52
    SMIMEA = 53
    HIP = 55
    CDS = 59
    CDNSKEY = 60
    OPENPGPKEY = 61
    CSYNC = 62
    ZONEMD = 63
    SVCB = 64
    HTTPS = 65
    SPF = 99
    TKEY = 249
    TSIG = 250
    IXFR = 251
    AXFR = 252
    ANY = 255
    URI = 256
    CAA = 257

    @property
    def mnemonic(self) -> str:
        """Textual name used on the wire, e.g. ``"MX"`` or ``"TYPE65280"``."""
        return self.name

    @classmethod
    def _missing_(cls, value):
        # Unlisted codes become RFC 3597 ``TYPE<n>`` pseudo-members
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_TYPE_CODE:
            member = int.__new__(cls, value)
            member._name_ = f"TYPE{value}"
            member._value_ = value
            return cls._value2member_map_.setdefault(value, member)
        return None

    @classmethod
    def from_text(cls, text: str) -> 'ResourceRecordType':
        """Parse a mnemonic such as ``"aaaa"``, ``"MX"`` or ``"TYPE65280"``."""
        mnemonic = text.strip().upper()
        if mnemonic in cls.__members__:
            return cls[mnemonic]
        if mnemonic.startswith("TYPE") and mnemonic[4:].isdigit():
            return cls.coerce(int(mnemonic[4:]))
        raise InvalidRecordTypeError(f"Unknown DNS record type: {text!r}")

    @classmethod
    def coerce(cls, value: Union['ResourceRecordType', int, str, None]) -> 'ResourceRecordType':
        """Normalize an enum member, numeric code or mnemonic.

        ``None`` and the empty string stand for the resolver default, ``A``.

        Raises:
            InvalidRecordTypeError: If ``value`` names no record type
        """
        if value is None or value == "":
            return cls.A
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            if value.strip().isdigit():
                value = int(value)
            else:
                return cls.from_text(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidRecordTypeError(f"Unknown DNS record type: {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise InvalidRecordTypeError(f"DNS record type code out of range: {value}") from None

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class ResponseCode(IntEnum):
    """Status of a DNS query (DNS RCODE).

    RFC 1035, RFC 6895. Codes 12-15 are unassigned.
    """

    NoError = 0
    FormatError = 1
    ServerFailure = 2
    NXDomain = 3
    NotImplemented = 4
    Refused = 5
    YXDomain = 6
    YXRRSet = 7
    NXRRSet = 8
    NotAuth = 9
    NotZone = 10
    DSOTYPENotImplemented = 11
    BadVersion = 16
    # TSIG reuses 16 for a bad signature
    BadSignature = 16
    BadKey = 17
    BadTime = 18
    BadMode = 19
    BadName = 20
    BadAlgorithm = 21
    BadTruncation = 22
    BadCookie = 23

    @property
    def is_error(self) -> bool:
        return self is not ResponseCode.NoError

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)
