"""Tests for query string construction."""

from urllib.parse import parse_qs

import pytest

from dnsoverhttps.core.query import build_query_string
from dnsoverhttps.core.types import ResourceRecordType
from dnsoverhttps.exceptions import DoHException, InvalidNameError, InvalidRecordTypeError


class TestBuildQueryString:
    """Test cases for build_query_string."""

    def test_default_type_is_omitted(self):
        """A is the resolver default and is not sent."""
        assert build_query_string("example.com") == "?name=example.com"
        assert build_query_string("example.com", ResourceRecordType.A) == "?name=example.com"

    @pytest.mark.parametrize("rtype", [
        ResourceRecordType.NS,
        ResourceRecordType.MX,
        ResourceRecordType.AAAA,
        ResourceRecordType.TXT,
        ResourceRecordType.SRV,
    ])
    def test_other_types_are_sent(self, rtype):
        query = build_query_string("example.com", rtype)
        assert query == f"?name=example.com&type={rtype.mnemonic}"

    def test_type_from_text(self):
        assert build_query_string("example.com", "mx") == "?name=example.com&type=MX"
        assert build_query_string("example.com", "") == "?name=example.com"

    @pytest.mark.parametrize("rtype", ["TYPE65280", "type65280", 65280, "65280"])
    def test_unlisted_type_uses_generic_mnemonic(self, rtype):
        assert build_query_string("example.com", rtype) == "?name=example.com&type=TYPE65280"

    @pytest.mark.parametrize("rtype", ["BOGUS", 70000, -1])
    def test_invalid_type(self, rtype):
        with pytest.raises(InvalidRecordTypeError):
            build_query_string("example.com", rtype)

    def test_dnssec_flags(self):
        assert build_query_string("example.com", request_dnssec=True) == "?name=example.com&do=1"
        assert build_query_string("example.com", validate_dnssec=True) == "?name=example.com&cd=1"

    def test_parameter_order(self):
        query = build_query_string("example.com", ResourceRecordType.MX, True, True)
        assert query == "?name=example.com&type=MX&do=1&cd=1"

    def test_no_flags_by_default(self):
        query = build_query_string("example.com", ResourceRecordType.NS)
        assert "do=" not in query
        assert "cd=" not in query

    def test_reserved_characters_round_trip(self):
        """Encoded names decode back to the original."""
        name = "odd name&type=MX.example.com"
        query = build_query_string(name)

        assert " " not in query
        assert query.count("&") == 0
        assert parse_qs(query[1:]) == {"name": [name]}

    @pytest.mark.parametrize("name", ["", None])
    def test_empty_name(self, name):
        with pytest.raises(InvalidNameError):
            build_query_string(name)

    def test_invalid_name_error_hierarchy(self):
        assert issubclass(InvalidNameError, DoHException)
        assert issubclass(InvalidNameError, ValueError)

    @pytest.mark.parametrize("name", ["", None])
    def test_empty_name_checked_before_type(self, name):
        """An empty name wins over a bad record type."""
        with pytest.raises(InvalidNameError):
            build_query_string(name, "BOGUS")
