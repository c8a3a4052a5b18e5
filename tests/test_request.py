"""Tests for request descriptors, payload encoding and auth headers."""

import pytest

from celsius.config import AuthMethod
from celsius.errors import DocumentError
from celsius.models import Pagination
from celsius.request import (
    API_KEY_HEADER,
    PARTNER_TOKEN_HEADER,
    USER_TOKEN_HEADER,
    JsonPayload,
    MultipartPayload,
    NoPayload,
    Paths,
    QueryPayload,
    RequestDescriptor,
    auth_headers,
    encode_payload,
)

from tests.conftest import TEST_PARTNER_KEY


class TestPaths:
    """Tests for path templates."""

    def test_static_paths(self):
        assert Paths.KYC == "/kyc"
        assert Paths.BALANCE_SUMMARY == "/balance"
        assert Paths.TRANSACTIONS_SUMMARY == "/transactions"

    def test_interpolated_paths(self):
        assert Paths.coin_balance("BTC") == "/balance/BTC"
        assert Paths.coin_transactions("ETH") == "/transactions/ETH"
        assert Paths.deposit("CEL") == "/deposit/CEL"
        assert Paths.withdraw("BTC") == "/withdraw/BTC"
        assert Paths.transaction_status("tx-1") == "/transactions/status/tx-1"

    def test_identifiers_cannot_escape_path(self):
        """Path separators and query characters in identifiers are quoted."""
        assert Paths.coin_balance("../kyc") == "/balance/..%2Fkyc"
        assert Paths.transaction_status("a?b=c") == "/transactions/status/a%3Fb%3Dc"


class TestRequestDescriptor:
    """Tests for descriptor construction."""

    def test_get_without_params(self):
        descriptor = RequestDescriptor.get("/kyc")

        assert descriptor.method == "GET"
        assert descriptor.payload == NoPayload()

    def test_get_with_params(self):
        descriptor = RequestDescriptor.get("/transactions", Pagination(2, 50).to_params())

        assert descriptor.payload == QueryPayload({"page": 2, "perPage": 50})

    def test_post_json(self):
        descriptor = RequestDescriptor.post_json("/withdraw/BTC", {"amount": 1})

        assert descriptor.method == "POST"
        assert descriptor.payload == JsonPayload({"amount": 1})

    def test_post_multipart(self):
        descriptor = RequestDescriptor.post_multipart("/kyc", {"a": "b"}, {"f": b"data"})

        assert isinstance(descriptor.payload, MultipartPayload)
        assert descriptor.payload.fields == {"a": "b"}
        assert descriptor.payload.files == {"f": b"data"}


class TestEncodePayload:
    """Tests for payload encoding into HTTP library kwargs."""

    def test_no_payload(self):
        assert encode_payload(NoPayload()) == {}

    def test_query_payload_stringifies(self):
        encoded = encode_payload(QueryPayload({"page": 1, "perPage": 20, "skip": None}))

        assert encoded == {"params": {"page": "1", "perPage": "20"}}

    def test_json_payload(self):
        assert encode_payload(JsonPayload({"address": "x", "amount": 0.5})) == {
            "json": {"address": "x", "amount": 0.5}
        }

    def test_multipart_payload(self):
        encoded = encode_payload(
            MultipartPayload({"first_name": "Ada", "pep": False}, {"front": b"img"})
        )

        assert encoded["data"] == {"first_name": "Ada", "pep": "false"}
        assert encoded["files"] == {"front": b"img"}

    def test_multipart_path_documents(self, tmp_path):
        image = tmp_path / "back.jpg"
        image.write_bytes(b"\xff\xd8back")
        payload = MultipartPayload({}, {"back": image, "front": "base64text"})

        encoded = encode_payload(payload)

        assert payload.reads_files
        assert encoded["files"] == {
            "back": ("back.jpg", b"\xff\xd8back", "image/jpeg"),
            "front": ("front", b"base64text", "text/plain"),
        }

    def test_string_document_is_not_a_path(self):
        assert not MultipartPayload({}, {"front": "/etc/passwd"}).reads_files

    def test_unreadable_path_document(self, tmp_path):
        with pytest.raises(DocumentError):
            encode_payload(MultipartPayload({}, {"front": tmp_path / "missing.png"}))

    def test_multipart_without_files(self):
        encoded = encode_payload(MultipartPayload({"first_name": "Ada"}))

        assert "files" not in encoded

    def test_unknown_payload(self):
        with pytest.raises(TypeError):
            encode_payload({"raw": "dict"})


class TestAuthHeaders:
    """Tests for the two-tier credential headers."""

    def test_user_token_scheme(self, test_config):
        headers = auth_headers(test_config, "user-token-1")

        assert headers == {
            PARTNER_TOKEN_HEADER: TEST_PARTNER_KEY,
            USER_TOKEN_HEADER: "user-token-1",
        }

    def test_api_key_scheme(self, api_key_config):
        headers = auth_headers(api_key_config, "api-key-1")

        assert api_key_config.auth_method == AuthMethod.API_KEY
        assert headers == {
            PARTNER_TOKEN_HEADER: TEST_PARTNER_KEY,
            API_KEY_HEADER: "api-key-1",
        }
