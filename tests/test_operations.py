"""Tests for operation result parsing and the response mapping."""

import pytest

from celsius.errors import (
    RateLimitError,
    RemoteError,
    ServerError,
    UnexpectedResponseError,
)
from celsius.models import KycStatus, Pagination, TransactionPage
from celsius.operations import (
    parse_address,
    parse_kyc_status,
    parse_transaction_id,
    parse_transaction_page,
)
from celsius.response import decode_body, remote_error


class TestParsers:
    """Tests for extracting domain values from verified bodies."""

    @pytest.mark.parametrize("raw", ["PENDING", "Completed", "passed", "REJECTED"])
    def test_kyc_status_values(self, raw):
        assert parse_kyc_status({"status": raw}) == KycStatus(raw.upper())

    def test_kyc_status_plain_string(self):
        assert parse_kyc_status("Passed") == KycStatus.PASSED

    @pytest.mark.parametrize("body", [{}, {"status": "ON_HOLD"}, None, {"status": 3}])
    def test_kyc_status_unexpected(self, body):
        with pytest.raises(UnexpectedResponseError):
            parse_kyc_status(body)

    def test_transaction_page(self):
        page = parse_transaction_page({
            "pagination": {"total": 2, "pages": 1, "current": 1, "showing": "1 - 2"},
            "record": [{"id": "a"}, {"id": "b"}],
        })

        assert isinstance(page, TransactionPage)
        assert len(page) == 2
        assert page.pagination["total"] == 2

    def test_transaction_page_from_list(self):
        page = parse_transaction_page([{"id": "a"}])

        assert page.pagination == {}
        assert page.record == [{"id": "a"}]

    def test_transaction_page_unexpected(self):
        with pytest.raises(UnexpectedResponseError):
            parse_transaction_page({"record": "nope"})

    def test_address_and_transaction_id(self):
        assert parse_address({"address": "addr"}) == "addr"
        assert parse_transaction_id({"transaction_id": "tx"}) == "tx"

        with pytest.raises(UnexpectedResponseError):
            parse_transaction_id({"id": "tx"})

    def test_pagination_params(self):
        assert Pagination().to_params() == {"page": 1, "perPage": 20}
        assert Pagination(page=4, per_page=100).to_params() == {"page": 4, "perPage": 100}


class TestResponseMapping:
    """Tests for body decoding and status mapping."""

    def test_decode_body(self):
        assert decode_body(b"") is None
        assert decode_body(b'{"a": 1}') == {"a": 1}
        assert decode_body(b"Bad Gateway") == "Bad Gateway"

    def test_generic_client_error(self):
        error = remote_error(422, {"detail": "amount must be positive"}, {})

        assert type(error) is RemoteError
        assert error.status_code == 422
        assert error.detail == "amount must be positive"
        assert "422" in str(error)

    def test_server_error_text_body(self):
        error = remote_error(502, "Bad Gateway", {})

        assert isinstance(error, ServerError)
        assert error.detail == "Bad Gateway"

    def test_rate_limit_without_retry_after(self):
        error = remote_error(429, None, {})

        assert isinstance(error, RateLimitError)
        assert error.retry_after is None
        assert error.status_code == 429
