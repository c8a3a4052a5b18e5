"""The partner API operations.

Each operation maps to one request descriptor and one parser. The mixin is
shared by the blocking and async clients: ``_call`` returns the parsed value
directly on ``Celsius`` and a coroutine on ``AsyncCelsius``.
"""

from decimal import Decimal
from typing import Any, Callable, Mapping

from celsius.errors import UnexpectedResponseError
from celsius.models import KycStatus, Pagination, TransactionPage
from celsius.request import Paths, RequestDescriptor


def parse_kyc_status(body: Any) -> KycStatus:
    status = body.get("status") if isinstance(body, dict) else body
    if not isinstance(status, str):
        raise UnexpectedResponseError("KYC response has no status")
    try:
        return KycStatus(status.upper())
    except ValueError:
        raise UnexpectedResponseError(f"Unknown KYC status: {status!r}") from None


def parse_transaction_page(body: Any) -> TransactionPage:
    if isinstance(body, list):
        return TransactionPage(record=body)
    if not isinstance(body, dict) or not isinstance(body.get("record", []), list):
        raise UnexpectedResponseError("Transaction response has no record list")
    return TransactionPage(
        pagination=body.get("pagination") or {},
        record=body.get("record") or [],
    )


def _field(name: str) -> Callable[[Any], str]:
    def parse(body: Any) -> str:
        value = body.get(name) if isinstance(body, dict) else None
        if not isinstance(value, str) or not value:
            raise UnexpectedResponseError(f"Response has no {name}")
        return value
    return parse


parse_address = _field("address")
parse_transaction_id = _field("transaction_id")


def _unchanged(body: Any) -> Any:
    return body


def _pagination_params(pagination: Pagination | Mapping[str, Any] | None) -> dict[str, Any] | None:
    if pagination is None:
        return None
    if isinstance(pagination, Pagination):
        return pagination.to_params()
    return dict(pagination)


def _json_safe(value: Any) -> Any:
    # Decimal amounts travel as strings to keep their precision
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Mapping):
        return {k: _json_safe(v) for k, v in value.items()}
    return value


class Operations:
    """Partner API surface. Subclasses provide ``_call``."""

    def _call(self, descriptor: RequestDescriptor, user_secret: str, parse: Callable[[Any], Any]):
        raise NotImplementedError

    def get_kyc_status(self, user_secret: str):
        """Get the KYC status of a user.

        Users authenticated with api keys always report PASSED, since they
        must pass KYC before creating a key.

        Args:
            user_secret: User token or api key identifying the user

        Returns:
            KycStatus
        """
        return self._call(RequestDescriptor.get(Paths.KYC), user_secret, parse_kyc_status)

    def verify_kyc(
        self,
        user_data: Mapping[str, Any],
        documents: Mapping[str, Any],
        user_secret: str,
    ):
        """Submit a user's personal data and document images for KYC.

        Sent as one multipart/form-data POST: ``user_data`` entries become
        form fields and ``documents`` entries become file parts.

        Args:
            user_data: first_name, last_name, date_of_birth, citizenship,
                document_type and the other personal fields
            documents: document_front_image / document_back_image as bytes,
                str content (for example base64), file objects,
                (filename, content[, content_type]) tuples or ``pathlib.Path``
                objects. Paths are read when the request is sent.
            user_secret: User token or api key identifying the user

        Returns:
            Decoded server acknowledgement

        Raises:
            DocumentError: If a document path cannot be read
        """
        descriptor = RequestDescriptor.post_multipart(Paths.KYC, user_data, documents)
        return self._call(descriptor, user_secret, _unchanged)

    def get_balance_summary(self, user_secret: str):
        """Get balances for all supported coins."""
        return self._call(RequestDescriptor.get(Paths.BALANCE_SUMMARY), user_secret, _unchanged)

    def get_coin_balance(self, coin: str, user_secret: str):
        """Get the balance of a single coin, in the coin and in USD."""
        return self._call(RequestDescriptor.get(Paths.coin_balance(coin)), user_secret, _unchanged)

    def get_transaction_summary(
        self,
        pagination: Pagination | Mapping[str, Any] | None,
        user_secret: str,
    ):
        """Get one page of the user's transactions across all coins.

        Returns:
            TransactionPage with the pagination header and the records
        """
        descriptor = RequestDescriptor.get(
            Paths.TRANSACTIONS_SUMMARY, _pagination_params(pagination)
        )
        return self._call(descriptor, user_secret, parse_transaction_page)

    def get_coin_transactions(
        self,
        coin: str,
        pagination: Pagination | Mapping[str, Any] | None,
        user_secret: str,
    ):
        """Get one page of the user's transactions for a coin.

        Returns:
            TransactionPage with the pagination header and the records
        """
        descriptor = RequestDescriptor.get(
            Paths.coin_transactions(coin), _pagination_params(pagination)
        )
        return self._call(descriptor, user_secret, parse_transaction_page)

    def get_deposit(self, coin: str, user_secret: str):
        """Get the deposit address of the user's wallet for a coin.

        Returns:
            Deposit address
        """
        return self._call(RequestDescriptor.get(Paths.deposit(coin)), user_secret, parse_address)

    def withdraw(self, coin: str, form_fields: Mapping[str, Any], user_secret: str):
        """Withdraw an amount of a coin to an address.

        Args:
            coin: Coin to withdraw
            form_fields: ``address`` to send to and ``amount`` to send
            user_secret: User token or api key identifying the user

        Returns:
            Transaction id
        """
        descriptor = RequestDescriptor.post_json(Paths.withdraw(coin), _json_safe(form_fields))
        return self._call(descriptor, user_secret, parse_transaction_id)

    def get_transaction_status(self, transaction_id: str, user_secret: str):
        """Get the status of a single transaction."""
        return self._call(
            RequestDescriptor.get(Paths.transaction_status(transaction_id)),
            user_secret,
            _unchanged,
        )
