"""Request descriptors, payload variants and authentication headers."""

import mimetypes
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Union
from urllib.parse import quote

from celsius.config import AuthMethod, Configuration
from celsius.errors import DocumentError

PARTNER_TOKEN_HEADER = "X-Cel-Partner-Token"
API_KEY_HEADER = "X-Cel-Api-Key"
USER_TOKEN_HEADER = "X-Cel-User-Token"

USER_SECRET_HEADERS = {
    AuthMethod.API_KEY: API_KEY_HEADER,
    AuthMethod.USER_TOKEN: USER_TOKEN_HEADER,
}


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


class Paths:
    """Path templates for every API operation."""

    KYC = "/kyc"
    BALANCE_SUMMARY = "/balance"
    TRANSACTIONS_SUMMARY = "/transactions"

    @staticmethod
    def coin_balance(coin: str) -> str:
        return f"/balance/{_segment(coin)}"

    @staticmethod
    def coin_transactions(coin: str) -> str:
        return f"/transactions/{_segment(coin)}"

    @staticmethod
    def deposit(coin: str) -> str:
        return f"/deposit/{_segment(coin)}"

    @staticmethod
    def withdraw(coin: str) -> str:
        return f"/withdraw/{_segment(coin)}"

    @staticmethod
    def transaction_status(transaction_id: str) -> str:
        return f"/transactions/status/{_segment(transaction_id)}"


@dataclass(frozen=True)
class NoPayload:
    """Request without query string or body."""


@dataclass(frozen=True)
class QueryPayload:
    """Parameters serialized into the query string of a GET."""
    params: Mapping[str, Any]


@dataclass(frozen=True)
class JsonPayload:
    """JSON request body."""
    value: Any


@dataclass(frozen=True)
class MultipartPayload:
    """multipart/form-data body: text fields plus file parts."""
    fields: Mapping[str, Any]
    files: Mapping[str, Any] = field(default_factory=dict)

    @property
    def reads_files(self) -> bool:
        """True when encoding opens files from disk."""
        return any(isinstance(value, os.PathLike) for value in self.files.values())


Payload = Union[NoPayload, QueryPayload, JsonPayload, MultipartPayload]


@dataclass(frozen=True)
class RequestDescriptor:
    """One API call, before credentials are attached."""
    method: str
    path: str
    payload: Payload = NoPayload()

    @classmethod
    def get(cls, path: str, params: Mapping[str, Any] | None = None) -> "RequestDescriptor":
        payload = QueryPayload(dict(params)) if params else NoPayload()
        return cls("GET", path, payload)

    @classmethod
    def post_json(cls, path: str, body: Any = None) -> "RequestDescriptor":
        payload = JsonPayload(body) if body is not None else NoPayload()
        return cls("POST", path, payload)

    @classmethod
    def post_multipart(
        cls,
        path: str,
        fields: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> "RequestDescriptor":
        return cls("POST", path, MultipartPayload(dict(fields or {}), dict(files or {})))


def auth_headers(config: Configuration, user_secret: str) -> dict[str, str]:
    """Partner credential plus the per-call user credential."""
    return {
        PARTNER_TOKEN_HEADER: config.partner_key.get_secret_value(),
        USER_SECRET_HEADERS[config.auth_method]: user_secret,
    }


def encode_payload(payload: Payload) -> dict[str, Any]:
    """Keyword arguments for the HTTP library's request call.

    ``requests`` and ``httpx`` share the ``params`` / ``json`` / ``data`` /
    ``files`` names, so one encoding serves both dispatchers.
    """
    if isinstance(payload, NoPayload):
        return {}
    if isinstance(payload, QueryPayload):
        return {"params": _form_fields(payload.params)}
    if isinstance(payload, JsonPayload):
        return {"json": payload.value}
    if isinstance(payload, MultipartPayload):
        kwargs: dict[str, Any] = {"data": _form_fields(payload.fields)}
        # An empty files mapping would make the libraries fall back to urlencoding
        if payload.files:
            kwargs["files"] = {
                name: _file_part(name, value) for name, value in payload.files.items()
            }
        return kwargs
    raise TypeError(f"Unknown payload type: {type(payload).__name__}")


def _form_fields(values: Mapping[str, Any]) -> dict[str, str]:
    return {k: _form_value(v) for k, v in values.items() if v is not None}


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _file_part(name: str, value: Any) -> Any:
    """File part for bytes, text, file objects, tuples or paths.

    Only ``os.PathLike`` values are read from disk; a ``str`` is content,
    such as a base64-encoded image, and is sent under the field name.
    """
    if isinstance(value, os.PathLike):
        path = Path(value)
        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        try:
            return (path.name, path.read_bytes(), content_type)
        except OSError as e:
            raise DocumentError(f"Cannot read document {name!r} from {path}: {e.strerror}") from e
    if isinstance(value, str):
        return (name, value.encode("utf-8"), "text/plain")
    return value
