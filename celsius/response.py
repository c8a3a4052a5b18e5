"""Turning a verified response into a value or a typed failure."""

import json
from typing import Any, Mapping

from celsius.errors import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    RateLimitError,
    RemoteError,
    ServerError,
    error_detail,
)
from celsius.verifier import SignedResponse, TrustAnchor, verify


def decode_body(body: bytes) -> Any:
    """Decode a JSON body, falling back to text for non-JSON payloads."""
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        return body.decode("utf-8", errors="replace")


def read_verified(envelope: SignedResponse, public_key: TrustAnchor) -> Any:
    """Verify the envelope, then decode it or raise the matching RemoteError.

    Error responses are verified too, so ``RemoteError.body`` is never
    unauthenticated data.

    Raises:
        SignatureVerificationFailed: If the body is not authentic
        RemoteError: If the server answered with a non-success status
    """
    body = decode_body(verify(envelope, public_key))

    if 200 <= envelope.status_code < 300:
        return body

    raise remote_error(envelope.status_code, body, envelope.headers)


def remote_error(status: int, body: Any, headers: Mapping[str, str]) -> RemoteError:
    """Map a non-success status to the most specific RemoteError."""
    detail = error_detail(body) or "Unknown error"

    if status == 401:
        return AuthenticationError(f"Invalid partner or user credential: {detail}", status, body)
    elif status == 403:
        return AuthorizationError(f"Not authorized: {detail}", status, body)
    elif status == 404:
        return NotFoundError(f"Not found: {detail}", status, body)
    elif status == 429:
        retry_after = headers.get("Retry-After")
        return RateLimitError(
            f"Rate limit exceeded: {detail}",
            body=body,
            retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
        )
    elif status >= 500:
        return ServerError(f"Server error ({status}): {detail}", status, body)
    else:
        return RemoteError(f"Request failed ({status}): {detail}", status, body)
