"""Response signature verification.

Every response body is checked against the pinned trust anchor before any
value derived from it is handed to the caller. The signature travels base64
encoded in the ``X-Cel-Signature`` header and covers the exact body bytes
received on the wire.

Algorithm is selected by the anchor's key type:
- RSA: PKCS#1 v1.5 with SHA-256
- ECDSA P-256 / P-384: DER signature with SHA-256 / SHA-384
- Ed25519: pure Ed25519
"""

import base64
import binascii
from dataclasses import dataclass, field
from typing import Mapping, Union

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, padding, rsa

from celsius.errors import InvalidPublicKey, SignatureVerificationFailed
from celsius.logging import get_logger

logger = get_logger(__name__)

SIGNATURE_HEADER = "X-Cel-Signature"

TrustAnchor = Union[rsa.RSAPublicKey, ec.EllipticCurvePublicKey, ed25519.Ed25519PublicKey]

_EC_HASHES = {
    "secp256r1": hashes.SHA256,
    "secp384r1": hashes.SHA384,
}


@dataclass(frozen=True)
class SignedResponse:
    """A response exactly as received, before verification."""
    status_code: int
    body: bytes
    signature: str | None
    headers: Mapping[str, str] = field(default_factory=dict)


def load_public_key(pem: str | bytes | None) -> TrustAnchor:
    """Load a PEM trust anchor.

    Raises:
        InvalidPublicKey: If the PEM is missing, malformed, or not an RSA,
            P-256/P-384 or Ed25519 public key
    """
    if not pem:
        raise InvalidPublicKey("Trust anchor public key is missing")
    data = pem.encode() if isinstance(pem, str) else pem

    try:
        public_key = serialization.load_pem_public_key(data)
    except (ValueError, UnsupportedAlgorithm) as e:
        raise InvalidPublicKey(f"Trust anchor is not a valid PEM public key: {e}") from e

    if isinstance(public_key, (rsa.RSAPublicKey, ed25519.Ed25519PublicKey)):
        return public_key
    if isinstance(public_key, ec.EllipticCurvePublicKey):
        if public_key.curve.name not in _EC_HASHES:
            raise InvalidPublicKey(f"Unsupported curve: {public_key.curve.name}")
        return public_key
    raise InvalidPublicKey(f"Unsupported key type: {type(public_key).__name__}")


def _decode_signature(signature: str) -> bytes:
    try:
        return base64.b64decode(signature, validate=True)
    except (binascii.Error, ValueError) as e:
        raise SignatureVerificationFailed("Response signature is not valid base64") from e


def verify(envelope: SignedResponse, public_key: TrustAnchor) -> bytes:
    """Verify a response envelope and return its body.

    Args:
        envelope: The response as received
        public_key: Trust anchor loaded with ``load_public_key``

    Returns:
        The body bytes, now trusted

    Raises:
        SignatureVerificationFailed: If the signature is missing, malformed,
            or does not match the body
    """
    if not envelope.signature:
        logger.warning(
            "Response carried no signature",
            status_code=envelope.status_code,
        )
        raise SignatureVerificationFailed(
            "Response is not signed", status_code=envelope.status_code
        )

    signature = _decode_signature(envelope.signature)

    try:
        if isinstance(public_key, rsa.RSAPublicKey):
            public_key.verify(signature, envelope.body, padding.PKCS1v15(), hashes.SHA256())
        elif isinstance(public_key, ec.EllipticCurvePublicKey):
            hash_alg = _EC_HASHES[public_key.curve.name]()
            public_key.verify(signature, envelope.body, ec.ECDSA(hash_alg))
        else:
            public_key.verify(signature, envelope.body)
    except InvalidSignature:
        logger.warning(
            "Response signature verification failed",
            status_code=envelope.status_code,
            body_length=len(envelope.body),
        )
        raise SignatureVerificationFailed(
            "Response signature does not match the trusted server key",
            status_code=envelope.status_code,
        ) from None

    logger.debug("Response signature verified", status_code=envelope.status_code)
    return envelope.body
