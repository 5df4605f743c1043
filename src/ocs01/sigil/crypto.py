"""
Transaction signing primitives.

Provides:
- Canonical byte encoding of a contract-call transaction
- Ed25519 signing and verification of that encoding
- Base64 transport encodings for signatures and public keys
- Loading the wallet's base64 Ed25519 seed
"""

from __future__ import annotations

import binascii
import json
import math
from decimal import Decimal

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from ..pneuma.transaction import Transaction
from ..utils import b64decode, b64encode

SEED_LENGTH = 32


class CryptoError(ValueError):
    pass


class SignatureError(CryptoError):
    pass


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _format_number(value: float) -> str:
    if not math.isfinite(value):
        raise CryptoError(f"Cannot encode non-finite number: {value!r}")
    if float(value).is_integer():
        return str(int(value))
    text = repr(float(value))
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def canonicalize(tx: Transaction) -> bytes:
    """Encode a transaction in the exact byte form the node verifies.

    Field order is fixed, strings are quoted, numbers are bare and there is
    no whitespace. Changing any of that breaks signature verification on
    the node.
    """
    blob = (
        "{"
        f'"from":{_quote(tx.from_)},'
        f'"to_":{_quote(tx.to_)},'
        f'"amount":{_quote(tx.amount)},'
        f'"nonce":{int(tx.nonce)},'
        f'"ou":{_quote(tx.ou)},'
        f'"timestamp":{_format_number(tx.timestamp)}'
        "}"
    )
    return blob.encode("utf-8")


def sign(private_key: ed25519.Ed25519PrivateKey, tx: Transaction) -> bytes:
    """
    Sign a transaction's canonical bytes.

    Args:
        private_key: Ed25519PrivateKey object
        tx: Transaction to sign

    Returns:
        Signature bytes (64 bytes)
    """
    return private_key.sign(canonicalize(tx))


def verify(public_key: bytes, signature: bytes, tx: Transaction) -> None:
    """Verify a transaction signature.

    Raises:
        SignatureError: If the key is malformed or the signature does not match.
    """
    try:
        key = ed25519.Ed25519PublicKey.from_public_bytes(public_key)
    except ValueError as exc:
        raise SignatureError("Invalid Ed25519 public key.") from exc
    try:
        key.verify(signature, canonicalize(tx))
    except InvalidSignature as exc:
        raise SignatureError("Invalid transaction signature.") from exc


def encode_signature(signature: bytes) -> str:
    return b64encode(signature)


def get_public_key(private_key: ed25519.Ed25519PrivateKey) -> bytes:
    """Extract raw public key bytes (32 bytes) from a private key."""
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )


def encode_public_key(key: ed25519.Ed25519PrivateKey | bytes) -> str:
    """Base64-encode a public key, accepting raw bytes or the private key."""
    if isinstance(key, ed25519.Ed25519PrivateKey):
        key = get_public_key(key)
    return b64encode(key)


def load_signing_key(seed_b64: str) -> ed25519.Ed25519PrivateKey:
    """
    Load an Ed25519 signing key from a base64-encoded 32-byte seed.

    Args:
        seed_b64: Standard base64 of the raw private seed

    Returns:
        Ed25519PrivateKey object

    Raises:
        CryptoError: If the value is not base64 or not exactly 32 bytes
    """
    try:
        seed = b64decode(seed_b64.strip())
    except (binascii.Error, ValueError) as exc:
        raise CryptoError("Private key is not valid base64.") from exc
    if len(seed) != SEED_LENGTH:
        raise CryptoError(
            f"Private key must decode to {SEED_LENGTH} bytes, got {len(seed)}."
        )
    return ed25519.Ed25519PrivateKey.from_private_bytes(seed)


def generate_seed() -> str:
    """Generate a new base64 Ed25519 seed."""
    private_key = ed25519.Ed25519PrivateKey.generate()
    seed = private_key.private_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PrivateFormat.Raw,
        encryption_algorithm=serialization.NoEncryption(),
    )
    return b64encode(seed)
