"""Deterministic fake crypto backend for Identifi tests.

FakeCryptoBackend satisfies the CryptoBackend protocol without any curve
math, so packet signing tests can assert exact values. It offers no
security whatsoever: anyone who knows a public key can forge a signature.

Keys:
    - Private keys are ``bytes`` secrets.
    - Public keys are ``b"pub:" + secret``.
    - Signatures are SHA-256(public key + digest).
    - Text encoding is lowercase hex.
"""

from __future__ import annotations

import hashlib
from typing import Any

FAKE_PUBLIC_PREFIX = b"pub:"


class FakeCryptoBackend:
    """CryptoBackend stand-in with predictable output and call counting.

    Attributes:
        identity_calls: Number of derive_identity() calls (for caching assertions).
    """

    def __init__(self) -> None:
        self.identity_calls = 0

    def hash(self, data: bytes) -> bytes:
        return hashlib.sha256(data).digest()

    def public_key_of(self, private_key: Any) -> bytes:
        if not isinstance(private_key, bytes) or not private_key:
            raise ValueError("Fake private keys are non-empty bytes")
        return FAKE_PUBLIC_PREFIX + private_key

    def sign(self, private_key: Any, digest: bytes) -> bytes:
        return hashlib.sha256(self.public_key_of(private_key) + digest).digest()

    def verify(self, public_key: bytes, digest: bytes, signature: bytes) -> bool:
        if not public_key.startswith(FAKE_PUBLIC_PREFIX):
            return False
        return hashlib.sha256(public_key + digest).digest() == signature

    def encode_text(self, raw: bytes) -> str:
        return raw.hex()

    def decode_text(self, text: str) -> bytes:
        return bytes.fromhex(text)

    def derive_identity(self, public_key: bytes) -> str:
        self.identity_calls += 1
        if not public_key.startswith(FAKE_PUBLIC_PREFIX):
            raise ValueError("Not a fake public key")
        return "id" + hashlib.sha256(public_key).hexdigest()[:16]
