"""Crypto capability interface and the default secp256k1 backend.

Packet code never touches curve or encoding primitives directly; it goes
through a CryptoBackend so tests can swap in a deterministic fake.
"""

from __future__ import annotations

import hashlib
from typing import Any, Protocol, runtime_checkable

import base58
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from identifi.models.constants import ADDRESS_VERSION, KEY_ID_HASH_LENGTH


@runtime_checkable
class CryptoBackend(Protocol):
    """Hashing, signing and text-encoding services used by the packet layer."""

    def hash(self, data: bytes) -> bytes:
        """Return a 32-byte digest of ``data``."""
        ...

    def sign(self, private_key: Any, digest: bytes) -> bytes:
        """Sign a digest. Raises ValueError if the key is unusable."""
        ...

    def public_key_of(self, private_key: Any) -> bytes:
        """Raw public key bytes for a private key."""
        ...

    def verify(self, public_key: bytes, digest: bytes, signature: bytes) -> bool:
        """True if ``signature`` over ``digest`` is valid for ``public_key``. Never raises."""
        ...

    def encode_text(self, raw: bytes) -> str: ...

    def decode_text(self, text: str) -> bytes:
        """Inverse of encode_text. Raises ValueError on invalid input."""
        ...

    def derive_identity(self, public_key: bytes) -> str:
        """Short signer identity for a public key. Raises ValueError if the key is invalid."""
        ...


class Secp256k1Backend:
    """ECDSA over secp256k1 with double SHA-256 digests and base58 text encoding.

    Public keys travel as compressed SEC1 points (33 bytes) and signatures
    as DER. Key IDs are base58check over a version byte plus the first
    KEY_ID_HASH_LENGTH bytes of SHA-256(public key).
    """

    curve = ec.SECP256K1()

    def _algorithm(self) -> ec.ECDSA:
        return ec.ECDSA(Prehashed(hashes.SHA256()))

    def hash(self, data: bytes) -> bytes:
        return hashlib.sha256(hashlib.sha256(data).digest()).digest()

    def _check_private_key(self, private_key: Any) -> ec.EllipticCurvePrivateKey:
        if not isinstance(private_key, ec.EllipticCurvePrivateKey):
            raise ValueError("Key is not an elliptic curve private key")
        if private_key.curve.name != self.curve.name:
            raise ValueError(f"Key curve must be {self.curve.name}, got {private_key.curve.name}")
        return private_key

    def sign(self, private_key: Any, digest: bytes) -> bytes:
        key = self._check_private_key(private_key)
        return key.sign(digest, self._algorithm())

    def public_key_of(self, private_key: Any) -> bytes:
        key = self._check_private_key(private_key)
        return key.public_key().public_bytes(Encoding.X962, PublicFormat.CompressedPoint)

    def load_public_key(self, public_key: bytes) -> ec.EllipticCurvePublicKey:
        """Decode a SEC1 point. Raises ValueError if it is not on the curve."""
        if not public_key:
            raise ValueError("Public key is empty")
        return ec.EllipticCurvePublicKey.from_encoded_point(self.curve, public_key)

    def verify(self, public_key: bytes, digest: bytes, signature: bytes) -> bool:
        try:
            key = self.load_public_key(public_key)
            key.verify(signature, digest, self._algorithm())
        except (InvalidSignature, ValueError):
            return False
        return True

    def encode_text(self, raw: bytes) -> str:
        return base58.b58encode(raw).decode("ascii")

    def decode_text(self, text: str) -> bytes:
        return base58.b58decode(text)

    def derive_identity(self, public_key: bytes) -> str:
        self.load_public_key(public_key)
        key_hash = hashlib.sha256(public_key).digest()[:KEY_ID_HASH_LENGTH]
        return base58.b58encode_check(bytes([ADDRESS_VERSION]) + key_hash).decode("ascii")


_default_backend: CryptoBackend = Secp256k1Backend()


def get_default_backend() -> CryptoBackend:
    return _default_backend


def set_default_backend(backend: CryptoBackend) -> CryptoBackend:
    """Replace the process-wide backend; returns the previous one so callers can restore it."""
    global _default_backend
    previous = _default_backend
    _default_backend = backend
    return previous


def resolve_backend(backend: CryptoBackend | None) -> CryptoBackend:
    return backend if backend is not None else _default_backend
