"""secp256k1 key generation, serialization, and loading for packet signers."""

from __future__ import annotations

import os
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import load_pem_private_key

from identifi.crypto.backend import CryptoBackend, resolve_backend
from identifi.crypto.models import KeyBundle
from identifi.models.constants import (
    DEFAULT_PRIVATE_KEY_ENV,
    KEY_FILE_RECOMMENDED_MODE,
)
from identifi.observability import get_logger

logger = get_logger(__name__)


def generate_keypair() -> tuple[ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey]:
    private_key = ec.generate_private_key(ec.SECP256K1())
    public_key = private_key.public_key()
    return (private_key, public_key)


def serialize_private_key(key: ec.EllipticCurvePrivateKey) -> bytes:
    """PEM (PKCS#8, unencrypted)."""
    pem: bytes = key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    return pem


def public_key_to_text(
    key: ec.EllipticCurvePrivateKey, backend: CryptoBackend | None = None
) -> str:
    """Encoded public key for ``key`` as it appears in a packet's signature block."""
    backend = resolve_backend(backend)
    return backend.encode_text(backend.public_key_of(key))


def load_private_key_from_pem(pem: bytes) -> ec.EllipticCurvePrivateKey:
    """From PEM. Raises ValueError if invalid or not a secp256k1 key."""
    key = load_pem_private_key(pem, password=None)
    if not isinstance(key, ec.EllipticCurvePrivateKey):
        raise ValueError("Key is not an elliptic curve private key")
    if not isinstance(key.curve, ec.SECP256K1):
        raise ValueError(f"Key curve must be secp256k1, got {key.curve.name}")
    return key


def _warn_if_permissions_loose(path: Path) -> None:
    """Warn when key file is group/other readable (recommend chmod 0600)."""
    try:
        mode = path.stat().st_mode
    except OSError:
        return
    if (mode & 0o77) != 0:
        logger.warning(
            "key.file_permissions_loose",
            path=str(path),
            mode=oct(mode),
            recommended=oct(KEY_FILE_RECOMMENDED_MODE),
        )


def load_private_key_from_file(path: str | Path) -> ec.EllipticCurvePrivateKey:
    """Load a secp256k1 private key from a PEM file.

    Logs a security warning if the file is readable by group or others.
    """
    path = Path(path)
    _warn_if_permissions_loose(path)
    return load_private_key_from_pem(path.read_bytes())


def load_private_key_from_env(var_name: str = DEFAULT_PRIVATE_KEY_ENV) -> ec.EllipticCurvePrivateKey:
    """From env var (PEM string). Raises ValueError if unset or invalid."""
    value = os.environ.get(var_name)
    if not value:
        raise ValueError(f"Environment variable {var_name!r} is not set or empty")
    return load_private_key_from_pem(value.encode("utf-8"))


def key_bundle(
    key: ec.EllipticCurvePrivateKey, backend: CryptoBackend | None = None
) -> KeyBundle:
    """Encoded public key, derived key ID and PEM private key for one signer."""
    backend = resolve_backend(backend)
    raw_public = backend.public_key_of(key)
    return KeyBundle(
        pub_key=backend.encode_text(raw_public),
        key_id=backend.derive_identity(raw_public),
        priv_key=serialize_private_key(key).decode("ascii"),
    )
