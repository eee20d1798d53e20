"""Signer identity derivation; separate module to avoid circular imports."""

from __future__ import annotations

from identifi.crypto.backend import CryptoBackend, resolve_backend
from identifi.observability import get_logger

logger = get_logger(__name__)


def derive_signer_identity(pub_key_text: str, backend: CryptoBackend | None = None) -> str:
    """Key ID for an encoded public key, or "" if the key material is invalid."""
    backend = resolve_backend(backend)
    try:
        raw = backend.decode_text(pub_key_text)
        return backend.derive_identity(raw)
    except ValueError as e:
        logger.debug("signature.identity_underivable", reason=str(e))
        return ""
