"""Detached packet signatures over the canonical ``signedData`` text.

Only the signed data is hashed and signed. The signature block, the
publication flag and the priority never enter the digest, so attaching a
signature does not change a packet's hash.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from identifi.crypto.backend import CryptoBackend, resolve_backend
from identifi.crypto.identity import derive_signer_identity
from identifi.crypto.models import Signature
from identifi.observability import get_logger

if TYPE_CHECKING:
    from identifi.packet import Packet

logger = get_logger(__name__)

__all__ = [
    "add_signature",
    "derive_signer_identity",
    "hash_of",
    "sign_packet",
    "verify",
]


def hash_of(signed_data: str, backend: CryptoBackend | None = None) -> bytes:
    return resolve_backend(backend).hash(signed_data.encode("utf-8"))


def sign_packet(
    packet: Packet,
    private_key: Any,
    backend: CryptoBackend | None = None,
) -> Signature:
    """Sign the packet's current signed data and attach the result.

    Any previous signature is replaced and the packet's canonical text is
    re-rendered with the new signature block. Raises ValueError if the
    backend rejects the key.
    """
    backend = resolve_backend(backend)
    digest = hash_of(packet.get_signed_data(), backend)
    raw_signature = backend.sign(private_key, digest)
    signature = Signature(
        pub_key=backend.encode_text(backend.public_key_of(private_key)),
        signature=backend.encode_text(raw_signature),
    )
    packet._replace_signature(signature)
    logger.debug("packet.signed", packet_hash=packet.hash_text, pub_key=signature.pub_key)
    return signature


def verify(signature: Signature, signed_data: str, backend: CryptoBackend | None = None) -> bool:
    """True if ``signature`` covers ``signed_data``. Undecodable key or signature text gives False."""
    backend = resolve_backend(backend)
    try:
        raw_public = backend.decode_text(signature.pub_key)
        raw_signature = backend.decode_text(signature.signature)
    except ValueError:
        return False
    return backend.verify(raw_public, hash_of(signed_data, backend), raw_signature)


def add_signature(
    packet: Packet,
    signature: Signature,
    backend: CryptoBackend | None = None,
) -> bool:
    """Attach ``signature`` only if it verifies against the packet; returns whether it did."""
    if not verify(signature, packet.get_signed_data(), backend):
        logger.info(
            "packet.signature_rejected",
            packet_hash=packet.hash_text,
            pub_key=signature.pub_key,
        )
        return False
    packet._replace_signature(signature)
    return True
