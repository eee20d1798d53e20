"""Packet: a canonical, optionally signed statement from authors about recipients.

A packet is built from its canonical document text, either fresh
(``Packet(text)`` / ``Packet.create(...)``) or from the wire
(``Packet.from_wire(blob)``, which also marks it published). The signed
payload never changes after construction; only the signature and the
local-only ``published`` and ``priority`` fields do.

Example:
    >>> from identifi import Packet
    >>> from identifi.crypto.keys import generate_keypair
    >>>
    >>> packet = Packet.create([("name", "alice")], [("name", "bob")], "review",
    ...                        rating=8, min_rating=0, max_rating=10)
    >>> private_key, _ = generate_keypair()
    >>> signature = packet.sign(private_key)
    >>> Packet.from_wire(packet.to_wire()) == packet
    True
"""

from __future__ import annotations

import time
from collections.abc import Iterable
from typing import Any

from identifi import canonical
from identifi.crypto import signing
from identifi.crypto.backend import CryptoBackend, resolve_backend
from identifi.crypto.models import Signature
from identifi.errors import MalformedDocumentError, PacketValidationError
from identifi.models.constants import (
    AUTHOR_KEY,
    COMMENT_KEY,
    MAX_RATING_KEY,
    MIN_RATING_KEY,
    RATING_KEY,
    RECIPIENT_KEY,
    SIGNATURE_KEY,
    SIGNED_DATA_KEY,
    TIMESTAMP_KEY,
    TYPE_KEY,
)
from identifi.models.export import PacketExport, SignatureDetails
from identifi.models.payload import SignedPayload
from identifi.models.types import CanonicalText, IdentifierPair
from identifi.observability import get_logger, is_debug_mode
from identifi.validator import validate_document

logger = get_logger(__name__)


def _log_rejection(error: PacketValidationError, document: str | bytes) -> None:
    log_fields: dict[str, Any] = {"code": error.code, "reason": error.message}
    if is_debug_mode():
        log_fields["document"] = document
    logger.info("packet.rejected", **log_fields)


class Packet:
    """A validated packet document plus its detached signature and local metadata.

    Not internally synchronized: callers sharing one Packet between threads
    must serialize ``sign``/``add_signature`` themselves.
    """

    def __init__(
        self,
        text: str,
        *,
        skip_verify: bool = False,
        backend: CryptoBackend | None = None,
    ) -> None:
        """Parse and validate ``text``.

        Args:
            text: Canonical packet document
            skip_verify: Accept an embedded signature without verifying it
            backend: Crypto backend; process default if None

        Raises:
            PacketValidationError: any subclass; see ``validate_document``
        """
        self._backend = resolve_backend(backend)
        try:
            document = canonical.parse_canonical(text)
            validated = validate_document(
                document, skip_verify=skip_verify, backend=self._backend
            )
        except PacketValidationError as e:
            _log_rejection(e, text)
            raise

        self._data: CanonicalText = text
        self._signed_data = validated.signed_data
        self._payload = validated.payload
        self._signature = validated.signature
        self._published = False
        self._priority = 0

    @classmethod
    def from_wire(
        cls,
        blob: bytes | str,
        *,
        skip_verify: bool = False,
        backend: CryptoBackend | None = None,
    ) -> Packet:
        """Deserialize a packet received from elsewhere; the result is marked published."""
        if isinstance(blob, bytes):
            try:
                text = blob.decode("utf-8")
            except UnicodeDecodeError as e:
                error = MalformedDocumentError("document is not valid UTF-8")
                _log_rejection(error, blob)
                raise error from e
        else:
            text = blob
        packet = cls(text, skip_verify=skip_verify, backend=backend)
        packet.set_published()
        return packet

    @classmethod
    def create(
        cls,
        authors: Iterable[IdentifierPair],
        recipients: Iterable[IdentifierPair],
        claim_type: str,
        *,
        timestamp: int | None = None,
        rating: int | None = None,
        min_rating: int | None = None,
        max_rating: int | None = None,
        comment: str | None = None,
        backend: CryptoBackend | None = None,
    ) -> Packet:
        """Build an unsigned packet from field values.

        The timestamp defaults to the current time. Rating bounds are only
        written when ``rating`` is given; the usual validation applies.
        """
        signed_data: dict[str, Any] = {
            AUTHOR_KEY: [list(pair) for pair in authors],
            RECIPIENT_KEY: [list(pair) for pair in recipients],
            TYPE_KEY: claim_type,
        }
        if comment is not None:
            signed_data[COMMENT_KEY] = comment
        signed_data[TIMESTAMP_KEY] = int(time.time()) if timestamp is None else timestamp
        if rating is not None:
            signed_data[RATING_KEY] = rating
            signed_data[MIN_RATING_KEY] = min_rating
            signed_data[MAX_RATING_KEY] = max_rating

        document = {SIGNED_DATA_KEY: signed_data, SIGNATURE_KEY: {}}
        return cls(canonical.encode(document), backend=backend)

    # -- identity -----------------------------------------------------------

    def get_signed_data(self) -> CanonicalText:
        """Canonical text of the ``signedData`` object; the only input to the hash."""
        return self._signed_data

    def get_hash(self) -> bytes:
        return signing.hash_of(self._signed_data, self._backend)

    @property
    def hash_text(self) -> str:
        return self._backend.encode_text(self.get_hash())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Packet):
            return NotImplemented
        return self.get_hash() == other.get_hash() and self.timestamp == other.timestamp

    def __hash__(self) -> int:
        return hash((self.get_hash(), self.timestamp))

    def __repr__(self) -> str:
        return f"Packet(hash={self.hash_text!r}, type={self.claim_type!r}, signed={self.is_signed})"

    # -- signatures ---------------------------------------------------------

    def sign(self, private_key: Any) -> Signature:
        """Sign with ``private_key``, replacing any existing signature."""
        return signing.sign_packet(self, private_key, self._backend)

    def add_signature(self, signature: Signature) -> bool:
        """Attach a signature made elsewhere if it verifies; returns whether it was attached."""
        return signing.add_signature(self, signature, self._backend)

    def _replace_signature(self, signature: Signature) -> None:
        document = canonical.parse_canonical(self._data)
        data = canonical.encode(
            {SIGNED_DATA_KEY: document[SIGNED_DATA_KEY], SIGNATURE_KEY: signature.to_block()}
        )
        self._signature = signature
        self._data = data

    @property
    def signature(self) -> Signature | None:
        return self._signature

    @property
    def is_signed(self) -> bool:
        return self._signature is not None

    # -- payload accessors --------------------------------------------------

    @property
    def data(self) -> CanonicalText:
        return self._data

    @property
    def payload(self) -> SignedPayload:
        return self._payload

    @property
    def authors(self) -> tuple[IdentifierPair, ...]:
        return self._payload.authors

    @property
    def recipients(self) -> tuple[IdentifierPair, ...]:
        return self._payload.recipients

    @property
    def claim_type(self) -> str:
        return self._payload.claim_type

    @property
    def timestamp(self) -> int:
        return self._payload.timestamp

    @property
    def rating(self) -> int | None:
        return self._payload.rating

    @property
    def min_rating(self) -> int | None:
        return self._payload.min_rating

    @property
    def max_rating(self) -> int | None:
        return self._payload.max_rating

    @property
    def comment(self) -> str | None:
        return self._payload.comment

    # -- local metadata -----------------------------------------------------

    def set_published(self) -> None:
        self._published = True

    def is_published(self) -> bool:
        return self._published

    @property
    def published(self) -> bool:
        return self._published

    @property
    def priority(self) -> int:
        return self._priority

    @priority.setter
    def priority(self, value: int) -> None:
        self._priority = value

    # -- export -------------------------------------------------------------

    def to_wire(self) -> bytes:
        return self._data.encode("utf-8")

    def export(self) -> PacketExport:
        if self._signature is None:
            details = SignatureDetails()
        else:
            details = SignatureDetails(
                signer_pub_key=self._signature.pub_key,
                signer_key_id=self._signature.get_signer_key_id(self._backend),
                signature=self._signature.signature,
            )
        return PacketExport(
            hash=self.hash_text,
            data=canonical.parse(self._data),
            published=self._published,
            priority=self._priority,
            signature_details=details,
        )

    def to_dict(self) -> dict[str, Any]:
        """Export as ``{hash, data, published, priority, signatureDetails}``."""
        return self.export().model_dump(by_alias=True)
