"""Structural validation of parsed packet documents.

The validator turns a canonical document into a SignedPayload plus an
optional Signature, or raises a PacketValidationError subclass. It does
not touch any Packet; the caller commits the result in one step, so a
rejected document never leaves a half-updated packet behind.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from identifi import canonical
from identifi.crypto.backend import CryptoBackend
from identifi.crypto.models import Signature
from identifi.crypto.signing import verify
from identifi.errors import (
    InvalidCardinalityError,
    InvalidRatingRangeError,
    InvalidSignatureError,
    MalformedDocumentError,
    MissingRequiredFieldError,
)
from identifi.models.constants import (
    AUTHOR_KEY,
    COMMENT_KEY,
    IDENTIFIER_PAIR_LENGTH,
    MAX_RATING_KEY,
    MIN_RATING_KEY,
    PUB_KEY_KEY,
    RATING_KEY,
    RECIPIENT_KEY,
    SIGNATURE_KEY,
    SIGNATURE_VALUE_KEY,
    SIGNED_DATA_KEY,
    TIMESTAMP_KEY,
    TYPE_KEY,
)
from identifi.models.payload import SignedPayload
from identifi.models.types import Document, IdentifierPair


@dataclass(frozen=True)
class ValidatedPacket:
    """Everything a Packet commits after a successful validation."""

    payload: SignedPayload
    signature: Signature | None
    signed_data: str


def _require(obj: dict[str, Any], key: str) -> Any:
    value = obj.get(key)
    if value is None:
        raise MissingRequiredFieldError(key)
    return value


def _require_object(obj: dict[str, Any], key: str) -> dict[str, Any]:
    value = _require(obj, key)
    if not isinstance(value, dict):
        raise MalformedDocumentError(f"'{key}' must be an object", details={"field": key})
    return value


def _as_int(value: Any, key: str) -> int:
    # bool is an int subclass but true/false are not valid numbers here
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedDocumentError(f"'{key}' must be an integer", details={"field": key})
    return value


def _as_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise MalformedDocumentError(f"'{key}' must be a string", details={"field": key})
    return value


def _identifier_pairs(signed_data: dict[str, Any], key: str) -> tuple[IdentifierPair, ...]:
    entries = _require(signed_data, key)
    if not isinstance(entries, list):
        raise MalformedDocumentError(f"'{key}' must be an array", details={"field": key})
    if not entries:
        raise InvalidCardinalityError(key, "at least one entry is required")

    pairs: list[IdentifierPair] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, list) or len(entry) != IDENTIFIER_PAIR_LENGTH:
            raise InvalidCardinalityError(
                key, "each entry must be a [type, value] pair", details={"index": index}
            )
        pairs.append((_as_str(entry[0], key), _as_str(entry[1], key)))
    return tuple(pairs)


def _rating_fields(signed_data: dict[str, Any]) -> dict[str, int]:
    value = signed_data.get(RATING_KEY)
    if value is None:
        return {}

    rating = _as_int(value, RATING_KEY)
    min_rating = _as_int(_require(signed_data, MIN_RATING_KEY), MIN_RATING_KEY)
    max_rating = _as_int(_require(signed_data, MAX_RATING_KEY), MAX_RATING_KEY)
    if max_rating <= min_rating or not min_rating <= rating <= max_rating:
        raise InvalidRatingRangeError(rating, min_rating, max_rating)
    return {"rating": rating, "min_rating": min_rating, "max_rating": max_rating}


def extract_payload(signed_data: dict[str, Any]) -> SignedPayload:
    """Check and extract the fields of a ``signedData`` object."""
    claim_type = _as_str(_require(signed_data, TYPE_KEY), TYPE_KEY)
    timestamp = _as_int(_require(signed_data, TIMESTAMP_KEY), TIMESTAMP_KEY)
    authors = _identifier_pairs(signed_data, AUTHOR_KEY)
    recipients = _identifier_pairs(signed_data, RECIPIENT_KEY)

    comment = signed_data.get(COMMENT_KEY)
    if comment is not None:
        comment = _as_str(comment, COMMENT_KEY)

    return SignedPayload(
        authors=authors,
        recipients=recipients,
        claim_type=claim_type,
        timestamp=timestamp,
        comment=comment,
        **_rating_fields(signed_data),
    )


def extract_signature(signature_block: dict[str, Any]) -> Signature | None:
    """Signature from a signature block, or None unless both parts are present."""
    pub_key = signature_block.get(PUB_KEY_KEY)
    value = signature_block.get(SIGNATURE_VALUE_KEY)
    if pub_key is None or value is None:
        return None
    return Signature(
        pub_key=_as_str(pub_key, PUB_KEY_KEY),
        signature=_as_str(value, SIGNATURE_VALUE_KEY),
    )


def validate_document(
    document: Document,
    *,
    skip_verify: bool = False,
    backend: CryptoBackend | None = None,
) -> ValidatedPacket:
    """Validate a parsed packet document.

    Args:
        document: Parsed canonical document (see ``canonical.parse_canonical``)
        skip_verify: Accept an embedded signature without checking it; only for
            re-loading packets that were verified when first received
        backend: Crypto backend for signature verification; process default if None

    Returns:
        ValidatedPacket with the extracted payload, signature and signed data text

    Raises:
        MissingRequiredFieldError: signedData, signature or a required field is absent
        MalformedDocumentError: a field holds a value of the wrong type
        InvalidCardinalityError: empty author/recipient list or a malformed entry
        InvalidRatingRangeError: rating outside [minRating, maxRating] or empty range
        InvalidSignatureError: embedded signature fails verification
    """
    signed_data = _require_object(document, SIGNED_DATA_KEY)
    signature_block = _require_object(document, SIGNATURE_KEY)
    signed_text = canonical.encode_fragment(document, SIGNED_DATA_KEY)

    payload = extract_payload(signed_data)
    signature = extract_signature(signature_block)

    if signature is not None and not skip_verify and not verify(signature, signed_text, backend):
        raise InvalidSignatureError(
            "Signature verification failed: signed data may have been tampered with "
            "or signature is invalid.",
            details={"pub_key": signature.pub_key},
        )

    return ValidatedPacket(payload=payload, signature=signature, signed_data=signed_text)
