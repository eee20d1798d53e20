"""Identifi: canonical, signed trust statements.

A packet is a canonical JSON document in which one or more authors make a
typed claim (optionally a rating within a declared range) about one or more
recipients. The ``signedData`` part is hashed and may carry a detached
ECDSA signature so third parties can verify who made the claim.

Example:
    >>> from identifi import Packet
    >>> packet = Packet('{"signedData":{"author":[["name","alice"]],'
    ...                 '"recipient":[["name","bob"]],"type":"review",'
    ...                 '"timestamp":1400000000,"rating":8,"minRating":0,'
    ...                 '"maxRating":10},"signature":{}}')
    >>> packet.rating
    8
"""

__version__ = "0.1.0"

from identifi.crypto.backend import CryptoBackend, Secp256k1Backend
from identifi.crypto.models import KeyBundle, Signature
from identifi.errors import (
    IdentifiError,
    InvalidCardinalityError,
    InvalidRatingRangeError,
    InvalidSignatureError,
    MalformedDocumentError,
    MissingRequiredFieldError,
    PacketValidationError,
)
from identifi.models.payload import SignedPayload
from identifi.packet import Packet

__all__ = [
    "__version__",
    "CryptoBackend",
    "IdentifiError",
    "InvalidCardinalityError",
    "InvalidRatingRangeError",
    "InvalidSignatureError",
    "KeyBundle",
    "MalformedDocumentError",
    "MissingRequiredFieldError",
    "Packet",
    "PacketValidationError",
    "Secp256k1Backend",
    "Signature",
    "SignedPayload",
]
