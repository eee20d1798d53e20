"""Identifi models: signed payload, export views, constants and type aliases."""

from identifi.models.base import IdentifiBaseModel
from identifi.models.export import PacketExport, SignatureDetails
from identifi.models.payload import SignedPayload
from identifi.models.types import CanonicalText, Document, IdentifierPair, KeyID

__all__ = [
    "CanonicalText",
    "Document",
    "IdentifiBaseModel",
    "IdentifierPair",
    "KeyID",
    "PacketExport",
    "SignatureDetails",
    "SignedPayload",
]
