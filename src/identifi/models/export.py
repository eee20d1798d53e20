"""Export models handed to storage and RPC layers."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from identifi.models.base import IdentifiBaseModel


class SignatureDetails(IdentifiBaseModel):
    """Signer public key, derived key ID and signature; all empty when unsigned."""

    signer_pub_key: str = Field(default="", alias="signerPubKey")
    signer_key_id: str = Field(default="", alias="signerKeyID")
    signature: str = Field(default="")


class PacketExport(IdentifiBaseModel):
    """Structured view of a packet combining identity, raw document and local metadata."""

    hash: str = Field(..., description="Base58-encoded hash of the signed data.")
    data: dict[str, Any] = Field(..., description="The parsed packet document.")
    published: bool
    priority: int
    signature_details: SignatureDetails = Field(
        default_factory=SignatureDetails, alias="signatureDetails"
    )
