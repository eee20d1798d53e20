"""Pydantic models for detached packet signatures and signer key bundles."""

from __future__ import annotations

from typing import Any

from pydantic import Field, PrivateAttr

from identifi.crypto.backend import CryptoBackend
from identifi.crypto.identity import derive_signer_identity
from identifi.models.base import IdentifiBaseModel
from identifi.models.constants import PUB_KEY_KEY, SIGNATURE_VALUE_KEY


class Signature(IdentifiBaseModel):
    """Detached proof over a packet's signed data: signer public key plus signature.

    Both values are stored as text exactly as they appear on the wire and
    are not checked here; undecodable material simply fails verification.
    """

    pub_key: str = Field(..., alias=PUB_KEY_KEY, description="Encoded signer public key.")
    signature: str = Field(
        ..., alias=SIGNATURE_VALUE_KEY, description="Encoded signature over the signed data."
    )

    _signer_key_id: str | None = PrivateAttr(default=None)

    def get_signer_key_id(self, backend: CryptoBackend | None = None) -> str:
        """Key ID derived from pub_key; computed once, then cached on this instance."""
        if self._signer_key_id is None:
            self._signer_key_id = derive_signer_identity(self.pub_key, backend)
        return self._signer_key_id

    @property
    def signer_key_id(self) -> str:
        return self.get_signer_key_id()

    def to_block(self) -> dict[str, str]:
        """Signature block in document field order."""
        return {PUB_KEY_KEY: self.pub_key, SIGNATURE_VALUE_KEY: self.signature}

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Signature):
            return NotImplemented
        return self.pub_key == other.pub_key and self.signature == other.signature

    def __hash__(self) -> int:
        return hash((self.pub_key, self.signature))


class KeyBundle(IdentifiBaseModel):
    """Everything a signer needs to publish and reuse a key."""

    pub_key: str = Field(..., alias="pubKey")
    key_id: str = Field(..., alias="keyID")
    priv_key: str = Field(..., alias="privKey", repr=False)
