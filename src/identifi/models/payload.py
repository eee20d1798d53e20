"""Signed payload model: the hashed and signed part of a packet."""

from __future__ import annotations

from pydantic import Field

from identifi.models.base import IdentifiBaseModel
from identifi.models.types import IdentifierPair


class SignedPayload(IdentifiBaseModel):
    """Fields extracted from a packet's ``signedData`` object.

    Instances are only built by the validator after every structural and
    range check has passed, so a SignedPayload always satisfies the packet
    invariants. Rating bounds are all None when the packet carries no rating.
    """

    authors: tuple[IdentifierPair, ...] = Field(
        ..., min_length=1, description="(type, value) identifiers of the claim authors."
    )
    recipients: tuple[IdentifierPair, ...] = Field(
        ..., min_length=1, description="(type, value) identifiers the claim is about."
    )
    claim_type: str = Field(..., alias="type", description="Claim type, e.g. 'review'.")
    timestamp: int = Field(..., description="Unix time in seconds.")
    rating: int | None = Field(default=None)
    min_rating: int | None = Field(default=None, alias="minRating")
    max_rating: int | None = Field(default=None, alias="maxRating")
    comment: str | None = Field(default=None)

    @property
    def has_rating(self) -> bool:
        return self.rating is not None
