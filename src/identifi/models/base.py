"""Base Pydantic model configuration for Identifi models.

All Identifi models inherit from IdentifiBaseModel to ensure consistent behavior:
- Immutability (frozen=True); a validated payload or signature never changes
- Strict validation (extra="forbid") to catch typos and invalid fields
- Flexible field naming (populate_by_name=True) so wire names work as aliases
"""

from pydantic import BaseModel, ConfigDict


class IdentifiBaseModel(BaseModel):
    """Base model for all Identifi value objects.

    Example:
        >>> from pydantic import Field
        >>> class Pair(IdentifiBaseModel):
        ...     kind: str = Field(alias="type")
        >>>
        >>> Pair(type="email").kind
        'email'
        >>> Pair(kind="email").kind
        'email'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        validate_default=True,
    )
