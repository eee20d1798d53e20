"""Type aliases for Identifi packets.

This module defines type aliases to document the semantic meaning of
the plain tuples and strings that flow through the packet layer.
"""

from typing import Any, TypeAlias

IdentifierPair: TypeAlias = tuple[str, str]
"""An author or recipient identifier: (type, value), e.g. ("email", "alice@example.com")"""

Document: TypeAlias = dict[str, Any]
"""A parsed packet document (JSON object, key order preserved)"""

CanonicalText: TypeAlias = str
"""Compact JSON text that equals its own re-encoding"""

KeyID: TypeAlias = str
"""Base58check signer identity derived from a public key"""
