"""Identifi Cryptographic Layer.

- backend: CryptoBackend interface and the default secp256k1/base58 backend
- keys: key generation, PEM serialization, loading from file or env
- signing: packet hashing, signing, verification and signature attachment
- models: Signature, KeyBundle
"""

from identifi.crypto import keys
from identifi.crypto import signing
from identifi.crypto.backend import (
    CryptoBackend,
    Secp256k1Backend,
    get_default_backend,
    set_default_backend,
)
from identifi.crypto.models import KeyBundle, Signature

__all__ = [
    "keys",
    "signing",
    "CryptoBackend",
    "KeyBundle",
    "Secp256k1Backend",
    "Signature",
    "get_default_backend",
    "set_default_backend",
]
