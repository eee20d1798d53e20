"""Constants for Identifi packets.

This module defines document field names and crypto parameters used
across the codebase.
"""

# Top-level document keys
SIGNED_DATA_KEY = "signedData"
SIGNATURE_KEY = "signature"

# Signed payload keys
AUTHOR_KEY = "author"
RECIPIENT_KEY = "recipient"
TYPE_KEY = "type"
COMMENT_KEY = "comment"
TIMESTAMP_KEY = "timestamp"
RATING_KEY = "rating"
MIN_RATING_KEY = "minRating"
MAX_RATING_KEY = "maxRating"

# Signature block keys
PUB_KEY_KEY = "pubKey"
SIGNATURE_VALUE_KEY = "signature"

IDENTIFIER_PAIR_LENGTH = 2
"""Each author/recipient entry is a ``[type, value]`` pair."""

ADDRESS_VERSION = 0x66
"""Version byte prepended to the key hash before base58check encoding.

Signer key IDs derived from public keys all start with the same leading
character, which keeps them visually distinct from other base58 strings.
"""

KEY_ID_HASH_LENGTH = 20
"""Number of leading SHA-256 bytes of the public key kept in a key ID."""

DEFAULT_PRIVATE_KEY_ENV = "IDENTIFI_PRIVATE_KEY"

# Recommended mode for private key files (owner read/write only).
KEY_FILE_RECOMMENDED_MODE = 0o600
