"""Identifi testing utilities.

Modules:
    fixtures: Pytest fixtures (private_key, fake_backend, sample_document, sample_packet).
    mocks: FakeCryptoBackend, a deterministic CryptoBackend for unit tests.

Example:
    >>> from identifi.testing import FakeCryptoBackend
    >>> from identifi import Packet
    >>> packet = Packet.create([("name", "a")], [("name", "b")], "trust",
    ...                        timestamp=1, backend=FakeCryptoBackend())
"""

from identifi.testing.mocks import FakeCryptoBackend

__all__ = ["FakeCryptoBackend"]
