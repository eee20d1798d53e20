"""Pytest fixtures and document helpers for Identifi tests.

Fixtures (use with pytest):
    private_key: Fresh secp256k1 private key.
    fake_backend: FakeCryptoBackend instance (fresh per test).
    sample_document: Compact example packet text with a rating, unsigned.
    sample_packet: Packet built from sample_document with the default backend.
    document_factory: make_document, for tests that need variations.
"""

from __future__ import annotations

from typing import Any, Callable

import pytest
from cryptography.hazmat.primitives.asymmetric import ec

from identifi import canonical
from identifi.crypto.keys import generate_keypair
from identifi.packet import Packet
from identifi.testing.mocks import FakeCryptoBackend

SAMPLE_DOCUMENT = (
    '{"signedData":{"author":[["name","alice"]],"recipient":[["name","bob"]],'
    '"type":"review","timestamp":1400000000,"rating":8,"minRating":0,"maxRating":10},'
    '"signature":{}}'
)


def make_document(signature: dict[str, Any] | None = None, **overrides: Any) -> str:
    """Canonical variant of SAMPLE_DOCUMENT.

    Keyword overrides replace signedData fields by their wire name; a value
    of None removes the field. New fields are appended in call order.
    """
    signed_data: dict[str, Any] = canonical.parse(SAMPLE_DOCUMENT)["signedData"]
    for key, value in overrides.items():
        if value is None:
            signed_data.pop(key, None)
        else:
            signed_data[key] = value
    return canonical.encode({"signedData": signed_data, "signature": signature or {}})


@pytest.fixture
def private_key() -> ec.EllipticCurvePrivateKey:
    key, _ = generate_keypair()
    return key


@pytest.fixture
def fake_backend() -> FakeCryptoBackend:
    return FakeCryptoBackend()


@pytest.fixture
def sample_document() -> str:
    return SAMPLE_DOCUMENT


@pytest.fixture
def sample_packet(sample_document: str) -> Packet:
    return Packet(sample_document)


@pytest.fixture
def document_factory() -> Callable[..., str]:
    return make_document
