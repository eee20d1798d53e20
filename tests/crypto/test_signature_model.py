"""Tests for the Signature and KeyBundle models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from identifi.crypto.models import Signature
from identifi.testing import FakeCryptoBackend


def test_signature_accepts_wire_names() -> None:
    signature = Signature.model_validate({"pubKey": "abc", "signature": "def"})
    assert signature.pub_key == "abc"
    assert signature.signature == "def"


def test_signature_accepts_python_names() -> None:
    assert Signature(pub_key="abc", signature="def").to_block() == {
        "pubKey": "abc",
        "signature": "def",
    }


def test_signature_is_frozen() -> None:
    signature = Signature(pub_key="abc", signature="def")
    with pytest.raises(ValidationError):
        signature.pub_key = "other"  # type: ignore[misc]


def test_signature_forbids_extra_fields() -> None:
    with pytest.raises(ValidationError):
        Signature.model_validate({"pubKey": "a", "signature": "b", "alg": "ecdsa"})


def test_signer_key_id_is_cached() -> None:
    backend = FakeCryptoBackend()
    signature = Signature(pub_key=(b"pub:k").hex(), signature="00")

    first = signature.get_signer_key_id(backend)
    second = signature.get_signer_key_id(backend)

    assert first == second
    assert first.startswith("id")
    assert backend.identity_calls == 1


def test_signer_key_id_empty_for_invalid_key() -> None:
    backend = FakeCryptoBackend()
    signature = Signature(pub_key="zz", signature="00")
    assert signature.get_signer_key_id(backend) == ""


def test_signer_key_id_property_uses_default_backend() -> None:
    assert Signature(pub_key="", signature="").signer_key_id == ""


def test_equality_ignores_cached_identity() -> None:
    backend = FakeCryptoBackend()
    a = Signature(pub_key=(b"pub:k").hex(), signature="00")
    b = Signature(pub_key=(b"pub:k").hex(), signature="00")
    a.get_signer_key_id(backend)

    assert a == b
    assert hash(a) == hash(b)
    assert a != Signature(pub_key=(b"pub:k").hex(), signature="01")
