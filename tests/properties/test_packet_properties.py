"""Property-based tests for packet canonicality, hashing and validation."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from identifi import canonical
from identifi.errors import InvalidRatingRangeError, PacketValidationError
from identifi.packet import Packet
from identifi.testing import FakeCryptoBackend

# --- Shared strategies ---

_TEXT = st.text(min_size=0, max_size=30)


def st_identifier_pairs() -> st.SearchStrategy[list[tuple[str, str]]]:
    return st.lists(st.tuples(_TEXT, _TEXT), min_size=1, max_size=4)


@st.composite
def st_packet_fields(draw: st.DrawFn) -> dict:
    fields: dict = {
        "authors": draw(st_identifier_pairs()),
        "recipients": draw(st_identifier_pairs()),
        "claim_type": draw(_TEXT),
        "timestamp": draw(st.integers(min_value=0, max_value=2**40)),
        "comment": draw(st.none() | _TEXT),
    }
    if draw(st.booleans()):
        min_rating = draw(st.integers(min_value=-100, max_value=99))
        max_rating = draw(st.integers(min_value=min_rating + 1, max_value=100))
        fields["rating"] = draw(st.integers(min_value=min_rating, max_value=max_rating))
        fields["min_rating"] = min_rating
        fields["max_rating"] = max_rating
    return fields


@given(st_packet_fields())
def test_created_packets_are_canonical_and_reconstructible(fields: dict) -> None:
    packet = Packet.create(**fields)

    assert canonical.encode(canonical.parse(packet.data)) == packet.data
    rebuilt = Packet(packet.data)
    assert rebuilt.get_hash() == packet.get_hash()
    assert rebuilt.timestamp == packet.timestamp
    assert rebuilt.payload == packet.payload


@given(st_packet_fields(), st.integers(), st.booleans())
def test_hash_depends_only_on_signed_data(fields: dict, priority: int, publish: bool) -> None:
    backend = FakeCryptoBackend()
    packet = Packet.create(backend=backend, **fields)
    before = packet.get_hash()

    packet.priority = priority
    if publish:
        packet.set_published()
    packet.sign(b"signer")

    assert packet.get_hash() == before


@given(st_packet_fields(), st.integers(min_value=1, max_value=2**20))
def test_timestamp_change_changes_hash_and_breaks_signature(fields: dict, delta: int) -> None:
    backend = FakeCryptoBackend()
    packet = Packet.create(backend=backend, **fields)
    signature = packet.sign(b"signer")

    changed = Packet.create(backend=backend, **{**fields, "timestamp": fields["timestamp"] + delta})

    assert changed.get_hash() != packet.get_hash()
    assert changed.add_signature(signature) is False


@settings(max_examples=50)
@given(
    st.integers(min_value=-50, max_value=50),
    st.integers(min_value=-50, max_value=50),
    st.integers(min_value=-50, max_value=50),
)
def test_rating_range_rule(rating: int, min_rating: int, max_rating: int) -> None:
    valid = min_rating < max_rating and min_rating <= rating <= max_rating
    kwargs = {"rating": rating, "min_rating": min_rating, "max_rating": max_rating}
    if valid:
        assert Packet.create([("n", "a")], [("n", "b")], "r", timestamp=1, **kwargs).rating == rating
    else:
        with pytest.raises(InvalidRatingRangeError):
            Packet.create([("n", "a")], [("n", "b")], "r", timestamp=1, **kwargs)


@given(st.text(max_size=60))
def test_arbitrary_text_fails_only_with_validation_errors(text: str) -> None:
    try:
        Packet(text)
    except PacketValidationError:
        pass
