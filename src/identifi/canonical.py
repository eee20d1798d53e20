"""Canonical JSON encoding for packet documents.

A document's canonical text is the compact JSON produced by ``encode``:
no insignificant whitespace, keys kept in document order (not sorted),
non-ASCII characters escaped. A text is canonical exactly when
``encode(parse(text)) == text``; there is no separate normal-form check.
Duplicate keys, alternative number spellings ("1e3", "1.50") and extra
whitespace all fail that round trip.
"""

from __future__ import annotations

import json
from typing import Any

from identifi.errors import MalformedDocumentError
from identifi.models.types import CanonicalText, Document

_SEPARATORS = (",", ":")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name} is not allowed")


def encode(document: Any) -> CanonicalText:
    """Encode a JSON-compatible value to its canonical text."""
    return json.dumps(
        document,
        separators=_SEPARATORS,
        ensure_ascii=True,
        allow_nan=False,
        sort_keys=False,
    )


def parse(text: str) -> Any:
    """Decode JSON text. Raises MalformedDocumentError on any syntax problem."""
    if not isinstance(text, str):
        raise MalformedDocumentError(
            "document must be text", details={"type": type(text).__name__}
        )
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedDocumentError(str(e)) from e
    except RecursionError as e:
        raise MalformedDocumentError("document nested too deeply") from e


def parse_canonical(text: str) -> Document:
    """Parse ``text`` and require it to be a canonical JSON object."""
    document = parse(text)
    if not isinstance(document, dict):
        raise MalformedDocumentError(
            "document must be a JSON object", details={"type": type(document).__name__}
        )
    if encode(document) != text:
        raise MalformedDocumentError("non-canonical document")
    return document


def encode_fragment(document: Document, key: str) -> CanonicalText:
    """Canonical text of the sub-object stored under ``key``."""
    return encode(document[key])
