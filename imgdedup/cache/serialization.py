"""
On-disk encoding of cached fingerprints.

Entries are small JSON documents; the format is private to imgdedup.
"""

from __future__ import annotations

import json

from ..models import Fingerprint


def encode_fingerprint(fingerprint: Fingerprint) -> str:
    """Serialize a fingerprint to a JSON string."""
    return json.dumps(fingerprint.to_dict(), separators=(',', ':'))


def decode_fingerprint(text: str) -> Fingerprint:
    """
    Deserialize a fingerprint.

    Raises:
        ValueError: If the text is not valid JSON or not a valid fingerprint
    """
    try:
        data = json.loads(text)
        return Fingerprint.from_dict(data)
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed fingerprint entry: {e}") from e


__all__ = ['encode_fingerprint', 'decode_fingerprint']
