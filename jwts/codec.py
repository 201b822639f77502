"""
Canonical JSON <-> unpadded standard base64.

The signature is computed over these exact bytes, so encoding must be
deterministic: compact separators, declared field order for models and
None fields left out instead of emitted as null.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any, Optional

from pydantic import BaseModel

from .errors import DecodingError, EncodingError


def _to_plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        # model_dump keeps field declaration order
        return value.model_dump(exclude_none=True)
    return value


def encode_bytes(data: Optional[bytes]) -> str:
    """Base64 (standard alphabet) encode without padding."""
    if data is None:
        raise EncodingError("encoding source is None")
    return base64.b64encode(data).rstrip(b"=").decode("ascii")


def encode(value: Any) -> str:
    """Serialize value to canonical JSON and base64 encode the UTF-8 bytes."""
    if value is None:
        raise EncodingError("encoding source is None")
    try:
        text = json.dumps(_to_plain(value), separators=(",", ":"), ensure_ascii=False)
        data = text.encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"value is not JSON serializable: {exc}") from exc
    return encode_bytes(data)


def decode_bytes(text: Optional[str]) -> bytes:
    """Strict inverse of encode_bytes: rejects padding and foreign characters."""
    if text is None:
        raise DecodingError("decoding source is None")
    if "=" in text:
        raise DecodingError("unexpected padding in base64 segment")
    try:
        raw = text.encode("ascii")
        padding = b"=" * (-len(raw) % 4)
        return base64.b64decode(raw + padding, validate=True)
    except (UnicodeEncodeError, binascii.Error) as exc:
        raise DecodingError(f"invalid base64 segment: {exc}") from exc


def decode(text: Optional[str]) -> str:
    """Decode a base64 segment back to its raw (JSON) text."""
    data = decode_bytes(text)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodingError(f"segment is not valid UTF-8: {exc}") from exc
