"""
HMAC-SHA256 signature over "<header>.<claims>".
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Optional, Union

from .codec import encode_bytes
from .errors import MissingKeyError, MissingSegmentError

Secret = Union[bytes, str]

SEGMENT_SEPARATOR = "."


def secret_bytes(secret: Optional[Secret]) -> bytes:
    if secret is None:
        raise MissingKeyError("secret is None")
    if isinstance(secret, str):
        return secret.encode("utf-8")
    return bytes(secret)


def sign(encoded_header: Optional[str], encoded_claims: Optional[str], secret: Optional[Secret]) -> str:
    """Return the base64 encoded MAC of the two encoded segments."""
    key = secret_bytes(secret)
    if encoded_header is None:
        raise MissingSegmentError("header is None")
    if encoded_claims is None:
        raise MissingSegmentError("claims is None")

    signing_input = f"{encoded_header}{SEGMENT_SEPARATOR}{encoded_claims}".encode("utf-8")
    signature = hmac.new(key, signing_input, hashlib.sha256).digest()
    return encode_bytes(signature)
