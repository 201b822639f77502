"""
Join and split the three token segments, and decode split segments.
"""

from __future__ import annotations

from typing import Optional

from pydantic import ValidationError

from .claims import Claims, Header, TokenChunks, TokenDetails
from .codec import decode
from .errors import DecodingError, MalformedTokenError, MissingSegmentError, MissingTokenError
from .signer import SEGMENT_SEPARATOR


def assemble(
    encoded_header: Optional[str],
    encoded_claims: Optional[str],
    encoded_signature: Optional[str],
) -> str:
    for name, segment in (("header", encoded_header), ("claims", encoded_claims), ("signature", encoded_signature)):
        if segment is None:
            raise MissingSegmentError(f"{name} is None")
    return SEGMENT_SEPARATOR.join((encoded_header, encoded_claims, encoded_signature))


def parse(token: Optional[str]) -> TokenChunks:
    if token is None:
        raise MissingTokenError("token is None")

    chunks = token.split(SEGMENT_SEPARATOR)
    if len(chunks) != 3:
        raise MalformedTokenError(f"invalid token: expected 3 segments, got {len(chunks)}")

    header, claims, signature = chunks
    return TokenChunks(header=header, claims=claims, signature=signature)


def _load(model, segment: str, name: str):
    text = decode(segment)
    try:
        return model.model_validate_json(text, strict=True)
    except ValidationError as exc:
        raise DecodingError(f"invalid {name} segment: {exc.error_count()} validation error(s)") from exc


def parse_details(chunks: Optional[TokenChunks]) -> TokenDetails:
    """Decode header and claims. Performs no validation of any kind."""
    if chunks is None:
        raise MissingTokenError("token chunks are None")
    header = _load(Header, chunks.header, "header")
    claims = _load(Claims, chunks.claims, "claims")
    return TokenDetails(header=header, claims=claims)
