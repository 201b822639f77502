"""
Integrity and policy checks.

The two checks are independent. Decoded claims must never be acted on
unless verify_signature returned True for the same token.
"""

from __future__ import annotations

import hmac
import logging
from typing import Optional

from .claims import TokenChunks, TokenDetails, now_ts
from .errors import (
    AudienceNotFoundError,
    ExpiredError,
    IssuedInFutureError,
    MissingTokenError,
    UsedBeforeExpectedError,
)
from .signer import Secret, sign

logger = logging.getLogger(__name__)


def verify_signature(chunks: Optional[TokenChunks], secret: Optional[Secret]) -> bool:
    """Recompute the signature and compare in constant time. Mismatch is False, not an error."""
    if chunks is None:
        raise MissingTokenError("token chunks are None")

    expected = sign(chunks.header, chunks.claims, secret)
    valid = hmac.compare_digest(expected.encode("utf-8"), chunks.signature.encode("utf-8"))
    if not valid:
        logger.debug("signature mismatch")
    return valid


def verify_window_and_audience(
    details: Optional[TokenDetails],
    audience_target: Optional[str],
    now: Optional[int] = None,
) -> bool:
    """
    Check, in this order: audience membership, issued-at not in the future,
    not-before passed, not expired. The first failing check raises.
    """
    if details is None:
        raise MissingTokenError("token details are None")
    claims = details.claims

    if audience_target is None or audience_target not in claims.aud:
        raise AudienceNotFoundError("audience chunk not found in token")

    current = now_ts() if now is None else now

    if claims.iat > current:
        raise IssuedInFutureError("token is issued in the future")

    if claims.nbf is not None and claims.nbf >= current:
        raise UsedBeforeExpectedError("token was used before expected time")

    if claims.exp > current:
        return True

    raise ExpiredError("token is expired")
