"""
Token data models and the claims builder.

Field declaration order on Header and Claims is the JSON wire order.
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .codec import encode
from .errors import InvalidParamsError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
TOKEN_TYPE = "JWT"


class Header(BaseModel):
    model_config = ConfigDict(frozen=True)

    alg: str = ALGORITHM
    typ: str = TOKEN_TYPE


class Claims(BaseModel):
    """Signed payload: who the token is for and when it is valid."""

    model_config = ConfigDict(frozen=True)

    aud: List[str] = Field(default_factory=list)
    exp: int = 0
    iat: int = 0
    iss: str = ""
    nbf: Optional[int] = None
    sub: str = ""

    @field_validator("aud", mode="before")
    @classmethod
    def _null_aud_is_empty(cls, value):
        # a nil audience slice is serialized as null
        return [] if value is None else value


class CreateTokenParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    aud: List[str] = Field(default_factory=list, description="Intended audiences")
    iss: str = Field("", description="Issuer")
    sub: str = Field("", description="Subject")
    lifetime: int = Field(..., description="Validity in seconds, relative to issuance")
    delay: Optional[int] = Field(None, description="Seconds before the token becomes usable")


class TokenChunks(BaseModel):
    """The three still-encoded segments of a token string."""

    model_config = ConfigDict(frozen=True)

    header: str
    claims: str
    signature: str


class TokenDetails(BaseModel):
    """Decoded header and claims. Not trustworthy until the signature is checked."""

    model_config = ConfigDict(frozen=True)

    header: Header
    claims: Claims


class TokenPayload(BaseModel):
    """A token issued under a freshly generated secret, kept together with it."""

    model_config = ConfigDict(frozen=True)

    token: str
    secret: bytes
    signature: str


DEFAULT_HEADER = Header()
DEFAULT_HEADER_B64 = encode(DEFAULT_HEADER)


def now_ts() -> int:
    """Return current UNIX timestamp (seconds)."""
    return int(time.time())


def make_claims(params: Optional[CreateTokenParams], now: Optional[int] = None) -> Claims:
    if params is None:
        raise InvalidParamsError("nil CreateTokenParams params")
    if params.lifetime < 0:
        raise InvalidParamsError(f"lifetime must not be negative, got {params.lifetime}")

    issued_at = now_ts() if now is None else now
    # no delay still pins nbf to the epoch, which always passes the not-before check
    not_before = issued_at + params.delay if params.delay is not None else 0

    claims = Claims(
        aud=list(params.aud),
        exp=issued_at + params.lifetime,
        iat=issued_at,
        iss=params.iss,
        nbf=not_before,
        sub=params.sub,
    )
    logger.debug("built claims sub=%s aud=%s iat=%d exp=%d", claims.sub, claims.aud, claims.iat, claims.exp)
    return claims


def build_claims(params: Optional[CreateTokenParams], now: Optional[int] = None) -> str:
    """Build claims for params at time now and return them encoded."""
    return encode(make_claims(params, now))
