"""
jwts: compact HS256 bearer tokens (header.claims.signature), no session store.
"""
from . import claims, codec, config, errors, signer, token, verifier
from .claims import (
    DEFAULT_HEADER,
    DEFAULT_HEADER_B64,
    Claims,
    CreateTokenParams,
    Header,
    TokenChunks,
    TokenDetails,
    TokenPayload,
)
from .errors import (
    AudienceNotFoundError,
    DecodingError,
    EncodingError,
    ExpiredError,
    InvalidParamsError,
    IssuedInFutureError,
    JWTError,
    MalformedTokenError,
    MissingInputError,
    MissingKeyError,
    MissingSegmentError,
    MissingTokenError,
    PolicyError,
    UsedBeforeExpectedError,
)
from .tokens import (
    create_token,
    create_token_with_random_secret,
    generate_secret,
    parse_token_details,
    validate_token,
    verify_token,
)

__all__ = [
    "claims", "codec", "config", "errors", "signer", "token", "verifier",
    "DEFAULT_HEADER", "DEFAULT_HEADER_B64",
    "Claims", "CreateTokenParams", "Header", "TokenChunks", "TokenDetails", "TokenPayload",
    "AudienceNotFoundError", "DecodingError", "EncodingError", "ExpiredError",
    "InvalidParamsError", "IssuedInFutureError", "JWTError", "MalformedTokenError",
    "MissingInputError", "MissingKeyError", "MissingSegmentError", "MissingTokenError",
    "PolicyError", "UsedBeforeExpectedError",
    "create_token", "create_token_with_random_secret", "generate_secret",
    "parse_token_details", "validate_token", "verify_token",
]
