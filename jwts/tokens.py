"""
Public token operations.

create_token      claims -> encode -> sign -> assemble
verify_token      parse -> decode -> audience/time policy (no signature check)
validate_token    parse -> signature check (no policy)
parse_token_details  parse -> decode, nothing validated

A caller accepting a bearer token runs validate_token first and only then
trusts what verify_token or parse_token_details report.
"""

from __future__ import annotations

import logging
import secrets
from typing import Optional

from . import config
from .claims import DEFAULT_HEADER_B64, CreateTokenParams, TokenDetails, TokenPayload, build_claims
from .errors import MissingKeyError
from .signer import Secret, sign
from .token import assemble, parse, parse_details
from .verifier import verify_signature, verify_window_and_audience

logger = logging.getLogger(__name__)


def create_token(params: Optional[CreateTokenParams], secret: Optional[Secret], now: Optional[int] = None) -> str:
    if secret is None:
        raise MissingKeyError("secret is None")

    claims = build_claims(params, now)
    signature = sign(DEFAULT_HEADER_B64, claims, secret)
    return assemble(DEFAULT_HEADER_B64, claims, signature)


def verify_token(token: Optional[str], audience_target: Optional[str], now: Optional[int] = None) -> bool:
    """Policy check only. Returns True or raises the first failing check's error."""
    details = parse_details(parse(token))
    return verify_window_and_audience(details, audience_target, now)


def validate_token(token: Optional[str], secret: Optional[Secret]) -> bool:
    """Integrity check only. A wrong signature is False; a malformed token raises."""
    return verify_signature(parse(token), secret)


def parse_token_details(token: Optional[str]) -> TokenDetails:
    return parse_details(parse(token))


def generate_secret(length: Optional[int] = None) -> bytes:
    """Return length cryptographically secure random bytes (default from config)."""
    n = config.get_secret_length() if length is None else int(length)
    if n < 1:
        raise ValueError(f"secret length must be positive, got {n}")
    return secrets.token_bytes(n)


def create_token_with_random_secret(
    params: Optional[CreateTokenParams],
    now: Optional[int] = None,
    length: Optional[int] = None,
) -> TokenPayload:
    """Issue a token under a new random secret and hand back the secret with it."""
    secret = generate_secret(length)
    token = create_token(params, secret, now)
    logger.debug("issued token under a fresh %d byte secret", len(secret))
    return TokenPayload(token=token, secret=secret, signature=parse(token).signature)
