"""
Exception taxonomy for token creation, parsing and verification.

Every error is a ValueError so callers that only care about "bad token"
can keep catching ValueError, the same way the old HS256 helpers did.
"""

from __future__ import annotations


class JWTError(ValueError):
    """Base class for every token error."""


class MissingInputError(JWTError):
    """A required value was None."""


class MissingKeyError(MissingInputError):
    pass


class MissingTokenError(MissingInputError):
    pass


class MissingSegmentError(MissingInputError):
    pass


class InvalidParamsError(JWTError):
    """CreateTokenParams absent or out of range."""


class EncodingError(JWTError):
    pass


class DecodingError(JWTError):
    pass


class MalformedTokenError(JWTError):
    """Token does not have exactly three dot-separated segments."""


class PolicyError(JWTError):
    """Claims are well-formed but not acceptable right now or for this audience."""


class AudienceNotFoundError(PolicyError):
    pass


class IssuedInFutureError(PolicyError):
    pass


class UsedBeforeExpectedError(PolicyError):
    pass


class ExpiredError(PolicyError):
    pass
