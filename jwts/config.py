"""
Token settings loaded from the environment.

- JWT secret priority: ENV JWT_SECRET > default 'change-me' (a warning is logged)
- JWT expires seconds default: 3600 (ENV JWT_EXPIRES_SECONDS)
- Issuer default 'jwts' (ENV JWT_ISSUER); audience is a comma separated ENV JWT_AUDIENCE
- Random secret length default: 128 bytes (ENV JWT_SECRET_LENGTH)
- Invalid integers log a WARNING and fall back to the default.

Accessors read the environment on every call so tests can monkeypatch it.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

_DEFAULT_SECRET = "change-me"
_DEFAULT_EXPIRES_SECONDS = 3600
_DEFAULT_ISSUER = "jwts"
_DEFAULT_SECRET_LENGTH = 128
_DEFAULT_LOG_LEVEL = "INFO"

_ENV_JWT_SECRET = "JWT_SECRET"
_ENV_JWT_EXPIRES_SECONDS = "JWT_EXPIRES_SECONDS"
_ENV_JWT_ISSUER = "JWT_ISSUER"
_ENV_JWT_AUDIENCE = "JWT_AUDIENCE"
_ENV_JWT_SECRET_LENGTH = "JWT_SECRET_LENGTH"
_ENV_LOG_LEVEL = "JWTS_LOG_LEVEL"


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid %s=%r; using default %d", name, raw, default)
        return default
    if value < minimum:
        logger.warning("%s=%d is below %d; using default %d", name, value, minimum, default)
        return default
    return value


def get_jwt_secret() -> bytes:
    """Signing secret, priority: ENV JWT_SECRET > default."""
    env_secret = os.environ.get(_ENV_JWT_SECRET)
    if env_secret:
        return env_secret.encode("utf-8")
    logger.warning("%s is not set; signing with the insecure default secret", _ENV_JWT_SECRET)
    return _DEFAULT_SECRET.encode("utf-8")


def get_jwt_expires_seconds() -> int:
    """Token lifetime in seconds (default 3600)."""
    return _env_int(_ENV_JWT_EXPIRES_SECONDS, _DEFAULT_EXPIRES_SECONDS)


def get_jwt_issuer() -> str:
    return os.environ.get(_ENV_JWT_ISSUER) or _DEFAULT_ISSUER


def get_jwt_audience() -> List[str]:
    raw = os.environ.get(_ENV_JWT_AUDIENCE, "")
    return [a.strip() for a in raw.split(",") if a.strip()]


def get_secret_length() -> int:
    return _env_int(_ENV_JWT_SECRET_LENGTH, _DEFAULT_SECRET_LENGTH, minimum=1)


def get_log_level() -> int:
    name = (os.environ.get(_ENV_LOG_LEVEL) or _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning("Unknown log level %r; using %s", name, _DEFAULT_LOG_LEVEL)
        return logging.INFO
    return level


def get_effective_config_snapshot() -> Dict[str, Any]:
    """
    Return the effective settings for diagnostics or tests. The secret itself is never included.
    """
    return {
        "jwt_secret_from_env": bool(os.environ.get(_ENV_JWT_SECRET)),
        "jwt_expires_seconds": get_jwt_expires_seconds(),
        "jwt_issuer": get_jwt_issuer(),
        "jwt_audience": get_jwt_audience(),
        "secret_length": get_secret_length(),
        "log_level": logging.getLevelName(get_log_level()),
    }
