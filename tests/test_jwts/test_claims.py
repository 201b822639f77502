import json

import pytest
from pydantic import ValidationError

from jwts import codec
from jwts.claims import CreateTokenParams, build_claims, make_claims, now_ts
from jwts.errors import InvalidParamsError


def test_make_claims_derives_window_from_now(params, fixed_now):
    claims = make_claims(params, fixed_now)
    assert claims.iat == fixed_now
    assert claims.exp == fixed_now + 3600
    assert claims.aud == ["svc", "billing"]
    assert claims.iss == "x"
    assert claims.sub == "y"


def test_missing_delay_pins_nbf_to_epoch(params, fixed_now):
    assert make_claims(params, fixed_now).nbf == 0


def test_delay_sets_nbf(fixed_now):
    p = CreateTokenParams(aud=["svc"], iss="x", sub="y", lifetime=3600, delay=60)
    assert make_claims(p, fixed_now).nbf == fixed_now + 60


def test_zero_lifetime_is_allowed(fixed_now):
    p = CreateTokenParams(aud=["svc"], lifetime=0)
    claims = make_claims(p, fixed_now)
    assert claims.exp == claims.iat


def test_negative_lifetime_is_rejected(fixed_now):
    with pytest.raises(InvalidParamsError):
        build_claims(CreateTokenParams(aud=["svc"], lifetime=-1), fixed_now)


def test_none_params_rejected():
    with pytest.raises(InvalidParamsError):
        build_claims(None)


def test_build_claims_returns_encoded_json(params, fixed_now):
    encoded = build_claims(params, fixed_now)
    assert "=" not in encoded
    assert json.loads(codec.decode(encoded)) == {
        "aud": ["svc", "billing"],
        "exp": fixed_now + 3600,
        "iat": fixed_now,
        "iss": "x",
        "nbf": 0,
        "sub": "y",
    }


def test_build_claims_uses_wall_clock_by_default(params):
    before = now_ts()
    claims = json.loads(codec.decode(build_claims(params)))
    after = now_ts()
    assert before <= claims["iat"] <= after
    assert claims["exp"] - claims["iat"] == 3600


def test_claims_are_frozen(params, fixed_now):
    claims = make_claims(params, fixed_now)
    with pytest.raises(ValidationError):
        claims.exp = 0
