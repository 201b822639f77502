import json

import pytest

from jwts import codec
from jwts.claims import DEFAULT_HEADER_B64, Claims
from jwts.errors import DecodingError, EncodingError


def test_encode_dict_is_compact_and_unpadded():
    assert codec.encode({"a": 1}) == "eyJhIjoxfQ"


def test_decode_returns_raw_json_text():
    assert codec.decode("eyJhIjoxfQ") == '{"a":1}'


def test_default_header_wire_form():
    assert DEFAULT_HEADER_B64 == "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    assert codec.decode(DEFAULT_HEADER_B64) == '{"alg":"HS256","typ":"JWT"}'


def test_claims_field_order_is_fixed_and_none_is_omitted():
    claims = Claims(sub="y", iss="x", iat=1, exp=2, aud=["svc"])
    assert codec.decode(codec.encode(claims)) == '{"aud":["svc"],"exp":2,"iat":1,"iss":"x","sub":"y"}'

    with_nbf = Claims(sub="y", iss="x", iat=1, exp=2, aud=["svc"], nbf=0)
    assert codec.decode(codec.encode(with_nbf)) == '{"aud":["svc"],"exp":2,"iat":1,"iss":"x","nbf":0,"sub":"y"}'


def test_encode_is_deterministic():
    claims = Claims(aud=["a", "b"], exp=10, iat=5, iss="i", nbf=5, sub="s")
    assert codec.encode(claims) == codec.encode(Claims(**claims.model_dump()))


def test_encode_keeps_non_ascii_as_utf8():
    encoded = codec.encode({"sub": "用户"})
    assert json.loads(codec.decode(encoded)) == {"sub": "用户"}
    assert "\\u" not in codec.decode(encoded)


def test_encode_none_raises():
    with pytest.raises(EncodingError):
        codec.encode(None)


def test_encode_unserializable_raises():
    with pytest.raises(EncodingError):
        codec.encode({"when": object()})


def test_encode_bytes_has_no_padding():
    assert codec.encode_bytes(b"\x00") == "AA"
    with pytest.raises(EncodingError):
        codec.encode_bytes(None)


@pytest.mark.parametrize("bad", ["eyJhIjoxfQ==", "ab-_", "ab$d", "é"])
def test_decode_rejects_invalid_base64(bad):
    with pytest.raises(DecodingError):
        codec.decode(bad)


def test_decode_none_raises():
    with pytest.raises(DecodingError):
        codec.decode(None)


def test_decode_rejects_non_utf8_payload():
    with pytest.raises(DecodingError):
        codec.decode(codec.encode_bytes(b"\xff\xfe"))


def test_encode_lone_surrogate_raises_encoding_error():
    with pytest.raises(EncodingError):
        codec.encode({"sub": "\ud800"})
