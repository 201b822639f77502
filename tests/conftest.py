import os
import sys
import pytest

# 确保项目根目录在 sys.path 中
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from jwts import CreateTokenParams


@pytest.fixture
def secret():
    return b"test-secret"


@pytest.fixture
def fixed_now():
    """固定的签发时间 (2023-11-14T22:13:20Z)"""
    return 1_700_000_000


@pytest.fixture
def params():
    return CreateTokenParams(aud=["svc", "billing"], iss="x", sub="y", lifetime=3600)


@pytest.fixture
def token_env(monkeypatch):
    """
    让 jwts.config 只读取测试设定的环境变量
    """
    for name in ("JWT_SECRET", "JWT_EXPIRES_SECONDS", "JWT_ISSUER", "JWT_AUDIENCE",
                 "JWT_SECRET_LENGTH", "JWTS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("JWT_SECRET", "test-secret")
    return monkeypatch
