"""
令牌路由
- 签发 HS256 Bearer Token (POST /api/v1/tokens)
- 策略校验 audience / 时间窗口 (POST /api/v1/tokens/verify)
- 签名完整性校验 (POST /api/v1/tokens/validate)
- 解码 header 与 claims，不做任何校验 (POST /api/v1/tokens/details)
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

import jwts
from jwts import config as jwt_config

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/api/v1/tokens", tags=["令牌"])


# ============================
# 模型定义
# ============================

class CreateTokenRequest(BaseModel):
    sub: str = Field(..., description="Subject")
    aud: Optional[List[str]] = Field(None, description="Audiences; defaults to JWT_AUDIENCE")
    iss: Optional[str] = Field(None, description="Issuer; defaults to JWT_ISSUER")
    lifetime: Optional[int] = Field(None, description="Validity in seconds; defaults to JWT_EXPIRES_SECONDS")
    delay: Optional[int] = Field(None, description="Seconds before the token becomes usable")


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class TokenRequest(BaseModel):
    token: str = Field(..., description="Compact token string")


class VerifyTokenRequest(TokenRequest):
    audience: Optional[str] = Field(None, description="Audience the token must carry")


class CheckResponse(BaseModel):
    valid: bool
    error: Optional[str] = None


# ============================
# 內部工具
# ============================

def _describe(exc: jwts.JWTError) -> str:
    return f"{type(exc).__name__}: {exc}"


# ============================
# 路由
# ============================

@router.post("", response_model=TokenResponse)
def create_token(req: CreateTokenRequest) -> TokenResponse:
    lifetime = req.lifetime if req.lifetime is not None else jwt_config.get_jwt_expires_seconds()
    params = jwts.CreateTokenParams(
        aud=req.aud if req.aud is not None else jwt_config.get_jwt_audience(),
        iss=req.iss if req.iss is not None else jwt_config.get_jwt_issuer(),
        sub=req.sub,
        lifetime=lifetime,
        delay=req.delay,
    )
    try:
        token = jwts.create_token(params, jwt_config.get_jwt_secret())
    except (jwts.InvalidParamsError, jwts.EncodingError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    logger.info(f"issued token for sub={req.sub} aud={params.aud} lifetime={lifetime}")
    return TokenResponse(access_token=token, expires_in=lifetime)


@router.post("/verify", response_model=CheckResponse)
def verify_token(req: VerifyTokenRequest) -> CheckResponse:
    """只校验 audience 与时间窗口，不校验签名。"""
    try:
        return CheckResponse(valid=jwts.verify_token(req.token, req.audience))
    except jwts.JWTError as e:
        logger.warning(f"verify_token: 令牌未通过策略校验, {_describe(e)}")
        return CheckResponse(valid=False, error=_describe(e))


@router.post("/validate", response_model=CheckResponse)
def validate_token(req: TokenRequest) -> CheckResponse:
    """只校验签名完整性。"""
    try:
        valid = jwts.validate_token(req.token, jwt_config.get_jwt_secret())
    except jwts.JWTError as e:
        logger.warning(f"validate_token: 令牌格式错误, {_describe(e)}")
        return CheckResponse(valid=False, error=_describe(e))
    if not valid:
        logger.warning("validate_token: 签名不匹配")
        return CheckResponse(valid=False, error="signature mismatch")
    return CheckResponse(valid=True)


@router.post("/details", response_model=jwts.TokenDetails)
def token_details(req: TokenRequest) -> jwts.TokenDetails:
    """解码令牌；返回内容在签名校验之前不可信。"""
    try:
        return jwts.parse_token_details(req.token)
    except jwts.JWTError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=_describe(e))
