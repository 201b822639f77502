"""
健康检查路由
"""
import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter
from pydantic import BaseModel

import jwts

router = APIRouter(prefix="/api/v1/health", tags=["健康检查"])

_SELF_TEST_AUDIENCE = "health"


class HealthStatus(BaseModel):
    """健康状态响应模型"""
    status: str  # "healthy" 或 "unhealthy"
    timestamp: str
    services: Dict[str, Any]
    message: str = ""


class SignerStatus(BaseModel):
    status: str  # "ok" 或 "error"
    response_time_ms: float = 0.0
    error: str = ""


def check_signer_health() -> SignerStatus:
    """签发并校验一个一次性令牌，确认签名链路可用"""
    start_time = time.time()
    params = jwts.CreateTokenParams(aud=[_SELF_TEST_AUDIENCE], iss="health", sub="health", lifetime=60)
    try:
        payload = jwts.create_token_with_random_secret(params, length=32)
        if not jwts.validate_token(payload.token, payload.secret):
            raise jwts.JWTError("self-issued token failed signature validation")
    except jwts.JWTError as e:
        return SignerStatus(
            status="error",
            response_time_ms=round((time.time() - start_time) * 1000, 2),
            error=str(e),
        )
    return SignerStatus(status="ok", response_time_ms=round((time.time() - start_time) * 1000, 2))


@router.get("/", response_model=HealthStatus)
def get_system_health():
    """获取系统整体健康状态"""
    signer_status = check_signer_health()
    overall_status = "healthy" if signer_status.status == "ok" else "unhealthy"

    return HealthStatus(
        status=overall_status,
        timestamp=datetime.now(timezone.utc).isoformat(),
        services={"signer": signer_status.model_dump()},
        message="系统运行正常" if overall_status == "healthy" else "令牌签名自检失败",
    )
