from contextlib import asynccontextmanager
import time

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from jwts import config as jwt_config
from logging_config import get_colorful_logger
from routers import include_routers

# 配置彩色日志
logger = get_colorful_logger(__name__, level=jwt_config.get_log_level())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理器"""
    snapshot = jwt_config.get_effective_config_snapshot()
    logger.info(f"令牌服务配置: {snapshot}")
    if not snapshot["jwt_secret_from_env"]:
        logger.warning("JWT_SECRET 未设置，正在使用不安全的默认密钥")
    yield
    logger.info("令牌服务已停止")


def create_app() -> FastAPI:
    app = include_routers(FastAPI(title="jwts", lifespan=lifespan))

    # 中间件：记录请求和响应信息
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        logger.info(f"Request: {request.method} {request.url.path}")
        response = await call_next(request)
        process_time = time.time() - start_time
        logger.info(f"Response: {response.status_code} (处理时间: {process_time:.3f}s)")
        return response

    app.add_middleware(BaseHTTPMiddleware, dispatch=log_requests)
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=1145, reload=True, workers=1)
