import fastapi
from . import health, tokens

def include_routers(app: fastapi.FastAPI) -> fastapi.FastAPI:
    app.include_router(health.router)
    app.include_router(tokens.router)
    return app
