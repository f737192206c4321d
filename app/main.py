from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.deps import get_environment_name, get_market_data_cache
from app.api.routers.health import router as health_router
from app.api.routers.market_data import router as market_data_router
from app.api.routers.pairs import router as pairs_router
from app.shared.config import get_settings
from app.shared.logging_config import configure_logging


logger = logging.getLogger(__name__)

SERVERLESS_ENVIRONMENT = "serverless"


async def _http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("app: unhandled_error method=%s path=%s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error", "message": str(exc)},
    )


def create_app(*, stateless: bool = False) -> FastAPI:
    """Build the HTTP shell.

    ``stateless`` is the function-per-request deployment: no metadata cache is
    wired, so every request reads assets and pools from upstream.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(title="DEX Pairs API")
    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    application.add_exception_handler(Exception, _unhandled_exception_handler)

    application.include_router(pairs_router)
    application.include_router(market_data_router)
    application.include_router(health_router)

    if stateless:
        application.dependency_overrides[get_market_data_cache] = lambda: None
        application.dependency_overrides[get_environment_name] = lambda: SERVERLESS_ENVIRONMENT

    return application


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
