"""
FastAPI application setup and configuration.
Defines the app factory, middleware, exception handlers, and route registration.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore

from config.config import ServerConfig
from pkg.logger.logger import Logger
from internal.vex.interface import IVexUseCase
from internal.api.routes import health, vex

SERVICE_VERSION = "0.1.0"


def create_app(
    logger: Logger,
    server_config: Optional[ServerConfig] = None,
    usecase: Optional[IVexUseCase] = None,
    lifespan=None,
) -> FastAPI:
    """Build the API application.

    Args:
        logger: Logger instance
        server_config: Server settings (payload limit)
        usecase: Ready gateway; when None the lifespan must provide one
        lifespan: Optional lifespan context manager

    Returns:
        FastAPI: Configured application instance
    """
    server_config = server_config or ServerConfig()

    app = FastAPI(
        title="Vexination API",
        description="Store and serve VEX advisories",
        version=SERVICE_VERSION,
        docs_url="/swagger/index.html",
        redoc_url=None,
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.logger = logger
    app.state.vex_usecase = usecase
    app.state.max_payload_bytes = server_config.max_payload_bytes

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Tag the request with an ID and log it."""
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = datetime.now(timezone.utc)

        with logger.request_context(request_id):
            logger.info(
                f"internal.api: {request.method} {request.url.path} "
                f"from {request.client.host if request.client else 'unknown'}"
            )

            response = await call_next(request)

            duration = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000
            logger.info(f"internal.api: {response.status_code} ({duration:.1f}ms)")

        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for standardized error responses."""
        request_id = getattr(request.state, "request_id", str(uuid.uuid4()))

        logger.exception(f"internal.api: Unhandled exception in request {request_id}: {exc}")

        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": {
                    "code": "SYS_001",
                    "message": "Internal server error",
                },
                "meta": {
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                    "request_id": request_id,
                    "version": SERVICE_VERSION,
                },
            },
        )

    app.include_router(health.router, tags=["health"])
    app.include_router(vex.router, tags=["vex"])

    return app


__all__ = ["create_app", "SERVICE_VERSION"]
